"""Shared console output helpers for CLI commands."""

import typer

from cutlist.application.config import ConfigError


def display_load_error(error: ConfigError) -> None:
    """Print a job loading error to stderr.

    Args:
        error: The ConfigError to display.
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            typer.echo(f"    Line {line}, column {column}: {detail.get('message')}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            typer.echo(f"  {detail['path']}: {detail['message']}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)
