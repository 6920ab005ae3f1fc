"""Typer CLI for cut-list optimization."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from cutlist.application import OptimizeCutListCommand
from cutlist.application.config import (
    MAX_KERF,
    ConfigError,
    config_to_job,
    load_config,
)
from cutlist.cli.commands import presets_command, validate_command
from cutlist.cli.commands.output import display_load_error
from cutlist.domain import OptimizationMode, OptimizationResult, parse_fractional_inches
from cutlist.infrastructure import (
    CutDiagramRenderer,
    JsonExporter,
    PlanReportFormatter,
)

OUTPUT_FORMATS = ("text", "json", "diagram", "svg")

app = typer.Typer(
    name="cutlist",
    help="Optimize cut lists for lumber and sheet goods.",
)

app.command(name="validate")(validate_command)
app.command(name="presets")(presets_command)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _parse_kerf_option(value: str) -> float:
    kerf = parse_fractional_inches(value)
    if kerf is None or not 0 <= kerf <= MAX_KERF:
        typer.echo(
            f"Error: Invalid kerf: {value!r} (expected 0 to {MAX_KERF} inches)",
            err=True,
        )
        raise typer.Exit(code=1)
    return kerf


def _write_svgs(result: OptimizationResult, output_file: Path | None) -> None:
    """Write one SVG per sheet, or print them when no output file is given."""
    svgs = CutDiagramRenderer().render_all_svg(result)
    if output_file is None:
        for svg in svgs:
            typer.echo(svg)
        return

    stem = output_file.with_suffix("")
    for index, svg in enumerate(svgs, start=1):
        path = Path(f"{stem}-{index}.svg")
        path.write_text(svg, encoding="utf-8")
        typer.echo(f"Wrote {path}")


@app.command()
def optimize(
    job_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file"),
    ],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, json, diagram, svg"),
    ] = "text",
    kerf: Annotated[
        str | None,
        typer.Option("--kerf", "-k", help="Override the job's kerf (e.g. 0.125 or 1/8)"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write output to a file instead of stdout"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Optimize a cut list from a JSON job file.

    Exit codes:
        0 - Optimization succeeded (some cuts may still be unplaced)
        1 - The job file is invalid or optimization failed

    Example:
        cutlist optimize shelves.json --format diagram
    """
    _configure_logging(verbose)

    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: Unknown format '{output_format}'. "
            f"Choose one of: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        config = load_config(job_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    job = config_to_job(config)
    if kerf is not None:
        job = job.with_kerf(_parse_kerf_option(kerf))

    if output_format == "svg" and job.mode != OptimizationMode.SHEET:
        typer.echo("Error: SVG output requires a sheet-mode job", err=True)
        raise typer.Exit(code=1)

    result = OptimizeCutListCommand().execute(job)

    if not result.success:
        if output_format == "json":
            typer.echo(JsonExporter().export(result))
        typer.echo(f"Error: {result.error}", err=True)
        raise typer.Exit(code=1)

    if output_format == "svg":
        _write_svgs(result, output_file)
        return

    if output_format == "json":
        content = JsonExporter().export(result)
    elif output_format == "diagram":
        content = CutDiagramRenderer().render_all_ascii(result)
    else:
        content = PlanReportFormatter().format(result)

    if output_file is not None:
        output_file.write_text(content + "\n", encoding="utf-8")
        typer.echo(f"Wrote {output_file}")
    else:
        typer.echo(content)


if __name__ == "__main__":
    app()
