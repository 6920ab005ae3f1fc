"""Validate command for checking job files.

Loads a JSON job file and reports schema errors without running the
optimizer.
"""

from pathlib import Path
from typing import Annotated

import typer

from cutlist.application.config import ConfigError, config_to_job, load_config
from cutlist.cli.commands.output import display_load_error


def validate_command(
    job_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON job file to validate"),
    ],
) -> None:
    """Validate a cut-list job file.

    Exit codes:
        0 - Job file is valid
        1 - Job file has errors

    Example:
        cutlist validate shelves.json
    """
    typer.echo(f"Validating {job_file}...")

    try:
        config = load_config(job_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    job = config_to_job(config)
    cut_units = sum(c.quantity for c in job.cuts)
    stock_units = sum(s.quantity for s in job.stock)

    typer.echo("Job file is valid.")
    typer.echo(f"  Mode: {job.mode.value}")
    typer.echo(f"  Kerf: {job.kerf}")
    typer.echo(f"  Cuts: {len(job.cuts)} entries ({cut_units} pieces)")
    typer.echo(f"  Stock: {len(job.stock)} entries ({stock_units} pieces)")
