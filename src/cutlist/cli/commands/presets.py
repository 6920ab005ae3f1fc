"""Presets command listing common kerf widths."""

import typer

from cutlist.domain import KERF_PRESETS


def presets_command() -> None:
    """List the kerf presets accepted by job files (kerf_preset)."""
    typer.echo(f"{'Name':<10} {'Kerf (in)':<10} Description")
    for preset in KERF_PRESETS:
        typer.echo(f"{preset.name:<10} {preset.value:<10} {preset.label}")
