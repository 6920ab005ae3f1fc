"""CLI command implementations for the cutlist application.

This package contains subcommands for the cutlist CLI:
- validate: Validate a job file
- presets: List kerf presets
"""

from cutlist.cli.commands.presets import presets_command
from cutlist.cli.commands.validate import validate_command

__all__ = ["presets_command", "validate_command"]
