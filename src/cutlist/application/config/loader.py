"""Job file loader with error reporting.

Reads a JSON job file, validates it against ``CutListJobConfig`` and turns
file system, JSON syntax and schema problems into a single ``ConfigError``
type that carries enough detail for the CLI to explain what went wrong.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from cutlist.application.config.schema import CutListJobConfig


class ConfigError(Exception):
    """Raised when a job file cannot be read or validated.

    Attributes:
        message: Human-readable summary.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse or validation.
        path: Job file path, when loading from a file.
        details: Per-problem details (location and message).
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_location(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as a dotted path.

    Examples:
        >>> _format_location(("cuts", 0, "length"))
        'cuts[0].length'
        >>> _format_location(())
        '(job)'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int) and parts:
            parts[-1] = f"{parts[-1]}[{segment}]"
        else:
            parts.append(str(segment))
    return ".".join(parts) or "(job)"


def _validation_details(error: PydanticValidationError) -> list[dict[str, Any]]:
    return [
        {
            "path": _format_location(err["loc"]),
            "message": err["msg"],
            "value": err.get("input"),
            "error_type": err["type"],
        }
        for err in error.errors()
    ]


def _validation_message(details: list[dict[str, Any]]) -> str:
    lines = ["Job validation failed:"]
    for detail in details:
        lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def _validate(data: Any, path: Path | None = None) -> CutListJobConfig:
    try:
        return CutListJobConfig.model_validate(data)
    except PydanticValidationError as e:
        details = _validation_details(e)
        raise ConfigError(
            message=_validation_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_config(path: Path) -> CutListJobConfig:
    """Load and validate a job file.

    Args:
        path: Path to the JSON job file.

    Returns:
        The validated job configuration.

    Raises:
        ConfigError: If the file is missing, unreadable, not valid JSON,
            or does not match the schema.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Job file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError as e:
        raise ConfigError(
            message=f"Permission denied reading job file: {path}",
            error_type="permission_denied",
            path=path,
        ) from e
    except OSError as e:
        raise ConfigError(
            message=f"Error reading job file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        ) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Invalid JSON in job file: {path} "
                f"(line {e.lineno}, column {e.colno}): {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> CutListJobConfig:
    """Validate a job supplied as a dictionary (e.g. from another service).

    Raises:
        ConfigError: If the data does not match the schema.
    """
    return _validate(data)
