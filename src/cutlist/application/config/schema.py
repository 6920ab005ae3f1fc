"""Pydantic schema for cut-list job files.

A job file describes one optimization run: the mode, the kerf, the cuts
required and the stock on hand. Dimensions may be given as numbers or as
fractional-inch strings ("3/4", "1-1/2").

Example:
    {
        "schema_version": "1.0",
        "mode": "sheet",
        "kerf_preset": "standard",
        "cuts": [{"id": "side", "length": "30", "width": "23-1/4", "quantity": 2}],
        "stock": [{"length": 96, "width": 48, "quantity": 2, "label": "3/4 ply"}]
    }
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from cutlist.domain import (
    DEFAULT_KERF,
    KERF_PRESETS,
    OptimizationMode,
    get_kerf_preset,
    parse_fractional_inches,
)

# Version 1.0: Initial job format (linear and sheet modes, kerf presets)
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

# Upper bounds keep worst-case packing time reasonable
MAX_ENTRIES = 1000
MAX_UNITS_PER_ENTRY = 10_000

# Widest blade a job may specify, in inches
MAX_KERF = 0.5


def _parse_inches(value: Any) -> Any:
    """Convert fractional-inch strings to floats; pass other values through."""
    if isinstance(value, str):
        parsed = parse_fractional_inches(value)
        if parsed is None:
            raise ValueError(f"Invalid dimension: {value!r}")
        return parsed
    return value


class _EntryConfig(BaseModel):
    """Fields shared by cut and stock entries."""

    model_config = ConfigDict(extra="forbid")

    id: str | None = Field(default=None, min_length=1)
    length: float = Field(..., gt=0, allow_inf_nan=False)
    width: float | None = Field(default=None, gt=0, allow_inf_nan=False)
    quantity: int = Field(default=1, ge=1, le=MAX_UNITS_PER_ENTRY)
    label: str = ""

    @field_validator("length", "width", mode="before")
    @classmethod
    def parse_dimension(cls, v: Any) -> Any:
        return _parse_inches(v)


class CutConfig(_EntryConfig):
    """A required cut.

    Attributes:
        grain_matters: Forbid rotation in sheet mode (ignored in linear mode).
    """

    grain_matters: bool = False


class StockConfig(_EntryConfig):
    """A stock offering."""


class CutListJobConfig(BaseModel):
    """Root configuration for one optimization job.

    Attributes:
        schema_version: Job file format version.
        mode: "linear" (1D) or "sheet" (2D).
        kerf: Saw kerf in inches; mutually exclusive with kerf_preset.
        kerf_preset: Named kerf preset ("standard", "thin", "thick", "none").
        cuts: Required cuts.
        stock: Available stock.
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    mode: OptimizationMode
    kerf: float | None = Field(default=None, ge=0, le=MAX_KERF, allow_inf_nan=False)
    kerf_preset: str | None = None
    cuts: list[CutConfig] = Field(default_factory=list, max_length=MAX_ENTRIES)
    stock: list[StockConfig] = Field(default_factory=list, max_length=MAX_ENTRIES)

    @field_validator("schema_version")
    @classmethod
    def validate_schema_version(cls, v: str) -> str:
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version '{v}'. Supported: {supported}"
            )
        return v

    @field_validator("kerf", mode="before")
    @classmethod
    def parse_kerf(cls, v: Any) -> Any:
        return _parse_inches(v)

    @field_validator("kerf_preset")
    @classmethod
    def validate_kerf_preset(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            get_kerf_preset(v)
        except KeyError:
            names = ", ".join(p.name for p in KERF_PRESETS)
            raise ValueError(f"Unknown kerf preset '{v}'. Choose one of: {names}")
        return v

    @model_validator(mode="after")
    def validate_kerf_choice(self) -> CutListJobConfig:
        if self.kerf is not None and self.kerf_preset is not None:
            raise ValueError("Specify either 'kerf' or 'kerf_preset', not both")
        return self

    @model_validator(mode="after")
    def validate_sheet_widths(self) -> CutListJobConfig:
        if self.mode != OptimizationMode.SHEET:
            return self
        missing = [
            f"{group}[{index}]"
            for group, entries in (("cuts", self.cuts), ("stock", self.stock))
            for index, entry in enumerate(entries)
            if entry.width is None
        ]
        if missing:
            raise ValueError(
                f"Width is required in sheet mode: {', '.join(missing)}"
            )
        return self

    @property
    def effective_kerf(self) -> float:
        """Kerf to use: explicit value, else preset, else the default."""
        if self.kerf is not None:
            return self.kerf
        if self.kerf_preset is not None:
            return get_kerf_preset(self.kerf_preset).value
        return DEFAULT_KERF
