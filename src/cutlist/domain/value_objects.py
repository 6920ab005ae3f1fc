"""Value objects for the cut-list domain.

Cut requests and stock offerings are immutable inputs handed to the
optimizer. Dimensions are modelled as a tagged variant: linear entries
carry only a length, sheet entries carry a length and a width. This keeps
"width missing in sheet mode" and "rotated in linear mode" out of the
representable states instead of relying on nullable fields.

All dataclasses are frozen (immutable) to ensure thread safety and
hashability.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class OptimizationMode(str, Enum):
    """Optimization mode selected by the caller.

    Attributes:
        LINEAR: 1D optimization over length only (boards, bars, trim).
        SHEET: 2D optimization over length x width (plywood, panels).
    """

    LINEAR = "linear"
    SHEET = "sheet"


@dataclass(frozen=True)
class LinearDimensions:
    """Length-only dimensions used in linear mode.

    Attributes:
        length: Length in inches.
    """

    length: float

    def __post_init__(self) -> None:
        if not math.isfinite(self.length):
            raise ValueError("Length must be finite")
        if self.length <= 0:
            raise ValueError("Length must be positive")

    @property
    def width(self) -> None:
        """Linear dimensions have no width."""
        return None


@dataclass(frozen=True)
class SheetDimensions:
    """Length x width dimensions used in sheet mode.

    Attributes:
        length: Length in inches (x axis on a sheet).
        width: Width in inches (y axis on a sheet).
    """

    length: float
    width: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.length) and math.isfinite(self.width)):
            raise ValueError("Dimensions must be finite")
        if self.length <= 0:
            raise ValueError("Length must be positive")
        if self.width <= 0:
            raise ValueError("Width must be positive")

    @property
    def area(self) -> float:
        """Area in square inches."""
        return self.length * self.width


Dimensions = LinearDimensions | SheetDimensions


@dataclass(frozen=True)
class CutRequest:
    """A piece the user needs to cut.

    Attributes:
        id: Caller-assigned identity, reported back in unplaced lists.
        dimensions: Required length (and width in sheet mode).
        quantity: Number of identical pieces required.
        label: Optional display label.
        grain_matters: True if the piece must not be rotated (sheet mode only).
    """

    id: str
    dimensions: Dimensions
    quantity: int = 1
    label: str = ""
    grain_matters: bool = False

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("Quantity must be non-negative")

    @property
    def length(self) -> float:
        return self.dimensions.length

    @property
    def width(self) -> float | None:
        return self.dimensions.width


@dataclass(frozen=True)
class StockOffering:
    """Raw material available to cut from.

    Attributes:
        id: Caller-assigned identity.
        dimensions: Available length (and width in sheet mode).
        quantity: Number of identical stock pieces on hand.
        label: Optional display label.
    """

    id: str
    dimensions: Dimensions
    quantity: int = 1
    label: str = ""

    def __post_init__(self) -> None:
        if self.quantity < 0:
            raise ValueError("Quantity must be non-negative")

    @property
    def length(self) -> float:
        return self.dimensions.length

    @property
    def width(self) -> float | None:
        return self.dimensions.width


@dataclass(frozen=True)
class ExpandedUnit:
    """One physical piece produced by expanding an entry's quantity.

    Attributes:
        unit_id: Unique per-unit identifier ("<original_id>-<index>").
        original_id: Identity of the CutRequest or StockOffering it came from.
        label: Display label (entry label or a generated default).
        dimensions: Same dimensions as the originating entry.
        grain_matters: Grain constraint copied from a cut request.
    """

    unit_id: str
    original_id: str
    label: str
    dimensions: Dimensions
    grain_matters: bool = False

    @property
    def length(self) -> float:
        return self.dimensions.length

    @property
    def width(self) -> float | None:
        return self.dimensions.width


@dataclass(frozen=True)
class FreeRectangle:
    """Unused axis-aligned space on a sheet during guillotine packing.

    x and width run along the stock length; y and height run along the
    stock width.

    Attributes:
        x: Left edge position in inches.
        y: Bottom edge position in inches.
        width: Extent along the stock length in inches.
        height: Extent along the stock width in inches.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class KerfPreset:
    """Common saw blade kerf width.

    Attributes:
        name: Short key used in job files and on the command line.
        label: Human-readable description.
        value: Kerf width in inches.
    """

    name: str
    label: str
    value: float


KERF_PRESETS: tuple[KerfPreset, ...] = (
    KerfPreset(name="standard", label='Standard (1/8")', value=0.125),
    KerfPreset(name="thin", label='Thin Kerf (3/32")', value=0.09375),
    KerfPreset(name="thick", label='Thick Blade (5/32")', value=0.15625),
    KerfPreset(name="none", label="No Kerf", value=0.0),
)

DEFAULT_KERF: float = 0.125


def get_kerf_preset(name: str) -> KerfPreset:
    """Look up a kerf preset by name.

    Raises:
        KeyError: If no preset has the given name.
    """
    for preset in KERF_PRESETS:
        if preset.name == name:
            return preset
    raise KeyError(f"Unknown kerf preset: {name}")
