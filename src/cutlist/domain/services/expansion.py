"""Quantity expansion of cut requests and stock offerings.

Each entry with quantity N becomes N individually addressable units so the
packers can place every physical piece on its own while still reporting
back against the originating entry.
"""

from __future__ import annotations

from typing import Sequence

from ..dimensions import format_number
from ..value_objects import (
    CutRequest,
    Dimensions,
    ExpandedUnit,
    LinearDimensions,
    OptimizationMode,
    SheetDimensions,
    StockOffering,
)


def default_label(prefix: str, dimensions: Dimensions) -> str:
    """Build the fallback label for an unlabelled entry.

    Examples: 'Cut 40"', 'Cut 24"x12"', 'Sheet 96"x48"'.
    """
    if isinstance(dimensions, SheetDimensions):
        return (
            f'{prefix} {format_number(dimensions.length)}"'
            f'x{format_number(dimensions.width)}"'
        )
    return f'{prefix} {format_number(dimensions.length)}"'


def _mode_dimensions(dimensions: Dimensions, mode: OptimizationMode) -> Dimensions:
    # Linear mode only looks at length, whatever the caller supplied.
    if mode == OptimizationMode.LINEAR and isinstance(dimensions, SheetDimensions):
        return LinearDimensions(length=dimensions.length)
    return dimensions


def expand_units(
    entries: Sequence[CutRequest | StockOffering],
    prefix: str,
    mode: OptimizationMode,
) -> list[ExpandedUnit]:
    """Expand entries into one unit per physical piece.

    Units keep input order and the units of one entry are consecutive.
    An entry with quantity 0 contributes no units.

    Args:
        entries: Cut requests or stock offerings.
        prefix: Default label prefix ("Cut", "Stock" or "Sheet").
        mode: Optimization mode; linear mode reduces units to their length.

    Returns:
        Flat list of expanded units.
    """
    units: list[ExpandedUnit] = []
    for entry in entries:
        dimensions = _mode_dimensions(entry.dimensions, mode)
        label = entry.label or default_label(prefix, dimensions)
        grain_matters = isinstance(entry, CutRequest) and entry.grain_matters
        for index in range(entry.quantity):
            units.append(
                ExpandedUnit(
                    unit_id=f"{entry.id}-{index}",
                    original_id=entry.id,
                    label=label,
                    dimensions=dimensions,
                    grain_matters=grain_matters,
                )
            )
    return units


def expand_cuts(
    cuts: Sequence[CutRequest],
    mode: OptimizationMode,
) -> list[ExpandedUnit]:
    """Expand cut requests into unit cuts."""
    return expand_units(cuts, "Cut", mode)


def expand_stock(
    stock: Sequence[StockOffering],
    mode: OptimizationMode,
) -> list[ExpandedUnit]:
    """Expand stock offerings into unit stock pieces."""
    prefix = "Sheet" if mode == OptimizationMode.SHEET else "Stock"
    return expand_units(stock, prefix, mode)
