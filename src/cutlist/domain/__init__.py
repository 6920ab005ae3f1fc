"""Domain layer - cut-list value objects, results and optimizer services."""

from .dimensions import format_dimension, format_number, parse_fractional_inches
from .results import OptimizationResult, OptimizationSummary, PlacedCut, StockPlan
from .services import (
    GuillotinePacker,
    LinearPacker,
    optimize,
    optimize_linear,
    optimize_sheet,
)
from .value_objects import (
    DEFAULT_KERF,
    KERF_PRESETS,
    CutRequest,
    Dimensions,
    ExpandedUnit,
    FreeRectangle,
    KerfPreset,
    LinearDimensions,
    OptimizationMode,
    SheetDimensions,
    StockOffering,
    get_kerf_preset,
)

__all__ = [
    # Value objects
    "CutRequest",
    "Dimensions",
    "ExpandedUnit",
    "FreeRectangle",
    "KerfPreset",
    "LinearDimensions",
    "OptimizationMode",
    "SheetDimensions",
    "StockOffering",
    "DEFAULT_KERF",
    "KERF_PRESETS",
    "get_kerf_preset",
    # Results
    "OptimizationResult",
    "OptimizationSummary",
    "PlacedCut",
    "StockPlan",
    # Services
    "GuillotinePacker",
    "LinearPacker",
    "optimize",
    "optimize_linear",
    "optimize_sheet",
    # Dimension helpers
    "format_dimension",
    "format_number",
    "parse_fractional_inches",
]
