"""Cut-list optimizer for lumber and sheet goods.

Assigns required cuts to available stock while minimizing waste, in linear
(1D, length only) or sheet (2D, length x width) mode.
"""

from cutlist.domain import (
    CutRequest,
    LinearDimensions,
    OptimizationMode,
    OptimizationResult,
    SheetDimensions,
    StockOffering,
    optimize,
    optimize_linear,
    optimize_sheet,
)

__version__ = "0.1.0"

__all__ = [
    "CutRequest",
    "LinearDimensions",
    "OptimizationMode",
    "OptimizationResult",
    "SheetDimensions",
    "StockOffering",
    "optimize",
    "optimize_linear",
    "optimize_sheet",
]
