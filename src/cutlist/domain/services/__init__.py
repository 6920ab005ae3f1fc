"""Domain services: quantity expansion, packers and result aggregation."""

from .aggregator import (
    build_linear_plan,
    build_sheet_plan,
    failure,
    linear_waste,
    sheet_waste,
    summarize_linear,
    summarize_sheet,
)
from .expansion import default_label, expand_cuts, expand_stock, expand_units
from .guillotine_packer import (
    GuillotinePacker,
    find_best_placement,
    score_short_side_fit,
    split_free_rectangle,
)
from .linear_packer import LinearPacker
from .optimizer import optimize, optimize_linear, optimize_sheet
from .stock_cursor import StockCursor

__all__ = [
    # Expansion
    "default_label",
    "expand_cuts",
    "expand_stock",
    "expand_units",
    # Packers
    "GuillotinePacker",
    "LinearPacker",
    "StockCursor",
    "find_best_placement",
    "score_short_side_fit",
    "split_free_rectangle",
    # Aggregation
    "build_linear_plan",
    "build_sheet_plan",
    "failure",
    "linear_waste",
    "sheet_waste",
    "summarize_linear",
    "summarize_sheet",
    # Entry points
    "optimize",
    "optimize_linear",
    "optimize_sheet",
]
