"""Waste accounting and summary assembly for optimizer results.

Both packers hand their finished working state to these functions, which
compute per-plan waste and the run summary and freeze everything into the
shared result shape. Nothing here mutates packer state.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from ..results import (
    OptimizationResult,
    OptimizationSummary,
    PlacedCut,
    StockPlan,
)
from ..value_objects import ExpandedUnit, OptimizationMode

INCHES_PER_FOOT = 12.0


def linear_waste(
    stock_length: float,
    placed_lengths: Sequence[float],
    kerf: float,
) -> float:
    """Linear inches left over on one stock piece.

    Kerf is charged between cuts, i.e. (count - 1) times.
    """
    if not placed_lengths:
        return stock_length
    used = sum(placed_lengths) + (len(placed_lengths) - 1) * kerf
    return stock_length - used


def sheet_waste(
    stock_length: float,
    stock_width: float,
    placed: Sequence[PlacedCut],
    kerf: float,
) -> float:
    """Square inches left over on one sheet, clamped at zero.

    Kerf loss is a conservative estimate: each cut loses one kerf strip
    along its length and one along its width. It is not an exact geometric
    subtraction, so the result is approximate.
    """
    stock_area = stock_length * stock_width
    cut_area = sum(c.length * (c.width or 0.0) for c in placed)
    kerf_loss = sum(c.length * kerf + (c.width or 0.0) * kerf for c in placed)
    return max(0.0, stock_area - cut_area - kerf_loss)


def dedupe_ids(ids: Iterable[str]) -> tuple[str, ...]:
    """Drop repeated ids, keeping first-seen order."""
    return tuple(dict.fromkeys(ids))


def build_linear_plan(
    stock: ExpandedUnit,
    cuts: Sequence[PlacedCut],
    kerf: float,
) -> StockPlan:
    """Freeze a linear working plan and attach its waste."""
    return StockPlan(
        stock_id=stock.unit_id,
        stock_label=stock.label,
        original_stock_id=stock.original_id,
        dimensions=stock.dimensions,
        cuts=tuple(cuts),
        waste_length=linear_waste(stock.length, [c.length for c in cuts], kerf),
        waste_area=None,
    )


def build_sheet_plan(
    stock: ExpandedUnit,
    cuts: Sequence[PlacedCut],
    kerf: float,
) -> StockPlan:
    """Freeze a sheet working plan and attach its waste area."""
    return StockPlan(
        stock_id=stock.unit_id,
        stock_label=stock.label,
        original_stock_id=stock.original_id,
        dimensions=stock.dimensions,
        cuts=tuple(cuts),
        waste_length=0.0,
        waste_area=sheet_waste(stock.length, stock.width or 0.0, cuts, kerf),
    )


def summarize_linear(
    plans: Sequence[StockPlan],
    total_cuts: int,
    unplaced: Sequence[str],
    stock_units: Sequence[ExpandedUnit],
) -> OptimizationSummary:
    """Build the linear-mode summary.

    Waste percentage is relative to the length of stock actually used.
    """
    total_waste = sum(plan.waste_length for plan in plans)
    total_used_length = sum(plan.stock_length for plan in plans)
    waste_percentage = (
        total_waste / total_used_length * 100 if total_used_length > 0 else 0.0
    )
    total_available = sum(unit.length for unit in stock_units)

    return OptimizationSummary(
        total_cuts=total_cuts,
        total_stock_used=len(plans),
        total_waste=total_waste,
        waste_percentage=waste_percentage,
        unplaced_cuts=dedupe_ids(unplaced),
        total_linear_feet_used=total_used_length / INCHES_PER_FOOT,
        total_linear_feet_available=total_available / INCHES_PER_FOOT,
    )


def summarize_sheet(
    plans: Sequence[StockPlan],
    total_cuts: int,
    unplaced: Sequence[str],
) -> OptimizationSummary:
    """Build the sheet-mode summary.

    Linear-feet fields do not apply to sheet goods and are reported as 0.
    """
    total_stock_area = sum(
        plan.stock_length * (plan.stock_width or 0.0) for plan in plans
    )
    total_waste = sum(plan.waste_area or 0.0 for plan in plans)
    waste_percentage = (
        total_waste / total_stock_area * 100 if total_stock_area > 0 else 0.0
    )

    return OptimizationSummary(
        total_cuts=total_cuts,
        total_stock_used=len(plans),
        total_waste=total_waste,
        waste_percentage=waste_percentage,
        unplaced_cuts=dedupe_ids(unplaced),
        total_linear_feet_used=0.0,
        total_linear_feet_available=0.0,
    )


def success(
    mode: OptimizationMode,
    plans: Sequence[StockPlan],
    summary: OptimizationSummary,
) -> OptimizationResult:
    return OptimizationResult(
        success=True,
        mode=mode,
        plans=tuple(plans),
        summary=summary,
    )


def failure(
    mode: OptimizationMode,
    error: str,
    total_cuts: int = 0,
    unplaced: Sequence[str] = (),
) -> OptimizationResult:
    """Build a hard-failure result with no plans."""
    return OptimizationResult(
        success=False,
        mode=mode,
        plans=(),
        summary=OptimizationSummary(
            total_cuts=total_cuts,
            unplaced_cuts=dedupe_ids(unplaced),
        ),
        error=error,
    )
