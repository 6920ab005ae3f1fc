"""Guillotine bin packing of rectangular cuts onto sheet stock.

Each open sheet keeps a list of free rectangles. A cut is placed in the
free rectangle where it leaves the smallest short-side leftover (Best Short
Side Fit), and the used rectangle is split in two along the axis with less
leftover (Shorter Axis Split). Every split runs edge to edge, so the
resulting layouts can be cut on a panel saw or table saw.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Sequence

from ..dimensions import format_number
from ..results import OptimizationResult, PlacedCut
from ..value_objects import (
    CutRequest,
    ExpandedUnit,
    FreeRectangle,
    OptimizationMode,
    SheetDimensions,
    StockOffering,
)
from .aggregator import build_sheet_plan, failure, success, summarize_sheet
from .expansion import expand_cuts, expand_stock
from .stock_cursor import StockCursor

logger = logging.getLogger(__name__)

MODE = OptimizationMode.SHEET


def score_short_side_fit(
    free_width: float,
    free_height: float,
    item_width: float,
    item_height: float,
) -> float:
    """Smaller of the two leftovers after placing an item in a free rectangle."""
    return min(free_width - item_width, free_height - item_height)


def split_free_rectangle(
    rect: FreeRectangle,
    placed_width: float,
    placed_height: float,
    kerf: float,
) -> list[FreeRectangle]:
    """Split a free rectangle after placing an item at its origin.

    The item plus one kerf strip is removed from the rectangle's corner.
    The remaining L-shape is divided along the axis with less leftover:

    - width leftover smaller: a full-width rectangle above the item and a
      narrow rectangle to its right, as tall as the item.
    - otherwise: a full-height rectangle to the right of the item and a
      rectangle above it, as wide as the item.

    Rectangles with no positive area are dropped.

    Args:
        rect: The free rectangle the item was placed in.
        placed_width: Item extent along x as placed.
        placed_height: Item extent along y as placed.
        kerf: Saw blade kerf width.

    Returns:
        Zero, one or two new free rectangles, in insertion order.
    """
    used_width = placed_width + kerf
    used_height = placed_height + kerf

    leftover_width = rect.width - used_width
    leftover_height = rect.height - used_height

    new_rects: list[FreeRectangle] = []

    if leftover_width < leftover_height:
        if leftover_height > 0:
            new_rects.append(
                FreeRectangle(
                    x=rect.x,
                    y=rect.y + used_height,
                    width=rect.width,
                    height=leftover_height,
                )
            )
        if leftover_width > 0:
            new_rects.append(
                FreeRectangle(
                    x=rect.x + used_width,
                    y=rect.y,
                    width=leftover_width,
                    height=placed_height,
                )
            )
    else:
        if leftover_width > 0:
            new_rects.append(
                FreeRectangle(
                    x=rect.x + used_width,
                    y=rect.y,
                    width=leftover_width,
                    height=rect.height,
                )
            )
        if leftover_height > 0:
            new_rects.append(
                FreeRectangle(
                    x=rect.x,
                    y=rect.y + used_height,
                    width=placed_width,
                    height=leftover_height,
                )
            )

    return new_rects


@dataclass(frozen=True)
class _Placement:
    """Best placement found for a cut within one sheet's free rectangles."""

    index: int
    rect: FreeRectangle
    rotated: bool
    placed_width: float
    placed_height: float
    score: float


def find_best_placement(
    cut: ExpandedUnit,
    free_rectangles: Sequence[FreeRectangle],
) -> _Placement | None:
    """Choose the free rectangle and orientation with the best BSSF score.

    The upright orientation puts the cut's length along x. The rotated
    orientation is only considered when the cut's grain does not matter.
    Ties keep the earlier rectangle, and upright wins over rotated within
    one rectangle.

    Returns:
        The best placement, or None if the cut fits nowhere.
    """
    length = cut.length
    width = cut.width or 0.0

    best: _Placement | None = None
    best_score = math.inf

    for index, rect in enumerate(free_rectangles):
        if length <= rect.width and width <= rect.height:
            score = score_short_side_fit(rect.width, rect.height, length, width)
            if score < best_score:
                best_score = score
                best = _Placement(index, rect, False, length, width, score)

        if not cut.grain_matters and width <= rect.width and length <= rect.height:
            score = score_short_side_fit(rect.width, rect.height, width, length)
            if score < best_score:
                best_score = score
                best = _Placement(index, rect, True, width, length, score)

    return best


@dataclass
class _SheetPlanState:
    """Working state for one sheet while packing.

    Attributes:
        stock: The sheet unit backing this plan.
        free_rectangles: Unused space, owned by this plan alone.
        cuts: Cuts placed so far, in placement order.
    """

    stock: ExpandedUnit
    free_rectangles: list[FreeRectangle] = field(default_factory=list)
    cuts: list[PlacedCut] = field(default_factory=list)

    @classmethod
    def fresh(cls, stock: ExpandedUnit) -> _SheetPlanState:
        """Create a plan whose only free rectangle is the whole sheet."""
        return cls(
            stock=stock,
            free_rectangles=[
                FreeRectangle(x=0.0, y=0.0, width=stock.length, height=stock.width or 0.0)
            ],
        )

    def try_place(self, cut: ExpandedUnit, kerf: float) -> bool:
        """Place a cut on this sheet if any free rectangle admits it."""
        placement = find_best_placement(cut, self.free_rectangles)
        if placement is None:
            return False

        self.cuts.append(
            PlacedCut(
                cut_id=cut.unit_id,
                cut_label=cut.label,
                original_id=cut.original_id,
                dimensions=SheetDimensions(
                    length=placement.placed_width,
                    width=placement.placed_height,
                ),
                x=placement.rect.x,
                y=placement.rect.y,
                rotated=placement.rotated,
            )
        )

        del self.free_rectangles[placement.index]
        self.free_rectangles.extend(
            split_free_rectangle(
                placement.rect,
                placement.placed_width,
                placement.placed_height,
                kerf,
            )
        )

        if placement.rotated:
            logger.debug(
                "Cut %s placed rotated at (%s, %s) on %s",
                cut.unit_id,
                placement.rect.x,
                placement.rect.y,
                self.stock.unit_id,
            )
        return True


class GuillotinePacker:
    """Guillotine bin packer using Best Short Side Fit and Shorter Axis Split.

    Cuts are sorted by area (largest first). Each cut is tried against the
    open sheets in the order they were opened; a new sheet is opened only
    when none of them admits it.

    Attributes:
        kerf: Saw blade kerf width in inches.
    """

    def __init__(self, kerf: float) -> None:
        self.kerf = kerf

    def pack(
        self,
        cuts: Sequence[CutRequest],
        stock: Sequence[StockOffering],
    ) -> OptimizationResult:
        """Place rectangular cuts onto sheets.

        Args:
            cuts: Required cuts; each must carry SheetDimensions.
            stock: Available sheets; each must carry SheetDimensions.

        Returns:
            OptimizationResult with placements, per-sheet waste area and
            summary. Hard failures have success False.
        """
        if not cuts:
            return failure(MODE, "No cuts provided")
        if not stock:
            return failure(MODE, "No stock provided")
        if not math.isfinite(self.kerf):
            return failure(MODE, "Kerf must be a finite number")
        if self.kerf < 0:
            return failure(MODE, "Kerf must be non-negative")

        for cut in cuts:
            if not isinstance(cut.dimensions, SheetDimensions):
                return failure(MODE, f'Cut "{cut.id}" requires a width in sheet mode')
        for item in stock:
            if not isinstance(item.dimensions, SheetDimensions):
                return failure(MODE, f'Stock "{item.id}" requires a width in sheet mode')

        cut_units = expand_cuts(cuts, MODE)

        infeasible = self._check_largest_fits(cuts, stock)
        if infeasible is not None:
            return failure(
                MODE,
                infeasible,
                total_cuts=len(cut_units),
                unplaced=[c.id for c in cuts],
            )

        stock_units = expand_stock(stock, MODE)
        sorted_cuts = sorted(cut_units, key=_unit_area, reverse=True)
        sorted_stock = sorted(stock_units, key=_unit_area, reverse=True)

        logger.debug(
            "Packing %d cuts onto up to %d sheets (kerf %s)",
            len(sorted_cuts),
            len(sorted_stock),
            self.kerf,
        )

        cursor = StockCursor(sorted_stock)
        plans: list[_SheetPlanState] = []
        unplaced: list[str] = []

        for cut in sorted_cuts:
            if self._place_in_open_plan(cut, plans):
                continue

            candidate = cursor.peek()
            if candidate is not None:
                plan = _SheetPlanState.fresh(candidate)
                if plan.try_place(cut, self.kerf):
                    cursor.advance()
                    plans.append(plan)
                    logger.debug(
                        "Opened sheet %s (%sx%s) for cut %s",
                        candidate.unit_id,
                        candidate.length,
                        candidate.width,
                        cut.unit_id,
                    )
                    continue

            logger.debug(
                "Cut %s (%sx%s) could not be placed",
                cut.unit_id,
                cut.length,
                cut.width,
            )
            unplaced.append(cut.original_id)

        stock_plans = [
            build_sheet_plan(plan.stock, plan.cuts, self.kerf) for plan in plans
        ]
        summary = summarize_sheet(
            stock_plans,
            total_cuts=len(cut_units),
            unplaced=unplaced,
        )

        logger.info(
            "Sheet optimization: %d cuts on %d sheets, %.1f%% waste",
            len(cut_units),
            summary.total_stock_used,
            summary.waste_percentage,
        )

        return success(MODE, stock_plans, summary)

    def _place_in_open_plan(
        self,
        cut: ExpandedUnit,
        plans: list[_SheetPlanState],
    ) -> bool:
        """Place a cut on the first open sheet that admits it."""
        for plan in plans:
            if plan.try_place(cut, self.kerf):
                return True
        return False

    def _check_largest_fits(
        self,
        cuts: Sequence[CutRequest],
        stock: Sequence[StockOffering],
    ) -> str | None:
        """Conservative precheck of the largest cut against the largest sheet.

        Uses the component-wise maxima of cut and stock dimensions and
        accepts either orientation.

        Returns:
            An error message if the largest cut cannot fit, else None.
        """
        max_cut_length = max(c.length for c in cuts)
        max_cut_width = max(c.width or 0.0 for c in cuts)
        max_stock_length = max(s.length for s in stock)
        max_stock_width = max(s.width or 0.0 for s in stock)

        fits_upright = (
            max_cut_length <= max_stock_length and max_cut_width <= max_stock_width
        )
        fits_rotated = (
            max_cut_width <= max_stock_length and max_cut_length <= max_stock_width
        )
        if fits_upright or fits_rotated:
            return None

        return (
            f'Largest cut ({format_number(max_cut_length)}"x'
            f'{format_number(max_cut_width)}") exceeds largest stock '
            f'({format_number(max_stock_length)}"x{format_number(max_stock_width)}")'
        )


def _unit_area(unit: ExpandedUnit) -> float:
    return unit.length * (unit.width or 0.0)
