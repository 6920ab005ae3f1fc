"""First-Fit-Decreasing packing of length-only cuts onto linear stock.

Cuts and stock are both sorted longest first. Each cut goes into the
first open stock plan with room for it; a new stock piece is opened only
when no open plan fits.
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
    LinearDimensions,
    OptimizationMode,
    StockOffering,
)
from .aggregator import build_linear_plan, failure, success, summarize_linear
from .expansion import expand_cuts, expand_stock
from .stock_cursor import StockCursor

logger = logging.getLogger(__name__)

MODE = OptimizationMode.LINEAR


@dataclass
class _LinearPlanState:
    """Working state for one stock piece while packing.

    Attributes:
        stock: The stock unit backing this plan.
        cuts: Cuts placed so far, in placement order.
    """

    stock: ExpandedUnit
    cuts: list[PlacedCut] = field(default_factory=list)

    def used_length(self, kerf: float) -> float:
        """Length consumed, charging one kerf per placed cut."""
        if not self.cuts:
            return 0.0
        return sum(c.length for c in self.cuts) + len(self.cuts) * kerf

    def remaining_length(self, kerf: float) -> float:
        return self.stock.length - self.used_length(kerf)

    def required_length(self, cut: ExpandedUnit, kerf: float) -> float:
        """Length needed to add a cut, including the kerf ahead of it."""
        return cut.length + (kerf if self.cuts else 0.0)

    def place(self, cut: ExpandedUnit) -> None:
        self.cuts.append(
            PlacedCut(
                cut_id=cut.unit_id,
                cut_label=cut.label,
                original_id=cut.original_id,
                dimensions=LinearDimensions(length=cut.length),
            )
        )


class LinearPacker:
    """First-Fit-Decreasing bin packer over a single dimension.

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
        """Assign cuts to stock pieces, minimizing stock used.

        Args:
            cuts: Required cuts (width, if any, is ignored).
            stock: Available stock (width, if any, is ignored).

        Returns:
            OptimizationResult. Hard failures (empty input, negative kerf,
            longest cut exceeding longest stock) have success False; cuts
            that simply run out of stock are listed in unplaced_cuts.
        """
        if not cuts:
            return failure(MODE, "No cuts provided")
        if not stock:
            return failure(MODE, "No stock provided")
        if not math.isfinite(self.kerf):
            return failure(MODE, "Kerf must be a finite number")
        if self.kerf < 0:
            return failure(MODE, "Kerf must be non-negative")

        cut_units = expand_cuts(cuts, MODE)

        max_cut_length = max(c.length for c in cuts)
        max_stock_length = max(s.length for s in stock)
        if max_cut_length > max_stock_length:
            logger.debug(
                "Longest cut %s exceeds longest stock %s",
                max_cut_length,
                max_stock_length,
            )
            return failure(
                MODE,
                f'Largest cut ({format_number(max_cut_length)}") is larger than '
                f'largest stock ({format_number(max_stock_length)}")',
                total_cuts=len(cut_units),
                unplaced=[c.id for c in cuts],
            )

        stock_units = expand_stock(stock, MODE)
        sorted_cuts = sorted(cut_units, key=lambda u: u.length, reverse=True)
        sorted_stock = sorted(stock_units, key=lambda u: u.length, reverse=True)

        logger.debug(
            "Packing %d cuts onto up to %d stock pieces (kerf %s)",
            len(sorted_cuts),
            len(sorted_stock),
            self.kerf,
        )

        cursor = StockCursor(sorted_stock)
        plans: list[_LinearPlanState] = []
        unplaced: list[str] = []

        for cut in sorted_cuts:
            if self._place_in_open_plan(cut, plans):
                continue

            candidate = cursor.peek()
            if candidate is not None and cut.length <= candidate.length:
                plan = _LinearPlanState(stock=cursor.advance())
                plan.place(cut)
                plans.append(plan)
                logger.debug(
                    "Opened stock %s (%s) for cut %s",
                    plan.stock.unit_id,
                    plan.stock.length,
                    cut.unit_id,
                )
                continue

            logger.debug("Cut %s (%s) could not be placed", cut.unit_id, cut.length)
            unplaced.append(cut.original_id)

        stock_plans = [
            build_linear_plan(plan.stock, plan.cuts, self.kerf) for plan in plans
        ]
        summary = summarize_linear(
            stock_plans,
            total_cuts=len(cut_units),
            unplaced=unplaced,
            stock_units=stock_units,
        )

        logger.info(
            "Linear optimization: %d cuts on %d stock pieces, %.1f%% waste",
            len(cut_units),
            summary.total_stock_used,
            summary.waste_percentage,
        )

        return success(MODE, stock_plans, summary)

    def _place_in_open_plan(
        self,
        cut: ExpandedUnit,
        plans: list[_LinearPlanState],
    ) -> bool:
        """Place a cut in the first open plan with room for it."""
        for plan in plans:
            if plan.required_length(cut, self.kerf) <= plan.remaining_length(self.kerf):
                plan.place(cut)
                return True
        return False
