"""Result types returned by the cut-list optimizer.

Linear and sheet mode share one result shape so callers can branch on the
mode alone. Mode-specific fields (positions, rotation, waste area, linear
feet) hold neutral values in the other mode.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .value_objects import Dimensions, LinearDimensions, OptimizationMode


@dataclass(frozen=True)
class PlacedCut:
    """A unit cut assigned to a stock plan.

    In sheet mode ``dimensions`` holds the placed length/width, which are
    swapped relative to the request when ``rotated`` is True.

    Attributes:
        cut_id: Unit identifier of the placed piece.
        cut_label: Display label of the piece.
        original_id: Identity of the originating cut request.
        dimensions: Placed dimensions.
        x: Position along the stock length (sheet mode only).
        y: Position along the stock width (sheet mode only).
        rotated: True if turned 90 degrees from the requested orientation.
    """

    cut_id: str
    cut_label: str
    original_id: str
    dimensions: Dimensions
    x: float | None = None
    y: float | None = None
    rotated: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.dimensions, LinearDimensions):
            if self.x is not None or self.y is not None:
                raise ValueError("Linear cuts have no placement position")
            if self.rotated:
                raise ValueError("Linear cuts cannot be rotated")
        else:
            if self.x is None or self.y is None:
                raise ValueError("Sheet cuts require a placement position")
            if self.x < 0 or self.y < 0:
                raise ValueError("Position coordinates must be non-negative")

    @property
    def length(self) -> float:
        return self.dimensions.length

    @property
    def width(self) -> float | None:
        return self.dimensions.width

    @property
    def right_edge(self) -> float:
        """X coordinate of the far edge along the stock length."""
        return (self.x or 0.0) + self.length

    @property
    def top_edge(self) -> float:
        """Y coordinate of the far edge along the stock width."""
        return (self.y or 0.0) + (self.width or 0.0)


@dataclass(frozen=True)
class StockPlan:
    """One physical stock unit and the cuts assigned to it.

    Attributes:
        stock_id: Unit identifier of the stock piece.
        stock_label: Display label of the stock piece.
        original_stock_id: Identity of the originating stock offering.
        dimensions: Stock dimensions.
        cuts: Placed cuts, in placement order.
        waste_length: Linear inches wasted (0 in sheet mode).
        waste_area: Square inches wasted (None in linear mode).
    """

    stock_id: str
    stock_label: str
    original_stock_id: str
    dimensions: Dimensions
    cuts: tuple[PlacedCut, ...]
    waste_length: float = 0.0
    waste_area: float | None = None

    @property
    def stock_length(self) -> float:
        return self.dimensions.length

    @property
    def stock_width(self) -> float | None:
        return self.dimensions.width

    @property
    def cut_count(self) -> int:
        return len(self.cuts)


@dataclass(frozen=True)
class OptimizationSummary:
    """Aggregate statistics for an optimization run.

    Attributes:
        total_cuts: Number of unit cuts requested.
        total_stock_used: Number of stock units with at least one cut.
        total_waste: Linear inches (linear mode) or square inches (sheet mode).
        waste_percentage: Waste relative to stock used, 0-100.
        unplaced_cuts: Original ids of cuts that could not be placed.
        total_linear_feet_used: Feet of stock used (linear mode only).
        total_linear_feet_available: Feet of stock offered (linear mode only).
    """

    total_cuts: int = 0
    total_stock_used: int = 0
    total_waste: float = 0.0
    waste_percentage: float = 0.0
    unplaced_cuts: tuple[str, ...] = field(default_factory=tuple)
    total_linear_feet_used: float = 0.0
    total_linear_feet_available: float = 0.0


@dataclass(frozen=True)
class OptimizationResult:
    """Complete outcome of one optimizer call.

    Attributes:
        success: False only for hard failures (empty or infeasible input).
        mode: Mode the optimizer ran in.
        plans: Stock plans in the order they were opened.
        summary: Aggregate statistics.
        error: Failure message when success is False.
    """

    success: bool
    mode: OptimizationMode
    plans: tuple[StockPlan, ...] = field(default_factory=tuple)
    summary: OptimizationSummary = field(default_factory=OptimizationSummary)
    error: str | None = None

    @property
    def total_cuts_placed(self) -> int:
        return sum(plan.cut_count for plan in self.plans)

    @property
    def is_complete(self) -> bool:
        """True if optimization succeeded and every cut was placed."""
        return self.success and not self.summary.unplaced_cuts
