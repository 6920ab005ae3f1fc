"""Data transfer objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass

from cutlist.domain import CutRequest, OptimizationMode, StockOffering


@dataclass(frozen=True)
class CutListJob:
    """A fully resolved optimization job, ready for the optimizer.

    Attributes:
        mode: Optimization mode.
        cuts: Cut requests with ids assigned.
        stock: Stock offerings with ids assigned.
        kerf: Kerf in inches, after presets and overrides are applied.
    """

    mode: OptimizationMode
    cuts: tuple[CutRequest, ...]
    stock: tuple[StockOffering, ...]
    kerf: float

    def with_kerf(self, kerf: float) -> CutListJob:
        """Return a copy of the job with a different kerf."""
        return CutListJob(mode=self.mode, cuts=self.cuts, stock=self.stock, kerf=kerf)
