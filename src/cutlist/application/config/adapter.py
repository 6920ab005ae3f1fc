"""Conversion from validated job configuration to domain objects."""

from __future__ import annotations

from cutlist.application.config.schema import (
    CutConfig,
    CutListJobConfig,
    StockConfig,
)
from cutlist.application.dtos import CutListJob
from cutlist.domain import (
    CutRequest,
    Dimensions,
    LinearDimensions,
    OptimizationMode,
    SheetDimensions,
    StockOffering,
)


def _dimensions(
    entry: CutConfig | StockConfig,
    mode: OptimizationMode,
) -> Dimensions:
    if mode == OptimizationMode.SHEET and entry.width is not None:
        return SheetDimensions(length=entry.length, width=entry.width)
    return LinearDimensions(length=entry.length)


def config_to_cuts(config: CutListJobConfig) -> tuple[CutRequest, ...]:
    """Convert cut entries, assigning positional ids (cut-1, cut-2, ...) where missing."""
    return tuple(
        CutRequest(
            id=entry.id or f"cut-{index}",
            dimensions=_dimensions(entry, config.mode),
            quantity=entry.quantity,
            label=entry.label,
            grain_matters=entry.grain_matters,
        )
        for index, entry in enumerate(config.cuts, start=1)
    )


def config_to_stock(config: CutListJobConfig) -> tuple[StockOffering, ...]:
    """Convert stock entries, assigning positional ids (stock-1, ...) where missing."""
    return tuple(
        StockOffering(
            id=entry.id or f"stock-{index}",
            dimensions=_dimensions(entry, config.mode),
            quantity=entry.quantity,
            label=entry.label,
        )
        for index, entry in enumerate(config.stock, start=1)
    )


def config_to_job(config: CutListJobConfig) -> CutListJob:
    """Convert a validated job configuration into a CutListJob.

    Args:
        config: Validated job configuration.

    Returns:
        CutListJob with domain cut requests, stock offerings and the
        effective kerf.
    """
    return CutListJob(
        mode=config.mode,
        cuts=config_to_cuts(config),
        stock=config_to_stock(config),
        kerf=config.effective_kerf,
    )
