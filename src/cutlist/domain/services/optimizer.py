"""Optimizer entry points.

``optimize_linear`` and ``optimize_sheet`` are pure functions of their
inputs: no I/O, no shared state, deterministic output. ``optimize``
dispatches on the mode the caller selected.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..results import OptimizationResult
from ..value_objects import CutRequest, OptimizationMode, StockOffering
from .aggregator import failure
from .guillotine_packer import GuillotinePacker
from .linear_packer import LinearPacker

logger = logging.getLogger(__name__)


def optimize_linear(
    cuts: Sequence[CutRequest],
    stock: Sequence[StockOffering],
    kerf: float,
) -> OptimizationResult:
    """Optimize length-only cuts onto linear stock (1D)."""
    return LinearPacker(kerf).pack(cuts, stock)


def optimize_sheet(
    cuts: Sequence[CutRequest],
    stock: Sequence[StockOffering],
    kerf: float,
) -> OptimizationResult:
    """Optimize rectangular cuts onto sheet stock (2D)."""
    return GuillotinePacker(kerf).pack(cuts, stock)


def optimize(
    mode: OptimizationMode | str,
    cuts: Sequence[CutRequest],
    stock: Sequence[StockOffering],
    kerf: float,
) -> OptimizationResult:
    """Run the optimizer for the given mode.

    Args:
        mode: OptimizationMode or its string value ("linear" or "sheet").
        cuts: Required cuts.
        stock: Available stock.
        kerf: Saw blade kerf width in inches.

    Returns:
        OptimizationResult. An unknown mode string yields a failed result
        (reported in linear mode, since no mode could be selected).
    """
    try:
        selected = OptimizationMode(mode)
    except ValueError:
        logger.warning("Unknown optimization mode: %s", mode)
        return failure(OptimizationMode.LINEAR, f"Unknown optimization mode: {mode}")

    if selected == OptimizationMode.LINEAR:
        return optimize_linear(cuts, stock, kerf)
    return optimize_sheet(cuts, stock, kerf)
