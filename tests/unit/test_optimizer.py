"""Tests for the optimizer entry points and mode dispatch."""

from __future__ import annotations

import logging

import pytest

from cutlist import optimize, optimize_linear, optimize_sheet
from cutlist.domain import (
    CutRequest,
    LinearDimensions,
    OptimizationMode,
    SheetDimensions,
    StockOffering,
)


class TestOptimizeLinear:
    """Tests for optimize_linear."""

    def test_worked_example(self, shelf_cuts, eight_foot_boards) -> None:
        """Three 40" shelves from 96" boards use two boards."""
        result = optimize_linear(shelf_cuts, eight_foot_boards, 0.125)
        assert result.success
        assert result.summary.total_stock_used == 2
        assert result.summary.total_waste == pytest.approx(71.875)

    def test_empty_input(self) -> None:
        """Empty input fails without raising."""
        result = optimize_linear([], [], 0.125)
        assert result.success is False
        assert result.error == "No cuts provided"


class TestOptimizeSheet:
    """Tests for optimize_sheet."""

    def test_single_sheet(self, plywood_sheets) -> None:
        """Small cuts fit on one sheet."""
        cuts = [CutRequest(id="a", dimensions=SheetDimensions(24, 24), quantity=2)]
        result = optimize_sheet(cuts, plywood_sheets, 0.125)
        assert result.success
        assert result.mode == OptimizationMode.SHEET
        assert len(result.plans) == 1
        assert result.plans[0].stock_label == "3/4 Plywood"


class TestOptimizeDispatch:
    """Tests for optimize mode dispatch."""

    def test_linear_mode(self, shelf_cuts, eight_foot_boards) -> None:
        """Linear mode runs the linear packer."""
        result = optimize(OptimizationMode.LINEAR, shelf_cuts, eight_foot_boards, 0.125)
        assert result == optimize_linear(shelf_cuts, eight_foot_boards, 0.125)

    def test_mode_string(self, plywood_sheets) -> None:
        """Mode may be passed as its string value."""
        cuts = [CutRequest(id="a", dimensions=SheetDimensions(24, 24))]
        result = optimize("sheet", cuts, plywood_sheets, 0)
        assert result.mode == OptimizationMode.SHEET
        assert result.success

    def test_unknown_mode(self, shelf_cuts, eight_foot_boards, caplog) -> None:
        """An unknown mode fails and logs a warning."""
        with caplog.at_level(logging.WARNING):
            result = optimize("circular", shelf_cuts, eight_foot_boards, 0.125)
        assert result.success is False
        assert result.error == "Unknown optimization mode: circular"
        assert result.mode == OptimizationMode.LINEAR
        assert "circular" in caplog.text

    def test_same_input_different_modes(self) -> None:
        """The same entries give a linear or sheet result depending on mode."""
        cuts = [CutRequest(id="a", dimensions=SheetDimensions(40, 12))]
        stock = [StockOffering(id="s", dimensions=SheetDimensions(96, 48))]

        linear = optimize("linear", cuts, stock, 0)
        sheet = optimize("sheet", cuts, stock, 0)

        assert linear.plans[0].cuts[0].dimensions == LinearDimensions(40)
        assert linear.plans[0].waste_area is None
        assert sheet.plans[0].cuts[0].x == 0
        assert sheet.plans[0].waste_area is not None

    def test_inputs_not_mutated(self, shelf_cuts, eight_foot_boards) -> None:
        """The optimizer leaves the caller's sequences untouched."""
        cuts_before = list(shelf_cuts)
        stock_before = list(eight_foot_boards)
        optimize("linear", shelf_cuts, eight_foot_boards, 0.125)
        assert shelf_cuts == cuts_before
        assert eight_foot_boards == stock_before
