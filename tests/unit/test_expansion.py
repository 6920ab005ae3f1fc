"""Tests for quantity expansion and the stock cursor."""

from __future__ import annotations

import pytest

from cutlist.domain import (
    CutRequest,
    LinearDimensions,
    OptimizationMode,
    SheetDimensions,
    StockOffering,
)
from cutlist.domain.services import (
    StockCursor,
    default_label,
    expand_cuts,
    expand_stock,
)


class TestDefaultLabel:
    """Tests for generated labels."""

    def test_linear_label(self) -> None:
        """Linear labels show the length only."""
        assert default_label("Cut", LinearDimensions(40)) == 'Cut 40"'

    def test_sheet_label(self) -> None:
        """Sheet labels show length by width."""
        assert default_label("Sheet", SheetDimensions(96, 48)) == 'Sheet 96"x48"'

    def test_decimal_label(self) -> None:
        """Fractional lengths keep their decimals."""
        assert default_label("Cut", LinearDimensions(23.25)) == 'Cut 23.25"'


class TestExpandCuts:
    """Tests for expand_cuts."""

    def test_one_unit_per_quantity(self) -> None:
        """Each entry expands into quantity units with indexed ids."""
        units = expand_cuts(
            [CutRequest(id="shelf", dimensions=LinearDimensions(40), quantity=3)],
            OptimizationMode.LINEAR,
        )
        assert [u.unit_id for u in units] == ["shelf-0", "shelf-1", "shelf-2"]
        assert all(u.original_id == "shelf" for u in units)

    def test_input_order_preserved(self) -> None:
        """Units of one entry are consecutive and entries keep their order."""
        units = expand_cuts(
            [
                CutRequest(id="a", dimensions=LinearDimensions(10), quantity=2),
                CutRequest(id="b", dimensions=LinearDimensions(50)),
            ],
            OptimizationMode.LINEAR,
        )
        assert [u.unit_id for u in units] == ["a-0", "a-1", "b-0"]

    def test_zero_quantity_contributes_nothing(self) -> None:
        """An entry with quantity 0 produces no units."""
        units = expand_cuts(
            [CutRequest(id="a", dimensions=LinearDimensions(10), quantity=0)],
            OptimizationMode.LINEAR,
        )
        assert units == []

    def test_label_defaults_when_blank(self) -> None:
        """Blank labels fall back to a generated label."""
        units = expand_cuts(
            [CutRequest(id="a", dimensions=SheetDimensions(24, 12))],
            OptimizationMode.SHEET,
        )
        assert units[0].label == 'Cut 24"x12"'

    def test_label_kept_when_given(self) -> None:
        """Caller labels are used as-is."""
        units = expand_cuts(
            [CutRequest(id="a", dimensions=LinearDimensions(40), label="Shelf")],
            OptimizationMode.LINEAR,
        )
        assert units[0].label == "Shelf"

    def test_grain_copied(self) -> None:
        """The grain constraint is copied onto every unit."""
        units = expand_cuts(
            [
                CutRequest(
                    id="a",
                    dimensions=SheetDimensions(24, 12),
                    quantity=2,
                    grain_matters=True,
                )
            ],
            OptimizationMode.SHEET,
        )
        assert all(u.grain_matters for u in units)

    def test_linear_mode_drops_width(self) -> None:
        """In linear mode a supplied width is ignored."""
        units = expand_cuts(
            [CutRequest(id="a", dimensions=SheetDimensions(40, 12))],
            OptimizationMode.LINEAR,
        )
        assert units[0].dimensions == LinearDimensions(40)
        assert units[0].label == 'Cut 40"'


class TestExpandStock:
    """Tests for expand_stock."""

    def test_sheet_prefix(self) -> None:
        """Sheet-mode stock is labelled as sheets."""
        units = expand_stock(
            [StockOffering(id="ply", dimensions=SheetDimensions(96, 48))],
            OptimizationMode.SHEET,
        )
        assert units[0].label == 'Sheet 96"x48"'
        assert units[0].grain_matters is False

    def test_linear_prefix(self) -> None:
        """Linear-mode stock is labelled as stock."""
        units = expand_stock(
            [StockOffering(id="b", dimensions=LinearDimensions(96), quantity=2)],
            OptimizationMode.LINEAR,
        )
        assert [u.label for u in units] == ['Stock 96"', 'Stock 96"']
        assert [u.unit_id for u in units] == ["b-0", "b-1"]


class TestStockCursor:
    """Tests for StockCursor."""

    @pytest.fixture
    def units(self):
        """Two expanded stock units."""
        return expand_stock(
            [StockOffering(id="b", dimensions=LinearDimensions(96), quantity=2)],
            OptimizationMode.LINEAR,
        )

    def test_peek_does_not_consume(self, units) -> None:
        """Peeking repeatedly returns the same unit."""
        cursor = StockCursor(units)
        assert cursor.peek() is cursor.peek()
        assert cursor.peek().unit_id == "b-0"

    def test_advance_consumes_in_order(self, units) -> None:
        """Advance hands out units in sequence."""
        cursor = StockCursor(units)
        assert cursor.advance().unit_id == "b-0"
        assert cursor.advance().unit_id == "b-1"
        assert cursor.peek() is None

    def test_advance_past_end(self, units) -> None:
        """Advancing an exhausted cursor raises IndexError."""
        cursor = StockCursor(units)
        cursor.advance()
        cursor.advance()
        with pytest.raises(IndexError, match="No stock units remaining"):
            cursor.advance()

    def test_empty_cursor(self) -> None:
        """A cursor over no units has nothing to peek."""
        assert StockCursor([]).peek() is None
