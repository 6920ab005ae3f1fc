"""Pytest configuration and shared fixtures for cut-list tests."""

from __future__ import annotations

import pytest

from cutlist.domain import (
    CutRequest,
    LinearDimensions,
    SheetDimensions,
    StockOffering,
)


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def shelf_cuts() -> list[CutRequest]:
    """Three 40" shelves."""
    return [CutRequest(id="shelf", dimensions=LinearDimensions(40), quantity=3)]


@pytest.fixture
def eight_foot_boards() -> list[StockOffering]:
    """Five 96" boards."""
    return [StockOffering(id="board", dimensions=LinearDimensions(96), quantity=5)]


@pytest.fixture
def plywood_sheets() -> list[StockOffering]:
    """Two 4'x8' sheets of plywood."""
    return [
        StockOffering(
            id="ply",
            dimensions=SheetDimensions(96, 48),
            quantity=2,
            label="3/4 Plywood",
        )
    ]
