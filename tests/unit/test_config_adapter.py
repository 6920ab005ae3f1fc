"""Unit tests for converting job configuration into domain objects."""

from __future__ import annotations

import logging

import pytest

from cutlist.application import CutListJob, OptimizeCutListCommand
from cutlist.application.config import (
    CutListJobConfig,
    config_to_cuts,
    config_to_job,
    config_to_stock,
)
from cutlist.domain import (
    CutRequest,
    LinearDimensions,
    OptimizationMode,
    SheetDimensions,
    StockOffering,
)


class TestConfigToDomain:
    """Tests for config_to_cuts, config_to_stock and config_to_job."""

    def test_positional_default_ids(self) -> None:
        """Entries without ids are numbered from 1."""
        config = CutListJobConfig.model_validate(
            {
                "mode": "linear",
                "cuts": [{"length": 40}, {"id": "rail", "length": 20}, {"length": 10}],
                "stock": [{"length": 96}],
            }
        )
        assert [c.id for c in config_to_cuts(config)] == ["cut-1", "rail", "cut-3"]
        assert [s.id for s in config_to_stock(config)] == ["stock-1"]

    def test_sheet_dimensions(self) -> None:
        """Sheet jobs produce sheet dimensions and keep grain."""
        config = CutListJobConfig.model_validate(
            {
                "mode": "sheet",
                "cuts": [{"length": 30, "width": 12, "grain_matters": True}],
                "stock": [{"length": 96, "width": 48, "label": "Ply"}],
            }
        )
        cut = config_to_cuts(config)[0]
        stock = config_to_stock(config)[0]
        assert cut.dimensions == SheetDimensions(30, 12)
        assert cut.grain_matters is True
        assert stock.dimensions == SheetDimensions(96, 48)
        assert stock.label == "Ply"

    def test_linear_drops_width(self) -> None:
        """Linear jobs keep only the length."""
        config = CutListJobConfig.model_validate(
            {
                "mode": "linear",
                "cuts": [{"length": 40, "width": 12}],
                "stock": [{"length": 96, "width": 6}],
            }
        )
        assert config_to_cuts(config)[0].dimensions == LinearDimensions(40)
        assert config_to_stock(config)[0].dimensions == LinearDimensions(96)

    def test_job_carries_effective_kerf(self) -> None:
        """The job holds the resolved kerf."""
        config = CutListJobConfig.model_validate(
            {"mode": "linear", "kerf_preset": "thick", "cuts": [], "stock": []}
        )
        job = config_to_job(config)
        assert job.mode == OptimizationMode.LINEAR
        assert job.kerf == 0.15625
        assert job.cuts == ()

    def test_with_kerf(self) -> None:
        """with_kerf replaces only the kerf."""
        job = CutListJob(OptimizationMode.LINEAR, (), (), 0.125)
        updated = job.with_kerf(0)
        assert updated.kerf == 0
        assert job.kerf == 0.125
        assert updated.mode == job.mode


class TestOptimizeCutListCommand:
    """Tests for OptimizeCutListCommand."""

    @pytest.fixture
    def command(self) -> OptimizeCutListCommand:
        return OptimizeCutListCommand()

    def test_executes_linear_job(self, command, shelf_cuts, eight_foot_boards) -> None:
        """The command runs the optimizer for the job's mode."""
        job = CutListJob(
            OptimizationMode.LINEAR, tuple(shelf_cuts), tuple(eight_foot_boards), 0.125
        )
        result = command.execute(job)
        assert result.success
        assert result.summary.total_stock_used == 2

    def test_failure_logged(self, command, caplog) -> None:
        """Failures are returned and logged as warnings."""
        job = CutListJob(OptimizationMode.SHEET, (), (), 0.125)
        with caplog.at_level(logging.WARNING, logger="cutlist"):
            result = command.execute(job)
        assert result.success is False
        assert "No cuts provided" in caplog.text

    def test_unplaced_logged(self, command, caplog) -> None:
        """Unplaced cuts are logged as warnings."""
        job = CutListJob(
            OptimizationMode.LINEAR,
            (CutRequest(id="a", dimensions=LinearDimensions(60), quantity=2),),
            (StockOffering(id="b", dimensions=LinearDimensions(96)),),
            0.125,
        )
        with caplog.at_level(logging.WARNING, logger="cutlist"):
            result = command.execute(job)
        assert result.summary.unplaced_cuts == ("a",)
        assert "could not be placed" in caplog.text
