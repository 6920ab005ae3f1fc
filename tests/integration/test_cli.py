"""Integration tests for the cutlist CLI.

These tests run the Typer app end-to-end against job files:
- optimize in text, json, diagram and svg formats
- kerf overrides and output files
- validate and presets commands
- exit codes for invalid jobs and failed optimizations
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from cutlist.cli.main import app

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "jobs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestOptimizeCommand:
    """Tests for the optimize command."""

    def test_text_output(self, runner: CliRunner) -> None:
        """Default output is the text report."""
        result = runner.invoke(app, ["optimize", str(FIXTURES_PATH / "linear_shelves.json")])

        assert result.exit_code == 0
        assert "CUT PLAN (linear mode)" in result.output
        assert "Stock used: 2" in result.output

    def test_json_output(self, runner: CliRunner) -> None:
        """JSON output parses and matches the worked example."""
        result = runner.invoke(
            app,
            ["optimize", str(FIXTURES_PATH / "linear_shelves.json"), "--format", "json"],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["success"] is True
        assert data["summary"]["totalStockUsed"] == 2
        assert data["summary"]["totalWaste"] == pytest.approx(71.875)
        assert data["plans"][0]["stockLabel"] == "1x12 Pine"

    def test_kerf_override(self, runner: CliRunner) -> None:
        """--kerf replaces the job's kerf and accepts fractions."""
        result = runner.invoke(
            app,
            [
                "optimize",
                str(FIXTURES_PATH / "linear_shelves.json"),
                "-f",
                "json",
                "--kerf",
                "0",
            ],
        )

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["plans"][0]["wasteLength"] == 16

    def test_invalid_kerf(self, runner: CliRunner) -> None:
        """An unparseable kerf exits with an error."""
        result = runner.invoke(
            app,
            ["optimize", str(FIXTURES_PATH / "linear_shelves.json"), "--kerf", "thin"],
        )

        assert result.exit_code == 1
        assert "Invalid kerf" in result.output

    @pytest.mark.parametrize("kerf", ["1e400", "0.75"])
    def test_out_of_range_kerf(self, runner: CliRunner, kerf: str) -> None:
        """A kerf that is infinite or wider than 1/2" is refused."""
        result = runner.invoke(
            app,
            ["optimize", str(FIXTURES_PATH / "linear_shelves.json"), "--kerf", kerf],
        )

        assert result.exit_code == 1
        assert "Invalid kerf" in result.output
        assert "NaN" not in result.output

    def test_sheet_diagram(self, runner: CliRunner) -> None:
        """The diagram format draws every sheet."""
        result = runner.invoke(
            app,
            ["optimize", str(FIXTURES_PATH / "sheet_cabinet.json"), "-f", "diagram"],
        )

        assert result.exit_code == 0
        assert "Sheet 1 of" in result.output
        assert "SUMMARY:" in result.output

    def test_svg_files(self, runner: CliRunner, tmp_path: Path) -> None:
        """SVG output writes one numbered file per sheet."""
        output = tmp_path / "cabinet.svg"
        result = runner.invoke(
            app,
            [
                "optimize",
                str(FIXTURES_PATH / "sheet_cabinet.json"),
                "-f",
                "svg",
                "-o",
                str(output),
            ],
        )

        assert result.exit_code == 0
        first = tmp_path / "cabinet-1.svg"
        assert first.exists()
        assert first.read_text().startswith("<svg")
        assert f"Wrote {first}" in result.output

    def test_svg_requires_sheet_mode(self, runner: CliRunner) -> None:
        """SVG output is rejected for linear jobs."""
        result = runner.invoke(
            app,
            ["optimize", str(FIXTURES_PATH / "linear_shelves.json"), "-f", "svg"],
        )

        assert result.exit_code == 1
        assert "sheet-mode" in result.output

    def test_output_file(self, runner: CliRunner, tmp_path: Path) -> None:
        """--output writes the report to a file."""
        output = tmp_path / "plan.txt"
        result = runner.invoke(
            app,
            ["optimize", str(FIXTURES_PATH / "linear_shelves.json"), "-o", str(output)],
        )

        assert result.exit_code == 0
        assert "CUT PLAN" in output.read_text()

    def test_unknown_format(self, runner: CliRunner) -> None:
        """Unknown formats exit with an error."""
        result = runner.invoke(
            app,
            ["optimize", str(FIXTURES_PATH / "linear_shelves.json"), "-f", "pdf"],
        )

        assert result.exit_code == 1
        assert "Unknown format" in result.output

    def test_infeasible_job(self, runner: CliRunner) -> None:
        """A failed optimization exits 1 and reports the error."""
        result = runner.invoke(app, ["optimize", str(FIXTURES_PATH / "infeasible.json")])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "100" in result.output

    def test_infeasible_job_json(self, runner: CliRunner) -> None:
        """JSON output still includes the failed result."""
        result = runner.invoke(
            app,
            ["optimize", str(FIXTURES_PATH / "infeasible.json"), "-f", "json"],
        )

        assert result.exit_code == 1
        assert '"success": false' in result.output

    def test_missing_file(self, runner: CliRunner) -> None:
        """A missing job file exits 1."""
        result = runner.invoke(app, ["optimize", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "File not found" in result.output


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_job(self, runner: CliRunner) -> None:
        """A valid job reports its contents."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "sheet_cabinet.json")])

        assert result.exit_code == 0
        assert "Job file is valid." in result.output
        assert "Mode: sheet" in result.output
        assert "Kerf: 0.125" in result.output
        assert "Cuts: 3 entries (6 pieces)" in result.output
        assert "Stock: 1 entries (2 pieces)" in result.output

    def test_missing_width(self, runner: CliRunner) -> None:
        """Sheet jobs without widths fail validation."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "missing_width.json")])

        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "Width is required in sheet mode" in result.output

    def test_invalid_json(self, runner: CliRunner) -> None:
        """Malformed JSON reports the syntax error."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "invalid_json.json")])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        """A missing file fails with exit code 1."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "nonexistent.json")])

        assert result.exit_code == 1
        assert "not found" in result.output.lower()


class TestPresetsCommand:
    """Tests for the presets command."""

    def test_lists_presets(self, runner: CliRunner) -> None:
        """Every kerf preset is listed with its value."""
        result = runner.invoke(app, ["presets"])

        assert result.exit_code == 0
        for name in ("standard", "thin", "thick", "none"):
            assert name in result.output
        assert "0.09375" in result.output
