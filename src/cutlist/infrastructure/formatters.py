"""Output formatters and exporters for optimization results."""

from __future__ import annotations

import json
from typing import Any

from cutlist.domain import (
    OptimizationMode,
    OptimizationResult,
    PlacedCut,
    StockPlan,
    format_dimension,
)


class PlanReportFormatter:
    """Formats optimization results as a plain-text cut plan.

    Linear plans list cut lengths and waste length. Sheet plans add the
    width, position and rotation of every cut and report waste area.
    """

    def format(self, result: OptimizationResult) -> str:
        """Format a result as a multi-section text report."""
        if not result.success:
            return f"Optimization failed: {result.error}"

        lines = [
            f"CUT PLAN ({result.mode.value} mode)",
            "=" * 70,
        ]

        if not result.plans:
            lines.append("No stock used.")

        total_plans = len(result.plans)
        for index, plan in enumerate(result.plans, start=1):
            lines.extend(self._format_plan(plan, index, total_plans, result.mode))
            lines.append("")

        lines.extend(self._format_summary(result))
        return "\n".join(lines)

    def _format_plan(
        self,
        plan: StockPlan,
        index: int,
        total: int,
        mode: OptimizationMode,
    ) -> list[str]:
        size = self._size(plan.stock_length, plan.stock_width)
        lines = [
            f"Stock {index} of {total}: {plan.stock_label} ({size}) [{plan.stock_id}]",
            "-" * 70,
        ]

        if mode == OptimizationMode.SHEET:
            lines.append(
                f"  {'Cut':<24} {'Length':<10} {'Width':<10} {'Position':<16} Rotated"
            )
            for cut in plan.cuts:
                lines.append(self._format_sheet_cut(cut))
            lines.append(f"  Waste: {plan.waste_area or 0.0:.1f} sq in")
        else:
            lines.append(f"  {'Cut':<24} {'Length':<10}")
            for cut in plan.cuts:
                lines.append(f"  {cut.cut_label:<24} {format_dimension(cut.length):<10}")
            lines.append(f'  Waste: {format_dimension(plan.waste_length)}"')

        return lines

    def _format_sheet_cut(self, cut: PlacedCut) -> str:
        position = f"({format_dimension(cut.x)}, {format_dimension(cut.y)})"
        rotated = "yes" if cut.rotated else ""
        return (
            f"  {cut.cut_label:<24} {format_dimension(cut.length):<10} "
            f"{format_dimension(cut.width):<10} {position:<16} {rotated}"
        ).rstrip()

    def _format_summary(self, result: OptimizationResult) -> list[str]:
        summary = result.summary
        lines = [
            "SUMMARY",
            "=" * 70,
            f"Cuts requested: {summary.total_cuts}",
            f"Cuts placed: {result.total_cuts_placed}",
            f"Stock used: {summary.total_stock_used}",
        ]

        if result.mode == OptimizationMode.SHEET:
            lines.append(
                f"Total waste: {summary.total_waste:.1f} sq in "
                f"({summary.total_waste / 144:.2f} sq ft)"
            )
        else:
            lines.append(f'Total waste: {format_dimension(summary.total_waste)}"')
            lines.append(
                f"Linear feet: {summary.total_linear_feet_used:.2f} used of "
                f"{summary.total_linear_feet_available:.2f} available"
            )

        lines.append(f"Waste: {summary.waste_percentage:.1f}%")

        if summary.unplaced_cuts:
            lines.append("")
            lines.append(f"UNPLACED CUTS: {', '.join(summary.unplaced_cuts)}")

        return lines

    @staticmethod
    def _size(length: float, width: float | None) -> str:
        if width is None:
            return f'{format_dimension(length)}"'
        return f'{format_dimension(length)}" x {format_dimension(width)}"'


class JsonExporter:
    """Exports optimization results as JSON.

    Uses the camelCase wire shape callers of the optimizer already consume:
    ``success``, ``error``, ``plans`` and ``summary``.
    """

    def export(self, result: OptimizationResult) -> str:
        """Export a result as an indented JSON string."""
        return json.dumps(self.to_dict(result), indent=2)

    def to_dict(self, result: OptimizationResult) -> dict[str, Any]:
        """Convert a result to a JSON-compatible dictionary."""
        data: dict[str, Any] = {
            "success": result.success,
            "mode": result.mode.value,
            "plans": [self._format_plan(plan) for plan in result.plans],
            "summary": {
                "totalCuts": result.summary.total_cuts,
                "totalStockUsed": result.summary.total_stock_used,
                "totalWaste": result.summary.total_waste,
                "wastePercentage": result.summary.waste_percentage,
                "unplacedCuts": list(result.summary.unplaced_cuts),
                "totalLinearFeetUsed": result.summary.total_linear_feet_used,
                "totalLinearFeetAvailable": result.summary.total_linear_feet_available,
            },
        }
        if result.error is not None:
            data["error"] = result.error
        return data

    def _format_plan(self, plan: StockPlan) -> dict[str, Any]:
        return {
            "stockId": plan.stock_id,
            "stockLabel": plan.stock_label,
            "stockLength": plan.stock_length,
            "stockWidth": plan.stock_width,
            "cuts": [self._format_cut(cut) for cut in plan.cuts],
            "wasteLength": plan.waste_length,
            "wasteArea": plan.waste_area,
        }

    def _format_cut(self, cut: PlacedCut) -> dict[str, Any]:
        return {
            "cutId": cut.cut_id,
            "cutLabel": cut.cut_label,
            "length": cut.length,
            "width": cut.width,
            "x": cut.x,
            "y": cut.y,
            "rotated": cut.rotated,
        }
