"""Cut diagram rendering for optimization results.

Provides ASCII diagrams for terminal display (sheets and linear stock)
and SVG diagrams for sheet plans. On sheets, x runs along the stock length
(left to right) and y along the stock width (top to bottom).
"""

from __future__ import annotations

from xml.sax.saxutils import escape

from cutlist.domain import (
    OptimizationMode,
    OptimizationResult,
    PlacedCut,
    StockPlan,
    format_dimension,
)


def _sheet_waste_percentage(plan: StockPlan) -> float:
    area = plan.stock_length * (plan.stock_width or 0.0)
    if area == 0:
        return 0.0
    return (plan.waste_area or 0.0) / area * 100


def _linear_waste_percentage(plan: StockPlan) -> float:
    if plan.stock_length == 0:
        return 0.0
    return plan.waste_length / plan.stock_length * 100


class CutDiagramRenderer:
    """Renders stock plans as ASCII or SVG cut diagrams.

    Attributes:
        scale: Pixels per inch for SVG rendering.
        cut_fill: Fill color for placed cuts.
        cut_stroke: Stroke color for cut outlines.
        waste_fill: Fill color for unused sheet area.
        text_color: Color for labels and dimensions.
        show_dimensions: Whether to print cut dimensions inside pieces.
        show_labels: Whether to print cut labels inside pieces.
    """

    def __init__(
        self,
        scale: float = 10.0,
        cut_fill: str = "#ADD8E6",  # Light blue
        cut_stroke: str = "#000000",  # Black
        waste_fill: str = "#D3D3D3",  # Light gray
        text_color: str = "#000000",  # Black
        show_dimensions: bool = True,
        show_labels: bool = True,
    ) -> None:
        self.scale = scale
        self.cut_fill = cut_fill
        self.cut_stroke = cut_stroke
        self.waste_fill = waste_fill
        self.text_color = text_color
        self.show_dimensions = show_dimensions
        self.show_labels = show_labels

    # -------------------------------------------------------------------------
    # SVG
    # -------------------------------------------------------------------------

    def render_svg(self, plan: StockPlan, index: int = 1, total: int = 1) -> str:
        """Generate an SVG cut diagram for one sheet plan.

        Args:
            plan: Sheet plan with placed cuts.
            index: 1-based position of this sheet in the result.
            total: Total number of sheets (for the header).

        Returns:
            SVG document as a string.

        Raises:
            ValueError: If the plan is a linear plan.
        """
        if plan.stock_width is None:
            raise ValueError("SVG diagrams require a sheet plan")

        header_height = 30
        sheet_width = plan.stock_length * self.scale
        sheet_height = plan.stock_width * self.scale
        svg_width = sheet_width
        svg_height = sheet_height + header_height

        parts: list[str] = [
            f'<svg width="{svg_width}" height="{svg_height}" '
            f'xmlns="http://www.w3.org/2000/svg">',
            f'  <rect x="0" y="0" width="{svg_width}" height="{svg_height}" '
            f'fill="white"/>',
            f'  <text x="5" y="20" font-family="sans-serif" font-size="14" '
            f'fill="{self.text_color}">'
            f"{escape(self._header(plan, index, total))}</text>",
            # Unused area shows through wherever no cut is drawn
            f'  <rect x="0" y="{header_height}" width="{sheet_width}" '
            f'height="{sheet_height}" fill="{self.waste_fill}" '
            f'stroke="{self.cut_stroke}" stroke-width="2"/>',
        ]

        for cut in plan.cuts:
            parts.append(self._render_cut_svg(cut, header_height))

        parts.append("</svg>")
        return "\n".join(parts)

    def render_all_svg(self, result: OptimizationResult) -> list[str]:
        """Generate one SVG document per sheet plan."""
        if result.mode != OptimizationMode.SHEET:
            raise ValueError("SVG diagrams are only available in sheet mode")
        total = len(result.plans)
        return [
            self.render_svg(plan, index, total)
            for index, plan in enumerate(result.plans, start=1)
        ]

    def _render_cut_svg(self, cut: PlacedCut, header_height: float) -> str:
        x = (cut.x or 0.0) * self.scale
        y = (cut.y or 0.0) * self.scale + header_height
        w = cut.length * self.scale
        h = (cut.width or 0.0) * self.scale
        cx = x + w / 2
        cy = y + h / 2

        parts = [
            f'  <rect x="{x}" y="{y}" width="{w}" height="{h}" '
            f'fill="{self.cut_fill}" stroke="{self.cut_stroke}" stroke-width="1"/>'
        ]

        text_lines: list[str] = []
        if self.show_labels:
            text_lines.append(cut.cut_label)
        if self.show_dimensions:
            dims = f"{format_dimension(cut.length)} x {format_dimension(cut.width)}"
            if cut.rotated:
                dims += " (R)"
            text_lines.append(dims)

        for offset, text in enumerate(text_lines):
            ty = cy + (offset - (len(text_lines) - 1) / 2) * 14
            parts.append(
                f'  <text x="{cx}" y="{ty}" font-family="sans-serif" font-size="12" '
                f'text-anchor="middle" dominant-baseline="middle" '
                f'fill="{self.text_color}">{escape(text)}</text>'
            )

        return "\n".join(parts)

    # -------------------------------------------------------------------------
    # ASCII
    # -------------------------------------------------------------------------

    def render_ascii(
        self,
        plan: StockPlan,
        width: int = 80,
        index: int = 1,
        total: int = 1,
    ) -> str:
        """Generate an ASCII cut diagram for one sheet plan.

        Args:
            plan: Sheet plan with placed cuts.
            width: Terminal width in characters.
            index: 1-based position of this sheet in the result.
            total: Total number of sheets (for the header).

        Returns:
            ASCII representation of the sheet.
        """
        if plan.stock_width is None:
            return self.render_linear_ascii(plan, width, index, total)

        usable_width = width - 2
        scale_x = usable_width / plan.stock_length

        # Characters are roughly twice as tall as they are wide
        aspect_ratio = plan.stock_width / plan.stock_length
        grid_height = max(int(usable_width * aspect_ratio * 0.5), 10)
        scale_y = grid_height / plan.stock_width

        grid = [[" " for _ in range(usable_width)] for _ in range(grid_height)]
        for cut in plan.cuts:
            self._draw_cut_ascii(grid, cut, scale_x, scale_y)

        lines = [self._header(plan, index, total)]
        lines.append("+" + "-" * usable_width + "+")
        for row in grid:
            lines.append("|" + "".join(row) + "|")
        lines.append("+" + "-" * usable_width + "+")
        return "\n".join(lines)

    def render_linear_ascii(
        self,
        plan: StockPlan,
        width: int = 80,
        index: int = 1,
        total: int = 1,
    ) -> str:
        """Generate a one-line bar diagram for a linear stock plan.

        Each cut is drawn as a segment proportional to its length; the
        remaining stock is shown as dots.
        """
        usable_width = width - 2
        scale = usable_width / plan.stock_length

        bar = ""
        for cut in plan.cuts:
            size = max(1, round(cut.length * scale))
            text = format_dimension(cut.length)
            segment = text.center(size, "=") if len(text) <= size else "=" * size
            bar += segment[:size]
        bar = bar[:usable_width].ljust(usable_width, ".")

        return "\n".join(
            [
                self._header(plan, index, total),
                "[" + bar + "]",
            ]
        )

    def render_all_ascii(self, result: OptimizationResult, width: int = 80) -> str:
        """Generate ASCII diagrams for every plan followed by a summary line."""
        if not result.success:
            return f"Optimization failed: {result.error}"
        if not result.plans:
            return "No stock to display."

        total = len(result.plans)
        parts: list[str] = []
        for index, plan in enumerate(result.plans, start=1):
            parts.append(self.render_ascii(plan, width, index, total))
            parts.append("")

        summary = result.summary
        parts.append("=" * width)
        noun = "sheet" if result.mode == OptimizationMode.SHEET else "piece"
        parts.append(
            f"SUMMARY: {total} {noun}{'s' if total != 1 else ''} of stock, "
            f"{summary.waste_percentage:.1f}% total waste"
        )
        if summary.unplaced_cuts:
            parts.append(f"  Unplaced: {', '.join(summary.unplaced_cuts)}")
        return "\n".join(parts)

    def _header(self, plan: StockPlan, index: int, total: int) -> str:
        if plan.stock_width is None:
            return (
                f"Stock {index} of {total} - {plan.stock_label} - "
                f"{_linear_waste_percentage(plan):.1f}% waste"
            )
        return (
            f"Sheet {index} of {total} - {plan.stock_label} - "
            f"{_sheet_waste_percentage(plan):.1f}% waste"
        )

    def _draw_cut_ascii(
        self,
        grid: list[list[str]],
        cut: PlacedCut,
        scale_x: float,
        scale_y: float,
    ) -> None:
        """Draw one placed cut onto the character grid."""
        grid_height = len(grid)
        grid_width = len(grid[0]) if grid else 0

        x1 = int((cut.x or 0.0) * scale_x)
        y1 = int((cut.y or 0.0) * scale_y)
        x2 = int(cut.right_edge * scale_x)
        y2 = int(cut.top_edge * scale_y)

        x1 = max(0, min(x1, grid_width - 1))
        x2 = max(0, min(x2, grid_width - 1))
        y1 = max(0, min(y1, grid_height - 1))
        y2 = max(0, min(y2, grid_height - 1))

        for x in range(x1, x2 + 1):
            grid[y1][x] = "-"
            grid[y2][x] = "-"
        for y in range(y1, y2 + 1):
            grid[y][x1] = "|"
            grid[y][x2] = "|"
        for y, x in ((y1, x1), (y1, x2), (y2, x1), (y2, x2)):
            grid[y][x] = "+"

        inner = x2 - x1 - 1
        if inner <= 0:
            return

        texts: list[str] = []
        if self.show_labels:
            texts.append(cut.cut_label)
        if self.show_dimensions:
            dims = f"{format_dimension(cut.length)}x{format_dimension(cut.width)}"
            texts.append(dims + ("R" if cut.rotated else ""))

        for offset, text in enumerate(texts, start=1):
            row = y1 + offset
            if row >= y2:
                break
            for i, char in enumerate(text[:inner]):
                grid[row][x1 + 1 + i] = char
