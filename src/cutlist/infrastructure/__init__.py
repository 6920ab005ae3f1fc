"""Infrastructure layer - report formatters, exporters and diagrams."""

from .cut_diagram_renderer import CutDiagramRenderer
from .formatters import JsonExporter, PlanReportFormatter

__all__ = [
    "CutDiagramRenderer",
    "JsonExporter",
    "PlanReportFormatter",
]
