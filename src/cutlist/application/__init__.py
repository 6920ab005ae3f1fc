"""Application layer - job configuration and optimization use cases."""

from .commands import OptimizeCutListCommand
from .dtos import CutListJob

__all__ = [
    "CutListJob",
    "OptimizeCutListCommand",
]
