"""Explicit cursor over the sorted stock sequence."""

from __future__ import annotations

from typing import Sequence

from ..value_objects import ExpandedUnit


class StockCursor:
    """Hands out stock units in order, one per newly opened plan.

    The cursor only advances when a plan is actually opened, so a unit
    that was offered but could not take a cut stays available for the
    next cut.
    """

    def __init__(self, units: Sequence[ExpandedUnit]) -> None:
        self._units = tuple(units)
        self._position = 0

    def peek(self) -> ExpandedUnit | None:
        """Return the next unused unit without consuming it."""
        if self._position < len(self._units):
            return self._units[self._position]
        return None

    def advance(self) -> ExpandedUnit:
        """Consume and return the next unused unit.

        Raises:
            IndexError: If every unit has already been consumed.
        """
        unit = self.peek()
        if unit is None:
            raise IndexError("No stock units remaining")
        self._position += 1
        return unit
