"""Exceptions raised by the core.

Only programming errors and malformed level data raise. Illegal moves
and empty history stacks are ordinary outcomes and never show up here.
"""

from __future__ import annotations


class OutOfBounds(IndexError):
    """A cell outside the grid was queried."""

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"({x}, {y}) is outside a {width}x{height} grid")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class LevelFormatError(ValueError):
    """Level data could not be turned into a playable level."""
