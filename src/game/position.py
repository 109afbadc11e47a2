"""
A cell on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """Row 0 is the top row, col 0 the left column. Bounds depend on the board, so they are checked where the board is known."""

    row: int
    col: int

    def is_within_bounds(self, size: int) -> bool:
        return (0 <= self.row < size) and (0 <= self.col < size)

    def offset(self, d_row: int, d_col: int) -> Position:
        return Position(self.row + d_row, self.col + d_col)
