"""
Win detection: tic-tac-toe rules on top of the chess pieces.

A player wins with WIN_LENGTH pieces of their color in an unbroken line: along a row, a column or either diagonal direction.
On a 3x3 board that is the classic full row/column/diagonal. On bigger boards any 3-in-a-row anywhere counts.
"""

from typing import Iterator, Optional

from src.core.exceptions import InvalidPreconditionError
from src.core.shared_types import PlayerColor
from src.game.moves import Board, Vector
from src.game.position import Position

WIN_LENGTH = 3

# Order matters: the first run found wins (rows, then columns, then down-right diagonals, then down-left diagonals)
SCAN_DIRECTIONS: tuple[Vector, ...] = (
    (0, 1),  # along a row
    (1, 0),  # along a column
    (1, 1),  # down-right diagonal
    (1, -1),  # down-left diagonal
)


def _windows(size: int, win_length: int) -> Iterator[list[Position]]:
    """
    Slide a window of win_length cells along every line of the board.

    For every direction, the starting cells are visited row-major for rows/diagonals,
    and column by column for columns, so scanning follows the order the lines are usually read.
    """
    for d_row, d_col in SCAN_DIRECTIONS:
        starts = [
            Position(row, col)
            for row in range(size)
            for col in range(size)
            if Position(
                row + d_row * (win_length - 1), col + d_col * (win_length - 1)
            ).is_within_bounds(size)
        ]
        if (d_row, d_col) == (1, 0):
            # columns: left to right, each column top to bottom
            starts.sort(key=lambda position: (position.col, position.row))
        for start in starts:
            yield [start.offset(d_row * i, d_col * i) for i in range(win_length)]


def winning_line(board: Board, win_length: int = WIN_LENGTH) -> Optional[list[Position]]:
    """The cells of the first winning run found (useful for highlighting), or None"""
    if win_length < 1:
        raise InvalidPreconditionError(
            f"A winning run needs at least one cell, got {win_length=}."
        )
    for window in _windows(board.size, win_length):
        first = board.piece(window[0])
        if first is None:
            continue
        if all(
            (piece := board.piece(position)) is not None and piece.color == first.color
            for position in window[1:]
        ):
            return window
    return None


def check_winner(board: Board, win_length: int = WIN_LENGTH) -> Optional[PlayerColor]:
    """Color of the first winning run found. None if nobody has one (yet)."""
    line = winning_line(board, win_length)
    if line is None:
        return None
    winning_piece = board.piece(line[0])
    # for the type checker: a winning line only contains occupied cells
    assert winning_piece is not None
    return winning_piece.color
