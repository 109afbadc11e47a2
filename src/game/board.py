"""The grid of cells the pieces are placed on, and a FEN-like notation to write it down"""

from copy import deepcopy
from dataclasses import dataclass
from typing import Iterator, Optional, Self

from src.core.exceptions import InvalidBoardNotationError, InvalidPreconditionError
from src.game.pieces import Piece
from src.game.position import Position

# Classic tic-tac-toe size. Bigger boards are allowed, smaller than a single cell is not.
DEFAULT_BOARD_SIZE = 3
MIN_BOARD_SIZE = 1

Grid = list[list[Optional[Piece]]]


@dataclass
class Board:
    grid: Grid

    @classmethod
    def empty(cls, size: int = DEFAULT_BOARD_SIZE) -> Self:
        if size < MIN_BOARD_SIZE:
            raise InvalidPreconditionError(
                f"Board size must be at least {MIN_BOARD_SIZE}, got {size}."
            )
        return cls([[None for _ in range(size)] for _ in range(size)])

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board from a FEN-like string.

        Rows are separated by slashes and read top (row 0) to bottom.
        Within a row:
        * a letter denotes a piece: r(ook), b(ishop), n (knight), p(awn), q(ueen). Capitals for white, lower case for black.
        * a number denotes that many empty cells after each other (may have more than one digit on big boards)

        ex) "R1p/3/2Q" is a 3x3 board with a white rook at (0, 0), a black pawn at (0, 2) and a white queen at (2, 2)
        """
        rows_fen = fen_str.split("/")
        size = len(rows_fen)
        grid: Grid = []
        for row_idx, fen_one_row in enumerate(rows_fen):
            row: list[Optional[Piece]] = []
            digits = ""
            for character in fen_one_row:
                if character.isdigit():
                    digits += character
                    continue
                if digits:
                    row.extend([None] * int(digits))
                    digits = ""
                row.append(Piece.from_fen(character))
            if digits:
                row.extend([None] * int(digits))

            if len(row) != size:
                raise InvalidBoardNotationError(
                    f"Row {row_idx} of {fen_str!r} describes {len(row)} cells, expected {size} (board must be square)."
                )
            grid.append(row)
        return cls(grid)

    def to_fen(self) -> str:
        """Rows are separated by slashes"""
        return "/".join(self._row_to_fen(row) for row in self.grid)

    def _row_to_fen(self, row: list[Optional[Piece]]) -> str:
        fen_characters: list[str] = []
        empty_count = 0
        for piece in row:
            if piece is None:
                empty_count += 1
                continue
            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(piece.to_fen())

        # an entirely empty row still gets its number
        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    @property
    def size(self) -> int:
        return len(self.grid)

    def is_within_bounds(self, position: Position) -> bool:
        return position.is_within_bounds(self.size)

    def piece(self, position: Position) -> Optional[Piece]:
        self._assert_within_bounds(position)
        return self.grid[position.row][position.col]

    def positions(self) -> Iterator[Position]:
        """All cells, row-major: row 0 left to right, then row 1, ..."""
        for row in range(self.size):
            for col in range(self.size):
                yield Position(row, col)

    def is_empty(self) -> bool:
        return all(cell is None for row in self.grid for cell in row)

    def copy(self) -> Self:
        return deepcopy(self)

    # --- MUTATIONS (only used by the store on its own copy) ---
    def place_piece(self, piece: Piece, position: Position) -> None:
        self._assert_within_bounds(position)
        self.grid[position.row][position.col] = piece

    def move_piece(self, from_position: Position, to_position: Position) -> None:
        """Update the grid. Whatever stood on the target square is overwritten (captured)"""
        self._assert_within_bounds(from_position)
        self._assert_within_bounds(to_position)
        piece_that_moved = self.grid[from_position.row][from_position.col]
        self.grid[from_position.row][from_position.col] = None
        self.grid[to_position.row][to_position.col] = piece_that_moved

    def _assert_within_bounds(self, position: Position) -> None:
        # negative indices would silently wrap around in Python, so check both ends
        if not self.is_within_bounds(position):
            raise InvalidPreconditionError(
                f"{position} lies outside the {self.size}x{self.size} board."
            )
