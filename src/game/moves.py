"""
Geometry/Base movement and capturing rules

Key idea: Use strategy pattern to define the movement shape for each piece type.

Legality is purely geometric plus occupancy: there is no king, so no check / "moving into danger" restriction.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Protocol

from src.core.exceptions import InvalidPreconditionError
from src.core.shared_types import PieceType, PlayerColor
from src.game.pieces import Piece
from src.game.position import Position


class Board(Protocol):
    """Just the parts the movement rules need"""

    @property
    def size(self) -> int: ...
    def piece(self, position: Position) -> Optional[Piece]: ...
    def is_within_bounds(self, position: Position) -> bool: ...
    def positions(self) -> Iterator[Position]: ...


Vector = tuple[int, int]


@dataclass
class Move:
    """A placement (no from-square, the piece comes out of the supply) or a relocation of a piece already on the board"""

    to: Position
    piece: Piece
    from_: Optional[Position] = None

    @property
    def is_placement(self) -> bool:
        return self.from_ is None


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _forward_direction(color: PlayerColor) -> int:
    """White moves UP the board (towards row 0), Black moves DOWN"""
    return -1 if color == PlayerColor.WHITE else 1


# --- PATH CHECK ---
def has_obstacles_in_path(board: Board, from_: Position, to: Position) -> bool:
    """
    Walk from one square to the other along a straight or diagonal line.
    ---

    Returns TRUE if any square strictly in between the two endpoints holds a piece.
    """
    for position in (from_, to):
        if not board.is_within_bounds(position):
            raise InvalidPreconditionError(
                f"{position} lies outside the {board.size}x{board.size} board."
            )

    d_row = to.row - from_.row
    d_col = to.col - from_.col
    if d_row != 0 and d_col != 0 and abs(d_row) != abs(d_col):
        raise InvalidPreconditionError(
            f"{from_} and {to} do not share a row, column or diagonal."
        )

    step: Vector = (_sign(d_row), _sign(d_col))
    current = from_.offset(*step)
    while current != to:
        if board.piece(current) is not None:
            return True
        current = current.offset(*step)
    return False


# --- MOVEMENT RULES ---
def is_valid_pawn_move(from_: Position, to: Position, piece: Piece, board: Board) -> bool:
    """
    A pawn:
    - moves a single square forward, onto an empty square only.
    - takes diagonally forward (one column to the side), onto an occupied square only.

    No double step, no en passant. Never sideways or backwards.
    """
    forward_row = from_.row + _forward_direction(piece.color)
    if to.row != forward_row:
        return False

    target_occupied = board.piece(to) is not None
    is_push = to.col == from_.col
    is_take = abs(to.col - from_.col) == 1
    return (is_push and not target_occupied) or (is_take and target_occupied)


def is_valid_rook_move(from_: Position, to: Position, piece: Piece, board: Board) -> bool:
    """Rooks move either horizontally or vertically"""
    if from_.row != to.row and from_.col != to.col:
        return False
    return not has_obstacles_in_path(board, from_, to)


def is_valid_bishop_move(from_: Position, to: Position, piece: Piece, board: Board) -> bool:
    """Bishops move diagonally: |delta_row| = |delta_col|"""
    if abs(to.row - from_.row) != abs(to.col - from_.col):
        return False
    return not has_obstacles_in_path(board, from_, to)


def is_valid_knight_move(from_: Position, to: Position, piece: Piece, board: Board) -> bool:
    """Knights jump in an L-shape, so nothing in between matters"""
    d_row = abs(to.row - from_.row)
    d_col = abs(to.col - from_.col)
    return (d_row, d_col) in [(2, 1), (1, 2)]


def is_valid_queen_move(from_: Position, to: Position, piece: Piece, board: Board) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return is_valid_rook_move(from_, to, piece, board) or is_valid_bishop_move(
        from_, to, piece, board
    )


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MoveRuleFn = Callable[[Position, Position, Piece, Board], bool]
MOVEMENT_RULES: dict[PieceType, MoveRuleFn] = {
    PieceType.PAWN: is_valid_pawn_move,
    PieceType.KNIGHT: is_valid_knight_move,
    PieceType.BISHOP: is_valid_bishop_move,
    PieceType.ROOK: is_valid_rook_move,
    PieceType.QUEEN: is_valid_queen_move,
}


# --- RULE ENGINE API ---
def is_valid_move(board: Board, from_: Position, to: Position, piece: Piece) -> bool:
    """
    Can `piece`, standing on `from_`, move to `to`?
    ----

    1. The target square must be on the board.
    2. The target square must not hold a piece of your own color (taking the opponent's pieces is always fine).
    3. Staying on the same square is not a move.
    4. The movement shape of the piece type must fit (see MOVEMENT_RULES).

    A target off the board is simply not a valid move. A source off the board (with the target on it)
    is a programming error on the caller's side.
    """
    if not board.is_within_bounds(to):
        return False

    if not board.is_within_bounds(from_):
        raise InvalidPreconditionError(
            f"Cannot move from {from_}: outside the {board.size}x{board.size} board."
        )

    target_piece = board.piece(to)
    if target_piece is not None and target_piece.color == piece.color:
        return False

    if from_ == to:
        return False

    movement_rule = MOVEMENT_RULES.get(piece.type)
    if movement_rule is None:
        return False
    return movement_rule(from_, to, piece, board)


def get_valid_moves(board: Board, position: Position, piece: Piece) -> list[Position]:
    """Check every square of the board (row-major order) and keep the ones the piece can move to."""
    return [
        target
        for target in board.positions()
        if is_valid_move(board, position, target, piece)
    ]
