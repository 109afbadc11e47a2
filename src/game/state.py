"""
Snapshot of everything the UI needs to draw a game.

GameState is frozen, and the store only ever hands out copies (see `snapshot`), so a state that was handed out
to a subscriber never changes afterwards, and changing it never reaches the store.
"""

from copy import deepcopy
from dataclasses import dataclass
from typing import Optional, Self

from src.core.shared_types import PlayerColor
from src.game.board import DEFAULT_BOARD_SIZE, Board
from src.game.pieces import AvailablePieces, Piece, initial_supply
from src.game.position import Position


@dataclass(frozen=True)
class Selection:
    """A piece the player picked up to move. Nothing checks it actually stands on that square."""

    piece: Piece
    position: Position


@dataclass(frozen=True)
class GameState:
    board: Board
    current_player: PlayerColor
    selected_piece: Optional[Selection]
    available_pieces: AvailablePieces
    winner: Optional[PlayerColor]
    board_size: int

    @classmethod
    def initial(cls, size: int = DEFAULT_BOARD_SIZE) -> Self:
        """Empty board, white to move, full supply for both players, no winner."""
        return cls(
            board=Board.empty(size),
            current_player=PlayerColor.WHITE,
            selected_piece=None,
            available_pieces=initial_supply(),
            winner=None,
            board_size=size,
        )

    def snapshot(self) -> Self:
        """Independent copy: nothing shared with this state (board and supply included)"""
        return deepcopy(self)

    def remaining(self, piece: Piece) -> int:
        """How many more of this piece its owner can still place"""
        return self.available_pieces[piece.color][piece.type]
