"""Defines the pieces and the supply each player starts with"""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import InvalidBoardNotationError
from src.core.shared_types import PieceType, PlayerColor

FEN_TO_PIECE: dict[str, PieceType] = {
    "r": PieceType.ROOK,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
    "p": PieceType.PAWN,
    "q": PieceType.QUEEN,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}

# How many of each piece a player may place during one game
INITIAL_PIECES: dict[PieceType, int] = {
    PieceType.ROOK: 2,
    PieceType.BISHOP: 2,
    PieceType.KNIGHT: 2,
    PieceType.PAWN: 8,
    PieceType.QUEEN: 1,
}

AvailablePieces = dict[PlayerColor, dict[PieceType, int]]


@dataclass(frozen=True)
class Piece:
    type: PieceType
    color: PlayerColor

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # upper case: White pieces, lower case: Black pieces
        if character.lower() not in FEN_TO_PIECE:
            raise InvalidBoardNotationError(
                f"Unknown piece character {character!r}. Pick one from {''.join(FEN_TO_PIECE)} (or upper case)."
            )
        color = PlayerColor.WHITE if character.isupper() else PlayerColor.BLACK
        return cls(FEN_TO_PIECE[character.lower()], color)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.type].upper()
            if self.color == PlayerColor.WHITE
            else PIECE_TO_FEN[self.type].lower()
        )


def initial_supply() -> AvailablePieces:
    """A fresh copy of the supply table for both players (never hand out INITIAL_PIECES itself)"""
    return {color: dict(INITIAL_PIECES) for color in PlayerColor}
