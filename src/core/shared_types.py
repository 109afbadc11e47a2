"""
Type definitions used across layers
"""

from enum import StrEnum
from typing import Self


class PlayerColor(StrEnum):
    WHITE = "white"
    BLACK = "black"

    @property
    def opponent(self) -> Self:
        return PlayerColor.BLACK if self == PlayerColor.WHITE else PlayerColor.WHITE


class PieceType(StrEnum):
    ROOK = "rook"
    BISHOP = "bishop"
    KNIGHT = "knight"
    PAWN = "pawn"
    QUEEN = "queen"
