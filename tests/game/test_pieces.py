"""Unit tests for /src/game/pieces.py"""

from dataclasses import FrozenInstanceError

import pytest

from src.core.exceptions import InvalidBoardNotationError
from src.game.pieces import (
    FEN_TO_PIECE,
    INITIAL_PIECES,
    PIECE_TO_FEN,
    Piece,
    PieceType,
    PlayerColor,
    initial_supply,
)


@pytest.mark.parametrize("char", [char.upper() for char in FEN_TO_PIECE.keys()])
def test_creating_white_piece_from_fen(char: str) -> None:
    """Capital letters are used for white pieces"""
    piece = Piece.from_fen(char)
    assert piece.type == FEN_TO_PIECE[char.lower()]
    assert piece.color == PlayerColor.WHITE


@pytest.mark.parametrize("char", [char.lower() for char in FEN_TO_PIECE.keys()])
def test_creating_black_piece_from_fen(char: str) -> None:
    """Lower case letters are used for black pieces"""
    piece = Piece.from_fen(char)
    assert piece.type == FEN_TO_PIECE[char.lower()]
    assert piece.color == PlayerColor.BLACK


@pytest.mark.parametrize("piece_type", [piece_type for piece_type in PieceType])
def test_pieces_to_fen(piece_type: PieceType) -> None:
    assert Piece(piece_type, PlayerColor.WHITE).to_fen() == PIECE_TO_FEN[piece_type].upper()
    assert Piece(piece_type, PlayerColor.BLACK).to_fen() == PIECE_TO_FEN[piece_type].lower()


@pytest.mark.parametrize("char", ["k", "K", "x", "1", "/"])
def test_unknown_piece_character(char: str) -> None:
    """There is no king in this game (and obviously no other letters)"""
    with pytest.raises(InvalidBoardNotationError):
        Piece.from_fen(char)


def test_pieces_are_immutable() -> None:
    piece = Piece(PieceType.PAWN, PlayerColor.WHITE)
    with pytest.raises(FrozenInstanceError):
        piece.type = PieceType.QUEEN  # type: ignore[misc]


def test_pieces_compare_by_value() -> None:
    assert Piece(PieceType.ROOK, PlayerColor.BLACK) == Piece.from_fen("r")
    assert Piece(PieceType.ROOK, PlayerColor.BLACK) != Piece.from_fen("R")


def test_supply_table() -> None:
    assert INITIAL_PIECES == {
        PieceType.ROOK: 2,
        PieceType.BISHOP: 2,
        PieceType.KNIGHT: 2,
        PieceType.PAWN: 8,
        PieceType.QUEEN: 1,
    }


def test_initial_supply_is_a_fresh_copy() -> None:
    """Changing one player's (or one game's) supply must never leak into the table or the other player."""
    supply = initial_supply()
    assert supply == {PlayerColor.WHITE: INITIAL_PIECES, PlayerColor.BLACK: INITIAL_PIECES}

    supply[PlayerColor.WHITE][PieceType.PAWN] -= 1
    assert supply[PlayerColor.BLACK][PieceType.PAWN] == 8
    assert INITIAL_PIECES[PieceType.PAWN] == 8
    assert initial_supply()[PlayerColor.WHITE][PieceType.PAWN] == 8


def test_opponent_color() -> None:
    assert PlayerColor.WHITE.opponent == PlayerColor.BLACK
    assert PlayerColor.BLACK.opponent == PlayerColor.WHITE
