"""Requests and Response models exchanged with the presentation layer"""

from typing import Optional, Self

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import PieceType, PlayerColor
from src.game.board import DEFAULT_BOARD_SIZE, MIN_BOARD_SIZE
from src.game.pieces import Piece
from src.game.position import Position
from src.game.state import GameState


# --- SHARED BUILDING BLOCKS ---
class PositionModel(BaseModel):
    row: int
    col: int

    @field_validator(*["row", "col"])
    @classmethod
    def validate_coordinate(cls, value: int) -> int:
        # the upper bound depends on the board, which is only known by the rule engine / store
        if value < 0:
            raise InvalidRequestError(f"Coordinates cannot be negative, got {value}.")
        return value

    @classmethod
    def from_position(cls, position: Position) -> Self:
        return cls(row=position.row, col=position.col)

    def to_position(self) -> Position:
        return Position(self.row, self.col)


class PieceModel(BaseModel):
    type: PieceType
    color: PlayerColor

    @classmethod
    def from_piece(cls, piece: Piece) -> Self:
        return cls(type=piece.type, color=piece.color)

    def to_piece(self) -> Piece:
        return Piece(self.type, self.color)


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    board_size: int = DEFAULT_BOARD_SIZE

    @field_validator("board_size")
    @classmethod
    def validate_board_size(cls, value: int) -> int:
        if value < MIN_BOARD_SIZE:
            raise InvalidRequestError(
                f"Board size must be at least {MIN_BOARD_SIZE}, got {value}."
            )
        return value


class PlacePieceRequest(BaseModel):
    piece: PieceModel
    position: PositionModel


class MovePieceRequest(BaseModel):
    from_position: PositionModel
    to_position: PositionModel


class SelectPieceRequest(BaseModel):
    piece: PieceModel
    position: PositionModel


class LegalMovesRequest(BaseModel):
    position: PositionModel


# --- RESPONSE MODELS ---
class SelectionModel(BaseModel):
    piece: PieceModel
    position: PositionModel


class GameStateResponse(BaseModel):
    board: list[list[Optional[PieceModel]]]
    board_fen: str
    board_size: int
    current_player: PlayerColor
    selected_piece: Optional[SelectionModel]
    available_pieces: dict[PlayerColor, dict[PieceType, int]]
    winner: Optional[PlayerColor]

    @classmethod
    def from_state(cls, state: GameState) -> Self:
        selection = state.selected_piece
        return cls(
            board=[
                [PieceModel.from_piece(cell) if cell else None for cell in row]
                for row in state.board.grid
            ],
            board_fen=state.board.to_fen(),
            board_size=state.board_size,
            current_player=state.current_player,
            selected_piece=(
                SelectionModel(
                    piece=PieceModel.from_piece(selection.piece),
                    position=PositionModel.from_position(selection.position),
                )
                if selection is not None
                else None
            ),
            available_pieces=state.available_pieces,
            winner=state.winner,
        )


class LegalMovesResponse(BaseModel):
    position: PositionModel
    piece: PieceModel
    legal_moves: list[PositionModel]
