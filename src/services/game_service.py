"""
Orchestration between the presentation layer, the rule engine and the store.

The store itself is purely mechanical. This is the caller that asks the rule engine first, then issues the command,
and finally checks whether that move won the game.
"""

import logging

from src.api.models import (
    GameStateResponse,
    LegalMovesRequest,
    LegalMovesResponse,
    MovePieceRequest,
    NewGameRequest,
    PieceModel,
    PlacePieceRequest,
    PositionModel,
    SelectPieceRequest,
)
from src.core.exceptions import GameStateError, IllegalMoveError, NotYourTurnError
from src.core.shared_types import PlayerColor
from src.game.moves import Move, get_valid_moves, is_valid_move
from src.game.pieces import Piece
from src.game.position import Position
from src.game.store import GameStore, game_store
from src.game.winner import check_winner

logger = logging.getLogger(__name__)


class GameService:
    """Rules-enforcing front door to the GameStore."""

    def __init__(self, store: GameStore = game_store) -> None:
        self.store = store

    # -- Presentation layer entrypoints ---
    def new_game(self, request: NewGameRequest) -> GameStateResponse:
        self.store.reset(request.board_size)
        return self.get_game_state()

    def get_game_state(self) -> GameStateResponse:
        return GameStateResponse.from_state(self.store.state)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Squares the piece on the requested square could move to (for highlighting them in the UI)"""
        position = request.position.to_position()
        piece = self._piece_on(position)
        moves = get_valid_moves(self.store.state.board, position, piece)
        return LegalMovesResponse(
            position=request.position,
            piece=PieceModel.from_piece(piece),
            legal_moves=[PositionModel.from_position(move) for move in moves],
        )

    def select_piece(self, request: SelectPieceRequest) -> GameStateResponse:
        self.store.select_piece(
            request.piece.to_piece(), request.position.to_position()
        )
        return self.get_game_state()

    def clear_selection(self) -> GameStateResponse:
        self.store.clear_selection()
        return self.get_game_state()

    def place_piece(self, request: PlacePieceRequest) -> GameStateResponse:
        """
        Attempt to place a piece from the supply
        -----

        1. game must still be running, and it must be your turn
        2. you must have such a piece left, and the square must be an empty one on the board
        3. place it
        4. check whether that completed a line
        """
        move = Move(to=request.position.to_position(), piece=request.piece.to_piece())
        self._assert_in_progress()
        self._assert_your_turn(move.piece.color)
        self._assert_can_place(move)

        try:
            self.store.place_piece(move.piece, move.to)
        finally:
            # a failing subscriber must not leave a completed line without a winner
            self._update_winner()
        return self.get_game_state()

    def move_piece(self, request: MovePieceRequest) -> GameStateResponse:
        """
        Attempt to move a piece that is already on the board
        -----

        1. game must still be running
        2. there must be a piece of the player to move on the from-square
        3. the rule engine must accept the move
        4. move it, then check whether that completed a line
        """
        from_position = request.from_position.to_position()
        self._assert_in_progress()
        piece = self._piece_on(from_position)
        self._assert_your_turn(piece.color)

        move = Move(
            to=request.to_position.to_position(), piece=piece, from_=from_position
        )
        # for the type checker: relocations always have a from-square
        assert move.from_ is not None
        if not is_valid_move(self.store.state.board, move.from_, move.to, move.piece):
            logger.info("Rejected illegal move %s", move)
            raise IllegalMoveError(
                f"{piece.color} {piece.type} cannot move from {move.from_} to {move.to}."
            )

        try:
            self.store.move_piece(move.from_, move.to)
        finally:
            self._update_winner()
        return self.get_game_state()

    # -- Internal helpers --
    def _assert_in_progress(self) -> None:
        winner = self.store.state.winner
        if winner is not None:
            raise GameStateError(f"Game is over: {winner} already won.")

    def _assert_your_turn(self, color: PlayerColor) -> None:
        """You must wait for your turn before placing / moving."""
        player_to_move = self.store.state.current_player
        if color != player_to_move:
            logger.info("Rejected %s request, %s is to move", color, player_to_move)
            raise NotYourTurnError(
                f"It is not your turn. Waiting for {player_to_move} to make a move first."
            )

    def _assert_can_place(self, move: Move) -> None:
        state = self.store.state
        if state.remaining(move.piece) <= 0:
            raise IllegalMoveError(
                f"No {move.piece.color} {move.piece.type} left to place."
            )
        if not state.board.is_within_bounds(move.to):
            raise IllegalMoveError(f"{move.to} is not on the board.")
        if state.board.piece(move.to) is not None:
            raise IllegalMoveError(f"Cannot place on {move.to}: square is occupied.")

    def _piece_on(self, position: Position) -> Piece:
        board = self.store.state.board
        if not board.is_within_bounds(position):
            raise IllegalMoveError(f"{position} is not on the board.")
        piece = board.piece(position)
        if piece is None:
            raise IllegalMoveError(f"There is no piece on {position}.")
        return piece

    def _update_winner(self) -> None:
        winner = check_winner(self.store.state.board)
        if winner is not None:
            logger.info("%s completed a line and wins", winner)
            self.store.set_winner(winner)
