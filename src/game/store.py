"""
The single place where the state of the game lives.

Observer pattern: the UI subscribes a callback and gets the full new GameState after every command.
Commands are mechanical: the store does not check the movement rules (ask the rule engine in moves.py first),
but it does refuse requests that would corrupt the state (squares off the board, placing without supply, ...).
"""

import logging
from dataclasses import replace
from typing import Callable

from src.core.exceptions import InvalidPreconditionError
from src.core.shared_types import PlayerColor
from src.game.board import DEFAULT_BOARD_SIZE
from src.game.pieces import Piece
from src.game.position import Position
from src.game.state import GameState, Selection

logger = logging.getLogger(__name__)

Subscriber = Callable[[GameState], None]
Unsubscribe = Callable[[], None]


class GameStore:
    """Holds exactly one GameState and publishes a new snapshot after every command."""

    def __init__(self, size: int = DEFAULT_BOARD_SIZE) -> None:
        self._state = GameState.initial(size)
        self._subscribers: list[Subscriber] = []

    @property
    def state(self) -> GameState:
        return self._state.snapshot()

    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        """
        Register a callback. It is called right away with the current state, then again after every command.

        Returns a function that removes the callback again.
        """
        self._subscribers.append(callback)
        callback(self._state.snapshot())

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # -- COMMANDS ---
    def reset(self, size: int = DEFAULT_BOARD_SIZE) -> None:
        logger.debug("Reset to an empty %dx%d board", size, size)
        self._commit(GameState.initial(size))

    def select_piece(self, piece: Piece, position: Position) -> None:
        self._commit(replace(self._state, selected_piece=Selection(piece, position)))

    def clear_selection(self) -> None:
        self._commit(replace(self._state, selected_piece=None))

    def place_piece(self, piece: Piece, position: Position) -> None:
        """
        Put a piece from the supply onto an empty square
        ----

        1. write the piece on the board
        2. take one piece of that type out of the player's supply
        3. hand the turn to the other player, drop the selection

        NOTE: no winner check here, the caller runs check_winner() and calls set_winner() afterwards.
        """
        state = self._state
        if not state.board.is_within_bounds(position):
            raise InvalidPreconditionError(
                f"Cannot place on {position}: outside the {state.board_size}x{state.board_size} board."
            )
        if state.board.piece(position) is not None:
            raise InvalidPreconditionError(
                f"Cannot place on {position}: square is occupied by {state.board.piece(position)}."
            )
        if state.remaining(piece) <= 0:
            raise InvalidPreconditionError(
                f"No {piece.color} {piece.type} left to place."
            )

        board = state.board.copy()
        board.place_piece(piece, position)

        available_pieces = {
            color: dict(supply) for color, supply in state.available_pieces.items()
        }
        available_pieces[piece.color][piece.type] -= 1

        logger.debug("%s %s placed on %s", piece.color, piece.type, position)
        self._commit(
            replace(
                state,
                board=board,
                current_player=state.current_player.opponent,
                available_pieces=available_pieces,
                selected_piece=None,
            )
        )

    def move_piece(self, from_: Position, to: Position) -> None:
        """
        Move whatever stands on `from_` to `to`, taking anything that was standing there.

        While the board is still completely empty there is nothing to move: the state stays as it is (subscribers are still notified).
        """
        state = self._state
        for position in (from_, to):
            if not state.board.is_within_bounds(position):
                raise InvalidPreconditionError(
                    f"Cannot move via {position}: outside the {state.board_size}x{state.board_size} board."
                )

        if state.board.is_empty():
            logger.debug("Ignored move %s -> %s on an empty board", from_, to)
            self._commit(state)
            return

        board = state.board.copy()
        board.move_piece(from_, to)

        logger.debug("Moved %s -> %s", from_, to)
        self._commit(
            replace(
                state,
                board=board,
                current_player=state.current_player.opponent,
                selected_piece=None,
            )
        )

    def set_winner(self, color: PlayerColor) -> None:
        """Only records the winner: board and turn stay exactly as they were after the winning move."""
        winner = self._state.winner
        if winner is not None and winner != color:
            raise InvalidPreconditionError(
                f"Game was already won by {winner}, cannot hand the win to {color}."
            )
        logger.debug("Winner set to %s", color)
        self._commit(replace(self._state, winner=color))

    # -- Internal helpers --
    def _commit(self, new_state: GameState) -> None:
        """
        Swap in the new state, then notify subscribers in the order they subscribed.

        Every subscriber gets its own copy and is called, even if an earlier one raised.
        The first error is raised again once everybody has been notified.
        """
        self._state = new_state
        errors: list[Exception] = []
        for callback in list(self._subscribers):
            try:
                callback(new_state.snapshot())
            except Exception as error:
                logger.exception("Subscriber %r failed", callback)
                errors.append(error)
        if errors:
            raise errors[0]


# The process-wide store the presentation code talks to
game_store = GameStore()
