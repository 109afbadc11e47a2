"""
Custom exceptions.

Everything raised on purpose by this package derives from GameError, so the presentation layer can catch a single type.
"""


class GameError(Exception):
    """Top-level exception for anything that went wrong while playing."""


class InvalidPreconditionError(GameError):
    """A caller broke a documented precondition (out-of-range square, exhausted supply, occupied target, ...)"""


class InvalidBoardNotationError(GameError):
    """Board string could not be parsed"""


class GameStateError(GameError):
    """Request does not fit the current phase of the game (e.g. it has already been won)."""


class IllegalMoveError(GameError):
    """The move breaks the movement / placement rules."""


class NotYourTurnError(GameError):
    """Request was made for the color that is not on move."""


class InvalidRequestError(GameError):
    """Boundary validation of an incoming request failed."""
