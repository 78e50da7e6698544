"""Exceptions raised by the game engine.

Every error carries an ErrorCode so front ends can translate it.
"""

from enum import StrEnum

__all__ = [
    "CapacityError",
    "ConfigurationError",
    "DuplicateNameError",
    "ErrorCode",
    "InsufficientCardsError",
    "InvalidCardError",
    "InvalidPlayerError",
    "NonEmptyHandError",
    "TrickEngineError",
]


class ErrorCode(StrEnum):
    """Error codes for i18n translation on the frontend."""

    INVALID_CONFIGURATION = "error.invalidConfiguration"
    NOT_ENOUGH_PLAYERS = "error.notEnoughPlayers"
    TOO_MANY_PLAYERS = "error.tooManyPlayers"
    DUPLICATE_NAME = "error.duplicateName"
    NOT_ENOUGH_CARDS = "error.notEnoughCards"
    PLAYER_NOT_FOUND = "error.playerNotFound"
    CARDS_STILL_IN_HAND = "error.cardsStillInHand"
    INVALID_CARD = "error.invalidCard"


class TrickEngineError(Exception):
    """Base class for all game engine errors."""

    code: ErrorCode = ErrorCode.INVALID_CONFIGURATION

    def __init__(self, message: str, code: ErrorCode | None = None) -> None:
        """Store the message and, optionally, a more specific error code."""
        super().__init__(message)
        if code is not None:
            self.code = code


class ConfigurationError(TrickEngineError):
    """Invalid player bounds, options or numeric arguments."""

    code = ErrorCode.INVALID_CONFIGURATION


class CapacityError(TrickEngineError):
    """Too few or too many players for a mutating operation."""

    code = ErrorCode.NOT_ENOUGH_PLAYERS


class DuplicateNameError(TrickEngineError):
    """A seated player already uses the requested name."""

    code = ErrorCode.DUPLICATE_NAME


class InsufficientCardsError(TrickEngineError):
    """The deck cannot supply the requested deal."""

    code = ErrorCode.NOT_ENOUGH_CARDS


class InvalidPlayerError(TrickEngineError):
    """Seat index out of range or not bound to a player."""

    code = ErrorCode.PLAYER_NOT_FOUND


class NonEmptyHandError(TrickEngineError):
    """Safe restart was requested while a player still holds cards."""

    code = ErrorCode.CARDS_STILL_IN_HAND


class InvalidCardError(TrickEngineError):
    """Something other than a Card was passed where a Card is required."""

    code = ErrorCode.INVALID_CARD
