"""Enums for cards and game lifecycle."""

from enum import Enum, IntEnum


class Suit(IntEnum):
    """Card suits, ordered as they sort within a hand."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3

    @property
    def symbol(self) -> str:
        """Return the suit symbol."""
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}


class GamePhase(str, Enum):
    """Game phases derived from the number of seated players."""

    FORMING = "FORMING"  # fewer than min_players
    READY = "READY"
    OVERFULL = "OVERFULL"  # more than max_players, every mutation fails


class Turn(Enum):
    """Turn marker for a trick whose starter has not been chosen."""

    NOT_STARTED = "NOT_STARTED"

    def __bool__(self) -> bool:
        """Evaluate as false so callers can treat it like a missing value."""
        return False
