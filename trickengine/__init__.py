"""In-memory rules engine for turn-based, trick-taking card games."""

from trickengine.errors import (
    CapacityError,
    ConfigurationError,
    DuplicateNameError,
    InsufficientCardsError,
    InvalidCardError,
    InvalidPlayerError,
    NonEmptyHandError,
    TrickEngineError,
)
from trickengine.models import (
    Card,
    Deck,
    DeckOptions,
    Game,
    GameOptions,
    GamePhase,
    Player,
    Suit,
    TrickGame,
    Turn,
)

__all__ = [
    "CapacityError",
    "Card",
    "ConfigurationError",
    "Deck",
    "DeckOptions",
    "DuplicateNameError",
    "Game",
    "GameOptions",
    "GamePhase",
    "InsufficientCardsError",
    "InvalidCardError",
    "InvalidPlayerError",
    "NonEmptyHandError",
    "Player",
    "Suit",
    "TrickEngineError",
    "TrickGame",
    "Turn",
]
