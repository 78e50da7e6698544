"""Game domain models."""

from trickengine.models.card import Card, compare_ids, standard_cards
from trickengine.models.deck import Deck, DeckOptions
from trickengine.models.enums import GamePhase, Suit, Turn
from trickengine.models.game import Game, GameOptions
from trickengine.models.player import Player
from trickengine.models.trick_game import TrickGame

__all__ = [
    "Card",
    "Deck",
    "DeckOptions",
    "Game",
    "GameOptions",
    "GamePhase",
    "Player",
    "Suit",
    "TrickGame",
    "Turn",
    "compare_ids",
    "standard_cards",
]
