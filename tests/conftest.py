"""Shared fixtures for engine tests."""

from collections.abc import Callable

import pytest

from trickengine.models.card import Card
from trickengine.models.deck import DeckOptions
from trickengine.models.enums import Suit
from trickengine.models.game import Game, GameOptions
from trickengine.models.trick_game import TrickGame

UNSHUFFLED = GameOptions(deck_options=DeckOptions(shuffle=False))


@pytest.fixture
def trick_game() -> TrickGame:
    """Four seated players (A, B, C, D) at a trick game with an unshuffled deck."""
    game = TrickGame(4, 4, UNSHUFFLED)
    for name in "ABCD":
        game.add_player(name)
    return game


@pytest.fixture
def game() -> Game:
    """Two to four player game with two seated players and a seeded deck."""
    game = Game(2, 4, {"deck_options": {"seed": 1234}})
    game.add_player("alice")
    game.add_player("bob")
    return game


@pytest.fixture
def give_hands() -> Callable[[Game, list[list[Card]]], None]:
    """Put the given cards straight into each seat's hand."""

    def _give(game: Game, hands: list[list[Card]]) -> None:
        for player, cards in zip(game.players, hands, strict=True):
            for card in cards:
                player.add_card_to_hand(card)

    return _give


def card(text: str) -> Card:
    """Build a card from short text like 'AH', '10C' or 'QS'."""
    ranks = {"J": 11, "Q": 12, "K": 13, "A": 14}
    suits = {"C": Suit.CLUBS, "D": Suit.DIAMONDS, "H": Suit.HEARTS, "S": Suit.SPADES}
    rank_text, suit_text = text[:-1], text[-1]
    rank = ranks[rank_text] if rank_text in ranks else int(rank_text)
    return Card(rank, suits[suit_text])


@pytest.fixture
def c() -> Callable[[str], Card]:
    """Card builder from short text."""
    return card
