"""Tests for the Player model."""

import random

import pytest

from trickengine.errors import InvalidCardError
from trickengine.models.card import Card, standard_cards
from trickengine.models.enums import Suit
from trickengine.models.player import Player


@pytest.fixture
def player(c) -> Player:
    """Player holding 2♣, 5♥ and K♠."""
    player = Player("alice")
    for text in ["KS", "2C", "5H"]:
        player.add_card_to_hand(c(text))
    return player


class TestHand:
    """Test adding cards to a hand."""

    def test_hand_stays_sorted(self, c):
        """Cards are inserted in id order whatever order they arrive in."""
        player = Player("alice")
        cards = standard_cards()
        random.Random(3).shuffle(cards)
        for card in cards:
            player.add_card_to_hand(card)
            ids = [x.id for x in player.hand]
            assert ids == sorted(ids)
        assert len(player.hand) == 52

    def test_add_returns_self(self, c):
        """add_card_to_hand can be chained."""
        player = Player("alice")
        assert player.add_card_to_hand(c("AH")).add_card_to_hand(c("2H")) is player
        assert player.hand == [c("2H"), c("AH")]

    def test_rejects_non_card(self, player):
        """Only Card instances go into a hand."""
        with pytest.raises(InvalidCardError):
            player.add_card_to_hand("AH")
        assert player.n_cards == 3


class TestPlay:
    """Test playing cards from hand."""

    def test_play_single_card(self, player, c):
        """An int index plays one card."""
        table = []
        played = player.play_card_or_group_from_hand(1, table)
        assert played == c("5H")
        assert table == [c("5H")]
        assert player.hand == [c("2C"), c("KS")]

    def test_play_group(self, player, c):
        """A list of indices plays a group as one table entry, in index order."""
        table = []
        played = player.play_card_or_group_from_hand([2, 0], table)
        assert played == [c("KS"), c("2C")]
        assert table == [[c("KS"), c("2C")]]
        assert player.hand == [c("5H")]

    @pytest.mark.parametrize("indices", [3, -1, [0, 0], [], [0, 5], True, "1", None])
    def test_unplayable_indices_are_declined(self, player, indices):
        """Bad indices return None and leave hand and table untouched."""
        table = []
        assert player.play_card_or_group_from_hand(indices, table) is None
        assert table == []
        assert player.n_cards == 3

    def test_parse_cards_applied(self, player):
        """parse_cards transforms each card before it lands on the table."""
        table = []

        def to_spades(card: Card) -> Card:
            return Card(card.rank, Suit.SPADES)

        player.play_card_or_group_from_hand([0, 1], table, to_spades)
        assert [card.suit for card in table[0]] == [Suit.SPADES, Suit.SPADES]

    def test_parse_cards_must_return_card(self, player):
        """A parser returning something else fails before any mutation."""
        table = []
        with pytest.raises(InvalidCardError):
            player.play_card_or_group_from_hand([0, 1], table, str)
        assert table == []
        assert player.n_cards == 3


class TestCaptureAndClear:
    """Test capturing and clearing cards."""

    def test_capture_flattens_groups(self, player, c):
        """Captured groups are flattened into the captured pile."""
        table = [c("AH"), [c("2D"), c("3D")]]
        captured = player.capture_cards(table)
        assert captured == [c("AH"), c("2D"), c("3D")]
        assert player.captured == captured
        assert table == []

    def test_capture_empties_table_in_place(self, player, c):
        """The table list itself is emptied so aliases see the change."""
        table = [c("AH")]
        alias = table
        player.capture_cards(table)
        assert alias == []

    def test_clear_cards_dangerously(self, player, c):
        """Hand and captured pile are both emptied."""
        player.capture_cards([c("AH")])
        player.clear_cards_dangerously()
        assert player.hand == []
        assert player.captured == []
        assert not player.has_cards()


class TestSortHand:
    """Test the full radix sort used after a replay."""

    def test_sorts_by_id(self):
        """An arbitrary hand ends up ascending by id."""
        player = Player("alice")
        cards = standard_cards()
        random.Random(11).shuffle(cards)
        player.hand = cards
        player.sort_hand()
        assert [c.id for c in player.hand] == list(range(52))

    def test_stable_for_duplicate_ids(self, c):
        """Copies of the same card keep their relative order."""
        first, second = c("5H"), c("5H")
        player = Player("alice")
        player.hand = [c("AS"), first, c("2C"), second]
        player.sort_hand()
        assert player.hand == [c("2C"), c("5H"), c("5H"), c("AS")]
        assert player.hand[1] is first
        assert player.hand[2] is second

    def test_empty_hand(self):
        """Sorting an empty hand is a no-op."""
        player = Player("alice")
        player.sort_hand()
        assert player.hand == []
