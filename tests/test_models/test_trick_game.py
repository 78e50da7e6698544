"""Tests for trick turn order and winner resolution."""

import pytest

from trickengine.errors import InvalidPlayerError
from trickengine.models.enums import Suit, Turn
from trickengine.models.game import GameOptions
from trickengine.models.trick_game import TrickGame


def _play_in_turn(game: TrickGame) -> None:
    """Each player in turn plays their lowest card."""
    while game.whos_turn is not None:
        assert game.play_card_or_group_to_trick(game.whos_turn, 0) is not None


class TestTurnOrder:
    """Test whose turn it is."""

    def test_no_turn_before_starter_is_set(self, trick_game):
        """Without a starter nobody may play."""
        assert trick_game.whos_turn is Turn.NOT_STARTED
        assert not trick_game.whos_turn
        assert trick_game.whos_turn is not None

    def test_turn_follows_seat_order(self, trick_game):
        """Players play in seat order from the starter."""
        trick_game.deal_cards(2)
        trick_game.who_starts_round = 0
        seen = []
        while trick_game.whos_turn is not None:
            seen.append(trick_game.whos_turn)
            trick_game.play_card_or_group_to_trick(trick_game.whos_turn, 0)
        assert seen == [0, 1, 2, 3]
        assert trick_game.whos_turn is None

    def test_turn_wraps_around_the_table(self, trick_game):
        """A trick started late in the seating wraps back to seat 0."""
        trick_game.deal_cards(2)
        trick_game.who_starts_round = 2
        seen = []
        while trick_game.whos_turn is not None:
            seen.append(trick_game.whos_turn)
            trick_game.play_card_or_group_to_trick(trick_game.whos_turn, 0)
        assert seen == [2, 3, 0, 1]

    def test_out_of_turn_play_is_declined(self, trick_game):
        """Only the player whose turn it is may play."""
        trick_game.deal_cards(2)
        trick_game.who_starts_round = 1
        assert trick_game.play_card_or_group_to_trick(0, 0) is None
        assert trick_game.trick == []
        assert trick_game.players[0].n_cards == 2

    def test_no_play_before_start(self, trick_game):
        """Plays are declined until a starter is set."""
        trick_game.deal_cards(1)
        assert trick_game.play_card_or_group_to_trick(0, 0) is None

    def test_trick_is_table(self, trick_game):
        """The trick is the table."""
        assert trick_game.trick is trick_game.table


class TestLeadSuit:
    """Test lead suit detection."""

    def test_empty_trick(self, trick_game):
        """No lead suit before anyone plays."""
        assert trick_game.lead_suit is None

    def test_lead_suit_is_first_card_played(self, trick_game, give_hands, c):
        """The first card played sets the lead suit, whoever started."""
        give_hands(trick_game, [[c("2C")], [c("3D")], [c("4H")], [c("5S")]])
        trick_game.who_starts_round = 2
        trick_game.play_card_or_group_to_trick(2, 0)
        assert trick_game.lead_suit == Suit.HEARTS
        trick_game.play_card_or_group_to_trick(3, 0)
        trick_game.play_card_or_group_to_trick(0, 0)
        assert trick_game.lead_suit == Suit.HEARTS

    def test_lead_suit_of_group(self, trick_game, give_hands, c):
        """A group leads with the suit of its first card."""
        give_hands(trick_game, [[c("2C"), c("9D")], [], [], []])
        trick_game.who_starts_round = 0
        trick_game.play_card_or_group_to_trick(0, [1, 0])
        assert trick_game.lead_suit == Suit.DIAMONDS


class TestTrickWinner:
    """Test trick winner resolution."""

    def test_no_winner_until_complete(self, trick_game):
        """trick_winner is None while players still have to play."""
        trick_game.deal_cards(1)
        assert trick_game.trick_winner is None
        trick_game.who_starts_round = 0
        trick_game.play_card_or_group_to_trick(0, 0)
        assert trick_game.trick_winner is None

    def test_highest_lead_suit_wins(self, trick_game, give_hands, c):
        """Without trump, the highest card of the lead suit wins."""
        give_hands(trick_game, [[c("10H")], [c("AH")], [c("KS")], [c("2H")]])
        trick_game.who_starts_round = 0
        _play_in_turn(trick_game)
        assert trick_game.whos_turn is None
        assert trick_game.trick_winner == 1

    def test_off_suit_cannot_win(self, trick_game, give_hands, c):
        """High off-suit cards lose to the lead suit."""
        give_hands(trick_game, [[c("3C")], [c("AD")], [c("AH")], [c("AS")]])
        trick_game.who_starts_round = 0
        _play_in_turn(trick_game)
        assert trick_game.trick_winner == 0

    def test_trump_beats_lead_suit(self, trick_game, give_hands, c):
        """Any trump beats the lead suit."""
        give_hands(trick_game, [[c("10H")], [c("AH")], [c("2S")], [c("KH")]])
        trick_game.trump_suit = Suit.SPADES
        trick_game.who_starts_round = 0
        _play_in_turn(trick_game)
        assert trick_game.trick_winner == 2

    def test_trump_rank_beats_trump_suit(self, trick_game, give_hands, c):
        """A trump-rank card beats the trump suit."""
        give_hands(trick_game, [[c("10H")], [c("AS")], [c("2D")], [c("KH")]])
        trick_game.trump_suit = Suit.SPADES
        trick_game.trump_rank = 2
        trick_game.who_starts_round = 0
        _play_in_turn(trick_game)
        assert trick_game.trick_winner == 2

    def test_first_played_wins_ties(self, give_hands, c):
        """With two decks, the first of two identical cards wins."""
        game = TrickGame(4, 4, GameOptions(n_decks=2))
        for name in "ABCD":
            game.add_player(name)
        give_hands(game, [[c("10H")], [c("AH")], [c("5H")], [c("AH")]])
        game.who_starts_round = 0
        _play_in_turn(game)
        assert game.trick_winner == 1

    def test_winner_is_a_seat_index(self, trick_game, give_hands, c):
        """When the trick starts at seat 2, positions map back to seats."""
        give_hands(trick_game, [[c("AH")], [c("2S")], [c("10H")], [c("QH")]])
        trick_game.who_starts_round = 2
        _play_in_turn(trick_game)
        # Played in order: seat 2 (10H), seat 3 (QH), seat 0 (AH), seat 1 (2S)
        assert trick_game.trick_position_winner == 2
        assert trick_game.trick_winner == 0

    def test_group_ranks_as_best_card(self, trick_game, give_hands, c):
        """A group is valued by its best card."""
        give_hands(
            trick_game, [[c("10H")], [c("2H"), c("AH")], [c("KH")], [c("3C")]]
        )
        trick_game.who_starts_round = 0
        trick_game.play_card_or_group_to_trick(0, 0)
        trick_game.play_card_or_group_to_trick(1, [0, 1])
        trick_game.play_card_or_group_to_trick(2, 0)
        trick_game.play_card_or_group_to_trick(3, 0)
        assert trick_game.trick_winner == 1

    def test_capture_and_lead_next_trick(self, trick_game):
        """The winner captures the trick and leads the next one."""
        trick_game.deal_cards(2)
        trick_game.who_starts_round = 0
        _play_in_turn(trick_game)
        winner = trick_game.trick_winner
        trick_game.capture_cards_for_player(winner)
        trick_game.start_next_trick(winner)
        assert trick_game.players[winner].captured
        assert trick_game.trick == []
        assert trick_game.whos_turn == winner

    def test_start_next_trick_invalid_seat(self, trick_game):
        """Only seated players can lead."""
        with pytest.raises(InvalidPlayerError):
            trick_game.start_next_trick(4)
