"""Trick-taking game model."""

from collections.abc import Mapping, Sequence
from typing import Any

from trickengine.models.card import Card
from trickengine.models.enums import Suit, Turn
from trickengine.models.game import Game, GameOptions
from trickengine.models.player import TableEntry


def _lead_card(entry: TableEntry) -> Card:
    """Card that sets the suit of a table entry (first card of a group)."""
    return entry if isinstance(entry, Card) else entry[0]


class TrickGame(Game):
    """Game where cards are played to the table one trick at a time.

    Each seated player contributes one card (or group) per trick, starting
    with the player at who_starts_round and continuing in seat order.

    Attributes:
        who_starts_round: Seat index of the player who leads the trick (None if unset)
        trump_suit: Suit that beats every other suit (None for no trump)
        trump_rank: Rank that beats every other card (None if unused)

    """

    def __init__(
        self,
        min_players: int = 1,
        max_players: int | None = None,
        options: GameOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """Create a trick game with no starter and no trump."""
        super().__init__(min_players, max_players, options)
        self.who_starts_round: int | None = None
        self.trump_suit: Suit | None = None
        self.trump_rank: int | None = None

    @property
    def trick(self) -> list[TableEntry]:
        """Cards in the current trick (the table)."""
        return self.table

    @property
    def whos_turn(self) -> int | Turn | None:
        """Seat index of the player who plays next.

        Returns:
            Turn.NOT_STARTED if no starter is set, None once every player has
            played to the trick, otherwise the seat index

        """
        if self.who_starts_round is None:
            return Turn.NOT_STARTED
        if len(self.trick) >= self.n_players:
            return None
        return (self.who_starts_round + len(self.trick)) % self.n_players

    def play_card_or_group_to_trick(
        self, player_index: int, card_indices: int | Sequence[int]
    ) -> TableEntry | None:
        """Play to the trick, but only if it is this player's turn.

        Returns:
            The played card or group, or None if it is not this player's turn

        """
        whos_turn = self.whos_turn
        if isinstance(whos_turn, Turn) or whos_turn is None or whos_turn != player_index:
            return None
        return self.play_card_or_group_to_table(player_index, card_indices)

    @property
    def lead_suit(self) -> Suit | None:
        """Suit of the first card played to the current trick.

        This is the card played by the player at who_starts_round, which is
        trick[0] because the trick holds cards in play order.
        """
        if not self.trick:
            return None
        return _lead_card(self.trick[0]).suit

    def _entry_rank(self, entry: TableEntry, lead_suit: Suit | None) -> int:
        cards = [entry] if isinstance(entry, Card) else entry
        return max(c.to_trick_rank(lead_suit, self.trump_suit, self.trump_rank) for c in cards)

    @property
    def trick_position_winner(self) -> int | None:
        """Position within the trick of the winning card, once the trick is complete."""
        if self.whos_turn is not None:
            return None
        lead_suit = self.lead_suit
        winner_position = None
        max_val = -1
        for i, entry in enumerate(self.trick):
            val = self._entry_rank(entry, lead_suit)
            # Strict comparison: the first of equal cards wins
            if val > max_val:
                max_val = val
                winner_position = i
        return winner_position

    @property
    def trick_winner(self) -> int | None:
        """Seat index of the player who won the trick.

        None until every player has played to the trick.
        """
        position = self.trick_position_winner
        if position is None:
            return None
        return (self.who_starts_round + position) % self.n_players

    def start_next_trick(self, player_index: int) -> None:
        """Make a player the leader of the next trick."""
        self.who_starts_round = self.get_player(player_index).index
