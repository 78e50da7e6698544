"""Player model."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any

from trickengine.constants import RANKS_PER_SUIT, SUITS_COUNT
from trickengine.errors import InvalidCardError
from trickengine.models.card import Card, compare_ids

# An entry on the table: a single card or a group played together
TableEntry = Card | list[Card]
CardParser = Callable[[Card], Any]

_RADIX = RANKS_PER_SUIT


def flatten_entries(entries: Sequence[TableEntry]) -> list[Card]:
    """Flatten table entries into a list of cards, in play order."""
    cards: list[Card] = []
    for entry in entries:
        if isinstance(entry, Card):
            cards.append(entry)
        else:
            cards.extend(entry)
    return cards


@dataclass
class Player:
    """Represents a player seated at a game.

    Attributes:
        name: Display name, unique within a game
        index: Seat index (turn order), assigned when joining
        hand: Cards in hand, kept sorted ascending by card id
        captured: Cards won from the table

    """

    name: str = "player1"
    index: int = 0
    hand: list[Card] = field(default_factory=list)
    captured: list[Card] = field(default_factory=list)

    @property
    def n_cards(self) -> int:
        """Number of cards in hand."""
        return len(self.hand)

    def has_cards(self) -> bool:
        """Check if the player still holds any card."""
        return bool(self.hand)

    def _sort_last_card(self) -> "Player":
        """Sort the last card into the rest of the already sorted hand."""
        hand = self.hand
        i = len(hand) - 1
        while i > 0 and compare_ids(hand[i], hand[i - 1]) < 0:
            hand[i], hand[i - 1] = hand[i - 1], hand[i]
            i -= 1
        return self

    def add_card_to_hand(self, card: Card) -> "Player":
        """Add a card to the hand, keeping the hand sorted.

        Raises:
            InvalidCardError: If card is not a Card

        """
        if not isinstance(card, Card):
            msg = f"card must be instance of Card; received card={card!r}"
            raise InvalidCardError(msg)
        self.hand.append(card)
        return self._sort_last_card()

    def _resolve_indices(self, indices: int | Sequence[int]) -> list[int] | None:
        """Validate hand indices, returning them as a list or None if unusable."""
        if isinstance(indices, int) and not isinstance(indices, bool):
            positions = [indices]
        elif isinstance(indices, (list, tuple)) and indices:
            positions = list(indices)
        else:
            return None

        for i in positions:
            if isinstance(i, bool) or not isinstance(i, int):
                return None
            if not 0 <= i < len(self.hand):
                return None
        if len(set(positions)) != len(positions):
            return None
        return positions

    def play_card_or_group_from_hand(
        self,
        indices: int | Sequence[int],
        table: list[TableEntry],
        parse_cards: CardParser | None = None,
    ) -> TableEntry | None:
        """Play one card, or a group of cards, from hand to the table.

        A single index plays one card. A list of indices plays a group, which
        lands on the table as one entry in the order the indices were given.

        Args:
            indices: Hand index, or list of hand indices for a group
            table: Table the cards are appended to
            parse_cards: Transform applied to each played card

        Returns:
            The played card or group, or None if the indices were not playable

        Raises:
            InvalidCardError: If parse_cards does not return a Card

        """
        positions = self._resolve_indices(indices)
        if positions is None:
            return None

        parse = parse_cards or (lambda card: card)
        played = [parse(self.hand[i]) for i in positions]
        for card in played:
            if not isinstance(card, Card):
                msg = f"parse_cards must return a Card; received {card!r}"
                raise InvalidCardError(msg)

        # Remove from the highest index down so earlier positions stay valid
        for i in sorted(positions, reverse=True):
            del self.hand[i]

        entry: TableEntry = played if isinstance(indices, (list, tuple)) else played[0]
        table.append(entry)
        return entry

    def capture_cards(self, table: list[TableEntry]) -> list[Card]:
        """Move every card on the table into the captured pile.

        The table is emptied in place.

        Returns:
            The captured cards

        """
        cards = flatten_entries(table)
        self.captured.extend(cards)
        table.clear()
        return cards

    def clear_cards_dangerously(self) -> None:
        """Empty hand and captured pile unconditionally."""
        self.hand = []
        self.captured = []

    def sort_hand(self) -> None:
        """Radix sort the hand by card id.

        Only needed when a hand was rebuilt from a log and insertion order
        cannot be trusted. Stable, so duplicate ids keep their order.
        """
        hand = self.hand
        exp = 1
        while exp < _RADIX * SUITS_COUNT:
            buckets: list[list[Card]] = [[] for _ in range(_RADIX)]
            for card in hand:
                buckets[(card.id // exp) % _RADIX].append(card)
            hand = [card for bucket in buckets for card in bucket]
            exp *= _RADIX
        self.hand = hand

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.name} (seat {self.index}): {len(self.hand)} in hand, {len(self.captured)} captured"
