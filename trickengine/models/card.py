"""Card model and trick valuation."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import total_ordering

from trickengine.constants import (
    LEAD_SUIT_BAND,
    MAX_RANK,
    MIN_RANK,
    RANKS_PER_SUIT,
    TRUMP_RANK_BAND,
    TRUMP_SUIT_BAND,
)
from trickengine.models.enums import Suit

_FACE_NAMES = {11: "J", 12: "Q", 13: "K", 14: "A"}


@total_ordering
@dataclass(frozen=True)
class Card:
    """Represents a playing card.

    Attributes:
        rank: Card rank, 2-14 (Ace high)
        suit: Card suit
        id: Identity used for ordering hands, unique per rank and suit

    """

    rank: int
    suit: Suit
    id: int = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate rank and derive the card id."""
        if isinstance(self.rank, bool) or not isinstance(self.rank, int):
            msg = f"rank must be an int; received rank={self.rank!r}"
            raise TypeError(msg)
        if not MIN_RANK <= self.rank <= MAX_RANK:
            msg = f"rank must be in {MIN_RANK}..{MAX_RANK}; received rank={self.rank}"
            raise ValueError(msg)
        suit = Suit(self.suit)
        # Frozen dataclass: assign derived fields through object.__setattr__
        object.__setattr__(self, "suit", suit)
        object.__setattr__(self, "id", int(suit) * RANKS_PER_SUIT + (self.rank - MIN_RANK))

    def to_trick_rank(
        self,
        lead_suit: Suit | None,
        trump_suit: Suit | None = None,
        trump_rank: int | None = None,
    ) -> int:
        """Value of this card within a trick.

        Trump-rank cards beat trump-suit cards, which beat lead-suit cards,
        which beat everything else. Within a band the higher rank wins.

        Args:
            lead_suit: Suit led this trick (None if nothing has been led)
            trump_suit: Trump suit (None for no trump)
            trump_rank: Rank that outranks all other cards (None if unused)

        Returns:
            Comparable trick value

        """
        if trump_rank is not None and self.rank == trump_rank:
            return TRUMP_RANK_BAND + (1 if self.suit == trump_suit else 0)
        if trump_suit is not None and self.suit == trump_suit:
            return TRUMP_SUIT_BAND + self.rank
        if lead_suit is not None and self.suit == lead_suit:
            return LEAD_SUIT_BAND + self.rank
        return self.rank

    @property
    def sort_key(self) -> int:
        """Key ordering cards by id."""
        return self.id

    def __lt__(self, other: object) -> bool:
        """Order cards by id."""
        if not isinstance(other, Card):
            return NotImplemented
        return self.id < other.id

    def __str__(self) -> str:
        """Return string representation of card."""
        return f"{_FACE_NAMES.get(self.rank, self.rank)}{self.suit.symbol}"


def compare_ids(a: Card, b: Card) -> int:
    """Compare cards by their ids (negative, zero or positive)."""
    return a.id - b.id


def standard_cards(
    ranks: Iterable[int] | None = None, suits: Iterable[Suit] | None = None
) -> list[Card]:
    """Build one copy of a card set, ordered by id.

    Args:
        ranks: Ranks to include (defaults to 2 through Ace)
        suits: Suits to include (defaults to all four)

    """
    ranks = list(ranks) if ranks is not None else list(range(MIN_RANK, MAX_RANK + 1))
    suits = list(suits) if suits is not None else list(Suit)
    return [Card(rank, suit) for suit in sorted(Suit(s) for s in suits) for rank in sorted(ranks)]
