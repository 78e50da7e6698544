"""Deck model for shuffling and drawing cards."""

import logging
import random
from collections.abc import Iterable
from dataclasses import dataclass, replace

from trickengine.config import settings
from trickengine.constants import MAX_RANK, MIN_RANK
from trickengine.errors import ConfigurationError
from trickengine.models.card import Card, standard_cards
from trickengine.models.enums import Suit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeckOptions:
    """Options describing which cards a deck holds and how it is shuffled.

    Attributes:
        ranks: Ranks in one copy of the set (None for 2 through Ace)
        suits: Suits in one copy of the set (None for all four)
        seed: Shuffle seed (None falls back to settings.shuffle_seed)
        shuffle: Whether initialize() shuffles the rebuilt deck

    """

    ranks: tuple[int, ...] | None = None
    suits: tuple[Suit, ...] | None = None
    seed: int | None = None
    shuffle: bool = True


def _validate_options(options: DeckOptions) -> DeckOptions:
    """Check ranks and coerce suits, raising ConfigurationError on bad values."""
    ranks = options.ranks
    if ranks is not None:
        ranks = tuple(ranks) if isinstance(ranks, Iterable) else (ranks,)
        for rank in ranks:
            valid = isinstance(rank, int) and not isinstance(rank, bool)
            if not valid or not MIN_RANK <= rank <= MAX_RANK:
                msg = f"Deck ranks must be ints in {MIN_RANK}..{MAX_RANK}; received ranks={ranks!r}"
                raise ConfigurationError(msg)
    suits = options.suits
    if suits is not None:
        try:
            suits = tuple(Suit(s) for s in suits)
        except (TypeError, ValueError) as exc:
            msg = f"Unknown suit in deck options; received suits={options.suits!r}"
            raise ConfigurationError(msg) from exc
    return replace(options, ranks=ranks, suits=suits)


class Deck:
    """
    Represents a stack of playing cards.

    Holds n_decks copies of the configured card set. The top of the deck
    is the end of the list.
    """

    def __init__(self, n_decks: int = 1, options: DeckOptions | dict | None = None) -> None:
        """Build and shuffle the deck."""
        if isinstance(n_decks, bool) or not isinstance(n_decks, int) or n_decks < 1:
            msg = f"n_decks must be a positive int; received n_decks={n_decks!r}"
            raise ConfigurationError(msg)
        if isinstance(options, dict):
            try:
                options = DeckOptions(**options)
            except TypeError as exc:
                msg = f"Invalid deck options: {options}"
                raise ConfigurationError(msg) from exc

        self.n_decks = n_decks
        self.options: DeckOptions = _validate_options(options or DeckOptions())
        seed = self.options.seed if self.options.seed is not None else settings.shuffle_seed
        self._rng = random.Random(seed)  # noqa: S311
        self.cards: list[Card] = []
        self.initialize()

    def fill(self) -> None:
        """Fill the deck with n_decks ordered copies of the card set."""
        self.cards = [
            card
            for _ in range(self.n_decks)
            for card in standard_cards(self.options.ranks, self.options.suits)
        ]

    def shuffle(self) -> None:
        """Shuffle the remaining cards in place."""
        self._rng.shuffle(self.cards)

    def initialize(self) -> None:
        """Rebuild the full deck and shuffle it."""
        self.fill()
        if self.options.shuffle:
            self.shuffle()
        logger.debug("Deck initialized with %d cards (n_decks=%d)", len(self.cards), self.n_decks)

    def draw_card(self) -> Card | None:
        """Remove and return the top card, or None if the deck is empty."""
        if not self.cards:
            return None
        return self.cards.pop()

    def cards_remaining(self) -> int:
        """Return number of cards remaining in deck."""
        return len(self.cards)

    def is_empty(self) -> bool:
        """Check if deck is empty."""
        return len(self.cards) == 0

    def __len__(self) -> int:
        """Return number of cards remaining in deck."""
        return len(self.cards)
