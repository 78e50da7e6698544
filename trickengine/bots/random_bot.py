"""Random bot that plays random cards."""

import random

from trickengine.bots.base_bot import BaseBot
from trickengine.models.card import Card
from trickengine.models.trick_game import TrickGame


class RandomBot(BaseBot):
    """Bot that makes completely random decisions.

    Serves as a baseline opponent and drives simulated games.
    """

    def __init__(self, player_index: int, seed: int | None = None) -> None:
        """Initialize random bot."""
        super().__init__(player_index)
        self._rng = random.Random(seed)  # noqa: S311

    def pick_card(self, _game: TrickGame, hand: list[Card]) -> int:
        """Pick a random card from hand.

        Args:
            _game: Current game state
            hand: Bot's remaining cards

        Returns:
            Random index into hand

        """
        return self._rng.randrange(len(hand))
