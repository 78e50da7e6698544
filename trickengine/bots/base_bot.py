"""Base class for all bot strategies."""

from abc import ABC, abstractmethod

from trickengine.models.card import Card
from trickengine.models.trick_game import TrickGame


class BaseBot(ABC):
    """Abstract base class for bot strategies.

    All bot implementations must inherit from this class and implement
    pick_card().
    """

    def __init__(self, player_index: int) -> None:
        """Initialize the bot.

        Args:
            player_index: Seat index of the player this bot controls

        """
        self.player_index = player_index

    @abstractmethod
    def pick_card(self, game: TrickGame, hand: list[Card]) -> int:
        """Pick a card to play in the current trick.

        Args:
            game: Current game state
            hand: Bot's remaining cards

        Returns:
            Index into hand of the card to play

        """

    def play_turn(self, game: TrickGame) -> Card | list[Card] | None:
        """Play to the trick if it is this bot's turn."""
        if game.whos_turn != self.player_index:
            return None
        hand = game.get_player(self.player_index).hand
        if not hand:
            return None
        return game.play_card_or_group_to_trick(self.player_index, self.pick_card(game, hand))
