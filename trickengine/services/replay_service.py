"""Replay service for rebuilding a game from its operation log."""

import logging
from collections.abc import Callable, Iterable

from trickengine.errors import InvalidCardError
from trickengine.models.card import Card
from trickengine.models.enums import Suit
from trickengine.models.game import Game
from trickengine.models.game_event import GameEvent, GameEventType, decode_card, decode_cards
from trickengine.models.player import Player
from trickengine.models.trick_game import TrickGame

logger = logging.getLogger(__name__)


def _find_in_hand(player: Player, cards: list[Card]) -> list[int]:
    """Hand indices holding the given cards, matching each copy once."""
    taken: set[int] = set()
    indices = []
    for card in cards:
        for i, held in enumerate(player.hand):
            if i not in taken and held == card:
                taken.add(i)
                indices.append(i)
                break
        else:
            msg = f"Replay out of sync: {card} is not in {player.name}'s hand"
            raise InvalidCardError(msg)
    return indices


class ReplayService:
    """Rebuilds a game by re-issuing recorded operations.

    Hands are restored from the recorded deals and cards are located in the
    hand by identity rather than by index, so the order a hand was stored in
    does not matter. Every hand is radix sorted as the final step.
    """

    def __init__(self, game_factory: Callable[[], Game]) -> None:
        """Initialize the service.

        Args:
            game_factory: Builds an empty game with the same bounds and options as the recorded one

        """
        self.game_factory = game_factory

    def rebuild(self, events: Iterable[GameEvent]) -> Game:
        """Create a fresh game and apply every event to it."""
        game = self.game_factory()
        count = 0
        for event in events:
            self.apply(game, event)
            count += 1
        for player in game.players:
            player.sort_hand()
        logger.info("Replayed %d events into %s", count, game)
        return game

    def apply(self, game: Game, event: GameEvent) -> None:  # noqa: C901
        """Apply a single event to a game."""
        data = event.data
        if event.event_type == GameEventType.PLAYER_ADDED:
            game.add_player(data["name"])
        elif event.event_type == GameEventType.PLAYER_REMOVED:
            game.remove_player(data["name"])
        elif event.event_type == GameEventType.CARDS_DEALT:
            for player, hand in zip(game.players, data["hands"], strict=True):
                player.hand = decode_cards(hand)
                player.sort_hand()
            game.deck.cards = decode_cards(data["deck"])
        elif event.event_type == GameEventType.TRICK_STARTED:
            if not isinstance(game, TrickGame):
                logger.warning("Skipping %s on a game without tricks", event.event_type.value)
                return
            trump_suit = data.get("trump_suit")
            game.who_starts_round = event.player_index
            game.trump_suit = None if trump_suit is None else Suit(trump_suit)
            game.trump_rank = data.get("trump_rank")
        elif event.event_type == GameEventType.CARD_PLAYED:
            player = game.get_player(event.player_index)
            if data.get("group"):
                indices: int | list[int] = _find_in_hand(player, decode_cards(data["cards"]))
            else:
                indices = _find_in_hand(player, [decode_card(data["cards"])])[0]
            game.play_card_or_group_to_table(event.player_index, indices)
        elif event.event_type == GameEventType.TABLE_CAPTURED:
            game.capture_cards_for_player(event.player_index)
        elif event.event_type == GameEventType.GAME_RESTARTED:
            game.restart_game_dangerously()
        else:
            logger.warning("Unknown event type %s", event.event_type)
