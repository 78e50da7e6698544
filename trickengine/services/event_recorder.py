"""Event recorder service for capturing operations issued against a game.

Used to rebuild a game after a crash (see ReplayService).
"""

from typing import TYPE_CHECKING, Any

from trickengine.models.card import Card
from trickengine.models.game_event import GameEvent, GameEventType, encode_card, encode_cards
from trickengine.models.player import TableEntry

if TYPE_CHECKING:
    from trickengine.models.game import Game
    from trickengine.models.trick_game import TrickGame


def _encode_entry(entry: TableEntry) -> Any:
    if isinstance(entry, Card):
        return encode_card(entry)
    return encode_cards(entry)


class EventRecorder:
    """Records game operations for later replay."""

    def __init__(self) -> None:
        """Initialize the event recorder.

        Events are kept in memory, keyed by game_id, in the order recorded.
        """
        self._events: dict[str, list[GameEvent]] = {}

    def record_event(
        self,
        game_id: str,
        event_type: GameEventType,
        player_index: int | None = None,
        data: dict | None = None,
    ) -> GameEvent:
        """Record a single game event."""
        event = GameEvent(
            game_id=game_id,
            event_type=event_type,
            player_index=player_index,
            data=data or {},
        )
        self._events.setdefault(game_id, []).append(event)
        return event

    def record_player_added(self, game_id: str, name: str, player_index: int) -> None:
        """Record a player taking a seat."""
        self.record_event(game_id, GameEventType.PLAYER_ADDED, player_index, {"name": name})

    def record_player_removed(self, game_id: str, name: str) -> None:
        """Record a player leaving the game."""
        self.record_event(game_id, GameEventType.PLAYER_REMOVED, data={"name": name})

    def record_deal(self, game_id: str, game: "Game") -> None:
        """Record hands and remaining deck right after a deal."""
        self.record_event(
            game_id,
            GameEventType.CARDS_DEALT,
            data={
                "hands": [encode_cards(p.hand) for p in game.players],
                "deck": encode_cards(game.deck.cards),
            },
        )

    def record_trick_start(self, game_id: str, game: "TrickGame") -> None:
        """Record the leader and trump settings of a trick."""
        self.record_event(
            game_id,
            GameEventType.TRICK_STARTED,
            game.who_starts_round,
            {
                "trump_suit": None if game.trump_suit is None else int(game.trump_suit),
                "trump_rank": game.trump_rank,
            },
        )

    def record_play(self, game_id: str, player_index: int, played: TableEntry) -> None:
        """Record a card or group played to the table."""
        self.record_event(
            game_id,
            GameEventType.CARD_PLAYED,
            player_index,
            {"group": not isinstance(played, Card), "cards": _encode_entry(played)},
        )

    def record_capture(self, game_id: str, player_index: int, cards: list[Card]) -> None:
        """Record a player capturing the table."""
        self.record_event(
            game_id, GameEventType.TABLE_CAPTURED, player_index, {"cards": encode_cards(cards)}
        )

    def record_restart(self, game_id: str) -> None:
        """Record a game restart."""
        self.record_event(game_id, GameEventType.GAME_RESTARTED)

    def get_events(self, game_id: str) -> list[GameEvent]:
        """Get events recorded for a game, oldest first."""
        return list(self._events.get(game_id, []))

    def clear(self, game_id: str | None = None) -> None:
        """Forget the events of one game, or of every game."""
        if game_id is None:
            self._events.clear()
        else:
            self._events.pop(game_id, None)

