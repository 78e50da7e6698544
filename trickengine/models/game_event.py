"""Game event model for the operation log.

Captures every state-changing operation so a game can be rebuilt by
re-issuing them.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from trickengine.models.card import Card
from trickengine.models.enums import Suit


def _utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


class GameEventType(str, Enum):
    """Types of game events that can be recorded."""

    # Seating
    PLAYER_ADDED = "PLAYER_ADDED"
    PLAYER_REMOVED = "PLAYER_REMOVED"

    # Round lifecycle
    CARDS_DEALT = "CARDS_DEALT"
    TRICK_STARTED = "TRICK_STARTED"
    GAME_RESTARTED = "GAME_RESTARTED"

    # Card play
    CARD_PLAYED = "CARD_PLAYED"
    TABLE_CAPTURED = "TABLE_CAPTURED"


def encode_card(card: Card) -> list[int]:
    """Encode a card as [rank, suit]."""
    return [card.rank, int(card.suit)]


def decode_card(data: list[int]) -> Card:
    """Decode a card encoded by encode_card."""
    rank, suit = data
    return Card(rank, Suit(suit))


def encode_cards(cards: list[Card]) -> list[list[int]]:
    """Encode a list of cards."""
    return [encode_card(c) for c in cards]


def decode_cards(data: list[list[int]]) -> list[Card]:
    """Decode a list of cards."""
    return [decode_card(d) for d in data]


@dataclass
class GameEvent:
    """Represents a single recorded operation."""

    game_id: str
    event_type: GameEventType
    timestamp: datetime = field(default_factory=_utc_now)
    player_index: int | None = None
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for transmission."""
        return {
            "game_id": self.game_id,
            "event_type": self.event_type.value,
            "timestamp": self.timestamp.isoformat(),
            "player_index": self.player_index,
            "data": self.data,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GameEvent":
        """Create from dictionary."""
        return cls(
            game_id=data["game_id"],
            event_type=GameEventType(data["event_type"]),
            timestamp=datetime.fromisoformat(data["timestamp"]),
            player_index=data.get("player_index"),
            data=data.get("data", {}),
        )
