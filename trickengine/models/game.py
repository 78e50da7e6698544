"""Game model for managing players, the table and the deck."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, fields
from typing import Any

from trickengine.config import settings
from trickengine.errors import (
    CapacityError,
    ConfigurationError,
    DuplicateNameError,
    ErrorCode,
    InsufficientCardsError,
    InvalidPlayerError,
    NonEmptyHandError,
)
from trickengine.models.card import Card
from trickengine.models.deck import Deck, DeckOptions
from trickengine.models.enums import GamePhase
from trickengine.models.player import CardParser, Player, TableEntry, flatten_entries
from trickengine.services.log_service import LogService

log = LogService(__name__)


def _identity(card: Card) -> Card:
    return card


@dataclass
class GameOptions:
    """Options for a game.

    Attributes:
        n_decks: Number of deck copies played with
        deck_options: Options for building the deck
        parse_cards: Transform applied to every card played to the table

    """

    n_decks: int = field(default_factory=lambda: settings.default_n_decks)
    deck_options: DeckOptions | dict | None = None
    parse_cards: CardParser = _identity

    @classmethod
    def from_value(cls, options: "GameOptions | Mapping[str, Any] | None") -> "GameOptions":
        """Build options from an instance, a mapping or None."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        if isinstance(options, Mapping):
            known = {f.name for f in fields(cls)}
            unknown = set(options) - known
            if unknown:
                msg = f"Unknown game options: {sorted(unknown)}; expected a subset of {sorted(known)}"
                raise ConfigurationError(msg)
            return cls(**options)
        msg = f"options must be GameOptions or a mapping; received {options!r}"
        raise ConfigurationError(msg)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Game:
    """Represents a card game around a shared table.

    Players are seated in join order; their seat index is their turn order.
    Dealing, playing and capturing require a player count within
    [min_players, max_players].

    Attributes:
        min_players: Minimum players required to deal or play
        max_players: Maximum players allowed at the table
        options: Game options
        players: Players in seat order
        table: Cards (or groups) currently in play
        deck: The deck of cards

    """

    def __init__(
        self,
        min_players: int = 1,
        max_players: int | None = None,
        options: GameOptions | Mapping[str, Any] | None = None,
    ) -> None:
        """Create a game with player bounds and options.

        Raises:
            ConfigurationError: If the bounds are not ints, are negative, or
                min_players > max_players

        """
        if max_players is None:
            max_players = min_players
        if not _is_int(min_players) or not _is_int(max_players):
            msg = (
                "min_players and max_players must be ints; "
                f"received: min_players={min_players!r}; max_players={max_players!r}"
            )
            raise ConfigurationError(msg)
        if min_players < 0:
            msg = f"min_players must be >= 0; received min_players={min_players}"
            raise ConfigurationError(msg)
        if min_players > max_players:
            msg = (
                "Must have min_players <= max_players; "
                f"received: min_players={min_players}; max_players={max_players}"
            )
            raise ConfigurationError(msg)

        self.options = GameOptions.from_value(options)
        self.min_players = min_players
        self.max_players = max_players
        self.players: list[Player] = []
        self.table: list[TableEntry] = []
        self.deck = Deck(self.options.n_decks, self.options.deck_options)
        self.parse_cards: CardParser = self.options.parse_cards

    @property
    def n_players(self) -> int:
        """Number of players currently seated."""
        return len(self.players)

    @property
    def has_too_few_players(self) -> bool:
        """Check if the game has fewer players than required."""
        return self.n_players < self.min_players

    @property
    def has_too_many_players(self) -> bool:
        """Check if the game has more players than allowed."""
        return self.max_players < self.n_players

    @property
    def can_add_another_player(self) -> bool:
        """Check if there is a free seat."""
        return self.n_players < self.max_players

    @property
    def phase(self) -> GamePhase:
        """Current phase, derived from the player count."""
        if self.has_too_few_players:
            return GamePhase.FORMING
        if self.has_too_many_players:
            return GamePhase.OVERFULL
        return GamePhase.READY

    def stop_game_if_too_few_or_many_players(self) -> None:
        """Raise CapacityError unless the player count is within bounds."""
        phase = self.phase
        if phase is GamePhase.READY:
            return
        msg = (
            f"Game requires {self.min_players} <= n_players <= {self.max_players}; "
            f"received n_players={self.n_players}"
        )
        code = ErrorCode.TOO_MANY_PLAYERS if phase is GamePhase.OVERFULL else None
        raise CapacityError(msg, code)

    def add_player(self, name: str) -> Player | None:
        """Seat a new player, if there is room.

        Returns:
            The new player, or None if the game is full

        Raises:
            DuplicateNameError: If a seated player already has this name

        """
        if any(p.name == name for p in self.players):
            names = [p.name for p in self.players]
            msg = f"Player name must be unique; received={name}; preexisting player names={names}"
            raise DuplicateNameError(msg)
        if not self.can_add_another_player:
            log.warning({"event": "add_player_declined", "name": name, "reason": "full"})
            return None

        player = Player(name=name, index=self.n_players)
        self.players.append(player)
        log.info({"event": "player_added", "name": name, "seat": player.index})
        return player

    def remove_player(self, name: str) -> Player | None:
        """Remove a player from the game.

        Players seated after the removed one move up a seat. The player's hand
        and captured cards go to the bottom of the deck.

        Returns:
            The removed player, or None if no player has this name

        """
        for i, player in enumerate(self.players):
            if player.name == name:
                self.players.pop(i)
                for j in range(i, len(self.players)):
                    self.players[j].index = j
                returned = player.hand + player.captured
                self.deck.cards[:0] = returned
                player.clear_cards_dangerously()
                log.info(
                    {
                        "event": "player_removed",
                        "name": name,
                        "seat": i,
                        "cards_returned": len(returned),
                    }
                )
                return player
        return None

    def get_player(self, player_index: int) -> Player:
        """Get a seated player by seat index.

        Raises:
            InvalidPlayerError: If no player sits at this index

        """
        if not _is_int(player_index) or not 0 <= player_index < self.n_players:
            msg = (
                f"No player seated at player_index={player_index!r}; "
                f"n_players={self.n_players}"
            )
            raise InvalidPlayerError(msg)
        return self.players[player_index]

    def deal_cards(self, n_cards: int) -> None:
        """Deal n_cards to every player, one card per player per round.

        Raises:
            CapacityError: If the player count is out of bounds
            ConfigurationError: If n_cards is not a non-negative int
            InsufficientCardsError: If the deck cannot cover the deal

        """
        self.stop_game_if_too_few_or_many_players()
        if not _is_int(n_cards) or n_cards < 0:
            msg = f"n_cards must be a non-negative int; received n_cards={n_cards!r}"
            raise ConfigurationError(msg)

        needed = n_cards * self.n_players
        if len(self.deck) < needed:
            msg = (
                f"There are not enough cards left (deck={len(self.deck)}) to deal "
                f"n_cards={n_cards} to {self.n_players} players"
            )
            raise InsufficientCardsError(msg)

        for _ in range(n_cards):
            for player in self.players:
                player.add_card_to_hand(self.deck.draw_card())

        log.debug({"event": "cards_dealt", "n_cards": n_cards, "deck_left": len(self.deck)})

    def play_card_or_group_to_table(
        self, player_index: int, card_indices: int | Sequence[int]
    ) -> TableEntry | None:
        """Play one or more cards from a player's hand to the table.

        Args:
            player_index: Seat index of the player
            card_indices: Hand index, or list of hand indices for a group

        Returns:
            The played card or group, or None if the indices were not playable

        """
        self.stop_game_if_too_few_or_many_players()
        player = self.get_player(player_index)
        played = player.play_card_or_group_from_hand(card_indices, self.table, self.parse_cards)
        if played is None:
            log.warning(
                {"event": "play_declined", "seat": player_index, "card_indices": card_indices}
            )
        else:
            log.debug({"event": "card_played", "seat": player_index, "played": played})
        return played

    def capture_cards_for_player(self, player_index: int) -> list[Card]:
        """Move every card on the table into a player's captured pile."""
        self.stop_game_if_too_few_or_many_players()
        player = self.get_player(player_index)
        captured = player.capture_cards(self.table)
        log.debug({"event": "table_captured", "seat": player_index, "n_cards": len(captured)})
        return captured

    def restart_game_dangerously(self) -> None:
        """Clear all cards from the table and players, and rebuild the deck."""
        for player in self.players:
            player.clear_cards_dangerously()
        self.table.clear()
        self.deck.initialize()
        log.info({"event": "game_restarted", "n_players": self.n_players})

    def restart_game_safely(self) -> None:
        """Restart the game only if no player has cards left in hand.

        Raises:
            NonEmptyHandError: If any player still holds cards

        """
        for i, player in enumerate(self.players):
            if player.hand:
                msg = (
                    f"Cannot restart game. player{i} with name={player.name} "
                    "still has cards in hand"
                )
                raise NonEmptyHandError(msg)
        self.restart_game_dangerously()

    def count_cards(self) -> int:
        """Count cards across deck, hands, table and captured piles."""
        in_players = sum(len(p.hand) + len(p.captured) for p in self.players)
        return len(self.deck) + in_players + len(flatten_entries(self.table))

    def __str__(self) -> str:
        """Return string representation."""
        return (
            f"Game: {self.n_players} players ({self.min_players}-{self.max_players}), "
            f"{len(self.table)} on table, {len(self.deck)} in deck, phase {self.phase.value}"
        )
