"""Simulate trick games between bot players."""

import logging
from dataclasses import dataclass, field

from trickengine.bots import BaseBot, RandomBot
from trickengine.models.card import Card
from trickengine.models.deck import DeckOptions
from trickengine.models.enums import Suit
from trickengine.models.game import GameOptions
from trickengine.models.player import TableEntry
from trickengine.models.trick_game import TrickGame
from trickengine.services.event_recorder import EventRecorder

logger = logging.getLogger(__name__)


@dataclass
class TrickResult:
    """Outcome of a single trick."""

    number: int
    leader: int
    plays: list[tuple[int, TableEntry]]
    winner: int


@dataclass
class SimulationResult:
    """Outcome of a simulated hand."""

    tricks: list[TrickResult] = field(default_factory=list)

    def tricks_won(self, player_index: int) -> int:
        """Count tricks won by a player."""
        return sum(1 for t in self.tricks if t.winner == player_index)


class BotGameSimulator:
    """Plays one dealt hand of a trick game between RandomBots."""

    def __init__(
        self,
        num_players: int = 4,
        hand_size: int = 13,
        min_players: int | None = None,
        trump_suit: Suit | None = None,
        seed: int | None = None,
        game_id: str = "bot-game",
        recorder: EventRecorder | None = None,
    ) -> None:
        """Set up the game, seat the bots and deal.

        The table seats num_players; min_players (default num_players) is the
        fewest players it will deal to.
        """
        self.game_id = game_id
        self.recorder = recorder or EventRecorder()
        self.game = TrickGame(
            num_players if min_players is None else min_players,
            num_players,
            GameOptions(deck_options=DeckOptions(seed=seed)),
        )
        self.game.trump_suit = trump_suit
        self.bots: list[BaseBot] = []
        for i in range(num_players):
            player = self.game.add_player(f"Bot{i + 1}")
            self.recorder.record_player_added(game_id, player.name, player.index)
            self.bots.append(RandomBot(player.index, None if seed is None else seed + i))

        self.game.deal_cards(hand_size)
        self.recorder.record_deal(game_id, self.game)
        self.hand_size = hand_size

    def play_trick(self, number: int, leader: int) -> TrickResult:
        """Play one trick led by the given seat and capture it for the winner."""
        game = self.game
        game.start_next_trick(leader)
        self.recorder.record_trick_start(self.game_id, game)

        plays: list[tuple[int, TableEntry]] = []
        while game.whos_turn is not None:
            seat = game.whos_turn
            played = self.bots[seat].play_turn(game)
            if played is None:
                msg = f"Bot at seat {seat} could not play"
                raise RuntimeError(msg)
            self.recorder.record_play(self.game_id, seat, played)
            plays.append((seat, played))

        winner = game.trick_winner
        captured: list[Card] = game.capture_cards_for_player(winner)
        self.recorder.record_capture(self.game_id, winner, captured)
        logger.debug("Trick %d won by seat %d", number, winner)
        return TrickResult(number=number, leader=leader, plays=plays, winner=winner)

    def run(self, first_leader: int = 0) -> SimulationResult:
        """Play every trick of the dealt hand; each winner leads the next trick."""
        result = SimulationResult()
        leader = first_leader
        for number in range(1, self.hand_size + 1):
            trick = self.play_trick(number, leader)
            result.tricks.append(trick)
            leader = trick.winner
        return result
