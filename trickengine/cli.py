"""CLI to watch bots play a hand of a trick game."""

import argparse
import logging
import sys

from rich.console import Console
from rich.table import Table

from trickengine.config import settings
from trickengine.errors import TrickEngineError
from trickengine.models.enums import Suit
from trickengine.simulation import BotGameSimulator

logger = logging.getLogger(__name__)
console = Console()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Watch random bots play a trick game")
    parser.add_argument(
        "--players",
        type=int,
        default=settings.default_max_players,
        help="Number of bot players",
    )
    parser.add_argument(
        "--min-players",
        type=int,
        default=settings.default_min_players,
        help="Fewest players the table deals to",
    )
    parser.add_argument(
        "--cards",
        type=int,
        default=settings.default_hand_size,
        help="Cards dealt to each player",
    )
    parser.add_argument(
        "--trump",
        choices=[s.name.lower() for s in Suit],
        default=None,
        help="Trump suit (default: no trump)",
    )
    parser.add_argument("--seed", type=int, default=settings.shuffle_seed, help="Random seed")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=settings.log_level.upper(),
        help="Log level",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run a simulated hand and print the results."""
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    trump = Suit[args.trump.upper()] if args.trump else None
    try:
        simulator = BotGameSimulator(
            num_players=args.players,
            min_players=args.min_players,
            hand_size=args.cards,
            trump_suit=trump,
            seed=args.seed,
        )
        result = simulator.run()
    except TrickEngineError as e:
        console.print(f"[red]Error ({e.code}): {e}[/red]")
        return 1

    players = simulator.game.players
    trump_name = trump.name if trump else "none"
    console.print(f"[bold]{len(players)} bots, {args.cards} cards each, trump: {trump_name}[/bold]")

    tricks = Table(title="Tricks")
    tricks.add_column("#", justify="right")
    tricks.add_column("Plays", style="cyan")
    tricks.add_column("Winner", style="green")
    for trick in result.tricks:
        plays = ", ".join(f"{players[seat].name}: {card}" for seat, card in trick.plays)
        tricks.add_row(str(trick.number), plays, players[trick.winner].name)
    console.print(tricks)

    summary = Table(title="Summary")
    summary.add_column("Player", style="cyan")
    summary.add_column("Tricks", justify="right")
    summary.add_column("Cards captured", justify="right")
    for player in players:
        summary.add_row(player.name, str(result.tricks_won(player.index)), str(len(player.captured)))
    console.print(summary)
    return 0


if __name__ == "__main__":
    sys.exit(main())
