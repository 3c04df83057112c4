#!/usr/bin/env python
"""Pick the winning hand(s) from the command line.

Hands are given as positional arguments (quote each one) or dealt at random
from a single deck. Prints the standings as a table and then the winners.

Usage:
    python -m poker_showdown.scripts.showdown "4S 5S 6S 7S 8S" "2D 2C 3C 4C 5C"
    python -m poker_showdown.scripts.showdown --deal 6 --seed 42
    python -m poker_showdown.scripts.showdown --help
"""

import argparse
import logging
import sys
from dataclasses import dataclass, field
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from poker_showdown.rules import MAX_HANDS, ShowdownError, deal_hands, describe_hand
from poker_showdown.rules.hands import CATEGORY_NAMES
from poker_showdown.showdown import rank_hands, winning_hands
from poker_showdown.utils.seeding import set_seed
from poker_showdown.vectorized import batch_winning_hands

EXIT_OK = 0
EXIT_BAD_INPUT = 2
EXIT_INTERRUPTED = 130

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)


@dataclass
class ShowdownConfig:
    """Resolved command-line options."""

    hands: List[str] = field(default_factory=list)
    deal: Optional[int] = None
    seed: Optional[int] = None
    single_deck: bool = False
    vectorized: bool = False
    verbose: bool = False


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the winning five-card poker hand(s)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m poker_showdown.scripts.showdown "4S 5S 6S 7S 8S" "2D 2C 3C 4C 5C"
  python -m poker_showdown.scripts.showdown "5C 5D 9H 9D KS" "5H 5S 9C 9S KD"
  python -m poker_showdown.scripts.showdown --deal 6 --seed 42
  python -m poker_showdown.scripts.showdown --single-deck "AS KS QS JS TS" "AH AD AC AS KS"
        """,
    )

    parser.add_argument("hands", nargs="*", help='Hands like "4S 5S 6S 7S 8S" (quote each hand)')

    parser.add_argument(
        "--deal",
        "-d",
        type=int,
        default=None,
        help=f"Deal N random hands (1-{MAX_HANDS}) instead of reading them",
    )

    parser.add_argument(
        "--seed", "-s", type=int, default=None, help="Random seed for --deal"
    )

    parser.add_argument(
        "--single-deck",
        action="store_true",
        help="Reject a card that appears in more than one hand",
    )

    parser.add_argument(
        "--vectorized",
        action="store_true",
        help="Pick winners with the numpy batch scorer",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log per-hand evaluation details"
    )

    return parser


def parse_config(argv: Optional[List[str]] = None) -> ShowdownConfig:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.deal is None and not args.hands:
        parser.error("give at least one hand, or use --deal N")
    if args.deal is not None and args.hands:
        parser.error("--deal cannot be combined with explicit hands")
    if args.deal is not None and not 1 <= args.deal <= MAX_HANDS:
        parser.error(f"--deal must be between 1 and {MAX_HANDS}")

    return ShowdownConfig(
        hands=list(args.hands),
        deal=args.deal,
        seed=args.seed,
        single_deck=args.single_deck,
        vectorized=args.vectorized,
        verbose=args.verbose,
    )


def render_standings(sources: List[str], winners: List[str], single_deck: bool) -> Table:
    table = Table(title="Showdown", box=box.ROUNDED)
    table.add_column("Place", justify="right")
    table.add_column("Hand")
    table.add_column("Category")
    table.add_column("Description")

    winner_ids = {id(w) for w in winners}
    for place, hand in rank_hands(sources, single_deck=single_deck):
        style = "bold green" if id(hand.source) in winner_ids else None
        table.add_row(
            str(place),
            " ".join(card.glyph for card in hand.cards),
            CATEGORY_NAMES[hand.category],
            describe_hand(hand),
            style=style,
        )
    return table


def run(config: ShowdownConfig) -> List[str]:
    """Evaluate the configured hands, print the results and return the winners."""
    if config.deal is not None:
        seed = set_seed(config.seed)
        sources = deal_hands(config.deal, seed=seed)
        logger.info("Dealt %d hands with seed %d", config.deal, seed)
    else:
        sources = config.hands

    select = batch_winning_hands if config.vectorized else winning_hands
    winners = select(sources, single_deck=config.single_deck)

    console.print(render_standings(sources, winners, config.single_deck))
    label = "Winner" if len(winners) == 1 else "Split pot"
    for source in winners:
        console.print(f"[bold]{label}:[/bold] {source}")
    return winners


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the showdown script."""
    config = parse_config(argv)
    setup_logging(config.verbose)

    try:
        run(config)
    except ShowdownError as e:
        err_console.print(Text.assemble(("Error: ", "red"), str(e)))
        return EXIT_BAD_INPUT
    except KeyboardInterrupt:
        err_console.print("\nInterrupted by user.")
        return EXIT_INTERRUPTED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
