"""Poker Showdown - pick the winning five-card poker hand(s).

Parses hands like "4S 5S 6S 7S 8S", classifies them into the nine standard
categories and returns the best ones, as the caller's own strings.
"""

__version__ = "0.1.0"
__author__ = "Poker Showdown Team"

from poker_showdown.rules import (
    Hand,
    HandCategory,
    ShowdownError,
    HandParseError,
    MalformedHand,
    DuplicateCard,
    parse_hand,
    compare_hands,
    describe_hand,
)
from poker_showdown.showdown import evaluate_hands, rank_hands, winning_hands
from poker_showdown.utils.seeding import set_seed

__all__ = [
    "__version__",
    "Hand",
    "HandCategory",
    "ShowdownError",
    "HandParseError",
    "MalformedHand",
    "DuplicateCard",
    "parse_hand",
    "compare_hands",
    "describe_hand",
    "evaluate_hands",
    "rank_hands",
    "winning_hands",
    "set_seed",
]
