"""Poker rules implementations.

This module provides:
- Card and rank definitions (ranks.py)
- Parse and evaluation errors (errors.py)
- Flush/straight/rank-group analysis (analysis.py)
- Hand parsing and classification (hands.py)
- Hand comparison (compare.py)
- Random dealing (deck.py)
"""

from .errors import (
    ShowdownError,
    CardParseError,
    InvalidSuitToken,
    InvalidValueToken,
    HandParseError,
    MalformedHand,
    DuplicateCard,
    HandInvariantError,
)

from .ranks import (
    Rank,
    Suit,
    Card,
    CARD_RANKS,
    RANK_SYMBOLS,
    SUIT_SYMBOLS,
    SUIT_GLYPHS,
    parse_suit,
    parse_value,
    parse_card,
    create_standard_deck,
    sort_cards,
)

from .analysis import (
    HAND_SIZE,
    Multiplicity,
    RankGroups,
    is_flush,
    are_consecutive,
    straight_values,
    group_ranks,
)

from .hands import (
    HandCategory,
    HandFacts,
    Hand,
    CATEGORY_NAMES,
    CATEGORY_RULES,
    classify,
    parse_hand,
    describe_hand,
)

from .compare import (
    ShowdownKey,
    TIE_BREAKERS,
    showdown_key,
    compare_hands,
    can_beat,
    hands_tied,
)

from .deck import MAX_HANDS, deal_hands

__all__ = [
    # Errors
    "ShowdownError",
    "CardParseError",
    "InvalidSuitToken",
    "InvalidValueToken",
    "HandParseError",
    "MalformedHand",
    "DuplicateCard",
    "HandInvariantError",
    # Ranks
    "Rank",
    "Suit",
    "Card",
    "CARD_RANKS",
    "RANK_SYMBOLS",
    "SUIT_SYMBOLS",
    "SUIT_GLYPHS",
    "parse_suit",
    "parse_value",
    "parse_card",
    "create_standard_deck",
    "sort_cards",
    # Analysis
    "HAND_SIZE",
    "Multiplicity",
    "RankGroups",
    "is_flush",
    "are_consecutive",
    "straight_values",
    "group_ranks",
    # Hands
    "HandCategory",
    "HandFacts",
    "Hand",
    "CATEGORY_NAMES",
    "CATEGORY_RULES",
    "classify",
    "parse_hand",
    "describe_hand",
    # Comparison
    "ShowdownKey",
    "TIE_BREAKERS",
    "showdown_key",
    "compare_hands",
    "can_beat",
    "hands_tied",
    # Dealing
    "MAX_HANDS",
    "deal_hands",
]
