"""Vectorized hand scoring with numpy.

Each showdown key is packed into one integer: the category in the top
nibble-group, then up to five tie-break ranks at 4 bits each, most
significant first. Integer order matches ``ShowdownKey`` order, so a batch
can be scored once and compared with array operations.

This module provides:
- pack_key: ShowdownKey -> int
- score_hands: hands -> int64 array
- order_hands: stable best-first ordering
- batch_winning_hands: same contract as showdown.winning_hands
"""

import logging
from typing import List, Sequence

import numpy as np

from .rules.analysis import HAND_SIZE
from .rules.compare import ShowdownKey, showdown_key
from .rules.errors import HandInvariantError
from .rules.hands import Hand
from .showdown import evaluate_hands

logger = logging.getLogger(__name__)

RANK_BITS = 4


def pack_key(key: ShowdownKey) -> int:
    """Pack a showdown key into a single order-preserving integer."""
    if len(key.tie_break) > HAND_SIZE:
        raise HandInvariantError(f"Tie-break too long: {key.tie_break}")

    score = int(key.category)
    padded = list(key.tie_break) + [0] * (HAND_SIZE - len(key.tie_break))
    for rank in padded:
        score = (score << RANK_BITS) | int(rank)
    return score


def score_hands(hands: Sequence[Hand]) -> np.ndarray:
    """Score a batch of hands.

    Returns:
        int64 array of shape (len(hands),); higher is stronger, equal is a tie
    """
    return np.fromiter(
        (pack_key(showdown_key(hand)) for hand in hands),
        dtype=np.int64,
        count=len(hands),
    )


def order_hands(hands: Sequence[Hand]) -> np.ndarray:
    """Indices of hands, best first. Ties keep input order."""
    scores = score_hands(hands)
    return np.argsort(-scores, kind="stable")


def batch_winning_hands(sources: Sequence[str], *, single_deck: bool = False) -> List[str]:
    """Vectorized ``winning_hands``: same inputs, errors and result."""
    hands = evaluate_hands(sources, single_deck=single_deck)
    if len(hands) <= 1:
        return list(sources)

    scores = score_hands(hands)
    winners = np.flatnonzero(scores == scores.max())
    logger.debug("scored %d hands, best score %#x", len(hands), int(scores.max()))
    return [sources[int(i)] for i in winners]
