"""Dealing random hands from a single shuffled deck."""

from typing import List, Optional

import numpy as np

from .analysis import HAND_SIZE
from .ranks import create_standard_deck

MAX_HANDS = 52 // HAND_SIZE


def deal_hands(num_hands: int, seed: Optional[int] = None) -> List[str]:
    """Deal distinct five-card hands as token strings.

    Args:
        num_hands: Number of hands to deal (1-10)
        seed: Seed for ``np.random.default_rng``; None for fresh entropy

    Returns:
        List of hand strings like "10S 3H KD 2C 9C"

    Raises:
        ValueError: If num_hands is out of range
    """
    if not 1 <= num_hands <= MAX_HANDS:
        raise ValueError(f"num_hands must be between 1 and {MAX_HANDS}, got {num_hands}")

    deck = create_standard_deck()
    rng = np.random.default_rng(seed)
    order = rng.permutation(len(deck))

    hands = []
    for i in range(num_hands):
        chunk = order[i * HAND_SIZE : (i + 1) * HAND_SIZE]
        hands.append(" ".join(str(deck[int(j)]) for j in chunk))
    return hands
