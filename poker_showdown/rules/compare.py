"""Total ordering between classified hands.

A hand's showdown key is ``(category, tie_break)``. The tie-break tuple's
shape depends on the category:

- Straight flush, straight: (anchor,)  -- five for the wheel
- Four of a kind: (quad, kicker)
- Full house: (triad, pair)
- Flush, high card: all five values, highest first
- Three of a kind: (triad, kickers...)
- Two pair: (high pair, low pair, kicker)
- One pair: (pair, kickers...)

Keys compare lexicographically. Suits never enter a key, so equal keys mean
the hands split the pot.
"""

from typing import Callable, Dict, NamedTuple, Tuple

from .hands import Hand, HandCategory
from .ranks import Rank


class ShowdownKey(NamedTuple):
    """Sortable strength of a hand."""

    category: HandCategory
    tie_break: Tuple[Rank, ...]


def _anchor_key(hand: Hand) -> Tuple[Rank, ...]:
    return (hand.anchor,)


def _all_values_key(hand: Hand) -> Tuple[Rank, ...]:
    return hand.values


def _four_of_a_kind_key(hand: Hand) -> Tuple[Rank, ...]:
    return hand.groups.quads + hand.groups.singles


def _full_house_key(hand: Hand) -> Tuple[Rank, ...]:
    return hand.groups.triads + hand.groups.pairs


def _three_of_a_kind_key(hand: Hand) -> Tuple[Rank, ...]:
    return hand.groups.triads + hand.groups.singles


def _pairs_key(hand: Hand) -> Tuple[Rank, ...]:
    # Covers one pair and two pair: pairs highest first, then kickers.
    return hand.groups.pairs + hand.groups.singles


TIE_BREAKERS: Dict[HandCategory, Callable[[Hand], Tuple[Rank, ...]]] = {
    HandCategory.STRAIGHT_FLUSH: _anchor_key,
    HandCategory.FOUR_OF_A_KIND: _four_of_a_kind_key,
    HandCategory.FULL_HOUSE: _full_house_key,
    HandCategory.FLUSH: _all_values_key,
    HandCategory.STRAIGHT: _anchor_key,
    HandCategory.THREE_OF_A_KIND: _three_of_a_kind_key,
    HandCategory.TWO_PAIR: _pairs_key,
    HandCategory.ONE_PAIR: _pairs_key,
    HandCategory.HIGH_CARD: _all_values_key,
}


def showdown_key(hand: Hand) -> ShowdownKey:
    """Build the comparable key for a hand."""
    return ShowdownKey(hand.category, TIE_BREAKERS[hand.category](hand))


def compare_hands(hand1: Hand, hand2: Hand) -> int:
    """Compare two hands.

    Returns:
        Positive if hand1 > hand2
        Negative if hand1 < hand2
        Zero if the hands tie
    """
    key1 = showdown_key(hand1)
    key2 = showdown_key(hand2)
    return (key1 > key2) - (key1 < key2)


def can_beat(hand1: Hand, hand2: Hand) -> bool:
    """Check if hand1 strictly beats hand2."""
    return compare_hands(hand1, hand2) > 0


def hands_tied(hand1: Hand, hand2: Hand) -> bool:
    """Check if two hands have exactly equal strength."""
    return compare_hands(hand1, hand2) == 0
