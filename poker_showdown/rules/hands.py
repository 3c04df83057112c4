"""Hand parsing and category classification.

Categories (low to high):
- High card
- One pair
- Two pair
- Three of a kind
- Straight: five consecutive values (A-2-3-4-5 counts, five high)
- Flush: five cards of one suit
- Full house: three of a kind + a pair
- Four of a kind
- Straight flush

Classification walks CATEGORY_RULES top to bottom and takes the first match,
so a hand that satisfies several loose conditions gets its best category.
"""

from dataclasses import dataclass
from enum import IntEnum, auto
from typing import Callable, List, Tuple

from .analysis import (
    HAND_SIZE,
    RankGroups,
    group_ranks,
    is_flush,
    straight_values,
)
from .errors import CardParseError, DuplicateCard, MalformedHand
from .ranks import Card, Rank, sort_cards


class HandCategory(IntEnum):
    """Poker hand categories, ordered by strength."""

    HIGH_CARD = auto()
    ONE_PAIR = auto()
    TWO_PAIR = auto()
    THREE_OF_A_KIND = auto()
    STRAIGHT = auto()
    FLUSH = auto()
    FULL_HOUSE = auto()
    FOUR_OF_A_KIND = auto()
    STRAIGHT_FLUSH = auto()


CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: "High card",
    HandCategory.ONE_PAIR: "One pair",
    HandCategory.TWO_PAIR: "Two pair",
    HandCategory.THREE_OF_A_KIND: "Three of a kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full house",
    HandCategory.FOUR_OF_A_KIND: "Four of a kind",
    HandCategory.STRAIGHT_FLUSH: "Straight flush",
}


@dataclass(frozen=True)
class HandFacts:
    """Everything the classifier needs to know about five cards."""

    flush: bool
    straight: bool
    groups: RankGroups


@dataclass(frozen=True)
class Hand:
    """A parsed and classified five-card hand.

    Attributes:
        source: The caller's hand string (the same object, not a copy)
        cards: The five distinct cards, sorted ascending
        values: Canonical values, highest first. Equal to the card ranks
            except in a wheel straight, where the ace counts as LOW_ACE.
        category: The hand's category
        groups: Ranks grouped by multiplicity, for tie-breaking
    """

    source: str
    cards: Tuple[Card, ...]
    values: Tuple[Rank, ...]
    category: HandCategory
    groups: RankGroups

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards)
        return f"{self.category.name}({cards_str})"

    @property
    def anchor(self) -> Rank:
        """Highest canonical value; the top of the run for straights."""
        return self.values[0]


# Category predicates. Each is pure over HandFacts.


def _is_straight_flush(facts: HandFacts) -> bool:
    return facts.straight and facts.flush


def _is_four_of_a_kind(facts: HandFacts) -> bool:
    return bool(facts.groups.quads)


def _is_full_house(facts: HandFacts) -> bool:
    return bool(facts.groups.triads) and bool(facts.groups.pairs)


def _is_flush(facts: HandFacts) -> bool:
    return facts.flush


def _is_straight(facts: HandFacts) -> bool:
    return facts.straight


def _is_three_of_a_kind(facts: HandFacts) -> bool:
    return bool(facts.groups.triads)


def _is_two_pair(facts: HandFacts) -> bool:
    return len(facts.groups.pairs) == 2


def _is_one_pair(facts: HandFacts) -> bool:
    return len(facts.groups.pairs) == 1


def _is_high_card(facts: HandFacts) -> bool:
    return True


# Order is priority; do not reorder.
CATEGORY_RULES: Tuple[Tuple[HandCategory, Callable[[HandFacts], bool]], ...] = (
    (HandCategory.STRAIGHT_FLUSH, _is_straight_flush),
    (HandCategory.FOUR_OF_A_KIND, _is_four_of_a_kind),
    (HandCategory.FULL_HOUSE, _is_full_house),
    (HandCategory.FLUSH, _is_flush),
    (HandCategory.STRAIGHT, _is_straight),
    (HandCategory.THREE_OF_A_KIND, _is_three_of_a_kind),
    (HandCategory.TWO_PAIR, _is_two_pair),
    (HandCategory.ONE_PAIR, _is_one_pair),
    (HandCategory.HIGH_CARD, _is_high_card),
)


def classify(facts: HandFacts) -> HandCategory:
    """Return the first category in CATEGORY_RULES whose predicate holds."""
    for category, predicate in CATEGORY_RULES:
        if predicate(facts):
            return category
    # Unreachable: HIGH_CARD always matches.
    raise AssertionError("no category matched")


def _parse_cards(source: str) -> List[Card]:
    tokens = source.split()
    if len(tokens) != HAND_SIZE:
        raise MalformedHand(
            source, f"Expected {HAND_SIZE} cards, got {len(tokens)}: {source!r}"
        )

    seen = set()
    for token in tokens:
        try:
            card = Card.from_string(token)
        except CardParseError as e:
            raise MalformedHand(source, f"Bad card {token!r} in {source!r}: {e}") from e
        if card in seen:
            raise DuplicateCard(source, card, f"Duplicate card {card} in {source!r}")
        seen.add(card)

    return sort_cards(seen)


def parse_hand(source: str) -> Hand:
    """Parse and classify a hand string like "4S 5S 6S 7S 8S".

    Args:
        source: Five whitespace-separated card tokens

    Returns:
        Hand bound to ``source``

    Raises:
        MalformedHand: Wrong token count or an unparseable token
        DuplicateCard: The same card appears twice
    """
    cards = _parse_cards(source)
    ranks = [card.rank for card in cards]

    run = straight_values(ranks)
    facts = HandFacts(
        flush=is_flush(cards),
        straight=run is not None,
        groups=group_ranks(ranks),
    )
    values = run if run is not None else tuple(sorted(ranks, reverse=True))

    return Hand(
        source=source,
        cards=tuple(cards),
        values=values,
        category=classify(facts),
        groups=facts.groups,
    )


# Descriptions

_RANK_NAMES = {
    Rank.LOW_ACE: ("ace", "aces"),
    Rank.TWO: ("two", "twos"),
    Rank.THREE: ("three", "threes"),
    Rank.FOUR: ("four", "fours"),
    Rank.FIVE: ("five", "fives"),
    Rank.SIX: ("six", "sixes"),
    Rank.SEVEN: ("seven", "sevens"),
    Rank.EIGHT: ("eight", "eights"),
    Rank.NINE: ("nine", "nines"),
    Rank.TEN: ("ten", "tens"),
    Rank.JACK: ("jack", "jacks"),
    Rank.QUEEN: ("queen", "queens"),
    Rank.KING: ("king", "kings"),
    Rank.ACE: ("ace", "aces"),
}


def _one(rank: Rank) -> str:
    return _RANK_NAMES[rank][0]


def _many(rank: Rank) -> str:
    return _RANK_NAMES[rank][1]


def describe_hand(hand: Hand) -> str:
    """Human-readable summary, e.g. "Full house, kings over threes"."""
    name = CATEGORY_NAMES[hand.category]
    groups = hand.groups
    category = hand.category

    if category == HandCategory.STRAIGHT_FLUSH and hand.anchor == Rank.ACE:
        return "Royal flush"
    if category in (HandCategory.STRAIGHT_FLUSH, HandCategory.STRAIGHT, HandCategory.FLUSH):
        return f"{name}, {_one(hand.anchor)} high"
    if category == HandCategory.FOUR_OF_A_KIND:
        return f"{name}, {_many(groups.quads[0])}"
    if category == HandCategory.FULL_HOUSE:
        return f"{name}, {_many(groups.triads[0])} over {_many(groups.pairs[0])}"
    if category == HandCategory.THREE_OF_A_KIND:
        return f"{name}, {_many(groups.triads[0])}"
    if category == HandCategory.TWO_PAIR:
        return f"{name}, {_many(groups.pairs[0])} and {_many(groups.pairs[1])}"
    if category == HandCategory.ONE_PAIR:
        return f"{name}, {_many(groups.pairs[0])}"
    return f"{name}, {_one(hand.anchor)}"
