"""Showdown: pick the winning hand(s) out of a batch of hand strings.

Winners are returned as the caller's own string objects, in input order.
"""

import logging
from typing import Dict, List, Sequence, Tuple

from .rules.compare import showdown_key
from .rules.errors import DuplicateCard
from .rules.hands import Hand, parse_hand
from .rules.ranks import Card

logger = logging.getLogger(__name__)


def evaluate_hands(sources: Sequence[str], *, single_deck: bool = False) -> List[Hand]:
    """Parse every source string into a Hand.

    Args:
        sources: Hand strings
        single_deck: If True, the hands are dealt from one deck and no card
            may appear in more than one of them

    Returns:
        Hands in input order

    Raises:
        HandParseError: On the first source that fails; nothing is returned
            for the others
    """
    hands = [parse_hand(source) for source in sources]
    if single_deck:
        _check_single_deck(hands)

    for hand in hands:
        logger.debug("%r -> %s", hand.source, hand.category.name)
    return hands


def _check_single_deck(hands: Sequence[Hand]) -> None:
    owners: Dict[Card, str] = {}
    for hand in hands:
        for card in hand.cards:
            if card in owners:
                raise DuplicateCard(
                    hand.source,
                    card,
                    f"Card {card} appears in both {owners[card]!r} and {hand.source!r}",
                )
            owners[card] = hand.source


def winning_hands(sources: Sequence[str], *, single_deck: bool = False) -> List[str]:
    """Return the best hand(s) from a list of hand strings.

    Every source is parsed before anything is compared, so one bad hand
    fails the whole batch.

    Args:
        sources: Hand strings like "4S 5S 6S 7S 8S"
        single_deck: Reject cards shared between hands (see evaluate_hands)

    Returns:
        Every source whose hand ties for best, in input order. The items are
        the same objects as in ``sources``.

    Raises:
        HandParseError: If any source is malformed or holds a duplicate card
    """
    hands = evaluate_hands(sources, single_deck=single_deck)
    if len(hands) <= 1:
        return list(sources)

    keys = [showdown_key(hand) for hand in hands]
    best = max(keys)
    winners = [source for source, key in zip(sources, keys) if key == best]

    logger.debug(
        "%d hands, best %s %s, %d winner(s)",
        len(hands),
        best.category.name,
        [int(r) for r in best.tie_break],
        len(winners),
    )
    return winners


def rank_hands(sources: Sequence[str], *, single_deck: bool = False) -> List[Tuple[int, Hand]]:
    """Order hands best first with dense places (tied hands share a place).

    Tied hands keep their input order.
    """
    hands = evaluate_hands(sources, single_deck=single_deck)
    keyed = sorted(
        ((showdown_key(hand), hand) for hand in hands),
        key=lambda item: item[0],
        reverse=True,
    )

    standings = []
    place = 0
    previous = None
    for key, hand in keyed:
        if key != previous:
            place += 1
            previous = key
        standings.append((place, hand))
    return standings
