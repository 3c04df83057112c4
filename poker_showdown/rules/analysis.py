"""Category facts for a five-card set: flush, straight, rank groups.

The straight test returns a canonical value view instead of a bool. For a
wheel (A-2-3-4-5) the view holds ``Rank.LOW_ACE`` in place of the ace, so the
run's top card is the five. Hands store that view and the comparator reads it,
so the cards themselves are never rewritten.
"""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Mapping, Optional, Sequence, Tuple

from .errors import HandInvariantError
from .ranks import Card, Rank

HAND_SIZE = 5


class Multiplicity(IntEnum):
    """How many times a rank occurs in a hand."""

    SINGLE = 1
    PAIR = 2
    TRIAD = 3
    QUAD = 4


@dataclass(frozen=True)
class RankGroups:
    """Ranks of a hand grouped by how often they occur.

    Each group is a tuple of ranks sorted highest first; absent groups are
    empty tuples.
    """

    singles: Tuple[Rank, ...] = ()
    pairs: Tuple[Rank, ...] = ()
    triads: Tuple[Rank, ...] = ()
    quads: Tuple[Rank, ...] = ()

    def __getitem__(self, multiplicity: Multiplicity) -> Tuple[Rank, ...]:
        return _GROUP_FIELDS[multiplicity](self)

    def as_dict(self) -> Mapping[Multiplicity, Tuple[Rank, ...]]:
        return {m: self[m] for m in Multiplicity if self[m]}


_GROUP_FIELDS = {
    Multiplicity.SINGLE: lambda g: g.singles,
    Multiplicity.PAIR: lambda g: g.pairs,
    Multiplicity.TRIAD: lambda g: g.triads,
    Multiplicity.QUAD: lambda g: g.quads,
}


def is_flush(cards: Iterable[Card]) -> bool:
    """True iff all cards share one suit."""
    return len({card.suit for card in cards}) == 1


def are_consecutive(ranks: Sequence[Rank]) -> bool:
    """Check if ranks sorted highest first step down by exactly one."""
    return all(int(hi) - int(lo) == 1 for hi, lo in zip(ranks, ranks[1:]))


def straight_values(ranks: Iterable[Rank]) -> Optional[Tuple[Rank, ...]]:
    """Return the canonical value view if the ranks form a straight.

    Args:
        ranks: The five card ranks, in any order

    Returns:
        The ranks sorted highest first, with aces counted low when that is
        what makes the run (the wheel), or None if there is no straight.
    """
    high = tuple(sorted(ranks, reverse=True))
    if len(high) != HAND_SIZE:
        return None
    if are_consecutive(high):
        return high

    if Rank.ACE in high:
        low = tuple(
            sorted(
                (Rank.LOW_ACE if r is Rank.ACE else r for r in high),
                reverse=True,
            )
        )
        if are_consecutive(low):
            return low

    return None


def group_ranks(ranks: Iterable[Rank]) -> RankGroups:
    """Group ranks by occurrence count.

    Raises:
        HandInvariantError: If any rank occurs more than four times or the
            total is not five cards
    """
    counts = Counter(ranks)
    if sum(counts.values()) != HAND_SIZE:
        raise HandInvariantError(f"Expected {HAND_SIZE} ranks, got {sum(counts.values())}")

    grouped = {m: [] for m in Multiplicity}
    for rank, count in counts.items():
        try:
            multiplicity = Multiplicity(count)
        except ValueError:
            raise HandInvariantError(f"Rank {rank.name} occurs {count} times") from None
        grouped[multiplicity].append(rank)

    return RankGroups(
        singles=tuple(sorted(grouped[Multiplicity.SINGLE], reverse=True)),
        pairs=tuple(sorted(grouped[Multiplicity.PAIR], reverse=True)),
        triads=tuple(sorted(grouped[Multiplicity.TRIAD], reverse=True)),
        quads=tuple(sorted(grouped[Multiplicity.QUAD], reverse=True)),
    )
