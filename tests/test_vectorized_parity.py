"""Parity between the numpy batch scorer and the pure-Python comparator.

Deals random batches and checks that packed integer scores order hands
exactly like showdown keys, and that both winner selectors agree.
"""

from __future__ import annotations

import itertools
from typing import List

import numpy as np
import pytest

from poker_showdown.rules import (
    DuplicateCard,
    MalformedHand,
    compare_hands,
    deal_hands,
    parse_hand,
    showdown_key,
)
from poker_showdown.showdown import rank_hands, winning_hands
from poker_showdown.vectorized import (
    batch_winning_hands,
    order_hands,
    pack_key,
    score_hands,
)

SEEDS = list(range(50))


def _deal(seed: int, num_hands: int = 10) -> List[str]:
    return deal_hands(num_hands, seed=seed)


class TestPackKey:
    def test_pack_key_preserves_order_on_fixed_hands(self):
        sources = [
            "2H 4D 5S 9C KD",
            "AH 2D 3S 4C 6D",
            "5C 5D 9H 10D KS",
            "5C 5D 9H 9D KS",
            "7C 7D 7H 2S 9C",
            "AS 2D 3C 4H 5S",
            "3C 4D 5C 6S 7H",
            "10C JD QH KS AC",
            "2C 7C 8C JC QC",
            "6C 6D 6H KD KS",
            "2C 2D 2H 2S 9C",
            "AS 2S 3S 4S 5S",
            "10H JH QH KH AH",
        ]
        hands = [parse_hand(s) for s in sources]
        for a, b in itertools.product(hands, repeat=2):
            packed = np.sign(pack_key(showdown_key(a)) - pack_key(showdown_key(b)))
            assert packed == compare_hands(a, b)

    def test_scores_are_int64(self):
        scores = score_hands([parse_hand("4S 5S 6S 7S 8S")])
        assert scores.dtype == np.int64
        assert scores.shape == (1,)


@pytest.mark.parametrize("seed", SEEDS)
def test_score_order_matches_comparator(seed):
    hands = [parse_hand(s) for s in _deal(seed)]
    scores = score_hands(hands)
    for i, j in itertools.combinations(range(len(hands)), 2):
        assert np.sign(scores[i] - scores[j]) == compare_hands(hands[i], hands[j])


@pytest.mark.parametrize("seed", SEEDS)
def test_batch_winners_match(seed):
    sources = _deal(seed)
    assert batch_winning_hands(sources) == winning_hands(sources)


@pytest.mark.parametrize("seed", SEEDS[:10])
def test_order_matches_standings(seed):
    sources = _deal(seed)
    hands = [parse_hand(s) for s in sources]
    order = order_hands(hands)
    assert [sources[int(i)] for i in order] == [h.source for _, h in rank_hands(sources)]


class TestBatchContract:
    def test_tie_returns_all_in_order(self):
        hands = ["5C 5D 9H 9D KS", "2H 3D 4S 9C KD", "5H 5S 9C 9S KD"]
        winners = batch_winning_hands(hands)
        assert winners == [hands[0], hands[2]]
        assert winners[0] is hands[0]

    def test_single_and_empty(self):
        assert batch_winning_hands([]) == []
        assert batch_winning_hands(["4S 5S 6S 7S 8S"]) == ["4S 5S 6S 7S 8S"]

    def test_errors_propagate(self):
        with pytest.raises(MalformedHand):
            batch_winning_hands(["4S 5S 6S 7S 8S", "4S 5S"])
        with pytest.raises(DuplicateCard):
            batch_winning_hands(["AS KS QS JS TS", "AH AD AC AS KS"], single_deck=True)
