"""Tests for the card model.

Test coverage:
- Rank ordering: A > K > Q > J > 10 > ... > 2, LOW_ACE below 2
- Suit and value token parsing, including error cases
- Card parsing, ordering, equality and hashing
- Deck creation
"""

import pytest
from poker_showdown.rules import (
    Rank,
    Suit,
    Card,
    CARD_RANKS,
    CardParseError,
    InvalidSuitToken,
    InvalidValueToken,
    parse_suit,
    parse_value,
    parse_card,
    create_standard_deck,
    sort_cards,
)


class TestRankOrdering:
    """Test that rank ordering is correct: A > K > ... > 2 > LOW_ACE"""

    def test_ace_is_highest(self):
        assert Rank.ACE > Rank.KING
        assert Rank.ACE > Rank.TWO

    def test_low_ace_is_lowest(self):
        assert Rank.LOW_ACE < Rank.TWO
        assert min(Rank) == Rank.LOW_ACE

    def test_numeric_ranks_match_face_values(self):
        assert int(Rank.TWO) == 2
        assert int(Rank.TEN) == 10

    def test_card_ranks_exclude_low_ace(self):
        assert Rank.LOW_ACE not in CARD_RANKS
        assert len(CARD_RANKS) == 13


class TestParseSuit:
    """Test suit token parsing."""

    def test_valid_suits(self):
        assert parse_suit("C") == Suit.CLUB
        assert parse_suit("D") == Suit.DIAMOND
        assert parse_suit("H") == Suit.HEART
        assert parse_suit("S") == Suit.SPADE

    @pytest.mark.parametrize("token", ["c", "X", "", "SS", "♠"])
    def test_invalid_suits(self, token):
        with pytest.raises(InvalidSuitToken):
            parse_suit(token)


class TestParseValue:
    """Test value token parsing."""

    def test_numeric_values(self):
        for n in range(2, 11):
            assert parse_value(str(n)) == Rank(n)

    def test_face_values(self):
        assert parse_value("J") == Rank.JACK
        assert parse_value("Q") == Rank.QUEEN
        assert parse_value("K") == Rank.KING
        assert parse_value("A") == Rank.ACE

    def test_t_is_ten(self):
        assert parse_value("T") == Rank.TEN

    @pytest.mark.parametrize("token", ["0", "1", "11", "14", "-2"])
    def test_numbers_out_of_range(self, token):
        with pytest.raises(InvalidValueToken):
            parse_value(token)

    @pytest.mark.parametrize("token", ["j", "X", "", "AA", "1O"])
    def test_unknown_symbols(self, token):
        with pytest.raises(InvalidValueToken):
            parse_value(token)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            parse_value("Z")


class TestCardBasics:
    """Test Card creation and utilities."""

    def test_card_from_string(self):
        card = Card.from_string("3H")
        assert card.rank == Rank.THREE
        assert card.suit == Suit.HEART

        card = Card.from_string("10S")
        assert card.rank == Rank.TEN
        assert card.suit == Suit.SPADE

        card = parse_card("AD")
        assert card.rank == Rank.ACE
        assert card.suit == Suit.DIAMOND

    def test_short_token_is_value_error(self):
        with pytest.raises(InvalidValueToken):
            parse_card("S")
        with pytest.raises(InvalidValueToken):
            parse_card("")

    def test_bad_suit_in_card(self):
        with pytest.raises(InvalidSuitToken) as excinfo:
            parse_card("4X")
        assert excinfo.value.token == "X"

    def test_bad_value_in_card(self):
        with pytest.raises(InvalidValueToken) as excinfo:
            parse_card("1S")
        assert excinfo.value.token == "1"
        assert isinstance(excinfo.value, CardParseError)

    def test_card_str_round_trips(self):
        for token in ("2C", "10D", "JH", "AS"):
            assert str(parse_card(token)) == token

    def test_card_glyph(self):
        assert parse_card("10S").glyph == "10♠"

    def test_card_equality_and_hashing(self):
        c1 = Card(rank=Rank.THREE, suit=Suit.HEART)
        c2 = Card(rank=Rank.THREE, suit=Suit.HEART)
        c3 = Card(rank=Rank.THREE, suit=Suit.SPADE)

        assert c1 == c2
        assert c1 != c3
        assert hash(c1) == hash(c2)
        assert len({c1, c2, c3}) == 2

    def test_cards_order_by_rank_then_suit(self):
        assert parse_card("2S") < parse_card("3C")
        assert parse_card("5C") < parse_card("5S")

        cards = [parse_card(t) for t in ("KD", "2S", "KC", "10H")]
        assert [str(c) for c in sort_cards(cards)] == ["2S", "10H", "KC", "KD"]

    def test_cards_are_immutable(self):
        card = parse_card("QH")
        with pytest.raises(AttributeError):
            card.rank = Rank.KING

    def test_standard_deck(self):
        deck = create_standard_deck()
        assert len(deck) == 52
        assert len(set(deck)) == 52
        assert all(card.rank != Rank.LOW_ACE for card in deck)
