"""Card rank definitions and utilities.

Rank order (high to low): A > K > Q > J > 10 > 9 > 8 > 7 > 6 > 5 > 4 > 3 > 2

The ace may also count low (below 2), but only inside a wheel straight
(A-2-3-4-5). ``Rank.LOW_ACE`` is that alias and is never produced by parsing.

This module provides:
- Rank and suit definitions
- Card representation and token parsing
- Deck and sorting helpers
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List

from .errors import InvalidSuitToken, InvalidValueToken


class Rank(IntEnum):
    """Card ranks ordered by strength (higher value = stronger rank)."""

    LOW_ACE = 1  # Ace inside a wheel straight only
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Card suits. The order only breaks ties when sorting cards."""

    CLUB = 0
    DIAMOND = 1
    HEART = 2
    SPADE = 3


# Ranks a card can actually carry
CARD_RANKS = tuple(r for r in Rank if r is not Rank.LOW_ACE)

# Rank symbols for display and parsing
RANK_SYMBOLS = {
    Rank.LOW_ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Suit letters used in card tokens
SUIT_SYMBOLS = {
    Suit.CLUB: "C",
    Suit.DIAMOND: "D",
    Suit.HEART: "H",
    Suit.SPADE: "S",
}

# Suit glyphs for display
SUIT_GLYPHS = {
    Suit.CLUB: "♣",
    Suit.DIAMOND: "♦",
    Suit.HEART: "♥",
    Suit.SPADE: "♠",
}

FACE_SYMBOLS = {
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}

SYMBOL_TO_SUIT = {v: k for k, v in SUIT_SYMBOLS.items()}


def parse_suit(token: str) -> Suit:
    """Parse a suit letter ("C", "D", "H" or "S").

    Raises:
        InvalidSuitToken: If the token is anything else
    """
    try:
        return SYMBOL_TO_SUIT[token]
    except KeyError:
        raise InvalidSuitToken(token, f"Invalid suit: {token!r}") from None


def parse_value(token: str) -> Rank:
    """Parse a card value: "2".."10" or one of "T", "J", "Q", "K", "A".

    Raises:
        InvalidValueToken: If the number is outside 2-10 or the symbol is unknown
    """
    if token.isascii() and token.isdecimal():
        number = int(token)
        if 2 <= number <= 10:
            return Rank(number)
        raise InvalidValueToken(token, f"Card value out of range: {token!r}")

    if token in FACE_SYMBOLS:
        return FACE_SYMBOLS[token]
    raise InvalidValueToken(token, f"Invalid card value: {token!r}")


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with rank and suit.

    Cards are ordered by rank first (for sorting hands), then by suit.
    Immutable and hashable for use in sets.
    """

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({RANK_SYMBOLS[self.rank]}{SUIT_SYMBOLS[self.suit]})"

    @property
    def glyph(self) -> str:
        """Display form with a suit symbol, like '10♠'."""
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_GLYPHS[self.suit]}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse a card from a token like '3H' or '10S'.

        Args:
            s: Card string in format "VALUE+SUIT"

        Returns:
            Card object

        Raises:
            InvalidValueToken: If the token is too short or the value is bad
            InvalidSuitToken: If the suit letter is bad
        """
        if len(s) < 2:
            raise InvalidValueToken(s, f"Card token too short: {s!r}")

        rank = parse_value(s[:-1])
        suit = parse_suit(s[-1])
        return cls(rank=rank, suit=suit)


def parse_card(token: str) -> Card:
    """Parse a single card token. See ``Card.from_string``."""
    return Card.from_string(token)


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck.

    Returns:
        List of 52 Card objects (13 ranks x 4 suits)
    """
    return [Card(rank=rank, suit=suit) for rank in CARD_RANKS for suit in Suit]


def sort_cards(cards: Iterable[Card]) -> List[Card]:
    """Sort cards by rank (ascending), then by suit."""
    return sorted(cards)
