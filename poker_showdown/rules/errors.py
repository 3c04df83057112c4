"""Exceptions raised while parsing and evaluating hands.

Card-level errors (bad suit or value token) are wrapped into hand-level
errors by the hand parser, so callers of ``parse_hand`` and ``winning_hands``
only need to catch ``HandParseError`` (or ``ShowdownError``).
"""


class ShowdownError(Exception):
    """Base class for all poker_showdown errors."""

    pass


class CardParseError(ShowdownError, ValueError):
    """Raised when a single card token cannot be parsed."""

    def __init__(self, token: str, message: str):
        super().__init__(message)
        self.token = token


class InvalidSuitToken(CardParseError):
    """The trailing character of a card token is not one of C/D/H/S."""

    pass


class InvalidValueToken(CardParseError):
    """The leading part of a card token is not 2-10 or a face symbol."""

    pass


class HandParseError(ShowdownError, ValueError):
    """Raised when a hand string cannot form a valid five-card hand."""

    def __init__(self, source: str, message: str):
        super().__init__(message)
        self.source = source


class MalformedHand(HandParseError):
    """Wrong number of tokens, or one of the tokens is not a card."""

    pass


class DuplicateCard(HandParseError):
    """The same card appears twice."""

    def __init__(self, source: str, card, message: str):
        super().__init__(source, message)
        self.card = card


class HandInvariantError(ShowdownError, RuntimeError):
    """Internal state that five validated cards can never produce."""

    pass
