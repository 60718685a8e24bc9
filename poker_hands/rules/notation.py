"""Card shorthand notation.

A card is written as a suit letter followed by its value, e.g. ``h14`` for
the ace of hearts or ``c2`` for the two of clubs. Suit letters are
case-insensitive. Values run from 2 to 14; the low ace (1) is never
written, it only exists as a derived view of an ace.

A list of cards is any run of such tokens separated by whitespace or
punctuation: ``"h2 h3 h4 h5 h6"`` or ``"c10,c11;s12"``. Letters and digits
always belong to a token, so a stray word such as ``x`` is rejected rather
than skipped.
"""

import re
from typing import List

from .cards import Card, Suit

LETTER_TO_SUIT = {
    "c": Suit.CLUBS,
    "d": Suit.DIAMONDS,
    "h": Suit.HEARTS,
    "s": Suit.SPADES,
}

SUIT_TO_LETTER = {v: k for k, v in LETTER_TO_SUIT.items()}

MIN_NOTATION_VALUE = 2
MAX_NOTATION_VALUE = 14

_CARD_PATTERN = re.compile(r"^([a-z])(\d+)$", re.IGNORECASE)
_SEPARATOR = re.compile(r"[^a-z\d]", re.IGNORECASE)


class InvalidCardNotation(ValueError):
    """Raised when a card token cannot be parsed."""

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid card notation {text!r}: {reason}")


def parse_card(text: str) -> Card:
    """Parse a card from a token like 'h14' or 'C2'.

    Args:
        text: Card token in format "SUIT+VALUE"

    Returns:
        Card object

    Raises:
        InvalidCardNotation: If the suit letter is unknown or the value is
            outside 2..14
    """
    match = _CARD_PATTERN.match(text.strip())
    if match is None:
        raise InvalidCardNotation(text, "expected a suit letter followed by a number")

    letter, digits = match.groups()
    suit = LETTER_TO_SUIT.get(letter.lower())
    if suit is None:
        raise InvalidCardNotation(text, f"unknown suit letter {letter!r}")

    value = int(digits)
    if not MIN_NOTATION_VALUE <= value <= MAX_NOTATION_VALUE:
        raise InvalidCardNotation(
            text, f"value must be between {MIN_NOTATION_VALUE} and {MAX_NOTATION_VALUE}"
        )

    return Card(suit, value)


def parse_cards(text: str) -> List[Card]:
    """Parse cards from a string like "h2 h3 h4 h5 h6".

    Args:
        text: Card tokens separated by whitespace or punctuation

    Returns:
        List of Card objects, in the order written
    """
    return [parse_card(token) for token in _SEPARATOR.split(text) if token]


def format_card(card: Card) -> str:
    """Write a card in shorthand notation. Inverse of ``parse_card``."""
    return f"{SUIT_TO_LETTER[card.suit]}{card.value}"
