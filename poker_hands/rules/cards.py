"""Card definitions and comparisons.

Suit order (low to high): clubs < diamonds < hearts < spades
Value range: 1 (ace low) .. 14 (ace high)

This module provides:
- Suit constants and ordering
- Card representation with ace-low / ace-high views
- Rank (value-only) and identity (suit and value) comparisons
- Deck-order adjacency (successor)

Two cards of the same value but different suits have the same rank, but
they are not the same card. Use ``same_rank`` when counting or detecting
straights, and ``identical`` (or ``==``) when the suit matters.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class Suit(IntEnum):
    """Card suits. Order matters for deck ordering, not for hand scoring."""

    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


SUITS = tuple(Suit)

# Value to use as ace low
ACE_LOW = 1

# Value to use as ace high
ACE_HIGH = 14

MIN_VALUE = ACE_LOW
MAX_VALUE = ACE_HIGH

SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}

VALUE_SYMBOLS = {ACE_LOW: "A", 11: "J", 12: "Q", 13: "K", ACE_HIGH: "A"}


class InvalidCard(ValueError):
    """Raised when a card is built from an unknown suit or out-of-range value."""

    def __init__(self, suit: Any, value: Any):
        self.suit = suit
        self.value = value
        super().__init__(f"Invalid card: suit={suit!r}, value={value!r}")


@dataclass(frozen=True, order=True)
class Card:
    """A playing card with suit and value.

    Cards are ordered by suit first, then by value, which lays a deck out
    as clubs 2..A, diamonds 2..A and so on. Equality and hashing use both
    fields; hands compare cards by rank with ``same_rank`` instead.
    """

    suit: Suit
    value: int

    def __post_init__(self):
        if not isinstance(self.suit, Suit):
            raise InvalidCard(self.suit, self.value)
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise InvalidCard(self.suit, self.value)
        if not MIN_VALUE <= self.value <= MAX_VALUE:
            raise InvalidCard(self.suit, self.value)

    def __str__(self) -> str:
        symbol = VALUE_SYMBOLS.get(self.value, str(self.value))
        return f"{symbol}{SUIT_SYMBOLS[self.suit]}"

    def __repr__(self) -> str:
        return f"Card({self.suit.name.lower()}, {self.value})"

    @property
    def is_ace(self) -> bool:
        """Whether the card is an ace valued high."""
        return self.value == ACE_HIGH

    @property
    def is_ace_low(self) -> bool:
        return self.value == ACE_LOW

    @property
    def is_clubs(self) -> bool:
        return self.suit == Suit.CLUBS

    @property
    def is_diamonds(self) -> bool:
        return self.suit == Suit.DIAMONDS

    @property
    def is_hearts(self) -> bool:
        return self.suit == Suit.HEARTS

    @property
    def is_spades(self) -> bool:
        return self.suit == Suit.SPADES

    @property
    def low_card(self) -> "Card":
        """The card with an ace revalued as 1; any other card is returned as is."""
        if self.is_ace:
            return Card(self.suit, ACE_LOW)
        return self

    @property
    def successor(self) -> "Card":
        """The next card in deck order.

        An ace is followed by the low ace of the next suit (spades wrap
        around to clubs), so this is not a poker-straight successor.
        """
        if self.is_ace:
            next_suit = SUITS[(SUITS.index(self.suit) + 1) % len(SUITS)]
            return Card(next_suit, ACE_LOW)
        return Card(self.suit, self.value + 1)

    def compare(self, other: "Card") -> int:
        """Compare two cards in deck order.

        Returns:
            Negative if self sorts first, positive if other does, zero if identical
        """
        if self < other:
            return -1
        if self > other:
            return 1
        return 0

    def same_rank(self, other: "Card") -> bool:
        """Check if two cards share a value, ignoring suit."""
        return self.value == other.value

    def identical(self, other: "Card") -> bool:
        """Check if two cards share both suit and value."""
        return self.suit == other.suit and self.value == other.value

    def successor_of(self, other: "Card") -> bool:
        """Check if ``other`` has the value directly above this card.

        Suits are ignored, so this is the adjacency used for straights.
        An ace high has no successor.
        """
        return not self.is_ace and self.successor.same_rank(other)

    def strict_successor_of(self, other: "Card") -> bool:
        """Check if ``other`` is exactly the next card in deck order."""
        return not self.is_ace and self.successor.identical(other)


def same_rank(a: Card, b: Card) -> bool:
    """Check if two cards have the same value, regardless of suit."""
    return a.same_rank(b)


def identical(a: Card, b: Card) -> bool:
    """Check if two cards have the same suit and value."""
    return a.identical(b)


def value_of(card: Card) -> int:
    """Get the card value (14 for ace high, 1 for ace low)."""
    return card.value
