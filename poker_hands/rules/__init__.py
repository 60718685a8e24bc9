"""Poker rules implementations.

This module provides:
- Card and suit definitions (cards.py)
- Card shorthand parsing (notation.py)
- Hand type detection, scoring and comparison (hands.py)
"""

from .cards import (
    Suit,
    Card,
    InvalidCard,
    SUITS,
    SUIT_SYMBOLS,
    ACE_LOW,
    ACE_HIGH,
    MIN_VALUE,
    MAX_VALUE,
    same_rank,
    identical,
    value_of,
)

from .notation import (
    InvalidCardNotation,
    parse_card,
    parse_cards,
    format_card,
)

from .hands import (
    HandType,
    Hand,
    InvalidHand,
    HAND_SIZE,
    compare_hands,
)

__all__ = [
    # Cards
    "Suit",
    "Card",
    "InvalidCard",
    "SUITS",
    "SUIT_SYMBOLS",
    "ACE_LOW",
    "ACE_HIGH",
    "MIN_VALUE",
    "MAX_VALUE",
    "same_rank",
    "identical",
    "value_of",
    # Notation
    "InvalidCardNotation",
    "parse_card",
    "parse_cards",
    "format_card",
    # Hands
    "HandType",
    "Hand",
    "InvalidHand",
    "HAND_SIZE",
    "compare_hands",
]
