"""Card dealing.

This module provides:
- Deck: a shuffled 52-card deck that deals five-card hands
- create_standard_deck: the unshuffled deck in card order
"""

from .deck import (
    Deck,
    DEFAULT_HANDS,
    DECK_SIZE,
    create_standard_deck,
)

__all__ = [
    "Deck",
    "DEFAULT_HANDS",
    "DECK_SIZE",
    "create_standard_deck",
]
