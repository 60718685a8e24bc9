"""Deck construction, shuffling, and dealing.

The deck holds one card per suit and value 2..14. The low ace is not a
separate card: hands derive it from the ace when scoring a straight.
"""

import logging
import random
from typing import List, Optional

from poker_hands.rules import ACE_HIGH, SUITS, Card, Hand, HAND_SIZE

logger = logging.getLogger(__name__)

# Lowest card value dealt (the two)
MIN_DEALT_VALUE = 2

# Number of cards in a full deck
DECK_SIZE = len(SUITS) * (ACE_HIGH - MIN_DEALT_VALUE + 1)

# Number of hands dealt when not specified
DEFAULT_HANDS = 5


def create_standard_deck() -> List[Card]:
    """Create a standard 52-card deck in card order.

    Returns:
        List of 52 Card objects: clubs 2..A, diamonds 2..A, hearts 2..A, spades 2..A
    """
    return [Card(suit, value) for suit in SUITS for value in range(MIN_DEALT_VALUE, ACE_HIGH + 1)]


class Deck:
    """A shuffled deck that deals five-card hands from the top.

    Attributes:
        cards: Cards remaining, the last one is dealt first
        hands: Hands produced by the most recent deal
        rng: Random number generator for shuffling
    """

    def __init__(self, seed: Optional[int] = None):
        # Without a seed, draw one from the global generator so set_seed applies
        if seed is None:
            seed = random.getrandbits(64)
        self.rng = random.Random(seed)
        self.cards: List[Card] = create_standard_deck()
        self.hands: List[Hand] = []
        self.shuffle()

    def __len__(self) -> int:
        return len(self.cards)

    def shuffle(self) -> None:
        """Shuffle the remaining cards in place."""
        self.rng.shuffle(self.cards)
        logger.debug("Shuffled %d cards", len(self.cards))

    def deal(self, hands: int = DEFAULT_HANDS) -> List[Hand]:
        """Deal hands of five cards each.

        Args:
            hands: Number of hands to deal

        Returns:
            List of dealt Hand objects, also kept on ``self.hands``

        Raises:
            ValueError: If the deck does not hold enough cards
        """
        needed = hands * HAND_SIZE
        if hands < 0:
            raise ValueError(f"Cannot deal {hands} hands")
        if needed > len(self.cards):
            raise ValueError(
                f"Not enough cards left in the deck: need {needed}, have {len(self.cards)}"
            )

        dealt = []
        for _ in range(hands):
            cards = self.cards[-HAND_SIZE:]
            del self.cards[-HAND_SIZE:]
            dealt.append(Hand(cards))

        self.hands = dealt
        logger.debug("Dealt %d hands, %d cards left", hands, len(self.cards))
        return dealt
