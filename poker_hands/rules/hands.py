"""Hand type detection, scoring, and comparison.

Hand types (strongest first), each with its base score:
- Straight flush (8): a straight whose cards share one suit
- Four of a kind (7): four cards of the same value
- Full house (6): three of one value + two of another
- Flush (5): all five cards share one suit
- Straight (4): five consecutive values, ace high (10-A) or ace low (A-5)
- Three of a kind (3): three cards of the same value
- Two pair (2): two pairs of different values
- Pair (1): two cards of the same value
- High card (0): none of the above

Scoring:
- A hand's score is its base score followed by its kickers
- Kickers: repeated values first (most repeated, then highest), each once,
  then the remaining single values from high to low
- In an ace-low straight the ace counts as 1, so A-2-3-4-5 scores (4, 5, 4, 3, 2, 1)
- Scores compare lexicographically: a higher score is a stronger hand
"""

from collections import Counter
from dataclasses import dataclass
from enum import IntEnum
from functools import cached_property
from typing import Callable, List, Sequence, Tuple

from .cards import Card, Suit, value_of
from .notation import parse_cards

# Number of cards in a hand
HAND_SIZE = 5


class HandType(IntEnum):
    """Hand categories. The value of each member is its base score."""

    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8

    @property
    def base_score(self) -> int:
        return int(self)

    def __str__(self) -> str:
        return self.name.lower()


class InvalidHand(ValueError):
    """Raised when a hand is built from anything other than five cards."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(f"There must be {HAND_SIZE} cards, got {count}")


@dataclass(frozen=True, eq=False)
class Hand:
    """An immutable hand of five cards, sorted by value.

    Two hands are equal when they hold the same five cards, whatever order
    cards of equal value were given in.

    Attributes:
        cards: Tuple of cards, ascending by value (ties keep input order)
    """

    cards: Tuple[Card, ...]

    def __post_init__(self):
        cards = tuple(self.cards)
        if len(cards) != HAND_SIZE:
            raise InvalidHand(len(cards))
        object.__setattr__(self, "cards", tuple(sorted(cards, key=value_of)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return self._card_set_key == other._card_set_key

    def __hash__(self) -> int:
        return hash(self._card_set_key)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(c) for c in self.cards)
        return f"{self.hand_type.name}({cards_str})"

    @classmethod
    def from_string(cls, text: str) -> "Hand":
        """Build a hand from shorthand notation, e.g. "h14 h2 h3 h4 h5"."""
        return cls(parse_cards(text))

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    @cached_property
    def rank(self) -> Tuple[HandType, int]:
        """The hand's type and that type's base score."""
        for is_match, hand_type in _RANK_CHECKS:
            if is_match(self):
                return hand_type, hand_type.base_score
        return HandType.HIGH_CARD, HandType.HIGH_CARD.base_score

    @property
    def hand_type(self) -> HandType:
        return self.rank[0]

    @property
    def base_score(self) -> int:
        return self.rank[1]

    @cached_property
    def score(self) -> Tuple[int, ...]:
        """Base score followed by the kickers, for lexicographic comparison."""
        return (self.base_score,) + self.kickers

    @cached_property
    def kickers(self) -> Tuple[int, ...]:
        """Tie-breaking values, ordered high to low."""
        if self.is_aces_low_straight():
            tail = [card.value for card in reversed(self.aces_low.cards)]
        else:
            tail = sorted(self._single_values(), reverse=True)
        return tuple(self._grouped_values() + tail)

    # ------------------------------------------------------------------
    # Hand type predicates
    # ------------------------------------------------------------------

    def is_straight_flush(self) -> bool:
        return self.is_straight() and self.is_flush()

    def is_four_of_a_kind(self) -> bool:
        return self._has_same_of_kind(4)

    def is_full_house(self) -> bool:
        return self._has_same_of_kind(3) and self._has_same_of_kind(2)

    def is_flush(self) -> bool:
        """If the hand only contains one suit, it's a flush."""
        return len(set(self.suits)) == 1

    def is_straight(self) -> bool:
        """Check for five consecutive values, with the ace either high or low."""
        return self.is_aces_high_straight() or self.is_aces_low_straight()

    def is_three_of_a_kind(self) -> bool:
        return self._collapsed_size == 2 and self._has_same_of_kind(3)

    def is_two_pair(self) -> bool:
        return self._collapsed_size == 2 and self._has_same_of_kind(2)

    def is_pair(self) -> bool:
        return self._has_same_of_kind(2)

    def is_aces_high_straight(self) -> bool:
        """A standard straight, treating aces as high."""
        return all(a.successor_of(b) for a, b in zip(self.cards, self.cards[1:]))

    def is_aces_low_straight(self) -> bool:
        """A straight that only works with every ace valued 1 (A-2-3-4-5)."""
        return self.has_aces and self.aces_low.is_aces_high_straight()

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------

    @property
    def has_aces(self) -> bool:
        """Does the hand include one or more aces?"""
        return any(card.is_ace for card in self.cards)

    @cached_property
    def aces_low(self) -> "Hand":
        """The same hand with every ace revalued as 1."""
        return Hand(tuple(card.low_card for card in self.cards))

    @cached_property
    def values(self) -> Tuple[int, ...]:
        """Card values, low to high (aces high)."""
        return tuple(sorted(card.value for card in self.cards))

    @cached_property
    def suits(self) -> Tuple[Suit, ...]:
        """Card suits, in deck order of the cards."""
        return tuple(card.suit for card in sorted(self.cards))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @cached_property
    def _card_set_key(self) -> Tuple[Card, ...]:
        return tuple(sorted(self.cards))

    @cached_property
    def _value_counts(self) -> Counter:
        return Counter(card.value for card in self.cards)

    @property
    def _collapsed_size(self) -> int:
        """How many cards vanish if the hand is collapsed to distinct values."""
        return len(self.cards) - len(self._value_counts)

    def _has_same_of_kind(self, n: int) -> bool:
        return n in self._value_counts.values()

    def _grouped_values(self) -> List[int]:
        repeated = [(count, value) for value, count in self._value_counts.items() if count > 1]
        return [value for count, value in sorted(repeated, reverse=True)]

    def _single_values(self) -> List[int]:
        return [value for value, count in self._value_counts.items() if count == 1]


# Checked in order; the first match decides the hand type
_RANK_CHECKS: Sequence[Tuple[Callable[[Hand], bool], HandType]] = (
    (Hand.is_straight_flush, HandType.STRAIGHT_FLUSH),
    (Hand.is_four_of_a_kind, HandType.FOUR_OF_A_KIND),
    (Hand.is_full_house, HandType.FULL_HOUSE),
    (Hand.is_flush, HandType.FLUSH),
    (Hand.is_straight, HandType.STRAIGHT),
    (Hand.is_three_of_a_kind, HandType.THREE_OF_A_KIND),
    (Hand.is_two_pair, HandType.TWO_PAIR),
    (Hand.is_pair, HandType.PAIR),
)


def compare_hands(hand1: Hand, hand2: Hand) -> int:
    """Compare two hands by score.

    Args:
        hand1: First hand
        hand2: Second hand

    Returns:
        Positive if hand1 is stronger, negative if hand2 is, zero if they tie
    """
    if hand1.score > hand2.score:
        return 1
    if hand1.score < hand2.score:
        return -1
    return 0
