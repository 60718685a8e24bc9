"""Batched hand scoring with PyTorch.

This module provides:
- Tensor encoding of hands (values and suits, shape [N, 5])
- Batched classification and scoring that matches ``Hand`` exactly
- Random dealing of many hands at once

Key insight: every predicate the CPU ``Hand`` evaluates reduces to a
per-value count table ([N, 15]) plus sorted value rows, so whole batches
can be classified without Python loops.

Score rows have a fixed width of 6 (base score + up to 5 kickers). Hands
with fewer kickers are padded with SCORE_PAD, which sorts below any real
value, so lexicographic row order matches ``Hand.score`` order.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
import torch

from poker_hands.engine.deck import DECK_SIZE, MIN_DEALT_VALUE
from poker_hands.rules import ACE_HIGH, ACE_LOW, HAND_SIZE, Card, Hand, HandType, Suit

logger = logging.getLogger(__name__)

# Base score + one column per card
SCORE_WIDTH = HAND_SIZE + 1

# Filler for unused kicker columns
SCORE_PAD = -1

NUM_HAND_TYPES = len(HandType)

# Count table covers values 0..14; index 0 is never used
_NUM_VALUE_SLOTS = ACE_HIGH + 1

# Kicker sort key = count * _KEY_BASE + value
_KEY_BASE = 16

_CARDS_PER_SUIT = ACE_HIGH - MIN_DEALT_VALUE + 1


def encode_hands(
    hands: Sequence[Hand], device: torch.device = torch.device("cpu")
) -> Tuple[torch.Tensor, torch.Tensor]:
    """Convert hands to (values, suits) tensors of shape [N, 5]."""
    values = np.array([[card.value for card in hand.cards] for hand in hands], dtype=np.int64)
    suits = np.array([[int(card.suit) for card in hand.cards] for hand in hands], dtype=np.int64)
    values = values.reshape(-1, HAND_SIZE)
    suits = suits.reshape(-1, HAND_SIZE)
    return torch.from_numpy(values).to(device), torch.from_numpy(suits).to(device)


def decode_hands(values: torch.Tensor, suits: torch.Tensor) -> List[Hand]:
    """Convert (values, suits) tensors back to Hand objects."""
    hands = []
    for value_row, suit_row in zip(values.tolist(), suits.tolist()):
        hands.append(Hand(tuple(Card(Suit(s), v) for v, s in zip(value_row, suit_row))))
    return hands


def deal_random_hands(
    n: int,
    generator: Optional[torch.Generator] = None,
    device: torch.device = torch.device("cpu"),
) -> Tuple[torch.Tensor, torch.Tensor]:
    """Deal ``n`` independent hands, each from its own shuffled 52-card deck.

    Args:
        n: Number of hands
        generator: Optional torch generator for reproducibility
        device: Device for the returned tensors

    Returns:
        (values, suits) tensors of shape [n, 5]
    """
    noise = torch.rand(n, DECK_SIZE, generator=generator, device=device)
    card_idx = noise.argsort(dim=1)[:, :HAND_SIZE]
    suits = card_idx // _CARDS_PER_SUIT
    values = card_idx % _CARDS_PER_SUIT + MIN_DEALT_VALUE
    return values, suits


def category_counts(hand_types: torch.Tensor) -> np.ndarray:
    """Count hands per type. Index i holds the count for HandType(i)."""
    return np.bincount(hand_types.cpu().numpy(), minlength=NUM_HAND_TYPES)


@dataclass
class BatchHandScorer:
    """Vectorized hand classification and scoring.

    Keeps its lookup tensors on one device to avoid transfer overhead.
    """

    device: torch.device

    # Pre-computed tensors
    value_slots: torch.Tensor  # [15] - 0..14, the value each count column stands for

    def __init__(self, device: torch.device = torch.device("cpu")):
        self.device = device
        self.value_slots = torch.arange(_NUM_VALUE_SLOTS, device=self.device, dtype=torch.long)

    def score_hands(self, hands: Sequence[Hand]) -> Tuple[torch.Tensor, torch.Tensor]:
        """Score Hand objects. See ``score_batched``."""
        values, suits = encode_hands(hands, self.device)
        return self.score_batched(values, suits)

    def score_batched(
        self, values: torch.Tensor, suits: torch.Tensor
    ) -> Tuple[torch.Tensor, torch.Tensor]:
        """Classify and score a batch of hands.

        Args:
            values: [N, 5] card values in 1..14
            suits: [N, 5] suit indices in 0..3

        Returns:
            hand_types: [N] HandType values (equal to base scores)
            scores: [N, 6] base score then kickers, padded with SCORE_PAD

        Raises:
            ValueError: If the tensors are not both shaped [N, 5]
        """
        if values.dim() != 2 or values.shape[1] != HAND_SIZE or values.shape != suits.shape:
            raise ValueError(
                f"Expected values and suits shaped [N, {HAND_SIZE}], "
                f"got {tuple(values.shape)} and {tuple(suits.shape)}"
            )

        values = values.to(self.device, dtype=torch.long)
        suits = suits.to(self.device, dtype=torch.long)
        batch = values.shape[0]
        logger.debug("Scoring %d hands on %s", batch, self.device)

        # [N, 15] number of cards holding each value
        counts = torch.zeros(batch, _NUM_VALUE_SLOTS, dtype=torch.long, device=self.device)
        counts.scatter_add_(1, values, torch.ones_like(values))

        has_four = (counts == 4).any(dim=1)
        has_three = (counts == 3).any(dim=1)
        has_two = (counts == 2).any(dim=1)
        collapsed = HAND_SIZE - (counts > 0).sum(dim=1)

        is_flush = (suits == suits[:, :1]).all(dim=1)

        high_sorted, _ = values.sort(dim=1)
        is_high_straight = self._consecutive(high_sorted)

        has_ace = (values == ACE_HIGH).any(dim=1)
        low_sorted, _ = values.masked_fill(values == ACE_HIGH, ACE_LOW).sort(dim=1)
        is_low_straight = has_ace & self._consecutive(low_sorted)

        is_straight = is_high_straight | is_low_straight

        # Weakest first, so stronger matches overwrite weaker ones
        checks = [
            (has_two, HandType.PAIR),
            ((collapsed == 2) & has_two, HandType.TWO_PAIR),
            ((collapsed == 2) & has_three, HandType.THREE_OF_A_KIND),
            (is_straight, HandType.STRAIGHT),
            (is_flush, HandType.FLUSH),
            (has_three & has_two, HandType.FULL_HOUSE),
            (has_four, HandType.FOUR_OF_A_KIND),
            (is_straight & is_flush, HandType.STRAIGHT_FLUSH),
        ]
        hand_types = torch.full((batch,), int(HandType.HIGH_CARD), dtype=torch.long, device=self.device)
        for matched, hand_type in checks:
            hand_types = torch.where(matched, torch.full_like(hand_types, int(hand_type)), hand_types)

        kickers = self._kickers(counts)
        low_kickers = low_sorted.flip(dims=[1])
        kickers = torch.where(is_low_straight.unsqueeze(1), low_kickers, kickers)

        scores = torch.cat([hand_types.unsqueeze(1), kickers], dim=1)
        return hand_types, scores

    def _consecutive(self, sorted_values: torch.Tensor) -> torch.Tensor:
        """[N] whether each sorted row steps up by exactly one."""
        return (sorted_values[:, 1:] - sorted_values[:, :-1] == 1).all(dim=1)

    def _kickers(self, counts: torch.Tensor) -> torch.Tensor:
        """[N, 5] distinct values by (count, value) descending, padded.

        Repeated values come first (most repeated, then highest), then the
        single values from high to low.
        """
        keys = counts * _KEY_BASE + self.value_slots
        keys = torch.where(counts > 0, keys, torch.full_like(keys, SCORE_PAD))
        top, _ = keys.sort(dim=1, descending=True)
        top = top[:, :HAND_SIZE]
        return torch.where(top >= 0, top % _KEY_BASE, torch.full_like(top, SCORE_PAD))
