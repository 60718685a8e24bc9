"""Batched hand scoring on tensors.

This module provides:
- BatchHandScorer: vectorized classification and scoring
- encode_hands / decode_hands: Hand objects <-> [N, 5] tensors
- deal_random_hands: many random hands at once
- category_counts: hands per HandType
"""

from .tensor_scoring import (
    BatchHandScorer,
    SCORE_WIDTH,
    SCORE_PAD,
    NUM_HAND_TYPES,
    encode_hands,
    decode_hands,
    deal_random_hands,
    category_counts,
)

__all__ = [
    "BatchHandScorer",
    "SCORE_WIDTH",
    "SCORE_PAD",
    "NUM_HAND_TYPES",
    "encode_hands",
    "decode_hands",
    "deal_random_hands",
    "category_counts",
]
