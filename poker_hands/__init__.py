"""Poker Hands - five-card poker hand evaluation.

Classifies five-card hands, scores them for comparison, and handles the
ace as either high or low in straights.
"""

__version__ = "0.1.0"
__author__ = "Poker Hands Team"

from poker_hands.utils.seeding import set_seed

__all__ = ["__version__", "set_seed"]
