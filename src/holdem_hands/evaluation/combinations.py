"""Enumerate the fixed-size subsets of a card set."""
import itertools
from typing import List, Sequence, Tuple

from holdem_hands.core.card import Card
from holdem_hands.core.errors import WrongHandSize

HAND_SIZE = 5


def generate_combinations(
    cards: Sequence[Card],
    size: int = HAND_SIZE
) -> List[Tuple[Card, ...]]:
    """
    Generate every subset of `size` cards, each exactly once.

    Subsets come out in lexicographic order of card positions, so the first
    subset holds the first `size` cards. Seven cards yield 21 subsets.

    Args:
        cards: Cards to choose from
        size: Number of cards per subset

    Returns:
        List of card tuples, preserving the input order within each tuple

    Raises:
        WrongHandSize: If fewer than `size` cards are supplied
    """
    if size <= 0:
        raise ValueError(f"Subset size must be positive, got {size}")
    if len(cards) < size:
        raise WrongHandSize(size, len(cards), at_least=True)

    return list(itertools.combinations(cards, size))
