"""Tie-break comparators for hands of the same category.

Each comparator is a key function over a category's payload; a larger key
is a stronger hand. `tie_breaker` turns those keys into local rankings.
"""
import logging
from typing import Callable, Dict, List, Sequence, Tuple

from holdem_hands.core.card import Rank
from holdem_hands.evaluation.hand_types import (
    Flush, FourOfAKind, FullHouse, HandCategory, HandType, HighCard, Pair,
    RoyalFlush, Straight, StraightFlush, ThreeOfAKind, TwoPair
)

logger = logging.getLogger(__name__)

TieBreakKey = Tuple[Rank, ...]


def royal_flush_key(hand: RoyalFlush) -> TieBreakKey:
    # all royal flushes are of equal strength
    return ()


def straight_flush_key(hand: StraightFlush) -> TieBreakKey:
    return (hand.high_card,)


def four_of_a_kind_key(hand: FourOfAKind) -> TieBreakKey:
    return (hand.quad_rank,)


def full_house_key(hand: FullHouse) -> TieBreakKey:
    return (hand.triple_rank,)


def flush_key(hand: Flush) -> TieBreakKey:
    return (hand.high_card,)


def straight_key(hand: Straight) -> TieBreakKey:
    return (hand.high_card,)


def three_of_a_kind_key(hand: ThreeOfAKind) -> TieBreakKey:
    return (hand.triple_rank,)


def two_pair_key(hand: TwoPair) -> TieBreakKey:
    """Highest pair, then lower pair, then kicker."""
    return (hand.high_pair_rank, hand.low_pair_rank, hand.kicker)


def pair_key(hand: Pair) -> TieBreakKey:
    """Pair rank, then each kicker from highest to lowest."""
    return (hand.pair_rank, hand.kicker1, hand.kicker2, hand.kicker3)


def high_card_key(hand: HighCard) -> TieBreakKey:
    return tuple(hand.kickers)


TIE_BREAKERS: Dict[HandType, Callable[..., TieBreakKey]] = {
    HandType.ROYAL_FLUSH: royal_flush_key,
    HandType.STRAIGHT_FLUSH: straight_flush_key,
    HandType.FOUR_OF_A_KIND: four_of_a_kind_key,
    HandType.FULL_HOUSE: full_house_key,
    HandType.FLUSH: flush_key,
    HandType.STRAIGHT: straight_key,
    HandType.THREE_OF_A_KIND: three_of_a_kind_key,
    HandType.TWO_PAIR: two_pair_key,
    HandType.PAIR: pair_key,
    HandType.HIGH_CARD: high_card_key,
}


def tie_breaker(hands: Sequence[HandCategory]) -> List[int]:
    """
    Rank hands that all belong to the same category.

    Args:
        hands: Hands of a single hand type

    Returns:
        Local rankings starting at 1, in input order. Hands with equal
        payloads share a rank, and every other hand's rank is one more than
        the number of hands strictly stronger than it.

    Raises:
        ValueError: If `hands` is empty or mixes hand types
    """
    if not hands:
        raise ValueError("Cannot break ties between zero hands")
    hand_type = hands[0].hand_type
    mixed = [h for h in hands if h.hand_type is not hand_type]
    if mixed:
        raise ValueError(
            f"Cannot break ties across hand types: {hand_type.display_name} "
            f"and {mixed[0].hand_type.display_name}"
        )

    key = TIE_BREAKERS[hand_type]
    keys = [key(hand) for hand in hands]
    order = sorted(range(len(hands)), key=lambda i: keys[i], reverse=True)

    rankings = [0] * len(hands)
    for position, index in enumerate(order):
        previous = order[position - 1] if position else None
        if previous is not None and keys[previous] == keys[index]:
            # equal strength keeps the rank of the hand before it
            rankings[index] = rankings[previous]
        else:
            rankings[index] = position + 1

    logger.debug(f"Tie-break among {len(hands)} {hand_type.display_name} hands: {rankings}")
    return rankings
