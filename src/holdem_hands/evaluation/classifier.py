"""Classify a five card hand into one of the ten hand categories."""
from collections import Counter
from dataclasses import dataclass
from typing import List, Sequence

from holdem_hands.core.card import Card, Rank
from holdem_hands.core.errors import WrongHandSize
from holdem_hands.evaluation.combinations import HAND_SIZE
from holdem_hands.evaluation.hand_types import (
    Flush, FourOfAKind, FullHouse, HandCategory, HighCard, Pair, RoyalFlush,
    Straight, StraightFlush, ThreeOfAKind, TwoPair
)

ROYAL_RANKS = frozenset({Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING, Rank.ACE})


@dataclass(frozen=True)
class _HandShape:
    """Rank tally and derived flags shared by every category check."""
    tally: Counter
    ranks_desc: List[Rank]
    is_flush: bool
    is_straight: bool

    @classmethod
    def of(cls, cards: Sequence[Card]) -> '_HandShape':
        tally = Counter(card.rank for card in cards)
        ranks_asc = sorted(card.rank for card in cards)
        is_straight = all(
            high - low == 1 for low, high in zip(ranks_asc, ranks_asc[1:])
        )
        return cls(
            tally=tally,
            ranks_desc=ranks_asc[::-1],
            is_flush=len({card.suit for card in cards}) == 1,
            is_straight=is_straight,
        )

    def ranks_with_count(self, count: int) -> List[Rank]:
        """Ranks appearing exactly `count` times, highest first."""
        return sorted(
            (rank for rank, n in self.tally.items() if n == count),
            reverse=True,
        )

    @property
    def high_card(self) -> Rank:
        return self.ranks_desc[0]


def classify(cards: Sequence[Card]) -> HandCategory:
    """
    Classify exactly five cards.

    Categories are tried strongest first and the first match wins, since a
    hand can also satisfy the pattern of a weaker category.

    Args:
        cards: The five cards to classify

    Returns:
        The single matching hand category

    Raises:
        WrongHandSize: If not given exactly five cards
    """
    if len(cards) != HAND_SIZE:
        raise WrongHandSize(HAND_SIZE, len(cards))

    shape = _HandShape.of(cards)
    quads = shape.ranks_with_count(4)
    trips = shape.ranks_with_count(3)
    pairs = shape.ranks_with_count(2)
    singles = shape.ranks_with_count(1)

    if shape.is_flush and set(shape.tally) == ROYAL_RANKS:
        return RoyalFlush()
    if shape.is_flush and shape.is_straight:
        return StraightFlush(high_card=shape.high_card)
    if quads:
        return FourOfAKind(quad_rank=quads[0])
    if trips and pairs:
        return FullHouse(triple_rank=trips[0])
    if shape.is_flush:
        return Flush(high_card=shape.high_card)
    if shape.is_straight:
        return Straight(high_card=shape.high_card)
    if trips:
        return ThreeOfAKind(triple_rank=trips[0])
    if len(pairs) == 2:
        return TwoPair(
            high_pair_rank=pairs[0],
            low_pair_rank=pairs[1],
            kicker=singles[0],
        )
    if pairs:
        return Pair(
            pair_rank=pairs[0],
            kicker1=singles[0],
            kicker2=singles[1],
            kicker3=singles[2],
        )
    return HighCard(kickers=tuple(shape.ranks_desc))
