"""Hand categories produced by the classifier.

Each category is a frozen dataclass carrying only the ranks needed to break
ties against another hand of the same category. Suits never appear in a
payload, so equal-rank flushes and straights compare equal.
"""
from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering
from typing import ClassVar, Tuple

from holdem_hands.core.card import Rank


class HandType(IntEnum):
    """Poker hand categories; a larger value is a stronger hand."""
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9
    ROYAL_FLUSH = 10

    @property
    def display_name(self) -> str:
        return HAND_TYPE_NAMES[self]

    @classmethod
    def strongest_first(cls) -> Tuple['HandType', ...]:
        return tuple(sorted(cls, reverse=True))


HAND_TYPE_NAMES = {
    HandType.ROYAL_FLUSH: 'Royal Flush',
    HandType.STRAIGHT_FLUSH: 'Straight Flush',
    HandType.FOUR_OF_A_KIND: 'Four of a Kind',
    HandType.FULL_HOUSE: 'Full House',
    HandType.FLUSH: 'Flush',
    HandType.STRAIGHT: 'Straight',
    HandType.THREE_OF_A_KIND: 'Three of a Kind',
    HandType.TWO_PAIR: 'Two Pair',
    HandType.PAIR: 'Pair',
    HandType.HIGH_CARD: 'High Card',
}


@total_ordering
class HandCategory:
    """
    Base class for the ten hand categories.

    Categories order first by hand type, then by the tie-break comparator
    for their type.
    """
    hand_type: ClassVar[HandType]

    def strength_key(self) -> Tuple[int, ...]:
        # Import here to avoid circular imports
        from holdem_hands.evaluation.tie_breakers import TIE_BREAKERS
        payload = TIE_BREAKERS[self.hand_type](self)
        return (int(self.hand_type), *(int(rank) for rank in payload))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, HandCategory):
            return NotImplemented
        return self.strength_key() < other.strength_key()

    def __str__(self) -> str:
        return self.hand_type.display_name


@dataclass(frozen=True)
class RoyalFlush(HandCategory):
    hand_type: ClassVar[HandType] = HandType.ROYAL_FLUSH


@dataclass(frozen=True)
class StraightFlush(HandCategory):
    high_card: Rank

    hand_type: ClassVar[HandType] = HandType.STRAIGHT_FLUSH


@dataclass(frozen=True)
class FourOfAKind(HandCategory):
    quad_rank: Rank

    hand_type: ClassVar[HandType] = HandType.FOUR_OF_A_KIND


@dataclass(frozen=True)
class FullHouse(HandCategory):
    triple_rank: Rank

    hand_type: ClassVar[HandType] = HandType.FULL_HOUSE


@dataclass(frozen=True)
class Flush(HandCategory):
    high_card: Rank

    hand_type: ClassVar[HandType] = HandType.FLUSH


@dataclass(frozen=True)
class Straight(HandCategory):
    high_card: Rank

    hand_type: ClassVar[HandType] = HandType.STRAIGHT


@dataclass(frozen=True)
class ThreeOfAKind(HandCategory):
    triple_rank: Rank

    hand_type: ClassVar[HandType] = HandType.THREE_OF_A_KIND


@dataclass(frozen=True)
class TwoPair(HandCategory):
    high_pair_rank: Rank
    low_pair_rank: Rank
    kicker: Rank

    hand_type: ClassVar[HandType] = HandType.TWO_PAIR


@dataclass(frozen=True)
class Pair(HandCategory):
    pair_rank: Rank
    kicker1: Rank
    kicker2: Rank
    kicker3: Rank

    hand_type: ClassVar[HandType] = HandType.PAIR


@dataclass(frozen=True)
class HighCard(HandCategory):
    """Five unrelated ranks, highest first."""
    kickers: Tuple[Rank, Rank, Rank, Rank, Rank]

    hand_type: ClassVar[HandType] = HandType.HIGH_CARD

    def __post_init__(self):
        object.__setattr__(self, 'kickers', tuple(self.kickers))
        if len(self.kickers) != 5:
            raise ValueError(f"High card needs 5 kickers, got {len(self.kickers)}")
        if list(self.kickers) != sorted(self.kickers, reverse=True):
            raise ValueError(f"High card kickers must be descending: {self.kickers}")

