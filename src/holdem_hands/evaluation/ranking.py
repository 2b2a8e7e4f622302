"""Best hand selection and ranking across players."""
import logging
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from holdem_hands.core.card import Card
from holdem_hands.core.errors import RankingInvariantViolated, WrongHandSize
from holdem_hands.evaluation.classifier import classify
from holdem_hands.evaluation.combinations import generate_combinations
from holdem_hands.evaluation.hand_description import describe_hand_detailed
from holdem_hands.evaluation.hand_types import HandCategory, HandType
from holdem_hands.evaluation.tie_breakers import tie_breaker

logger = logging.getLogger(__name__)

PLAYER_HAND_SIZE = 7


@dataclass(frozen=True)
class BestHand:
    """
    The strongest hand a player can make.

    Attributes:
        category: Classified hand
        cards: The five cards that make the hand
    """
    category: HandCategory
    cards: Tuple[Card, ...]

    @property
    def description(self) -> str:
        return describe_hand_detailed(self.category)

    def __str__(self) -> str:
        return f"{self.description} ({' '.join(str(c) for c in self.cards)})"


def rank_hands(hands: Sequence[HandCategory]) -> List[int]:
    """
    Rank classified hands against each other.

    The ranking in a particular index of the result corresponds to the hand
    at that index in the input. Rank 1 is the strongest hand, hands of equal
    strength share a rank, and any other hand's rank is one more than the
    number of hands strictly stronger than it.

    Args:
        hands: Classified hands, e.g. one best hand per player

    Returns:
        List of rankings, same length and order as `hands`
    """
    rankings = [0] * len(hands)
    rank_counter = 1
    for hand_type in HandType.strongest_first():
        considered = [i for i, hand in enumerate(hands) if hand.hand_type is hand_type]
        if not considered:
            continue

        if len(considered) == 1:
            rankings[considered[0]] = rank_counter
        else:
            local = tie_breaker([hands[i] for i in considered])
            for index, rank in zip(considered, local):
                rankings[index] = rank + rank_counter - 1
        rank_counter += len(considered)

    return rankings


def compare_hands(hand1: HandCategory, hand2: HandCategory) -> int:
    """
    Compare two classified hands.

    Returns:
        1 if hand1 wins, -1 if hand2 wins, 0 if tie
    """
    if hand1 > hand2:
        return 1
    if hand1 < hand2:
        return -1
    return 0


def evaluate_best_hand(cards: Sequence[Card]) -> BestHand:
    """
    Find the best five card hand within a player's seven cards.

    Every five card combination is classified, the classifications are
    ranked against each other and the first one ranked 1 is kept.

    Args:
        cards: The five community cards plus the player's two hole cards

    Returns:
        BestHand with the winning category and the cards that make it

    Raises:
        WrongHandSize: If not given exactly seven cards
        RankingInvariantViolated: If no combination is ranked first
    """
    if len(cards) != PLAYER_HAND_SIZE:
        raise WrongHandSize(PLAYER_HAND_SIZE, len(cards))

    combos = generate_combinations(cards)
    categories = [classify(combo) for combo in combos]
    rankings = rank_hands(categories)
    for index, ranking in enumerate(rankings):
        if ranking == 1:
            best = BestHand(category=categories[index], cards=combos[index])
            logger.debug(f"Best hand for {' '.join(str(c) for c in cards)}: {best}")
            return best

    raise RankingInvariantViolated(f"No best hand was found: {rankings}")


def best_hand(cards: Sequence[Card]) -> HandCategory:
    """
    Given the seven cards available to a player, return the best possible
    hand that can be constructed.

    Raises:
        WrongHandSize: If not given exactly seven cards
    """
    return evaluate_best_hand(cards).category


def assign_hand_rankings(hands: Sequence[Sequence[Card]]) -> List[int]:
    """
    Rank players by the best hand each can make.

    Each input hand must be seven cards: the five community cards and the
    two hole cards of that player. If two hands have the same strength they
    receive the same ranking.

    Args:
        hands: One seven card hand per player

    Returns:
        Rankings in player order; `len(result) == len(hands)`

    Raises:
        WrongHandSize: If any hand does not have exactly seven cards
    """
    for index, hand in enumerate(hands):
        if len(hand) != PLAYER_HAND_SIZE:
            logger.error(f"Player {index} has {len(hand)} cards, expected {PLAYER_HAND_SIZE}")
            raise WrongHandSize(PLAYER_HAND_SIZE, len(hand))

    best_hands = [best_hand(hand) for hand in hands]
    rankings = rank_hands(best_hands)
    logger.debug(f"Assigned rankings {rankings} to {len(hands)} hands")
    return rankings
