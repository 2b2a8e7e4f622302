"""Texas hold'em hand evaluation and ranking package."""

from holdem_hands.core.card import Card, Rank, Suit, cards_from_string
from holdem_hands.core.deck import Deck
from holdem_hands.core.errors import (
    DeckExhausted,
    HandEvaluationError,
    InvalidRank,
    RankingInvariantViolated,
    WrongHandSize,
)
from holdem_hands.evaluation.classifier import classify
from holdem_hands.evaluation.combinations import generate_combinations
from holdem_hands.evaluation.hand_types import HandCategory, HandType
from holdem_hands.evaluation.ranking import (
    BestHand,
    assign_hand_rankings,
    best_hand,
    evaluate_best_hand,
    rank_hands,
)

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Rank",
    "Suit",
    "cards_from_string",
    "Deck",
    "DeckExhausted",
    "HandEvaluationError",
    "InvalidRank",
    "RankingInvariantViolated",
    "WrongHandSize",
    "classify",
    "generate_combinations",
    "HandCategory",
    "HandType",
    "BestHand",
    "assign_hand_rankings",
    "best_hand",
    "evaluate_best_hand",
    "rank_hands",
]
