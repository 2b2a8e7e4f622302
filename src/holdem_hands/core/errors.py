"""Exceptions raised by the hand evaluator and its collaborators."""


class HandEvaluationError(Exception):
    """Base class for all hand evaluation errors."""


class InvalidRank(HandEvaluationError, ValueError):
    """Raised when a rank is constructed from a value outside 2-14."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid card rank: {value!r} (expected 2-14)")


class WrongHandSize(HandEvaluationError, ValueError):
    """Raised when a card set does not have the number of cards required."""

    def __init__(self, expected: int, actual: int, at_least: bool = False):
        self.expected = expected
        self.actual = actual
        qualifier = "at least " if at_least else "exactly "
        super().__init__(
            f"Expected {qualifier}{expected} cards, got {actual}"
        )


class DeckExhausted(HandEvaluationError):
    """Raised when more cards are requested than remain in the deck."""

    def __init__(self, requested: int, remaining: int):
        self.requested = requested
        self.remaining = remaining
        super().__init__(
            f"Cannot deal {requested} cards, only {remaining} remaining"
        )


class RankingInvariantViolated(HandEvaluationError, AssertionError):
    """Raised when ranking a non-empty set of hands produced no rank 1."""
