"""Deck implementation."""
import logging
import random
from typing import List, Optional

from .card import Card, Rank, Suit
from .errors import DeckExhausted

logger = logging.getLogger(__name__)


class Deck:
    """
    A standard 52-card deck dealt from a moving position.

    Dealt cards stay in the deck; `shuffle` puts them all back in play.

    Attributes:
        cards: All 52 cards in their current order
    """

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize a new, unshuffled deck.

        Args:
            rng: Random source used for shuffling; a fresh unseeded
                 `random.Random` when omitted
        """
        self.cards: List[Card] = [
            Card(rank=rank, suit=suit) for suit in Suit for rank in Rank
        ]
        self._position = 0
        self._rng = rng if rng is not None else random.Random()

    def shuffle(self) -> None:
        """Return all dealt cards to the deck and randomize the order."""
        self._position = 0
        self._rng.shuffle(self.cards)
        logger.debug("Deck shuffled")

    def pop_cards(self, count: int) -> List[Card]:
        """
        Deal the next cards from the deck.

        Args:
            count: Number of cards to deal

        Returns:
            The next `count` undealt cards, in deck order

        Raises:
            DeckExhausted: If fewer than `count` cards remain; no cards are
                           dealt in that case
        """
        if count < 0:
            raise ValueError(f"Cannot deal a negative number of cards: {count}")
        if count > self.remaining:
            raise DeckExhausted(count, self.remaining)

        cards = self.cards[self._position:self._position + count]
        self._position += count
        return cards

    def deal_card(self) -> Card:
        """Deal a single card from the deck."""
        return self.pop_cards(1)[0]

    def get_cards(self) -> List[Card]:
        """Get all cards in the deck, dealt or not."""
        return self.cards.copy()

    @property
    def remaining(self) -> int:
        """Number of cards not yet dealt."""
        return len(self.cards) - self._position

    @property
    def size(self) -> int:
        """Number of cards in the deck."""
        return len(self.cards)

    def __str__(self) -> str:
        return ' '.join(str(card) for card in self.cards[self._position:])
