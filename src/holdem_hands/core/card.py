"""Card related classes and utilities."""
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List

from .errors import InvalidRank


class Suit(Enum):
    """Card suits."""
    HEARTS = 'h'
    DIAMONDS = 'd'
    SPADES = 's'
    CLUBS = 'c'

    def __str__(self) -> str:
        return self.value

    @property
    def symbol(self) -> str:
        """Unicode suit symbol used for display."""
        return SUIT_SYMBOLS[self]

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Suit':
        """
        Look up a suit by letter ('h', 'd', 's', 'c') or unicode symbol.

        Raises:
            ValueError: If the symbol is not a known suit
        """
        for suit in cls:
            if symbol.lower() == suit.value or symbol == suit.symbol:
                return suit
        raise ValueError(f"Invalid suit: {symbol!r}")


class Rank(IntEnum):
    """
    Card ranks ordered by strength.

    Aces are always high; there is no low-Ace rank.
    """
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return self.symbol

    @property
    def symbol(self) -> str:
        """Single character symbol ('T' for ten)."""
        return RANK_SYMBOLS[self]

    @property
    def display(self) -> str:
        """Symbol as printed on a card face ('10' for ten)."""
        return '10' if self is Rank.TEN else self.symbol

    @property
    def full_name(self) -> str:
        return self.name.capitalize()

    @property
    def plural_name(self) -> str:
        if self is Rank.SIX:
            return 'Sixes'
        return f"{self.full_name}s"

    @classmethod
    def from_value(cls, value: int) -> 'Rank':
        """
        Create a rank from its numeric value.

        Args:
            value: Integer between 2 and 14 (Jack=11, Queen=12, King=13, Ace=14)

        Returns:
            Rank instance

        Raises:
            InvalidRank: If value is not an integer in [2, 14]
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidRank(value)
        try:
            return cls(value)
        except ValueError:
            raise InvalidRank(value) from None

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Rank':
        """
        Create a rank from its symbol ('2'-'9', 'T' or '10', 'J', 'Q', 'K', 'A').

        Raises:
            InvalidRank: If the symbol is not a known rank
        """
        symbol = symbol.upper()
        if symbol == '10':
            return cls.TEN
        for rank, rank_symbol in RANK_SYMBOLS.items():
            if rank_symbol == symbol:
                return rank
        raise InvalidRank(symbol)


RANK_SYMBOLS = {
    Rank.TWO: '2',
    Rank.THREE: '3',
    Rank.FOUR: '4',
    Rank.FIVE: '5',
    Rank.SIX: '6',
    Rank.SEVEN: '7',
    Rank.EIGHT: '8',
    Rank.NINE: '9',
    Rank.TEN: 'T',
    Rank.JACK: 'J',
    Rank.QUEEN: 'Q',
    Rank.KING: 'K',
    Rank.ACE: 'A',
}

SUIT_SYMBOLS = {
    Suit.HEARTS: '♥',
    Suit.DIAMONDS: '♦',
    Suit.SPADES: '♠',
    Suit.CLUBS: '♣',
}


@dataclass(frozen=True)
class Card:
    """
    Represents a playing card.

    Cards are immutable values; two cards are equal if rank and suit match.

    Attributes:
        rank: Card rank (2-A)
        suit: Card suit
    """
    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        """String representation in format 'As' for Ace of spades."""
        return f"{self.rank.symbol}{self.suit.value}"

    @property
    def pretty(self) -> str:
        """Display form using the card face rank and suit symbol, e.g. '10♥'."""
        return f"{self.rank.display}{self.suit.symbol}"

    @classmethod
    def from_string(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: String in format 'As' for Ace of spades; '10h' and
                      unicode suit symbols ('Q♠') are also accepted

        Returns:
            Card instance

        Raises:
            ValueError: If string format is invalid
        """
        if len(card_str) not in (2, 3):
            raise ValueError(f"Invalid card string: {card_str!r}")

        rank_str, suit_str = card_str[:-1], card_str[-1]
        try:
            rank = Rank.from_symbol(rank_str)
            suit = Suit.from_symbol(suit_str)
        except ValueError:
            raise ValueError(f"Invalid rank or suit in: {card_str!r}")

        return cls(rank=rank, suit=suit)


def cards_from_string(hand_str: str) -> List[Card]:
    """
    Parse a list of cards from a hand string.

    Args:
        hand_str: Concatenated ("AsKsQsJsTs") or whitespace separated
                  ("As Ks 10s") card representations

    Returns:
        List of cards in the order given

    Raises:
        ValueError: If any card in the string is invalid
    """
    tokens = hand_str.split()
    if len(tokens) == 1:
        tokens = _split_concatenated(tokens[0])

    cards = []
    for i, token in enumerate(tokens):
        try:
            cards.append(Card.from_string(token))
        except ValueError as e:
            raise ValueError(f"Invalid card at position {i + 1} in hand string '{hand_str}': {e}")
    return cards


def _split_concatenated(hand_str: str) -> List[str]:
    """Split "AhKh10c" into ["Ah", "Kh", "10c"]."""
    tokens = []
    i = 0
    while i < len(hand_str):
        width = 3 if hand_str.startswith('10', i) else 2
        tokens.append(hand_str[i:i + width])
        i += width
    return tokens
