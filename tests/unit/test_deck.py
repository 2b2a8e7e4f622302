"""Tests for deck implementation."""
import random

import pytest
from holdem_hands.core.deck import Deck
from holdem_hands.core.card import Card, Rank, Suit
from holdem_hands.core.errors import DeckExhausted


def test_deck_initialization():
    """Test basic deck creation."""
    deck = Deck()
    assert deck.size == 52
    assert deck.remaining == 52


def test_deck_initialization_unique_cards():
    """Test deck has all unique cards upon initialization."""
    deck = Deck()
    assert len(set(deck.get_cards())) == 52
    assert Card(Rank.ACE, Suit.SPADES) in deck.get_cards()
    assert Card(Rank.TWO, Suit.CLUBS) in deck.get_cards()


def test_pop_cards_in_order():
    """Cards are dealt from the top in deck order."""
    deck = Deck()
    expected = deck.get_cards()

    first = deck.pop_cards(5)
    second = deck.pop_cards(2)
    assert first == expected[:5]
    assert second == expected[5:7]
    assert deck.remaining == 45
    assert deck.size == 52  # dealt cards stay in the deck


def test_deal_card():
    deck = Deck()
    top = deck.get_cards()[0]
    assert deck.deal_card() == top
    assert deck.remaining == 51


def test_pop_zero_cards():
    deck = Deck()
    assert deck.pop_cards(0) == []
    assert deck.remaining == 52


def test_pop_negative_cards():
    deck = Deck()
    with pytest.raises(ValueError):
        deck.pop_cards(-1)


def test_dealing_more_cards_than_available():
    """Requesting more cards than remain fails without dealing any."""
    deck = Deck()
    deck.pop_cards(50)

    with pytest.raises(DeckExhausted) as exc_info:
        deck.pop_cards(3)
    assert exc_info.value.requested == 3
    assert exc_info.value.remaining == 2
    assert deck.remaining == 2


def test_dealing_empty_deck():
    deck = Deck()
    deck.pop_cards(52)
    assert deck.remaining == 0
    with pytest.raises(DeckExhausted):
        deck.deal_card()


def test_deck_shuffling():
    """Shuffling keeps the same 52 cards in a new order."""
    deck1 = Deck(rng=random.Random(1))
    deck2 = Deck()

    deck1.shuffle()

    assert deck1.get_cards() != deck2.get_cards()
    assert sorted(str(c) for c in deck1.get_cards()) == sorted(str(c) for c in deck2.get_cards())


def test_shuffle_resets_deal_position():
    deck = Deck(rng=random.Random(7))
    deck.pop_cards(52)
    assert deck.remaining == 0

    deck.shuffle()
    assert deck.remaining == 52
    assert len(deck.pop_cards(52)) == 52


def test_seeded_shuffle_is_reproducible():
    deck1 = Deck(rng=random.Random(42))
    deck2 = Deck(rng=random.Random(42))
    deck1.shuffle()
    deck2.shuffle()
    assert deck1.get_cards() == deck2.get_cards()


def test_multiple_shuffles():
    """Test that shuffling multiple times changes deck order."""
    deck = Deck(rng=random.Random(3))
    original_order = deck.get_cards()

    deck.shuffle()
    first_shuffle = deck.get_cards()

    deck.shuffle()
    second_shuffle = deck.get_cards()

    assert original_order != first_shuffle
    assert first_shuffle != second_shuffle


def test_get_cards_returns_copy():
    deck = Deck()
    cards = deck.get_cards()
    cards.clear()
    assert deck.size == 52


def test_str_shows_undealt_cards():
    deck = Deck()
    deck.pop_cards(50)
    assert str(deck) == "Kc Ac"
