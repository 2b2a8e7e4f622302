"""Tests for hand descriptions."""
import pytest
from holdem_hands.core.card import Card, Rank, Suit, cards_from_string
from holdem_hands.evaluation.classifier import classify
from holdem_hands.evaluation.hand_description import describe_hand, describe_hand_detailed


def test_high_hand_description():
    """Test basic hand descriptions for high poker."""
    # Test Royal Flush
    cards = [
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.KING, Suit.SPADES),
        Card(Rank.QUEEN, Suit.SPADES),
        Card(Rank.JACK, Suit.SPADES),
        Card(Rank.TEN, Suit.SPADES)
    ]
    hand = classify(cards)
    assert describe_hand(hand) == "Royal Flush"
    assert describe_hand_detailed(hand) == "Royal Flush"

    # Test Straight Flush (not royal)
    cards = [
        Card(Rank.KING, Suit.HEARTS),
        Card(Rank.QUEEN, Suit.HEARTS),
        Card(Rank.JACK, Suit.HEARTS),
        Card(Rank.TEN, Suit.HEARTS),
        Card(Rank.NINE, Suit.HEARTS)
    ]
    hand = classify(cards)
    assert describe_hand(hand) == "Straight Flush"
    assert describe_hand_detailed(hand) == "King-high Straight Flush"

    # Test Four of a Kind
    cards = [
        Card(Rank.ACE, Suit.HEARTS),
        Card(Rank.ACE, Suit.DIAMONDS),
        Card(Rank.ACE, Suit.CLUBS),
        Card(Rank.ACE, Suit.SPADES),
        Card(Rank.KING, Suit.HEARTS)
    ]
    hand = classify(cards)
    assert describe_hand(hand) == "Four of a Kind"
    assert describe_hand_detailed(hand) == "Four Aces"


@pytest.mark.parametrize("hand_str,basic,detailed", [
    ("Ah Ac As Kh Kd", "Full House", "Full House, Aces full"),
    ("6h 6c 6s 2h 2d", "Full House", "Full House, Sixes full"),
    ("Ac Jc 9c 6c 3c", "Flush", "Ace-high Flush"),
    ("9h 8c 7d 6s 5h", "Straight", "Nine-high Straight"),
    ("Qh Qd Qc Jh 9d", "Three of a Kind", "Three Queens"),
    ("Th Jd 9s Tc Jh", "Two Pair", "Two Pair, Jacks and Tens"),
    ("Kh Ah Js Ad Qc", "Pair", "Pair of Aces"),
    ("5s Ah Qd Th 8c", "High Card", "Ace High"),
    ("Ah 2c 3d 4s 5h", "High Card", "Ace High"),
])
def test_detailed_descriptions(hand_str, basic, detailed):
    hand = classify(cards_from_string(hand_str))
    assert describe_hand(hand) == basic
    assert describe_hand_detailed(hand) == detailed


def test_str_is_basic_description():
    assert str(classify(cards_from_string("Th Jd 9s Tc Jh"))) == "Two Pair"
