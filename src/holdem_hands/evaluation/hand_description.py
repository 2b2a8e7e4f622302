"""Human-readable descriptions of classified hands."""
from holdem_hands.evaluation.hand_types import (
    Flush, FourOfAKind, FullHouse, HandCategory, HighCard, Pair, RoyalFlush,
    Straight, StraightFlush, ThreeOfAKind, TwoPair
)


def describe_hand(hand: HandCategory) -> str:
    """Get the basic category name, e.g. "Full House"."""
    return hand.hand_type.display_name


def describe_hand_detailed(hand: HandCategory) -> str:
    """
    Get a detailed description naming the ranks that define the hand.

    Examples: "King-high Straight Flush", "Four Aces", "Full House, Sevens
    full", "Two Pair, Jacks and Tens", "Pair of Queens", "Ace High".
    """
    if isinstance(hand, RoyalFlush):
        return "Royal Flush"
    if isinstance(hand, StraightFlush):
        return f"{hand.high_card.full_name}-high Straight Flush"
    if isinstance(hand, FourOfAKind):
        return f"Four {hand.quad_rank.plural_name}"
    if isinstance(hand, FullHouse):
        return f"Full House, {hand.triple_rank.plural_name} full"
    if isinstance(hand, Flush):
        return f"{hand.high_card.full_name}-high Flush"
    if isinstance(hand, Straight):
        return f"{hand.high_card.full_name}-high Straight"
    if isinstance(hand, ThreeOfAKind):
        return f"Three {hand.triple_rank.plural_name}"
    if isinstance(hand, TwoPair):
        return (
            f"Two Pair, {hand.high_pair_rank.plural_name} and "
            f"{hand.low_pair_rank.plural_name}"
        )
    if isinstance(hand, Pair):
        return f"Pair of {hand.pair_rank.plural_name}"
    if isinstance(hand, HighCard):
        return f"{hand.kickers[0].full_name} High"
    return describe_hand(hand)
