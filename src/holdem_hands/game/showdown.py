"""Deal a table, evaluate every player and report the showdown."""
import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from holdem_hands.config.table_config import COMMUNITY_CARDS, HOLE_CARDS, TableConfig
from holdem_hands.core.card import Card
from holdem_hands.core.deck import Deck
from holdem_hands.evaluation.hand_types import HandCategory
from holdem_hands.evaluation.ranking import evaluate_best_hand, rank_hands

logger = logging.getLogger(__name__)


@dataclass
class PlayerResult:
    """Information about a player's hand and its evaluation."""

    player_index: int
    cards: List[Card]  # all seven cards available to the player
    best_hand: HandCategory
    best_cards: List[Card]  # the five cards that make the best hand
    description: str  # e.g. "Full House, Aces full"
    rank: int = 0
    hole_cards: List[Card] = field(default_factory=list)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.best_cards)
        return f"Player {self.player_index + 1}: {self.description} ({cards_str}) - rank {self.rank}"

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "player": self.player_index,
            "cards": [str(card) for card in self.cards],
            "hole_cards": [str(card) for card in self.hole_cards],
            "hand_type": self.best_hand.hand_type.display_name,
            "best_cards": [str(card) for card in self.best_cards],
            "description": self.description,
            "rank": self.rank,
        }


@dataclass
class ShowdownResult:
    """Results for every player at the table."""

    players: List[PlayerResult]
    community_cards: List[Card] = field(default_factory=list)

    @property
    def winners(self) -> List[PlayerResult]:
        return [p for p in self.players if p.rank == 1]

    def by_rank(self) -> List[PlayerResult]:
        """Players sorted strongest first, ties in seat order."""
        return sorted(self.players, key=lambda p: (p.rank, p.player_index))

    def __str__(self) -> str:
        lines = []
        if self.community_cards:
            lines.append("Board: " + " ".join(str(c) for c in self.community_cards))
        lines.extend(str(p) for p in self.by_rank())
        return "\n".join(lines)

    def to_json(self) -> dict:
        """Convert to JSON-compatible dictionary."""
        return {
            "community_cards": [str(card) for card in self.community_cards],
            "players": [p.to_json() for p in self.players],
            "winners": [p.player_index for p in self.winners],
        }


def deal_table(deck: Deck, num_players: int) -> Tuple[List[Card], List[List[Card]]]:
    """
    Deal the community cards and two hole cards to each player.

    Args:
        deck: Deck to deal from, in its current order
        num_players: Number of players dealt in

    Returns:
        Tuple of (community cards, one seven card hand per player). Each hand
        is the community cards followed by that player's hole cards.

    Raises:
        DeckExhausted: If the deck cannot supply every player
    """
    community = deck.pop_cards(COMMUNITY_CARDS)
    hands = [community + deck.pop_cards(HOLE_CARDS) for _ in range(num_players)]
    return community, hands


def run_showdown(
    hands: Sequence[Sequence[Card]],
    community: Optional[Sequence[Card]] = None
) -> ShowdownResult:
    """
    Evaluate every player's best hand and rank the players.

    Args:
        hands: One seven card hand per player
        community: Shared cards, used to split out hole cards for reporting

    Returns:
        ShowdownResult with one PlayerResult per hand, in input order

    Raises:
        WrongHandSize: If any hand does not have exactly seven cards
    """
    community = list(community or [])
    best_hands = [evaluate_best_hand(hand) for hand in hands]
    rankings = rank_hands([best.category for best in best_hands])

    players = []
    for index, (hand, best, rank) in enumerate(zip(hands, best_hands, rankings)):
        players.append(PlayerResult(
            player_index=index,
            cards=list(hand),
            best_hand=best.category,
            best_cards=list(best.cards),
            description=best.description,
            rank=rank,
            hole_cards=[card for card in hand if card not in community],
        ))

    result = ShowdownResult(players=players, community_cards=community)
    for winner in result.winners:
        logger.info(f"Player {winner.player_index + 1} wins with {winner.description}")
    return result


def play_hand(config: TableConfig, deck: Optional[Deck] = None) -> ShowdownResult:
    """
    Shuffle, deal and evaluate one hand according to `config`.

    Args:
        config: Table settings
        deck: Deck to use; a new deck seeded from `config.seed` when omitted

    Returns:
        ShowdownResult for the hand
    """
    if deck is None:
        deck = Deck(rng=random.Random(config.seed))
    deck.shuffle()
    community, hands = deal_table(deck, config.players)
    logger.info(f"Dealt {config.players} players, board {' '.join(str(c) for c in community)}")
    return run_showdown(hands, community)
