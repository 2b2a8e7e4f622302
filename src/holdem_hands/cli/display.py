"""Text rendering of cards and showdown results."""
from typing import List, Sequence

import click

from holdem_hands.core.card import Card
from holdem_hands.game.showdown import ShowdownResult

SEPARATOR = "-----------------"


def _face(card: Card, color: bool) -> str:
    """Rank and suit padded to the three characters inside a card box."""
    suit = card.suit.symbol
    if color and card.suit.is_red:
        suit = click.style(suit, fg='red')
    face = f"{card.rank.display}{suit}"
    # "10" is the only two character rank
    return face if len(card.rank.display) == 2 else f"{face} "


def _card_rows(card: Card, color: bool) -> List[str]:
    return [
        " ----- ",
        "|     |",
        f"| {_face(card, color)} |",
        "|     |",
        " ----- ",
    ]


def render_card(card: Card, color: bool = True) -> str:
    """Draw a single card as a five line box."""
    return "\n".join(_card_rows(card, color))


def render_cards(cards: Sequence[Card], color: bool = True) -> str:
    """Draw cards as boxes side by side."""
    if not cards:
        return ""
    columns = [_card_rows(card, color) for card in cards]
    return "\n".join(" ".join(row) for row in zip(*columns))


def format_showdown(result: ShowdownResult, color: bool = True) -> str:
    """Format every player's cards, best hand and rank, strongest first."""
    blocks = []
    for player in result.by_rank():
        blocks.append("\n".join([
            SEPARATOR,
            f"Player {player.player_index + 1}",
            render_cards(player.cards, color),
            player.description,
            str(player.rank),
            SEPARATOR,
        ]))
    return "\n".join(blocks)
