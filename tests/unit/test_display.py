"""Tests for card and showdown rendering."""
import click
from holdem_hands.cli.display import SEPARATOR, format_showdown, render_card, render_cards
from holdem_hands.core.card import Card, Rank, Suit, cards_from_string
from holdem_hands.game.showdown import run_showdown


def test_render_card():
    assert render_card(Card(Rank.ACE, Suit.SPADES)).splitlines() == [
        " ----- ",
        "|     |",
        "| A♠  |",
        "|     |",
        " ----- ",
    ]


def test_render_ten_fills_the_face():
    assert render_card(Card(Rank.TEN, Suit.CLUBS)).splitlines()[2] == "| 10♣ |"


def test_red_suits_are_coloured():
    rendered = render_card(Card(Rank.KING, Suit.HEARTS), color=True)
    assert click.style("♥", fg='red') in rendered
    assert click.unstyle(rendered).splitlines()[2] == "| K♥  |"


def test_no_colour():
    rendered = render_card(Card(Rank.KING, Suit.DIAMONDS), color=False)
    assert rendered == click.unstyle(rendered)
    assert rendered.splitlines()[2] == "| K♦  |"


def test_black_suits_never_coloured():
    rendered = render_card(Card(Rank.KING, Suit.SPADES), color=True)
    assert rendered == click.unstyle(rendered)


def test_render_cards_side_by_side():
    lines = render_cards(cards_from_string("As 10c 2s"), color=False).splitlines()
    assert len(lines) == 5
    assert lines[0] == " -----   -----   ----- "
    assert lines[2] == "| A♠  | | 10♣ | | 2♠  |"


def test_render_no_cards():
    assert render_cards([]) == ""


def test_format_showdown():
    community = cards_from_string("Th Jh Qh 2c 3d")
    result = run_showdown(
        [community + cards_from_string("2s 7d"), community + cards_from_string("Kh Ah")],
        community,
    )
    text = click.unstyle(format_showdown(result, color=False))
    lines = text.splitlines()

    assert lines[0] == SEPARATOR
    assert lines[1] == "Player 2"
    assert "Royal Flush" in lines
    assert "Pair of Twos" in lines
    # the winner is listed before the second player
    assert lines.index("Player 2") < lines.index("Player 1")
    assert lines[lines.index("Royal Flush") + 1] == "1"
    assert lines[lines.index("Pair of Twos") + 1] == "2"
