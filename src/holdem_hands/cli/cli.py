"""Command-line interface for dealing and ranking hold'em hands."""
import json
import logging
import sys

import click

from holdem_hands.config.table_config import TableConfig
from holdem_hands.core.card import cards_from_string
from holdem_hands.core.errors import HandEvaluationError
from holdem_hands.evaluation.ranking import evaluate_best_hand
from holdem_hands.game.showdown import play_hand, run_showdown
from .display import format_showdown, render_cards

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def _parse_hand(hand_str: str):
    try:
        return cards_from_string(hand_str)
    except ValueError as e:
        raise click.BadParameter(str(e))


@click.group()
@click.option('--log-level', default='WARNING', show_default=True,
              type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              help='Logging level')
def cli(log_level):
    """Texas hold'em hand evaluator."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True
    )


@cli.command()
@click.option('--players', type=int, default=None, help='Number of players (default 9)')
@click.option('--seed', type=int, default=None, help='Seed for a reproducible shuffle')
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              default=None, help='JSON table configuration file')
@click.option('--json', 'as_json', is_flag=True, help='Print results as JSON')
@click.option('--color/--no-color', default=None, help='Colour red suits')
def deal(players, seed, config_path, as_json, color):
    """Shuffle a deck, deal a table and show every player's hand."""
    try:
        config = TableConfig.from_file(config_path) if config_path else TableConfig()
        config = config.with_overrides(
            players=players,
            seed=seed,
            color=color,
            output_format='json' if as_json else None,
        )
        result = play_hand(config)
    except (HandEvaluationError, ValueError) as e:
        raise click.ClickException(str(e))

    if config.output_format == 'json':
        click.echo(json.dumps(result.to_json(), indent=2))
    else:
        click.echo(format_showdown(result, color=config.color))


@cli.command()
@click.argument('hands', nargs=-1, required=True)
@click.option('--json', 'as_json', is_flag=True, help='Print results as JSON')
def rank(hands, as_json):
    """Rank HANDS against each other; each hand is seven cards, e.g. "AhKh2c3d4s9h9c"."""
    parsed = [_parse_hand(hand) for hand in hands]
    try:
        result = run_showdown(parsed)
    except HandEvaluationError as e:
        raise click.ClickException(str(e))

    if as_json:
        click.echo(json.dumps(result.to_json(), indent=2))
        return
    for player in result.players:
        click.echo(f"{player.rank}\t{' '.join(str(c) for c in player.cards)}\t{player.description}")


@cli.command()
@click.argument('hand')
@click.option('--color/--no-color', default=True, help='Colour red suits')
def best(hand, color):
    """Show the best five cards within a seven card HAND."""
    cards = _parse_hand(hand)
    try:
        result = evaluate_best_hand(cards)
    except HandEvaluationError as e:
        raise click.ClickException(str(e))

    click.echo(render_cards(result.cards, color=color))
    click.echo(result.description)


def main():
    cli()


if __name__ == '__main__':
    main()
