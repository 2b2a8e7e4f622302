"""Tests for table configuration loading."""
import json
import logging

import pytest
from holdem_hands.config.table_config import MAX_PLAYERS, TableConfig


def test_defaults():
    config = TableConfig()
    assert config.players == 9
    assert config.seed is None
    assert config.color is True
    assert config.output_format == 'text'
    assert config.validate() is config


def test_max_players_fills_the_deck():
    assert MAX_PLAYERS == 23


def test_from_json():
    config = TableConfig.from_json(
        '{"players": 6, "seed": 42, "color": false, "outputFormat": "json"}'
    )
    assert config == TableConfig(players=6, seed=42, color=False, output_format='json')


def test_from_json_partial():
    config = TableConfig.from_json('{"seed": 7}')
    assert config.players == 9
    assert config.seed == 7


def test_from_file(tmp_path):
    path = tmp_path / "table.json"
    path.write_text(json.dumps({"players": 2, "seed": 1}))
    config = TableConfig.from_file(path)
    assert config.players == 2
    assert config.seed == 1


def test_invalid_json():
    with pytest.raises(ValueError, match="Invalid JSON"):
        TableConfig.from_json('{"players": ')


def test_json_must_be_object():
    with pytest.raises(ValueError, match="JSON object"):
        TableConfig.from_json('[1, 2, 3]')


def test_unknown_keys_are_ignored_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        config = TableConfig.from_json('{"players": 4, "blinds": [1, 2]}')
    assert config.players == 4
    assert "blinds" in caplog.text


@pytest.mark.parametrize("data", [
    {"players": 0},
    {"players": MAX_PLAYERS + 1},
    {"players": "six"},
    {"players": True},
    {"seed": "abc"},
    {"color": "yes"},
    {"outputFormat": "xml"},
])
def test_invalid_settings(data):
    with pytest.raises(ValueError):
        TableConfig.from_json(json.dumps(data))


def test_with_overrides():
    base = TableConfig(players=4, seed=3)
    config = base.with_overrides(players=None, seed=10, color=False, output_format=None)
    assert config == TableConfig(players=4, seed=10, color=False, output_format='text')
    assert base.seed == 3


def test_with_overrides_validates():
    with pytest.raises(ValueError):
        TableConfig().with_overrides(players=MAX_PLAYERS + 1)
