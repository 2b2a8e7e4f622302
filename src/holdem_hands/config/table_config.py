"""Table configuration loading and parsing."""
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Optional
import json
import logging

logger = logging.getLogger(__name__)

DECK_SIZE = 52
COMMUNITY_CARDS = 5
HOLE_CARDS = 2
MAX_PLAYERS = (DECK_SIZE - COMMUNITY_CARDS) // HOLE_CARDS
OUTPUT_FORMATS = ('text', 'json')

# JSON key -> TableConfig attribute
_JSON_FIELDS = {
    'players': 'players',
    'seed': 'seed',
    'color': 'color',
    'outputFormat': 'output_format',
}


@dataclass(frozen=True)
class TableConfig:
    """
    Settings for dealing and evaluating one hand at a table.

    Attributes:
        players: Number of players dealt in
        seed: Seed for the deck shuffle; None for an unpredictable deal
        color: Whether to colour red suits in text output
        output_format: 'text' or 'json'
    """
    players: int = 9
    seed: Optional[int] = None
    color: bool = True
    output_format: str = 'text'

    def validate(self) -> 'TableConfig':
        """
        Check the settings are usable.

        Returns:
            self, for chaining

        Raises:
            ValueError: If any setting is out of range
        """
        if isinstance(self.players, bool) or not isinstance(self.players, int):
            raise ValueError(f"players must be an integer, got {self.players!r}")
        if not 1 <= self.players <= MAX_PLAYERS:
            raise ValueError(
                f"players must be between 1 and {MAX_PLAYERS}, got {self.players}"
            )
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError(f"seed must be an integer, got {self.seed!r}")
        if not isinstance(self.color, bool):
            raise ValueError(f"color must be true or false, got {self.color!r}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output format '{self.output_format}', expected one of {OUTPUT_FORMATS}"
            )
        return self

    def with_overrides(self, **overrides) -> 'TableConfig':
        """Copy with every non-None override applied, then validate."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes).validate()

    @classmethod
    def from_file(cls, filepath: Path) -> 'TableConfig':
        """
        Load a TableConfig from a JSON file.

        Args:
            filepath: Path to JSON configuration file

        Returns:
            TableConfig instance
        """
        with open(filepath, 'r') as f:
            return cls.from_json(f.read())

    @classmethod
    def from_json(cls, json_str: str) -> 'TableConfig':
        """
        Create a TableConfig from a JSON string.

        Args:
            json_str: JSON object such as {"players": 6, "seed": 42}

        Returns:
            Validated TableConfig instance

        Raises:
            ValueError: If JSON is invalid or a setting is out of range
        """
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Table configuration must be a JSON object, got {type(data).__name__}")

        unknown = set(data) - set(_JSON_FIELDS)
        if unknown:
            logger.warning(f"Ignoring unknown table configuration keys: {sorted(unknown)}")

        kwargs = {attr: data[key] for key, attr in _JSON_FIELDS.items() if key in data}
        config = cls(**kwargs).validate()
        logger.debug(f"Loaded table configuration: {config}")
        return config
