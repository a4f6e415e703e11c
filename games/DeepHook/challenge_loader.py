"""
Challenge Deck Loader - YAML question decks with Pydantic validation.

Discovers deck files in a directory, loads them and validates them into
ChallengeDeck models.

Examples:
    >>> loader = ChallengeDeckLoader()
    >>> deck = loader.load_deck("ocean_facts")
    >>> deck.name
    'Ocean Facts'
    >>> loader.list_available_decks()
    ['ocean_facts']
"""

from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import ValidationError

from models.deephook import ChallengeDeck

DEFAULT_DECKS_DIR = Path(__file__).parent / "challenges"


class ChallengeDeckLoader:
    """Loads and validates challenge decks from YAML files.

    Attributes:
        decks_dir: Path to the directory containing deck YAML files
    """

    def __init__(self, decks_dir: Optional[Path] = None):
        """Initialize the loader.

        Args:
            decks_dir: Optional custom path to the decks directory.
                      Defaults to the decks shipped with the game.
        """
        self.decks_dir = Path(decks_dir) if decks_dir is not None else DEFAULT_DECKS_DIR

    def load_deck(self, deck_id: str) -> ChallengeDeck:
        """Load and validate a deck.

        Args:
            deck_id: The ID of the deck to load (without .yaml extension)

        Returns:
            Validated ChallengeDeck instance

        Raises:
            FileNotFoundError: If the deck file doesn't exist
            ValueError: If the YAML content is invalid
            yaml.YAMLError: If the YAML syntax is malformed
        """
        yaml_path = self.decks_dir / f"{deck_id}.yaml"

        if not yaml_path.exists():
            raise FileNotFoundError(
                f"Challenge deck '{deck_id}' not found. "
                f"Expected file: {yaml_path}"
            )

        try:
            with open(yaml_path, 'r') as f:
                deck_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(
                f"Failed to parse YAML file '{yaml_path}': {e}"
            )

        if not isinstance(deck_dict, dict):
            raise ValueError(f"Challenge deck '{yaml_path}' must be a mapping")

        try:
            deck = ChallengeDeck(**deck_dict)
        except ValidationError as e:
            raise ValueError(
                f"Invalid challenge deck in '{yaml_path}':\n{e}"
            ) from e

        return deck

    def list_available_decks(self) -> List[str]:
        """List all deck IDs, sorted alphabetically."""
        if not self.decks_dir.exists():
            return []
        return sorted(f.stem for f in self.decks_dir.glob("*.yaml"))

    def deck_exists(self, deck_id: str) -> bool:
        """Check if a deck file exists."""
        return (self.decks_dir / f"{deck_id}.yaml").exists()
