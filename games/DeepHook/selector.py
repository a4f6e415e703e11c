"""
DeepHook - Weighted archetype selection.

Cumulative-probability sampling over a RarityTable with an injectable
random source, so tests can script exact draws.
"""
import random
from typing import Optional, Protocol

from deephook.logging import get_logger
from models.deephook import FishArchetype, RarityTable

log = get_logger('selector')


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1)."""

    def random(self) -> float:
        ...


class WeightedSelector:
    """Picks archetypes in proportion to their rarity.

    Entries are walked in table order accumulating probability mass; the
    first entry whose cumulative mass reaches the draw wins. When floating
    error leaves the total just under the draw, the last entry is chosen.

    Examples:
        >>> class Fixed:
        ...     def random(self):
        ...         return 0.5
        >>> from games.DeepHook.settings import DEFAULT_RARITY_TABLE
        >>> WeightedSelector(Fixed()).choose(DEFAULT_RARITY_TABLE).id
        'fish_orange'
    """

    def __init__(self, rng: Optional[RandomSource] = None):
        self._rng = rng if rng is not None else random.Random()

    def choose(self, table: RarityTable) -> FishArchetype:
        """Draw one archetype from the table."""
        draw = self._rng.random()
        cumulative = 0.0
        for entry in table.entries:
            cumulative += entry.rarity
            if draw <= cumulative:
                return entry

        log.debug("Draw %.9f exceeded cumulative mass %.9f, using last archetype",
                  draw, cumulative)
        return table.last
