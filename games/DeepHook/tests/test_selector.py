"""
Tests for weighted archetype selection.
"""

import random
from collections import Counter

import pytest

from models.deephook import FishArchetype, RarityTable
from games.DeepHook.selector import WeightedSelector
from games.DeepHook.settings import DEFAULT_RARITY_TABLE


def _table(*rarities):
    return RarityTable(entries=[
        FishArchetype(id=f'f{i}', value=i, rarity=r, speed_range=(1.0, 1.0))
        for i, r in enumerate(rarities)
    ])


class TestWeightedSelector:
    """Test cumulative-probability sampling."""

    def test_scripted_draws_pick_expected_entries(self, scripted_random):
        """Test that each draw lands in its cumulative band."""
        table = _table(0.5, 0.3, 0.2)
        selector = WeightedSelector(scripted_random([0.1, 0.6, 0.95]))
        assert selector.choose(table).id == 'f0'
        assert selector.choose(table).id == 'f1'
        assert selector.choose(table).id == 'f2'

    def test_draw_on_boundary_picks_earlier_entry(self, scripted_random):
        """Test that a draw equal to the cumulative mass selects that entry."""
        table = _table(0.5, 0.5)
        selector = WeightedSelector(scripted_random([0.5]))
        assert selector.choose(table).id == 'f0'

    def test_fallback_to_last_when_mass_falls_short(self, scripted_random):
        """Test that a draw above the accumulated total returns the last entry."""
        table = _table(0.5, 0.4999995)
        selector = WeightedSelector(scripted_random([0.9999999]))
        assert selector.choose(table).id == 'f1'

    def test_default_table_midpoint(self, scripted_random):
        """Test that 0.5 falls in the second default archetype."""
        selector = WeightedSelector(scripted_random([0.5]))
        assert selector.choose(DEFAULT_RARITY_TABLE).id == 'fish_orange'

    def test_frequencies_converge_to_rarities(self):
        """Test empirical frequencies over 10,000 draws."""
        selector = WeightedSelector(random.Random(1234))
        draws = 10_000
        counts = Counter(selector.choose(DEFAULT_RARITY_TABLE).id for _ in range(draws))

        for entry in DEFAULT_RARITY_TABLE.entries:
            assert counts[entry.id] / draws == pytest.approx(entry.rarity, abs=0.02)

    def test_same_seed_same_sequence(self):
        """Test that identically seeded selectors agree."""
        a = WeightedSelector(random.Random(7))
        b = WeightedSelector(random.Random(7))
        seq_a = [a.choose(DEFAULT_RARITY_TABLE).id for _ in range(50)]
        seq_b = [b.choose(DEFAULT_RARITY_TABLE).id for _ in range(50)]
        assert seq_a == seq_b
