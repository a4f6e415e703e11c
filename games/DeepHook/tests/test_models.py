"""
Tests for the DeepHook Pydantic models and simulation settings.

Tests cover:
- Geometry primitives (overlap is strict)
- Rarity table validation (sum to 1, unique ids)
- Upgrade cost curves
- Trivia question validation
- Popup aging
- Settings cross-field validation and derived values
"""

import pytest
from pydantic import ValidationError

from models import Point2D, Rectangle
from models.deephook import (
    FishArchetype,
    Popup,
    RarityTable,
    TriviaQuestion,
    UpgradeConfig,
)
from games.DeepHook.settings import DEFAULT_RARITY_TABLE, SimulationSettings


def _archetype(id, rarity, value=1):
    return FishArchetype(id=id, value=value, rarity=rarity, speed_range=(1.0, 2.0))


# ============================================================================
# Primitives
# ============================================================================


class TestRectangle:
    """Test Rectangle geometry."""

    def test_centered_box(self):
        """Test building a box around a center point."""
        box = Rectangle.centered(Point2D(x=100.0, y=50.0), 10.0, 10.0)
        assert box.left == 95.0
        assert box.right == 105.0
        assert box.top == 45.0
        assert box.bottom == 55.0
        assert box.center == Point2D(x=100.0, y=50.0)

    def test_overlapping_boxes(self):
        """Test that intersecting interiors overlap."""
        a = Rectangle(x=0.0, y=0.0, width=10.0, height=10.0)
        b = Rectangle(x=9.0, y=9.0, width=10.0, height=10.0)
        assert a.overlaps(b)
        assert b.overlaps(a)

    def test_touching_edges_do_not_overlap(self):
        """Test that boxes sharing only an edge do not overlap."""
        a = Rectangle(x=0.0, y=0.0, width=10.0, height=10.0)
        assert not a.overlaps(Rectangle(x=10.0, y=0.0, width=5.0, height=5.0))
        assert not a.overlaps(Rectangle(x=0.0, y=10.0, width=5.0, height=5.0))

    def test_non_positive_dimensions_rejected(self):
        """Test that zero or negative sizes raise ValidationError."""
        with pytest.raises(ValidationError):
            Rectangle(x=0.0, y=0.0, width=0.0, height=5.0)
        with pytest.raises(ValidationError):
            Rectangle(x=0.0, y=0.0, width=5.0, height=-1.0)


# ============================================================================
# Catalogue models
# ============================================================================


class TestFishArchetype:
    """Test FishArchetype validation."""

    def test_valid_archetype(self):
        """Test creating an archetype with default size bands."""
        fish = _archetype('pink', 0.29, value=5)
        assert fish.value == 5
        assert fish.width_range == (40.0, 65.0)
        assert fish.height_range == (25.0, 40.0)
        assert fish.square is False

    def test_negative_value_rejected(self):
        """Test that negative payout values raise ValidationError."""
        with pytest.raises(ValidationError):
            FishArchetype(id='bad', value=-1, rarity=0.5, speed_range=(1.0, 2.0))

    def test_zero_rarity_rejected(self):
        """Test that a rarity of 0 raises ValidationError."""
        with pytest.raises(ValidationError):
            _archetype('bad', 0.0)

    def test_inverted_speed_band_rejected(self):
        """Test that min > max in a band raises ValidationError."""
        with pytest.raises(ValidationError):
            FishArchetype(id='bad', value=1, rarity=0.5, speed_range=(3.0, 1.0))

    def test_frozen(self):
        """Test that archetypes are immutable."""
        fish = _archetype('pink', 0.5)
        with pytest.raises(ValidationError):
            fish.value = 100


class TestRarityTable:
    """Test RarityTable distribution validation."""

    def test_default_table_is_valid(self):
        """Test the shipped table: eight archetypes summing to 1."""
        assert len(DEFAULT_RARITY_TABLE.entries) == 8
        total = sum(e.rarity for e in DEFAULT_RARITY_TABLE.entries)
        assert total == pytest.approx(1.0)
        assert DEFAULT_RARITY_TABLE.get('fish_pink').rarity == pytest.approx(0.31)
        assert DEFAULT_RARITY_TABLE.last.id == 'diamond'
        assert DEFAULT_RARITY_TABLE.get('fish_brown').square is True

    def test_default_values(self):
        """Test the payout values of the shipped table in order."""
        values = [e.value for e in DEFAULT_RARITY_TABLE.entries]
        assert values == [5, 10, 10, 15, 20, 25, 50, 100]

    def test_sum_below_one_rejected(self):
        """Test that rarities summing to less than 1 raise ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            RarityTable(entries=[_archetype('a', 0.5), _archetype('b', 0.4)])
        assert 'sum to 1' in str(exc_info.value)

    def test_sum_within_tolerance_accepted(self):
        """Test that floating error inside the tolerance is accepted."""
        table = RarityTable(entries=[_archetype('a', 0.5), _archetype('b', 0.4999995)])
        assert table.last.id == 'b'

    def test_duplicate_ids_rejected(self):
        """Test that repeated archetype ids raise ValidationError."""
        with pytest.raises(ValidationError):
            RarityTable(entries=[_archetype('a', 0.5), _archetype('a', 0.5)])

    def test_get_unknown_returns_none(self):
        """Test looking up a missing archetype."""
        assert DEFAULT_RARITY_TABLE.get('shark') is None


class TestUpgradeConfig:
    """Test UpgradeConfig cost curve."""

    def test_bucket_costs(self):
        """Test cost(0..2) for base 100 and growth 1.3."""
        bucket = UpgradeConfig(name='Bucket Size', base_cost=100, growth_rate=1.3)
        assert bucket.cost_at(0) == 100
        assert bucket.cost_at(1) == 130
        assert bucket.cost_at(2) == 169

    def test_costs_strictly_increase(self):
        """Test that consecutive levels always cost more."""
        bucket = UpgradeConfig(name='Bucket Size', base_cost=100, growth_rate=1.3)
        costs = [bucket.cost_at(level) for level in range(20)]
        assert all(b > a for a, b in zip(costs, costs[1:]))

    def test_growth_must_exceed_one(self):
        """Test that a flat curve raises ValidationError."""
        with pytest.raises(ValidationError):
            UpgradeConfig(name='Flat', base_cost=100, growth_rate=1.0)

    def test_curve_that_could_stall_rejected(self):
        """Test that a curve whose steps round to zero is rejected."""
        with pytest.raises(ValidationError):
            UpgradeConfig(name='Tiny', base_cost=1, growth_rate=1.3)


class TestTriviaQuestion:
    """Test TriviaQuestion validation."""

    def test_valid_question(self):
        """Test creating a question."""
        q = TriviaQuestion(prompt='Q?', options=['a', 'b'], correct_index=1)
        assert q.options[q.correct_index] == 'b'

    def test_correct_index_out_of_range(self):
        """Test that an index past the options raises ValidationError."""
        with pytest.raises(ValidationError):
            TriviaQuestion(prompt='Q?', options=['a', 'b'], correct_index=2)

    def test_single_option_rejected(self):
        """Test that a question needs at least two options."""
        with pytest.raises(ValidationError):
            TriviaQuestion(prompt='Q?', options=['a'], correct_index=0)


class TestPopup:
    """Test Popup aging."""

    def test_advance_drifts_and_fades(self):
        """Test one tick of popup motion."""
        popup = Popup(x=10.0, y=100.0, text='+$5', vx=0.5, vy=-1.5)
        aged = popup.advance(1.0 / 60.0)
        assert aged.x == pytest.approx(10.5)
        assert aged.y == pytest.approx(98.5)
        assert aged.alpha == pytest.approx(1.0 - 1.0 / 60.0)
        assert aged.life == 89
        # Source popup untouched
        assert popup.life == 90

    def test_expires_when_life_runs_out(self):
        """Test that a popup with one tick left expires."""
        popup = Popup(x=0.0, y=0.0, text='+$5', life=1)
        assert popup.is_alive
        assert not popup.advance(0.01).is_alive

    def test_expires_when_faded(self):
        """Test that a fully transparent popup is not alive."""
        popup = Popup(x=0.0, y=0.0, text='+$5', alpha=0.01)
        assert not popup.advance(0.05).is_alive


# ============================================================================
# Settings
# ============================================================================


class TestSimulationSettings:
    """Test SimulationSettings defaults and validation."""

    def test_derived_world_geometry(self):
        """Test water level, depth and floor for the default viewport."""
        s = SimulationSettings()
        assert s.water_level == pytest.approx(280.0)
        assert s.max_depth_px == pytest.approx(3000.0)
        assert s.floor_y == pytest.approx(3280.0)
        assert s.world_height == s.floor_y

    def test_default_motion_constants(self):
        """Test the default hook motion speeds."""
        s = SimulationSettings()
        assert s.drop_speed == 42.0
        assert s.retract_speed == 4.0
        assert s.retract_speed_full == 20.0
        assert s.base_capacity == 4

    def test_inverted_spawn_range_rejected(self):
        """Test that spawn_base with min > max raises ValidationError."""
        with pytest.raises(ValidationError):
            SimulationSettings(spawn_base=(4, 2))

    def test_unknown_capacity_upgrade_rejected(self):
        """Test that the capacity upgrade must be configured."""
        with pytest.raises(ValidationError):
            SimulationSettings(capacity_upgrade='rod_length')

    def test_non_positive_drop_speed_rejected(self):
        """Test that a zero drop speed raises ValidationError."""
        with pytest.raises(ValidationError):
            SimulationSettings(drop_speed=0.0)

    def test_frozen(self):
        """Test that settings are immutable."""
        s = SimulationSettings()
        with pytest.raises(ValidationError):
            s.drop_speed = 10.0

    def test_anchor_outside_steer_band_rejected(self):
        """Test that a viewport too narrow for the hook anchor raises ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            SimulationSettings(viewport_width=150)
        assert 'anchor' in str(exc_info.value)
        with pytest.raises(ValidationError):
            SimulationSettings(hook_offset_x=-60.0)

    def test_anchor_on_band_edge_accepted(self):
        """Test an anchor exactly at the margin is still valid."""
        s = SimulationSettings(viewport_width=200)
        assert s.surface_x + s.hook_offset_x == s.viewport_width - s.hook_edge_margin
