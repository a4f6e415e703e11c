"""
DeepHook - Validated simulation settings.

SimulationSettings bundles every tunable of one simulation instance. The
defaults come from games.DeepHook.config (environment-driven); tests and
hosts override individual fields:

    >>> settings = SimulationSettings(initial_fish=0, descent_grace=False)
    >>> settings.world_height
    3280.0
"""
from typing import Dict, Tuple

from pydantic import BaseModel, Field, computed_field, model_validator

from models.deephook import FishArchetype, RarityTable, UpgradeConfig
from games.DeepHook import config


CAPACITY_UPGRADE = 'bucket_size'

# Rarer fish swim faster: each tier widens and lifts the speed band.
_COMMON = (0.5, 1.5)
_UNCOMMON = (0.7, 1.8)
_RARE = (0.9, 2.1)
_VERY_RARE = (1.1, 2.4)
_LEGENDARY = (1.3, 2.8)

# fish_pink also takes the 2% the arcade table left unassigned.
DEFAULT_RARITY_TABLE = RarityTable(entries=[
    FishArchetype(id='fish_pink', value=5, rarity=0.31, speed_range=_COMMON),
    FishArchetype(id='fish_orange', value=10, rarity=0.24, speed_range=_COMMON),
    FishArchetype(id='fish_blue', value=10, rarity=0.19, speed_range=_COMMON),
    FishArchetype(id='fish_green', value=15, rarity=0.12, speed_range=_UNCOMMON),
    FishArchetype(id='fish_red', value=20, rarity=0.08, speed_range=_UNCOMMON),
    FishArchetype(id='fish_blue_skeleton', value=25, rarity=0.03, speed_range=_RARE),
    FishArchetype(id='fish_brown', value=50, rarity=0.02, speed_range=_VERY_RARE, square=True),
    FishArchetype(id='diamond', value=100, rarity=0.01, speed_range=_LEGENDARY),
])

DEFAULT_UPGRADES: Dict[str, UpgradeConfig] = {
    CAPACITY_UPGRADE: UpgradeConfig(
        name='Bucket Size',
        base_cost=config.BUCKET_BASE_COST,
        growth_rate=config.BUCKET_GROWTH_RATE,
    ),
}


class SimulationSettings(BaseModel):
    """Every tunable of a simulation, validated once at construction."""
    model_config = {"frozen": True}

    # Viewport and world
    viewport_width: int = Field(default=config.VIEWPORT_WIDTH, gt=0)
    viewport_height: int = Field(default=config.VIEWPORT_HEIGHT, gt=0)
    water_level_ratio: float = Field(default=config.WATER_LEVEL_RATIO, gt=0.0, lt=1.0)
    meters_to_pixels: float = Field(default=config.METERS_TO_PIXELS, gt=0.0)
    max_depth_meters: float = Field(default=config.MAX_DEPTH_METERS, gt=0.0)

    # Surface character and anchor
    surface_x: float = config.SURFACE_X
    surface_height: float = Field(default=config.SURFACE_HEIGHT, gt=0.0)
    surface_float_offset: float = config.SURFACE_FLOAT_OFFSET
    surface_bob_step: float = Field(default=config.SURFACE_BOB_STEP, ge=0.0)
    surface_bob_amplitude: float = Field(default=config.SURFACE_BOB_AMPLITUDE, ge=0.0)
    hook_offset_x: float = config.HOOK_OFFSET_X
    hook_offset_y: float = config.HOOK_OFFSET_Y

    # Hook motion
    drop_speed: float = Field(default=config.DROP_SPEED, gt=0.0)
    retract_speed: float = Field(default=config.RETRACT_SPEED, gt=0.0)
    retract_speed_full: float = Field(default=config.RETRACT_SPEED_FULL, gt=0.0)
    steer_speed: float = Field(default=config.STEER_SPEED, ge=0.0)
    hook_edge_margin: float = Field(default=config.HOOK_EDGE_MARGIN, ge=0.0)
    hook_box_size: float = Field(default=config.HOOK_BOX_SIZE, gt=0.0)
    descent_grace: bool = config.DESCENT_GRACE
    base_capacity: int = Field(default=config.BASE_CAPACITY, ge=1)

    # Spawning
    rarity_table: RarityTable = DEFAULT_RARITY_TABLE
    spawn_interval: float = Field(default=config.SPAWN_INTERVAL, gt=0.0)
    initial_fish: int = Field(default=config.INITIAL_FISH, ge=0)
    spawn_base: Tuple[int, int] = (config.SPAWN_BASE_MIN, config.SPAWN_BASE_MAX)
    spawn_active_bonus: Tuple[int, int] = (config.SPAWN_ACTIVE_MIN, config.SPAWN_ACTIVE_MAX)
    spawn_floor: int = Field(default=config.SPAWN_FLOOR, ge=0)
    spawn_floor_bonus: int = Field(default=config.SPAWN_FLOOR_BONUS, ge=0)
    spawn_edge_offset: float = Field(default=config.SPAWN_EDGE_OFFSET, ge=0.0)
    spawn_depth_padding: float = Field(default=config.SPAWN_DEPTH_PADDING, ge=0.0)

    # Free-swimming motion
    fish_bob_tick_freq: float = config.FISH_BOB_TICK_FREQ
    fish_bob_x_freq: float = config.FISH_BOB_X_FREQ
    fish_bob_amplitude: float = config.FISH_BOB_AMPLITUDE
    fish_band_top: float = config.FISH_BAND_TOP
    fish_band_bottom: float = config.FISH_BAND_BOTTOM
    despawn_margin: float = Field(default=config.DESPAWN_MARGIN, ge=0.0)

    # Swing
    swing_response: float = config.SWING_RESPONSE
    swing_max_angle: float = Field(default=config.SWING_MAX_ANGLE, gt=0.0)
    swing_spring: float = Field(default=config.SWING_SPRING, ge=0.0)
    swing_damping: float = Field(default=config.SWING_DAMPING, ge=0.0, lt=1.0)

    # Camera
    camera_center_ratio: float = Field(default=config.CAMERA_CENTER_RATIO, ge=0.0, le=1.0)

    # Popups
    popup_life: int = Field(default=config.POPUP_LIFE, gt=0)
    popup_alpha_decay: float = Field(default=config.POPUP_ALPHA_DECAY, gt=0.0)
    popup_scatter_x: float = Field(default=config.POPUP_SCATTER_X, ge=0.0)
    popup_scatter_y: float = Field(default=config.POPUP_SCATTER_Y, ge=0.0)

    # Economy
    upgrades: Dict[str, UpgradeConfig] = DEFAULT_UPGRADES
    capacity_upgrade: str = CAPACITY_UPGRADE

    # Challenge tokens
    challenges_enabled: bool = config.CHALLENGES_ENABLED
    challenge_deck: str = config.CHALLENGE_DECK
    challenge_tokens_per_drop: int = Field(default=config.CHALLENGE_TOKENS_PER_DROP, ge=0)
    challenge_spawn_chance: float = Field(default=config.CHALLENGE_SPAWN_CHANCE, ge=0.0, le=1.0)
    challenge_depth_bias: float = Field(default=config.CHALLENGE_DEPTH_BIAS, gt=0.0, le=1.0)
    challenge_token_size: float = Field(default=config.CHALLENGE_TOKEN_SIZE, gt=0.0)
    challenge_token_speed: Tuple[float, float] = (
        config.CHALLENGE_TOKEN_SPEED_MIN, config.CHALLENGE_TOKEN_SPEED_MAX
    )
    challenge_bob_tick_freq: float = config.CHALLENGE_BOB_TICK_FREQ
    challenge_bob_x_freq: float = config.CHALLENGE_BOB_X_FREQ
    challenge_bob_amplitude: float = config.CHALLENGE_BOB_AMPLITUDE
    challenge_reward: int = Field(default=config.CHALLENGE_REWARD, ge=0)
    challenge_result_seconds: float = Field(default=config.CHALLENGE_RESULT_SECONDS, ge=0.0)

    @model_validator(mode='after')
    def validate_ranges(self) -> 'SimulationSettings':
        """Check (min, max) pairs and cross-field constraints."""
        for name in ('spawn_base', 'spawn_active_bonus'):
            low, high = getattr(self, name)
            if low < 0 or low > high:
                raise ValueError(f"{name} must satisfy 0 <= min <= max, got {(low, high)}")
        low, high = self.challenge_token_speed
        if low <= 0.0 or low > high:
            raise ValueError(f"challenge_token_speed must satisfy 0 < min <= max, got {(low, high)}")
        if self.capacity_upgrade not in self.upgrades:
            raise ValueError(f"capacity_upgrade '{self.capacity_upgrade}' is not a configured upgrade")
        if self.hook_edge_margin * 2 > self.viewport_width:
            raise ValueError("hook_edge_margin leaves no room to steer")
        anchor_x = self.surface_x + self.hook_offset_x
        if not self.hook_edge_margin <= anchor_x <= self.viewport_width - self.hook_edge_margin:
            raise ValueError(
                f"hook anchor x={anchor_x:g} lies outside the steerable band "
                f"[{self.hook_edge_margin:g}, {self.viewport_width - self.hook_edge_margin:g}]"
            )
        return self

    @computed_field
    @property
    def water_level(self) -> float:
        """World y of the water surface."""
        return self.viewport_height * self.water_level_ratio

    @computed_field
    @property
    def max_depth_px(self) -> float:
        return self.max_depth_meters * self.meters_to_pixels

    @computed_field
    @property
    def floor_y(self) -> float:
        """World y the hook drops to."""
        return self.water_level + self.max_depth_px

    @computed_field
    @property
    def world_height(self) -> float:
        return self.floor_y
