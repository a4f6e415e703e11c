"""
DeepHook-specific data models.

These models define the configuration-side catalogues (fish archetypes,
rarity tables, upgrade curves), the ephemeral feedback records (popups,
payout events) and the read-only world snapshot handed to renderers.
"""

import math
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator, model_validator

from .enums import ChallengeState, HookState


RARITY_TOLERANCE = 1e-6


def _validate_band(v: Tuple[float, float]) -> Tuple[float, float]:
    low, high = v
    if low <= 0.0 or high <= 0.0:
        raise ValueError(f"Band values must be positive, got {v}")
    if low > high:
        raise ValueError(f"Band minimum must not exceed maximum, got {v}")
    return v


class FishArchetype(BaseModel):
    """A category of spawnable fish.

    Attributes:
        id: Unique archetype identifier (also the sprite key for renderers)
        value: Payout credited when a fish of this kind is delivered
        rarity: Probability mass in the rarity table
        speed_range: (min, max) horizontal speed in pixels per tick
        width_range: (min, max) body width in pixels
        height_range: (min, max) body height in pixels
        square: If True the body height equals its width

    Examples:
        >>> pink = FishArchetype(id="pink", value=5, rarity=0.29, speed_range=(0.5, 1.5))
        >>> pink.value
        5
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    value: int = Field(ge=0)
    rarity: float = Field(gt=0.0, le=1.0)
    speed_range: Tuple[float, float]
    width_range: Tuple[float, float] = (40.0, 65.0)
    height_range: Tuple[float, float] = (25.0, 40.0)
    square: bool = False

    @field_validator('speed_range', 'width_range', 'height_range')
    @classmethod
    def validate_band(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        """Ensure min <= max and both are positive."""
        return _validate_band(v)


class RarityTable(BaseModel):
    """Ordered archetype list whose rarities form a probability distribution.

    Order matters: cumulative sampling walks the entries front to back.

    Examples:
        >>> table = RarityTable(entries=[
        ...     FishArchetype(id="a", value=1, rarity=0.75, speed_range=(1.0, 1.0)),
        ...     FishArchetype(id="b", value=2, rarity=0.25, speed_range=(1.0, 1.0)),
        ... ])
        >>> table.get("b").value
        2
    """
    model_config = ConfigDict(frozen=True)

    entries: List[FishArchetype] = Field(min_length=1)

    @model_validator(mode='after')
    def validate_distribution(self) -> 'RarityTable':
        """Rarities must sum to 1 and ids must be unique."""
        total = sum(entry.rarity for entry in self.entries)
        if abs(total - 1.0) > RARITY_TOLERANCE:
            raise ValueError(f"Rarities must sum to 1, got {total:.6f}")
        ids = [entry.id for entry in self.entries]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Archetype ids must be unique, got {ids}")
        return self

    def get(self, archetype_id: str) -> Optional[FishArchetype]:
        """Look up an archetype by id."""
        for entry in self.entries:
            if entry.id == archetype_id:
                return entry
        return None

    @property
    def last(self) -> FishArchetype:
        return self.entries[-1]


class UpgradeConfig(BaseModel):
    """Cost curve of a purchasable upgrade.

    cost(level) = floor(base_cost * growth_rate ** level)

    The curve is validated to be strictly increasing over integer costs:
    a growth step is always at least one whole unit of currency.

    Examples:
        >>> bucket = UpgradeConfig(name="Bucket Size", base_cost=100, growth_rate=1.3)
        >>> [bucket.cost_at(level) for level in range(3)]
        [100, 130, 169]
    """
    model_config = ConfigDict(frozen=True)

    name: str
    base_cost: int = Field(gt=0)
    growth_rate: float = Field(gt=1.0)

    @model_validator(mode='after')
    def validate_strictly_increasing(self) -> 'UpgradeConfig':
        """Each level must cost at least one more than the previous."""
        if self.base_cost * (self.growth_rate - 1.0) < 1.0:
            raise ValueError(
                "base_cost * (growth_rate - 1) must be at least 1 so that "
                f"costs strictly increase, got {self.base_cost} and {self.growth_rate}"
            )
        return self

    def cost_at(self, level: int) -> int:
        """Cost of buying the next level when currently at ``level``."""
        return math.floor(self.base_cost * self.growth_rate ** level)


class Popup(BaseModel):
    """Immutable floating payout label.

    Each tick produces a new Popup via advance(): it drifts by its
    velocity, loses 1/60 of opacity and one tick of lifetime.

    Attributes:
        x, y: World position
        text: Label text, e.g. "+$10"
        vx, vy: Drift per tick
        alpha: Opacity in [0, 1]
        life: Remaining lifetime in ticks
    """
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    text: str
    vx: float = 0.0
    vy: float = -1.2
    alpha: float = Field(default=1.0, ge=0.0, le=1.0)
    life: int = 90

    @computed_field
    @property
    def is_alive(self) -> bool:
        return self.life > 0 and self.alpha > 0.0

    def advance(self, alpha_decay: float) -> 'Popup':
        """Return the popup one tick later."""
        return self.model_copy(update={
            'x': self.x + self.vx,
            'y': self.y + self.vy,
            'alpha': max(0.0, self.alpha - alpha_decay),
            'life': self.life - 1,
        })


class PayoutEvent(BaseModel):
    """A single credited catch, emitted in cargo order on docking."""
    model_config = ConfigDict(frozen=True)

    archetype_id: str
    value: int
    balance_after: int


class HookView(BaseModel):
    """Renderer-facing view of the hook."""
    model_config = ConfigDict(frozen=True)

    state: HookState
    x: float
    y: float
    anchor_x: float
    anchor_y: float
    target_y: float
    retract_speed: float
    capacity: int
    capture_enabled: bool


class FishView(BaseModel):
    """Renderer-facing view of a free or caught fish."""
    model_config = ConfigDict(frozen=True)

    entity_id: int
    archetype_id: str
    value: int
    x: float
    y: float
    width: float
    height: float
    vx: float
    angle: float = 0.0


class TokenView(BaseModel):
    """Renderer-facing view of a challenge token."""
    model_config = ConfigDict(frozen=True)

    entity_id: int
    x: float
    y: float
    size: float
    vx: float


class UpgradeView(BaseModel):
    """Current level and price of an upgrade."""
    model_config = ConfigDict(frozen=True)

    upgrade_id: str
    name: str
    level: int
    cost: int
    affordable: bool


class ChallengeView(BaseModel):
    """The trivia gate while it is Open or Resolved."""
    model_config = ConfigDict(frozen=True)

    state: ChallengeState
    prompt: str
    options: List[str]
    selected_index: Optional[int] = None
    correct: Optional[bool] = None
    reward: int = 0


class WorldSnapshot(BaseModel):
    """Everything a renderer or UI layer needs after a tick.

    payouts lists the credits emitted during the tick that produced the
    snapshot; ready is True while the hook rests at the anchor and a new
    drop may be requested.
    """
    model_config = ConfigDict(frozen=True)

    tick: int
    started: bool
    paused: bool
    ready: bool
    hook: HookView
    cargo: List[FishView]
    fish: List[FishView]
    tokens: List[TokenView]
    camera_offset: float
    balance: int
    catch_count: int
    popups: List[Popup]
    payouts: List[PayoutEvent]
    upgrades: List[UpgradeView]
    challenge: Optional[ChallengeView] = None
