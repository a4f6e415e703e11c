"""
DeepHook - Free-swimming entities and their per-tick motion.

Fish and challenge tokens drift horizontally across the viewport with a
small sinusoidal bob:

    x += vx
    y += sin(tick * tick_freq + x * x_freq) * amplitude

and are dropped once they leave the viewport by the despawn margin.
"""
import math
from dataclasses import dataclass
from typing import List

from deephook.logging import get_logger
from models.primitives import Rectangle
from games.DeepHook.settings import SimulationSettings

log = get_logger('entities')


@dataclass
class Fish:
    """A fish; free-swimming until caught, then part of the hook's cargo.

    Position is the top-left corner of the body box.
    """
    x: float
    y: float
    width: float
    height: float
    vx: float                  # Signed, pixels per tick
    archetype_id: str
    value: int

    # Swing state, only meaningful once caught
    angle: float = 0.0
    ang_vel: float = 0.0

    spawn_tick: int = 0
    entity_id: int = 0          # Assigned by WorldEntities

    @property
    def bounds(self) -> Rectangle:
        return Rectangle(x=self.x, y=self.y, width=self.width, height=self.height)

    def swim(self, tick: int, settings: SimulationSettings) -> None:
        """Advance one tick of free-swimming motion."""
        self.x += self.vx
        self.y += math.sin(tick * settings.fish_bob_tick_freq + self.x * settings.fish_bob_x_freq) \
            * settings.fish_bob_amplitude

        top = settings.water_level + settings.fish_band_top
        bottom = settings.floor_y + settings.fish_band_bottom
        self.y = max(top, min(bottom, self.y))

    def reset_swing(self) -> None:
        self.angle = 0.0
        self.ang_vel = 0.0


@dataclass
class ChallengeToken:
    """A bonus token; catching it opens the trivia gate instead of paying out."""
    x: float
    y: float
    size: float
    vx: float
    entity_id: int = 0          # Assigned by WorldEntities

    @property
    def bounds(self) -> Rectangle:
        return Rectangle(x=self.x, y=self.y, width=self.size, height=self.size)

    def swim(self, tick: int, settings: SimulationSettings) -> None:
        """Advance one tick of motion with the token's own bob constants."""
        self.x += self.vx
        self.y += math.sin(tick * settings.challenge_bob_tick_freq + self.x * settings.challenge_bob_x_freq) \
            * settings.challenge_bob_amplitude

        top = settings.water_level + settings.fish_band_top
        bottom = settings.floor_y + settings.fish_band_bottom
        self.y = max(top, min(bottom, self.y))


def is_off_screen(x: float, viewport_width: float, margin: float) -> bool:
    """Check if a horizontal position has left the viewport by the margin."""
    return x < -margin or x > viewport_width + margin


class WorldEntities:
    """Owns the free-swimming fish and challenge tokens.

    Removals found during a motion pass are collected and applied after
    the pass, never while iterating.
    """

    def __init__(self, settings: SimulationSettings):
        self.settings = settings
        self.fish: List[Fish] = []
        self.tokens: List[ChallengeToken] = []
        self._next_id = 1

    def _assign_id(self) -> int:
        entity_id = self._next_id
        self._next_id += 1
        return entity_id

    def add_fish(self, fish: Fish) -> None:
        fish.entity_id = self._assign_id()
        self.fish.append(fish)

    def add_token(self, token: ChallengeToken) -> None:
        token.entity_id = self._assign_id()
        self.tokens.append(token)

    def remove_fish(self, caught: List[Fish]) -> None:
        """Drop the given fish from the free set (by identity)."""
        if not caught:
            return
        gone = {id(f) for f in caught}
        self.fish = [f for f in self.fish if id(f) not in gone]

    def remove_token(self, token: ChallengeToken) -> None:
        self.tokens = [t for t in self.tokens if t is not token]

    def update(self, tick: int) -> int:
        """Move every free entity and cull those that swam off screen.

        Args:
            tick: Global simulation tick used by the bob phase

        Returns:
            Number of entities removed this tick
        """
        width = self.settings.viewport_width
        margin = self.settings.despawn_margin

        escaped_fish = []
        for fish in self.fish:
            fish.swim(tick, self.settings)
            if is_off_screen(fish.x, width, margin):
                escaped_fish.append(fish)

        escaped_tokens = []
        for token in self.tokens:
            token.swim(tick, self.settings)
            if is_off_screen(token.x, width, margin):
                escaped_tokens.append(token)

        self.remove_fish(escaped_fish)
        if escaped_tokens:
            gone = {id(t) for t in escaped_tokens}
            self.tokens = [t for t in self.tokens if id(t) not in gone]

        removed = len(escaped_fish) + len(escaped_tokens)
        if removed:
            log.trace("Culled %d fish and %d tokens", len(escaped_fish), len(escaped_tokens))
        return removed
