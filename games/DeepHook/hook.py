"""
DeepHook - Hook state machine and the surface character it hangs from.

    IDLE --request_drop--> DROPPING --floor reached / cargo full--> RETRACTING
      ^                                                               |
      +------------------------ anchor reached -----------------------+

While dropping nothing can be caught until the descent ends (the capture
grace period). Filling the cargo while dropping cuts the descent short and
reels in at the elevated speed. While retracting the hook steers sideways.
"""
import math
from typing import List

from deephook.logging import get_logger
from models.deephook import HookState
from models.primitives import Point2D, Rectangle
from games.DeepHook.entities import Fish
from games.DeepHook.settings import SimulationSettings

log = get_logger('hook')


class SurfaceFloat:
    """The surface character bobbing on the water; defines the hook anchor."""

    def __init__(self, settings: SimulationSettings):
        self.settings = settings
        self.x = settings.surface_x
        self.base_y = settings.water_level - settings.surface_height + settings.surface_float_offset
        self.y = self.base_y
        self.bob_time = 0.0

    def update(self) -> None:
        """Advance the floating animation by one tick."""
        self.bob_time += self.settings.surface_bob_step
        self.y = self.base_y + math.sin(self.bob_time) * self.settings.surface_bob_amplitude

    @property
    def anchor(self) -> Point2D:
        """Where the hook rests (rod base)."""
        return Point2D(
            x=self.x + self.settings.hook_offset_x,
            y=self.y + self.settings.hook_offset_y,
        )

    @property
    def highest_anchor_y(self) -> float:
        """Top of the hook's vertical range (anchor at the crest of a bob)."""
        return self.base_y + self.settings.hook_offset_y - self.settings.surface_bob_amplitude


class Hook:
    """Owns hook position, state, cargo and the drop cycle.

    Attributes:
        state: Current HookState
        x, y: Hook position in world coordinates
        target_y: Depth the current drop descends to
        retract_speed: Current ascent speed (elevated after a cutoff)
        cargo: Caught fish in capture order
        capacity: Maximum cargo size, raised by upgrades
        capture_enabled: False during the descent grace period
        dx: Horizontal displacement during the last update
    """

    def __init__(self, settings: SimulationSettings, surface: SurfaceFloat):
        self.settings = settings
        self.surface = surface

        anchor = surface.anchor
        self.state = HookState.IDLE
        self.x = anchor.x
        self.y = anchor.y
        self.target_y = anchor.y
        self.retract_speed = settings.retract_speed
        self.cargo: List[Fish] = []
        self.capacity = settings.base_capacity
        self.capture_enabled = True
        self.dx = 0.0

    @property
    def is_full(self) -> bool:
        return len(self.cargo) >= self.capacity

    @property
    def position(self) -> Point2D:
        return Point2D(x=self.x, y=self.y)

    @property
    def catch_box(self) -> Rectangle:
        """Small fixed-size box centered on the hook."""
        size = self.settings.hook_box_size
        return Rectangle.centered(self.position, size, size)

    def request_drop(self) -> bool:
        """Start a drop if idle.

        Returns:
            True if the hook started dropping, False if it was busy
        """
        if self.state is not HookState.IDLE:
            return False

        anchor = self.surface.anchor
        self.x = anchor.x
        self.y = anchor.y
        self.cargo = []
        self.target_y = self.settings.floor_y
        self.capture_enabled = not self.settings.descent_grace
        self.state = HookState.DROPPING
        log.info("Drop started toward y=%.0f", self.target_y)
        return True

    def update(self, steer_left: bool = False, steer_right: bool = False) -> bool:
        """Advance the hook one tick.

        Args:
            steer_left: Steer-left signal sampled this tick
            steer_right: Steer-right signal sampled this tick

        Returns:
            True if the hook docked at the anchor during this tick
        """
        prev_x = self.x
        docked = False

        if self.state is HookState.IDLE:
            anchor = self.surface.anchor
            self.x = anchor.x
            self.y = anchor.y
        elif self.state is HookState.DROPPING:
            self.y = min(self.y + self.settings.drop_speed, self.target_y)
            if self.y >= self.target_y:
                self._begin_retract(self.settings.retract_speed)
        else:
            self.y -= self.retract_speed
            self._steer(steer_left, steer_right)
            anchor = self.surface.anchor
            if self.y <= anchor.y:
                self._dock(anchor)
                docked = True

        self.dx = 0.0 if docked else self.x - prev_x
        return docked

    def attach(self, fish: Fish) -> bool:
        """Add a caught fish to the cargo.

        Filling the last slot while dropping forces the ascent at the
        elevated speed.

        Returns:
            True if the fish was attached, False if the cargo is full
        """
        if self.is_full:
            return False

        fish.reset_swing()
        self.cargo.append(fish)

        if self.is_full and self.state is HookState.DROPPING:
            self._begin_retract(self.settings.retract_speed_full)
            log.info("Cargo full (%d), reeling in fast", self.capacity)
        return True

    def unload(self) -> List[Fish]:
        """Hand over and clear the cargo."""
        cargo, self.cargo = self.cargo, []
        return cargo

    def _begin_retract(self, speed: float) -> None:
        self.state = HookState.RETRACTING
        self.retract_speed = speed
        self.capture_enabled = True
        log.debug("Retracting at %.1f px/tick from y=%.0f", speed, self.y)

    def _steer(self, steer_left: bool, steer_right: bool) -> None:
        if steer_left:
            self.x -= self.settings.steer_speed
        if steer_right:
            self.x += self.settings.steer_speed
        margin = self.settings.hook_edge_margin
        self.x = max(margin, min(self.settings.viewport_width - margin, self.x))

    def _dock(self, anchor: Point2D) -> None:
        self.state = HookState.IDLE
        self.retract_speed = self.settings.retract_speed
        self.x = anchor.x
        self.y = anchor.y
        log.info("Hook docked with %d fish", len(self.cargo))
