"""
DeepHook - Fish and challenge token spawner.

Runs a spawn cycle on a fixed real-time cadence. Each cycle adds a batch
whose size grows while the hook is out and when the water runs thin, and
may add one challenge token while the hook is dropping.
"""
import random
import time
from typing import Callable, Optional

from deephook.logging import get_logger
from models.deephook import FishArchetype, HookState
from games.DeepHook.entities import ChallengeToken, Fish, WorldEntities
from games.DeepHook.selector import WeightedSelector
from games.DeepHook.settings import SimulationSettings

log = get_logger('spawner')


class SpawnManager:
    """Spawns fish and challenge tokens into the world."""

    def __init__(
        self,
        settings: SimulationSettings,
        rng: Optional[random.Random] = None,
        selector: Optional[WeightedSelector] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the spawner.

        Args:
            settings: Simulation settings (cadence, batch sizes, table)
            rng: Random source for counts, sides, sizes and speeds
            selector: Archetype selector; defaults to one sharing rng
            clock: Monotonic time source in seconds
        """
        self.settings = settings
        self._rng = rng if rng is not None else random.Random()
        self._selector = selector if selector is not None else WeightedSelector(self._rng)
        self._clock = clock

        self._last_spawn_time = clock()
        self.tokens_this_drop = 0

    def reset_timer(self) -> None:
        """Restart the cadence from now."""
        self._last_spawn_time = self._clock()

    def begin_drop(self) -> None:
        """Reset the per-drop token allowance."""
        self.tokens_this_drop = 0

    def update(self, world: WorldEntities, hook_state: HookState, tick: int) -> int:
        """Run every spawn cycle that has come due since the last call.

        The cadence advances by whole intervals, so a slow host catches
        up on missed cycles instead of losing them.

        Args:
            world: Entity collections to spawn into
            hook_state: Current hook state (drives batch size and tokens)
            tick: Current simulation tick, recorded on new fish

        Returns:
            Number of fish spawned
        """
        now = self._clock()
        interval = self.settings.spawn_interval
        spawned = 0
        while now - self._last_spawn_time >= interval:
            self._last_spawn_time += interval
            spawned += self.spawn_cycle(world, hook_state, tick)
        return spawned

    def batch_size(self, live_fish: int, hook_state: HookState) -> int:
        """Size of one spawn cycle.

        base + active bonus (hook out) + floor bonus (sparse water),
        each drawn independently.
        """
        count = self._rng.randint(*self.settings.spawn_base)
        if hook_state.is_active:
            count += self._rng.randint(*self.settings.spawn_active_bonus)
        if live_fish < self.settings.spawn_floor:
            count += self.settings.spawn_floor_bonus
        return count

    def spawn_cycle(self, world: WorldEntities, hook_state: HookState, tick: int) -> int:
        """Spawn one batch of fish and maybe a challenge token."""
        count = self.batch_size(len(world.fish), hook_state)
        for _ in range(count):
            world.add_fish(self.spawn_fish(tick))

        if self._token_allowed(hook_state) and self._rng.random() < self.settings.challenge_spawn_chance:
            world.add_token(self.spawn_token())
            self.tokens_this_drop += 1
            log.debug("Challenge token spawned (%d this drop)", self.tokens_this_drop)

        log.trace("Spawn cycle: %d fish, %d live", count, len(world.fish))
        return count

    def seed(self, world: WorldEntities, count: int) -> None:
        """Populate the world before the first cycle."""
        for _ in range(count):
            world.add_fish(self.spawn_fish(0))

    def spawn_fish(self, tick: int) -> Fish:
        """Create a single fish just off a random horizontal edge."""
        archetype = self._selector.choose(self.settings.rarity_table)
        return self._build_fish(archetype, tick)

    def _build_fish(self, archetype: FishArchetype, tick: int) -> Fish:
        s = self.settings
        width = self._rng.uniform(*archetype.width_range)
        height = width if archetype.square else self._rng.uniform(*archetype.height_range)

        from_left = self._rng.random() < 0.5
        x = -s.spawn_edge_offset if from_left else s.viewport_width + s.spawn_edge_offset
        y = s.water_level + s.spawn_depth_padding + \
            self._rng.random() * (s.max_depth_px - 2 * s.spawn_depth_padding)

        speed = self._rng.uniform(*archetype.speed_range)
        return Fish(
            x=x,
            y=y,
            width=width,
            height=height,
            vx=speed if from_left else -speed,
            archetype_id=archetype.id,
            value=archetype.value,
            spawn_tick=tick,
        )

    def _token_allowed(self, hook_state: HookState) -> bool:
        return (
            self.settings.challenges_enabled
            and hook_state is HookState.DROPPING
            and self.tokens_this_drop < self.settings.challenge_tokens_per_drop
        )

    def spawn_token(self) -> ChallengeToken:
        """Create a token biased toward the shallower part of the water."""
        s = self.settings
        from_left = self._rng.random() < 0.5
        x = -s.spawn_edge_offset if from_left else s.viewport_width + s.spawn_edge_offset
        shallow_band = max(0.0, s.max_depth_px * s.challenge_depth_bias - s.spawn_depth_padding)
        y = s.water_level + s.spawn_depth_padding + self._rng.random() * shallow_band

        speed = self._rng.uniform(*s.challenge_token_speed)
        return ChallengeToken(
            x=x,
            y=y,
            size=s.challenge_token_size,
            vx=speed if from_left else -speed,
        )
