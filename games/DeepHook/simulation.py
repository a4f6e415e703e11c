"""
DeepHook Simulation

The single entry point a host calls. One Simulation owns every collection
and advances all subsystems exactly once per tick, in a fixed order:

    1. challenge gate  (deferred close; pauses everything below)
    2. surface float + hook state machine (docking delivers the cargo)
    3. spawner         (only once the host has started the game)
    4. free entities
    5. collisions      (catches, capacity cutoff, challenge tokens)
    6. swing           (cargo sway while retracting)
    7. camera
    8. popups

Randomness and time are injected, so two simulations built with the same
seed and clock evolve identically.

Usage:
    sim = Simulation(seed=7)
    sim.start(drop_immediately=True)
    while running:
        snapshot = sim.tick(TickInput(steer_left=left_held, steer_right=right_held))
        renderer.draw(snapshot)
"""
import random
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from deephook.logging import get_logger
from models.deephook import (
    ChallengeDeck,
    FishView,
    HookState,
    HookView,
    PayoutEvent,
    TokenView,
    WorldSnapshot,
)
from games.DeepHook.camera import Camera
from games.DeepHook.challenge import ChallengeController
from games.DeepHook.challenge_loader import ChallengeDeckLoader
from games.DeepHook.collision import CollisionSystem
from games.DeepHook.economy import Economy
from games.DeepHook.entities import Fish, WorldEntities
from games.DeepHook.feedback import PopupManager
from games.DeepHook.hook import Hook, SurfaceFloat
from games.DeepHook.settings import SimulationSettings
from games.DeepHook.spawner import SpawnManager
from games.DeepHook.swing import apply_swing

log = get_logger('simulation')


@dataclass(frozen=True)
class TickInput:
    """Input signals sampled for one tick.

    Both steer signals may be held at once; they cancel out.
    """
    steer_left: bool = False
    steer_right: bool = False


def _fish_view(fish: Fish) -> FishView:
    return FishView(
        entity_id=fish.entity_id,
        archetype_id=fish.archetype_id,
        value=fish.value,
        x=fish.x,
        y=fish.y,
        width=fish.width,
        height=fish.height,
        vx=fish.vx,
        angle=fish.angle,
    )


class Simulation:
    """One independent fishing simulation."""

    def __init__(
        self,
        settings: Optional[SimulationSettings] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
        deck: Optional[ChallengeDeck] = None,
    ):
        """Build a simulation.

        Args:
            settings: Tunables; defaults come from the environment config
            seed: Seed for a private random.Random (ignored if rng given)
            rng: Shared random source for every subsystem
            clock: Monotonic time source for the spawn cadence and the
                challenge result delay
            deck: Challenge questions; loaded from settings.challenge_deck
                when omitted and challenges are enabled
        """
        self.settings = settings if settings is not None else SimulationSettings()
        self._rng = rng if rng is not None else random.Random(seed)

        s = self.settings
        self.surface = SurfaceFloat(s)
        self.hook = Hook(s, self.surface)
        self.world = WorldEntities(s)
        self.spawner = SpawnManager(s, rng=self._rng, clock=clock)
        self.collisions = CollisionSystem()
        self.camera = Camera(s)
        self.economy = Economy(s)
        self.popups = PopupManager(s, rng=self._rng)

        if deck is None and s.challenges_enabled:
            deck = ChallengeDeckLoader().load_deck(s.challenge_deck)
        self.challenge: Optional[ChallengeController] = None
        if deck is not None:
            self.challenge = ChallengeController(
                deck,
                reward=s.challenge_reward,
                result_seconds=s.challenge_result_seconds,
                rng=self._rng,
                clock=clock,
            )

        self.started = False
        self.ticks = 0
        self.cycles_completed = 0
        self._payouts: List[PayoutEvent] = []

        self.hook.capacity = self.economy.capacity
        self.spawner.seed(self.world, s.initial_fish)
        self.camera.update(self.hook.y)
        log.debug("Simulation ready: %d fish seeded, capacity %d",
                  len(self.world.fish), self.hook.capacity)

    # ------------------------------------------------------------------
    # Host-facing operations
    # ------------------------------------------------------------------

    @property
    def paused(self) -> bool:
        return self.challenge is not None and self.challenge.is_paused

    @property
    def ready(self) -> bool:
        """True while the hook rests at the anchor and may be dropped."""
        return self.hook.state is HookState.IDLE and not self.paused

    def start(self, drop_immediately: bool = False) -> None:
        """Open the started gate so the spawn cadence takes effect."""
        if not self.started:
            self.started = True
            self.spawner.reset_timer()
            log.info("Game started")
        if drop_immediately:
            self.request_drop()

    def request_drop(self) -> bool:
        """Attempt Idle -> Dropping. Returns False if the hook is busy."""
        if self.paused:
            return False
        if not self.hook.request_drop():
            return False
        self.spawner.begin_drop()
        return True

    def purchase_upgrade(self, upgrade_id: str) -> bool:
        """Buy the next level of an upgrade; capacity applies immediately."""
        if not self.economy.purchase(upgrade_id):
            return False
        self.hook.capacity = self.economy.capacity
        return True

    def upgrade_cost(self, upgrade_id: str) -> Optional[int]:
        return self.economy.cost(upgrade_id)

    def can_afford(self, upgrade_id: str) -> bool:
        return self.economy.can_afford(upgrade_id)

    def answer_challenge(self, option_index: int) -> bool:
        """Answer the open challenge question. Returns False if none is open."""
        if self.challenge is None:
            return False
        return self.challenge.answer(option_index, self.economy.wallet)

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def tick(self, inputs: Optional[TickInput] = None) -> WorldSnapshot:
        """Advance the world by one frame and return the resulting snapshot."""
        inputs = inputs if inputs is not None else TickInput()
        self._payouts = []

        if self.challenge is not None:
            if self.challenge.update():
                # Paused time does not count toward the spawn cadence
                self.spawner.reset_timer()
            if self.challenge.is_paused:
                return self.snapshot()

        self.surface.update()
        if self.hook.update(inputs.steer_left, inputs.steer_right):
            self._deliver_cargo()

        if self.started:
            self.spawner.update(self.world, self.hook.state, self.ticks)

        self.world.update(self.ticks)

        result = self.collisions.check(
            self.hook,
            self.world,
            tokens_catchable=self.challenge is not None and not self.challenge.is_paused,
        )
        if result.opened_challenge:
            self.challenge.open()

        if not self.paused:
            if self.hook.state is HookState.RETRACTING:
                apply_swing(self.hook.cargo, self.hook.dx, self.settings)
            self.camera.update(self.hook.y)
            self.popups.update()

        self.ticks += 1
        return self.snapshot()

    def _deliver_cargo(self) -> None:
        """Credit the docked cargo in capture order, one popup per fish."""
        cargo = self.hook.unload()
        self._payouts = self.economy.payout_all(cargo)
        for fish in cargo:
            self.popups.spawn(self.hook.x, self.hook.y, fish.value)
        self.cycles_completed += 1
        if cargo:
            log.info("Delivered %d fish for %d (balance %d)",
                     len(cargo), sum(f.value for f in cargo), self.economy.balance)

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def snapshot(self) -> WorldSnapshot:
        """Read-only view of the current state."""
        hook = self.hook
        anchor = self.surface.anchor
        return WorldSnapshot(
            tick=self.ticks,
            started=self.started,
            paused=self.paused,
            ready=self.ready,
            hook=HookView(
                state=hook.state,
                x=hook.x,
                y=hook.y,
                anchor_x=anchor.x,
                anchor_y=anchor.y,
                target_y=hook.target_y,
                retract_speed=hook.retract_speed,
                capacity=hook.capacity,
                capture_enabled=hook.capture_enabled,
            ),
            cargo=[_fish_view(f) for f in hook.cargo],
            fish=[_fish_view(f) for f in self.world.fish],
            tokens=[
                TokenView(entity_id=t.entity_id, x=t.x, y=t.y, size=t.size, vx=t.vx)
                for t in self.world.tokens
            ],
            camera_offset=self.camera.offset,
            balance=self.economy.balance,
            catch_count=self.economy.catch_count,
            popups=list(self.popups.popups),
            payouts=list(self._payouts),
            upgrades=self.economy.views(),
            challenge=self.challenge.view() if self.challenge is not None else None,
        )
