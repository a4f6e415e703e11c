#!/usr/bin/env python3
"""DeepHook - Headless entry point.

Runs the fishing simulation without a renderer, driven by a simple
autopilot, and prints a summary of the session.
"""

import argparse
import os
import sys
from typing import Optional

# Add project root to path
_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _root not in sys.path:
    sys.path.insert(0, _root)

from deephook.logging import configure_logging, get_logger
from models.deephook import ChallengeState, HookState, WorldSnapshot
from games.DeepHook.settings import SimulationSettings
from games.DeepHook.simulation import Simulation, TickInput

log = get_logger('main')


class FrameClock:
    """Simulated clock that advances a fixed step per frame."""

    def __init__(self, fps: int):
        self.step = 1.0 / fps
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self) -> None:
        self.now += self.step


class Autopilot:
    """Plays the game: drops when ready, steers toward the nearest fish,
    answers challenges with the first option and buys upgrades it can afford.
    """

    def __init__(self, sim: Simulation, buy_upgrades: bool = True):
        self.sim = sim
        self.buy_upgrades = buy_upgrades

    def decide(self, snapshot: WorldSnapshot) -> TickInput:
        sim = self.sim
        challenge = snapshot.challenge
        if challenge is not None and challenge.state is ChallengeState.OPEN:
            sim.answer_challenge(0)
            return TickInput()

        if snapshot.ready:
            if self.buy_upgrades:
                for upgrade in snapshot.upgrades:
                    if upgrade.affordable:
                        sim.purchase_upgrade(upgrade.upgrade_id)
            sim.request_drop()
            return TickInput()

        hook = snapshot.hook
        if hook.state is not HookState.RETRACTING or not snapshot.fish:
            return TickInput()

        # Only fish still ahead of the rising hook are worth chasing
        ahead = [f for f in snapshot.fish if f.y < hook.y] or snapshot.fish
        nearest = min(ahead, key=lambda f: abs(f.y - hook.y) + abs(f.x - hook.x))
        target_x = nearest.x + nearest.width / 2
        return TickInput(
            steer_left=target_x < hook.x - 2,
            steer_right=target_x > hook.x + 2,
        )


def run(ticks: int, seed: Optional[int], fps: int, challenges: bool, buy_upgrades: bool) -> WorldSnapshot:
    """Run a headless session and return the final snapshot."""
    clock = FrameClock(fps)
    settings = SimulationSettings(challenges_enabled=challenges)
    sim = Simulation(settings=settings, seed=seed, clock=clock)
    pilot = Autopilot(sim, buy_upgrades=buy_upgrades)

    sim.start()
    snapshot = sim.snapshot()
    for _ in range(ticks):
        inputs = pilot.decide(snapshot)
        clock.advance()
        snapshot = sim.tick(inputs)

    log.info("Finished %d ticks, %d drops completed", ticks, sim.cycles_completed)
    return snapshot


def main(argv=None):
    parser = argparse.ArgumentParser(description="Run DeepHook headless with an autopilot")
    parser.add_argument('--ticks', type=int, default=3600, help="Number of ticks to simulate")
    parser.add_argument('--seed', type=int, default=None, help="Random seed")
    parser.add_argument('--fps', type=int, default=60, help="Simulated frames per second")
    parser.add_argument('--no-challenges', action='store_true', help="Disable challenge tokens")
    parser.add_argument('--no-upgrades', action='store_true', help="Never buy upgrades")
    parser.add_argument('--log-level', default=None, help="TRACE, DEBUG, INFO, WARNING, ERROR or OFF")
    args = parser.parse_args(argv)

    if args.ticks < 0 or args.fps <= 0:
        parser.error("--ticks must be >= 0 and --fps must be > 0")
    if args.log_level:
        configure_logging(level=args.log_level)

    snapshot = run(
        ticks=args.ticks,
        seed=args.seed,
        fps=args.fps,
        challenges=not args.no_challenges,
        buy_upgrades=not args.no_upgrades,
    )

    print(f"Ticks:      {snapshot.tick}")
    print(f"Balance:    ${snapshot.balance}")
    print(f"Caught:     {snapshot.catch_count}")
    print(f"Capacity:   {snapshot.hook.capacity}")
    for upgrade in snapshot.upgrades:
        print(f"  {upgrade.name}: level {upgrade.level}, next ${upgrade.cost}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
