"""
DeepHook - Pendulum sway of the cargo during the ascent.

Each caught fish is a damped spring chasing a target angle set by how fast
the hook is moving sideways:

    target   = clamp(-dx * response, -max_angle, max_angle)
    ang_vel += (target - angle) * spring
    ang_vel *= damping
    angle   += ang_vel
"""
from typing import Iterable

from games.DeepHook.entities import Fish
from games.DeepHook.settings import SimulationSettings


def target_angle(dx: float, settings: SimulationSettings) -> float:
    """Sway angle the cargo leans toward for a lateral displacement."""
    limit = settings.swing_max_angle
    return max(-limit, min(limit, -dx * settings.swing_response))


def apply_swing(cargo: Iterable[Fish], dx: float, settings: SimulationSettings) -> float:
    """Advance the swing of every cargo entry by one tick.

    Args:
        cargo: Caught fish, updated in place
        dx: Hook horizontal displacement this tick
        settings: Spring, damping and response constants

    Returns:
        The target angle used this tick
    """
    target = target_angle(dx, settings)
    for fish in cargo:
        fish.ang_vel += (target - fish.angle) * settings.swing_spring
        fish.ang_vel *= settings.swing_damping
        fish.angle += fish.ang_vel
    return target
