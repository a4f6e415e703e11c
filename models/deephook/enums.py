"""
DeepHook-specific enumerations.

These enums define the lifecycle states of the hook and the challenge gate.
"""

from enum import Enum


class HookState(str, Enum):
    """States of the hook cycle.

    A single state value makes "dropping and retracting at once"
    unrepresentable.

    Attributes:
        IDLE: Resting at the anchor, bobbing with the surface character
        DROPPING: Descending at fixed speed toward the target depth
        RETRACTING: Ascending toward the anchor, steerable
    """
    IDLE = "idle"
    DROPPING = "dropping"
    RETRACTING = "retracting"

    @property
    def is_active(self) -> bool:
        """True while the hook is away from the anchor."""
        return self is not HookState.IDLE


class ChallengeState(str, Enum):
    """States of the trivia gate opened by a caught challenge token.

    Attributes:
        CLOSED: No challenge; the simulation runs normally
        OPEN: A question is presented; the simulation is paused
        RESOLVED: The result is shown for a fixed time; still paused
    """
    CLOSED = "closed"
    OPEN = "open"
    RESOLVED = "resolved"

    @property
    def pauses_simulation(self) -> bool:
        """True while the gate holds every other subsystem still."""
        return self is not ChallengeState.CLOSED
