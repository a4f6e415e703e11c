"""
DeepHook - Hook-versus-entity collision and catch resolution.
"""
from dataclasses import dataclass, field
from typing import List, Optional

from deephook.logging import get_logger
from models.deephook import HookState
from games.DeepHook.entities import ChallengeToken, Fish, WorldEntities
from games.DeepHook.hook import Hook

log = get_logger('collision')


@dataclass
class CollisionResult:
    """What the hook caught during one collision pass."""
    caught: List[Fish] = field(default_factory=list)
    token: Optional[ChallengeToken] = None

    @property
    def opened_challenge(self) -> bool:
        return self.token is not None


class CollisionSystem:
    """Tests the hook's catch box against every free entity.

    Fish are catchable while the hook is out, has room and the capture
    grace period is over. Tokens are catchable only while retracting and
    while no challenge is already open; a token never enters the cargo.
    """

    def check(self, hook: Hook, world: WorldEntities, tokens_catchable: bool = True) -> CollisionResult:
        """Resolve this tick's catches and transfer them out of the world.

        Args:
            hook: The hook (receives caught fish)
            world: Free-swimming entities (caught ones are removed)
            tokens_catchable: False while a challenge is in progress or
                when no challenge gate is configured

        Returns:
            CollisionResult with fish caught in capture order and the
            token caught, if any
        """
        result = CollisionResult()
        box = hook.catch_box

        if self._can_catch_fish(hook):
            for fish in world.fish:
                if hook.is_full:
                    break
                if box.overlaps(fish.bounds) and hook.attach(fish):
                    result.caught.append(fish)
            world.remove_fish(result.caught)

        if hook.state is HookState.RETRACTING and tokens_catchable:
            for token in world.tokens:
                if box.overlaps(token.bounds):
                    result.token = token
                    break
            if result.token is not None:
                world.remove_token(result.token)
                log.info("Challenge token caught at y=%.0f", hook.y)

        if result.caught:
            log.debug("Caught %s (cargo %d/%d)",
                      [f.archetype_id for f in result.caught], len(hook.cargo), hook.capacity)
        return result

    @staticmethod
    def _can_catch_fish(hook: Hook) -> bool:
        return hook.state.is_active and hook.capture_enabled and not hook.is_full
