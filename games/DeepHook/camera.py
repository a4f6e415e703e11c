"""
DeepHook - Vertical camera that follows the hook.
"""
from games.DeepHook.settings import SimulationSettings


class Camera:
    """Keeps the hook vertically centered, clamped to the world.

    No smoothing: the offset snaps to the clamped target each update.
    """

    def __init__(self, settings: SimulationSettings):
        self.viewport_height = settings.viewport_height
        self.center_ratio = settings.camera_center_ratio
        self.max_offset = max(0.0, settings.world_height - settings.viewport_height)
        self.offset = 0.0

    def update(self, hook_y: float) -> float:
        """Recenter on the hook and return the new offset."""
        target = hook_y - self.viewport_height * self.center_ratio
        self.offset = max(0.0, min(self.max_offset, target))
        return self.offset
