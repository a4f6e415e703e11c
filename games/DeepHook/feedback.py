"""
Payout popups for DeepHook.

This module manages the floating "+$N" labels spawned when a cargo is
delivered. Popups drift upward, fade and expire on their own.

Classes:
    PopupManager: Spawns and ages the active popups
"""

import random
from typing import List, Optional

from models.deephook import Popup
from games.DeepHook.settings import SimulationSettings


def payout_text(value: int) -> str:
    """Label shown for a credited amount."""
    return f"+${value}"


class PopupManager:
    """Owns the active popups.

    Each popup is scattered slightly around its spawn point so several
    payouts delivered together do not stack on one spot.

    Attributes:
        popups: Active popups, oldest first

    Examples:
        >>> manager = PopupManager(SimulationSettings())
        >>> _ = manager.spawn(190.0, 280.0, 10)
        >>> manager.popups[0].text
        '+$10'
    """

    def __init__(self, settings: SimulationSettings, rng: Optional[random.Random] = None):
        self.settings = settings
        self._rng = rng if rng is not None else random.Random()
        self.popups: List[Popup] = []

    def spawn(self, x: float, y: float, value: int) -> Popup:
        """Add a payout popup near (x, y)."""
        s = self.settings
        popup = Popup(
            x=x + (self._rng.random() - 0.5) * s.popup_scatter_x,
            y=y + (self._rng.random() - 0.5) * s.popup_scatter_y,
            text=payout_text(value),
            vx=(self._rng.random() - 0.5) * 0.5,
            vy=-1.2 - self._rng.random() * 0.8,
            alpha=1.0,
            life=s.popup_life,
        )
        self.popups.append(popup)
        return popup

    def update(self) -> None:
        """Age every popup by one tick and drop the expired ones."""
        aged = (p.advance(self.settings.popup_alpha_decay) for p in self.popups)
        self.popups = [p for p in aged if p.is_alive]
