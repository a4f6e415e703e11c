"""
Wallet, payouts and upgrades for DeepHook.

The wallet only changes through three doors: catch payouts, upgrade
purchases and challenge rewards. Upgrade prices follow

    cost(level) = floor(base_cost * growth_rate ** level)

Examples:
    >>> economy = Economy(SimulationSettings())
    >>> economy.cost('bucket_size')
    100
    >>> economy.purchase('bucket_size')
    False
    >>> economy.wallet.credit(100)
    100
    >>> economy.purchase('bucket_size')
    True
    >>> economy.capacity
    5
"""
from dataclasses import dataclass
from typing import Dict, List, Optional

from deephook.logging import get_logger
from models.deephook import PayoutEvent, UpgradeConfig, UpgradeView
from games.DeepHook.entities import Fish
from games.DeepHook.settings import SimulationSettings

log = get_logger('economy')


class Wallet:
    """Non-negative integer balance."""

    def __init__(self, balance: int = 0):
        if balance < 0:
            raise ValueError(f"Balance must be non-negative, got {balance}")
        self._balance = balance

    @property
    def balance(self) -> int:
        return self._balance

    def credit(self, amount: int) -> int:
        """Add funds and return the new balance."""
        if amount < 0:
            raise ValueError(f"Credit must be non-negative, got {amount}")
        self._balance += amount
        return self._balance

    def debit(self, amount: int) -> bool:
        """Remove funds if the balance covers them.

        Returns:
            True if debited, False (unchanged) if insufficient
        """
        if amount < 0 or amount > self._balance:
            return False
        self._balance -= amount
        return True

    def __repr__(self) -> str:
        return f"Wallet(balance={self._balance})"


@dataclass
class UpgradeState:
    """Purchased level of one upgrade."""
    config: UpgradeConfig
    level: int = 0

    @property
    def cost(self) -> int:
        return self.config.cost_at(self.level)


class Economy:
    """Wallet, catch counter and upgrade levels of one simulation."""

    def __init__(self, settings: SimulationSettings, wallet: Optional[Wallet] = None):
        self.settings = settings
        self.wallet = wallet if wallet is not None else Wallet()
        self.catch_count = 0
        self.upgrades: Dict[str, UpgradeState] = {
            upgrade_id: UpgradeState(config=upgrade)
            for upgrade_id, upgrade in settings.upgrades.items()
        }

    @property
    def balance(self) -> int:
        return self.wallet.balance

    @property
    def capacity(self) -> int:
        """Hook capacity derived from the capacity upgrade level."""
        return self.settings.base_capacity + self.upgrades[self.settings.capacity_upgrade].level

    def level(self, upgrade_id: str) -> Optional[int]:
        state = self.upgrades.get(upgrade_id)
        return state.level if state is not None else None

    def cost(self, upgrade_id: str) -> Optional[int]:
        """Price of the next level, or None for unknown upgrades."""
        state = self.upgrades.get(upgrade_id)
        return state.cost if state is not None else None

    def can_afford(self, upgrade_id: str) -> bool:
        cost = self.cost(upgrade_id)
        return cost is not None and self.wallet.balance >= cost

    def purchase(self, upgrade_id: str) -> bool:
        """Buy the next level of an upgrade.

        Returns:
            True on success; False for unknown ids or insufficient
            funds, in which case nothing changes
        """
        state = self.upgrades.get(upgrade_id)
        if state is None:
            log.warning("Unknown upgrade '%s'", upgrade_id)
            return False

        cost = state.cost
        if not self.wallet.debit(cost):
            log.debug("Cannot afford %s: cost %d, balance %d", upgrade_id, cost, self.wallet.balance)
            return False

        state.level += 1
        log.info("Bought %s level %d for %d (balance %d)",
                 upgrade_id, state.level, cost, self.wallet.balance)
        return True

    def payout(self, fish: Fish) -> PayoutEvent:
        """Credit one delivered fish at its fixed archetype value."""
        balance = self.wallet.credit(fish.value)
        self.catch_count += 1
        return PayoutEvent(archetype_id=fish.archetype_id, value=fish.value, balance_after=balance)

    def payout_all(self, cargo: List[Fish]) -> List[PayoutEvent]:
        """Credit a whole cargo in order."""
        return [self.payout(fish) for fish in cargo]

    def views(self) -> List[UpgradeView]:
        return [
            UpgradeView(
                upgrade_id=upgrade_id,
                name=state.config.name,
                level=state.level,
                cost=state.cost,
                affordable=self.wallet.balance >= state.cost,
            )
            for upgrade_id, state in self.upgrades.items()
        ]
