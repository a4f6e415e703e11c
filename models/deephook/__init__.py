"""
DeepHook-specific models package.

This package contains all data models specific to the DeepHook simulation,
including enums, catalogue/feedback structures, snapshot views and
challenge deck configuration models.
"""

from .enums import (
    HookState,
    ChallengeState,
)

from .models import (
    RARITY_TOLERANCE,
    FishArchetype,
    RarityTable,
    UpgradeConfig,
    Popup,
    PayoutEvent,
    HookView,
    FishView,
    TokenView,
    UpgradeView,
    ChallengeView,
    WorldSnapshot,
)

from .challenge_config import (
    TriviaQuestion,
    ChallengeDeck,
)

__all__ = [
    # Enums
    "HookState",
    "ChallengeState",
    # Catalogue and feedback models
    "RARITY_TOLERANCE",
    "FishArchetype",
    "RarityTable",
    "UpgradeConfig",
    "Popup",
    "PayoutEvent",
    # Snapshot views
    "HookView",
    "FishView",
    "TokenView",
    "UpgradeView",
    "ChallengeView",
    "WorldSnapshot",
    # Configuration models
    "TriviaQuestion",
    "ChallengeDeck",
]
