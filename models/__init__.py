"""
Unified models library for the DeepHook project.

This package provides all Pydantic data models used across the system:
- Primitives: Basic geometric types (Point2D, Rectangle)
- DeepHook: Game-specific models (archetypes, snapshot views, decks)

Usage:
    >>> from models import Point2D, Rectangle
    >>> from models.deephook import HookState, WorldSnapshot
"""

# ============================================================================
# Primitives (basic types used everywhere)
# ============================================================================
from .primitives import (
    Point2D,
    Rectangle,
)

# ============================================================================
# DeepHook models (re-exported for convenience)
# ============================================================================
from .deephook import (
    HookState,
    ChallengeState,
    FishArchetype,
    RarityTable,
    UpgradeConfig,
    Popup,
    PayoutEvent,
    WorldSnapshot,
    TriviaQuestion,
    ChallengeDeck,
)

__all__ = [
    # Primitives
    "Point2D",
    "Rectangle",
    # DeepHook
    "HookState",
    "ChallengeState",
    "FishArchetype",
    "RarityTable",
    "UpgradeConfig",
    "Popup",
    "PayoutEvent",
    "WorldSnapshot",
    "TriviaQuestion",
    "ChallengeDeck",
]
