"""
DeepHook - Configuration loader.

All tunables read from the environment (optionally a .env file next to
this module) with the default arcade balance. Distances
are pixels, speeds are pixels per tick, times are seconds.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Viewport
VIEWPORT_WIDTH = _get_int('VIEWPORT_WIDTH', 480)
VIEWPORT_HEIGHT = _get_int('VIEWPORT_HEIGHT', 800)

# World (1 m = 6 px, 500 m below the surface)
WATER_LEVEL_RATIO = _get_float('WATER_LEVEL_RATIO', 0.35)
METERS_TO_PIXELS = _get_float('METERS_TO_PIXELS', 6.0)
MAX_DEPTH_METERS = _get_float('MAX_DEPTH_METERS', 500.0)

# Surface character (the hook hangs from its rod)
SURFACE_X = _get_float('SURFACE_X', 50.0)
SURFACE_HEIGHT = _get_float('SURFACE_HEIGHT', 140.0)
SURFACE_FLOAT_OFFSET = _get_float('SURFACE_FLOAT_OFFSET', 20.0)
SURFACE_BOB_STEP = _get_float('SURFACE_BOB_STEP', 0.02)  # radians per tick
SURFACE_BOB_AMPLITUDE = _get_float('SURFACE_BOB_AMPLITUDE', 3.0)
HOOK_OFFSET_X = _get_float('HOOK_OFFSET_X', 140.0)
HOOK_OFFSET_Y = _get_float('HOOK_OFFSET_Y', 120.0)

# Hook motion
DROP_SPEED = _get_float('DROP_SPEED', 42.0)
RETRACT_SPEED = _get_float('RETRACT_SPEED', 4.0)
RETRACT_SPEED_FULL = _get_float('RETRACT_SPEED_FULL', 20.0)
STEER_SPEED = _get_float('STEER_SPEED', 3.2)
HOOK_EDGE_MARGIN = _get_float('HOOK_EDGE_MARGIN', 10.0)
HOOK_BOX_SIZE = _get_float('HOOK_BOX_SIZE', 10.0)
DESCENT_GRACE = _get_bool('DESCENT_GRACE', True)

# Capacity
BASE_CAPACITY = _get_int('BASE_CAPACITY', 4)

# Spawning
SPAWN_INTERVAL = _get_float('SPAWN_INTERVAL', 0.6)
INITIAL_FISH = _get_int('INITIAL_FISH', 20)
SPAWN_BASE_MIN = _get_int('SPAWN_BASE_MIN', 2)
SPAWN_BASE_MAX = _get_int('SPAWN_BASE_MAX', 4)
SPAWN_ACTIVE_MIN = _get_int('SPAWN_ACTIVE_MIN', 4)
SPAWN_ACTIVE_MAX = _get_int('SPAWN_ACTIVE_MAX', 8)
SPAWN_FLOOR = _get_int('SPAWN_FLOOR', 20)
SPAWN_FLOOR_BONUS = _get_int('SPAWN_FLOOR_BONUS', 3)
SPAWN_EDGE_OFFSET = _get_float('SPAWN_EDGE_OFFSET', 50.0)
SPAWN_DEPTH_PADDING = _get_float('SPAWN_DEPTH_PADDING', 20.0)

# Free-swimming motion
FISH_BOB_TICK_FREQ = _get_float('FISH_BOB_TICK_FREQ', 0.02)
FISH_BOB_X_FREQ = _get_float('FISH_BOB_X_FREQ', 0.01)
FISH_BOB_AMPLITUDE = _get_float('FISH_BOB_AMPLITUDE', 0.3)
FISH_BAND_TOP = _get_float('FISH_BAND_TOP', 10.0)         # below the surface
FISH_BAND_BOTTOM = _get_float('FISH_BAND_BOTTOM', 100.0)  # below the floor
DESPAWN_MARGIN = _get_float('DESPAWN_MARGIN', 100.0)

# Swing
SWING_RESPONSE = _get_float('SWING_RESPONSE', 0.15)
SWING_MAX_ANGLE = _get_float('SWING_MAX_ANGLE', 1.2)  # radians
SWING_SPRING = _get_float('SWING_SPRING', 0.25)
SWING_DAMPING = _get_float('SWING_DAMPING', 0.85)

# Camera
CAMERA_CENTER_RATIO = _get_float('CAMERA_CENTER_RATIO', 0.5)

# Popups
POPUP_LIFE = _get_int('POPUP_LIFE', 90)
POPUP_ALPHA_DECAY = _get_float('POPUP_ALPHA_DECAY', 1.0 / 60.0)
POPUP_SCATTER_X = _get_float('POPUP_SCATTER_X', 18.0)
POPUP_SCATTER_Y = _get_float('POPUP_SCATTER_Y', 12.0)

# Economy
BUCKET_BASE_COST = _get_int('BUCKET_BASE_COST', 100)
BUCKET_GROWTH_RATE = _get_float('BUCKET_GROWTH_RATE', 1.3)

# Challenge tokens
CHALLENGES_ENABLED = _get_bool('CHALLENGES_ENABLED', True)
CHALLENGE_DECK = os.getenv('CHALLENGE_DECK', 'ocean_facts')
CHALLENGE_TOKENS_PER_DROP = _get_int('CHALLENGE_TOKENS_PER_DROP', 1)
CHALLENGE_SPAWN_CHANCE = _get_float('CHALLENGE_SPAWN_CHANCE', 0.35)
CHALLENGE_DEPTH_BIAS = _get_float('CHALLENGE_DEPTH_BIAS', 0.6)
CHALLENGE_TOKEN_SIZE = _get_float('CHALLENGE_TOKEN_SIZE', 36.0)
CHALLENGE_TOKEN_SPEED_MIN = _get_float('CHALLENGE_TOKEN_SPEED_MIN', 0.6)
CHALLENGE_TOKEN_SPEED_MAX = _get_float('CHALLENGE_TOKEN_SPEED_MAX', 1.2)
CHALLENGE_BOB_TICK_FREQ = _get_float('CHALLENGE_BOB_TICK_FREQ', 0.05)
CHALLENGE_BOB_X_FREQ = _get_float('CHALLENGE_BOB_X_FREQ', 0.02)
CHALLENGE_BOB_AMPLITUDE = _get_float('CHALLENGE_BOB_AMPLITUDE', 0.5)
CHALLENGE_REWARD = _get_int('CHALLENGE_REWARD', 50)
CHALLENGE_RESULT_SECONDS = _get_float('CHALLENGE_RESULT_SECONDS', 2.0)
