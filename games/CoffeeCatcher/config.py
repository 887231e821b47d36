"""
Coffee Catcher - Configuration defaults.

Every gameplay value can be overridden from the environment or from a
.env file next to this module. default_config() turns them into a
validated CatcherConfig for the engine.
"""
import os
from pathlib import Path
from typing import Any, Optional, Tuple

from dotenv import load_dotenv

from models import CatcherConfig

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


def _get_optional_int(key: str) -> Optional[int]:
    """Get integer from environment, None when unset or empty."""
    val = os.getenv(key, '')
    return int(val) if val.strip() else None


# Arena
ARENA_WIDTH = _get_float('ARENA_WIDTH', 480.0)
ARENA_HEIGHT = _get_float('ARENA_HEIGHT', 800.0)

# Player
PLAYER_SIZE_RATIO = _get_float('PLAYER_SIZE_RATIO', 0.26)
PLAYER_SPEED_RATIO = _get_float('PLAYER_SPEED_RATIO', 0.018)
PLAYER_MIN_SPEED = _get_float('PLAYER_MIN_SPEED', 7.0)
GROUND_MARGIN = _get_float('GROUND_MARGIN', 12.0)
HORIZONTAL_MARGIN = _get_float('HORIZONTAL_MARGIN', 20.0)
HIT_INSET_RATIO = _get_float('HIT_INSET_RATIO', 0.2)

# Falling items
ITEM_SIZE_RATIO = _get_float('ITEM_SIZE_RATIO', 0.12)
FALL_SPEED_MIN = _get_float('FALL_SPEED_MIN', 3.0)
FALL_SPEED_MAX = _get_float('FALL_SPEED_MAX', 5.0)
SCORE_SPEED_BIAS = _get_float('SCORE_SPEED_BIAS', 0.02)
MISS_TOLERANCE = _get_float('MISS_TOLERANCE', 50.0)

# Game rules
MISS_LIMIT = _get_int('MISS_LIMIT', 3)

# Spawning and difficulty ramp (ticks)
INITIAL_SPAWN_INTERVAL = _get_int('INITIAL_SPAWN_INTERVAL', 60)
INITIAL_SPAWN_COUNTDOWN = _get_int('INITIAL_SPAWN_COUNTDOWN', 0)
SPAWN_INTERVAL_FLOOR = _get_int('SPAWN_INTERVAL_FLOOR', 28)
DIFFICULTY_STEP_TICKS = _get_int('DIFFICULTY_STEP_TICKS', 600)
DIFFICULTY_STEP_AMOUNT = _get_int('DIFFICULTY_STEP_AMOUNT', 4)

# Determinism
SEED = _get_optional_int('CATCHER_SEED')

# Front end
FPS = _get_int('FPS', 60)
ASSETS_DIR = Path(os.getenv('ASSETS_DIR', str(Path(__file__).parent / 'assets')))

# Fallback colours when image assets are missing
BACKGROUND_COLOR: Tuple[int, int, int] = (42, 42, 42)
PLAYER_COLOR: Tuple[int, int, int] = (255, 224, 138)
ITEM_COLOR: Tuple[int, int, int] = (139, 94, 60)
SHADOW_COLOR: Tuple[int, int, int, int] = (0, 0, 0, 72)
HUD_COLOR: Tuple[int, int, int] = (255, 255, 255)
OVERLAY_COLOR: Tuple[int, int, int, int] = (0, 0, 0, 153)


def default_config(**overrides: Any) -> CatcherConfig:
    """Build a CatcherConfig from the module defaults.

    Args:
        **overrides: CatcherConfig field values that replace the defaults

    Returns:
        Validated configuration

    Raises:
        pydantic.ValidationError: If the resulting configuration is invalid
    """
    values = dict(
        arena_width=ARENA_WIDTH,
        arena_height=ARENA_HEIGHT,
        player_size_ratio=PLAYER_SIZE_RATIO,
        player_speed_ratio=PLAYER_SPEED_RATIO,
        player_min_speed=PLAYER_MIN_SPEED,
        ground_margin=GROUND_MARGIN,
        horizontal_margin=HORIZONTAL_MARGIN,
        hit_inset_ratio=HIT_INSET_RATIO,
        item_size_ratio=ITEM_SIZE_RATIO,
        fall_speed_min=FALL_SPEED_MIN,
        fall_speed_max=FALL_SPEED_MAX,
        score_speed_bias=SCORE_SPEED_BIAS,
        miss_tolerance=MISS_TOLERANCE,
        miss_limit=MISS_LIMIT,
        initial_spawn_interval=INITIAL_SPAWN_INTERVAL,
        initial_spawn_countdown=INITIAL_SPAWN_COUNTDOWN,
        spawn_interval_floor=SPAWN_INTERVAL_FLOOR,
        difficulty_step_ticks=DIFFICULTY_STEP_TICKS,
        difficulty_step_amount=DIFFICULTY_STEP_AMOUNT,
        seed=SEED,
    )
    values.update(overrides)
    return CatcherConfig(**values)
