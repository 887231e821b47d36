"""
Pydantic v2 model for the Coffee Catcher engine configuration.

All values are supplied once, at engine construction. A configuration that
would let the simulation reach an undefined state (no room for the player,
an empty spawn range, a zero spawn floor...) is rejected here, so the engine
itself never has to re-check it.
"""

import math
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives.

    Python's round() rounds halves to even; sizes derived from the arena
    width are defined with the half-up rule instead.
    """
    return int(math.floor(value + 0.5))


class CatcherConfig(BaseModel):
    """
    Arena geometry, pacing and difficulty settings for one engine.

    Sizes are in logical pixels, times in ticks. Player and item sizes are
    derived from the arena width via the ``*_ratio`` fields.
    """
    model_config = ConfigDict(frozen=True)

    # Arena
    arena_width: float = Field(default=480.0, gt=0.0, description="Logical arena width")
    arena_height: float = Field(default=800.0, gt=0.0, description="Logical arena height")

    # Player
    player_size_ratio: float = Field(
        default=0.26, gt=0.0, lt=1.0,
        description="Player width/height as a fraction of arena width",
    )
    player_speed_ratio: float = Field(
        default=0.018, gt=0.0, lt=1.0,
        description="Horizontal speed per tick as a fraction of arena width",
    )
    player_min_speed: float = Field(default=7.0, ge=0.0, description="Lower bound on player speed")
    ground_margin: float = Field(default=12.0, ge=0.0)
    horizontal_margin: float = Field(default=20.0, ge=0.0)
    hit_inset_ratio: float = Field(
        default=0.2, ge=0.0, lt=1.0,
        description="Catch zone inset as a fraction of player size",
    )

    # Falling items
    item_size_ratio: float = Field(default=0.12, gt=0.0, lt=1.0)
    fall_speed_min: float = Field(default=3.0, gt=0.0)
    fall_speed_max: float = Field(default=5.0, gt=0.0)
    score_speed_bias: float = Field(
        default=0.02, ge=0.0,
        description="Extra fall speed per point of score at spawn time",
    )
    miss_tolerance: float = Field(default=50.0, ge=0.0)

    # Rules
    miss_limit: int = Field(default=3, ge=1)

    # Spawning and difficulty
    initial_spawn_interval: int = Field(default=60, gt=0)
    initial_spawn_countdown: int = Field(
        default=0, ge=0,
        description="Ticks before the first spawn (0 = spawn on the first tick)",
    )
    spawn_interval_floor: int = Field(default=28, gt=0)
    difficulty_step_ticks: int = Field(default=600, gt=0)
    difficulty_step_amount: int = Field(default=4, gt=0)

    # Determinism
    seed: Optional[int] = Field(default=None, description="RNG seed, None = system entropy")

    @computed_field
    @property
    def player_size(self) -> int:
        """Player width and height in pixels."""
        return round_half_up(self.arena_width * self.player_size_ratio)

    @computed_field
    @property
    def player_speed(self) -> float:
        """Player horizontal speed in pixels per tick."""
        return max(self.player_min_speed,
                   round_half_up(self.arena_width * self.player_speed_ratio))

    @computed_field
    @property
    def hit_inset(self) -> int:
        """Total catch zone inset per dimension, in pixels."""
        return round_half_up(self.player_size * self.hit_inset_ratio)

    @computed_field
    @property
    def item_size(self) -> int:
        """Falling item width and height in pixels."""
        return round_half_up(self.arena_width * self.item_size_ratio)

    @property
    def player_min_x(self) -> float:
        """Leftmost allowed player x."""
        return self.horizontal_margin

    @property
    def player_max_x(self) -> float:
        """Rightmost allowed player x."""
        return self.arena_width - self.player_size - self.horizontal_margin

    @property
    def player_start_x(self) -> float:
        """Player x at the start of every game (centered)."""
        return (self.arena_width - self.player_size) / 2

    @property
    def player_ground_y(self) -> float:
        """Player y, fixed for the whole game."""
        return self.arena_height - self.player_size - self.ground_margin

    @property
    def item_min_x(self) -> float:
        """Lowest x an item may spawn at."""
        return self.horizontal_margin

    @property
    def item_max_x(self) -> float:
        """Highest x an item may spawn at."""
        return self.arena_width - self.horizontal_margin - self.item_size

    @property
    def miss_line(self) -> float:
        """An item whose y passes this line is a miss."""
        return self.arena_height + self.miss_tolerance

    @model_validator(mode='after')
    def validate_geometry_and_pacing(self) -> 'CatcherConfig':
        """Reject configurations the simulation cannot run."""
        if self.fall_speed_min > self.fall_speed_max:
            raise ValueError(
                f"fall_speed_min ({self.fall_speed_min}) must not exceed "
                f"fall_speed_max ({self.fall_speed_max})"
            )
        if self.initial_spawn_interval < self.spawn_interval_floor:
            raise ValueError(
                f"initial_spawn_interval ({self.initial_spawn_interval}) must be at least "
                f"spawn_interval_floor ({self.spawn_interval_floor})"
            )
        if self.player_size <= 0 or self.item_size <= 0:
            raise ValueError("arena_width is too small for the configured size ratios")
        if self.hit_inset >= self.player_size:
            raise ValueError("hit_inset_ratio leaves no catch zone inside the player")
        if self.player_max_x < self.player_min_x:
            raise ValueError(
                f"arena_width {self.arena_width} cannot hold a {self.player_size}px player "
                f"between {self.horizontal_margin}px margins"
            )
        if self.item_max_x < self.item_min_x:
            raise ValueError(
                f"arena_width {self.arena_width} cannot hold a {self.item_size}px item "
                f"between {self.horizontal_margin}px margins"
            )
        if self.player_ground_y < 0:
            raise ValueError(
                f"arena_height {self.arena_height} is too short for a {self.player_size}px "
                f"player above a {self.ground_margin}px ground margin"
            )
        return self
