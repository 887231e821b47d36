"""Player entity and its horizontal controller.

The player slides left or right at a constant speed while a direction is
held and stops the moment it is released. Velocity is recomputed from the
input every tick, never accumulated.
"""

from models import CatcherConfig, Rectangle


class Player:
    """The catcher standing on the ground line.

    Position is the top-left corner. y never changes during play.
    """

    def __init__(self, config: CatcherConfig):
        """Initialize player centered on the ground line.

        Args:
            config: Engine configuration (sizes and bounds)
        """
        self._config = config
        self.width = float(config.player_size)
        self.height = float(config.player_size)
        self.speed = float(config.player_speed)
        self.x = config.player_start_x
        self.y = config.player_ground_y
        self.vx = 0.0

    @property
    def rect(self) -> Rectangle:
        """Full bounding box."""
        return Rectangle(x=self.x, y=self.y, width=self.width, height=self.height)

    @property
    def catch_zone(self) -> Rectangle:
        """Inset bounding box used for catching."""
        return self.rect.inset(self._config.hit_inset)

    def reset(self) -> None:
        """Re-center the player and stop it."""
        self.x = self._config.player_start_x
        self.y = self._config.player_ground_y
        self.vx = 0.0


class PlayerController:
    """Moves the player from the current input for one tick."""

    def __init__(self, config: CatcherConfig):
        self._min_x = config.player_min_x
        self._max_x = config.player_max_x

    def advance(self, player: Player, direction: int) -> None:
        """Apply one tick of movement.

        Args:
            player: Player to move
            direction: Net direction from InputState (-1, 0 or +1)
        """
        player.vx = direction * player.speed
        player.x = max(self._min_x, min(self._max_x, player.x + player.vx))
