"""Score, misses and the PLAYING/GAME_OVER state machine."""

from catcher.game_state import GameState
from catcher.logging import get_logger

log = get_logger('state_machine')


class GameStateMachine:
    """Owns score, misses and the running flag.

    Transitions:
        PLAYING -> GAME_OVER: check_miss_limit() once misses reach the limit
        GAME_OVER -> PLAYING: reset(), driven by an explicit restart
    """

    def __init__(self, miss_limit: int = 3):
        self.miss_limit = miss_limit
        self.score = 0
        self.misses = 0
        self._state = GameState.PLAYING

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def running(self) -> bool:
        return self._state == GameState.PLAYING

    def record_catch(self) -> None:
        """Count a caught item."""
        if self.running:
            self.score += 1

    def record_miss(self) -> None:
        """Count an item that fell past the miss line."""
        if self.running:
            self.misses += 1

    def check_miss_limit(self) -> bool:
        """End the game if the miss limit has been reached.

        Returns:
            True if this call moved the game to GAME_OVER
        """
        if self.running and self.misses >= self.miss_limit:
            self._state = GameState.GAME_OVER
            log.info("game over: score=%d misses=%d", self.score, self.misses)
            return True
        return False

    def reset(self) -> None:
        """Back to a fresh PLAYING state."""
        self.score = 0
        self.misses = 0
        self._state = GameState.PLAYING
