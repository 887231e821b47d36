"""
Pygame Input - Maps keyboard, mouse and touch events onto InputState.

Keyboard: Left/A hold left, Right/D hold right, Space requests a restart.
Pointer (mouse or finger): a press on the left half of the surface holds
left only, on the right half holds right only; releasing clears both.
A tap while the game is over also requests a restart.
"""
from typing import Optional

import pygame

from games.CoffeeCatcher.input.input_state import InputState

LEFT_KEYS = (pygame.K_LEFT, pygame.K_a)
RIGHT_KEYS = (pygame.K_RIGHT, pygame.K_d)
RESTART_KEYS = (pygame.K_SPACE,)
MOUSE_EVENTS = (pygame.MOUSEBUTTONDOWN, pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP)


class PygameInputMapper:
    """Translates pygame events for one InputState.

    Only the resulting logical signals reach the engine; the mapper never
    touches engine state directly.
    """

    def __init__(self, input_state: InputState, surface_width: float):
        """Initialize the mapper.

        Args:
            input_state: State to write intent into
            surface_width: Width of the touch/click surface in pixels
        """
        self._input = input_state
        self._surface_width = float(surface_width)
        self._pointer_down = False

    def handle_event(self, event: pygame.event.Event, running: bool = True) -> bool:
        """Apply one pygame event.

        Args:
            event: Event from pygame.event.get()
            running: Whether the game is currently being played

        Returns:
            True if the event was consumed
        """
        if event.type == pygame.KEYDOWN:
            return self._on_key(event.key, True)
        if event.type == pygame.KEYUP:
            return self._on_key(event.key, False)

        # pygame 2 mirrors every finger event as a mouse event; handle touches once
        if event.type in MOUSE_EVENTS and getattr(event, 'touch', False):
            return False

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            return self._on_press(float(event.pos[0]), running)
        if event.type == pygame.MOUSEMOTION and self._pointer_down:
            self._split(float(event.pos[0]))
            return True
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            return self._on_release()

        if event.type == pygame.FINGERDOWN:
            return self._on_press(event.x * self._surface_width, running)
        if event.type == pygame.FINGERMOTION:
            self._split(event.x * self._surface_width)
            return True
        if event.type == pygame.FINGERUP:
            return self._on_release()

        return False

    def _on_key(self, key: int, pressed: bool) -> bool:
        if key in LEFT_KEYS:
            self._input.set_left(pressed)
            return True
        if key in RIGHT_KEYS:
            self._input.set_right(pressed)
            return True
        if key in RESTART_KEYS:
            if pressed:
                self._input.request_restart()
            return True
        return False

    def _on_press(self, x: float, running: bool) -> bool:
        self._pointer_down = True
        if not running:
            self._input.request_restart()
        self._split(x)
        return True

    def _on_release(self) -> bool:
        self._pointer_down = False
        self._input.release_all()
        return True

    def _split(self, x: float) -> None:
        """Hold exactly one direction depending on the screen half."""
        is_left = x < self._surface_width / 2
        self._input.set_left(is_left)
        self._input.set_right(not is_left)

    def resize(self, surface_width: Optional[float]) -> None:
        """Update the surface width after a window resize."""
        if surface_width:
            self._surface_width = float(surface_width)
