"""Coffee Catcher input handling."""

from games.CoffeeCatcher.input.input_state import Direction, InputState

__all__ = ['Direction', 'InputState']
