"""Coffee Catcher - catch the falling coffee beans before three slip past."""

from .engine import SimulationEngine
from .snapshot import FrameSnapshot
from .input.input_state import Direction, InputState

__all__ = [
    'SimulationEngine',
    'FrameSnapshot',
    'Direction',
    'InputState',
]
