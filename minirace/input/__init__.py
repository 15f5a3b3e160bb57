"""
Input abstraction layer for MiniRace.

Turns host events (mouse clicks, touch presses) into InputEvents the
host shell forwards to the game as input-down x coordinates.
"""

from minirace.input.input_event import InputEvent
from minirace.input.input_manager import InputManager

__all__ = ['InputEvent', 'InputManager']
