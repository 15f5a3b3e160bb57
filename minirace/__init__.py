"""
MiniRace framework.

Provides:
- logging: per-module loggers configured from the environment
- game_state: standard GameState enum shared by game and host
- clock: monotonic millisecond clock used for spawn timing
- errors: non-fatal error kinds raised inside the game loop
- input: input events, sources and the input manager
"""

from minirace.game_state import GameState
from minirace.errors import MiniRaceError, ThrottleInterrupted
from minirace.clock import monotonic_ms

__all__ = [
    'GameState',
    'MiniRaceError',
    'ThrottleInterrupted',
    'monotonic_ms',
]
