"""Standard game states shared by the game mode, loop and host shell."""

from enum import Enum


class GameState(str, Enum):
    """States a MiniRace game can be in.

    Attributes:
        PLAYING: Obstacles fall and the car can switch lanes
        GAME_OVER: Frame is frozen; the next input restarts the game
    """
    PLAYING = "playing"
    GAME_OVER = "game_over"
