"""
MiniRace - Configuration loader.

Loads settings from .env files in the game directory, with sensible
defaults. Create a .env.local file to override settings
without modifying .env. Real environment variables win over both.
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

GAME_DIR = Path(__file__).parent

# .env.local first so its values take precedence (load_dotenv never overrides)
load_dotenv(GAME_DIR / '.env.local')
load_dotenv(GAME_DIR / '.env')


def _get_bool(key: str, default: bool) -> bool:
    """Get boolean from environment."""
    val = os.getenv(key, str(default)).lower()
    return val in ('true', '1', 'yes', 'on')


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Display (windowed mode; fullscreen uses the desktop size)
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 540)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 960)
FULLSCREEN = _get_bool('FULLSCREEN', False)

# Loop timing
FRAME_DELAY_MS = _get_int('FRAME_DELAY_MS', 17)  # fixed delay, ~59 Hz

# Car
CAR_WIDTH = _get_float('CAR_WIDTH', 100.0)
CAR_HEIGHT = _get_float('CAR_HEIGHT', 200.0)
CAR_BOTTOM_MARGIN = _get_float('CAR_BOTTOM_MARGIN', 20.0)  # gap below the car

# Obstacles
SPAWN_INTERVAL_MS = _get_int('SPAWN_INTERVAL_MS', 1500)
OBSTACLE_HEIGHT = _get_float('OBSTACLE_HEIGHT', 200.0)
OBSTACLE_BASE_SPEED = _get_float('OBSTACLE_BASE_SPEED', 10.0)  # pixels per tick
OBSTACLE_SPEED_JITTER = _get_float('OBSTACLE_SPEED_JITTER', 10.0)

# Visual
BACKGROUND_COLOR = (68, 68, 68)  # Dark gray
DIVIDER_COLOR = (255, 255, 255)
DIVIDER_WIDTH = 10
CAR_COLOR = (0, 0, 255)
OBSTACLE_COLOR = (255, 0, 0)
GAME_OVER_COLOR = (255, 255, 0)
GAME_OVER_TEXT = "Game Over"
GAME_OVER_FONT_SIZE = 100


@dataclass
class RaceSettings:
    """Gameplay tunables handed to MiniRaceMode.

    Obstacles are as wide as the car. Speeds are in pixels per tick.
    """
    car_width: float = CAR_WIDTH
    car_height: float = CAR_HEIGHT
    car_bottom_margin: float = CAR_BOTTOM_MARGIN
    obstacle_height: float = OBSTACLE_HEIGHT
    spawn_interval_ms: int = SPAWN_INTERVAL_MS
    base_speed: float = OBSTACLE_BASE_SPEED
    speed_jitter: float = OBSTACLE_SPEED_JITTER

    @property
    def obstacle_width(self) -> float:
        return self.car_width


@dataclass
class RenderStyle:
    """Colours and text used by RaceRenderer."""
    background: Tuple[int, int, int] = BACKGROUND_COLOR
    divider: Tuple[int, int, int] = DIVIDER_COLOR
    divider_width: int = DIVIDER_WIDTH
    car: Tuple[int, int, int] = CAR_COLOR
    obstacle: Tuple[int, int, int] = OBSTACLE_COLOR
    game_over: Tuple[int, int, int] = GAME_OVER_COLOR
    game_over_text: str = GAME_OVER_TEXT
    game_over_font_size: int = GAME_OVER_FONT_SIZE
