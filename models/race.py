"""
MiniRace frame models.

A FrameSnapshot is everything the renderer needs to paint one frame. It is
built under the game's state lock and then handed across to the drawing
code, so it must never share mutable state with the game.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field

from models.primitives import Rectangle


class FrameSnapshot(BaseModel):
    """Immutable per-frame view of the game.

    Attributes:
        screen_width: Playfield width in pixels
        screen_height: Playfield height in pixels
        car_rect: The player's car
        obstacle_rects: Every live obstacle, in spawn order
        is_game_over: Whether the game-over overlay should be drawn

    Examples:
        >>> snap = FrameSnapshot(
        ...     screen_width=1000, screen_height=2000,
        ...     car_rect=Rectangle(x=200.0, y=1780.0, width=100.0, height=200.0),
        ... )
        >>> snap.divider_x
        500.0
    """
    screen_width: int = Field(..., ge=0)
    screen_height: int = Field(..., ge=0)
    car_rect: Rectangle
    obstacle_rects: Tuple[Rectangle, ...] = ()
    is_game_over: bool = False

    @computed_field
    @property
    def divider_x(self) -> float:
        """X coordinate of the vertical lane divider (mid-screen)."""
        return self.screen_width / 2

    model_config = ConfigDict(frozen=True)
