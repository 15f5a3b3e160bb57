"""
Renderer for MiniRace.

Paints a FrameSnapshot with pygame: background, lane divider, car,
obstacles and, after a crash, the game-over text.
"""

from typing import Optional

import pygame

from models import FrameSnapshot, Rectangle
from games.MiniRace.config import RenderStyle


def _to_pygame_rect(rect: Rectangle) -> pygame.Rect:
    return pygame.Rect(*(int(v) for v in rect.as_tuple()))


class RaceRenderer:
    """Draws frames onto any pygame surface."""

    def __init__(self, style: Optional[RenderStyle] = None):
        self._style = style if style is not None else RenderStyle()
        self._font: Optional[pygame.font.Font] = None

    @property
    def style(self) -> RenderStyle:
        return self._style

    def _get_font(self) -> pygame.font.Font:
        """Get or create the game-over font."""
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, self._style.game_over_font_size)
        return self._font

    def draw(self, canvas: pygame.Surface, snapshot: FrameSnapshot) -> None:
        """
        Render one frame.

        Args:
            canvas: Surface to draw on
            snapshot: Frame contents
        """
        style = self._style

        canvas.fill(style.background)

        divider_x = int(snapshot.divider_x)
        pygame.draw.line(
            canvas, style.divider,
            (divider_x, 0), (divider_x, snapshot.screen_height),
            style.divider_width,
        )

        pygame.draw.rect(canvas, style.car, _to_pygame_rect(snapshot.car_rect))

        for rect in snapshot.obstacle_rects:
            pygame.draw.rect(canvas, style.obstacle, _to_pygame_rect(rect))

        if snapshot.is_game_over:
            self._render_game_over(canvas, snapshot)

    def _render_game_over(self, canvas: pygame.Surface, snapshot: FrameSnapshot) -> None:
        """Text baseline sits at mid-height, starting a quarter of the way across."""
        font = self._get_font()
        text = font.render(self._style.game_over_text, True, self._style.game_over)
        x = snapshot.screen_width // 4
        y = snapshot.screen_height // 2 - font.get_ascent()
        canvas.blit(text, (x, y))
