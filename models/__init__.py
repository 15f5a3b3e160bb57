"""
Data models for MiniRace.

- Primitives: Point2D, Rectangle
- Race: FrameSnapshot handed from the game loop to the renderer

Usage:
    >>> from models import Rectangle, FrameSnapshot
"""

from .primitives import (
    Point2D,
    Rectangle,
)

from .race import (
    FrameSnapshot,
)

__all__ = [
    'Point2D',
    'Rectangle',
    'FrameSnapshot',
]
