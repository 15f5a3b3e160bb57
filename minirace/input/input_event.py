"""
Input Event - a single press (mouse button or touch) on the playfield.

Uses a frozen dataclass so events can cross from the host thread safely.
"""
from dataclasses import dataclass

from models import Point2D


@dataclass(frozen=True)
class InputEvent:
    """Immutable input-down event from any source.

    Attributes:
        position: Where the press happened (screen coordinates)
        timestamp: When it happened (seconds, from monotonic clock)
    """
    position: Point2D
    timestamp: float

    def __post_init__(self):
        """Validate timestamp is non-negative."""
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')

    @property
    def x(self) -> float:
        return self.position.x

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"InputEvent(pos=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"t={self.timestamp:.3f})")
