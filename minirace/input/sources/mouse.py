"""
Mouse Input Source - mouse clicks and touch presses via pygame.
"""
import time
from typing import List, Tuple

import pygame

from models import Point2D
from minirace.input.input_event import InputEvent
from minirace.input.sources.base import InputSource


class MouseInputSource(InputSource):
    """Pointer input source for desktop and touch screens.

    Converts left-button MOUSEBUTTONDOWN and FINGERDOWN events into
    InputEvents. Finger coordinates arrive normalised to [0, 1] and are
    scaled by the window size. Every other event is re-posted to the
    pygame event queue for the host loop.
    """

    def __init__(self, window_size: Tuple[int, int] = (0, 0)):
        self._event_queue: List[InputEvent] = []
        self._window_size = window_size

    def set_window_size(self, width: int, height: int) -> None:
        """Window size used to scale normalised touch coordinates."""
        self._window_size = (width, height)

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events and collect presses."""
        passthrough = []
        for event in pygame.event.get():
            if event.type == pygame.MOUSEBUTTONDOWN:
                # Touch presses also arrive as emulated mouse clicks
                if event.button == 1 and not getattr(event, 'touch', False):
                    pos_x, pos_y = event.pos
                    self._push(float(pos_x), float(pos_y))
            elif event.type == pygame.FINGERDOWN:
                width, height = self._window_size
                self._push(event.x * width, event.y * height)
            elif event.type not in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONUP,
                                    pygame.FINGERMOTION, pygame.FINGERUP):
                passthrough.append(event)

        # Re-post non-pointer events for the main loop to handle
        for event in passthrough:
            pygame.event.post(event)

    def _push(self, x: float, y: float) -> None:
        self._event_queue.append(InputEvent(
            position=Point2D(x=x, y=y),
            timestamp=time.monotonic(),
        ))

    def clear(self) -> None:
        """Clear the event queue."""
        self._event_queue.clear()
