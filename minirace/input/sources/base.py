"""
Input Source - abstract base for anything that produces InputEvents.
"""
from abc import ABC, abstractmethod
from typing import List

from minirace.input.input_event import InputEvent


class InputSource(ABC):
    """Base class for input sources.

    Subclasses collect raw events in update() and hand them out once
    through poll_events().
    """

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Return events received since the last poll and forget them."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Collect raw events from the underlying device."""

    def clear(self) -> None:
        """Drop any pending events."""
        self.poll_events()
