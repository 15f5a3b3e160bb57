"""
Input Manager - owns the active input source and hands out its events.
"""
from typing import List, Optional

from minirace.input.input_event import InputEvent
from minirace.input.sources.base import InputSource


class InputManager:
    """Single point the host shell polls for input events.

    The source can be swapped at runtime (e.g. a scripted source in tests).
    """

    def __init__(self, source: Optional[InputSource] = None):
        if source is not None and not isinstance(source, InputSource):
            raise TypeError(f"Expected InputSource, got {type(source).__name__}")
        self._source = source

    def set_source(self, source: InputSource) -> None:
        """Replace the active input source."""
        if not isinstance(source, InputSource):
            raise TypeError(f"Expected InputSource, got {type(source).__name__}")
        self._source = source

    def get_source(self) -> Optional[InputSource]:
        return self._source

    def has_source(self) -> bool:
        return self._source is not None

    def update(self, dt: float) -> None:
        """Let the source collect new events."""
        if self._source is not None:
            self._source.update(dt)

    def get_events(self) -> List[InputEvent]:
        """Events received since the last call (empty without a source)."""
        if self._source is None:
            return []
        return self._source.poll_events()
