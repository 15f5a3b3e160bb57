"""
Tests for input events, the input manager and the mouse/touch source.
"""

from typing import List

import pygame
import pytest

from models import Point2D
from minirace.input import InputEvent, InputManager
from minirace.input.sources import InputSource, MouseInputSource


class MockInputSource(InputSource):
    """Mock implementation of InputSource for testing."""

    def __init__(self):
        self.events: List[InputEvent] = []
        self.update_count = 0

    def poll_events(self) -> List[InputEvent]:
        events = self.events.copy()
        self.events.clear()
        return events

    def update(self, dt: float) -> None:
        self.update_count += 1


def make_event(x=10.0, y=20.0, t=1.0):
    return InputEvent(position=Point2D(x=x, y=y), timestamp=t)


class TestInputEvent:

    def test_x(self):
        assert make_event(x=800.0).x == 800.0

    def test_negative_timestamp_rejected(self):
        with pytest.raises(ValueError):
            make_event(t=-0.5)

    def test_frozen(self):
        event = make_event()
        with pytest.raises(AttributeError):
            event.timestamp = 3.0


class TestInputManager:

    def test_without_source(self):
        manager = InputManager()

        manager.update(0.016)

        assert not manager.has_source()
        assert manager.get_events() == []

    def test_delegates_to_source(self):
        source = MockInputSource()
        manager = InputManager(source)
        source.events.append(make_event())

        manager.update(0.016)
        events = manager.get_events()

        assert source.update_count == 1
        assert len(events) == 1
        assert manager.get_events() == []

    def test_rejects_non_source(self):
        with pytest.raises(TypeError):
            InputManager(object())
        with pytest.raises(TypeError):
            InputManager().set_source("mouse")

    def test_set_source(self):
        manager = InputManager()
        source = MockInputSource()

        manager.set_source(source)

        assert manager.get_source() is source

    def test_clear_drops_pending(self):
        source = MockInputSource()
        source.events.append(make_event())

        source.clear()

        assert source.poll_events() == []


class TestMouseInputSource:
    """Uses a patched pygame event queue."""

    @pytest.fixture
    def queue(self, monkeypatch):
        pending = []
        reposted = []

        def fake_get():
            events = list(pending)
            pending.clear()
            return events

        monkeypatch.setattr(pygame.event, 'get', fake_get)
        monkeypatch.setattr(pygame.event, 'post', reposted.append)
        return pending, reposted

    def test_left_click(self, queue):
        pending, _ = queue
        pending.append(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(120, 40), button=1))
        source = MouseInputSource()

        source.update(0.016)
        events = source.poll_events()

        assert len(events) == 1
        assert events[0].x == 120.0
        assert events[0].position.y == 40.0

    def test_right_click_ignored(self, queue):
        pending, _ = queue
        pending.append(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(120, 40), button=3))
        source = MouseInputSource()

        source.update(0.016)

        assert source.poll_events() == []

    def test_touch_emulated_click_ignored(self, queue):
        """Touch presses are taken from FINGERDOWN, not the emulated click."""
        pending, _ = queue
        pending.append(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(120, 40), button=1, touch=True))
        source = MouseInputSource()

        source.update(0.016)

        assert source.poll_events() == []

    def test_finger_down_scaled_to_window(self, queue):
        pending, _ = queue
        pending.append(pygame.event.Event(pygame.FINGERDOWN, x=0.75, y=0.5, touch_id=0, finger_id=0))
        source = MouseInputSource(window_size=(1000, 2000))

        source.update(0.016)
        events = source.poll_events()

        assert len(events) == 1
        assert events[0].x == 750.0
        assert events[0].position.y == 1000.0

    def test_other_events_reposted(self, queue):
        pending, reposted = queue
        key = pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)
        pending.append(key)
        pending.append(pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1)))
        source = MouseInputSource()

        source.update(0.016)

        assert reposted == [key]
        assert source.poll_events() == []
