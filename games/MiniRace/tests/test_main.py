"""
Tests for the MiniRaceApp host shell callbacks (no window needed).
"""

import pygame
import pytest

from games.MiniRace.main import MiniRaceApp


@pytest.fixture
def app(settings, clock, rng):
    from games.MiniRace.game_mode import MiniRaceMode

    game = MiniRaceMode(settings=settings, clock=clock, rng=rng)
    application = MiniRaceApp(game, frame_delay_ms=1)
    yield application
    application.on_pause()


class TestHostCallbacks:

    def test_on_start_lays_out_and_attaches_surface(self, app):
        app.on_start(1000, 2000)

        assert app.game.lane_x == (200.0, 700.0)
        assert app.holder.get_size() == (1000, 2000)

    def test_on_start_zero_size(self, app):
        app.on_start(0, 0)

        assert not app.game.is_ready
        assert not app.holder.is_valid()

    def test_input_forwarded(self, app):
        app.on_start(1000, 2000)

        app.on_input_down(800)

        assert app.game.lane == 1

    def test_resume_and_pause(self, app):
        app.on_start(1000, 2000)

        app.on_resume()
        assert app.loop.is_playing
        app.on_resume()

        app.on_pause()
        assert not app.loop.is_playing
        assert not app.loop.is_alive

    def test_window_events_drive_lifecycle(self, app):
        app.on_start(1000, 2000)

        app.handle_event(pygame.event.Event(pygame.WINDOWSHOWN))
        assert app.loop.is_playing

        app.handle_event(pygame.event.Event(pygame.WINDOWMINIMIZED))
        assert not app.loop.is_playing

        app.handle_event(pygame.event.Event(pygame.WINDOWRESTORED))
        assert app.loop.is_playing

    def test_focus_change_does_not_pause(self, app):
        app.on_start(1000, 2000)
        app.on_resume()

        app.handle_event(pygame.event.Event(pygame.WINDOWFOCUSLOST))
        assert app.loop.is_playing

        app.handle_event(pygame.event.Event(pygame.WINDOWFOCUSGAINED))
        assert app.loop.is_playing

    def test_quit_and_escape_stop(self, app):
        app.running = True
        app.handle_event(pygame.event.Event(pygame.QUIT))
        assert app.running is False

        app.running = True
        app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        assert app.running is False
