#!/usr/bin/env python3
"""
MiniRace - Standalone entry point.

Opens a pygame window, runs the game loop on a background thread and
forwards clicks/touches to the game from the main thread.

Usage:
    python -m games.MiniRace.main
    python -m games.MiniRace.main --fullscreen
    python -m games.MiniRace.main --width 720 --height 1280
"""

import argparse
import os
import sys
from typing import List, Optional

import pygame

# Support running from any directory - add project root to path
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from minirace.input import InputManager
from minirace.input.sources import MouseInputSource
from minirace.logging import configure_logging, get_logger
from games.MiniRace.config import (
    SCREEN_WIDTH,
    SCREEN_HEIGHT,
    FULLSCREEN,
    FRAME_DELAY_MS,
    SPAWN_INTERVAL_MS,
    RaceSettings,
)
from games.MiniRace.game_mode import MiniRaceMode
from games.MiniRace.loop import GameLoop
from games.MiniRace.renderer import RaceRenderer
from games.MiniRace.surface import SurfaceHolder

log = get_logger('host')

# Main thread only pumps events and presents frames
HOST_FPS = 60

_PAUSE_EVENTS = {pygame.WINDOWMINIMIZED, pygame.WINDOWHIDDEN}
_RESUME_EVENTS = {pygame.WINDOWRESTORED, pygame.WINDOWSHOWN}


class MiniRaceApp:
    """
    Host shell: owns the window and wires it to the game core.

    Mirrors an app lifecycle: on_start() once the surface size is known,
    on_resume()/on_pause() when the window becomes visible/hidden, and
    on_input_down() for each press.
    """

    def __init__(
        self,
        game: MiniRaceMode,
        frame_delay_ms: int = FRAME_DELAY_MS,
        renderer: Optional[RaceRenderer] = None,
        input_manager: Optional[InputManager] = None,
    ):
        self.game = game
        self.holder = SurfaceHolder()
        self.renderer = renderer if renderer is not None else RaceRenderer()
        self.loop = GameLoop(game, self.renderer, self.holder, frame_delay_ms=frame_delay_ms)
        self.input_manager = input_manager if input_manager is not None else InputManager(MouseInputSource())
        self.screen: Optional[pygame.Surface] = None
        self.running = False
        self._paused = True

    def on_start(self, width: int, height: int) -> None:
        """Surface is available: allocate the back buffer and lay out lanes."""
        if width > 0 and height > 0:
            self.holder.attach(pygame.Surface((width, height)))
        source = self.input_manager.get_source()
        if isinstance(source, MouseInputSource):
            source.set_window_size(width, height)
        self.game.on_start(width, height)

    def on_input_down(self, x: float) -> None:
        self.game.on_input_down(x)

    def on_pause(self) -> None:
        if self._paused:
            return
        self._paused = True
        self.loop.pause()
        log.info("Paused")

    def on_resume(self) -> None:
        if not self._paused:
            return
        self._paused = False
        self.loop.resume()
        log.info("Resumed")

    def handle_event(self, event: pygame.event.Event) -> None:
        """Window and keyboard events (pointer events go through the input manager)."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.type in _PAUSE_EVENTS:
            self.on_pause()
        elif event.type in _RESUME_EVENTS:
            self.on_resume()

    def run(self, screen: pygame.Surface) -> None:
        """Main-thread loop: pump events, forward input, present frames."""
        self.screen = screen
        self.on_start(*screen.get_size())
        self.on_resume()

        clock = pygame.time.Clock()
        self.running = True
        dt = 0.0
        try:
            while self.running:
                self.input_manager.update(dt)
                for event in pygame.event.get():
                    self.handle_event(event)

                for press in self.input_manager.get_events():
                    self.on_input_down(press.x)

                if self.holder.present(screen):
                    pygame.display.flip()

                dt = clock.tick(HOST_FPS) / 1000.0
        finally:
            self.on_pause()


def main(argv: Optional[List[str]] = None) -> int:
    """Run MiniRace."""
    parser = argparse.ArgumentParser(description="MiniRace - two-lane dodging game")
    parser.add_argument('--width', type=int, default=SCREEN_WIDTH, help='Screen width')
    parser.add_argument('--height', type=int, default=SCREEN_HEIGHT, help='Screen height')
    parser.add_argument('--fullscreen', action='store_true', default=FULLSCREEN, help='Run fullscreen')
    parser.add_argument('--frame-delay', type=int, default=FRAME_DELAY_MS, help='Milliseconds to sleep after each tick')
    parser.add_argument('--spawn-interval', type=int, default=SPAWN_INTERVAL_MS, help='Milliseconds between obstacle spawns')
    parser.add_argument('--log-level', type=str, default=None, help='TRACE, DEBUG, INFO, WARNING, ERROR or OFF')
    args = parser.parse_args(argv)

    if args.log_level:
        configure_logging(level=args.log_level)

    pygame.init()

    if args.fullscreen:
        screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
    else:
        screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("MiniRace")

    game = MiniRaceMode(settings=RaceSettings(spawn_interval_ms=args.spawn_interval))
    app = MiniRaceApp(game, frame_delay_ms=args.frame_delay)

    log.info("Tap or click the left/right half to switch lanes, ESC to quit")
    try:
        app.run(screen)
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
