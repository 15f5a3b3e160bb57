"""
Game loop driver for MiniRace.

One background thread repeats update -> render -> throttle while the game is
playing. The throttle is a fixed delay after each tick (not a fixed rate),
and obstacle speeds are per tick, so a slow frame slows the game down
rather than making obstacles jump.
"""

import threading
from typing import Callable, Optional

from minirace.errors import ThrottleInterrupted
from minirace.logging import get_logger
from games.MiniRace.config import FRAME_DELAY_MS
from games.MiniRace.game_mode import MiniRaceMode
from games.MiniRace.renderer import RaceRenderer
from games.MiniRace.surface import SurfaceHolder

log = get_logger('game_loop')


class GameLoop:
    """
    Runs the game on a dedicated thread.

    Usage:
        loop = GameLoop(game, renderer, holder)
        loop.resume()   # host became visible
        ...
        loop.pause()    # host went to background; returns once the thread exited

    Args:
        game: Game state machine to advance each tick
        renderer: Draws the per-tick snapshot
        holder: Surface the frames are drawn into
        frame_delay_ms: Sleep after every tick
        sleep: Callable taking seconds, used for the throttle. Defaults to
            waiting on an event that pause() sets, so stopping never waits
            out a full frame delay. May raise InterruptedError.
    """

    def __init__(
        self,
        game: MiniRaceMode,
        renderer: RaceRenderer,
        holder: SurfaceHolder,
        frame_delay_ms: int = FRAME_DELAY_MS,
        sleep: Optional[Callable[[float], object]] = None,
    ):
        self._game = game
        self._renderer = renderer
        self._holder = holder
        self._frame_delay = frame_delay_ms / 1000.0

        self._playing = threading.Event()
        self._wake = threading.Event()
        self._sleep = sleep if sleep is not None else self._wake.wait
        self._thread: Optional[threading.Thread] = None

        self._ticks = 0
        self._frames_drawn = 0
        self._frames_skipped = 0

    @property
    def is_playing(self) -> bool:
        return self._playing.is_set()

    @property
    def is_alive(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def frames_drawn(self) -> int:
        return self._frames_drawn

    @property
    def frames_skipped(self) -> int:
        return self._frames_skipped

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def resume(self) -> None:
        """Start the loop thread. No-op if it is already running."""
        thread = self._thread
        if thread is not None and thread.is_alive():
            if self._playing.is_set():
                log.warning("Game loop already running")
                return
            if thread is threading.current_thread():
                # Paused and resumed within one tick; keep this thread going
                self._wake.clear()
                self._playing.set()
                return
            # Paused from inside a tick and still winding down
            thread.join()

        self._wake.clear()
        self._playing.set()
        self._thread = threading.Thread(target=self.run, name='minirace-loop', daemon=True)
        self._thread.start()

    start = resume

    def pause(self) -> None:
        """Stop the loop and wait for the thread to exit."""
        self._playing.clear()
        self._wake.set()

        thread = self._thread
        if thread is None:
            return
        if thread is threading.current_thread():
            # Called from inside a tick; run() exits after this iteration
            return
        thread.join()
        self._thread = None

    stop = pause

    # =========================================================================
    # Loop body
    # =========================================================================

    def run(self) -> None:
        """Loop until pause() clears the playing flag."""
        log.info("Game loop started (%.0f ms frame delay)", self._frame_delay * 1000)
        try:
            while self._playing.is_set():
                self.tick()
                try:
                    self.throttle()
                except ThrottleInterrupted as e:
                    log.debug("%s", e)
        except Exception:
            log.exception("Game loop crashed")
            self._playing.clear()
            return
        log.info("Game loop stopped after %d ticks", self._ticks)

    def tick(self) -> None:
        """One update and one render."""
        if not self._game.is_ready:
            self._game.on_start(*self._holder.get_size())

        self._game.update()
        self._ticks += 1
        self.render()

    def render(self) -> bool:
        """
        Draw the current snapshot if the surface is available.

        Returns:
            True if a frame was drawn, False if it was skipped
        """
        snapshot = self._game.snapshot()
        try:
            with self._holder.lock_canvas() as canvas:
                if canvas is None:
                    log.trace("Surface not valid, skipping frame")
                    self._frames_skipped += 1
                    return False
                self._renderer.draw(canvas, snapshot)
        except Exception as e:
            # pygame.error from a lost display, or a renderer bug; drop the frame
            log.warning("Frame skipped: %r", e)
            self._frames_skipped += 1
            return False

        self._frames_drawn += 1
        return True

    def throttle(self) -> None:
        """Sleep for the fixed frame delay."""
        try:
            self._sleep(self._frame_delay)
        except InterruptedError as e:
            raise ThrottleInterrupted(f"Frame delay interrupted after tick {self._ticks}") from e
