"""
MiniRace game mode.

The player's car sits near the bottom of the screen in one of two lanes.
Obstacles fall down the lanes; tapping the left or right half of the screen
moves the car into that lane. Being hit ends the game, and the next tap
restarts it.

Input arrives on the host's main thread while the game loop thread calls
update() and snapshot(), so every read and write of game state happens
under a single lock.
"""

import random
import threading
from typing import Callable, Optional, Tuple

from minirace.clock import monotonic_ms
from minirace.game_state import GameState
from minirace.logging import get_logger
from models import FrameSnapshot, Rectangle
from games.MiniRace.config import RaceSettings
from games.MiniRace.obstacle import Obstacle, ObstacleManager

log = get_logger('game_mode')


class MiniRaceMode:
    """
    Two-lane dodging game state machine.

    States: PLAYING and GAME_OVER. A collision during update() moves
    PLAYING -> GAME_OVER; any input in GAME_OVER restarts the game. Input
    while PLAYING picks the lane on the tapped half of the screen.

    Lane positions and the car's y coordinate are computed once, the first
    time non-zero screen dimensions are seen. Until then update() does
    nothing.

    Usage:
        game = MiniRaceMode()
        game.on_start(1080, 1920)
        game.on_input_down(900)   # move to the right lane
        game.update()             # one tick
        frame = game.snapshot()
    """

    NAME = "MiniRace"
    DESCRIPTION = "Switch lanes to dodge falling blocks."
    VERSION = "1.0.0"

    def __init__(
        self,
        settings: Optional[RaceSettings] = None,
        clock: Callable[[], int] = monotonic_ms,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize game mode.

        Args:
            settings: Gameplay tunables (defaults from config)
            clock: Monotonic millisecond clock used for spawn timing
            rng: Random source for obstacle lane and speed
        """
        self._settings = settings if settings is not None else RaceSettings()
        self._clock = clock
        self._obstacles = ObstacleManager(
            rng=rng,
            base_speed=self._settings.base_speed,
            speed_jitter=self._settings.speed_jitter,
        )
        self._lock = threading.RLock()

        self._screen_width = 0
        self._screen_height = 0
        self._ready = False

        self._lane_x: Tuple[float, float] = (0.0, 0.0)
        self._lane = 0
        self._car_x = 0.0
        self._car_y = 0.0

        self._state = GameState.PLAYING
        self._obstacle_timer = self._clock()

    # =========================================================================
    # Read-only state
    # =========================================================================

    @property
    def settings(self) -> RaceSettings:
        return self._settings

    @property
    def state(self) -> GameState:
        with self._lock:
            return self._state

    @property
    def is_game_over(self) -> bool:
        return self.state == GameState.GAME_OVER

    @property
    def is_ready(self) -> bool:
        """True once screen dimensions have been observed."""
        with self._lock:
            return self._ready

    @property
    def lane(self) -> int:
        with self._lock:
            return self._lane

    @property
    def car_x(self) -> float:
        with self._lock:
            return self._car_x

    @property
    def car_y(self) -> float:
        with self._lock:
            return self._car_y

    @property
    def lane_x(self) -> Tuple[float, float]:
        with self._lock:
            return self._lane_x

    @property
    def obstacle_timer(self) -> int:
        """Timestamp (ms) of the last spawn, or of the last (re)start."""
        with self._lock:
            return self._obstacle_timer

    @property
    def obstacles(self) -> Tuple[Obstacle, ...]:
        with self._lock:
            return self._obstacles.obstacles

    @property
    def obstacle_count(self) -> int:
        with self._lock:
            return len(self._obstacles)

    @property
    def obstacle_manager(self) -> ObstacleManager:
        return self._obstacles

    # =========================================================================
    # Host callbacks
    # =========================================================================

    def on_start(self, width: int, height: int) -> None:
        """
        Record the playfield size and lay out the lanes.

        Only the first call with non-zero dimensions has an effect; screen
        resizes are not handled.
        """
        with self._lock:
            if self._ready:
                return
            if width <= 0 or height <= 0:
                log.debug("Screen size %dx%d not known yet, deferring layout", width, height)
                return

            s = self._settings
            self._screen_width = width
            self._screen_height = height
            self._lane_x = (
                width / 4 - s.car_width / 2,
                3 * width / 4 - s.car_width / 2,
            )
            self._car_y = height - s.car_height - s.car_bottom_margin
            self._lane = 0
            self._car_x = self._lane_x[0]
            self._obstacle_timer = self._clock()
            self._ready = True

        log.info("Playfield %dx%d, lanes at x=%.1f / %.1f",
                 width, height, self._lane_x[0], self._lane_x[1])

    def on_input_down(self, x: float) -> None:
        """
        Handle a press at horizontal position x.

        In GAME_OVER any press restarts, wherever it lands. While PLAYING
        the press selects the left lane if x is left of mid-screen, the
        right lane otherwise; coordinates outside the screen are compared
        the same way.
        """
        with self._lock:
            if self._state == GameState.GAME_OVER:
                self._restart()
                return

            lane = 0 if x < self._screen_width / 2 else 1
            self._set_lane(lane)

        log.debug("Input at x=%.1f -> lane %d", x, lane)

    # =========================================================================
    # Game loop
    # =========================================================================

    def update(self) -> None:
        """
        Advance the game by one tick.

        Moves obstacles, prunes the ones that left the playfield and checks
        for a hit, then gives the spawner its one chance for this tick.
        Does nothing in GAME_OVER, so the last frame stays frozen.
        """
        with self._lock:
            if not self._ready or self._state != GameState.PLAYING:
                return

            s = self._settings
            collided = self._obstacles.advance(
                playfield_height=self._screen_height,
                car_lane=self._lane,
                car_top=self._car_y,
                car_bottom=self._car_y + s.car_height,
            )
            if collided:
                self._state = GameState.GAME_OVER
                log.info("Crash in lane %d, game over", self._lane)

            spawned = self._obstacles.maybe_spawn(
                now=self._clock(),
                last_spawn=self._obstacle_timer,
                spawn_interval_ms=s.spawn_interval_ms,
                lane_x=self._lane_x,
                obstacle_width=s.obstacle_width,
                obstacle_height=s.obstacle_height,
            )
            if spawned is not None:
                obstacle, self._obstacle_timer = spawned
                log.trace("Spawned obstacle in lane %d at speed %.2f",
                          obstacle.lane, obstacle.speed)

    def snapshot(self) -> FrameSnapshot:
        """Copy everything the renderer needs for one frame."""
        with self._lock:
            s = self._settings
            return FrameSnapshot(
                screen_width=self._screen_width,
                screen_height=self._screen_height,
                car_rect=Rectangle(
                    x=self._car_x, y=self._car_y,
                    width=s.car_width, height=s.car_height,
                ),
                obstacle_rects=tuple(
                    Rectangle(x=obs.x, y=obs.y, width=obs.width, height=obs.height)
                    for obs in self._obstacles.obstacles
                ),
                is_game_over=self._state == GameState.GAME_OVER,
            )

    def reset(self) -> None:
        """Back to the initial state: no obstacles, car in lane 0, PLAYING."""
        with self._lock:
            self._restart()

    # =========================================================================
    # Internals (call with the lock held)
    # =========================================================================

    def _set_lane(self, lane: int) -> None:
        self._lane = lane
        self._car_x = self._lane_x[lane]

    def _restart(self) -> None:
        self._obstacles.clear()
        self._set_lane(0)
        self._obstacle_timer = self._clock()
        self._state = GameState.PLAYING
        log.info("Restarted")
