"""
Obstacles for MiniRace.

Obstacles drop down one of the two lanes at a constant per-tick speed.
The ObstacleManager owns every live obstacle: it spawns them above the top
edge, moves them, prunes the ones that fell off the bottom and reports
whether any of them hit the car.
"""

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from games.MiniRace.config import OBSTACLE_BASE_SPEED, OBSTACLE_SPEED_JITTER


@dataclass
class Obstacle:
    """A falling block. Plain record, mutated in place each tick (y += speed)."""
    x: float
    y: float
    width: float
    height: float
    speed: float  # pixels per tick
    lane: int


class ObstacleManager:
    """
    Owns the live obstacle set.

    Not thread-safe on its own; MiniRaceMode calls it under its state lock.

    Args:
        rng: Random source for lane and speed (inject a seeded one in tests)
        base_speed: Slowest obstacle speed in pixels per tick
        speed_jitter: Width of the speed range, speeds fall in
            [base_speed, base_speed + speed_jitter)
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        base_speed: float = OBSTACLE_BASE_SPEED,
        speed_jitter: float = OBSTACLE_SPEED_JITTER,
    ):
        self._rng = rng if rng is not None else random.Random()
        self._base_speed = base_speed
        self._speed_jitter = speed_jitter
        self._obstacles: List[Obstacle] = []

    @property
    def obstacles(self) -> Tuple[Obstacle, ...]:
        return tuple(self._obstacles)

    def __len__(self) -> int:
        return len(self._obstacles)

    def add(self, obstacle: Obstacle) -> None:
        """Put an obstacle into play."""
        self._obstacles.append(obstacle)

    def advance(
        self,
        playfield_height: float,
        car_lane: int,
        car_top: float,
        car_bottom: float,
    ) -> bool:
        """
        Move every obstacle down one tick and check for a hit.

        Obstacles whose top edge has passed playfield_height are removed.
        A remaining obstacle collides when it shares the car's lane and its
        vertical extent [y, y + height] overlaps [car_top, car_bottom],
        bounds inclusive.

        Returns:
            True if at least one obstacle hit the car this tick
        """
        collided = False
        remaining = []
        for obs in self._obstacles:
            obs.y += obs.speed
            if obs.y > playfield_height:
                continue
            remaining.append(obs)
            if obs.lane == car_lane and obs.y + obs.height >= car_top and obs.y <= car_bottom:
                collided = True
        self._obstacles = remaining
        return collided

    def maybe_spawn(
        self,
        now: int,
        last_spawn: int,
        spawn_interval_ms: int,
        lane_x: Sequence[float],
        obstacle_width: float,
        obstacle_height: float,
    ) -> Optional[Tuple[Obstacle, int]]:
        """
        Spawn one obstacle if more than spawn_interval_ms have passed.

        The new obstacle goes into a uniformly random lane, sits just above
        the top edge (y = -obstacle_height) and is added to the live set.

        Returns:
            (obstacle, now) when one was spawned, so the caller can store
            the new spawn timestamp; None otherwise
        """
        if now - last_spawn <= spawn_interval_ms:
            return None

        lane = self._rng.randrange(2)
        obstacle = Obstacle(
            x=lane_x[lane],
            y=-obstacle_height,
            width=obstacle_width,
            height=obstacle_height,
            speed=self._base_speed + self._rng.random() * self._speed_jitter,
            lane=lane,
        )
        self._obstacles.append(obstacle)
        return obstacle, now

    def clear(self) -> None:
        """Remove every obstacle."""
        self._obstacles.clear()
