"""
Drawable surface shared between the game loop thread and the host.

The loop thread draws each frame into an off-screen back buffer; the host's
main thread copies the latest finished frame onto the display and flips.
A lock keeps the two from touching the buffer at the same time.
"""

import threading
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

import pygame


class SurfaceHolder:
    """
    Owns the back buffer and the lock around it.

    Usage (loop thread):
        with holder.lock_canvas() as canvas:
            if canvas is not None:
                renderer.draw(canvas, snapshot)

    Usage (main thread):
        if holder.present(screen):
            pygame.display.flip()
    """

    def __init__(self, surface: Optional[pygame.Surface] = None):
        self._lock = threading.Lock()
        self._surface = surface
        self._frame_ready = False
        self._frames_posted = 0

    @property
    def frames_posted(self) -> int:
        return self._frames_posted

    def attach(self, surface: pygame.Surface) -> None:
        """Start drawing into surface."""
        with self._lock:
            self._surface = surface
            self._frame_ready = False

    def detach(self) -> None:
        """Drop the surface; later frames are skipped until attach()."""
        with self._lock:
            self._surface = None
            self._frame_ready = False

    def get_size(self) -> Tuple[int, int]:
        """Size of the attached surface, (0, 0) when there is none."""
        surface = self._surface
        if surface is None:
            return (0, 0)
        return surface.get_size()

    def is_valid(self) -> bool:
        """Whether a surface is attached and has a drawable area."""
        width, height = self.get_size()
        return width > 0 and height > 0

    @contextmanager
    def lock_canvas(self) -> Iterator[Optional[pygame.Surface]]:
        """
        Acquire the back buffer for one frame.

        Yields None without taking the lock when the surface is not valid.
        Otherwise yields the surface with the lock held; the lock is always
        released, and the frame is posted only if the block finished
        without raising.
        """
        if not self.is_valid():
            yield None
            return

        with self._lock:
            surface = self._surface
            if surface is None:
                yield None
                return
            yield surface
            self._frame_ready = True
            self._frames_posted += 1

    def present(self, display: pygame.Surface) -> bool:
        """
        Copy the most recently posted frame onto display.

        Returns:
            True if a new frame was copied and the display should be flipped
        """
        with self._lock:
            if not self._frame_ready or self._surface is None:
                return False
            display.blit(self._surface, (0, 0))
            self._frame_ready = False
            return True
