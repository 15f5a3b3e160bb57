"""Monotonic millisecond clock used for obstacle spawn timing."""

import time


def monotonic_ms() -> int:
    """Current monotonic time in whole milliseconds."""
    return int(time.monotonic() * 1000)
