"""Error kinds raised inside the MiniRace core.

None of these are fatal: the loop logs them and carries on with the next tick.
"""


class MiniRaceError(Exception):
    """Base class for MiniRace errors."""


class ThrottleInterrupted(MiniRaceError):
    """The fixed frame-delay sleep was interrupted before it finished."""
