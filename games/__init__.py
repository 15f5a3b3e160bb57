"""Games shipped with MiniRace."""
