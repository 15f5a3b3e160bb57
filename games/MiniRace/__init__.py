"""MiniRace: dodge falling blocks by switching between two lanes."""
