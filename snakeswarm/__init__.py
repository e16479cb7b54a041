"""Simulation engine for the Snake Swarm game."""

__all__ = [
    "collision",
    "constants",
    "food",
    "session",
    "settings",
    "snake",
    "snapshot",
    "utils",
    "world",
]
