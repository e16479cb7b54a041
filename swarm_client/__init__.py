"""Pygame front-end for the Snake Swarm game."""

__all__ = [
    "input",
    "main",
    "render",
]
