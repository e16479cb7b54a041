"""Food entity definition."""

from __future__ import annotations

from dataclasses import dataclass
import random

from .utils import Grid, Vec2


@dataclass
class Food:
    """The single food item on the board."""

    position: Vec2

    @classmethod
    def spawn_random(cls, grid: Grid, rng: random.Random) -> "Food":
        """Create food on a random cell; snake bodies are not avoided."""

        return cls(position=grid.random_cell(rng))

    def eaten_by(self, head: Vec2) -> bool:
        return self.position == head
