"""Grid primitives used by the simulation."""

from __future__ import annotations

from dataclasses import dataclass
import random
from typing import Dict


@dataclass(frozen=True)
class Vec2:
    """An integer grid vector, used both as a cell and as a heading."""

    x: int
    y: int

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: int) -> "Vec2":
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> "Vec2":
        return Vec2(-self.x, -self.y)

    def is_reverse_of(self, other: "Vec2") -> bool:
        """Return ``True`` if ``self`` points exactly opposite to ``other``."""

        return self == -other

    def to_tuple(self) -> tuple[int, int]:
        """Return the vector as an ``(x, y)`` tuple."""

        return self.x, self.y


UP = Vec2(0, -1)
DOWN = Vec2(0, 1)
LEFT = Vec2(-1, 0)
RIGHT = Vec2(1, 0)

DIRECTIONS: Dict[str, Vec2] = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}


def direction_named(name: str) -> Vec2:
    """Return the cardinal direction called ``name``."""

    try:
        return DIRECTIONS[name]
    except KeyError as exc:
        raise ValueError(f"Unknown direction: {name!r}") from exc


@dataclass(frozen=True)
class Grid:
    """A toroidal grid: leaving one edge re-enters from the opposite one."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {self.width}x{self.height}")

    @classmethod
    def from_viewport(cls, pixel_width: int, pixel_height: int, cell_size: int) -> "Grid":
        """Return the largest grid of ``cell_size`` cells fitting the viewport."""

        return cls(max(1, pixel_width // cell_size), max(1, pixel_height // cell_size))

    @property
    def center(self) -> Vec2:
        return Vec2(self.width // 2, self.height // 2)

    def wrap(self, position: Vec2) -> Vec2:
        """Map any integer position onto the grid.

        Python's ``%`` always returns a value with the sign of the divisor, so
        negative coordinates produced by signed headings land on the far edge.
        """

        return Vec2(position.x % self.width, position.y % self.height)

    def contains(self, position: Vec2) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def random_cell(self, rng: random.Random) -> Vec2:
        """Return a uniformly random cell, occupied or not."""

        return Vec2(rng.randrange(self.width), rng.randrange(self.height))
