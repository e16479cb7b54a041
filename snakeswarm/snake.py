"""Snake entity implementation."""

from __future__ import annotations

from dataclasses import dataclass, field
import itertools
from typing import List

from . import constants
from .utils import Grid, Vec2

_id_counter = itertools.count(1)


@dataclass
class Snake:
    """A single snake of the swarm with its own movement clock."""

    body: List[Vec2]
    direction: Vec2
    growing: bool = False
    interval_ms: float = constants.BASE_INTERVAL_MS
    accumulated_ms: float = 0.0
    id: int = field(default_factory=lambda: next(_id_counter))

    def __post_init__(self) -> None:
        if not self.body:
            raise ValueError("A snake needs at least one body segment")

    @classmethod
    def spawn(cls, head: Vec2, direction: Vec2, grid: Grid) -> "Snake":
        """Create a minimum-length snake whose tail trails behind ``head``."""

        body = [
            grid.wrap(head - direction * offset)
            for offset in range(constants.INITIAL_SNAKE_LENGTH)
        ]
        return cls(body=body, direction=direction)

    @property
    def head(self) -> Vec2:
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def accumulate(self, delta_ms: float) -> bool:
        """Add ``delta_ms`` to the clock and report whether a step is due.

        When the threshold is reached the accumulator restarts from zero, so any
        surplus beyond ``interval_ms`` is dropped rather than carried over.
        """

        self.accumulated_ms += delta_ms
        if self.accumulated_ms < self.interval_ms:
            return False
        self.accumulated_ms = 0.0
        return True

    def advance_head(self, grid: Grid) -> Vec2:
        """Push a new wrapped head one cell along ``direction`` and return it."""

        new_head = grid.wrap(self.head + self.direction)
        self.body.insert(0, new_head)
        return new_head

    def settle_tail(self) -> None:
        """Finish a step: keep the tail once if growing, drop it otherwise."""

        if self.growing:
            self.growing = False
        else:
            self.body.pop()

    def speed_up(self) -> None:
        """Shorten the step interval, never below the minimum."""

        self.interval_ms = max(constants.MIN_INTERVAL_MS, self.interval_ms - constants.SPEED_DECREMENT_MS)

    def rewrap(self, grid: Grid) -> None:
        """Bring every segment back inside ``grid`` after a resize."""

        self.body = [grid.wrap(segment) for segment in self.body]
