"""Read-only view of the game handed to the renderer each frame."""

from __future__ import annotations

from dataclasses import dataclass
import enum
from typing import Tuple

from .utils import Grid, Vec2


class SessionState(enum.Enum):
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class SnakeView:
    id: int
    body: Tuple[Vec2, ...]
    direction: Vec2

    @property
    def head(self) -> Vec2:
        return self.body[0]


@dataclass(frozen=True)
class Snapshot:
    """Everything the renderer may look at; it never mutates the game."""

    grid: Grid
    snakes: Tuple[SnakeView, ...]
    food: Vec2
    state: SessionState
    settings_open: bool
    live_counter: bool
    speed_increase: bool
    independent_speed: bool
    high_score: int
    restart_required: bool

    @property
    def snake_count(self) -> int:
        return len(self.snakes)

    @property
    def longest(self) -> int:
        return max((len(snake.body) for snake in self.snakes), default=0)
