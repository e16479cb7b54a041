"""Authoritative simulation of the snake swarm."""

from __future__ import annotations

import logging
import random
from typing import List, Optional

from . import collision
from .food import Food
from .settings import Settings
from .snake import Snake
from .utils import RIGHT, Grid, Vec2


class World:
    """Holds the snake pool and the food, and advances them every frame.

    All snakes follow one shared ``heading``; it is copied into every snake's
    ``direction`` when it changes so each entity can still be drawn on its own.
    """

    def __init__(self, grid: Grid, settings: Settings, rng: Optional[random.Random] = None) -> None:
        self.grid = grid
        self.settings = settings
        self.rng = rng if rng is not None else random.Random()
        self.snakes: List[Snake] = []
        self.food: Food
        self.heading: Vec2 = RIGHT
        self.reset()

    def reset(self) -> None:
        """Start over with one centred snake facing right and fresh food."""

        self.heading = RIGHT
        self.snakes = [Snake.spawn(self.grid.center, self.heading, self.grid)]
        self.food = Food.spawn_random(self.grid, self.rng)
        logging.info("New game on a %sx%s grid, food at %s", self.grid.width, self.grid.height, self.food.position)

    @property
    def lead(self) -> Snake:
        return self.snakes[0]

    def set_heading(self, direction: Vec2) -> None:
        """Point every snake in ``direction``."""

        self.heading = direction
        for snake in self.snakes:
            snake.direction = direction

    def update(self, delta_ms: float) -> bool:
        """Advance every snake by ``delta_ms`` and report whether any collided.

        All snakes move before the collision check so it sees the whole frame.
        """

        # New snakes appended while stepping wait for the next frame.
        for snake in list(self.snakes):
            if snake.accumulate(delta_ms):
                self._step(snake)
        return collision.has_collision(self.snakes)

    def _step(self, snake: Snake) -> None:
        head = snake.advance_head(self.grid)
        if self.food.eaten_by(head):
            self._handle_food_eaten(snake)
        snake.settle_tail()

    def _handle_food_eaten(self, snake: Snake) -> None:
        self.food = Food.spawn_random(self.grid, self.rng)
        snake.growing = True
        existing = list(self.snakes)
        newborn = Snake.spawn(self.grid.random_cell(self.rng), snake.direction, self.grid)
        self.snakes.append(newborn)
        self._apply_speed_scaling(snake, existing)
        logging.debug(
            "Snake %s ate, %s snakes now, next food at %s",
            snake.id,
            len(self.snakes),
            self.food.position,
        )

    def _apply_speed_scaling(self, eater: Snake, existing: List[Snake]) -> None:
        if not self.settings.speed_increase:
            return
        if self.settings.independent_speed:
            eater.speed_up()
            logging.debug("Snake %s interval now %sms", eater.id, eater.interval_ms)
        else:
            for snake in existing:
                snake.speed_up()
            logging.debug("Global speed up, snake %s interval now %sms", eater.id, eater.interval_ms)

    def resize(self, grid: Grid) -> None:
        """Move onto ``grid``, keeping every snake and its heading."""

        self.grid = grid
        for snake in self.snakes:
            snake.rewrap(grid)
        if not grid.contains(self.food.position):
            self.food = Food.spawn_random(grid, self.rng)
        logging.info("Resized to %sx%s with %s snakes", grid.width, grid.height, len(self.snakes))
