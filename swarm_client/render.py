"""Pygame based renderer for the game client."""

from __future__ import annotations

from typing import List, Optional, Tuple

import pygame

from snakeswarm.snapshot import SessionState, SnakeView, Snapshot

Color = Tuple[int, int, int]

SNAKE_PALETTE: List[Color] = [
    (0, 255, 255),
    (255, 255, 0),
    (0, 0, 255),
    (255, 136, 0),
    (0, 136, 255),
    (136, 136, 0),
    (136, 0, 136),
    (0, 136, 136),
]


class Renderer:
    """Responsible for all drawing tasks."""

    def __init__(self, screen: pygame.Surface, cell_size: int) -> None:
        self.screen = screen
        self.cell_size = cell_size
        self.title_font = pygame.font.SysFont("arial", 48, bold=True)
        self.heading_font = pygame.font.SysFont("arial", 36, bold=True)
        self.font = pygame.font.SysFont("arial", 20)
        self.hint_font = pygame.font.SysFont("arial", 16)
        self.background_color = (17, 85, 34)
        self.border_color = (17, 68, 17)
        self.leader_color = (0, 255, 0)
        self.food_color = (255, 0, 0)
        self.stem_color = (139, 69, 19)
        self.leaf_color = (34, 139, 34)
        self.text_color = (255, 255, 255)
        self.warning_color = (255, 107, 107)

    def set_screen(self, screen: pygame.Surface) -> None:
        self.screen = screen

    def draw(self, snapshot: Snapshot) -> None:
        self.clear(snapshot)
        self.draw_snakes(snapshot)
        self.draw_food(snapshot)
        if snapshot.live_counter:
            self.draw_counter(snapshot)
        if snapshot.state is not SessionState.RUNNING:
            self.draw_overlay(snapshot)
        pygame.display.flip()

    def clear(self, snapshot: Snapshot, border_cells: int = 2) -> None:
        self.screen.fill(self.background_color)
        width, height = snapshot.grid.width, snapshot.grid.height
        for x in range(width):
            for y in range(height):
                on_border = (
                    x < border_cells or x >= width - border_cells or y < border_cells or y >= height - border_cells
                )
                if on_border and (x + y) % 2 == 0:
                    self.screen.fill(self.border_color, self._cell_rect(x, y))

    def _cell_rect(self, x: int, y: int) -> pygame.Rect:
        size = self.cell_size
        return pygame.Rect(x * size, y * size, size - 1, size - 1)

    def draw_snakes(self, snapshot: Snapshot) -> None:
        longest = snapshot.longest
        for index, snake in enumerate(snapshot.snakes):
            if len(snake.body) == longest:
                color = self.leader_color
            else:
                color = SNAKE_PALETTE[index % len(SNAKE_PALETTE)]
            for segment in snake.body:
                self.screen.fill(color, self._cell_rect(segment.x, segment.y))
            self._draw_eyes(snake)

    def _draw_eyes(self, snake: SnakeView, eye_size: int = 3, eye_offset: int = 4) -> None:
        rect = self._cell_rect(snake.head.x, snake.head.y)
        size = rect.width
        near = eye_offset
        far = size - eye_offset - eye_size
        dx, dy = snake.direction.to_tuple()
        if dx == 1:
            eyes = [(size - eye_offset, near), (size - eye_offset, far)]
        elif dx == -1:
            eyes = [(eye_offset - eye_size, near), (eye_offset - eye_size, far)]
        elif dy == -1:
            eyes = [(near, eye_offset - eye_size), (far, eye_offset - eye_size)]
        else:
            eyes = [(near, size - eye_offset), (far, size - eye_offset)]
        for ex, ey in eyes:
            self.screen.fill((0, 0, 0), pygame.Rect(rect.x + ex, rect.y + ey, eye_size, eye_size))

    def draw_food(self, snapshot: Snapshot, stem_width: int = 4, stem_height: int = 6, leaf_size: int = 3) -> None:
        rect = self._cell_rect(snapshot.food.x, snapshot.food.y)
        self.screen.fill(self.food_color, rect)
        stem_x = rect.x + rect.width // 2 - stem_width // 2
        stem_y = rect.y - stem_height
        self.screen.fill(self.stem_color, pygame.Rect(stem_x, stem_y, stem_width, stem_height))
        self.screen.fill(self.leaf_color, pygame.Rect(stem_x + stem_width, stem_y + 1, leaf_size, leaf_size))

    def draw_counter(self, snapshot: Snapshot) -> None:
        self._blit_centered(self.heading_font, str(snapshot.snake_count), 3 * self.cell_size + 25)

    def draw_overlay(self, snapshot: Snapshot) -> None:
        shade = pygame.Surface(self.screen.get_size(), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 178))
        self.screen.blit(shade, (0, 0))
        if snapshot.settings_open:
            self._draw_settings(snapshot)
            return
        mid = self.screen.get_height() // 2
        paused = snapshot.state is SessionState.PAUSED
        self._blit_centered(self.title_font, "PAUSED" if paused else "GAME OVER", mid - 80)
        self._blit_centered(self.font, f"Snakes: {snapshot.snake_count}", mid - 40)
        self._blit_centered(self.font, f"High Score: {snapshot.high_score}", mid - 10)
        hints = ["Press S for Settings"]
        if paused:
            hints.append("Press P to Play")
        hints.append("Press R to Restart")
        for offset, hint in enumerate(hints):
            self._blit_centered(self.hint_font, hint, mid + 20 + offset * 30)

    def _draw_settings(self, snapshot: Snapshot) -> None:
        mid = self.screen.get_height() // 2
        y = mid - 100
        self._blit_centered(self.heading_font, "SETTINGS", y)
        rows = [
            ("Live Score Counter", snapshot.live_counter),
            ("Speed Increase", snapshot.speed_increase),
        ]
        if snapshot.speed_increase:
            rows.append(("Individual Speeds", snapshot.independent_speed))
        y += 50
        for label, enabled in rows:
            self._blit_centered(self.font, f"{label}: {'ON' if enabled else 'OFF'}", y)
            y += 28
        hints = ["Press T to Toggle Counter", "Press Y to Toggle Speed"]
        if snapshot.speed_increase:
            hints.append("Press I to Toggle Individual")
        hints += ["Press R to Restart", "Press ESC to Close"]
        y += 10
        for hint in hints:
            self._blit_centered(self.hint_font, hint, y)
            y += 20
        if snapshot.state is SessionState.PAUSED and snapshot.restart_required:
            self._blit_centered(
                self.hint_font, "Restart required due to speed setting change", y + 20, self.warning_color
            )

    def _blit_centered(self, font: pygame.font.Font, text: str, y: int, color: Optional[Color] = None) -> None:
        surface = font.render(text, True, color or self.text_color)
        self.screen.blit(surface, (self.screen.get_width() / 2 - surface.get_width() / 2, y))
