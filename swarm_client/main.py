"""Entry point for the pygame based client."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import random

import pygame

from snakeswarm import constants
from snakeswarm.session import Session, ToggleFullscreen
from snakeswarm.settings import SettingsStore
from snakeswarm.utils import Grid

from .input import InputManager
from .render import Renderer


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play Snake Swarm")
    parser.add_argument("--width", type=int, default=1280, help="Initial window width")
    parser.add_argument("--height", type=int, default=720, help="Initial window height")
    parser.add_argument("--cell-size", type=int, default=constants.CELL_SIZE, help="Pixels per grid cell")
    parser.add_argument("--fps", type=int, default=constants.FRAME_RATE, help="Frame rate cap")
    parser.add_argument(
        "--settings",
        type=Path,
        default=Path.home() / constants.SETTINGS_FILENAME,
        help="Where preferences and the high score are stored",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for food and spawn placement")
    parser.add_argument("--log-level", default="INFO", help="Logging level")
    return parser.parse_args()


def _refit(session: Session, renderer: Renderer, cell_size: int) -> None:
    screen = pygame.display.get_surface()
    renderer.set_screen(screen)
    session.resize(Grid.from_viewport(*screen.get_size(), cell_size))


def run_client(args: argparse.Namespace) -> None:
    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height), pygame.RESIZABLE)
    pygame.display.set_caption("Snake Swarm")
    clock = pygame.time.Clock()

    grid = Grid.from_viewport(*screen.get_size(), args.cell_size)
    session = Session(grid, SettingsStore(args.settings), random.Random(args.seed))
    renderer = Renderer(screen, args.cell_size)
    input_manager = InputManager()
    clock.tick()
    running = True

    while running:
        delta_ms = clock.tick(args.fps)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.VIDEORESIZE:
                _refit(session, renderer, args.cell_size)
            else:
                intent = input_manager.intent_for(event)
                if intent is None:
                    continue
                if isinstance(intent, ToggleFullscreen):
                    pygame.display.toggle_fullscreen()
                    _refit(session, renderer, args.cell_size)
                    continue
                session.handle(intent, pygame.time.get_ticks())

        session.frame(delta_ms)
        renderer.draw(session.snapshot())

    pygame.quit()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="[%(levelname)s] %(message)s")
    run_client(args)


if __name__ == "__main__":
    main()
