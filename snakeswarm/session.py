"""Session state machine: which intents apply when, and the frame driver."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import random
from typing import Optional, Tuple, Union

from . import constants
from .settings import TOGGLEABLE, Settings, SettingsStore
from .snapshot import SessionState, SnakeView, Snapshot
from .utils import Grid, direction_named
from .world import World


@dataclass(frozen=True)
class Direction:
    """Steer every snake; ``name`` is one of up, down, left or right."""

    name: str


@dataclass(frozen=True)
class TogglePause:
    pass


@dataclass(frozen=True)
class Restart:
    pass


@dataclass(frozen=True)
class ToggleSettingsOpen:
    pass


@dataclass(frozen=True)
class CloseSettings:
    pass


@dataclass(frozen=True)
class ToggleSetting:
    """Flip one of the boolean settings, named as in :mod:`snakeswarm.settings`."""

    name: str

    def __post_init__(self) -> None:
        if self.name not in TOGGLEABLE:
            raise ValueError(f"Unknown setting: {self.name!r}")


@dataclass(frozen=True)
class ToggleFullscreen:
    pass


Intent = Union[
    Direction,
    TogglePause,
    Restart,
    ToggleSettingsOpen,
    CloseSettings,
    ToggleSetting,
    ToggleFullscreen,
]


class Session:
    """Drive a :class:`World` according to the player's intents.

    The session is RUNNING, PAUSED or GAME_OVER; the settings view can only
    be open while the game is not running. Time only reaches the world while
    RUNNING, so paused time never turns into movement later.
    """

    def __init__(self, grid: Grid, store: SettingsStore, rng: Optional[random.Random] = None) -> None:
        self.store = store
        self.settings: Settings = store.load()
        self.world = World(grid, self.settings, rng)
        self.state = SessionState.RUNNING
        self.settings_open = False
        self.restart_required = False
        self.baseline: Optional[Tuple[bool, bool]] = None
        self.last_direction_ms: Optional[float] = None
        self.discard_next_delta = False

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    def handle(self, intent: Intent, now_ms: float) -> None:
        """Apply ``intent`` received at ``now_ms``; inapplicable ones are ignored."""

        if isinstance(intent, TogglePause):
            self._toggle_pause()
        elif isinstance(intent, Restart):
            if not self.running:
                self.restart()
        elif isinstance(intent, ToggleSettingsOpen):
            if not self.running:
                self.settings_open = not self.settings_open
        elif isinstance(intent, CloseSettings):
            if not self.running:
                self.settings_open = False
        elif isinstance(intent, ToggleSetting):
            if not self.running and self.settings_open:
                self._toggle_setting(intent.name)
        elif isinstance(intent, Direction):
            if self.running:
                self._steer(intent.name, now_ms)
        # Fullscreen is a window concern; the world hears about it via resize().

    def _toggle_pause(self) -> None:
        if self.state is SessionState.GAME_OVER:
            return
        if self.running:
            self.baseline = self.settings.speed_baseline
            self.restart_required = False
            self.state = SessionState.PAUSED
            logging.info("Paused with %s snakes", len(self.world.snakes))
        else:
            self.state = SessionState.RUNNING
            self.discard_next_delta = True
            logging.info("Resumed")
        self.settings_open = False

    def _toggle_setting(self, name: str) -> None:
        if not self.settings.toggle(name):
            return
        self.store.save(self.settings)
        if self.state is SessionState.PAUSED:
            self.restart_required = self.settings.speed_baseline != self.baseline

    def _steer(self, name: str, now_ms: float) -> None:
        direction = direction_named(name)
        if direction.is_reverse_of(self.world.lead.direction):
            logging.debug("Ignoring reversal to %s", name)
            return
        if self.last_direction_ms is not None and now_ms - self.last_direction_ms < constants.MIN_INPUT_INTERVAL_MS:
            logging.debug("Ignoring %s, only %sms since last turn", name, now_ms - self.last_direction_ms)
            return
        self.world.set_heading(direction)
        self.last_direction_ms = now_ms

    def restart(self) -> None:
        """Begin a fresh game; the high score survives."""

        self.world.reset()
        self.state = SessionState.RUNNING
        self.settings_open = False
        self.restart_required = False
        self.baseline = None
        self.last_direction_ms = None
        self.discard_next_delta = True
        logging.info("Game restarted")

    def frame(self, delta_ms: float) -> None:
        """Run one frame of simulation worth ``delta_ms`` of real time.

        The first frame after a resume or restart still spans time spent
        outside RUNNING, so its delta is dropped.
        """

        if not self.running:
            return
        if self.discard_next_delta:
            self.discard_next_delta = False
            return
        if self.world.update(delta_ms):
            self._game_over()

    def _game_over(self) -> None:
        self.state = SessionState.GAME_OVER
        score = len(self.world.snakes)
        if score > self.settings.high_score:
            self.settings.high_score = score
            self.store.save_high_score(self.settings)
        logging.info("Game over with %s snakes, high score %s", score, self.settings.high_score)

    def resize(self, grid: Grid) -> None:
        self.world.resize(grid)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            grid=self.world.grid,
            snakes=tuple(
                SnakeView(id=snake.id, body=tuple(snake.body), direction=snake.direction)
                for snake in self.world.snakes
            ),
            food=self.world.food.position,
            state=self.state,
            settings_open=self.settings_open,
            live_counter=self.settings.live_counter,
            speed_increase=self.settings.speed_increase,
            independent_speed=self.settings.independent_speed,
            high_score=self.settings.high_score,
            restart_required=self.restart_required,
        )
