"""Translate pygame key presses into game intents."""

from __future__ import annotations

from typing import Dict, Optional

import pygame

from snakeswarm.session import (
    CloseSettings,
    Direction,
    Intent,
    Restart,
    ToggleFullscreen,
    TogglePause,
    ToggleSetting,
    ToggleSettingsOpen,
)
from snakeswarm.settings import INDEPENDENT_SPEED, LIVE_COUNTER, SPEED_INCREASE


DEFAULT_KEYMAP: Dict[int, Intent] = {
    pygame.K_UP: Direction("up"),
    pygame.K_DOWN: Direction("down"),
    pygame.K_LEFT: Direction("left"),
    pygame.K_RIGHT: Direction("right"),
    pygame.K_p: TogglePause(),
    pygame.K_r: Restart(),
    pygame.K_s: ToggleSettingsOpen(),
    pygame.K_ESCAPE: CloseSettings(),
    pygame.K_t: ToggleSetting(LIVE_COUNTER),
    pygame.K_y: ToggleSetting(SPEED_INCREASE),
    pygame.K_i: ToggleSetting(INDEPENDENT_SPEED),
    pygame.K_F11: ToggleFullscreen(),
}


class InputManager:
    """Map each key press to at most one intent."""

    def __init__(self, keymap: Optional[Dict[int, Intent]] = None) -> None:
        self.keymap = dict(DEFAULT_KEYMAP if keymap is None else keymap)

    def intent_for(self, event: pygame.event.Event) -> Optional[Intent]:
        if event.type != pygame.KEYDOWN:
            return None
        return self.keymap.get(event.key)
