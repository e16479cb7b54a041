"""Player preferences and their JSON persistence."""

from __future__ import annotations

from dataclasses import asdict, dataclass
import json
import logging
import os
from pathlib import Path
import tempfile
from typing import Any, Dict, Tuple, Union

LIVE_COUNTER = "live_counter"
SPEED_INCREASE = "speed_increase"
INDEPENDENT_SPEED = "independent_speed"

TOGGLEABLE = (LIVE_COUNTER, SPEED_INCREASE, INDEPENDENT_SPEED)


@dataclass
class Settings:
    """The four persisted preferences.

    ``independent_speed`` only makes sense while ``speed_increase`` is on; the
    toggles keep that relation intact.
    """

    live_counter: bool = False
    speed_increase: bool = True
    independent_speed: bool = True
    high_score: int = 0

    @property
    def speed_baseline(self) -> Tuple[bool, bool]:
        """The speed-related values, as compared when a game is paused."""

        return self.speed_increase, self.independent_speed

    def toggle(self, name: str) -> bool:
        """Flip the boolean preference ``name``.

        Returns ``False`` when the toggle is not applicable, which only happens
        for independent speed while speed increase is off.
        """

        if name == LIVE_COUNTER:
            self.live_counter = not self.live_counter
        elif name == SPEED_INCREASE:
            self.speed_increase = not self.speed_increase
            if not self.speed_increase:
                self.independent_speed = False
        elif name == INDEPENDENT_SPEED:
            if not self.speed_increase:
                return False
            self.independent_speed = not self.independent_speed
        else:
            raise ValueError(f"Unknown setting: {name!r}")
        return True

    def to_dict(self) -> Dict[str, Union[bool, int]]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Any) -> "Settings":
        """Build settings from a decoded payload, defaulting any bad field."""

        settings = cls()
        if not isinstance(payload, dict):
            logging.warning("Ignoring settings payload of type %s", type(payload).__name__)
            return settings
        for name in TOGGLEABLE:
            value = payload.get(name)
            if isinstance(value, bool):
                setattr(settings, name, value)
            elif value is not None:
                logging.warning("Ignoring invalid value %r for setting %s", value, name)
        high_score = payload.get("high_score")
        if isinstance(high_score, int) and not isinstance(high_score, bool) and high_score >= 0:
            settings.high_score = high_score
        elif high_score is not None:
            logging.warning("Ignoring invalid high score %r", high_score)
        if settings.independent_speed and not settings.speed_increase:
            settings.independent_speed = False
        return settings


class SettingsStore:
    """Load and save :class:`Settings` as a small JSON document."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> Settings:
        """Return the stored settings, or the defaults if none can be read."""

        try:
            with self.path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except FileNotFoundError:
            logging.info("No settings at %s, using defaults", self.path)
            return Settings()
        except (OSError, ValueError):
            logging.warning("Could not read settings from %s, using defaults", self.path, exc_info=True)
            return Settings()
        settings = Settings.from_dict(payload)
        logging.info("Settings loaded: %s", settings)
        return settings

    def save(self, settings: Settings) -> None:
        """Write all fields at once by replacing the file."""

        directory = self.path.parent
        try:
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=self.path.name, suffix=".tmp", dir=directory)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(settings.to_dict(), handle, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                os.unlink(tmp_name)
                raise
        except OSError:
            logging.exception("Failed to save settings to %s", self.path)
            return
        logging.info("Settings saved: %s", settings)

    def save_high_score(self, settings: Settings) -> None:
        """Persist a new high score.

        The file always holds every field, so this is a full save.
        """

        self.save(settings)
        logging.info("High score saved: %s", settings.high_score)
