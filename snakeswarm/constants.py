"""Gameplay constants shared across the engine modules."""

CELL_SIZE: int = 20
BASE_INTERVAL_MS: float = 150.0
SPEED_DECREMENT_MS: float = 5.0
MIN_INTERVAL_MS: float = 50.0
MIN_INPUT_INTERVAL_MS: float = 50.0
INITIAL_SNAKE_LENGTH: int = 3
FRAME_RATE: int = 60
SETTINGS_FILENAME: str = ".snakeswarm.json"
