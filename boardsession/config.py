"""
Session configuration.

`GameConfig` holds the per-session rules. `SessionSettings` reads the
driver defaults from the environment (prefix: BOARD_SESSION_).
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from boardsession.exceptions import InvalidConfigurationError


MIN_BOARD_SIZE = 4


@dataclass
class GameConfig:
    """Configuration for a board session."""

    starting_cash: int = 1500
    board_size: int = 20

    dice_count: int = 2
    dice_sides: int = 6

    seed: Optional[int] = None

    # advance_turn() refuses to run until init() has reset positions
    require_init: bool = True

    max_turns: Optional[int] = None

    def __post_init__(self) -> None:
        if self.board_size < MIN_BOARD_SIZE:
            raise InvalidConfigurationError(
                f"board_size must be at least {MIN_BOARD_SIZE}, got {self.board_size}"
            )
        if self.dice_count < 1 or self.dice_sides < 1:
            raise InvalidConfigurationError(
                f"need at least one die with one side, got {self.dice_count}d{self.dice_sides}"
            )
        if self.max_turns is not None and self.max_turns < 1:
            raise InvalidConfigurationError(f"max_turns must be positive, got {self.max_turns}")

    def rng_for(self, stream: str) -> random.Random:
        """
        Create a random source for one part of the session (e.g. "dice", "board").

        With a seed, each stream name gets its own reproducible sequence, so
        dice rolls and chance draws never mirror each other. Without a seed
        the source is unseeded.
        """
        if self.seed is None:
            return random.Random()
        return random.Random(f"{self.seed}:{stream}")


class SessionSettings(BaseSettings):
    """
    Driver defaults for running sessions from the command line.

    Environment variables (prefix: BOARD_SESSION_):
        BOARD_SESSION_LOG_LEVEL   - logging level name (default: INFO)
        BOARD_SESSION_LOG_DIR     - directory for JSONL game logs (default: logs)
        BOARD_SESSION_GAME_NAME   - session name (default: Monopoly)
        BOARD_SESSION_NUM_PLAYERS - number of players (default: 4)
        BOARD_SESSION_MAX_TURNS   - turns to play before ending (default: 100)
        BOARD_SESSION_BOARD_SIZE  - number of board spaces (default: 20)
        BOARD_SESSION_SEED        - RNG seed (default: unset)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="BOARD_SESSION_",
    )

    log_level: str = Field(default="INFO", description="Logging level name.")
    log_dir: str = Field(default="logs", description="Directory for JSONL game logs.")
    game_name: str = Field(default="Monopoly", description="Name of the session.")
    num_players: int = Field(default=4, ge=1, le=8, description="Number of players.")
    max_turns: int = Field(default=100, gt=0, description="Turns to play before ending.")
    board_size: int = Field(default=20, ge=MIN_BOARD_SIZE, description="Number of board spaces.")
    seed: Optional[int] = Field(default=None, description="RNG seed for reproducible runs.")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Optional[str]) -> str:
        """Upper-case the level name so `debug` and `DEBUG` both work."""
        if not value:
            return "INFO"
        return str(value).upper()


@lru_cache
def get_session_settings() -> SessionSettings:
    """Return cached session settings instance."""
    return SessionSettings()
