"""
Runtime settings, read from the environment (and a local .env file).

    SNAKE_TICK_MS        tick period in milliseconds (default 100)
    SNAKE_CELL_SIZE      pixels per cell when sizing from a surface (default 100)
    SNAKE_BOARD_WIDTH    board width in cells (default 20)
    SNAKE_BOARD_HEIGHT   board height in cells (default 20)
    SNAKE_SEED           seed for food placement (default: unseeded)
    SNAKE_FOOD_POLICY    uniform | avoid_snake (default uniform)
    LOG_LEVEL            logging level name (default INFO)
"""

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from domain.constants import (
    DEFAULT_BOARD_HEIGHT,
    DEFAULT_BOARD_WIDTH,
    DEFAULT_CELL_SIZE,
    DEFAULT_TICK_MS,
)
from domain.food import SpawnPolicy

load_dotenv()

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


@dataclass(frozen=True)
class Settings:
    tick_ms: int = DEFAULT_TICK_MS
    cell_size: int = DEFAULT_CELL_SIZE
    board_width: int = DEFAULT_BOARD_WIDTH
    board_height: int = DEFAULT_BOARD_HEIGHT
    seed: Optional[int] = None
    food_policy: SpawnPolicy = SpawnPolicy.UNIFORM
    log_level: str = "INFO"


def _int_env(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def get_settings() -> Settings:
    """Build Settings from the current environment."""
    tick_ms = _int_env("SNAKE_TICK_MS", DEFAULT_TICK_MS)
    if tick_ms <= 0:
        raise ValueError(f"SNAKE_TICK_MS must be positive, got {tick_ms}")

    policy_raw = os.getenv("SNAKE_FOOD_POLICY", SpawnPolicy.UNIFORM.value).strip().lower()
    try:
        food_policy = SpawnPolicy(policy_raw)
    except ValueError:
        valid = ", ".join(p.value for p in SpawnPolicy)
        raise ValueError(f"SNAKE_FOOD_POLICY must be one of {valid}, got {policy_raw!r}") from None

    return Settings(
        tick_ms=tick_ms,
        cell_size=_int_env("SNAKE_CELL_SIZE", DEFAULT_CELL_SIZE),
        board_width=_int_env("SNAKE_BOARD_WIDTH", DEFAULT_BOARD_WIDTH),
        board_height=_int_env("SNAKE_BOARD_HEIGHT", DEFAULT_BOARD_HEIGHT),
        seed=_int_env("SNAKE_SEED", None),
        food_policy=food_policy,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
