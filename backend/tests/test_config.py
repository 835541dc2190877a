"""
Tests for config.py.
"""

import sys
import os

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import Settings, get_settings
from domain import SpawnPolicy

ENV_VARS = [
    "SNAKE_TICK_MS",
    "SNAKE_CELL_SIZE",
    "SNAKE_BOARD_WIDTH",
    "SNAKE_BOARD_HEIGHT",
    "SNAKE_SEED",
    "SNAKE_FOOD_POLICY",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = get_settings()
    assert settings == Settings()
    assert settings.tick_ms == 100
    assert settings.cell_size == 100
    assert settings.seed is None
    assert settings.food_policy is SpawnPolicy.UNIFORM
    assert settings.log_level == "INFO"


def test_reads_environment(clean_env):
    clean_env.setenv("SNAKE_TICK_MS", "50")
    clean_env.setenv("SNAKE_BOARD_WIDTH", "12")
    clean_env.setenv("SNAKE_BOARD_HEIGHT", "9")
    clean_env.setenv("SNAKE_SEED", "42")
    clean_env.setenv("SNAKE_FOOD_POLICY", "AVOID_SNAKE")
    clean_env.setenv("LOG_LEVEL", "debug")

    settings = get_settings()

    assert settings.tick_ms == 50
    assert (settings.board_width, settings.board_height) == (12, 9)
    assert settings.seed == 42
    assert settings.food_policy is SpawnPolicy.AVOID_SNAKE
    assert settings.log_level == "DEBUG"


def test_blank_value_falls_back_to_default(clean_env):
    clean_env.setenv("SNAKE_SEED", "  ")
    assert get_settings().seed is None


def test_non_integer_raises(clean_env):
    clean_env.setenv("SNAKE_TICK_MS", "fast")
    with pytest.raises(ValueError, match="SNAKE_TICK_MS"):
        get_settings()


def test_non_positive_tick_raises(clean_env):
    clean_env.setenv("SNAKE_TICK_MS", "0")
    with pytest.raises(ValueError, match="positive"):
        get_settings()


def test_unknown_food_policy_raises(clean_env):
    clean_env.setenv("SNAKE_FOOD_POLICY", "teleport")
    with pytest.raises(ValueError, match="SNAKE_FOOD_POLICY"):
        get_settings()
