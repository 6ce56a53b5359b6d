"""
Pytest configuration and fixtures for gridsnake tests.
"""

import sys
from pathlib import Path

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))


@pytest.fixture
def make_state():
    """
    Build a GameState from a few overrides.

    Defaults: 14x14 grid, snake [(7,7),(6,7),(5,7)] heading right,
    food at (0,0), no obstacles.
    """
    from gridsnake.games.snake.logic import GameState, Point, RIGHT

    def _make(**overrides):
        fields = dict(
            grid_size=14,
            snake=(Point(7, 7), Point(6, 7), Point(5, 7)),
            dir=RIGHT,
            next_dir=RIGHT,
            food=Point(0, 0),
            obstacles=(),
            obstacle_spawn_every=18,
            max_obstacles=6,
            ticks=0,
            score=0,
            game_over=False,
            paused=False,
            seed=42,
        )
        fields.update(overrides)
        return GameState(**fields)

    return _make


@pytest.fixture
def fixed_rng():
    """An rng stub that always returns the same value and counts calls."""
    class FixedRng:
        def __init__(self, value: float = 0.0):
            self.value = value
            self.calls = 0

        def __call__(self) -> float:
            self.calls += 1
            return self.value

    return FixedRng


@pytest.fixture
def config_dir(tmp_path):
    """Create a config directory with default and snake overrides."""
    games_dir = tmp_path / "config" / "games"
    games_dir.mkdir(parents=True)

    (tmp_path / "config" / "default.yaml").write_text(
        "game:\n"
        "  grid_size: 20\n"
        "  seed: 7\n"
        "  obstacle_spawn_every: 10\n"
        "  max_obstacles: 4\n"
        "rewards:\n"
        "  food: 5.0\n"
        "logging:\n"
        "  level: WARNING\n"
    )
    (games_dir / "snake.yaml").write_text(
        "game:\n"
        "  grid_size: 10\n"
    )

    return tmp_path / "config"


@pytest.fixture(autouse=True)
def restore_package_logger():
    """Undo any setup_logging() call so caplog sees package records again."""
    import logging

    logger = logging.getLogger("gridsnake")
    saved = (list(logger.handlers), logger.level, logger.propagate)
    yield
    handlers, level, propagate = saved
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in logger.handlers:
            logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = propagate
