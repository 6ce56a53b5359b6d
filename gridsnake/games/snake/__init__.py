"""
Snake game module for gridsnake.

This module auto-registers the Snake game when imported.
"""

from ..registry import GameRegistry
from .logic import (
    GameState,
    Point,
    UP,
    DOWN,
    LEFT,
    RIGHT,
    DIRECTIONS,
    create_rng,
    create_initial_state,
    find_open_cells,
    place_food,
    place_obstacle,
    step,
    set_direction,
    toggle_pause,
    reset,
    status_text,
)
from .game import SnakeGame
from .env import SnakeEnv
from .config import SnakeConfig

# Auto-register Snake game when this module is imported
GameRegistry.register(
    game_class=SnakeGame,
    env_class=SnakeEnv,
    config_class=SnakeConfig
)

__all__ = [
    'SnakeGame',
    'SnakeEnv',
    'SnakeConfig',
    'GameState',
    'Point',
    'UP',
    'DOWN',
    'LEFT',
    'RIGHT',
    'DIRECTIONS',
    'create_rng',
    'create_initial_state',
    'find_open_cells',
    'place_food',
    'place_obstacle',
    'step',
    'set_direction',
    'toggle_pause',
    'reset',
    'status_text',
]
