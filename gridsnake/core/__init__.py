"""
Core abstractions for gridsnake.

Provides the abstract interfaces that games and environments implement.
"""

from .game_interface import GameInterface, GameMetadata
from .env_interface import EnvInterface

__all__ = [
    'GameInterface',
    'GameMetadata',
    'EnvInterface',
]
