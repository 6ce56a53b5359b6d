"""
Games module for gridsnake.

Importing this module populates the GameRegistry.
"""

from .registry import GameRegistry

# Import game modules to trigger registration
# Each game's __init__.py calls GameRegistry.register()
from . import snake

__all__ = [
    'GameRegistry',
]
