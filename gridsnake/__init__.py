"""
gridsnake - Deterministic grid Snake engine with obstacles.

Modules:
- core: Abstract interfaces for games and environments
- games: Game implementations (Snake) and the registry
- utils: Configuration and logging setup
"""

__version__ = "1.0.0"
