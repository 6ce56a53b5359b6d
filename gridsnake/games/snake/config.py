"""
Snake game configuration.
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional


@dataclass
class SnakeConfig:
    """Configuration for Snake game."""

    # Board
    grid_size: int = 14
    seed: Optional[int] = None  # None means derive from the clock
    obstacle_spawn_every: int = 18
    max_obstacles: int = 6

    # Driver cadence in milliseconds
    tick_ms: int = 120

    # Rewards
    reward_food: float = 10.0
    reward_death: float = -10.0
    reward_step_penalty: float = -0.01

    def validate(self) -> "SnakeConfig":
        """
        Check the board settings.

        Raises:
            ValueError: If any setting is out of range
        """
        if self.grid_size < 1:
            raise ValueError(f"grid_size must be >= 1, got {self.grid_size}")
        if self.obstacle_spawn_every < 1:
            raise ValueError(
                f"obstacle_spawn_every must be >= 1, got {self.obstacle_spawn_every}"
            )
        if self.max_obstacles < 0:
            raise ValueError(f"max_obstacles must be >= 0, got {self.max_obstacles}")
        return self

    def get_reward_config(self) -> Dict[str, float]:
        """Get reward configuration dictionary."""
        return {
            "food": self.reward_food,
            "death": self.reward_death,
            "step_penalty": self.reward_step_penalty,
        }

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "grid_size": self.grid_size,
            "seed": self.seed,
            "obstacle_spawn_every": self.obstacle_spawn_every,
            "max_obstacles": self.max_obstacles,
            "tick_ms": self.tick_ms,
            "rewards": self.get_reward_config(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SnakeConfig":
        """Create config from dictionary."""
        rewards = data.get("rewards", {})
        return cls(
            grid_size=data.get("grid_size", cls.grid_size),
            seed=data.get("seed"),
            obstacle_spawn_every=data.get("obstacle_spawn_every", cls.obstacle_spawn_every),
            max_obstacles=data.get("max_obstacles", cls.max_obstacles),
            tick_ms=data.get("tick_ms", cls.tick_ms),
            reward_food=rewards.get("food", cls.reward_food),
            reward_death=rewards.get("death", cls.reward_death),
            reward_step_penalty=rewards.get("step_penalty", cls.reward_step_penalty),
        )
