"""
Abstract RL environment interface for gridsnake.

Provides a Gym-like interface that game environments implement.
"""

from abc import ABC, abstractmethod
from typing import Tuple, Dict, Any, List, Optional
import numpy as np


class EnvInterface(ABC):
    """
    Abstract RL environment interface (Gym-like).

    Environments wrap games and encode their state as observations.
    """

    @property
    @abstractmethod
    def state_size(self) -> int:
        """Dimension of the observation vector."""
        pass

    @property
    @abstractmethod
    def action_size(self) -> int:
        """Number of possible actions."""
        pass

    @abstractmethod
    def reset(self, record: bool = False) -> np.ndarray:
        """
        Reset the environment to initial state.

        Args:
            record: Whether to record this episode for replay

        Returns:
            Initial observation as numpy array
        """
        pass

    @abstractmethod
    def step(self, action: int) -> Tuple[np.ndarray, float, bool, Dict[str, Any]]:
        """
        Execute one environment step.

        Args:
            action: The action to take

        Returns:
            Tuple of (observation, reward, done, info)
        """
        pass

    @abstractmethod
    def get_game_state(self) -> Dict[str, Any]:
        """Get the raw game state dictionary."""
        pass

    def get_replay(self) -> List[Dict[str, Any]]:
        """Get recorded frames if recording was enabled."""
        return []

    def close(self) -> None:
        """Clean up any resources."""
        pass

    def seed(self, seed: Optional[int] = None) -> None:
        """
        Set random seed for reproducibility.

        Args:
            seed: Random seed value
        """
        pass
