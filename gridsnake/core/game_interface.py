"""
Abstract game interface for gridsnake.

A game wraps the pure rules with a driver that owns the mutable
(state, rng) pair, and describes itself with GameMetadata.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Any, Tuple, List


@dataclass
class GameMetadata:
    """Metadata describing a game."""

    name: str                           # Display name (e.g., "Snake")
    id: str                             # Unique identifier (e.g., "snake")
    description: str                    # Brief description
    supports_human: bool = True         # Can be driven by direction input?
    deterministic: bool = True          # Same seed, same game?
    tags: List[str] = field(default_factory=list)


class GameInterface(ABC):
    """
    Abstract base class for all games in gridsnake.

    Games handle the rules and own the current state. They are separate
    from the RL environment wrapper.
    """

    @classmethod
    @abstractmethod
    def get_metadata(cls) -> GameMetadata:
        """
        Return metadata about this game.

        Returns:
            GameMetadata describing the game
        """
        pass

    @abstractmethod
    def reset(self) -> Dict[str, Any]:
        """
        Reset the game to initial state.

        Returns:
            Initial game state dictionary
        """
        pass

    @abstractmethod
    def step(self, action: int) -> Tuple[Dict[str, Any], float, bool, Dict[str, Any]]:
        """
        Execute one game step with the given action.

        Args:
            action: The action to take (game-specific encoding)

        Returns:
            Tuple of (state, reward, done, info)
        """
        pass

    @abstractmethod
    def get_state(self) -> Dict[str, Any]:
        """
        Get the current game state for rendering.

        Returns:
            Dictionary containing all state a renderer reads
        """
        pass

    def is_valid_action(self, action: int) -> bool:
        """Check if an action index is within the action space."""
        return 0 <= action < self.action_space_size

    @property
    @abstractmethod
    def action_space_size(self) -> int:
        """Number of possible actions in this game."""
        pass

    @property
    @abstractmethod
    def action_names(self) -> List[str]:
        """Human-readable names for each action, indexed by action number."""
        pass

    # Optional recording support
    def start_recording(self) -> None:
        """Start recording game frames for replay."""
        pass

    def stop_recording(self) -> List[Dict[str, Any]]:
        """
        Stop recording and return recorded frames.

        Returns:
            List of frame dictionaries
        """
        return []

    def get_score(self) -> int:
        """Get the current score."""
        return 0
