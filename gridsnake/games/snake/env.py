"""
Snake Environment - Gym-like wrapper implementing EnvInterface.
Provides 20-dimensional state encoding suitable for neural network input.
"""

import numpy as np
from collections import deque
from typing import Tuple, Dict, Any, List, Optional

from ...core.env_interface import EnvInterface
from .config import SnakeConfig
from .game import SnakeGame, CLOCK_WISE
from .logic import Point


class SnakeEnv(EnvInterface):
    """
    Gym-like environment wrapper for the Snake game implementing EnvInterface.

    Provides a clean interface for reinforcement learning:
    - reset() -> initial state
    - step(action) -> (next_state, reward, done, info)

    State is a 20-dimensional feature vector encoding danger (walls, body
    and obstacles), direction, food, multi-step danger look-ahead, and
    reachable cells (flood fill).

    An episode is also cut short when the snake goes 100 * length ticks
    without eating.
    """

    def __init__(
        self,
        grid_size: Optional[int] = None,
        seed: Optional[int] = None,
        reward_config: Optional[Dict[str, float]] = None,
        config: Optional[SnakeConfig] = None
    ):
        """
        Initialize the environment.

        Args:
            grid_size: Grid width and height in cells
            seed: RNG seed for the first episode
            reward_config: Optional reward configuration dictionary
            config: Optional Snake configuration
        """
        self.game = SnakeGame(
            grid_size=grid_size,
            seed=seed,
            reward_config=reward_config,
            config=config,
        )
        self.grid_size = self.game.grid_size
        self._ticks_since_food = 0
        self._episodes = 0

    @property
    def state_size(self) -> int:
        """Get the state size (20 features)."""
        return 20

    @property
    def action_size(self) -> int:
        """Get the action size (3 actions: straight, right, left)."""
        return 3

    def reset(self, record: bool = False) -> np.ndarray:
        """
        Start a new episode.

        The first episode uses the constructor seed, later ones the next
        seed in sequence.

        Args:
            record: If True, start recording for replay

        Returns:
            Initial state as numpy array
        """
        if self._episodes == 0:
            self.game.restart(self.game.seed)
        else:
            self.game.restart()
        self._episodes += 1
        self._ticks_since_food = 0
        if record:
            self.game.start_recording()
        return self._get_state()

    def step(self, action: int) -> Tuple[np.ndarray, float, bool, Dict[str, Any]]:
        """
        Execute action and return results.

        Args:
            action: 0 = straight, 1 = right turn, 2 = left turn

        Returns:
            Tuple of (next_state, reward, done, info)
        """
        score_before = self.game.get_score()
        _, reward, done, info = self.game.step(action)

        if self.game.get_score() > score_before:
            self._ticks_since_food = 0
        else:
            self._ticks_since_food += 1

        info["timeout"] = False
        if not done and self._ticks_since_food > 100 * len(self.game.state.snake):
            done = True
            reward = self.game.rewards["death"]
            info["timeout"] = True

        return self._get_state(), reward, done, info

    def _turn_right(self, direction: Point) -> Point:
        """Get direction after turning right (clockwise)."""
        idx = CLOCK_WISE.index(direction)
        return CLOCK_WISE[(idx + 1) % 4]

    def _turn_left(self, direction: Point) -> Point:
        """Get direction after turning left (counter-clockwise)."""
        idx = CLOCK_WISE.index(direction)
        return CLOCK_WISE[(idx - 1) % 4]

    def _get_point_n_steps(self, direction: Point, n: int) -> Point:
        """Get the point N steps in the given direction from head."""
        head = self.game.head
        return Point(head.x + direction.x * n, head.y + direction.y * n)

    def _count_reachable_cells(self, start_point: Point, max_depth: int = 20) -> int:
        """
        Count reachable cells from a starting point using BFS.
        This detects traps - if few cells are reachable, the snake would be trapped.

        Args:
            start_point: Starting position to check from
            max_depth: Maximum search depth (limits computation)

        Returns:
            Number of reachable cells
        """
        if self.game.is_danger(start_point):
            return 0

        blocked = set(self.game.state.snake) | set(self.game.state.obstacles)
        visited = {start_point}
        queue = deque([(start_point, 0)])
        count = 1

        while queue:
            point, depth = queue.popleft()

            if depth >= max_depth:
                continue

            for delta in CLOCK_WISE:
                neighbor = point + delta

                if neighbor in visited:
                    continue

                if (
                    0 <= neighbor.x < self.grid_size
                    and 0 <= neighbor.y < self.grid_size
                    and neighbor not in blocked
                ):
                    visited.add(neighbor)
                    queue.append((neighbor, depth + 1))
                    count += 1

        return count

    def _get_state(self) -> np.ndarray:
        """
        Convert game state to 20-dimensional feature vector.

        Features:
        [0-2]: Danger straight, right, left (1 step)
        [3-6]: Direction (one-hot: left, right, up, down)
        [7-10]: Food location relative to head (left, right, up, down)
        [11-13]: Danger 2 steps ahead (straight, right, left)
        [14-16]: Danger 3 steps ahead (straight, right, left)
        [17-19]: Reachable cells (flood fill) for each move direction

        Returns:
            State as numpy array of shape (20,)
        """
        head = self.game.head
        food = self.game.state.food
        straight = self.game.direction
        right = self._turn_right(straight)
        left = self._turn_left(straight)
        danger = self.game.is_danger

        # Flood fill normalization factor
        max_cells = (self.grid_size * self.grid_size) / 2.0

        state = [
            danger(head + straight),
            danger(head + right),
            danger(head + left),

            straight.x < 0,
            straight.x > 0,
            straight.y < 0,
            straight.y > 0,

            food.x < head.x,  # Food is to the left
            food.x > head.x,  # Food is to the right
            food.y < head.y,  # Food is above (y=0 is top)
            food.y > head.y,  # Food is below

            danger(self._get_point_n_steps(straight, 2)),
            danger(self._get_point_n_steps(right, 2)),
            danger(self._get_point_n_steps(left, 2)),

            danger(self._get_point_n_steps(straight, 3)),
            danger(self._get_point_n_steps(right, 3)),
            danger(self._get_point_n_steps(left, 3)),

            self._count_reachable_cells(head + straight) / max_cells,
            self._count_reachable_cells(head + right) / max_cells,
            self._count_reachable_cells(head + left) / max_cells,
        ]

        return np.array(state, dtype=np.float32)

    def get_game_state(self) -> Dict[str, Any]:
        """
        Get raw game state for visualization.

        Returns:
            Dictionary containing full game state
        """
        return self.game.get_state()

    def get_replay(self) -> List[Dict[str, Any]]:
        """
        Get the recorded game history.

        Returns:
            List of game state dictionaries
        """
        return self.game.stop_recording()

    def get_score(self) -> int:
        """Get current game score."""
        return self.game.get_score()

    def seed(self, seed: Optional[int] = None) -> None:
        """Restart the current episode from the given seed."""
        if seed is not None:
            self.game.restart(seed)
            self._ticks_since_food = 0
