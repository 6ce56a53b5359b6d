"""
Snake Game Session - Owns the live (state, rng) pair.

The rules live in logic.py as pure functions. SnakeGame is the driver
around them: it holds the current GameState and the rng, threads both
through every transition, and records frames for replay.
"""
import logging
import time
from dataclasses import replace
from typing import List, Tuple, Optional, Dict, Any, Union

from ...core.game_interface import GameInterface, GameMetadata
from .config import SnakeConfig
from . import logic
from .logic import GameState, Point, DIRECTIONS, UP, DOWN, LEFT, RIGHT


logger = logging.getLogger(__name__)

SEED_MODULUS = 100000

# Clockwise order on a y-down grid
CLOCK_WISE = [RIGHT, DOWN, LEFT, UP]


def clock_seed() -> int:
    """Derive a seed from the wall clock."""
    return int(time.time() * 1000) % SEED_MODULUS


class SnakeGame(GameInterface):
    """
    Snake session with obstacles.

    Direction input is queued with set_direction() and applied on the next
    tick(). The game ends when the snake hits a wall, itself or an
    obstacle; after that only restart() makes progress.
    """

    def __init__(
        self,
        grid_size: Optional[int] = None,
        seed: Optional[int] = None,
        obstacle_spawn_every: Optional[int] = None,
        max_obstacles: Optional[int] = None,
        reward_config: Optional[Dict[str, float]] = None,
        config: Optional[SnakeConfig] = None
    ):
        """
        Initialize the session.

        Args:
            grid_size: Grid width and height in cells
            seed: RNG seed (derived from the clock if None)
            obstacle_spawn_every: Tick interval between obstacle spawns
            max_obstacles: Cap on the number of obstacles
            reward_config: Rewards for step(); keys food, death, step_penalty
            config: Defaults for any argument left as None
        """
        config = config or SnakeConfig()
        overrides = {
            "grid_size": grid_size,
            "obstacle_spawn_every": obstacle_spawn_every,
            "max_obstacles": max_obstacles,
        }
        config = replace(
            config, **{k: v for k, v in overrides.items() if v is not None}
        ).validate()

        self.grid_size = config.grid_size
        self.obstacle_spawn_every = config.obstacle_spawn_every
        self.max_obstacles = config.max_obstacles

        if seed is None:
            seed = config.seed if config.seed is not None else clock_seed()

        self.rewards = config.get_reward_config()
        if reward_config:
            self.rewards.update(reward_config)

        # For replay recording
        self.history: List[Dict[str, Any]] = []
        self.recording: bool = False

        self.seed: int = seed
        self.rng = logic.create_rng(seed)
        self.state: GameState = logic.create_initial_state(
            grid_size=self.grid_size,
            seed=seed,
            obstacle_spawn_every=self.obstacle_spawn_every,
            max_obstacles=self.max_obstacles,
        )
        logger.info(
            "New game: grid=%d seed=%d spawn_every=%d max_obstacles=%d",
            self.grid_size, seed, self.obstacle_spawn_every, self.max_obstacles,
        )

    @classmethod
    def get_metadata(cls) -> GameMetadata:
        """Return metadata about the Snake game."""
        return GameMetadata(
            name="Snake",
            id="snake",
            description="Eat food, grow longer, dodge the walls, yourself and the rocks",
            supports_human=True,
            deterministic=True,
            tags=["grid", "obstacles"],
        )

    # --- Driver commands -------------------------------------------------

    def tick(self) -> GameState:
        """
        Advance the game by one tick.

        Returns:
            The new current state
        """
        before = self.state
        self.state = logic.step(before, self.rng)

        if self.state is not before:
            if self.recording:
                self._record_frame()
            if self.state.game_over:
                logger.info(
                    "Game over at tick %d, score %d, length %d",
                    self.state.ticks, self.state.score, len(self.state.snake),
                )
            else:
                logger.debug("Tick %d head=%s", self.state.ticks, self.state.head)

        return self.state

    def set_direction(self, direction: Union[Point, str, None]) -> GameState:
        """
        Queue a direction for the next tick.

        Args:
            direction: A unit Point or one of "up", "down", "left", "right"

        Raises:
            ValueError: If a direction name is not recognized
        """
        if isinstance(direction, str):
            key = direction.strip().lower()
            if key not in DIRECTIONS:
                raise ValueError(f"Unknown direction: {direction!r}")
            direction = DIRECTIONS[key]

        self.state = logic.set_direction(self.state, direction)
        return self.state

    def toggle_pause(self) -> GameState:
        """Pause or resume the game."""
        self.state = logic.toggle_pause(self.state)
        return self.state

    def restart(self, seed: Optional[int] = None) -> GameState:
        """
        Start a new game, reseeding the rng.

        Args:
            seed: New seed (defaults to the next seed in sequence)

        Returns:
            The fresh state
        """
        if seed is None:
            seed = (self.seed + 1) % SEED_MODULUS

        self.seed = seed
        self.rng = logic.create_rng(seed)
        self.state = logic.reset(self.state, seed)
        logger.info("Restarted with seed %d", seed)

        self.history = []
        if self.recording:
            self._record_frame()

        return self.state

    @property
    def status(self) -> str:
        return logic.status_text(self.state)

    # --- GameInterface ---------------------------------------------------

    @property
    def action_space_size(self) -> int:
        return 3

    @property
    def action_names(self) -> List[str]:
        return ["Straight", "Turn Right", "Turn Left"]

    def reset(self) -> Dict[str, Any]:
        """
        Replay the current seed from the start.

        Returns:
            Dictionary containing the initial game state
        """
        self.restart(self.seed)
        return self.get_state()

    def step(self, action: int) -> Tuple[Dict[str, Any], float, bool, Dict[str, Any]]:
        """
        Turn relative to the current heading, then tick once.

        Args:
            action: 0 = straight, 1 = right turn, 2 = left turn

        Returns:
            Tuple of (state, reward, done, info)
        """
        if not self.is_valid_action(action):
            raise ValueError(f"Invalid action: {action}")

        before = self.state
        if before.game_over:
            return self.get_state(), 0.0, True, {"score": before.score}

        idx = CLOCK_WISE.index(before.dir)
        if action == 1:
            self.set_direction(CLOCK_WISE[(idx + 1) % 4])
        elif action == 2:
            self.set_direction(CLOCK_WISE[(idx - 1) % 4])
        else:
            self.set_direction(before.dir)

        after = self.tick()

        if after.game_over:
            reward = self.rewards["death"]
        elif after.score > before.score:
            reward = self.rewards["food"]
        else:
            reward = self.rewards["step_penalty"]

        return self.get_state(), reward, after.game_over, {"score": after.score}

    def get_state(self) -> Dict[str, Any]:
        """
        Get current game state for rendering or AI.

        Returns:
            Dictionary containing full game state
        """
        state = self.state.to_dict()
        state["status"] = self.status
        return state

    def get_score(self) -> int:
        return self.state.score

    # --- Queries -----------------------------------------------------------

    @property
    def head(self) -> Point:
        return self.state.head

    @property
    def direction(self) -> Point:
        return self.state.dir

    def is_danger(self, point: Point) -> bool:
        """
        Check if moving to a point would end the game.

        Args:
            point: Point to check

        Returns:
            True if the point is off the grid, on the snake or on an obstacle
        """
        return (
            not logic.in_bounds(point, self.state.grid_size)
            or point in self.state.snake
            or point in self.state.obstacles
        )

    # --- Recording ---------------------------------------------------------

    def start_recording(self):
        """Start recording game history for replay."""
        self.recording = True
        self.history = []
        self._record_frame()

    def stop_recording(self) -> List[Dict[str, Any]]:
        """Stop recording and return the history."""
        self.recording = False
        return self.history

    def _record_frame(self):
        """Record the current frame to history."""
        frame = self.state.to_dict()
        frame["frame"] = len(self.history)
        self.history.append(frame)
