"""
Tests for the Gym-like SnakeEnv wrapper.
"""

from dataclasses import replace

import numpy as np
import pytest

from gridsnake.games.snake.env import SnakeEnv
from gridsnake.games.snake.logic import Point


class TestSnakeEnv:
    """Tests for SnakeEnv observations and episodes."""

    def test_sizes(self):
        """Test the observation and action sizes."""
        env = SnakeEnv(seed=1)

        assert env.state_size == 20
        assert env.action_size == 3

    def test_reset_observation(self):
        """Test reset returns a float32 vector of state_size."""
        env = SnakeEnv(grid_size=14, seed=1)

        obs = env.reset()

        assert isinstance(obs, np.ndarray)
        assert obs.dtype == np.float32
        assert obs.shape == (env.state_size,)

    def test_initial_features(self):
        """Test danger and direction features for a fresh right-facing snake."""
        env = SnakeEnv(grid_size=14, seed=1)

        obs = env.reset()

        # No danger one step ahead, right or left
        assert obs[0] == 0.0 and obs[1] == 0.0 and obs[2] == 0.0
        # Direction one-hot: left, right, up, down
        assert list(obs[3:7]) == [0.0, 1.0, 0.0, 0.0]
        # Open board: every flood fill is positive
        assert all(obs[17:20] > 0)

    def test_wall_danger_feature(self):
        """Test a wall straight ahead sets the straight danger flag."""
        env = SnakeEnv(grid_size=14, seed=1)
        env.reset()
        env.game.state = replace(
            env.game.state, snake=(Point(13, 7), Point(12, 7), Point(11, 7))
        )

        obs = env._get_state()

        assert obs[0] == 1.0
        assert obs[17] == 0.0

    def test_step_returns_tuple(self):
        """Test step returns observation, reward, done and info."""
        env = SnakeEnv(grid_size=14, seed=1)
        env.reset()

        obs, reward, done, info = env.step(0)

        assert obs.shape == (20,)
        assert isinstance(reward, float)
        assert isinstance(done, bool)
        assert "score" in info
        assert info["timeout"] is False

    def test_reset_seed_sequence(self):
        """Test the first episode uses the given seed, later ones the next."""
        env = SnakeEnv(seed=5)

        env.reset()
        assert env.game.seed == 5

        env.reset()
        assert env.game.seed == 6

    def test_seed_restarts(self):
        """Test seed() puts the session back on a known seed."""
        env = SnakeEnv(grid_size=10, seed=5)
        env.reset()
        env.step(1)

        env.seed(123)

        assert env.game.seed == 123
        assert env.game.state.ticks == 0

    def test_same_seed_same_observations(self):
        """Test two envs with one seed produce identical episodes."""
        def run(env):
            observations = [env.reset()]
            for action in [0, 1, 0, 2, 0, 0, 1]:
                obs, _, done, _ = env.step(action)
                observations.append(obs)
                if done:
                    break
            return observations

        a = run(SnakeEnv(grid_size=10, seed=9))
        b = run(SnakeEnv(grid_size=10, seed=9))

        assert len(a) == len(b)
        for x, y in zip(a, b):
            np.testing.assert_array_equal(x, y)

    def test_timeout_ends_episode(self):
        """Test going too long without food ends the episode."""
        env = SnakeEnv(grid_size=14, seed=1)
        env.reset()
        env.game.state = replace(env.game.state, food=Point(0, 0))
        env._ticks_since_food = 10_000

        _, reward, done, info = env.step(0)

        assert done is True
        assert info["timeout"] is True
        assert reward == pytest.approx(-10.0)

    def test_replay_frames(self):
        """Test a recorded episode returns its frames."""
        env = SnakeEnv(grid_size=14, seed=1)
        env.reset(record=True)
        env.step(0)

        frames = env.get_replay()

        assert len(frames) == 2
        assert env.get_game_state()["ticks"] == 1
