"""
Tests for the headless session runner script.
"""

from dataclasses import replace

from gridsnake.games.snake import SnakeGame, Point


class TestSimulate:
    """Tests for scripts/simulate.py policies and session loop."""

    def test_straight_policy_hits_wall(self):
        """Test never turning runs into the right wall after six moves."""
        from simulate import run_session, straight_policy

        game = SnakeGame(grid_size=14, seed=1)
        results = run_session(game, straight_policy, max_ticks=100)

        assert results["game_over"] is True
        assert results["ticks"] == 6
        assert results["status"].startswith("Game Over")

    def test_tick_limit(self):
        """Test the loop stops at max_ticks."""
        from simulate import run_session, straight_policy

        game = SnakeGame(grid_size=14, seed=1)
        results = run_session(game, straight_policy, max_ticks=2)

        assert results["ticks"] == 2
        assert results["game_over"] is False

    def test_greedy_policy_heads_for_food(self):
        """Test greedy picks the safe move closest to the food."""
        from simulate import greedy_policy

        game = SnakeGame(grid_size=14, seed=1)
        game.state = replace(game.state, food=Point(7, 2))

        assert greedy_policy(game) == Point(0, -1)

    def test_greedy_is_deterministic(self):
        """Test the same seed gives the same greedy session."""
        from simulate import run_session, greedy_policy

        first = run_session(SnakeGame(grid_size=10, seed=8), greedy_policy, 300)
        second = run_session(SnakeGame(grid_size=10, seed=8), greedy_policy, 300)

        assert first == second

    def test_random_policy_is_seeded(self):
        """Test the random policy replays for one seed."""
        from simulate import run_session, make_random_policy

        first = run_session(SnakeGame(grid_size=10, seed=8), make_random_policy(8), 300)
        second = run_session(SnakeGame(grid_size=10, seed=8), make_random_policy(8), 300)

        assert first == second
