#!/usr/bin/env python3
"""
gridsnake - Headless Session Runner

Drive one seeded game without rendering and report how it ended.
Same seed and policy always give the same result.

Usage:
    python scripts/simulate.py                          # Config defaults
    python scripts/simulate.py --seed 42 --ticks 500
    python scripts/simulate.py --policy greedy --json   # Machine-readable output
"""
import sys
import json
import random
import argparse
from pathlib import Path
from typing import Callable, Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gridsnake.games.snake import SnakeGame, Point, DIRECTIONS
from gridsnake.utils.config_loader import load_config, load_game_config
from gridsnake.utils.logging_setup import setup_logging


Policy = Callable[[SnakeGame], Optional[Point]]


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="gridsnake - Run a headless Snake session",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/simulate.py --seed 42
  python scripts/simulate.py --policy random --ticks 1000
  python scripts/simulate.py --config config.yaml --json
"""
    )

    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a config file (default: config/ directory for snake)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="RNG seed (default: from config, else the clock)"
    )
    parser.add_argument(
        "--grid-size",
        type=int,
        default=None,
        help="Grid width and height in cells"
    )
    parser.add_argument(
        "--ticks",
        type=int,
        default=1000,
        help="Maximum number of ticks to run (default: 1000)"
    )
    parser.add_argument(
        "--policy",
        choices=["straight", "random", "greedy"],
        default="greedy",
        help="How the snake picks directions (default: greedy)"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Override the configured log level"
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output results in JSON format"
    )

    return parser.parse_args()


def straight_policy(game: SnakeGame) -> Optional[Point]:
    """Never turn."""
    return None


def make_random_policy(seed: int) -> Policy:
    """Pick any safe direction at random, seeded for reproducibility."""
    chooser = random.Random(seed)

    def policy(game: SnakeGame) -> Optional[Point]:
        safe = [d for d in DIRECTIONS.values()
                if not game.direction.is_opposite(d) and not game.is_danger(game.head + d)]
        return chooser.choice(safe) if safe else None

    return policy


def greedy_policy(game: SnakeGame) -> Optional[Point]:
    """Take the safe direction that gets closest to the food."""
    food = game.state.food
    best = None
    best_distance = None

    for direction in DIRECTIONS.values():
        if game.direction.is_opposite(direction):
            continue
        target = game.head + direction
        if game.is_danger(target):
            continue
        distance = abs(target.x - food.x) + abs(target.y - food.y)
        if best_distance is None or distance < best_distance:
            best, best_distance = direction, distance

    return best


def run_session(game: SnakeGame, policy: Policy, max_ticks: int) -> dict:
    """Tick the game until it ends or max_ticks is reached."""
    for _ in range(max_ticks):
        if game.state.game_over:
            break
        game.set_direction(policy(game))
        game.tick()

    state = game.state
    return {
        "seed": game.seed,
        "grid_size": state.grid_size,
        "ticks": state.ticks,
        "score": state.score,
        "length": len(state.snake),
        "obstacles": len(state.obstacles),
        "game_over": state.game_over,
        "status": game.status,
    }


def main():
    """Main entry point."""
    args = parse_args()

    config = load_config(args.config) if args.config else load_game_config("snake")
    if args.log_level:
        config.logging.level = args.log_level
    setup_logging(config.logging)

    snake_config = config.to_snake_config()
    game = SnakeGame(grid_size=args.grid_size, seed=args.seed, config=snake_config)

    if args.policy == "straight":
        policy = straight_policy
    elif args.policy == "random":
        policy = make_random_policy(game.seed)
    else:
        policy = greedy_policy

    results = run_session(game, policy, args.ticks)

    if args.json:
        print(json.dumps(results, indent=2))
    else:
        print("=" * 40)
        print("Session Results")
        print("=" * 40)
        print(f"Seed:       {results['seed']}")
        print(f"Ticks:      {results['ticks']}")
        print(f"Score:      {results['score']}")
        print(f"Length:     {results['length']}")
        print(f"Obstacles:  {results['obstacles']}")
        print(f"Status:     {results['status']}")
        print("=" * 40)


if __name__ == "__main__":
    main()
