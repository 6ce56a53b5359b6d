"""
Snake Game Logic - Pure, deterministic state transitions.

Every function here is side-effect free: it takes a GameState (and, where
randomness is needed, an rng callable) and returns a new value. The caller
owns the current state and the rng and threads them through each call.
"""
import math
from dataclasses import dataclass, replace
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Any


Rng = Callable[[], float]

_LCG_MULTIPLIER = 1664525
_LCG_INCREMENT = 1013904223
_UINT32 = 0x100000000


@dataclass(frozen=True)
class Point:
    """A grid cell, or a unit direction vector."""
    x: int
    y: int

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def is_opposite(self, other: "Point") -> bool:
        """True if the two vectors cancel each other out."""
        return self.x + other.x == 0 and self.y + other.y == 0

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}


UP = Point(0, -1)
DOWN = Point(0, 1)
LEFT = Point(-1, 0)
RIGHT = Point(1, 0)

DIRECTIONS: Dict[str, Point] = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}


@dataclass(frozen=True)
class GameState:
    """
    Immutable snapshot of one game.

    The snake is stored head first. ``next_dir`` is the queued direction
    that the next tick will apply; ``dir`` is the one the last tick applied.
    ``seed`` is the seed this lineage was created from, not live rng state.
    """
    grid_size: int
    snake: Tuple[Point, ...]
    dir: Point
    next_dir: Optional[Point]
    food: Point
    obstacles: Tuple[Point, ...]
    obstacle_spawn_every: int
    max_obstacles: int
    ticks: int = 0
    score: int = 0
    game_over: bool = False
    paused: bool = False
    seed: int = 1

    @property
    def head(self) -> Point:
        return self.snake[0]

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a plain dictionary for rendering or replay frames.

        Returns:
            Dictionary with every public field
        """
        return {
            "grid_size": self.grid_size,
            "snake": [p.to_dict() for p in self.snake],
            "dir": self.dir.to_dict(),
            "next_dir": self.next_dir.to_dict() if self.next_dir else None,
            "food": self.food.to_dict(),
            "obstacles": [p.to_dict() for p in self.obstacles],
            "obstacle_spawn_every": self.obstacle_spawn_every,
            "max_obstacles": self.max_obstacles,
            "ticks": self.ticks,
            "score": self.score,
            "game_over": self.game_over,
            "paused": self.paused,
            "seed": self.seed,
        }


def create_rng(seed: float) -> Rng:
    """
    Create a seeded linear congruential generator.

    Args:
        seed: Initial state, coerced to an unsigned 32-bit integer
            (NaN and infinities become 0)

    Returns:
        Callable returning the next value in [0, 1) on every call
    """
    if isinstance(seed, float) and not math.isfinite(seed):
        seed = 0
    s = int(seed) % _UINT32

    def rng() -> float:
        nonlocal s
        s = (_LCG_MULTIPLIER * s + _LCG_INCREMENT) % _UINT32
        return s / _UINT32

    return rng


def find_open_cells(grid_size: int, occupied: Iterable[Point]) -> List[Point]:
    """
    List the unoccupied cells of the grid in row-major order.

    Args:
        grid_size: Width and height of the grid in cells
        occupied: Cells to exclude

    Returns:
        Open cells, scanned by increasing y then x
    """
    blocked = set(occupied)
    return [
        Point(x, y)
        for y in range(grid_size)
        for x in range(grid_size)
        if Point(x, y) not in blocked
    ]


def _pick(cells: List[Point], rng: Rng) -> Point:
    return cells[int(rng() * len(cells))]


def place_food(
    snake: Iterable[Point],
    obstacles: Iterable[Point],
    grid_size: int,
    rng: Rng
) -> Point:
    """
    Choose a random open cell for food.

    Falls back to (0, 0) when the board is full. That cell is not checked
    for being free.
    """
    open_cells = find_open_cells(grid_size, [*snake, *obstacles])
    if not open_cells:
        return Point(0, 0)
    return _pick(open_cells, rng)


def place_obstacle(
    snake: Iterable[Point],
    food: Point,
    obstacles: Iterable[Point],
    grid_size: int,
    rng: Rng
) -> Optional[Point]:
    """
    Choose a random open cell for a new obstacle.

    Returns:
        The chosen cell, or None when nothing is free (skip this spawn)
    """
    open_cells = find_open_cells(grid_size, [*snake, *obstacles, food])
    if not open_cells:
        return None
    return _pick(open_cells, rng)


def create_initial_state(
    grid_size: int = 20,
    seed: int = 1,
    obstacle_spawn_every: int = 18,
    max_obstacles: int = 6
) -> GameState:
    """
    Build a fresh game: a three-segment snake in the center heading right.

    Args:
        grid_size: Width and height of the grid in cells
        seed: Seed recorded on the state and used for the first food cell
        obstacle_spawn_every: Tick interval between obstacle spawn attempts
        max_obstacles: Cap on the number of obstacles

    Returns:
        Initial GameState
    """
    center = grid_size // 2
    snake = (
        Point(center, center),
        Point(center - 1, center),
        Point(center - 2, center),
    )
    food = place_food(snake, (), grid_size, create_rng(seed))

    return GameState(
        grid_size=grid_size,
        snake=snake,
        dir=RIGHT,
        next_dir=RIGHT,
        food=food,
        obstacles=(),
        obstacle_spawn_every=obstacle_spawn_every,
        max_obstacles=max_obstacles,
        ticks=0,
        score=0,
        game_over=False,
        paused=False,
        seed=seed,
    )


def in_bounds(point: Point, grid_size: int) -> bool:
    """Check whether a point lies on the grid."""
    return 0 <= point.x < grid_size and 0 <= point.y < grid_size


def step(state: GameState, rng: Rng) -> GameState:
    """
    Advance the game by one tick.

    Paused and finished games are returned unchanged. A move that leaves
    the grid or lands on the body (tail included) or an obstacle ends the
    game without moving the snake.

    Args:
        state: Current state
        rng: Random source for food and obstacle placement

    Returns:
        The next state
    """
    if state.game_over or state.paused:
        return state

    direction = state.next_dir or state.dir
    head = state.head + direction

    if (
        not in_bounds(head, state.grid_size)
        or head in state.snake
        or head in state.obstacles
    ):
        return replace(state, dir=direction, game_over=True)

    ate_food = head == state.food
    snake = (head,) + state.snake
    if not ate_food:
        snake = snake[:-1]

    food = state.food
    score = state.score
    if ate_food:
        score += 1
        food = place_food(snake, state.obstacles, state.grid_size, rng)

    obstacles = state.obstacles
    ticks = state.ticks + 1
    if ticks % state.obstacle_spawn_every == 0 and len(obstacles) < state.max_obstacles:
        spawned = place_obstacle(snake, food, obstacles, state.grid_size, rng)
        if spawned is not None:
            obstacles = obstacles + (spawned,)

    return replace(
        state,
        dir=direction,
        snake=snake,
        food=food,
        obstacles=obstacles,
        ticks=ticks,
        score=score,
    )


def set_direction(state: GameState, new_dir: Optional[Point]) -> GameState:
    """
    Queue a direction for the next tick.

    Ignored when new_dir is None, or when it would reverse a snake longer
    than one segment.
    """
    if new_dir is None:
        return state

    if len(state.snake) > 1 and state.dir.is_opposite(new_dir):
        return state

    return replace(state, next_dir=new_dir)


def toggle_pause(state: GameState) -> GameState:
    """Flip the paused flag (no-op once the game is over)."""
    if state.game_over:
        return state
    return replace(state, paused=not state.paused)


def reset(state: GameState, seed: int) -> GameState:
    """Start over with a new seed, keeping the board settings."""
    return create_initial_state(
        grid_size=state.grid_size,
        seed=seed,
        obstacle_spawn_every=state.obstacle_spawn_every,
        max_obstacles=state.max_obstacles,
    )


def status_text(state: GameState) -> str:
    """Human-readable status line for display."""
    if state.game_over:
        return "Game Over - press R to restart"
    if state.paused:
        return "Paused - press Space to resume"
    return "Playing"
