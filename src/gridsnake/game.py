# game.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple
import random

import numpy as np # type: ignore

from .config import GRID_W, GRID_H, CFG, Config, Direction
from .apple import Apple
from .highscore import HighScoreFile
from .snake import MoveResult, Snake

# ---------- Helpers ----------
class Phase(Enum):
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class Intents:
    """What the player asked for during one frame."""
    directions: List[Direction] = field(default_factory=list)
    restart: bool = False
    quit: bool = False


@dataclass
class TickScheduler:
    """Accumulates frame time and releases at most one movement tick per frame."""
    accumulated: float = 0.0

    def accumulate(self, dt: float) -> None:
        self.accumulated += max(dt, 0.0)

    def consume_tick(self, interval: float) -> bool:
        if self.accumulated < interval:
            return False
        # leftover time is dropped: a slow frame never produces a burst of moves
        self.accumulated = 0.0
        return True


def tick_interval(snake: Snake, cfg: Config = CFG) -> float:
    return cfg.base_interval_s * snake.speed

# ---------- State ----------
@dataclass
class GameState:
    snake: Snake
    apple: Apple
    high_score: int
    rng: random.Random
    cfg: Config = CFG
    phase: Phase = Phase.PLAYING
    scheduler: TickScheduler = field(default_factory=TickScheduler)
    reason: Optional[MoveResult] = None   # why the last game ended; None for a full board

    @property
    def game_over(self) -> bool:
        return self.phase is Phase.GAME_OVER


def new_game_state(high_score: int = 0, rng: Optional[random.Random] = None, cfg: Config = CFG) -> GameState:
    if rng is None:
        rng = random.Random(cfg.seed)
    snake = Snake(cfg=cfg)
    apple = Apple(snake.occupied(), rng)
    return GameState(snake=snake, apple=apple, high_score=high_score, rng=rng, cfg=cfg)


def restart_game(state: GameState) -> None:
    """Fresh snake, apple and timer; the high score carries over."""
    state.snake = Snake(cfg=state.cfg)
    state.apple = Apple(state.snake.occupied(), state.rng)
    state.scheduler = TickScheduler()
    state.phase = Phase.PLAYING
    state.reason = None
    print(f"[GAME] Restarted (high score {state.high_score})")

# ---------- Update ----------
def enter_game_over(state: GameState, store: HighScoreFile, reason: Optional[MoveResult]) -> None:
    score = state.snake.score
    try:
        if score > state.high_score:
            store.save(score)
            state.high_score = score
    finally:
        # a failed save still ends the game; it is not retried on later frames
        state.phase = Phase.GAME_OVER
        state.reason = reason

    if reason is MoveResult.OUT_OF_BOUNDS:
        print("[GAME] Snake is out of bounds!")
    elif reason is MoveResult.SELF_COLLISION:
        print("[GAME] Snake ate itself!")
    else:
        print("[GAME] Board is full!")
    print(f"[GAME] Game over. score={score}, best={state.high_score}")


def step_game(state: GameState, store: HighScoreFile) -> bool:
    """
    Advance the snake by one tick.
    Returns True if alive, False if game over.
    """
    result = state.snake.advance(state.apple.position)

    if result in (MoveResult.OUT_OF_BOUNDS, MoveResult.SELF_COLLISION):
        enter_game_over(state, store, result)
        return False

    if result is MoveResult.ATE:
        occupied = state.snake.occupied()
        if len(occupied) >= GRID_W * GRID_H:
            enter_game_over(state, store, None)
            return False
        state.apple.respawn(occupied)
    return True


def update(state: GameState, intents: Intents, dt: float, store: HighScoreFile) -> None:
    """
    One frame of simulation. Direction intents are applied every frame and
    take effect on the next tick; movement only happens once the tick interval
    has elapsed. `dt` is in seconds.
    """
    if state.phase is Phase.GAME_OVER:
        if intents.restart:
            restart_game(state)
        return

    if not state.snake.is_alive:
        return

    for direction in intents.directions:
        state.snake.set_facing(direction)

    state.scheduler.accumulate(dt)
    if state.scheduler.consume_tick(tick_interval(state.snake, state.cfg)):
        step_game(state, store)

# ---------- Board view ----------
@dataclass(frozen=True)
class BoardSnapshot:
    segments: Tuple[Tuple[int, int], ...]
    apple: Tuple[int, int]
    score: int
    game_over: bool
    high_score: int
    has_eaten: bool = False


def snapshot(state: GameState) -> BoardSnapshot:
    return BoardSnapshot(
        segments=tuple(state.snake.segments),
        apple=state.apple.position,
        score=state.snake.score,
        game_over=state.game_over,
        high_score=state.high_score,
        has_eaten=state.snake.has_eaten,
    )


def board_grid(view: BoardSnapshot) -> np.ndarray:
    """Character grid indexed [y, x]: 'h' head, 's' body, 'a' apple, '.' empty."""
    grid = np.full((GRID_H, GRID_W), ".", dtype="<U1")
    ax, ay = view.apple
    grid[ay, ax] = "a"
    for x, y in view.segments[1:]:
        grid[y, x] = "s"
    hx, hy = view.segments[0]
    grid[hy, hx] = "h"
    return grid


def format_board(grid: np.ndarray) -> str:
    return "\n".join("".join(row) for row in grid)
