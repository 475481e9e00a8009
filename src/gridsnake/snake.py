# snake.py
from enum import Enum
from typing import List, Optional, Set, Tuple

from .config import GRID_W, GRID_H, START, CFG, Config, Direction

Cell = Tuple[int, int]


class MoveResult(Enum):
    MOVED = "moved"
    ATE = "ate"
    OUT_OF_BOUNDS = "out_of_bounds"
    SELF_COLLISION = "self_collision"


def in_bounds(cell: Cell) -> bool:
    """Check if a cell is inside the grid."""
    x, y = cell
    return 0 <= x < GRID_W and 0 <= y < GRID_H


class Snake:
    """
    Grid snake, head at segments[0].

    `blocked` holds the inverse of the last committed move so that two quick
    turns between ticks cannot fold the snake back onto itself.
    """

    def __init__(
        self,
        segments: Optional[List[Cell]] = None,
        facing: Direction = Direction.RIGHT,
        cfg: Config = CFG,
    ):
        self.segments: List[Cell] = list(segments) if segments else [START]
        self.facing = facing
        self.blocked: Direction = facing.inverse
        self.speed = 1.0
        self.has_eaten = False
        self.score = 0
        self.is_alive = True
        self.cfg = cfg

    @property
    def head(self) -> Cell:
        return self.segments[0]

    def occupied(self) -> Set[Cell]:
        return set(self.segments)

    def set_facing(self, direction: Direction) -> bool:
        if direction == self.facing or direction == self.blocked:
            return False
        self.facing = direction
        return True

    def advance(self, apple: Optional[Cell]) -> MoveResult:
        """Move one cell along `facing`, growing if the new head lands on `apple`."""
        self.has_eaten = False
        self.blocked = self.facing.inverse

        new_head = self.facing.step(self.head)
        if not in_bounds(new_head):
            self.is_alive = False
            return MoveResult.OUT_OF_BOUNDS

        self.segments.insert(0, new_head)
        if new_head == apple:
            self.score += 1
            self.has_eaten = True
            self.speed = max(self.cfg.min_speed, self.speed - self.cfg.speed_step)
        else:
            self.segments.pop()

        if self.is_colliding_with_itself():
            self.is_alive = False
            return MoveResult.SELF_COLLISION
        return MoveResult.ATE if self.has_eaten else MoveResult.MOVED

    def is_out_of_bounds(self) -> bool:
        return not in_bounds(self.head)

    def is_colliding_with_itself(self) -> bool:
        return self.head in self.segments[1:]
