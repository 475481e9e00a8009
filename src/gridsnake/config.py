from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

# ----- Window & grid -----
GRID_W, GRID_H = 10, 10
CELL_SIZE = 50
WIDTH, HEIGHT = GRID_W * CELL_SIZE, GRID_H * CELL_SIZE
START = (2, 2)

# ----- Colors -----
BOARD = (150, 190, 110)
HEAD  = (30, 110, 30)
FED   = (170, 60, 40)   # head colour on the tick an apple is eaten
BODY  = (80, 200, 80)
TAIL  = (60, 160, 60)
RED   = (200, 70, 70)
TEXT  = (0, 0, 0)


# ----- Directions (dx, dy) -----
class Direction(Enum):
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def inverse(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))

    def step(self, cell: Tuple[int, int]) -> Tuple[int, int]:
        """Cell one unit away from `cell` in this direction."""
        dx, dy = self.value
        return (cell[0] + dx, cell[1] + dy)


# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    seed: Optional[int] = None
    base_interval_s: float = 0.5   # tick interval at speed factor 1.0
    speed_step: float = 0.05       # speed factor lost per apple
    min_speed: float = 0.1         # floor for the speed factor
    fps: int = 60
    highscore_file: str = "highscore.txt"
    debug_board: bool = False

    def __post_init__(self):
        if self.base_interval_s <= 0:
            raise ValueError(f"base_interval_s must be positive, got {self.base_interval_s}")
        if not 0 <= self.speed_step < 1:
            raise ValueError(f"speed_step must be in [0, 1), got {self.speed_step}")
        if not 0 < self.min_speed <= 1:
            raise ValueError(f"min_speed must be in (0, 1], got {self.min_speed}")
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")


CFG = Config()
