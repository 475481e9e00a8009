# apple.py
import random
from typing import Iterable, Optional, Tuple

from .config import GRID_W, GRID_H

Cell = Tuple[int, int]


class Apple:
    def __init__(self, occupied: Iterable[Cell] = (), rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.position: Cell = self.respawn(occupied)

    def respawn(self, occupied: Iterable[Cell]) -> Cell:
        """
        Pick a uniformly random free cell by rejection sampling and move there.
        Raises ValueError when the occupied set already covers the whole grid.
        """
        taken = set(occupied)
        if len(taken) >= GRID_W * GRID_H:
            raise ValueError("No free cell left for the apple")
        while True:
            cell = (self.rng.randrange(GRID_W), self.rng.randrange(GRID_H))
            if cell not in taken:
                self.position = cell
                return cell
