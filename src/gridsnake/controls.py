# controls.py
from typing import Iterable

import pygame # type: ignore

from .config import Direction
from .game import Intents

KEY_TO_DIRECTION = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}


def read_intents(events: Iterable["pygame.event.Event"]) -> Intents:
    """Collect this frame's key presses, in the order they arrived."""
    intents = Intents()
    for event in events:
        if event.type == pygame.QUIT:
            intents.quit = True
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                intents.quit = True
            elif event.key == pygame.K_r:
                intents.restart = True
            elif event.key in KEY_TO_DIRECTION:
                intents.directions.append(KEY_TO_DIRECTION[event.key])
    return intents
