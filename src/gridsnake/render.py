# render.py
from typing import Tuple

import pygame # type: ignore

from .config import WIDTH, HEIGHT, CELL_SIZE, BOARD, HEAD, FED, BODY, TAIL, RED, TEXT
from .game import BoardSnapshot


def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * CELL_SIZE, gy * CELL_SIZE, CELL_SIZE, CELL_SIZE)
    pygame.draw.rect(screen, color, rect)


def head_color(view: BoardSnapshot) -> Tuple[int, int, int]:
    return FED if view.has_eaten else HEAD


def draw_game(screen: pygame.Surface, font: pygame.font.Font, view: BoardSnapshot) -> None:
    screen.fill(BOARD)
    # apple
    draw_cell(screen, view.apple[0], view.apple[1], RED)
    # snake: body, then tail and head on top
    for x, y in view.segments[1:]:
        draw_cell(screen, x, y, BODY)
    if len(view.segments) > 1:
        tx, ty = view.segments[-1]
        draw_cell(screen, tx, ty, TAIL)
    hx, hy = view.segments[0]
    draw_cell(screen, hx, hy, head_color(view))
    # score
    txt = font.render(f"Score: {view.score}   Best: {view.high_score}", True, TEXT)
    screen.blit(txt, (10, 8))


def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, view: BoardSnapshot) -> None:
    # Dim with translucent overlay
    overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    title = font.render("GAME OVER", True, (240, 240, 250))
    sub   = font.render("Press R to restart", True, (220, 220, 230))
    sco   = font.render(f"Score: {view.score}  Best: {view.high_score}", True, (220, 220, 230))

    tx = title.get_rect(center=(WIDTH // 2, HEIGHT // 2 - 16))
    sx = sub.get_rect(center=(WIDTH // 2, HEIGHT // 2 + 16))
    cx = sco.get_rect(center=(WIDTH // 2, HEIGHT // 2 + 44))

    screen.blit(title, tx)
    screen.blit(sub, sx)
    screen.blit(sco, cx)
