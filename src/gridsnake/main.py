# main.py
import argparse
import dataclasses

import pygame # type: ignore

from .config import WIDTH, HEIGHT, CFG, Config
from .controls import read_intents
from .game import new_game_state, update, snapshot, board_grid, format_board
from .highscore import HighScoreFile
from .render import draw_game, draw_game_over


def parse_args(argv=None) -> Config:
    parser = argparse.ArgumentParser(description="Snake on a 10x10 grid.")
    parser.add_argument(
        "--highscore-file",
        type=str,
        default=CFG.highscore_file,
        help="Plain-text file holding the best score",
    )
    parser.add_argument("--seed", type=int, default=CFG.seed, help="Seed apple placement")
    parser.add_argument("--fps", type=int, default=CFG.fps)
    parser.add_argument(
        "--debug-board",
        action="store_true",
        help="Print the board to the console whenever it changes",
    )
    args = parser.parse_args(argv)
    return dataclasses.replace(
        CFG,
        highscore_file=args.highscore_file,
        seed=args.seed,
        fps=args.fps,
        debug_board=args.debug_board,
    )


def main(argv=None):
    cfg = parse_args(argv)
    store = HighScoreFile(cfg.highscore_file)
    state = new_game_state(store.load(), cfg=cfg)
    print(f"[GAME] Loaded high score {state.high_score} from {store.path}")

    pygame.init()
    font = pygame.font.SysFont(None, 28)
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    last_ms = pygame.time.get_ticks()
    last_view = None

    try:
        while True:
            # 1) input
            intents = read_intents(pygame.event.get())
            if intents.quit:
                break

            # 2) update, gated on elapsed time rather than frame count
            now_ms = pygame.time.get_ticks()
            update(state, intents, (now_ms - last_ms) / 1000.0, store)
            last_ms = now_ms

            # 3) render
            view = snapshot(state)
            if cfg.debug_board and view != last_view:
                print(format_board(board_grid(view)))
                print()
            last_view = view

            draw_game(screen, font, view)
            if view.game_over:
                draw_game_over(screen, font, view)
            pygame.display.flip()
            clock.tick(cfg.fps)  # presentation only
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
