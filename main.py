import argparse
import logging
import sys

import pygame

from tetris_config import make_config
from tetris_game import Game
from tetris_input import action_for_key, enable_key_repeat
from tetris_layout import compute_dims
from tetris_render import RenderAssets, draw_frame

logger = logging.getLogger("tetris")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Falling-block puzzle game")
    p.add_argument("--seed", type=int, default=None, help="seed for the piece randomizer")
    p.add_argument("--cell-size", type=int, default=None, help="pixel size of a board cell (default: 30)")
    p.add_argument("--cols", type=int, default=None, help="board width in cells (default: 10)")
    p.add_argument("--rows", type=int, default=None, help="board height in cells (default: 20)")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="logging verbosity")
    args = p.parse_args(argv)

    overrides = {"SEED": args.seed}
    for key, value in (("CELL_SIZE", args.cell_size), ("COLS", args.cols), ("ROWS", args.rows)):
        if value is not None:
            overrides[key] = value
    try:
        config = make_config(**overrides)
    except ValueError as exc:
        p.error(str(exc))
    return args, config


def recreate_window(dims, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)


def main(argv=None):
    args, config = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])
    enable_key_repeat(config)

    dims = compute_dims(config)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    game = Game(config)
    render = RenderAssets(dims, game.cols, game.rows, font, big_font)
    clock = pygame.time.Clock()
    logger.info("started with seed %s", config["SEED"])

    while True:
        dt = clock.tick(config["FPS"])

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit()
                return 0
            if e.type == pygame.KEYDOWN:
                game.handle_input(action_for_key(e.key))

        game.tick(dt)
        draw_frame(screen, render, game)
        pygame.display.flip()


if __name__ == '__main__':
    sys.exit(main())
