# main.py
from __future__ import annotations
import argparse
import logging
import random
from dataclasses import replace

import pygame # type: ignore

from .config import CELL_SIZE, Config
from .driver import Driver
from .engine import GameEngine
from .ui import draw_game, window_size

logger = logging.getLogger(__name__)

KEY_TO_COMMAND = {
    pygame.K_UP: "UP",
    pygame.K_w: "UP",
    pygame.K_DOWN: "DOWN",
    pygame.K_s: "DOWN",
    pygame.K_LEFT: "LEFT",
    pygame.K_a: "LEFT",
    pygame.K_RIGHT: "RIGHT",
    pygame.K_d: "RIGHT",
    pygame.K_SPACE: "TOGGLE",
    pygame.K_r: "RESET",
}


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="PixelPython - the classic snake game")
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument("--cell-size", type=int, default=CELL_SIZE, help="pixels per grid cell")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    cfg = Config.from_env()
    if args.seed is not None:
        cfg = replace(cfg, seed=args.seed)
    engine = GameEngine(cfg=cfg, rng=random.Random(cfg.seed))

    pygame.init()
    try:
        font = pygame.font.SysFont(None, 26)
        screen = pygame.display.set_mode(window_size(args.cell_size))
        pygame.display.set_caption("PixelPython")
        clock = pygame.time.Clock()
        driver = Driver(engine, clock=pygame.time.get_ticks)
        logger.info("Window ready, seed=%s", cfg.seed)

        running = True
        while running:
            # 1) input
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    elif event.key in KEY_TO_COMMAND:
                        driver.dispatch(KEY_TO_COMMAND[event.key])

            # 2) update (movement gated inside poll)
            driver.poll()

            # 3) render
            draw_game(screen, font, driver.snapshot(), args.cell_size)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()

if __name__ == "__main__":
    main()
