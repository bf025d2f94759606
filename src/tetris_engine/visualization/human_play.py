from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import pygame

from tetris_engine.game import Action, GameConfig, GravityClock, TetrisGame
from .keymap import action_for_key
from .renderer import Renderer

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Play the falling-block game in a pygame window.")
    p.add_argument("--seed", type=int, default=None, help="Seed for the piece randomizer")
    p.add_argument("--cell-size", type=int, default=28)
    p.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def run(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    pygame.init()
    try:
        clock = pygame.time.Clock()
        game = TetrisGame(GameConfig(random_seed=args.seed))
        renderer = Renderer(cell_size=args.cell_size)

        screen = pygame.display.set_mode(renderer.window_size(game.grid.width, game.grid.height))
        pygame.display.set_caption("Tetris Engine - Human Play")

        gravity = GravityClock(game.rules.drop_interval_ms)
        gravity.start(pygame.time.get_ticks())

        while not game.quit_requested:
            # Input handling
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    game.quit()
                elif event.type == pygame.KEYDOWN:
                    if not game.running and event.key == pygame.K_r:
                        game.reset()
                        gravity.start(pygame.time.get_ticks())
                        continue
                    action = action_for_key(event.key, event.unicode)
                    if action != Action.INVALID:
                        game.apply_action(action)

            # Gravity
            now = pygame.time.get_ticks()
            if game.paused:
                gravity.mark(now)
            elif game.running and gravity.due(now, game.level):
                cleared = game.gravity_tick()
                if cleared:
                    logger.info("Cleared %d line(s), level %d", cleared, game.level)
                gravity.mark(now)

            # Render
            renderer.draw(screen, game.get_state(), game.snapshot())
            clock.tick(60)
    finally:
        pygame.quit()


if __name__ == "__main__":  # pragma: no cover
    run()
