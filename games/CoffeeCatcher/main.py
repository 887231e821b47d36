#!/usr/bin/env python3
"""Coffee Catcher - Standalone Entry Point.

Usage:
    python -m games.CoffeeCatcher.main
    python -m games.CoffeeCatcher.main --seed 42
    python -m games.CoffeeCatcher.main --width 600 --height 900
"""

import argparse
import sys

import pygame

from catcher.logging import get_logger
from games.CoffeeCatcher import config
from games.CoffeeCatcher.engine import SimulationEngine
from games.CoffeeCatcher.input.pygame_input import PygameInputMapper
from games.CoffeeCatcher.renderer import Renderer, load_assets

log = get_logger('main')


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Coffee Catcher - Standalone")
    parser.add_argument('--width', type=int, default=int(config.ARENA_WIDTH), help='Arena width')
    parser.add_argument('--height', type=int, default=int(config.ARENA_HEIGHT), help='Arena height')
    parser.add_argument('--seed', type=int, default=config.SEED, help='RNG seed for a reproducible game')
    parser.add_argument('--fps', type=int, default=config.FPS, help='Ticks per second')
    parser.add_argument('--assets', type=str, default=str(config.ASSETS_DIR), help='Sprite directory')
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run Coffee Catcher standalone."""
    args = parse_args(argv)

    engine = SimulationEngine(config.default_config(
        arena_width=args.width,
        arena_height=args.height,
        seed=args.seed,
    ))

    pygame.init()
    pygame.font.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Coffee Catcher")

    renderer = Renderer(args.width, args.height, load_assets(args.assets))
    mapper = PygameInputMapper(engine.input, args.width)

    clock = pygame.time.Clock()
    running = True
    log.info("starting: %dx%d seed=%s", args.width, args.height, args.seed)

    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            else:
                mapper.handle_event(event, engine.running)

        frame = engine.tick()
        renderer.draw(screen, frame)
        pygame.display.flip()
        clock.tick(args.fps)

    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
