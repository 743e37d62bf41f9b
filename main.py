import argparse
import logging

import pygame

from asteroid_arena.config import GameConfig
from asteroid_arena.constants import FPS, HEIGHT, WIDTH
from asteroid_arena.game import Control, Game
from asteroid_arena.render import draw_frame

log = logging.getLogger(__name__)


KEY_CONTROLS = {
    pygame.K_LEFT: Control.ROTATE_LEFT,
    pygame.K_RIGHT: Control.ROTATE_RIGHT,
    pygame.K_UP: Control.THRUST,
    pygame.K_SPACE: Control.FIRE,
}


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Dodge and shoot drifting asteroids.")
    parser.add_argument("--width", type=int, default=WIDTH, help="Arena width in pixels")
    parser.add_argument("--height", type=int, default=HEIGHT, help="Arena height in pixels")
    parser.add_argument("--fps", type=int, default=FPS, help="Frame rate cap")
    parser.add_argument("--seed", type=int, default=None, help="Random seed (default: time based)")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    return parser.parse_args(argv)


def handle_key(game, event):
    """Route one key event to the game. Returns False when the player quits."""
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key == pygame.K_RETURN:
            game.play()
        elif event.key == pygame.K_r:
            game.reset_game()
        elif event.key == pygame.K_p:
            game.toggle_pause()
        elif event.key in KEY_CONTROLS:
            game.on_control_down(KEY_CONTROLS[event.key])
    elif event.type == pygame.KEYUP and event.key in KEY_CONTROLS:
        game.on_control_up(KEY_CONTROLS[event.key])
    return True


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    config = GameConfig(width=args.width, height=args.height)
    game = Game(config, seed=args.seed)

    pygame.init()
    screen = pygame.display.set_mode((args.width, args.height))
    pygame.display.set_caption("Asteroid Arena")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("Consolas", 18)
    log.info("arena %dx%d, seed %d", args.width, args.height, game.seed)

    running = True
    while running:
        elapsed_ms = clock.tick(args.fps)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                running = handle_key(game, event) and running

        game.step(elapsed_ms)

        pygame.mouse.set_visible(not game.is_playing)
        draw_frame(screen, game, font)
        pygame.display.flip()

    pygame.quit()


if __name__ == "__main__":
    main()
