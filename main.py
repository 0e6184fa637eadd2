# ==================================================
#   EEL ESCAPE - MAIN
# ==================================================
import sys
import random
import logging
import argparse
import pygame
from config import WIDTH, HEIGHT, FPS
from session import Session
from spawner import Spawner
from renderer import draw_frame

logger = logging.getLogger("eel_escape")


def parse_args(argv=None):
    """Command line options for the game window."""
    parser = argparse.ArgumentParser(description="Steer the eel, eat prey, dodge the hooks.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the spawn policy")
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    """Main game loop."""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    pygame.init()
    pygame.display.set_caption("Eel Escape")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("Segoe UI", 16)

    session = Session()
    spawner = Spawner(session, random.Random(args.seed))
    running = True

    while running:
        dt = clock.tick(args.fps) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if session.dead:
                    session.restart()
                    spawner.reset()
                else:
                    session.on_tap(*event.pos)

            if event.type == pygame.KEYDOWN and event.key in (pygame.K_ESCAPE, pygame.K_q):
                running = False

        spawner.update(dt)
        session.advance(dt)

        for ev in session.drain_events():
            if ev.kind == "game_over":
                logger.info("run ended (%s) at %.1fs", ev.data["reason"], session.time)

        draw_frame(screen, font, session.snapshot())
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
