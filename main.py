import logging
import pygame, sys
from tetris_config import CONFIG
from tetris_game import Game
from tetris_input import action_for_event
from tetris_layout import compute_dims
from tetris_log import setup_logger
from tetris_render import Renderer
from tetris_rng import PieceRandom

log = logging.getLogger("tetris.main")


def main():
    setup_logger(name="tetris", use_rich=CONFIG["LOG_RICH"], level=CONFIG["LOG_LEVEL"])
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    dims = compute_dims()
    screen = pygame.display.set_mode((dims.total_w, dims.total_h))
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont(None, 26)

    render = Renderer(dims, font)
    clock = pygame.time.Clock()

    game = Game(PieceRandom(CONFIG["SEED"]))
    game.on_score(render.set_score)
    game.start()
    log.info("started, drop interval %d ms", game.drop_interval)

    while True:
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                log.info("quit at score %d", game.score)
                pygame.quit(); sys.exit()
            action = action_for_event(e)
            if action:
                game.handle(action)

        game.update(pygame.time.get_ticks())
        render.draw(screen, game)
        pygame.display.flip()
        clock.tick(CONFIG["FPS"])


if __name__ == '__main__':
    main()
