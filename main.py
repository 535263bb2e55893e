import logging
import sys
import pygame
from tetris_audio import MusicPlayer
from tetris_config import CONFIG
from tetris_game import Game
from tetris_input import TICK_EVENT, PygameTicker, action_for
from tetris_layout import board_cells_for, compute_dims
from tetris_render import RenderAssets
from tetris_rng import PieceRandom

def recreate_window(dims, flags=pygame.RESIZABLE):
    try:
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((dims.total_w, dims.total_h), flags)

def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"], format="%(asctime)s %(name)s %(levelname)s %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.VIDEORESIZE, TICK_EVENT])

    game = Game(CONFIG["BOARD_COLS"], CONFIG["BOARD_ROWS"],
                ticker=PygameTicker(TICK_EVENT), rng=PieceRandom(CONFIG["SEED"]))

    dims = compute_dims(game.board.width, game.board.height)
    screen = recreate_window(dims)
    pygame.display.set_caption("Tetris")
    font = pygame.font.SysFont("Verdana", 18)
    big_font = pygame.font.SysFont("Verdana", 36)
    render = RenderAssets(dims, font, big_font)
    music = MusicPlayer()

    # The game only holds plain callables, so the renderer can be swapped on resize
    game.subscribe(lambda event, piece: render.on_event(event, piece))
    game.subscribe(music.on_event)

    clock = pygame.time.Clock()
    while True:
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                game.ticker.stop()
                pygame.quit(); sys.exit()
            elif e.type == TICK_EVENT:
                game.tick()
            elif e.type == pygame.VIDEORESIZE:
                cols, rows = board_cells_for(e.w, e.h)
                game.resize(cols, rows)
                dims = compute_dims(cols, rows)
                render = RenderAssets(dims, font, big_font)
                screen = pygame.display.get_surface()
            else:
                action = action_for(e)
                if action is not None:
                    game.handle_input(action)

        render.draw(screen, game)
        pygame.display.flip()
        clock.tick(CONFIG["FPS"])

if __name__ == '__main__':
    main()
