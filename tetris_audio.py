
"""Music collaborator: follows game events, never queried by the game"""
import logging
import os
from typing import Optional
import pygame
from tetris_config import CONFIG
from tetris_game import GAME_OVER, GAME_STARTED, PAUSED, RESUMED
from tetris_piece import Piece

logger = logging.getLogger(__name__)


class MusicPlayer:
    """Plays the theme while running and the game-over jingle once.

    Subscribe `on_event` to a Game. When no mixer device or track file is
    available the player logs a warning and stays silent.
    """

    def __init__(self, music_dir: Optional[str] = None):
        self.music_dir = CONFIG["MUSIC_DIR"] if music_dir is None else music_dir
        self.track: Optional[str] = None
        self.enabled = True

    def on_event(self, event: str, piece: Optional[Piece] = None):
        if event == GAME_STARTED:
            self.select_track(CONFIG["MUSIC_TRACK"], loop=True)
        elif event == GAME_OVER:
            self.select_track(CONFIG["GAME_OVER_TRACK"], loop=False)
        elif event == PAUSED:
            self._call(pygame.mixer.music.pause)
        elif event == RESUMED:
            self._call(pygame.mixer.music.unpause)

    def select_track(self, name: str, loop: bool):
        path = os.path.join(self.music_dir, name)
        if not os.path.exists(path):
            logger.warning("music track %s not found, skipping", path)
            self.track = None
            self._call(pygame.mixer.music.stop)
            return
        self.track = name
        if self._call(pygame.mixer.music.load, path):
            self._call(pygame.mixer.music.play, -1 if loop else 0)

    def _call(self, fn, *args) -> bool:
        if not self.enabled:
            return False
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            fn(*args)
            return True
        except pygame.error as e:
            logger.warning("audio disabled: %s", e)
            self.enabled = False
            return False
