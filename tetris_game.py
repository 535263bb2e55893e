
"""Game state machine: piece lifecycle, scoring, difficulty, pause/over/reset"""
import logging
from enum import Enum
from typing import Callable, List, Optional
from tetris_board import Board
from tetris_clock import ManualTicker
from tetris_config import (CONFIG, DIFFICULTY_TIMEOUTS, MAX_DIFFICULTY,
                           POINTS_FOR_LINES, SCORE_PER_LEVEL)
from tetris_piece import ACTIONS, CONFIRM, DOWN, Piece
from tetris_rng import PieceRandom

logger = logging.getLogger(__name__)

# Events delivered to listeners as callback(event, piece)
GAME_STARTED = "game_started"
GAME_OVER = "game_over"
PAUSED = "paused"
RESUMED = "resumed"
PIECE_MOVED = "piece_moved"
PIECE_BAKED = "piece_baked"
BOARD_CHANGED = "board_changed"
DIFFICULTY_CHANGED = "difficulty_changed"

Listener = Callable[[str, Optional[Piece]], None]


class GameState(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Game:
    """One session of play.

    The owner creates a single Game, routes timer ticks to tick() and
    logical input to handle_input(). Renderers and audio read the public
    attributes and get notified through subscribe(); they never mutate.
    """

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None,
                 ticker=None, rng: Optional[PieceRandom] = None):
        width = CONFIG["BOARD_COLS"] if width is None else width
        height = CONFIG["BOARD_ROWS"] if height is None else height
        self.ticker = ticker if ticker is not None else ManualTicker()
        self.rng = rng if rng is not None else PieceRandom(CONFIG["SEED"])
        self.listeners: List[Listener] = []
        self.board = Board(width, height)
        self.piece: Optional[Piece] = None
        self.next_piece: Piece = self._random_piece()
        self.difficulty = 0
        self.score = 0
        self.state = GameState.NOT_STARTED

    # ---------- read-only surface ----------
    @property
    def started(self) -> bool:
        return self.state is not GameState.NOT_STARTED

    @property
    def running(self) -> bool:
        return self.state is GameState.RUNNING

    @property
    def paused(self) -> bool:
        return self.state is GameState.PAUSED

    @property
    def game_over(self) -> bool:
        return self.state is GameState.GAME_OVER

    @property
    def interval_ms(self) -> int:
        return DIFFICULTY_TIMEOUTS[self.difficulty]

    @property
    def next_threshold(self) -> int:
        return SCORE_PER_LEVEL[self.difficulty]

    # ---------- listeners ----------
    def subscribe(self, listener: Listener):
        self.listeners.append(listener)

    def _emit(self, event: str, piece: Optional[Piece] = None):
        for listener in self.listeners:
            listener(event, piece)

    # ---------- lifecycle ----------
    def start(self):
        if self.state is not GameState.NOT_STARTED:
            return
        self.state = GameState.RUNNING
        self.select_next_piece()
        if self.state is not GameState.RUNNING:
            return
        logger.info("game started on a %dx%d board", self.board.width, self.board.height)
        self._arm_ticker()
        self._emit(GAME_STARTED)

    def toggle_pause(self):
        if self.state is GameState.RUNNING:
            self.ticker.stop()
            self.state = GameState.PAUSED
            logger.debug("paused")
            self._emit(PAUSED)
        elif self.state is GameState.PAUSED:
            self.state = GameState.RUNNING
            self._arm_ticker()
            logger.debug("resumed at %d ms", self.interval_ms)
            self._emit(RESUMED)
        elif self.state is GameState.GAME_OVER:
            self.reset()

    def reset(self):
        self.ticker.stop()
        self.difficulty = 0
        self.score = 0
        self.board = Board(self.board.width, self.board.height)
        self.piece = None
        self.next_piece = self._random_piece()
        self.state = GameState.NOT_STARTED
        logger.debug("reset")
        self._emit(BOARD_CHANGED)
        self.start()

    def resize(self, width: int, height: int):
        self.board.resize(width, height)
        logger.debug("board resized to %dx%d", width, height)
        self._emit(BOARD_CHANGED)

    # ---------- pieces ----------
    def _random_piece(self) -> Piece:
        return Piece.spawn(self.rng.next_piece())

    def select_next_piece(self):
        """Put the next piece in play; the game ends if it cannot drop from the spawn row."""
        piece = self.next_piece
        piece.place_at_spawn(self.board.width)
        self.next_piece = self._random_piece()
        if self.board.is_valid_move(piece, DOWN):
            self.piece = piece
            self._emit(PIECE_MOVED, piece)
        else:
            self._end_game()

    def _end_game(self):
        self.ticker.stop()
        self.piece = None
        self.state = GameState.GAME_OVER
        logger.info("game over: score %d at level %d", self.score, self.difficulty + 1)
        self._emit(GAME_OVER)

    def _bake(self):
        piece = self.piece
        lines = self.board.bake_piece(piece)
        if lines:
            logger.debug("cleared %d line(s)", lines)
            self.add_score(POINTS_FOR_LINES[lines - 1] * (self.difficulty + 1))
            self._emit(BOARD_CHANGED, piece)
        else:
            self._emit(PIECE_BAKED, piece)
        self.select_next_piece()

    def _move(self, action: str) -> bool:
        if self.piece is None or not self.board.is_valid_move(self.piece, action):
            return False
        self.piece.apply(action)
        self._emit(PIECE_MOVED, self.piece)
        return True

    # ---------- clock & input ----------
    def tick(self):
        if self.state is not GameState.RUNNING or self.piece is None:
            return
        if not self._move(DOWN):
            self._bake()

    def handle_input(self, action: str) -> bool:
        """Apply one logical action; rejected moves change nothing and return False."""
        if action == CONFIRM:
            if self.state is GameState.NOT_STARTED:
                self.start()
            else:
                self.toggle_pause()
            return True
        if action not in ACTIONS:
            raise ValueError(f"unknown action {action!r}")
        if self.state is not GameState.RUNNING or self.piece is None:
            return False
        if action == DOWN:
            if not self._move(DOWN):
                self._bake()
            return True
        return self._move(action)

    # ---------- scoring ----------
    def add_score(self, points: int):
        if points <= 0:
            return
        self.score += points
        if self.score > SCORE_PER_LEVEL[self.difficulty] and self.difficulty < MAX_DIFFICULTY:
            self.difficulty += 1
            logger.info("level %d, tick every %d ms", self.difficulty + 1, self.interval_ms)
            if self.state is GameState.RUNNING:
                self._arm_ticker()
            self._emit(DIFFICULTY_CHANGED)

    def _arm_ticker(self):
        self.ticker.start(self.interval_ms)
