
"""
Rendering for the falling-block game.

The renderer only reads game state. It keeps:
- One cell sprite per (palette row, color index, style), built on first use.
- A BOARD SURFACE holding the baked blocks. It is rebuilt only when the board
  changes structurally (line clear, reset, resize) or the palette changes with
  the difficulty; a piece baked without clearing lines is blitted onto it.
- Cached HUD text surfaces, re-rendered only when their value changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from tetris_board import Board
from tetris_game import BOARD_CHANGED, DIFFICULTY_CHANGED, PIECE_BAKED, Game
from tetris_layout import Dims
from tetris_piece import Piece

# Colors per color index, one row per difficulty
PALETTES: List[List[str]] = [
    ["cyan", "blue", "orange", "yellow", "green", "purple", "red"],
    ["#FFB60D", "#E80C68", "#004EFF", "#0CE817", "#FFB505", "#E80C8C", "#1BE80C"],
    ["#FF19CF", "#16C5E8", "#FFFA0C", "#E82914", "#1149FF", "#12FF04", "#9009FF"],
    ["#0CE8C5", "#FFD604", "#FF091F", "#E8A908", "#12FF04", "#087DE8", "#F500FF"],
    ["#B214CC", "#5000FF", "#FFDF40", "#FFB100", "#40B0FF", "#3D14CC", "#3D14CC"],
    ["#0CE817", "#FFB505", "#E80C8C", "#1BE80C", "#FFB60D", "#E80C68", "#004EFF"],
    ["#1149FF", "#12FF04", "#9009FF", "#FF19CF", "#16C5E8", "#FFFA0C", "#E82914"],
    ["#E8A908", "#12FF04", "#087DE8", "#F500FF", "#0CE8C5", "#FFD604", "#FF091F"],
    ["#FFB100", "#40B0FF", "#3D14CC", "#3D14CC", "#B214CC", "#5000FF", "#FFDF40"],
    ["cyan", "blue", "orange", "yellow", "green", "purple", "red"],
]

BACKGROUND = (10, 13, 34)
TEXT = (200, 210, 240)
SHADE = pygame.Color("#555555")


def block_color(difficulty: int, color: int) -> pygame.Color:
    return pygame.Color(PALETTES[difficulty][color])


def action_hint(game: Game) -> str:
    """What SPACE does right now."""
    if not game.started:
        return "play"
    if game.game_over:
        return "restart"
    if game.paused:
        return "resume"
    return "pause"


@dataclass
class HudCache:
    level: int = -1
    score: int = -1
    threshold: int = -1
    hint: str = ""
    level_s: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    threshold_s: Optional[pygame.Surface] = None
    hint_s: Optional[pygame.Surface] = None
    labels: Optional[list] = None


class RenderAssets:
    """Holds pre-rendered sprites and the baked-board cache for one layout."""
    def __init__(self, dims: Dims, font: pygame.font.Font, big_font: Optional[pygame.font.Font] = None):
        self.dims = dims
        self.font = font
        self.big_font = big_font or font
        self.hud = HudCache()
        self.cells: Dict[Tuple[int, int, bool], pygame.Surface] = {}
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self.palette = -1
        self.pending: List[Piece] = []
        self.full_rebuilds = 0

    # ---------- game events ----------
    def on_event(self, event: str, piece: Optional[Piece] = None):
        if event == PIECE_BAKED and piece is not None:
            self.pending.append(piece)
        elif event in (BOARD_CHANGED, DIFFICULTY_CHANGED):
            self.pending.clear()
            self.palette = -1

    # ---------- cell sprites ----------
    def cell(self, difficulty: int, color: int, baked: bool) -> pygame.Surface:
        key = (difficulty, color, baked)
        surf = self.cells.get(key)
        if surf is None:
            c = self.dims.cell
            col = block_color(difficulty, color)
            surf = pygame.Surface((c, c))
            surf.fill(col.lerp(SHADE, 0.5) if baked else col)
            pygame.draw.rect(surf, (0, 0, 0), (0, 0, c, c), 1)
            self.cells[key] = surf
        return surf

    # ---------- board surface cache ----------
    def rebuild_board_surface(self, board: Board, difficulty: int):
        """Redraw every baked block from the grid."""
        c = self.dims.cell
        if self.board_surface.get_size() != (board.width * c, board.height * c):
            self.board_surface = pygame.Surface((board.width * c, board.height * c), pygame.SRCALPHA)
        self.board_surface.fill((0, 0, 0, 0))
        for y, row in enumerate(board.grid):
            for x, block in enumerate(row):
                if block is not None:
                    self.board_surface.blit(self.cell(difficulty, block.color, True), (x * c, y * c))
        self.palette = difficulty
        self.pending.clear()
        self.full_rebuilds += 1
        board.validate()

    def draw_baked_piece(self, piece: Piece, difficulty: int):
        c = self.dims.cell
        for x, y, block in piece.cells():
            self.board_surface.blit(self.cell(difficulty, block.color, True), (x * c, y * c))

    def refresh_board(self, game: Game):
        if not game.board.cache_valid or self.palette != game.difficulty:
            self.rebuild_board_surface(game.board, game.difficulty)
            return
        for piece in self.pending:
            self.draw_baked_piece(piece, game.difficulty)
        self.pending.clear()

    # ---------- frame ----------
    def draw(self, screen: pygame.Surface, game: Game):
        screen.fill(BACKGROUND)
        self.refresh_board(game)
        screen.blit(self.board_surface, (0, 0))
        if game.piece is not None:
            c = self.dims.cell
            for x, y, block in game.piece.cells():
                screen.blit(self.cell(game.difficulty, block.color, False), (x * c, y * c))
        self.draw_sidebar(screen, game)
        if game.game_over:
            self.draw_banner(screen, "Game Over", "Press SPACE to restart")
        elif game.paused:
            self.draw_banner(screen, "PAUSED", "Press SPACE to resume")

    def draw_sidebar(self, screen: pygame.Surface, game: Game):
        d = self.dims
        f = self.font
        x = d.sidebar_x + 10
        c = d.cell
        pygame.draw.rect(screen, (50, 60, 100), (d.sidebar_x + 10, 10, d.sidebar_w - 20, 4 * c), 1)
        for px, py, block in game.next_piece.cells():
            # cells() is board-relative; draw from the box origin instead
            bx = px - game.next_piece.x
            by = py - game.next_piece.y
            screen.blit(self.cell(game.difficulty, block.color, False),
                        (x + 10 + bx * c, 10 + by * c))
        if game.difficulty + 1 != self.hud.level:
            self.hud.level = game.difficulty + 1
            self.hud.level_s = f.render(str(self.hud.level), True, TEXT)
        if game.score != self.hud.score:
            self.hud.score = game.score
            self.hud.score_s = f.render(str(game.score), True, TEXT)
        if game.next_threshold != self.hud.threshold:
            self.hud.threshold = game.next_threshold
            self.hud.threshold_s = f.render(str(game.next_threshold), True, TEXT)
        hint = action_hint(game)
        if hint != self.hud.hint:
            self.hud.hint = hint
            self.hud.hint_s = f.render(f"to {hint}", True, TEXT)
        if not self.hud.labels:
            self.hud.labels = [f.render(s, True, TEXT) for s in ("Next", "Level", "Score", "Goal", "Press SPACE")]
        nxt, level, score, goal, press = self.hud.labels
        screen.blit(nxt, (x, 4 * c + 16))
        screen.blit(level, (x, 6 * c))
        screen.blit(self.hud.level_s, (x, 7 * c))
        screen.blit(score, (x, 9 * c))
        screen.blit(self.hud.score_s, (x, 10 * c))
        screen.blit(goal, (x, 12 * c))
        screen.blit(self.hud.threshold_s, (x, 13 * c))
        screen.blit(press, (x, 15 * c))
        screen.blit(self.hud.hint_s, (x, 16 * c))

    def draw_banner(self, screen: pygame.Surface, title: str, hint: str):
        w, h = screen.get_size()
        veil = pygame.Surface((w, h), pygame.SRCALPHA)
        veil.fill((255, 255, 255, 204))
        screen.blit(veil, (0, 0))
        msg = self.big_font.render(title, True, (0, 0, 0))
        screen.blit(msg, msg.get_rect(center=(w // 2, h // 2)))
        sub = self.font.render(hint, True, (0, 0, 0))
        screen.blit(sub, sub.get_rect(center=(w // 2, h // 2 + 60)))
