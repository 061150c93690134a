"""
Rendering helpers for the game window.

- Pre-render one block Surface per kind (solid + ghost outline) and blit them.
- Pre-render the static background (grid + panel frame) once per Dims.
- Cache HUD text surfaces; re-render only when values change.
- Cache a BOARD SURFACE with the settled blocks; rebuild it only when the
  session's board revision changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from tetris_layout import Dims
from tetris_piece import SHAPES

# Indexed by kind id; 0 (empty) has no color
COLORS: List[Optional[Tuple[int,int,int]]] = [
    None,
    (255, 13,114),   # I
    ( 13,194,255),   # J
    ( 13,255,114),   # L
    (245, 56,255),   # O
    (255,142, 13),   # S
    (255,225, 56),   # T
    ( 56,119,255),   # Z
]

TEXT = (200,210,240)
DIM_TEXT = (165,175,215)

@dataclass
class HudCache:
    score: int = -1
    level: int = -1
    lines: int = -1
    next_kind: int = 0
    title: Optional[pygame.Surface] = None
    score_s: Optional[pygame.Surface] = None
    level_s: Optional[pygame.Surface] = None
    lines_s: Optional[pygame.Surface] = None
    next_label: Optional[pygame.Surface] = None
    controls: Optional[list] = None

class RenderAssets:
    """Holds all pre-rendered assets for fast blitting."""
    def __init__(self, dims: Dims, cols: int, rows: int, font: pygame.font.Font, big_font: pygame.font.Font):
        self.dims = dims
        self.cols, self.rows = cols, rows
        self.font = font
        self.big_font = big_font
        self._make_static()
        self._make_cells()
        self.hud = HudCache()
        # Board surface cache (only settled blocks)
        self.board_surface = pygame.Surface((dims.board_w, dims.board_h), pygame.SRCALPHA)
        self._board_revision = -1

    # ---------- Static background (grid + panel) ----------
    def _make_static(self):
        d = self.dims
        self.bg = pygame.Surface((d.total_w, d.total_h))
        self.bg.fill((10,13,34))
        pygame.draw.rect(self.bg, (0,0,0), (d.board_x, d.board_y, d.board_w, d.board_h))
        grid_col = (40,50,90)
        for x in range(self.cols+1):
            X = d.board_x + x*d.cell
            pygame.draw.line(self.bg, grid_col, (X, d.board_y), (X, d.board_y + d.board_h))
        for y in range(self.rows+1):
            Y = d.board_y + y*d.cell
            pygame.draw.line(self.bg, grid_col, (d.board_x, Y), (d.board_x + d.board_w, Y))
        # Panel frame
        panel_rect = pygame.Rect(d.panel_x, d.panel_y, d.panel_w, d.panel_h)
        pygame.draw.rect(self.bg, (21,25,53), panel_rect)
        pygame.draw.rect(self.bg, (50,60,100), panel_rect, 1)
        # Next preview frame
        frame = pygame.Rect(d.preview_x-6, d.preview_y-6, d.preview_size+12, d.preview_size+12)
        pygame.draw.rect(self.bg, (15,18,40), frame)
        pygame.draw.rect(self.bg, (55,65,110), frame, 1)

    # ---------- Small cell sprites (solid + ghost outline) ----------
    def _make_cells(self):
        self.cell_surf: Dict[int, pygame.Surface] = {}
        self.ghost_surf: Dict[int, pygame.Surface] = {}
        c = self.dims.cell
        for kind, col in enumerate(COLORS):
            if col is None: continue
            s = pygame.Surface((c-1, c-1))
            s.fill(col)
            self.cell_surf[kind] = s
            g = pygame.Surface((c-8, c-8), pygame.SRCALPHA)
            pygame.draw.rect(g, col, (0,0,c-8,c-8), 2)
            self.ghost_surf[kind] = g

    # ---------- Board surface cache ----------
    def sync_board(self, board: List[List[int]], revision: int):
        """Rebuild the settled-blocks surface if the board changed."""
        if revision == self._board_revision:
            return
        self.board_surface.fill((0,0,0,0))
        c = self.dims.cell
        for y, row in enumerate(board):
            for x, v in enumerate(row):
                if v:
                    self.board_surface.blit(self.cell_surf[v], (x*c + 1, y*c + 1))
        self._board_revision = revision

    # ---------- Per-cell helpers for moving/ghost piece ----------
    def draw_cell(self, screen: pygame.Surface, kind: int, bx: int, by: int):
        rx, ry = self.dims.cell_origin(bx, by)
        screen.blit(self.cell_surf[kind], (rx + 1, ry + 1))

    def draw_ghost_cell(self, screen: pygame.Surface, kind: int, bx: int, by: int):
        rx, ry = self.dims.cell_origin(bx, by)
        screen.blit(self.ghost_surf[kind], (rx + 4, ry + 4))

    # ---------- HUD / Panel ----------
    def draw_panel_hud(self, screen: pygame.Surface, score: int, level: int, lines: int, next_kind: int):
        d = self.dims
        f = self.font
        if self.hud.title is None:
            self.hud.title = f.render("Tetris", True, (197,202,233))
        if score != self.hud.score:
            self.hud.score = score
            self.hud.score_s = f.render(f"Score: {score}", True, TEXT)
        if level != self.hud.level:
            self.hud.level = level
            self.hud.level_s = f.render(f"Level: {level}", True, TEXT)
        if lines != self.hud.lines:
            self.hud.lines = lines
            self.hud.lines_s = f.render(f"Lines: {lines}", True, TEXT)
        if next_kind != self.hud.next_kind:
            self.hud.next_kind = next_kind
            pc = d.preview_cell
            s = pygame.Surface((d.preview_size, d.preview_size), pygame.SRCALPHA)
            shape = SHAPES[next_kind]
            off = (4 - len(shape)) // 2
            for y, row in enumerate(shape):
                for x, v in enumerate(row):
                    if v:
                        block = pygame.Surface((pc-1, pc-1))
                        block.fill(COLORS[v])
                        s.blit(block, ((x + off) * pc, (y + off) * pc))
            self.hud.next_label = s
        screen.blit(self.hud.title, (d.panel_x + 12, d.panel_y + 12))
        screen.blit(self.hud.score_s, (d.panel_x + 12, d.panel_y + 44))
        screen.blit(self.hud.level_s, (d.panel_x + 12, d.panel_y + 68))
        screen.blit(self.hud.lines_s, (d.panel_x + 12, d.panel_y + 92))
        screen.blit(f.render("Next:", True, TEXT), (d.panel_x + 12, d.panel_y + 126))
        screen.blit(self.hud.next_label, (d.preview_x, d.preview_y))
        if not self.hud.controls:
            self.hud.controls = [
                f.render("Controls:", True, TEXT),
                f.render("←/→ Move", True, DIM_TEXT),
                f.render("↓ Soft drop", True, DIM_TEXT),
                f.render("↑ Rotate", True, DIM_TEXT),
                f.render("Space Hard drop", True, DIM_TEXT),
                f.render("P Pause", True, DIM_TEXT),
                f.render("Enter Restart", True, DIM_TEXT),
            ]
        y = d.preview_y + d.preview_size + 24
        for surf in self.hud.controls:
            screen.blit(surf, (d.panel_x + 12, y)); y += 20

    # ---------- Paused / game-over overlay ----------
    def draw_message(self, screen: pygame.Surface, title: str, hint: str):
        d = self.dims
        shade = pygame.Surface((d.board_w, d.board_h), pygame.SRCALPHA)
        shade.fill((0,0,0,128))
        screen.blit(shade, (d.board_x, d.board_y))
        cx, cy = d.board_x + d.board_w // 2, d.board_y + d.board_h // 2
        msg = self.big_font.render(title, True, (255,255,255))
        screen.blit(msg, msg.get_rect(center=(cx, cy)))
        sub = self.font.render(hint, True, TEXT)
        screen.blit(sub, sub.get_rect(center=(cx, cy + 40)))


def draw_frame(screen: pygame.Surface, assets: RenderAssets, game):
    """Draw one full frame of `game` (a tetris_game.Game) onto screen."""
    d = assets.dims
    screen.blit(assets.bg, (0,0))
    assets.sync_board(game.board, game.revision)
    screen.blit(assets.board_surface, (d.board_x, d.board_y))

    cur = game.current
    if not game.game_over:
        gy = game.ghost_y()
        for bx, by in cur.cells():
            by += gy - cur.y
            if by >= 0:
                assets.draw_ghost_cell(screen, cur.kind, bx, by)
    for bx, by in cur.cells():
        if by >= 0:
            assets.draw_cell(screen, cur.kind, bx, by)

    assets.draw_panel_hud(screen, game.score, game.level, game.lines, game.next_piece.kind)

    if game.game_over:
        assets.draw_message(screen, "GAME OVER", "Press ENTER to restart")
    elif game.paused:
        assets.draw_message(screen, "PAUSED", "Press P to resume")
