"""Game session: owns the board, the falling piece and the score.

Everything a frame needs lives on one Game instance. The session never
touches pygame; main.py feeds it elapsed milliseconds and actions and a
renderer reads its state back.
"""
from __future__ import annotations

import enum
import logging
from typing import Any, Dict, Optional

from tetris_board import Board, collide, compact, ghost_y, merge, new_board, sweep
from tetris_config import CONFIG
from tetris_piece import Piece, create_piece, rotate_cw
from tetris_rng import UniformRandom
from tetris_scoring import drop_interval, level_for_lines, line_score

logger = logging.getLogger(__name__)


class Action(enum.Enum):
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"
    HARD_DROP = "hard_drop"
    TOGGLE_PAUSE = "toggle_pause"
    RESTART = "restart"


class Game:
    def __init__(self, config: Optional[Dict[str, Any]] = None, rng=None):
        self.config = config if config is not None else CONFIG
        self.rng = rng if rng is not None else UniformRandom(self.config["SEED"])
        self.cols: int = self.config["COLS"]
        self.rows: int = self.config["ROWS"]
        self.next_piece: Optional[Piece] = None
        # bumped whenever settled blocks change
        self.revision = 0
        self.reset()

    # ---------- Lifecycle ----------
    def reset(self):
        self.board: Board = new_board(self.cols, self.rows)
        self.score = 0
        self.level = 1
        self.lines = 0
        self.drop_interval_ms = drop_interval(self.level, self.config)
        self.drop_counter_ms = 0.0
        self.game_over = False
        self.paused = False
        self.revision += 1
        logger.info("new game (%dx%d)", self.cols, self.rows)
        self.spawn()

    def spawn(self):
        """Promote the next piece to the board and roll a new preview."""
        if self.next_piece is None:
            self.next_piece = create_piece(self.rng)
        piece = self.next_piece
        piece.x = self.cols // 2 - piece.width // 2
        piece.y = 0
        self.current = piece
        self.next_piece = create_piece(self.rng)
        logger.debug("spawned %s, next %s", piece.name, self.next_piece.name)

        if self._collides(piece.shape, piece.x, piece.y):
            self.game_over = True
            logger.info("game over: score=%d level=%d lines=%d", self.score, self.level, self.lines)

    # ---------- Piece control ----------
    def _collides(self, shape, x, y) -> bool:
        return collide(self.board, shape, x, y)

    def move(self, direction: int) -> bool:
        if self.game_over:
            return False
        p = self.current
        if self._collides(p.shape, p.x + direction, p.y):
            return False
        p.x += direction
        return True

    def rotate(self) -> bool:
        if self.game_over:
            return False
        p = self.current
        shape = rotate_cw(p.shape)
        if self._collides(shape, p.x, p.y):
            return False
        p.shape = shape
        return True

    def soft_drop(self) -> bool:
        """Drop one row; lock the piece if it cannot. Returns True if it moved."""
        if self.game_over:
            return False
        self.drop_counter_ms = 0.0
        p = self.current
        if self._collides(p.shape, p.x, p.y + 1):
            self._lock()
            return False
        p.y += 1
        return True

    def hard_drop(self) -> int:
        """Drop straight to the landing row and lock. Returns rows fallen."""
        if self.game_over:
            return 0
        p = self.current
        start = p.y
        p.y = ghost_y(self.board, p)
        self._lock()
        return p.y - start

    def ghost_y(self) -> int:
        return ghost_y(self.board, self.current)

    # ---------- Locking ----------
    def _lock(self):
        merge(self.board, self.current)
        logger.debug("locked %s at (%d, %d)", self.current.name, self.current.x, self.current.y)
        cleared = sweep(self.board)
        if cleared:
            self._award(cleared)
            compact(self.board)
        self.revision += 1
        self.spawn()

    def _award(self, cleared: int):
        gained = line_score(cleared, self.level)
        self.score += gained
        self.lines += cleared
        logger.info("cleared %d line(s) for %d points", cleared, gained)

        level = level_for_lines(self.lines, self.config["LINES_PER_LEVEL"])
        if level != self.level:
            self.level = level
            self.drop_interval_ms = drop_interval(level, self.config)
            logger.info("level %d, drop interval %d ms", level, self.drop_interval_ms)

    # ---------- Time & input ----------
    def tick(self, elapsed_ms: float):
        """Advance the auto-drop timer by elapsed_ms."""
        if self.game_over or self.paused:
            return
        self.drop_counter_ms += elapsed_ms
        if self.drop_counter_ms > self.drop_interval_ms:
            self.soft_drop()

    def toggle_pause(self):
        self.paused = not self.paused
        logger.info("paused" if self.paused else "resumed")

    def handle_input(self, action: Optional[Action]) -> bool:
        """Apply a player action. Returns False if it was ignored."""
        if action is None:
            return False
        if self.game_over:
            if action is Action.RESTART:
                self.reset()
                return True
            return False
        if action is Action.TOGGLE_PAUSE:
            self.toggle_pause()
            return True
        if self.paused:
            return False

        if action is Action.MOVE_LEFT:
            return self.move(-1)
        if action is Action.MOVE_RIGHT:
            return self.move(1)
        if action is Action.ROTATE:
            return self.rotate()
        if action is Action.SOFT_DROP:
            self.soft_drop()
            return True
        if action is Action.HARD_DROP:
            self.hard_drop()
            return True
        return False
