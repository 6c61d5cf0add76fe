"""Game state, rules engine and the fixed-interval gravity loop.

One Game object owns the board, the active piece and the drop timer. Every
call below runs on the same thread as the frame loop and the key handlers,
so nothing here locks.
"""
from __future__ import annotations

import logging
from typing import Callable, List, Optional

from tetris_board import Board, clear, collide, create_board, merge, sweep
from tetris_config import CONFIG
from tetris_piece import COLS, ROWS, piece_for, rotate, shape_width
from tetris_player import Player, Pos
from tetris_rng import PieceRandom

log = logging.getLogger("tetris.game")

ACTIONS = ("left", "right", "down", "up", "hard_drop")


class Game:
    def __init__(self, rng: Optional[PieceRandom] = None, drop_interval: Optional[int] = None,
                 score_per_line: Optional[int] = None):
        self.board: Board = create_board(COLS, ROWS)
        self.player = Player(pos=Pos(0, 0))
        self.rng = rng if rng is not None else PieceRandom(CONFIG["SEED"])
        self.drop_interval = drop_interval if drop_interval is not None else CONFIG["DROP_INTERVAL_MS"]
        self.score_per_line = score_per_line if score_per_line is not None else CONFIG["SCORE_PER_LINE"]
        self.drop_counter = 0
        self.last_time = 0
        self.score_listeners: List[Callable[[int], None]] = []

    @property
    def score(self) -> int:
        return self.player.score

    def on_score(self, fn: Callable[[int], None]):
        self.score_listeners.append(fn)
        return fn

    def update_score(self):
        for fn in self.score_listeners:
            fn(self.player.score)

    def start(self):
        self.player_reset()
        self.update_score()

    # ---------- spawn ----------
    def player_reset(self, t: Optional[str] = None):
        """Spawn the next piece centred on row 0; restart the game if it doesn't fit."""
        t = t or self.rng.next_piece()
        p = self.player
        p.matrix = piece_for(t)
        p.pos.y = 0
        p.pos.x = COLS // 2 - shape_width(p.matrix) // 2
        log.debug("spawn %s at x=%d", t, p.pos.x)
        if collide(self.board, p):
            log.info("board overflow at score %d, restarting", p.score)
            clear(self.board)
            p.score = 0
            self.update_score()

    # ---------- movement ----------
    def player_move(self, dir: int):
        self.player.pos.x += dir
        if collide(self.board, self.player):
            self.player.pos.x -= dir

    def player_rotate(self, dir: int):
        p = self.player
        pos = p.pos.x
        offset = 1
        rotate(p.matrix, dir)
        while collide(self.board, p):
            p.pos.x += offset
            offset = -(offset + (1 if offset > 0 else -1))
            if offset > shape_width(p.matrix):
                rotate(p.matrix, -dir)
                p.pos.x = pos
                return

    def player_drop(self):
        p = self.player
        p.pos.y += 1
        if collide(self.board, p):
            p.pos.y -= 1
            merge(self.board, p)
            log.debug("lock at (%d, %d)", p.pos.x, p.pos.y)
            self.sweep()
            self.player_reset()
        # soft drop and lock both restart the gravity timer
        self.drop_counter = 0

    def hard_drop(self):
        p = self.player
        while not collide(self.board, p):
            p.pos.y += 1
        p.pos.y -= 1
        self.player_drop()

    def sweep(self) -> int:
        cleared = sweep(self.board)
        if cleared:
            self.player.score += cleared * self.score_per_line
            log.info("cleared %d row(s), score %d", cleared, self.player.score)
        self.update_score()
        return cleared

    # ---------- input ----------
    def handle(self, action: str):
        if action == "left": self.player_move(-1)
        elif action == "right": self.player_move(1)
        elif action == "down": self.player_drop()
        elif action == "up": self.player_rotate(1)
        elif action == "hard_drop": self.hard_drop()
        else:
            raise ValueError(f"unknown action {action!r}, expected one of {ACTIONS}")

    # ---------- loop ----------
    def update(self, time: int = 0):
        """Advance the gravity timer to `time` (ms) and drop once the interval has passed."""
        delta = time - self.last_time
        self.last_time = time
        self.drop_counter += delta
        if self.drop_counter > self.drop_interval:
            self.player_drop()
