"""
Pygame rendering for the Tetris project.

The game only ever paints solid unit squares, so drawing goes through a
CellCanvas whose coordinates are already scaled to board cells. The score
text surface is cached and re-rendered only when the score changes.
"""
from __future__ import annotations
import pygame
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
from tetris_layout import Dims, COLS, ROWS

# Color per cell value; 0 is empty and never painted
COLORS: List[Optional[str]] = [
    None,
    "#FF0D72",
    "#0DC2FF",
    "#0DFF72",
    "#F538FF",
    "#FF8E0D",
    "#FFE138",
    "#3877FF",
]

BACKGROUND = "#000000"


class CellCanvas:
    """Drawing surface in board units: one unit is one cell."""
    def __init__(self, surface: pygame.Surface, cell: int, origin: Tuple[int, int] = (0, 0)):
        self.surface = surface
        self.cell = cell
        self.origin = origin

    def fill_rect(self, x: int, y: int, w: int, h: int, color):
        c = self.cell
        ox, oy = self.origin
        self.surface.fill(pygame.Color(color), pygame.Rect(ox + x*c, oy + y*c, w*c, h*c))


def draw_matrix(canvas: CellCanvas, matrix: Sequence[Sequence[int]], offset: Tuple[int, int]):
    ox, oy = offset
    for y, row in enumerate(matrix):
        for x, v in enumerate(row):
            if v:
                canvas.fill_rect(x + ox, y + oy, 1, 1, COLORS[v])


@dataclass
class ScoreCache:
    score: int = -1
    surf: Optional[pygame.Surface] = None


class Renderer:
    def __init__(self, dims: Dims, font: pygame.font.Font):
        self.dims = dims
        self.font = font
        self.score = ScoreCache()

    def set_score(self, score: int):
        if score != self.score.score:
            self.score.score = score
            self.score.surf = self.font.render(str(score), True, (255,255,255))

    def draw(self, screen: pygame.Surface, game):
        d = self.dims
        screen.fill(pygame.Color(BACKGROUND))
        canvas = CellCanvas(screen, d.cell, (d.board_x, d.board_y))
        canvas.fill_rect(0, 0, COLS, ROWS, BACKGROUND)
        draw_matrix(canvas, game.board, (0, 0))
        p = game.player
        draw_matrix(canvas, p.matrix, (p.pos.x, p.pos.y))
        if self.score.surf:
            rect = self.score.surf.get_rect(center=(d.total_w // 2, d.score_h // 2))
            screen.blit(self.score.surf, rect)
