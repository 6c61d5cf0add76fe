"""Active piece state"""
from dataclasses import dataclass, field
from typing import List


@dataclass
class Pos:
    x: int = 0
    y: int = 0


@dataclass
class Player:
    matrix: List[List[int]] = field(default_factory=list)
    pos: Pos = field(default_factory=Pos)
    score: int = 0

    def cells(self):
        """Yield (board_x, board_y, value) for every occupied cell."""
        for y, row in enumerate(self.matrix):
            for x, v in enumerate(row):
                if v: yield self.pos.x + x, self.pos.y + y, v
