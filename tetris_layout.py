# tetris_layout.py
from dataclasses import dataclass
from tetris_config import CONFIG
from tetris_piece import COLS, ROWS

@dataclass
class Dims:
    cell: int
    score_h: int
    board_w: int
    board_h: int
    total_w: int
    total_h: int
    board_x: int
    board_y: int

def compute_dims() -> Dims:
    cell = int(CONFIG["BLOCK_SIZE"])
    score_h = 28

    board_w = COLS * cell
    board_h = ROWS * cell

    return Dims(
        cell=cell, score_h=score_h,
        board_w=board_w, board_h=board_h,
        total_w=board_w, total_h=score_h + board_h,
        board_x=0, board_y=score_h,
    )
