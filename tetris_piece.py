"""Piece catalog, shapes, in-place rotation"""
from typing import List

COLS, ROWS = 10, 20

# Letters in catalog order, so a letter's position + 1 is its shape index and cell value.
PIECE_TYPES = "TISZJLO"

Matrix = List[List[int]]

# Index 0 is unused so that a shape's cell value doubles as its catalog index.
SHAPES: List[Matrix] = [
    [],
    [[0,1,0],[1,1,1],[0,0,0]],
    [[2,2,2,2]],
    [[0,3,3],[3,3,0],[0,0,0]],
    [[4,4,0],[0,4,4],[0,0,0]],
    [[5,0,0],[5,5,5],[0,0,0]],
    [[0,0,6],[6,6,6],[0,0,0]],
    [[7,7],[7,7]],
]


class InvalidPieceType(ValueError):
    pass


class MalformedShape(ValueError):
    pass


def piece_for(t: str) -> Matrix:
    """Return a fresh copy of the canonical shape for one letter of PIECE_TYPES."""
    if not isinstance(t, str) or len(t) != 1 or t not in PIECE_TYPES:
        raise InvalidPieceType(f"unknown piece type {t!r}, expected one of {PIECE_TYPES}")
    return [row[:] for row in SHAPES[PIECE_TYPES.index(t) + 1]]


def shape_width(m: Matrix) -> int:
    return len(m[0]) if m else 0


def check_shape(m: Matrix):
    if not m or not m[0]:
        raise MalformedShape("shape matrix is empty")
    w = len(m[0])
    for y, row in enumerate(m):
        if len(row) != w:
            raise MalformedShape(f"row {y} has {len(row)} cells, expected {w}")


def rotate(m: Matrix, dir: int) -> None:
    """Rotate m in place: transpose, then mirror rows (dir > 0) or flip vertically.

    Rectangular shapes are fine; a 1x4 bar comes back as 4x1.
    """
    check_shape(m)
    m[:] = [list(c) for c in zip(*m)]
    if dir > 0:
        for row in m: row.reverse()
    else:
        m.reverse()
