"""Board helpers: create, collide, merge, sweep"""
from typing import List
from tetris_player import Player

Board = List[List[int]]


class MergeOutOfBounds(IndexError):
    pass


def create_board(width: int, height: int) -> Board:
    return [[0] * width for _ in range(height)]


def collide(board: Board, player: Player) -> bool:
    rows = len(board)
    for bx, by, _ in player.cells():
        if by < 0 or by >= rows: return True
        row = board[by]
        if bx < 0 or bx >= len(row): return True
        if row[bx]: return True
    return False


def merge(board: Board, player: Player):
    cells = list(player.cells())
    for bx, by, _ in cells:
        if not (0 <= by < len(board) and 0 <= bx < len(board[by])):
            raise MergeOutOfBounds(f"cell ({bx}, {by}) is outside the board")
    for bx, by, v in cells:
        board[by][bx] = v


def sweep(board: Board) -> int:
    """Clear full rows bottom-up and return how many were removed."""
    c = 0; y = len(board) - 1
    while y >= 0:
        if all(board[y]):
            width = len(board[y])
            del board[y]; board.insert(0, [0] * width); c += 1
        else: y -= 1
    return c


def clear(board: Board):
    for row in board:
        row[:] = [0] * len(row)
