from __future__ import annotations

from typing import Iterable

from tetris_game import Game


class FixedRandom:
    """Deals piece letters from a fixed sequence, repeating the last one."""

    def __init__(self, letters: Iterable[str]) -> None:
        self.letters = list(letters)
        self.dealt: list[str] = []

    def next_piece(self) -> str:
        t = self.letters.pop(0) if len(self.letters) > 1 else self.letters[0]
        self.dealt.append(t)
        return t


def make_game(*letters: str, drop_interval: int = 1000) -> Game:
    return Game(FixedRandom(letters or "T"), drop_interval=drop_interval, score_per_line=10)


def rotated_cw(m):
    return [list(r) for r in zip(*m[::-1])]


def rotated_ccw(m):
    return [list(c) for c in zip(*m)][::-1]
