"""
core/move.py

Ход: пара координат «откуда - куда». Допустимость хода проверяет доска.
"""

from typing import NamedTuple, Tuple


class Move(NamedTuple):
    row_from: int
    diag_from: int
    row_to: int
    diag_to: int

    @classmethod
    def step(cls, row: int, diag: int, direction: Tuple[int, int]) -> 'Move':
        """Ход из (row, diag) на одну клетку в направлении direction."""
        d_row, d_diag = direction
        return cls(row, diag, row + d_row, diag + d_diag)

    @property
    def source(self) -> Tuple[int, int]:
        return self.row_from, self.diag_from

    @property
    def target(self) -> Tuple[int, int]:
        return self.row_to, self.diag_to

    @property
    def direction(self) -> Tuple[int, int]:
        return self.row_to - self.row_from, self.diag_to - self.diag_from

    def __str__(self) -> str:
        # Внешнее представление нумерует строки и диагонали с 1
        return (f"move {self.row_from + 1} {self.diag_from + 1} "
                f"{self.row_to + 1} {self.diag_to + 1}")
