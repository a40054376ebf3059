"""
core/utils.py

Общие константы Abalone.
"""

from typing import List, Tuple

# Шесть направлений шестиугольной сетки (row, diag).
# Порядок важен: он задаёт порядок перебора ходов и разрешение ничьих в поиске.
DIRECTIONS: List[Tuple[int, int]] = [(0, 1), (1, 1), (1, 0), (0, -1), (-1, -1), (-1, 0)]

MIN_SIZE = 7
DEFAULT_SIZE = 9
DEFAULT_LEVEL = 2

# Сколько шаров нужно вытолкнуть для победы
ELIMINATION_THRESHOLD = 6

# Символы для отображения
BLACK_SYMBOL = 'X'
WHITE_SYMBOL = 'O'
EMPTY_SYMBOL = '.'


def is_direction(d_row: int, d_diag: int) -> bool:
    """Вектор - одно из шести направлений (не любой из 8 соседей)."""
    return abs(d_row) <= 1 and abs(d_diag) <= 1 and d_row + d_diag != 0
