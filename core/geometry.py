"""
core/geometry.py

Геометрия шестиугольной доски в квадратной матрице size × size.

Координаты (row, diag): строка и диагональ. Шестиугольник вырезается из
квадрата условием max(0, row - h) <= diag <= min(row + h, size - 1),
где h = size // 2.
"""

from typing import Iterator, Tuple

from .utils import MIN_SIZE
from utils.error_handling import InvalidBoardError


def validate_size(size: int) -> int:
    """
    Проверяет размер доски.

    Raises:
        InvalidBoardError: если size < 7 или size чётный
    """
    if size < MIN_SIZE:
        raise InvalidBoardError(
            f"Минимальный размер доски - {MIN_SIZE}. Получено: {size}"
        )
    if size % 2 == 0:
        raise InvalidBoardError(f"Размер доски должен быть нечётным. Получено: {size}")
    return size


def first_diag(row: int, size: int) -> int:
    """Первая допустимая диагональ строки."""
    return max(0, row - size // 2)


def last_diag(row: int, size: int) -> int:
    """Последняя допустимая диагональ строки."""
    return min(row + size // 2, size - 1)


def is_on_board(row: int, diag: int, size: int) -> bool:
    """Клетка принадлежит доске."""
    return 0 <= row < size and first_diag(row, size) <= diag <= last_diag(row, size)


def is_valid_destination(row: int, diag: int, size: int) -> bool:
    """
    Клетка доски или клетка на одну позицию за её краем.

    Так задаётся цель хода, выталкивающего шар с доски.
    """
    return (-1 <= row <= size
            and first_diag(row, size) - 1 <= diag <= last_diag(row, size) + 1)


def row_length(row: int, size: int) -> int:
    """Количество клеток в строке."""
    if not 0 <= row < size:
        return 0
    return last_diag(row, size) - first_diag(row, size) + 1


def slot_count(size: int) -> int:
    """Всего клеток на доске: 3h² + 3h + 1."""
    h = size // 2
    return 3 * h * h + 3 * h + 1


def iter_slots(size: int) -> Iterator[Tuple[int, int]]:
    """Все клетки доски, строка за строкой."""
    for row in range(size):
        for diag in range(first_diag(row, size), last_diag(row, size) + 1):
            yield row, diag


def dist_to_edge(row: int, diag: int, size: int) -> int:
    """Расстояние до ближайшего из шести краёв шестиугольника."""
    diag2 = row - diag + size // 2
    return min(row, diag, diag2, size - row - 1, size - diag - 1, size - diag2 - 1)
