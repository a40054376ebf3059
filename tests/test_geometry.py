"""
tests/test_geometry.py

Тесты геометрии шестиугольной доски.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from core.geometry import (
    is_on_board, is_valid_destination, row_length, slot_count, iter_slots,
    dist_to_edge, validate_size, first_diag, last_diag
)
from core.utils import DIRECTIONS, is_direction
from utils.error_handling import InvalidBoardError


@pytest.mark.parametrize("size", [7, 9, 11])
def test_slot_count_is_hexagonal(size):
    """Тест: число клеток 3h² + 3h + 1, строки симметричны, самая длинная - средняя."""
    h = size // 2
    lengths = [row_length(row, size) for row in range(size)]

    assert sum(lengths) == 3 * h * h + 3 * h + 1
    assert slot_count(size) == sum(lengths)
    assert len(list(iter_slots(size))) == sum(lengths)
    assert lengths == lengths[::-1], "Строки должны быть симметричны"
    assert max(lengths) == lengths[h] == size, "Средняя строка - самая длинная"
    assert lengths[0] == h + 1


def test_reference_rows_size_9():
    """Тест: диапазоны диагоналей для доски 9."""
    assert (first_diag(0, 9), last_diag(0, 9)) == (0, 4)
    assert (first_diag(4, 9), last_diag(4, 9)) == (0, 8)
    assert (first_diag(8, 9), last_diag(8, 9)) == (4, 8)


def test_is_on_board_corners():
    """Тест: углы шестиугольника на доске, углы квадрата - нет."""
    assert is_on_board(0, 0, 9)
    assert is_on_board(0, 4, 9)
    assert is_on_board(4, 0, 9)
    assert is_on_board(4, 8, 9)
    assert is_on_board(8, 8, 9)
    assert not is_on_board(0, 5, 9)
    assert not is_on_board(8, 3, 9)
    assert not is_on_board(-1, 0, 9)
    assert not is_on_board(9, 8, 9)


def test_valid_destination_extends_by_one():
    """Тест: цель хода может быть на клетку за краем, но не дальше."""
    assert is_valid_destination(-1, 0, 9)
    assert is_valid_destination(-1, -1, 9)
    assert is_valid_destination(-1, 4, 9)
    assert not is_valid_destination(-1, 5, 9)
    assert not is_valid_destination(-2, 0, 9)
    assert is_valid_destination(9, 9, 9)
    assert is_valid_destination(9, 4, 9)
    assert not is_valid_destination(9, 3, 9)
    assert not is_valid_destination(10, 5, 9)


@pytest.mark.parametrize("size", [7, 9, 11])
def test_neighbours_are_valid_destinations(size):
    """Тест: сосед любой клетки в любом направлении - допустимая цель."""
    for row, diag in iter_slots(size):
        for d_row, d_diag in DIRECTIONS:
            assert is_valid_destination(row + d_row, diag + d_diag, size)


def test_directions():
    """Тест: ровно шесть направлений, без (1,-1), (-1,1) и (0,0)."""
    vectors = [(dr, dd) for dr in (-1, 0, 1) for dd in (-1, 0, 1) if is_direction(dr, dd)]
    assert sorted(vectors) == sorted(DIRECTIONS)
    assert not is_direction(1, -1)
    assert not is_direction(-1, 1)
    assert not is_direction(0, 0)
    assert not is_direction(2, 0)


def test_dist_to_edge():
    """Тест: расстояние до края."""
    assert dist_to_edge(4, 4, 9) == 4, "Центр доски 9 - в 4 шагах от края"
    assert dist_to_edge(0, 0, 9) == 0
    assert dist_to_edge(4, 0, 9) == 0
    assert dist_to_edge(1, 5, 9) == 0, "Третья ось: row - diag + h = 0"
    assert dist_to_edge(2, 3, 9) == 2


@pytest.mark.parametrize("size", [5, 8, 10, -1])
def test_validate_size_rejects(size):
    """Тест: размер меньше 7 или чётный недопустим."""
    with pytest.raises(InvalidBoardError):
        validate_size(size)


def test_validate_size_accepts():
    assert validate_size(7) == 7
    assert validate_size(13) == 13
