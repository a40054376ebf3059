"""
abalone_io/parser.py

Парсинг пользовательского ввода.

Снаружи строки и диагонали нумеруются с 1, внутри движка - с 0.
Перевод между ними выполняется только здесь.
"""

import re

from core.move import Move
from core.pieces import Player
from core.utils import MIN_SIZE

MOVE_PATTERN = re.compile(
    r'^\s*(?:m(?:ove)?\s+)?([+-]?\d+)\s+([+-]?\d+)\s+([+-]?\d+)\s+([+-]?\d+)\s*$',
    re.IGNORECASE
)


def parse_move(text: str) -> Move:
    """
    Парсит ход в формате "r1 d1 r2 d2" или "move r1 d1 r2 d2".

    Args:
        text: строка с четырьмя координатами (нумерация с 1)

    Returns:
        Move в координатах движка (нумерация с 0)

    Raises:
        ValueError: неверный формат
    """
    match = MOVE_PATTERN.match(text)
    if not match:
        raise ValueError(
            f"Неверный формат хода: '{text}'. Ожидается: move r1 d1 r2 d2"
        )
    row_from, diag_from, row_to, diag_to = (int(group) - 1 for group in match.groups())
    return Move(row_from, diag_from, row_to, diag_to)


def _parse_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ValueError(f"Неверное число: '{text}'") from None


def parse_size(text: str) -> int:
    """
    Парсит размер доски.

    Raises:
        ValueError: не число, размер меньше 7 или чётный
    """
    size = _parse_int(text)
    if size < MIN_SIZE or size % 2 == 0:
        raise ValueError(f"Размер доски должен быть нечётным и не меньше {MIN_SIZE}")
    return size


def parse_level(text: str) -> int:
    """
    Парсит уровень сложности.

    Raises:
        ValueError: не число или меньше 1
    """
    level = _parse_int(text)
    if level < 1:
        raise ValueError("Уровень должен быть больше 0")
    return level


def parse_player(text: str) -> Player:
    """'human' / 'machine' (регистр и сокращения до первой буквы допустимы)."""
    value = text.strip().lower()
    for player in Player:
        if value and player.value.startswith(value):
            return player
    raise ValueError(f"Неизвестный игрок: '{text}'")
