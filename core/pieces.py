"""
core/pieces.py

Цвета, игроки и шары.
"""

from enum import Enum

from .utils import BLACK_SYMBOL, WHITE_SYMBOL, EMPTY_SYMBOL
from .geometry import dist_to_edge


class Color(Enum):
    """Цвет шара или пустой клетки."""
    BLACK = BLACK_SYMBOL
    WHITE = WHITE_SYMBOL
    NONE = EMPTY_SYMBOL

    def other(self) -> 'Color':
        """Противоположный цвет; NONE остаётся NONE."""
        return _OTHER_COLOR[self]

    @property
    def symbol(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


_OTHER_COLOR = {
    Color.BLACK: Color.WHITE,
    Color.WHITE: Color.BLACK,
    Color.NONE: Color.NONE,
}


class Player(Enum):
    """Участник партии."""
    HUMAN = 'human'
    MACHINE = 'machine'

    def other(self) -> 'Player':
        return _OTHER_PLAYER[self]

    def __str__(self) -> str:
        return self.value


_OTHER_PLAYER = {
    Player.HUMAN: Player.MACHINE,
    Player.MACHINE: Player.HUMAN,
}


class Ball:
    """
    Шар на доске.

    Цвет и владелец неизменны. Координаты меняет только ход
    (AbaloneBoard.execute_move). Сравнение - по идентичности: два шара
    могут временно иметь одинаковые координаты, когда один из них
    вытолкнут с доски.
    """
    __slots__ = ('color', 'owner', 'row', 'diag')

    def __init__(self, color: Color, owner: Player, row: int, diag: int):
        self.color = color
        self.owner = owner
        self.row = row
        self.diag = diag

    @property
    def position(self):
        return self.row, self.diag

    def dist_to_edge(self, size: int) -> int:
        """Расстояние до ближайшего края доски."""
        return dist_to_edge(self.row, self.diag, size)

    def clone(self) -> 'Ball':
        return Ball(self.color, self.owner, self.row, self.diag)

    def __repr__(self) -> str:
        return f"Ball({self.owner}, ({self.row},{self.diag}), {self.color})"
