"""
heuristics/evaluation.py

Оценка позиции с точки зрения машины (больше = лучше для машины).

Вклад человека штрафуется множителем 1.5 и в материале, и в позиции:
машине важнее сохранить свои шары, чем выбить чужие.
"""

from typing import TYPE_CHECKING

from core.pieces import Player

if TYPE_CHECKING:
    from core.board import AbaloneBoard

HUMAN_WEIGHT = 1.5
WIN_SCORE = 5_000_000


def difference_score(board: 'AbaloneBoard') -> float:
    """Разница в числе шаров."""
    return board.ball_count(Player.MACHINE) - HUMAN_WEIGHT * board.ball_count(Player.HUMAN)


def material_score(board: 'AbaloneBoard') -> float:
    """Материал: разница в шарах, умноженная на размер доски."""
    return board.size * difference_score(board)


def distance_sum(board: 'AbaloneBoard', player: Player) -> int:
    """Сумма расстояний шаров игрока до края доски."""
    size = board.size
    return sum(ball.dist_to_edge(size) for ball in board.pieces(player))


def position_score(board: 'AbaloneBoard') -> float:
    """Позиция: шары вдали от края в безопасности."""
    return distance_sum(board, Player.MACHINE) - HUMAN_WEIGHT * distance_sum(board, Player.HUMAN)


def winner_score(board: 'AbaloneBoard', height: int) -> float:
    """
    Оценка окончания партии.

    Чем раньше (меньше height) достигнута победа, тем больше модуль оценки.

    Args:
        board: доска
        height: глубина узла от корня дерева поиска

    Raises:
        ValueError: партия окончена, а height < 1
    """
    if not board.is_game_over():
        return 0.0
    if height < 1:
        raise ValueError(f"Конечная позиция на глубине {height}: ожидается height >= 1")
    if board.winner is Player.HUMAN:
        return -HUMAN_WEIGHT * WIN_SCORE / height
    return WIN_SCORE / height


def evaluate_position(board: 'AbaloneBoard', height: int) -> float:
    """
    Статическая оценка узла дерева поиска.

    Args:
        board: доска
        height: глубина узла от корня

    Returns:
        материал + позиция + оценка окончания партии
    """
    return material_score(board) + position_score(board) + winner_score(board, height)
