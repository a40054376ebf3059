"""
abalone_io/visualizer.py

Текстовый вывод доски, счёта и результатов ходов.
"""

from typing import TYPE_CHECKING

from core.geometry import first_diag
from core.pieces import Color, Player

if TYPE_CHECKING:
    from core.board import AbaloneBoard, MoveResult


def display_board(board: 'AbaloneBoard') -> str:
    """
    Доска с номерами строк (с 1) и номером первой диагонали каждой строки.

    Args:
        board: доска

    Returns:
        Строка для вывода
    """
    size = board.size
    lines = []
    for row, text in zip(range(size - 1, -1, -1), board.to_string().split("\n")):
        lines.append(f"{row + 1:>2} | {text}   ({first_diag(row, size) + 1}..)")
    return "\n".join(lines)


def format_piece_counts(board: 'AbaloneBoard') -> str:
    """Число шаров каждого цвета."""
    return "\n".join(
        f"{color}: {board.piece_count(color)}" for color in (Color.BLACK, Color.WHITE)
    )


def format_winner(board: 'AbaloneBoard') -> str:
    if board.winner is Player.HUMAN:
        return "🎉 Поздравляем! Вы победили."
    return "Машина победила."


def format_result(result: 'MoveResult', actor: Player) -> str:
    """
    Описание результата хода.

    Args:
        result: результат apply_human_move / machine_move
        actor: кто ходил
    """
    if result.rejection is not None:
        return f"❌ Ошибка! {result.rejection}: {result.move}"
    if result.skipped:
        return f"{actor}: нет допустимых ходов, пропуск"
    line = f"{actor}: {result.move}"
    if result.score is not None:
        line += f" (оценка {result.score:.3f})"
    return line
