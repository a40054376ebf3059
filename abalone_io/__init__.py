"""
abalone_io - Ввод/вывод для Abalone

Экспортирует:
- Парсинг ходов и параметров (нумерация с 1)
- Визуализацию доски и результатов
"""

from .parser import parse_move, parse_size, parse_level, parse_player
from .visualizer import display_board, format_piece_counts, format_winner, format_result

__all__ = [
    'parse_move',
    'parse_size',
    'parse_level',
    'parse_player',
    'display_board',
    'format_piece_counts',
    'format_winner',
    'format_result'
]
