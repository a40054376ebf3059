"""
heuristics - Оценка позиций для поиска машины

Экспортирует:
- Материальную и позиционную оценки
- Оценку окончания партии
- evaluate_position - сумму всех составляющих
"""

from .evaluation import (
    HUMAN_WEIGHT,
    WIN_SCORE,
    difference_score,
    material_score,
    distance_sum,
    position_score,
    winner_score,
    evaluate_position
)

__all__ = [
    'HUMAN_WEIGHT',
    'WIN_SCORE',
    'difference_score',
    'material_score',
    'distance_sum',
    'position_score',
    'winner_score',
    'evaluate_position'
]
