"""
core - Ядро Abalone

Геометрия доски, шары, ходы и правила.
"""

from .board import AbaloneBoard, MoveResult, Rejection
from .move import Move
from .pieces import Ball, Color, Player
from .geometry import (
    first_diag, last_diag, is_on_board, is_valid_destination,
    row_length, slot_count, iter_slots, dist_to_edge, validate_size
)
from .utils import (
    DIRECTIONS, MIN_SIZE, DEFAULT_SIZE, DEFAULT_LEVEL, ELIMINATION_THRESHOLD,
    is_direction
)

__all__ = [
    'AbaloneBoard', 'MoveResult', 'Rejection',
    'Move', 'Ball', 'Color', 'Player',
    'first_diag', 'last_diag', 'is_on_board', 'is_valid_destination',
    'row_length', 'slot_count', 'iter_slots', 'dist_to_edge', 'validate_size',
    'DIRECTIONS', 'MIN_SIZE', 'DEFAULT_SIZE', 'DEFAULT_LEVEL',
    'ELIMINATION_THRESHOLD', 'is_direction'
]
