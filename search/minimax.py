"""
search/minimax.py

Минимакс без сохранения дерева: рекурсия возвращает только оценки.
Движок по умолчанию для AbaloneBoard.machine_move().
"""

from typing import Optional, Tuple, TYPE_CHECKING

from .base import BaseSearch
from core.move import Move
from heuristics.evaluation import evaluate_position

if TYPE_CHECKING:
    from core.board import AbaloneBoard


class MinimaxSearch(BaseSearch):
    """
    Полный перебор до глубины difficulty_level.

    Особенности:
    - Оценка узла = статическая оценка + лучшая оценка ребёнка
    - Человек минимизирует, машина максимизирует
    - Без альфа-бета отсечений и таблиц транспозиций
    """

    def _search_root(self, board: 'AbaloneBoard') -> Tuple[Move, float, None]:
        self._visit(0)
        static = evaluate_position(board, 0)
        mover = board.next_player

        children = []
        for move in board.legal_moves(mover):
            children.append((move, self._minimax(board.execute_move(move), 1)))

        best_move, best_score = self._choose_best(children)
        return best_move, static + best_score, None

    def _minimax(self, board: 'AbaloneBoard', height: int) -> float:
        """
        Минимакс-оценка поддерева.

        Args:
            board: позиция узла
            height: глубина узла от корня

        Returns:
            статическая оценка плюс лучшая оценка ребёнка (если дети есть)
        """
        self._visit(height)
        score = evaluate_position(board, height)

        if not self._expands(board, height):
            self.stats.leaf_nodes += 1
            return score

        mover = board.next_player
        best: Optional[float] = None
        for move in board.legal_moves(mover):
            child_score = self._minimax(board.execute_move(move), height + 1)
            if best is None or self._better(child_score, best, mover):
                best = child_score

        if best is None:
            self.stats.leaf_nodes += 1
            return score
        return score + best
