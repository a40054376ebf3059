"""
search/tree.py

Минимакс с построением полного дерева игры.

Дерево хранится целиком (TreeNode), поэтому его можно распечатать
и исследовать после поиска. По памяти дороже MinimaxSearch,
результат тот же.
"""

from typing import List, Optional, Tuple, TYPE_CHECKING

from .base import BaseSearch
from core.move import Move
from heuristics.evaluation import evaluate_position

if TYPE_CHECKING:
    from core.board import AbaloneBoard


class TreeNode:
    """Узел дерева: ход, который к нему привёл, оценка и дети."""
    __slots__ = ('move', 'score', '_children')

    def __init__(self, move: Optional[Move] = None):
        self.move = move
        self.score = 0.0
        self._children: List['TreeNode'] = []

    def add_child(self, node: 'TreeNode'):
        self._children.append(node)

    @property
    def children(self) -> Tuple['TreeNode', ...]:
        return tuple(self._children)

    def size(self) -> int:
        """Число узлов поддерева, включая этот."""
        return 1 + sum(child.size() for child in self._children)

    def height(self) -> int:
        if not self._children:
            return 0
        return 1 + max(child.height() for child in self._children)

    def to_string(self, indent: str = "    ") -> str:
        """
        Распечатка дерева: сначала поддеревья детей, затем сам узел.

        Отступ ставится один раз перед каждым поддеревом ребёнка, поэтому
        сдвигается только первая строка поддерева. Корень (move=None) не
        печатается, и перед поддеревьями его детей отступа нет.
        """
        parts = []
        for child in self._children:
            if self.move is not None:
                parts.append(indent)
            parts.append(child.to_string(indent))
        if self.move is not None:
            parts.append(f"{self.move}: {self.score:.6f}\n")
        return "".join(parts)

    def __repr__(self) -> str:
        return f"TreeNode({self.move}, {self.score:.3f}, children={len(self._children)})"


class GameTreeSearch(BaseSearch):
    """
    Минимакс с материализацией дерева.

    Особенности:
    - Каждому состоянию соответствует TreeNode
    - Оценка узла выставляется после построения его поддерева
    - Лучший ход - первый ребёнок корня со строго наибольшей оценкой
    """

    def _search_root(self, board: 'AbaloneBoard') -> Tuple[Move, float, TreeNode]:
        root = TreeNode()
        self._build(root, board, 0)
        best_move, _ = self._choose_best(
            [(child.move, child.score) for child in root.children]
        )
        return best_move, root.score, root

    def _build(self, parent: TreeNode, board: 'AbaloneBoard', height: int):
        """
        Строит поддерево узла parent и выставляет его оценку.

        Args:
            parent: узел для board
            board: позиция узла
            height: глубина узла от корня
        """
        self._visit(height)
        score = evaluate_position(board, height)

        if self._expands(board, height):
            mover = board.next_player
            best: Optional[float] = None

            for move in board.legal_moves(mover):
                node = TreeNode(move)
                self._build(node, board.execute_move(move), height + 1)
                # Оценка ребёнка известна после построения его поддерева
                if best is None or self._better(node.score, best, mover):
                    best = node.score
                parent.add_child(node)

            if best is not None:
                score += best

        if not parent.children:
            self.stats.leaf_nodes += 1
        parent.score = score
