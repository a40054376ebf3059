"""
search - Поисковые движки машины

Экспортирует:
- MinimaxSearch: рекурсивный минимакс без хранения дерева (по умолчанию)
- GameTreeSearch: минимакс с построением дерева для отладки
- CancellationToken: кооперативная отмена поиска
"""

from .base import BaseSearch, SearchStats, SearchResult, CancellationToken
from .minimax import MinimaxSearch
from .tree import GameTreeSearch, TreeNode

ENGINES = {
    'minimax': MinimaxSearch,
    'tree': GameTreeSearch,
}

__all__ = [
    'BaseSearch',
    'SearchStats',
    'SearchResult',
    'CancellationToken',
    'MinimaxSearch',
    'GameTreeSearch',
    'TreeNode',
    'ENGINES',
]
