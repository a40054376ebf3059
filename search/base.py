"""
search/base.py

Базовый класс поисковых движков машины.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple, TYPE_CHECKING
from dataclasses import dataclass
import threading
import time

from core.move import Move
from core.pieces import Player
from utils.error_handling import SearchError, SearchCancelledError
from utils.logging import get_logger
from utils.monitoring import get_monitor

if TYPE_CHECKING:
    from core.board import AbaloneBoard
    from .tree import TreeNode


@dataclass
class SearchStats:
    """Статистика работы движка."""
    nodes_visited: int = 0
    leaf_nodes: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Leaves: {self.leaf_nodes}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


@dataclass
class SearchResult:
    """Выбранный ход и минимакс-оценка корня."""
    move: Move
    score: float
    stats: SearchStats
    tree: Optional['TreeNode'] = None


class CancellationToken:
    """
    Кооперативная отмена поиска.

    cancel() можно вызвать из другого потока. Движок проверяет токен
    перед раскрытием каждого узла и прерывается SearchCancelledError.
    Дополнительно можно ограничить число узлов и время поиска.
    """

    def __init__(self, node_budget: Optional[int] = None,
                 time_limit: Optional[float] = None):
        self.node_budget = node_budget
        self.time_limit = time_limit
        self._event = threading.Event()
        self._deadline: Optional[float] = None

    def cancel(self):
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def start(self):
        """Запускает отсчёт time_limit."""
        if self.time_limit is not None:
            self._deadline = time.monotonic() + self.time_limit

    def check(self, nodes_visited: int):
        """
        Raises:
            SearchCancelledError: токен отменён или исчерпан бюджет
        """
        if self._event.is_set():
            raise SearchCancelledError("Поиск отменён")
        if self.node_budget is not None and nodes_visited > self.node_budget:
            raise SearchCancelledError(f"Превышен бюджет узлов ({self.node_budget})")
        if self._deadline is not None and time.monotonic() > self._deadline:
            raise SearchCancelledError(f"Превышено время поиска ({self.time_limit}s)")


class BaseSearch(ABC):
    """
    Базовый класс движка: минимакс до глубины difficulty_level доски.

    Наследники реализуют _search_root(). Общая часть - статистика,
    логирование, мониторинг и выбор лучшего хода корня.
    """

    def __init__(self, verbose: bool = False,
                 cancel_token: Optional[CancellationToken] = None):
        self.verbose = verbose
        self.cancel_token = cancel_token
        self.stats = SearchStats()
        self.last_result: Optional[SearchResult] = None

    def search(self, board: 'AbaloneBoard') -> SearchResult:
        """
        Выбирает ход машины.

        Args:
            board: доска, на которой ходит машина и у машины есть ходы

        Returns:
            SearchResult

        Raises:
            GameOverError: партия окончена
            SearchError: у игрока на ходу нет допустимых ходов
            SearchCancelledError: поиск прерван токеном
        """
        self.stats = SearchStats()
        if not board.has_legal_moves(board.next_player):
            raise SearchError(f"Нет допустимых ходов для {board.next_player}")
        if self.cancel_token is not None:
            self.cancel_token.start()

        self._log(f"Starting {self.__class__.__name__} (depth={board.difficulty_level})")
        start = time.perf_counter()
        try:
            move, score, tree = self._search_root(board)
        finally:
            self.stats.time_elapsed = time.perf_counter() - start
            get_monitor().increment_counter('nodes_visited', self.stats.nodes_visited)

        get_monitor().record_time('search', self.stats.time_elapsed)
        self._log(f"Best move: {move} ({score:.3f}); {self.stats}")
        self.last_result = SearchResult(move, score, self.stats, tree)
        return self.last_result

    @abstractmethod
    def _search_root(self, board: 'AbaloneBoard') -> Tuple[Move, float, Optional['TreeNode']]:
        """Возвращает (лучший ход, оценку корня, дерево или None)."""
        pass

    def _visit(self, height: int):
        """Учёт узла и проверка отмены перед его раскрытием."""
        self.stats.nodes_visited += 1
        self.stats.max_depth = max(self.stats.max_depth, height)
        if self.cancel_token is not None:
            self.cancel_token.check(self.stats.nodes_visited)

    @staticmethod
    def _expands(board: 'AbaloneBoard', height: int) -> bool:
        return height < board.difficulty_level and not board.is_game_over()

    @staticmethod
    def _better(score: float, best: float, mover: Player) -> bool:
        # Строгое сравнение: при равенстве остаётся первый найденный
        if mover is Player.HUMAN:
            return score < best
        return score > best

    @staticmethod
    def _choose_best(children: List[Tuple[Move, float]]) -> Tuple[Move, float]:
        """Первый ход корня со строго наибольшей оценкой."""
        best_move, best_score = None, float('-inf')
        for move, score in children:
            if score > best_score:
                best_move, best_score = move, score
        return best_move, best_score

    def _log(self, message: str) -> None:
        """Пишет в лог: info при verbose=True, иначе debug."""
        logger = get_logger()
        if self.verbose:
            logger.info(f"[{self.__class__.__name__}] {message}")
        else:
            logger.debug(f"[{self.__class__.__name__}] {message}")
