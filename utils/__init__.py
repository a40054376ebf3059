"""
utils - Общая инфраструктура: логирование, ошибки, мониторинг.
"""

from .logging import get_logger, setup_file_logging, GameLogger
from .monitoring import PerformanceMonitor, TimingStats, get_monitor, monitor_time
from .error_handling import (
    AbaloneError, InvalidBoardError, InvalidLevelError,
    InvalidCoordinatesError, InvalidColorError,
    GameStateError, GameOverError, GameNotOverError, WrongTurnError,
    SearchError, SearchCancelledError,
    handle_errors, validate_level
)

__all__ = [
    'get_logger', 'setup_file_logging', 'GameLogger',
    'PerformanceMonitor', 'TimingStats', 'get_monitor', 'monitor_time',
    'AbaloneError', 'InvalidBoardError', 'InvalidLevelError',
    'InvalidCoordinatesError', 'InvalidColorError',
    'GameStateError', 'GameOverError', 'GameNotOverError', 'WrongTurnError',
    'SearchError', 'SearchCancelledError',
    'handle_errors', 'validate_level'
]
