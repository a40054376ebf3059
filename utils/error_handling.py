"""
utils/error_handling.py

Иерархия исключений и обработка ошибок.

Ошибки вызывающего кода (чужой ход, игра окончена, неверный размер доски)
выбрасываются как исключения. Ошибки пользовательского ввода (координаты
вне доски, ход против правила толкания) исключениями не являются -
см. Rejection в core/board.py.
"""

from typing import Callable, Any
from functools import wraps

from .logging import get_logger


class AbaloneError(Exception):
    """Базовое исключение движка."""
    pass


class InvalidBoardError(AbaloneError):
    """Недопустимый размер доски."""
    pass


class InvalidLevelError(AbaloneError):
    """Недопустимый уровень сложности."""
    pass


class InvalidCoordinatesError(AbaloneError):
    """Координаты вне доски."""
    pass


class InvalidColorError(AbaloneError):
    """Запрос для цвета NONE."""
    pass


class GameStateError(AbaloneError):
    """Операция недопустима в текущем состоянии партии."""
    pass


class GameOverError(GameStateError):
    """Партия уже окончена."""
    pass


class GameNotOverError(GameStateError):
    """Партия ещё не окончена."""
    pass


class WrongTurnError(GameStateError):
    """Сейчас ход другого игрока."""
    pass


class SearchError(AbaloneError):
    """Базовая ошибка поиска."""
    pass


class SearchCancelledError(SearchError):
    """Поиск прерван токеном отмены."""
    pass


def handle_errors(default_return: Any = None, log_error: bool = True):
    """
    Декоратор для обработки ошибок движка.

    Перехватывает только AbaloneError: прочие исключения - ошибки
    программы и пробрасываются дальше.

    Args:
        default_return: значение по умолчанию при ошибке
        log_error: логировать ли ошибку
    """
    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except AbaloneError as e:
                if log_error:
                    get_logger().error(f"{func.__name__}: {str(e)}")
                return default_return
        return wrapper
    return decorator


def validate_level(level: int) -> int:
    """
    Проверяет уровень сложности.

    Raises:
        InvalidLevelError: если уровень меньше 1
    """
    if level < 1:
        raise InvalidLevelError(f"Уровень должен быть больше 0. Получено: {level}")
    return level
