"""
utils/logging.py

Логирование доски, движков и консольного прогона.

Все компоненты пишут в один логгер "abalone". По умолчанию вывод идёт
в stdout; main.py понижает уровень до WARNING без --verbose и может
добавить файл (--log-file).
"""

import logging
import sys
from typing import Optional


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _configure(handler: logging.Handler, level: int) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


class GameLogger:
    """
    Обёртка над logging.Logger для партии.

    Ходы и пропуски пишутся на уровне debug, итоги поиска - на debug
    или info (verbose), ошибки поиска и ввода - на error.
    """

    def __init__(self, name: str = "abalone", level: int = logging.INFO):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Повторное создание не должно дублировать вывод
        if not self.logger.handlers:
            self.logger.addHandler(_configure(logging.StreamHandler(sys.stdout), level))

    def set_level(self, level: int, console_only: bool = False):
        """
        Меняет уровень вывода.

        Args:
            level: новый уровень
            console_only: менять только консольные handlers; уровень самого
                логгера и файловых handlers остаётся прежним
        """
        if not console_only:
            self.logger.setLevel(level)
        for handler in self.logger.handlers:
            # FileHandler - тоже StreamHandler
            if console_only and isinstance(handler, logging.FileHandler):
                continue
            handler.setLevel(level)

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)

    def critical(self, message: str, exc_info: bool = False):
        self.logger.critical(message, exc_info=exc_info)


_default_logger: Optional[GameLogger] = None


def get_logger(name: str = "abalone", level: int = logging.INFO) -> GameLogger:
    """
    Общий логгер проекта.

    Args:
        name: имя логгера (учитывается только при первом вызове)
        level: начальный уровень (учитывается только при первом вызове)

    Returns:
        GameLogger
    """
    global _default_logger
    if _default_logger is None:
        _default_logger = GameLogger(name, level)
    return _default_logger


def setup_file_logging(log_file: str = "abalone.log",
                       level: int = logging.INFO) -> logging.Handler:
    """
    Дублирует лог партии в файл.

    Args:
        log_file: путь к файлу лога
        level: уровень для файла

    Returns:
        Добавленный handler (его можно снять через removeHandler)
    """
    handler = _configure(logging.FileHandler(log_file, encoding='utf-8'), level)
    get_logger().logger.addHandler(handler)
    return handler
