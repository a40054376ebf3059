"""
utils/monitoring.py

Мониторинг производительности: длительность ходов машины и поисков,
счётчик просмотренных узлов.
"""

import time
from collections import defaultdict
from dataclasses import dataclass, asdict
from functools import wraps
from typing import Any, Dict, List, Optional


@dataclass
class TimingStats:
    """Сводка по одной операции."""
    operation: str
    count: int
    total: float
    average: float
    min: float
    max: float
    last: float

    @classmethod
    def from_times(cls, operation: str, times: List[float]) -> 'TimingStats':
        total = sum(times)
        return cls(operation, len(times), total, total / len(times),
                   min(times), max(times), times[-1])

    def __str__(self) -> str:
        return f"{self.operation}: {self.count} раз, среднее {self.average:.3f}s"


class PerformanceMonitor:
    """
    Накопитель замеров.

    Операции ('machine_move', 'search', ...) хранят список длительностей,
    счётчики ('nodes_visited') - сумму.
    """

    def __init__(self):
        self.metrics: Dict[str, List[float]] = defaultdict(list)
        self.counters: Dict[str, int] = defaultdict(int)

    def record_time(self, operation: str, elapsed: float):
        self.metrics[operation].append(elapsed)

    def increment_counter(self, counter: str, value: int = 1):
        self.counters[counter] += value

    def timing(self, operation: str) -> Optional[TimingStats]:
        times = self.metrics.get(operation)
        if not times:
            return None
        return TimingStats.from_times(operation, times)

    def get_stats(self, operation: Optional[str] = None) -> Dict[str, Any]:
        """
        Статистика в виде словаря.

        Args:
            operation: имя операции; None - сводка по всем операциям и счётчикам

        Returns:
            Поля TimingStats для операции ({} если замеров не было),
            либо {'operations', 'counters', 'total_operations'}
        """
        if operation:
            stats = self.timing(operation)
            return asdict(stats) if stats is not None else {}

        return {
            'operations': {op: self.get_stats(op) for op in self.metrics},
            'counters': dict(self.counters),
            'total_operations': sum(len(times) for times in self.metrics.values())
        }

    def format_stats(self) -> str:
        """Сводка для вывода в консоль (--stats)."""
        lines = [f"Всего операций: {sum(len(t) for t in self.metrics.values())}"]
        lines.extend(f"  {self.timing(op)}" for op in self.metrics if self.metrics[op])
        lines.extend(f"  {name}: {value}" for name, value in self.counters.items())
        return "\n".join(lines)

    def reset(self):
        self.metrics.clear()
        self.counters.clear()


_monitor: Optional[PerformanceMonitor] = None


def get_monitor() -> PerformanceMonitor:
    """Общий монитор проекта."""
    global _monitor
    if _monitor is None:
        _monitor = PerformanceMonitor()
    return _monitor


def monitor_time(operation: str):
    """
    Декоратор: время вызова пишется в operation, при исключении -
    в operation + '_error', исключение пробрасывается.

    Usage:
        @monitor_time('machine_move')
        def machine_move(self, engine=None):
            ...
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            name = f"{operation}_error"
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
                name = operation
                return result
            finally:
                get_monitor().record_time(name, time.perf_counter() - start)
        return wrapper
    return decorator
