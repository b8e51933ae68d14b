"""Performance monitoring utilities"""
import threading
import time
from collections import deque
from functools import wraps
from dataclasses import dataclass, field
from typing import Callable, Deque, Dict
import numpy as np

# Latency samples kept per operation; older samples are discarded
MAX_LATENCY_SAMPLES = 10000


@dataclass
class OperationMetrics:
    """Latency and outcome counters for one operation"""
    calls: int = 0
    failures: int = 0
    items: int = 0
    total_time: float = 0.0
    latencies: Deque[float] = field(default_factory=lambda: deque(maxlen=MAX_LATENCY_SAMPLES))

    @property
    def avg_latency(self) -> float:
        return float(np.mean(self.latencies)) if self.latencies else 0.0

    @property
    def p95_latency(self) -> float:
        return float(np.percentile(self.latencies, 95)) if self.latencies else 0.0

    @property
    def items_per_second(self) -> float:
        return self.items / self.total_time if self.total_time > 0 else 0.0

    def record(self, latency: float, success: bool = True, items: int = 0):
        self.calls += 1
        self.items += items
        self.total_time += latency
        self.latencies.append(latency)
        if not success:
            self.failures += 1


class PerformanceMonitor:
    """Track latency of matching operations, keyed by operation name"""

    def __init__(self):
        self._lock = threading.Lock()
        self.operations: Dict[str, OperationMetrics] = {}

    def record(self, name: str, latency: float, success: bool = True, items: int = 0):
        with self._lock:
            self.operations.setdefault(name, OperationMetrics()).record(latency, success, items)

    def measure(self, name: str) -> Callable:
        """Decorator timing every call of the wrapped function under ``name``.

        When the function returns a sized result, its length is counted as
        processed items.
        """
        def decorator(func):
            @wraps(func)
            def wrapper(*args, **kwargs):
                start = time.perf_counter()
                try:
                    result = func(*args, **kwargs)
                except Exception:
                    self.record(name, time.perf_counter() - start, success=False)
                    raise
                items = len(result) if hasattr(result, "__len__") else 1
                self.record(name, time.perf_counter() - start, items=items)
                return result
            return wrapper
        return decorator

    def get_report(self) -> dict:
        """Generate performance report"""
        with self._lock:
            return {
                name: {
                    "calls": metrics.calls,
                    "failures": metrics.failures,
                    "items": metrics.items,
                    "avg_latency_sec": round(metrics.avg_latency, 4),
                    "p95_latency_sec": round(metrics.p95_latency, 4),
                    "items_per_sec": round(metrics.items_per_second, 1),
                }
                for name, metrics in self.operations.items()
            }

    def reset(self):
        with self._lock:
            self.operations.clear()


# Global monitor instance
monitor = PerformanceMonitor()
