"""
Metrics collection and monitoring for FlowBot.
"""

import threading
from typing import Dict, Any, List, Optional
from collections import defaultdict

from ...config.settings import get_settings


class MetricsCollector:
    """
    Collects performance metrics for FlowBot operations.

    Provides thread-safe counters and timers with basic summary
    statistics.
    """

    _instance: Optional["MetricsCollector"] = None
    _lock = threading.RLock()

    def __new__(cls) -> "MetricsCollector":
        """Singleton pattern."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = super().__new__(cls)
                    cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize metrics collector."""
        if self._initialized:
            return

        self.settings = get_settings()
        self.enabled = self.settings.monitoring_config.get('enabled', True)
        self.max_history = self.settings.monitoring_config.get('max_history', 1000)

        self._counters: Dict[str, int] = defaultdict(int)
        self._timers: Dict[str, List[float]] = defaultdict(list)

        self._initialized = True

    def counter(self, name: str, value: int = 1) -> None:
        """
        Increment a counter metric.

        Args:
            name: Counter name
            value: Increment value
        """
        if not self.enabled:
            return

        with self._lock:
            self._counters[name] += value

    def timer(self, name: str, duration_seconds: float) -> None:
        """
        Record a timing metric, keeping the most recent ``max_history`` samples.

        Args:
            name: Timer name
            duration_seconds: Duration in seconds
        """
        if not self.enabled:
            return

        with self._lock:
            self._timers[name].append(duration_seconds)

            if len(self._timers[name]) > self.max_history:
                self._timers[name] = self._timers[name][-self.max_history:]

    def get_counter(self, name: str) -> int:
        """Get current counter value."""
        return self._counters.get(name, 0)

    def get_timer_stats(self, name: str) -> Dict[str, float]:
        """Get timer statistics."""
        timings = self._timers.get(name, [])

        if not timings:
            return {
                'count': 0,
                'mean': 0.0,
                'min': 0.0,
                'max': 0.0,
                'p95': 0.0,
            }

        sorted_timings = sorted(timings)
        count = len(sorted_timings)

        return {
            'count': count,
            'mean': sum(sorted_timings) / count,
            'min': sorted_timings[0],
            'max': sorted_timings[-1],
            'p95': sorted_timings[min(int(0.95 * count), count - 1)],
        }

    def get_all_metrics(self) -> Dict[str, Any]:
        """Get all current metric values."""
        with self._lock:
            return {
                'counters': dict(self._counters),
                'timers': {name: self.get_timer_stats(name) for name in self._timers},
            }

    def reset(self) -> None:
        """Drop every recorded metric."""
        with self._lock:
            self._counters.clear()
            self._timers.clear()

    def record_api_request(self,
                           endpoint: str,
                           method: str,
                           duration_seconds: float,
                           status_code: int) -> None:
        """Record API request metrics."""
        self.counter('api_requests_total')
        self.counter(f'api_requests_total.{method} {endpoint}.{status_code}')
        self.timer(f'api_request_duration.{method} {endpoint}', duration_seconds)

    def record_provider_attempt(self,
                                provider: str,
                                success: bool,
                                duration_seconds: float) -> None:
        """Record one step of the provider chain."""
        outcome = 'success' if success else 'fallthrough'

        self.counter(f'provider_{outcome}_total.{provider}')
        self.timer(f'provider_duration.{provider}', duration_seconds)


# Global instance
_metrics_collector = None
_metrics_lock = threading.Lock()


def get_metrics() -> MetricsCollector:
    """
    Get the global metrics collector instance.

    Returns:
        MetricsCollector singleton instance
    """
    global _metrics_collector

    if _metrics_collector is None:
        with _metrics_lock:
            if _metrics_collector is None:
                _metrics_collector = MetricsCollector()

    return _metrics_collector
