"""
ColorScore Metrics Collection
In-process metrics collection for monitoring and performance tracking.
"""
import time
from collections import defaultdict, deque, Counter
from typing import Any, Deque, Dict, Iterable, List, Optional
from threading import Lock


class MetricsCollector:
    """Simple in-process metrics collector.

    Timings and scores keep only the most recent ``max_history`` samples.
    """

    def __init__(self, max_history: int = 1000):
        """Initialize metrics collector."""
        self.max_history = max_history
        self._lock = Lock()
        self._counters: Dict[str, int] = Counter()
        self._timings: Dict[str, Deque[float]] = defaultdict(lambda: deque(maxlen=max_history))
        self._scores: Deque[float] = deque(maxlen=max_history)
        self._start_time = time.time()

    def increment_request_count(self):
        """Increment total request counter."""
        with self._lock:
            self._counters["score_requests_total"] += 1

    def increment_success_count(self):
        """Increment successful analysis counter."""
        with self._lock:
            self._counters["score_succeeded_total"] += 1

    def increment_failure_count(self, error_type: str):
        """Increment failure counter by error type."""
        with self._lock:
            self._counters[f"score_failed_total_{error_type}"] += 1

    def record_timing(self, operation: str, duration_ms: float):
        """Record timing for an operation."""
        with self._lock:
            self._timings[f"{operation}_duration_ms"].append(duration_ms)

    def record_score(self, score: float):
        """Record a final harmony score."""
        with self._lock:
            self._scores.append(score)

    def get_counters(self) -> Dict[str, int]:
        """Get current counter values."""
        with self._lock:
            return dict(self._counters)

    def get_timing_stats(self) -> Dict[str, Dict[str, float]]:
        """Get timing statistics."""
        with self._lock:
            return {
                operation: self._summarize(timings)
                for operation, timings in self._timings.items()
                if timings
            }

    def get_score_stats(self) -> Dict[str, float]:
        """Get harmony score statistics."""
        with self._lock:
            if not self._scores:
                return {}
            return self._summarize(self._scores)

    def get_uptime_seconds(self) -> float:
        """Get service uptime in seconds."""
        return time.time() - self._start_time

    def get_summary(self) -> Dict[str, Any]:
        """Get complete metrics summary."""
        return {
            "uptime_seconds": self.get_uptime_seconds(),
            "counters": self.get_counters(),
            "timing_stats": self.get_timing_stats(),
            "score_stats": self.get_score_stats()
        }

    def reset(self):
        """Reset all metrics (for testing)."""
        with self._lock:
            self._counters.clear()
            self._timings.clear()
            self._scores.clear()
            self._start_time = time.time()

    @classmethod
    def _summarize(cls, data: Iterable[float]) -> Dict[str, float]:
        data = list(data)
        return {
            "count": len(data),
            "mean": sum(data) / len(data),
            "min": min(data),
            "max": max(data),
            "p50": cls._percentile(data, 50),
            "p95": cls._percentile(data, 95)
        }

    @staticmethod
    def _percentile(data: List[float], percentile: int) -> float:
        """Calculate percentile of data."""
        if not data:
            return 0.0

        sorted_data = sorted(data)
        k = (len(sorted_data) - 1) * percentile / 100
        f = int(k)
        c = k - f

        if f + 1 < len(sorted_data):
            return sorted_data[f] + c * (sorted_data[f + 1] - sorted_data[f])
        else:
            return sorted_data[f]


# Global metrics instance
_metrics: Optional[MetricsCollector] = None


def get_metrics() -> MetricsCollector:
    """Get or create global metrics collector."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsCollector()
    return _metrics


def reset_metrics():
    """Reset global metrics (for testing)."""
    global _metrics
    if _metrics is not None:
        _metrics.reset()
