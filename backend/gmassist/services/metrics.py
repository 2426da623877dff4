# backend/gmassist/services/metrics.py
from collections import deque
from typing import Dict, Any, NamedTuple


class RequestSample(NamedTuple):
    method: str
    path: str
    status_code: int
    duration_ms: float


class MetricsSink:
    """Bounded buffer of the most recent request timings.

    One instance per application, created by the app factory and kept on
    ``app.state.metrics``. Oldest samples are dropped once ``capacity`` is reached.
    """

    def __init__(self, capacity: int = 1000, slow_threshold_ms: float = 500):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self.slow_threshold_ms = slow_threshold_ms
        self._samples: deque = deque(maxlen=capacity)

    def __len__(self) -> int:
        return len(self._samples)

    def record(self, sample: RequestSample) -> None:
        self._samples.append(sample)

    def is_slow(self, sample: RequestSample) -> bool:
        return sample.duration_ms > self.slow_threshold_ms

    def clear(self) -> None:
        self._samples.clear()

    def summarize(self) -> Dict[str, Any]:
        samples = list(self._samples)
        if not samples:
            return {
                "count": 0,
                "capacity": self.capacity,
                "average_ms": 0.0,
                "max_ms": 0.0,
                "slow_count": 0,
                "error_count": 0,
                "routes": {},
            }

        durations = [s.duration_ms for s in samples]
        per_route: Dict[str, list] = {}
        for s in samples:
            per_route.setdefault(f"{s.method} {s.path}", []).append(s.duration_ms)

        return {
            "count": len(samples),
            "capacity": self.capacity,
            "average_ms": round(sum(durations) / len(durations), 2),
            "max_ms": round(max(durations), 2),
            "slow_count": sum(1 for s in samples if self.is_slow(s)),
            "error_count": sum(1 for s in samples if s.status_code >= 500),
            "routes": {
                route: {"count": len(values), "average_ms": round(sum(values) / len(values), 2)}
                for route, values in per_route.items()
            },
        }
