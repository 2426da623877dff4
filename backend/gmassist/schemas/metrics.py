# backend/gmassist/schemas/metrics.py
from typing import Dict

from gmassist.schemas.base import CamelModel


class RouteSummary(CamelModel):
    count: int
    average_ms: float


class MetricsSummary(CamelModel):
    count: int
    capacity: int
    average_ms: float
    max_ms: float
    slow_count: int
    error_count: int
    routes: Dict[str, RouteSummary]
