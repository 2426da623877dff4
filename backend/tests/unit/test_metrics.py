# backend/tests/unit/test_metrics.py
import pytest

from gmassist.services.metrics import MetricsSink, RequestSample


def sample(path="/api/scenarios", duration_ms=10.0, status_code=200, method="GET"):
    return RequestSample(method, path, status_code, duration_ms)


def test_empty_summary():
    summary = MetricsSink(capacity=10).summarize()

    assert summary["count"] == 0
    assert summary["capacity"] == 10
    assert summary["average_ms"] == 0.0
    assert summary["routes"] == {}


def test_summary_aggregates_samples():
    sink = MetricsSink(capacity=10, slow_threshold_ms=100)
    sink.record(sample(duration_ms=10))
    sink.record(sample(duration_ms=30))
    sink.record(sample(path="/api/sessions", duration_ms=200, status_code=503))

    summary = sink.summarize()

    assert summary["count"] == 3
    assert summary["average_ms"] == 80.0
    assert summary["max_ms"] == 200.0
    assert summary["slow_count"] == 1
    assert summary["error_count"] == 1
    assert summary["routes"]["GET /api/scenarios"] == {"count": 2, "average_ms": 20.0}


def test_client_errors_are_not_counted_as_errors():
    sink = MetricsSink()
    sink.record(sample(status_code=404))
    sink.record(sample(status_code=422))

    assert sink.summarize()["error_count"] == 0


def test_oldest_samples_are_dropped():
    sink = MetricsSink(capacity=3)
    for duration in (1000, 1, 2, 3):
        sink.record(sample(duration_ms=duration))

    assert len(sink) == 3
    assert sink.summarize()["max_ms"] == 3.0


def test_slow_threshold_is_exclusive():
    sink = MetricsSink(slow_threshold_ms=500)

    assert sink.is_slow(sample(duration_ms=500)) is False
    assert sink.is_slow(sample(duration_ms=500.1)) is True


def test_clear():
    sink = MetricsSink()
    sink.record(sample())
    sink.clear()

    assert len(sink) == 0


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        MetricsSink(capacity=0)
