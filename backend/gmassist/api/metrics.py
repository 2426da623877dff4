# backend/gmassist/api/metrics.py
from fastapi import APIRouter, Request

from gmassist.schemas.metrics import MetricsSummary

router = APIRouter(tags=["Metrics"])


@router.get("/metrics", response_model=MetricsSummary)
def get_metrics(request: Request):
    """Timing summary of the most recent requests"""
    return request.app.state.metrics.summarize()
