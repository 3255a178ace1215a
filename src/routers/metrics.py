"""Process and backend metrics."""

from __future__ import annotations

from fastapi import APIRouter, Request

from src.schemas.metrics import MetricsResponse
from src.services.reports import build_metrics_report, build_safely, fallback_metrics_report

router = APIRouter(tags=["metrics"])


@router.get("/metrics", response_model=MetricsResponse)
async def metrics(request: Request) -> MetricsResponse:
    return build_safely(build_metrics_report, request.app.state.settings, fallback_metrics_report)
