"""Health and status endpoints for load balancers and CI/CD."""

from __future__ import annotations

from fastapi import APIRouter, Request

from src.schemas.health import HealthResponse, StatusResponse
from src.services.reports import (
    build_health_report,
    build_safely,
    build_status_report,
    fallback_health_report,
    fallback_status_report,
)

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Basic health check. Always 200 while the process serves requests."""
    return build_safely(build_health_report, request.app.state.settings, fallback_health_report)


@router.get("/status", response_model=StatusResponse)
async def status(request: Request) -> StatusResponse:
    """Application, system, service and deployment metadata."""
    return build_safely(build_status_report, request.app.state.settings, fallback_status_report)
