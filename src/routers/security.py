"""Security header report."""

from __future__ import annotations

from fastapi import APIRouter, Request

from src.schemas.security import SecurityResponse
from src.services.reports import build_safely, build_security_report, fallback_security_report

router = APIRouter(tags=["security"])


@router.get("/security", response_model=SecurityResponse)
async def security_report(request: Request) -> SecurityResponse:
    """Recommended security headers plus HTTPS and session cookie flags."""
    return build_safely(build_security_report, request.app.state.settings, fallback_security_report)
