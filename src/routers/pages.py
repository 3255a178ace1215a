"""HTML deployment banner."""

from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from src.services.reports import build_safely, fallback_banner, render_banner

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    """Deployment banner with runtime version and server time."""
    return HTMLResponse(build_safely(render_banner, request.app.state.settings, fallback_banner))
