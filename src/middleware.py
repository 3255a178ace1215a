"""Application middleware — CORS, request logging, 404 mapping, lifespan."""

from __future__ import annotations

import logging
import time
from contextlib import asynccontextmanager
from typing import Any

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.config import Settings

logger = structlog.get_logger()


class RegisteredPathsCORSMiddleware(CORSMiddleware):
    """CORS handling limited to the application's own routes.

    Requests for any other path bypass CORS entirely, so a preflight to an
    unknown path reaches the router and gets its 404.
    """

    def __init__(self, app, paths: frozenset[str], **kwargs: Any) -> None:
        super().__init__(app, **kwargs)
        self.paths = paths

    async def __call__(self, scope, receive, send) -> None:
        if scope["type"] == "http" and scope["path"] not in self.paths:
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)


def configure_cors(app: FastAPI, settings: Settings) -> None:
    """Add CORS middleware for the routes registered so far."""
    app.add_middleware(
        RegisteredPathsCORSMiddleware,
        paths=frozenset(route.path for route in app.routes),
        allow_origins=settings.allowed_origins_list,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["*"],
    )


async def logging_middleware(request: Request, call_next) -> Response:
    """Structured logging middleware — logs every request."""
    start_time = time.monotonic()
    response = await call_next(request)
    duration_ms = round((time.monotonic() - start_time) * 1000, 2)

    logger.info(
        "http_request",
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=duration_ms,
        client_ip=request.client.host if request.client else "unknown",
    )

    return response


async def not_found_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Report a known path with an unsupported method as 404, not 405."""
    if exc.status_code == 405:
        return JSONResponse({"detail": "Not Found"}, status_code=404)
    return await http_exception_handler(request, exc)


def configure_routing_errors(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, not_found_handler)


def configure_structured_logging(settings: Settings) -> None:
    """Configure structlog for JSON or console output."""
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger().setLevel(level)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown logging."""
    settings = app.state.settings
    configure_structured_logging(settings)

    logger.info("application_starting", app=settings.app_name, environment=settings.app_env)

    yield

    logger.info("application_shutting_down")
