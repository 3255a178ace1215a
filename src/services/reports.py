"""Report builders for the diagnostic endpoints.

Each builder is a pure function of settings, the clock and the process
state. ``build_safely`` wraps a builder so an unexpected failure is logged
and the report is rebuilt from default settings. If that also fails, a
report made only of constants is returned, so no handler surfaces a 5xx.
"""

from __future__ import annotations

import html
from datetime import datetime, timezone
from typing import Callable, TypeVar

import structlog

from src.config import Settings, default_settings
from src.schemas.health import (
    ApplicationInfo,
    DeploymentInfo,
    HealthResponse,
    ServiceStatus,
    StatusResponse,
    SystemInfo,
)
from src.schemas.metrics import (
    CacheStats,
    DatabaseConnections,
    MemoryUsage,
    MetricsResponse,
)
from src.schemas.security import SecurityResponse
from src.services import runtime_info

logger = structlog.get_logger()

T = TypeVar("T")

APP_VERSION = "1.0.0"
UPTIME_PLACEHOLDER = "Available in production"
CI_CD_PIPELINE = "GitHub Actions"
UNKNOWN_VERSION = "unknown"

# Headers the deployment is expected to send on every response
RECOMMENDED_SECURITY_HEADERS: dict[str, str] = {
    "X-Frame-Options": "DENY",
    "X-XSS-Protection": "1; mode=block",
    "X-Content-Type-Options": "nosniff",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
}


def build_safely(
    builder: Callable[[Settings], T],
    settings: Settings,
    fallback: Callable[[], T],
) -> T:
    """Run ``builder``; retry with default settings, then use ``fallback``."""
    try:
        return builder(settings)
    except Exception:
        logger.exception("report_build_failed", builder=builder.__name__)
    try:
        return builder(default_settings())
    except Exception:
        logger.exception("report_default_build_failed", builder=builder.__name__)
    return fallback()


def _utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


def fallback_health_report() -> HealthResponse:
    defaults = default_settings()
    return HealthResponse(
        timestamp=_utc_now(),
        app=defaults.app_name,
        version=APP_VERSION,
        environment=defaults.app_env,
        runtime_version=UNKNOWN_VERSION,
        framework_version=UNKNOWN_VERSION,
    )


def fallback_status_report() -> StatusResponse:
    defaults = default_settings()
    now = _utc_now()
    return StatusResponse(
        application=ApplicationInfo(
            name=defaults.app_name,
            version=APP_VERSION,
            environment=defaults.app_env,
            debug=defaults.app_debug,
            timezone=defaults.app_timezone,
        ),
        system=SystemInfo(
            runtime_version=UNKNOWN_VERSION,
            framework_version=UNKNOWN_VERSION,
            timestamp=now,
            uptime=UPTIME_PLACEHOLDER,
        ),
        services=ServiceStatus(),
        deployment=DeploymentInfo(
            commit_sha=defaults.github_sha,
            deployed_at=now,
            ci_cd_pipeline=CI_CD_PIPELINE,
        ),
    )


def fallback_security_report() -> SecurityResponse:
    return SecurityResponse(
        security_headers=dict(RECOMMENDED_SECURITY_HEADERS),
        https_enforced=False,
        session_secure=False,
    )


def fallback_metrics_report() -> MetricsResponse:
    defaults = default_settings()
    return MetricsResponse(
        memory_usage=MemoryUsage(current=0, peak=0, limit=runtime_info.UNLIMITED),
        cache_stats=CacheStats(driver=defaults.cache_driver),
        database_connections=DatabaseConnections(default=defaults.db_connection),
    )


def fallback_banner() -> str:
    defaults = default_settings()
    return f"<!DOCTYPE html>\n<html>\n<body>\n<h1>🚀 {html.escape(defaults.banner_stack_name)}</h1>\n</body>\n</html>\n"


def build_health_report(settings: Settings) -> HealthResponse:
    return HealthResponse(
        timestamp=runtime_info.iso_timestamp(settings.app_timezone),
        app=settings.app_name,
        version=APP_VERSION,
        environment=settings.app_env,
        runtime_version=runtime_info.runtime_version(),
        framework_version=runtime_info.framework_version(),
    )


def build_status_report(settings: Settings) -> StatusResponse:
    """Application, system, service and deployment metadata.

    ``services`` are fixed literals: no backend is contacted.
    """
    now = runtime_info.iso_timestamp(settings.app_timezone)
    return StatusResponse(
        application=ApplicationInfo(
            name=settings.app_name,
            version=APP_VERSION,
            environment=settings.app_env,
            debug=settings.app_debug,
            timezone=settings.app_timezone,
        ),
        system=SystemInfo(
            runtime_version=runtime_info.runtime_version(),
            framework_version=runtime_info.framework_version(),
            timestamp=now,
            uptime=UPTIME_PLACEHOLDER,
        ),
        services=ServiceStatus(),
        deployment=DeploymentInfo(
            commit_sha=settings.github_sha or "local",
            deployed_at=settings.deployed_at or now,
            ci_cd_pipeline=CI_CD_PIPELINE,
        ),
    )


def build_security_report(settings: Settings) -> SecurityResponse:
    return SecurityResponse(
        security_headers=dict(RECOMMENDED_SECURITY_HEADERS),
        https_enforced=settings.https_enforced,
        session_secure=settings.session_secure_cookie,
    )


def build_metrics_report(settings: Settings) -> MetricsResponse:
    current, peak = runtime_info.memory_usage()
    return MetricsResponse(
        memory_usage=MemoryUsage(
            current=current,
            peak=peak,
            limit=runtime_info.memory_limit(settings.memory_limit),
        ),
        cache_stats=CacheStats(driver=settings.cache_driver),
        database_connections=DatabaseConnections(default=settings.db_connection),
    )


def render_banner(settings: Settings) -> str:
    """Deployment banner HTML served on ``/``."""
    e = html.escape
    lines = [
        f"<h1>🚀 {e(settings.banner_stack_name)}</h1>",
        f"<p>✅ Web Server: {e(settings.banner_web_server)} Running</p>",
        f"<p>✅ Python: {e(runtime_info.runtime_version())}</p>",
        f"<p>✅ Server Time: {runtime_info.server_time(settings.app_timezone)}</p>",
        f"<p>✅ Instance ID: {e(settings.banner_instance_id)}</p>",
        f"<p>✅ Public IP: {e(settings.banner_public_ip)}</p>",
        f"<p>🎉 {e(settings.banner_success_name)} Deployment Successful!</p>",
        "<hr>",
        "<h2>📋 System Information</h2>",
        f"<p>• Container: {e(settings.banner_container)}</p>",
        f"<p>• Port: {settings.banner_port}</p>",
        f"<p>• Document Root: {e(settings.banner_document_root)}</p>",
        f"<p>• {e(settings.banner_endpoint_label)} Endpoint: {e(settings.banner_endpoint_url)}</p>",
    ]
    return "<!DOCTYPE html>\n<html>\n<body>\n" + "\n".join(lines) + "\n</body>\n</html>\n"
