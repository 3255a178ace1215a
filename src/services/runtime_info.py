"""Runtime fact collectors for the interpreter, framework, clock and process memory.

Every collector is infallible: lookups that can fail degrade to a fixed
fallback value and log a warning instead of raising.
"""

from __future__ import annotations

import platform
import sys
from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import fastapi
import psutil
import structlog

logger = structlog.get_logger()

# Returned for the memory limit when no limit applies or it cannot be read
UNLIMITED = "-1"


def runtime_version() -> str:
    """Version of the running Python interpreter, e.g. ``3.12.4``."""
    return platform.python_version()


def framework_version() -> str:
    return fastapi.__version__


def resolve_timezone(name: str) -> ZoneInfo | timezone:
    """Return the named zone, or UTC when the name is unknown."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("unknown_timezone_using_utc", timezone=name)
        return timezone.utc


def current_time(tz_name: str) -> datetime:
    return datetime.now(resolve_timezone(tz_name))


def iso_timestamp(tz_name: str) -> str:
    """Current time as ISO-8601 with offset."""
    return current_time(tz_name).isoformat()


def server_time(tz_name: str) -> str:
    """Current time as ``YYYY-MM-DD HH:MM:SS`` for the banner page."""
    return current_time(tz_name).strftime("%Y-%m-%d %H:%M:%S")


def _peak_rss(process: psutil.Process, current: int) -> int:
    """High-water resident set size of the process, never below ``current``."""
    peak = getattr(process.memory_info(), "peak_wset", None)
    if peak is None and sys.platform != "win32":
        import resource

        max_rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
        # ru_maxrss is bytes on macOS, kilobytes elsewhere
        peak = max_rss if sys.platform == "darwin" else max_rss * 1024
    return max(peak or 0, current)


def memory_usage() -> tuple[int, int]:
    """Return ``(current, peak)`` resident memory of this process in bytes."""
    try:
        process = psutil.Process()
        current = process.memory_info().rss
        return current, _peak_rss(process, current)
    except (psutil.Error, OSError) as exc:
        logger.warning("memory_usage_unavailable", error=str(exc))
        return 0, 0


def memory_limit(configured: str | None = None) -> str:
    """Configured limit if given, else the address-space rlimit in bytes.

    Returns ``"-1"`` when the process is unlimited or the platform does not
    expose resource limits.
    """
    if configured:
        return configured
    if not hasattr(psutil, "RLIMIT_AS"):
        return UNLIMITED
    try:
        soft, _hard = psutil.Process().rlimit(psutil.RLIMIT_AS)
    except (psutil.Error, OSError) as exc:
        logger.warning("memory_limit_unavailable", error=str(exc))
        return UNLIMITED
    if soft == psutil.RLIM_INFINITY or soft < 0:
        return UNLIMITED
    return str(soft)
