"""Schemas for the metrics endpoint."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class MemoryUsage(BaseModel):
    """Process memory in bytes. ``limit`` is ``"-1"`` when unlimited."""

    model_config = ConfigDict(frozen=True)

    current: int
    peak: int
    limit: str


class CacheStats(BaseModel):
    model_config = ConfigDict(frozen=True)

    driver: str
    status: Literal["operational"] = "operational"


class DatabaseConnections(BaseModel):
    model_config = ConfigDict(frozen=True)

    default: str
    status: Literal["connected"] = "connected"


class MetricsResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    memory_usage: MemoryUsage
    cache_stats: CacheStats
    database_connections: DatabaseConnections
