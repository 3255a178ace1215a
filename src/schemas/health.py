"""Schemas for health and status endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class RuntimeVersions(BaseModel):
    """Interpreter and framework versions under their established wire keys."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    runtime_version: str = Field(alias="php_version")
    framework_version: str = Field(alias="laravel_version")


class HealthResponse(RuntimeVersions):
    """Health check payload polled by load balancers and CI/CD."""

    status: Literal["healthy"] = "healthy"
    timestamp: str
    app: str
    version: str
    environment: str


class ApplicationInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    environment: str
    debug: bool
    timezone: str


class SystemInfo(RuntimeVersions):
    timestamp: str
    uptime: str


class ServiceStatus(BaseModel):
    """Backend states. These are static literals, not liveness probes."""

    model_config = ConfigDict(frozen=True)

    database: Literal["Connected"] = "Connected"
    cache: Literal["Connected"] = "Connected"
    queue: Literal["Connected"] = "Connected"


class DeploymentInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    commit_sha: str
    deployed_at: str
    ci_cd_pipeline: str


class StatusResponse(BaseModel):
    """Detailed application status."""

    model_config = ConfigDict(frozen=True)

    application: ApplicationInfo
    system: SystemInfo
    services: ServiceStatus
    deployment: DeploymentInfo
