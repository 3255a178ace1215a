"""Application configuration via environment variables."""

from __future__ import annotations

import structlog
from pydantic import ValidationError
from pydantic_settings import BaseSettings

logger = structlog.get_logger()


class Settings(BaseSettings):
    """Central configuration for the diagnostics service.

    Field names map to unprefixed environment variables, so ``app_env``
    reads from ``APP_ENV`` and ``github_sha`` from ``GITHUB_SHA``.
    """

    # Application
    app_name: str = "LAMP"
    app_env: str = "local"
    app_debug: bool = False
    app_timezone: str = "UTC"

    # Backends reported by /status and /metrics
    cache_driver: str = "file"
    db_connection: str = "mysql"
    session_secure_cookie: bool = False
    memory_limit: str | None = None

    # Deployment metadata
    github_sha: str = "local"
    deployed_at: str | None = None

    # Server
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    log_level: str = "INFO"
    log_format: str = "json"
    allowed_origins: str = "*"

    # Deployment banner rendered on /
    banner_stack_name: str = "Laravel LAMP Stack - LocalStack EC2"
    banner_web_server: str = "Apache"
    banner_instance_id: str = "i-cd2d73cbd14fd6c58"
    banner_public_ip: str = "54.214.223.198"
    banner_success_name: str = "Laravel LAMP Stack"
    banner_container: str = "laravel-lamp"
    banner_port: int = 8081
    banner_document_root: str = "/var/www/html/public"
    banner_endpoint_label: str = "LocalStack"
    banner_endpoint_url: str = "https://localhost.localstack.cloud:4566"

    @property
    def allowed_origins_list(self) -> list[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]

    @property
    def https_enforced(self) -> bool:
        return self.app_env == "production"

    model_config = {"env_file": ".env", "extra": "ignore", "frozen": True}


def default_settings() -> Settings:
    """Return settings built purely from field defaults, ignoring the environment."""
    return Settings.model_construct()


def get_settings() -> Settings:
    """Load settings, falling back to defaults when the environment is invalid."""
    try:
        return Settings()
    except ValidationError as exc:
        logger.warning(
            "settings_invalid_using_defaults",
            errors=[".".join(str(p) for p in e["loc"]) for e in exc.errors()],
        )
        return default_settings()
