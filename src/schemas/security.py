"""Schemas for the security header report."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SecurityResponse(BaseModel):
    """Recommended response headers plus transport/session flags.

    The header map is what the deployment intends to send; nothing here
    checks the headers actually emitted on responses.
    """

    model_config = ConfigDict(frozen=True)

    security_headers: dict[str, str]
    https_enforced: bool
    session_secure: bool
