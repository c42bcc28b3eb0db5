from __future__ import annotations

import logging

import httpx
from fastapi import Request

from roblox_status.core.settings import Settings

logger = logging.getLogger(__name__)


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_http_client(request: Request) -> httpx.Client:
    client = getattr(request.app.state, "http_client", None)
    if client is None:
        raise RuntimeError("Upstream HTTP client is not configured")
    return client


def get_credential(request: Request) -> str | None:
    settings: Settings = request.app.state.settings
    credential = request.headers.get(settings.credential_header)
    logger.debug("Credential header present=%s", bool(credential))
    return credential or None
