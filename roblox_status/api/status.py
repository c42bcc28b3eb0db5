from __future__ import annotations

import logging

import httpx
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from roblox_status.api.deps import get_app_settings, get_credential, get_http_client
from roblox_status.core.errors import EMPTY_USER_LIST_MESSAGE, APIError
from roblox_status.core.settings import Settings
from roblox_status.schemas.status import StatusRequest
from roblox_status.services.status_service import build_status_rows
from roblox_status.services.username_resolver import normalize_usernames

logger = logging.getLogger(__name__)

router = APIRouter(tags=["status"])


@router.post("/status")
def user_status(
    payload: StatusRequest,
    client: httpx.Client = Depends(get_http_client),
    settings: Settings = Depends(get_app_settings),
    credential: str | None = Depends(get_credential),
):
    if not payload.users:
        raise APIError(status_code=400, code="empty_user_list", message=EMPTY_USER_LIST_MESSAGE)

    usernames = normalize_usernames(payload.users)
    logger.info("Status lookup requested=%s unique=%s", len(payload.users), len(usernames))
    rows = build_status_rows(client, usernames, settings=settings, credential=credential)
    return JSONResponse(content=rows)
