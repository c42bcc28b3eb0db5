from __future__ import annotations

import logging
from typing import Sequence

import httpx

from roblox_status.core.errors import (
    INVALID_CREDENTIAL_MESSAGE,
    PRESENCE_FAILED_MESSAGE,
    USER_NOT_FOUND_MESSAGE,
    APIError,
)
from roblox_status.core.settings import Settings
from roblox_status.schemas.roblox import (
    PRESENCE_IN_GAME,
    PRESENCE_IN_STUDIO,
    PRESENCE_ONLINE,
    PresenceRecord,
)
from roblox_status.schemas.status import UserNotFoundRow, UserStatusRow
from roblox_status.services.place_service import fetch_place_name
from roblox_status.services.presence_service import PresenceLookup, fetch_presences
from roblox_status.services.username_resolver import resolve_user_ids

logger = logging.getLogger(__name__)

HIDDEN_PLACE = "In Game (placeId hidden)"
ACTIVE_PRESENCE_TYPES = frozenset({PRESENCE_ONLINE, PRESENCE_IN_STUDIO, PRESENCE_IN_GAME})


def raise_for_presence_outcome(lookup: PresenceLookup) -> None:
    if lookup.outcome == "unauthorized":
        raise APIError(status_code=403, code="invalid_credential", message=INVALID_CREDENTIAL_MESSAGE)
    if lookup.outcome == "failed":
        raise APIError(status_code=500, code="presence_failed", message=PRESENCE_FAILED_MESSAGE)


def describe_presence(
    client: httpx.Client,
    presence: PresenceRecord | None,
    *,
    settings: Settings,
    credential: str | None,
) -> tuple[str, str]:
    """Return ``(status, map_name)`` for a presence record."""
    if presence is None:
        return "Offline", "Offline"

    if presence.presence_type == PRESENCE_IN_GAME:
        if not presence.place_id:
            return "In Game", HIDDEN_PLACE
        map_name = fetch_place_name(
            client,
            presence.universe_id or presence.place_id,
            url=settings.place_details_url,
            credential=credential,
            cookie_name=settings.auth_cookie_name,
        )
        return "In Game", map_name
    if presence.presence_type == PRESENCE_IN_STUDIO:
        return "In Studio", "In Studio"
    if presence.presence_type == PRESENCE_ONLINE:
        return "Online", "Online on website"
    return "Offline", "Offline"


def build_status_rows(
    client: httpx.Client,
    usernames: Sequence[str],
    *,
    settings: Settings,
    credential: str | None,
) -> list[dict[str, object]]:
    user_map = resolve_user_ids(
        client,
        usernames,
        url=settings.username_lookup_url,
        batch_size=settings.username_batch_size,
    )

    lookup = fetch_presences(
        client,
        user_map.values(),
        url=settings.presence_url,
        credential=credential,
        cookie_name=settings.auth_cookie_name,
    )
    raise_for_presence_outcome(lookup)

    rows: list[dict[str, object]] = []
    for username in usernames:
        key = username.lower()
        user_id = user_map.get(key)
        if user_id is None:
            rows.append(UserNotFoundRow(username=username, error=USER_NOT_FOUND_MESSAGE).model_dump())
            continue

        presence = lookup.presences.get(user_id)
        if presence is not None and presence.presence_type not in ACTIVE_PRESENCE_TYPES:
            # Offline rows report null location fields.
            presence = None
        status, map_name = describe_presence(client, presence, settings=settings, credential=credential)
        row = UserStatusRow(
            username=key,
            user_id=user_id,
            status=status,
            place_id=presence.place_id if presence else None,
            universe_id=presence.universe_id if presence else None,
            map_name=map_name,
            last_location=presence.last_location if presence else None,
        )
        rows.append(row.model_dump(by_alias=True))

    logger.debug(
        "Assembled status rows requested=%s resolved=%s presences=%s",
        len(usernames),
        len(user_map),
        len(lookup.presences),
    )
    return rows
