from __future__ import annotations

import logging

import httpx

from roblox_status.schemas.roblox import PlaceDetails
from roblox_status.services.upstream import credential_headers, upstream_status

logger = logging.getLogger(__name__)

UNKNOWN_PLACE = "Unknown Place"
PLACE_LOOKUP_FAILED = "Unknown Place (Access Denied or Game Info Failed)"


def fetch_place_name(
    client: httpx.Client,
    place_id: int | None,
    *,
    url: str,
    credential: str | None,
    cookie_name: str = ".ROBLOSECURITY",
) -> str:
    """Resolve a place or universe id to its display name.

    Never raises for upstream problems; callers get one of the sentinel
    strings instead.
    """
    if not place_id:
        return UNKNOWN_PLACE

    try:
        response = client.get(
            url,
            params={"placeIds": place_id},
            headers=credential_headers(credential, cookie_name=cookie_name),
        )
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, list):
            raise ValueError("Place details payload is not a list")
        details = PlaceDetails.model_validate(payload[0]) if payload else PlaceDetails()
    except (httpx.HTTPError, ValueError) as exc:
        logger.info("Place lookup failed place_id=%s status=%s", place_id, upstream_status(exc))
        return PLACE_LOOKUP_FAILED

    return details.name or UNKNOWN_PLACE
