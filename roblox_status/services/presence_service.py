from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Literal

import httpx

from roblox_status.schemas.roblox import PresenceRecord, PresenceResponse
from roblox_status.services.upstream import credential_headers, upstream_status

logger = logging.getLogger(__name__)

PresenceOutcome = Literal["ok", "unauthorized", "failed"]


@dataclass(frozen=True)
class PresenceLookup:
    outcome: PresenceOutcome
    presences: dict[int, PresenceRecord] = field(default_factory=dict)
    upstream_status: int | None = None

    @property
    def ok(self) -> bool:
        return self.outcome == "ok"


def fetch_presences(
    client: httpx.Client,
    user_ids: Iterable[int],
    *,
    url: str,
    credential: str | None,
    cookie_name: str = ".ROBLOSECURITY",
) -> PresenceLookup:
    ids = list(user_ids)
    if not ids:
        return PresenceLookup(outcome="ok")

    try:
        response = client.post(
            url,
            json={"userIds": ids},
            headers=credential_headers(credential, cookie_name=cookie_name),
        )
        response.raise_for_status()
        payload = PresenceResponse.model_validate(response.json())
    except (httpx.HTTPError, ValueError) as exc:
        status_code = upstream_status(exc)
        logger.warning("Presence lookup failed user_count=%s status=%s", len(ids), status_code)
        if status_code == 403:
            return PresenceLookup(outcome="unauthorized", upstream_status=status_code)
        return PresenceLookup(outcome="failed", upstream_status=status_code)

    presences = {record.user_id: record for record in payload.user_presences}
    logger.debug("Fetched presences requested=%s returned=%s", len(ids), len(presences))
    return PresenceLookup(outcome="ok", presences=presences)
