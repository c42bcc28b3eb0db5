from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

import httpx

from roblox_status.schemas.roblox import UsernameLookupResponse
from roblox_status.services.upstream import upstream_status

logger = logging.getLogger(__name__)

MAX_USERNAMES_PER_LOOKUP = 100


def normalize_usernames(raw_usernames: Iterable[str]) -> list[str]:
    """Trim, drop blanks and collapse case-insensitive duplicates, keeping first-seen order."""
    normalized: list[str] = []
    seen: set[str] = set()
    for item in raw_usernames:
        trimmed = item.strip()
        key = trimmed.lower()
        if not trimmed or key in seen:
            continue
        seen.add(key)
        normalized.append(trimmed)
    return normalized


def chunked(items: Sequence[str], size: int) -> Iterator[Sequence[str]]:
    if size < 1:
        raise ValueError("Chunk size must be positive")
    for start in range(0, len(items), size):
        yield items[start : start + size]


def resolve_user_ids(
    client: httpx.Client,
    usernames: Sequence[str],
    *,
    url: str,
    batch_size: int = MAX_USERNAMES_PER_LOOKUP,
) -> dict[str, int]:
    """Map lowercase usernames to Roblox user ids.

    A batch that fails is logged and skipped; its names are simply missing
    from the result.
    """
    user_map: dict[str, int] = {}
    if not usernames:
        return user_map

    batch_size = min(batch_size, MAX_USERNAMES_PER_LOOKUP)
    for index, chunk in enumerate(chunked(usernames, batch_size)):
        try:
            response = client.post(url, json={"usernames": list(chunk)})
            response.raise_for_status()
            payload = UsernameLookupResponse.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(
                "Username lookup chunk failed chunk=%s size=%s status=%s",
                index,
                len(chunk),
                upstream_status(exc),
            )
            continue

        for user in payload.data:
            user_map.setdefault(user.name.lower(), user.id)

    logger.debug("Resolved usernames requested=%s resolved=%s", len(usernames), len(user_map))
    return user_map
