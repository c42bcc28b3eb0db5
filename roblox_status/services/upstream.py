from __future__ import annotations

import httpx


def credential_headers(credential: str | None, *, cookie_name: str = ".ROBLOSECURITY") -> dict[str, str]:
    headers = {"Content-Type": "application/json"}
    if credential:
        headers["Cookie"] = f"{cookie_name}={credential}"
    return headers


def upstream_status(exc: Exception) -> int | None:
    if isinstance(exc, httpx.HTTPStatusError):
        return exc.response.status_code
    return None
