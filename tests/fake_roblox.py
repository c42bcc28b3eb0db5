from __future__ import annotations

import json

import httpx

USERS_HOST = "users.roblox.com"
PRESENCE_HOST = "presence.roblox.com"
GAMES_HOST = "games.roblox.com"


class FakeRoblox:
    """In-memory stand-in for the three Roblox endpoints the relay calls."""

    def __init__(self) -> None:
        self.users: dict[str, int] = {}
        self.presences: dict[int, dict[str, object]] = {}
        self.places: dict[int, str] = {}
        self.requests: list[httpx.Request] = []
        self.failing_username_batches: set[int] = set()
        self.presence_status: int = 200
        self.presence_body: bytes | None = None
        self.place_status: int = 200
        self.valid_cookie: str | None = None
        self._username_batch_count = 0

    def add_user(self, name: str, user_id: int, **presence: object) -> None:
        self.users[name.lower()] = user_id
        if presence:
            self.presences[user_id] = {"userId": user_id, **presence}

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    def requests_to(self, host: str) -> list[httpx.Request]:
        return [request for request in self.requests if request.url.host == host]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == USERS_HOST:
            return self._lookup_usernames(request)
        if request.url.host == PRESENCE_HOST:
            return self._lookup_presences(request)
        if request.url.host == GAMES_HOST:
            return self._lookup_place(request)
        return httpx.Response(404, json={"errors": [{"message": "NotFound"}]})

    def _lookup_usernames(self, request: httpx.Request) -> httpx.Response:
        batch_index = self._username_batch_count
        self._username_batch_count += 1
        if batch_index in self.failing_username_batches:
            return httpx.Response(503, json={"errors": [{"message": "Service unavailable"}]})

        body = json.loads(request.content)
        data = []
        for name in body["usernames"]:
            user_id = self.users.get(name.lower())
            if user_id is not None:
                data.append({"requestedUsername": name, "name": name.lower(), "id": user_id})
        return httpx.Response(200, json={"data": data})

    def _lookup_presences(self, request: httpx.Request) -> httpx.Response:
        if self.presence_status != 200:
            return httpx.Response(self.presence_status, json={"errors": [{"message": "Failed"}]})
        if self.presence_body is not None:
            return httpx.Response(200, content=self.presence_body)
        if self.valid_cookie is not None and request.headers.get("Cookie") != f".ROBLOSECURITY={self.valid_cookie}":
            return httpx.Response(403, json={"errors": [{"message": "Forbidden"}]})

        body = json.loads(request.content)
        presences = [self.presences[user_id] for user_id in body["userIds"] if user_id in self.presences]
        return httpx.Response(200, json={"userPresences": presences})

    def _lookup_place(self, request: httpx.Request) -> httpx.Response:
        if self.place_status != 200:
            return httpx.Response(self.place_status, json={"errors": [{"message": "Forbidden"}]})
        place_id = int(request.url.params["placeIds"])
        if place_id not in self.places:
            return httpx.Response(200, json=[])
        return httpx.Response(200, json=[{"placeId": place_id, "name": self.places[place_id]}])
