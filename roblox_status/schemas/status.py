from __future__ import annotations

from pydantic import BaseModel, Field, StrictStr


class StatusRequest(BaseModel):
    users: list[StrictStr] | None = None


class UserNotFoundRow(BaseModel):
    username: str
    error: str


class UserStatusRow(BaseModel):
    username: str
    user_id: int = Field(serialization_alias="userId")
    status: str
    place_id: int | None = Field(default=None, serialization_alias="placeId")
    universe_id: int | None = Field(default=None, serialization_alias="universeId")
    map_name: str = Field(serialization_alias="mapName")
    last_location: str | None = Field(default=None, serialization_alias="lastLocation")
