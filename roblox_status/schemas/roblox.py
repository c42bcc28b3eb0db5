"""Subset of the Roblox web API payloads consumed by the relay."""
from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

PRESENCE_OFFLINE = 0
PRESENCE_ONLINE = 1
PRESENCE_IN_STUDIO = 2
PRESENCE_IN_GAME = 3


class RobloxUser(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int
    name: str


class UsernameLookupResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: list[RobloxUser] = Field(default_factory=list)


class PresenceRecord(BaseModel):
    model_config = ConfigDict(extra="ignore")

    user_id: int = Field(validation_alias=AliasChoices("userId", "user_id"))
    presence_type: int = Field(
        default=PRESENCE_OFFLINE,
        validation_alias=AliasChoices("userPresenceType", "presenceType"),
    )
    place_id: int | None = Field(default=None, validation_alias=AliasChoices("placeId", "place_id"))
    universe_id: int | None = Field(default=None, validation_alias=AliasChoices("universeId", "universe_id"))
    last_location: str | None = Field(default=None, validation_alias=AliasChoices("lastLocation", "last_location"))


class PresenceResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    user_presences: list[PresenceRecord] = Field(
        default_factory=list,
        validation_alias=AliasChoices("userPresences", "user_presences"),
    )


class PlaceDetails(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
