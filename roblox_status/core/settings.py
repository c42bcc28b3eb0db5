from functools import lru_cache
from typing import Annotated

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    debug: bool = False
    app_name: str = "Roblox Status API"
    host: str = "0.0.0.0"
    port: int = 8080
    api_prefix: str = "/api"
    health_message: str = "Roblox Status API is LIVE and Healthy."

    cors_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: ["*"])

    credential_header: str = "x-roblox-cookie"
    auth_cookie_name: str = ".ROBLOSECURITY"

    username_lookup_url: str = "https://users.roblox.com/v1/usernames/users"
    presence_url: str = "https://presence.roblox.com/v1/presence/users"
    place_details_url: str = "https://games.roblox.com/v1/games/multiget-place-details"
    username_batch_size: int = Field(default=100, ge=1)

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, value: str | list[str]) -> list[str]:
        if isinstance(value, list):
            return value
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return []


@lru_cache
def get_settings() -> Settings:
    return Settings()
