from __future__ import annotations

from roblox_status.core.settings import Settings


def test_settings_read_port_and_cors_origins_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example")

    settings = Settings(_env_file=None)

    assert settings.port == 9090
    assert settings.cors_origins == ["https://a.example", "https://b.example"]


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("CORS_ORIGINS", raising=False)

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.host == "0.0.0.0"
    assert settings.credential_header == "x-roblox-cookie"
    assert settings.username_batch_size == 100
