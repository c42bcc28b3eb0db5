from __future__ import annotations

import sys
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
sys.path.insert(0, str(Path(__file__).resolve().parent))

from fake_roblox import FakeRoblox
from roblox_status.core.settings import Settings
from roblox_status.main import create_app


@pytest.fixture()
def settings() -> Settings:
    return Settings(_env_file=None)


@pytest.fixture()
def roblox() -> FakeRoblox:
    return FakeRoblox()


@pytest.fixture()
def http_client(roblox):
    with httpx.Client(transport=roblox.transport()) as client:
        yield client


@pytest.fixture()
def client(settings, http_client):
    app = create_app(settings, http_client=http_client)
    with TestClient(app) as test_client:
        yield test_client
