"""Shared fixtures: a fake Roblox API behind httpx.MockTransport."""

import httpx
import pytest
from fastapi.testclient import TestClient

from app import create_app
from config import Settings
from services.roblox import RobloxClient


class FakeClock:
    """Settable stand-in for time.time()."""

    def __init__(self, now: float = 1_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class FakeRoblox:
    """Programmable stand-in for the two Roblox endpoints."""

    def __init__(self):
        self.universes: dict[str, int] = {}
        self.passes: dict[str, dict] = {}
        self.pass_status = 200
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        parts = request.url.path.strip("/").split("/")

        if request.url.host == "apis.roblox.com":
            # /universes/v1/places/{placeId}/universe
            place_id = parts[3]
            if place_id not in self.universes:
                return httpx.Response(200, json={"universeId": None})
            return httpx.Response(200, json={"universeId": self.universes[place_id]})

        # /v1/games/{universeId}/game-passes
        universe_id = parts[2]
        if self.pass_status != 200:
            return httpx.Response(self.pass_status, json={"errors": [{"code": 0}]})
        return httpx.Response(200, json=self.passes.get(universe_id, {"data": []}))

    def pass_calls(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.host == "games.roblox.com"]

    def client(self) -> RobloxClient:
        return RobloxClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_roblox() -> FakeRoblox:
    return FakeRoblox()


@pytest.fixture
def settings(monkeypatch) -> Settings:
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.delenv("CACHE_TTL_SECONDS", raising=False)
    return Settings()


@pytest.fixture
def app(settings, fake_roblox):
    return create_app(settings=settings, roblox=fake_roblox.client())


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
