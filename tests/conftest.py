"""Root conftest - stub hero store and an HTTP client around a fresh app.

Invariants:
    - Every test gets its own app; no store is shared between tests
    - Stub store data mirrors the canned heroes used across the API tests

Design Decisions:
    - httpx AsyncClient over ASGITransport: exercises the real routing table
      without a server; lifespan is not run, so the injected store is used as-is
"""

import pytest
from httpx import ASGITransport, AsyncClient

from hero_lookup.config import Settings
from hero_lookup.core.domain_types import HeroPowerStat
from hero_lookup.main import create_app
from tests.stub_store import StubHeroStore

BASE_PATH = "/api/4b3e7de93f96e6c75ce7e09a504a7c6b"


@pytest.fixture
def settings():
    return Settings(base_path=BASE_PATH, log_format="text")


@pytest.fixture
def stub_store():
    return StubHeroStore(
        names={
            "1": "A-Bomb",
            "100": "Black Flash",
            "247": "Evil Deadpool",
            "517": "Phoenix",
        },
        power_stats=[HeroPowerStat(60, "Bane", 88, 38, 23, 56, 51, 95)],
    )


@pytest.fixture
def make_client(settings):
    """Factory: async client for an app built around the given store."""
    def _make(store, raise_app_exceptions=True):
        app = create_app(store, settings)
        return AsyncClient(
            transport=ASGITransport(
                app=app, raise_app_exceptions=raise_app_exceptions,
            ),
            base_url="http://superheroapi.test",
        )
    return _make


@pytest.fixture
async def client(make_client, stub_store):
    async with make_client(stub_store) as c:
        yield c
