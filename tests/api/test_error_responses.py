"""Error Responses - provider and serialization faults map to structured 500s.

Tests cover:
    - A raising store yields 500 HERO_STORE_ERROR on both routes
    - Undecodable stat records yield 500 SERIALIZATION_ERROR
    - Provider exception text never reaches the response body
    - An app without a store answers 500 instead of crashing
    - Mistyped stat values (str, bool, float) are rejected, not coerced
    - Failures outside the store wrapper become a bare 500 INTERNAL_ERROR
    - Health probe stays up regardless of store state
    - Only the domain and catch-all handlers are custom; validation keeps the FastAPI default
"""

import pytest
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError

from hero_lookup.api.error_handlers import (
    handle_hero_lookup_error, handle_unexpected_error,
)
from hero_lookup.core.domain_types import HeroPowerStat
from hero_lookup.core.errors import HeroLookupError
from hero_lookup.main import create_app
from tests.stub_store import FailingHeroStore, StubHeroStore

BASE = "/api/4b3e7de93f96e6c75ce7e09a504a7c6b"


async def test_failing_store_on_name_route_returns_500(make_client):
    async with make_client(FailingHeroStore()) as c:
        res = await c.get(f"{BASE}/247")
    assert res.status_code == 500
    body = res.json()
    assert body["error"]["code"] == "HERO_STORE_ERROR"
    assert body["error"]["category"] == "external_provider"


async def test_failing_store_on_powerstats_route_returns_500(make_client):
    async with make_client(FailingHeroStore()) as c:
        res = await c.get(f"{BASE}/60/powerstats")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "HERO_STORE_ERROR"


async def test_provider_details_not_leaked(make_client):
    store = FailingHeroStore(RuntimeError("password=hunter2"))
    async with make_client(store) as c:
        res = await c.get(f"{BASE}/247")
    assert "hunter2" not in res.text


async def test_unserializable_stats_return_500(make_client):
    store = StubHeroStore(power_stats=[{"Id": 60, "Name": "Bane"}])
    async with make_client(store) as c:
        res = await c.get(f"{BASE}/60/powerstats")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "SERIALIZATION_ERROR"


async def test_invalid_stat_value_returns_500(make_client):
    bad = HeroPowerStat(60, "Bane", "very smart", 38, 23, 56, 51, 95)
    async with make_client(StubHeroStore(power_stats=[bad])) as c:
        res = await c.get(f"{BASE}/60/powerstats")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "SERIALIZATION_ERROR"


@pytest.mark.parametrize("bad", [
    HeroPowerStat(60, "Bane", "88", 38, 23, 56, 51, 95),
    HeroPowerStat(60, "Bane", 88, True, 23, 56, 51, 95),
    HeroPowerStat(60, "Bane", 88, 38, 23.0, 56, 51, 95),
    HeroPowerStat("60", "Bane", 88, 38, 23, 56, 51, 95),
])
async def test_mistyped_stats_are_not_coerced(make_client, bad):
    async with make_client(StubHeroStore(power_stats=[bad])) as c:
        res = await c.get(f"{BASE}/60/powerstats")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "SERIALIZATION_ERROR"


async def test_missing_store_returns_500(make_client):
    async with make_client(None) as c:
        res = await c.get(f"{BASE}/247")
    assert res.status_code == 500
    assert res.json()["error"]["code"] == "HERO_STORE_ERROR"


async def test_health_check(make_client):
    async with make_client(FailingHeroStore()) as c:
        res = await c.get("/health/")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"
    assert res.json()["service"] == "hero-lookup"


class _UnencodableName:
    """A name object the text response cannot encode."""

    def encode(self, charset):
        raise RuntimeError("secret-detail from encoder")


async def test_unexpected_failure_returns_internal_error(make_client):
    store = StubHeroStore(names={"247": _UnencodableName()})
    async with make_client(store, raise_app_exceptions=False) as c:
        res = await c.get(f"{BASE}/247")
    assert res.status_code == 500
    body = res.json()
    assert body["error"]["code"] == "INTERNAL_ERROR"
    assert body["error"]["category"] == "internal"
    assert "secret-detail" not in res.text
    assert "Traceback" not in res.text


def test_registered_handlers(settings):
    app = create_app(StubHeroStore(), settings)
    assert app.exception_handlers[HeroLookupError] is handle_hero_lookup_error
    assert app.exception_handlers[Exception] is handle_unexpected_error
    assert (
        app.exception_handlers[RequestValidationError]
        is request_validation_exception_handler
    )
