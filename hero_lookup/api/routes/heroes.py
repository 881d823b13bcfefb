"""Hero Routes - name lookup and power stat listing under the base path.

Invariants:
    - Any path whose segments after the identifier begin with /powerstats is
      served by list_power_stats, never by name lookup
    - The identifier before /powerstats is ignored (may be empty: {base}//powerstats)
    - Unknown hero -> 404 with an EMPTY text body (no JSON error envelope)
    - Power stats always carry content-type application/json, even for []

Design Decisions:
    - No prefix on the router: main.py mounts it at settings.base_path
    - {hero_id:path} keeps slashes in the id, matching a plain prefix trim
    - Sync endpoints: the store is sync, FastAPI moves them to its threadpool
"""

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse

from hero_lookup.core.hero_routes import JSON_CONTENT_TYPE, POWER_STATS_SEGMENT
from hero_lookup.core.repository_protocols import HeroStore
from hero_lookup.infrastructure.hero_store import get_hero_store
from hero_lookup.services.hero_lookup import render_power_stats, resolve_hero_name

router = APIRouter(tags=["heroes"])


# Power stat routes are registered first: Starlette matches routes in order.
@router.get(f"/{{hero_id:path}}/{POWER_STATS_SEGMENT}")
def list_power_stats(hero_id: str, store: HeroStore = Depends(get_hero_store)):
    """Every power stat record the store holds, as a JSON array."""
    return Response(content=render_power_stats(store), media_type=JSON_CONTENT_TYPE)


@router.get(f"/{{hero_id:path}}/{POWER_STATS_SEGMENT}/{{rest:path}}")
def list_power_stats_subpath(
    hero_id: str, rest: str, store: HeroStore = Depends(get_hero_store),
):
    return list_power_stats(hero_id, store)


@router.get("/{hero_id:path}", response_class=PlainTextResponse)
def show_hero_name(hero_id: str, store: HeroStore = Depends(get_hero_store)):
    """The hero's name as plain text, or an empty 404."""
    name = resolve_hero_name(store, hero_id)
    if name is None:
        return PlainTextResponse("", status_code=status.HTTP_404_NOT_FOUND)
    return PlainTextResponse(name)
