"""Hero Lookup Service - calls the hero store and formats its answers.

Invariants:
    - Store faults surface as HeroStoreError, never as bare provider exceptions
    - An empty name from the store comes back as None (caller answers 404)
    - Power stats are encoded exactly as returned, order and values preserved

Design Decisions:
    - Functions over a service class: no state survives a request
    - HeroLookupError raised by a store passes through untouched (already typed)
"""

import dataclasses
import logging
from typing import Sequence

from pydantic import ValidationError

from hero_lookup.core.domain_types import HeroPowerStat
from hero_lookup.core.errors import (
    ErrorContext, HeroLookupError, HeroStoreError, PowerStatSerializationError,
)
from hero_lookup.core.hero_routes import name_or_none
from hero_lookup.core.repository_protocols import HeroStore
from hero_lookup.schemas.hero import PowerStatList, PowerStatRecord

logger = logging.getLogger(__name__)


def resolve_hero_name(store: HeroStore, hero_id: str) -> str | None:
    """Look up a hero's name; None when the store does not know the id."""
    try:
        name = store.resolve_name(hero_id)
    except HeroLookupError:
        raise
    except Exception as e:
        logger.error(
            f"Hero store resolve_name failed: {e}",
            extra={"hero_id": hero_id},
        )
        raise HeroStoreError(
            "resolve_name", ErrorContext(hero_id=hero_id),
        ) from e

    resolved = name_or_none(name)
    if resolved is None:
        logger.info("Hero not found", extra={"hero_id": hero_id})
    return resolved


def fetch_power_stats(store: HeroStore) -> tuple[HeroPowerStat, ...]:
    """Materialize the store's stats once; iterators and generators are accepted."""
    try:
        return tuple(store.list_power_stats())
    except HeroLookupError:
        raise
    except Exception as e:
        logger.error(f"Hero store list_power_stats failed: {e}")
        raise HeroStoreError("list_power_stats") from e


def encode_power_stats(stats: Sequence[HeroPowerStat]) -> bytes:
    """Encode stats as a JSON array with PascalCase keys."""
    try:
        records = [
            PowerStatRecord.model_validate(dataclasses.asdict(stat))
            for stat in stats
        ]
        return PowerStatList.dump_json(records, by_alias=True)
    except (TypeError, ValueError, ValidationError) as e:
        logger.error(f"Power stat serialization failed: {e}")
        raise PowerStatSerializationError(
            ErrorContext(debug_info={"reason": str(e)}),
        ) from e


def render_power_stats(store: HeroStore) -> bytes:
    """Fetch every power stat from the store and return the JSON body."""
    stats = fetch_power_stats(store)
    body = encode_power_stats(stats)
    logger.debug("Power stats rendered", extra={"stat_count": len(stats)})
    return body
