"""In-Memory Hero Store - read-only HeroStore backed by dicts, plus DI accessor.

Invariants:
    - Unknown ids resolve to "" (the HeroStore not-found sentinel)
    - Contents never change after construction (safe for concurrent requests)
    - A malformed seed file raises HeroStoreError, never a raw parse error

Design Decisions:
    - The app holds its store on app.state; get_hero_store is the single
      dependency routes use, so tests swap stores by building a new app
"""

import logging
from pathlib import Path
from typing import Mapping, Sequence

from fastapi import Request
from pydantic import ValidationError

from hero_lookup.core.domain_types import HeroPowerStat
from hero_lookup.core.errors import ErrorContext, HeroStoreError
from hero_lookup.core.repository_protocols import HeroStore
from hero_lookup.schemas.hero import HeroSeed

logger = logging.getLogger(__name__)


class InMemoryHeroStore:
    """HeroStore over fixed mappings."""

    def __init__(
        self,
        names: Mapping[str, str] | None = None,
        power_stats: Sequence[HeroPowerStat] = (),
    ):
        self._names = dict(names or {})
        self._power_stats = tuple(power_stats)

    def resolve_name(self, hero_id: str) -> str:
        return self._names.get(hero_id, "")

    def list_power_stats(self) -> Sequence[HeroPowerStat]:
        return self._power_stats

    @classmethod
    def from_json_file(cls, path: str | Path) -> "InMemoryHeroStore":
        """Load a store from {"names": {...}, "power_stats": [{"Id": ..., ...}]}."""
        try:
            raw = Path(path).read_text(encoding="utf-8")
            seed = HeroSeed.model_validate_json(raw)
        except (OSError, ValidationError) as e:
            logger.error(f"Failed to load hero seed file {path}: {e}")
            raise HeroStoreError(
                "load", ErrorContext(debug_info={"path": str(path)}),
            ) from e
        logger.info(
            f"Loaded hero seed file {path}",
            extra={"stat_count": len(seed.power_stats)},
        )
        return cls(
            names=seed.names,
            power_stats=[record.to_domain() for record in seed.power_stats],
        )


def build_default_store(hero_data_file: str | None) -> InMemoryHeroStore:
    """Store for the standalone app: seeded from file if configured, else empty."""
    if hero_data_file:
        return InMemoryHeroStore.from_json_file(hero_data_file)
    logger.warning("No hero_data_file configured; serving an empty hero store")
    return InMemoryHeroStore()


def get_hero_store(request: Request) -> HeroStore:
    """FastAPI dependency returning the store injected into the app."""
    store = getattr(request.app.state, "hero_store", None)
    if store is None:
        raise HeroStoreError("lookup (no store configured)")
    return store
