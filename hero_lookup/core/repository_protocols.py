"""Boundary Protocols - contract between the lookup service and its data provider.

Invariants:
    - Service code NEVER imports a concrete store; it depends on HeroStore only
    - resolve_name returns "" for an unknown hero (sentinel, not an exception)
    - Implementations must be safe to call from concurrent requests

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no base class
    - Sync methods: FastAPI runs sync endpoints in its threadpool, so a blocking
      provider never stalls the event loop
"""

from typing import Protocol, Sequence

from hero_lookup.core.domain_types import HeroPowerStat


class HeroStore(Protocol):
    """Contract for hero data lookup - supplied by the embedding application."""
    def resolve_name(self, hero_id: str) -> str: ...
    def list_power_stats(self) -> Sequence[HeroPowerStat]: ...
