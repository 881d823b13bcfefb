"""Domain Types - the hero record shared across layers.

Invariants:
    - HeroPowerStat is immutable once constructed (frozen dataclass)

Design Decisions:
    - Dataclass over Pydantic model in core: the wire shape (PascalCase keys)
      belongs to schemas/, not to the domain
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class HeroPowerStat:
    """One hero's identity plus its six-field power profile."""
    id: int
    name: str
    intelligence: int
    strength: int
    speed: int
    durability: int
    power: int
    combat: int
