"""Hero Schemas - Pydantic models for power stat responses and seed files.

Invariants:
    - Wire keys are PascalCase (Id, Name, Intelligence, ...) in declaration order
    - Python attribute names stay snake_case; aliases exist only at the boundary
    - Strict validation: stat values are emitted exactly as the store returned
      them; a "88" or True in an int field is an error, never coerced

Design Decisions:
    - alias_generator=to_pascal + populate_by_name: one model reads both the
      domain dataclass (by name) and seed JSON (by alias)
    - TypeAdapter for the list: dump_json encodes the whole array in one call
"""

from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic.alias_generators import to_pascal

from hero_lookup.core.domain_types import HeroPowerStat


class PowerStatRecord(BaseModel):
    """A HeroPowerStat as it appears on the wire."""
    model_config = ConfigDict(
        alias_generator=to_pascal, populate_by_name=True, frozen=True, strict=True,
    )

    id: int
    name: str
    intelligence: int
    strength: int
    speed: int
    durability: int
    power: int
    combat: int

    def to_domain(self) -> HeroPowerStat:
        return HeroPowerStat(**self.model_dump())


class HeroSeed(BaseModel):
    """Contents of a JSON seed file for the in-memory hero store."""
    names: dict[str, str] = {}
    power_stats: list[PowerStatRecord] = []


PowerStatList = TypeAdapter(list[PowerStatRecord])
