"""Pokemon Schemas — Pydantic models with field-level validation for API boundaries.

Invariants:
    - Input stat blocks never carry `total`; it is dropped on parse and recomputed on write
    - GenderRatio.male + GenderRatio.female == 100
    - GenderRatio serializes whole percentages as ints (50, not 50.0)
    - Integer fields stay within INTEGER bounds; stats small enough that total does too
    - PokemonUpdate rejects explicit null for non-nullable fields (only sprite may be null)
    - PokemonRead validates from ORM attributes, serializes camelCase

Design Decisions:
    - alias_generator=to_camel with populate_by_name: clients may send either spelling
    - PokemonRead uses serialization-only aliases so from_attributes reads snake_case columns
"""

from datetime import datetime
from typing import Annotated

from pydantic import (
    AliasGenerator, BaseModel, ConfigDict, Field, field_serializer, field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from pokedex_api.core.query_filters import INT32_MAX
from pokedex_api.core.stat_block import MAX_STAT

PokemonRef = Annotated[int, Field(ge=1, le=INT32_MAX)]


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore",
    )


class StatBlockInput(_CamelModel):
    """The six base stats as supplied by a client."""
    hp: int = Field(ge=0, le=MAX_STAT)
    attack: int = Field(ge=0, le=MAX_STAT)
    defense: int = Field(ge=0, le=MAX_STAT)
    special_attack: int = Field(ge=0, le=MAX_STAT)
    special_defense: int = Field(ge=0, le=MAX_STAT)
    speed: int = Field(ge=0, le=MAX_STAT)


class StatBlock(StatBlockInput):
    """Stored stat block including the derived total."""
    total: int = 0


class GenderRatio(_CamelModel):
    male: float = Field(50, ge=0, le=100)
    female: float = Field(50, ge=0, le=100)

    @model_validator(mode="after")
    def check_sums_to_100(self):
        if abs(self.male + self.female - 100) > 1e-6:
            raise ValueError("genderRatio male + female must equal 100")
        return self

    @field_serializer("male", "female")
    def whole_numbers_as_int(self, v: float) -> int | float:
        return int(v) if v.is_integer() else v


def _strip_required(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("cannot be empty or whitespace")
    return v


class PokemonCreate(_CamelModel):
    """Pokémon creation — required fields plus defaults matching the table."""
    name: str = Field(min_length=1, max_length=255)
    species: str = Field(min_length=1, max_length=255)
    types: list[str] = Field(min_length=1)
    height: float = Field(0, ge=0)
    weight: float = Field(0, ge=0)
    abilities: list[str] = Field(default_factory=list)
    base_stats: StatBlockInput
    generation: int = Field(1, ge=1, le=INT32_MAX)
    evolution_chain: list[PokemonRef] = Field(default_factory=list)
    habitat: str = Field("Unknown", max_length=255)
    capture_rate: int = Field(45, ge=0, le=INT32_MAX)
    base_experience: int = Field(0, ge=0, le=INT32_MAX)
    gender_ratio: GenderRatio = Field(default_factory=GenderRatio)
    egg_groups: list[str] = Field(default_factory=lambda: ["Field"])
    description: str = Field(min_length=1)
    sprite: str | None = Field(None, max_length=512)

    @field_validator("name", "species", "description")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return _strip_required(v)


_NULLABLE_ON_UPDATE = {"sprite"}


class PokemonUpdate(_CamelModel):
    """Partial update — only fields present in the body are applied."""
    name: str | None = Field(None, min_length=1, max_length=255)
    species: str | None = Field(None, min_length=1, max_length=255)
    types: list[str] | None = Field(None, min_length=1)
    height: float | None = Field(None, ge=0)
    weight: float | None = Field(None, ge=0)
    abilities: list[str] | None = None
    base_stats: StatBlockInput | None = None
    generation: int | None = Field(None, ge=1, le=INT32_MAX)
    evolution_chain: list[PokemonRef] | None = None
    habitat: str | None = Field(None, max_length=255)
    capture_rate: int | None = Field(None, ge=0, le=INT32_MAX)
    base_experience: int | None = Field(None, ge=0, le=INT32_MAX)
    gender_ratio: GenderRatio | None = None
    egg_groups: list[str] | None = None
    description: str | None = Field(None, min_length=1)
    sprite: str | None = Field(None, max_length=512)

    @field_validator("name", "species", "description")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return v if v is None else _strip_required(v)

    @model_validator(mode="after")
    def reject_null_required(self):
        for field in self.model_fields_set - _NULLABLE_ON_UPDATE:
            if getattr(self, field) is None:
                raise ValueError(f"{to_camel(field)} cannot be null")
        return self


class PokemonRead(BaseModel):
    """Public-facing Pokémon representation."""
    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )

    id: int
    name: str
    species: str
    types: list[str]
    height: float
    weight: float
    abilities: list[str]
    base_stats: StatBlock
    generation: int
    evolution_chain: list[int]
    habitat: str
    capture_rate: int
    base_experience: int
    gender_ratio: GenderRatio
    egg_groups: list[str]
    description: str
    sprite: str | None
    created_at: datetime
    updated_at: datetime


def serialize_pokemon(pokemon) -> dict:
    """ORM row -> camelCase JSON-ready dict."""
    return PokemonRead.model_validate(pokemon).model_dump(
        mode="json", by_alias=True,
    )
