"""Pokemon ORM — persists one Pokédex entry per row in the `pokemon` table.

Invariants:
    - id is an autoincrement integer primary key
    - name is unique and non-nullable
    - base_stats["total"] always equals the sum of the six named stats
      (enforced by the write path in services/pokemon_store.py)
    - gender_ratio defaults to {"male": 50, "female": 50}

Design Decisions:
    - JSON(B) for base_stats and gender_ratio: stat blocks are read whole
    - ARRAY columns on PostgreSQL for types/abilities/egg groups/evolution chain
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from pokedex_api.db.base import Base
from pokedex_api.db.types import IntegerList, JSONDocument, StringList


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _default_gender_ratio() -> dict:
    return {"male": 50, "female": 50}


class Pokemon(Base):
    """Pokédex entry."""
    __tablename__ = "pokemon"
    __table_args__ = (
        Index("ix_pokemon_types", "types", postgresql_using="gin"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    species: Mapped[str] = mapped_column(String(255), nullable=False)
    types: Mapped[list[str]] = mapped_column(StringList, nullable=False)
    height: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    weight: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    abilities: Mapped[list[str]] = mapped_column(
        StringList, nullable=False, default=list,
    )
    base_stats: Mapped[dict] = mapped_column(
        "baseStats", JSONDocument, nullable=False,
    )
    generation: Mapped[int] = mapped_column(
        Integer, nullable=False, default=1, index=True,
    )
    evolution_chain: Mapped[list[int]] = mapped_column(
        "evolutionChain", IntegerList, nullable=False, default=list,
    )
    habitat: Mapped[str] = mapped_column(
        String(255), nullable=False, default="Unknown",
    )
    capture_rate: Mapped[int] = mapped_column(
        "captureRate", Integer, nullable=False, default=45,
    )
    base_experience: Mapped[int] = mapped_column(
        "baseExperience", Integer, nullable=False, default=0,
    )
    gender_ratio: Mapped[dict] = mapped_column(
        "genderRatio", JSONDocument, nullable=False,
        default=_default_gender_ratio,
    )
    egg_groups: Mapped[list[str]] = mapped_column(
        "eggGroups", StringList, nullable=False, default=lambda: ["Field"],
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    sprite: Mapped[str | None] = mapped_column(String(512), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        "createdAt", DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        "updatedAt", DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )

    def __repr__(self) -> str:
        return f"<Pokemon id={self.id} name={self.name!r}>"
