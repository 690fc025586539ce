"""Type Chart Seed — upserts the 18 canonical types into the `types` table.

Usage:
    python -m pokedex_api.db.seed_types

Invariants:
    - Idempotent: existing rows are overwritten by name (session.merge)
    - weaknesses = attacking types that are super effective against this type
    - strengths = defending types this type is super effective against
    - immunities = attacking types that have no effect on this type
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from pokedex_api.config import get_settings
from pokedex_api.db.base import Base
from pokedex_api.db.session import create_session_factory
from pokedex_api.infrastructure.observability import setup_logging
from pokedex_api.models import PokemonType

logger = logging.getLogger(__name__)

TYPE_CHART: dict[str, dict[str, list[str]]] = {
    "Normal": {
        "weaknesses": ["Fighting"],
        "strengths": [],
        "immunities": ["Ghost"],
    },
    "Fire": {
        "weaknesses": ["Water", "Ground", "Rock"],
        "strengths": ["Grass", "Ice", "Bug", "Steel"],
        "immunities": [],
    },
    "Water": {
        "weaknesses": ["Electric", "Grass"],
        "strengths": ["Fire", "Ground", "Rock"],
        "immunities": [],
    },
    "Electric": {
        "weaknesses": ["Ground"],
        "strengths": ["Water", "Flying"],
        "immunities": [],
    },
    "Grass": {
        "weaknesses": ["Fire", "Ice", "Poison", "Flying", "Bug"],
        "strengths": ["Water", "Ground", "Rock"],
        "immunities": [],
    },
    "Ice": {
        "weaknesses": ["Fire", "Fighting", "Rock", "Steel"],
        "strengths": ["Grass", "Ground", "Flying", "Dragon"],
        "immunities": [],
    },
    "Fighting": {
        "weaknesses": ["Flying", "Psychic", "Fairy"],
        "strengths": ["Normal", "Ice", "Rock", "Dark", "Steel"],
        "immunities": [],
    },
    "Poison": {
        "weaknesses": ["Ground", "Psychic"],
        "strengths": ["Grass", "Fairy"],
        "immunities": [],
    },
    "Ground": {
        "weaknesses": ["Water", "Grass", "Ice"],
        "strengths": ["Fire", "Electric", "Poison", "Rock", "Steel"],
        "immunities": ["Electric"],
    },
    "Flying": {
        "weaknesses": ["Electric", "Ice", "Rock"],
        "strengths": ["Grass", "Fighting", "Bug"],
        "immunities": ["Ground"],
    },
    "Psychic": {
        "weaknesses": ["Bug", "Ghost", "Dark"],
        "strengths": ["Fighting", "Poison"],
        "immunities": [],
    },
    "Bug": {
        "weaknesses": ["Fire", "Flying", "Rock"],
        "strengths": ["Grass", "Psychic", "Dark"],
        "immunities": [],
    },
    "Rock": {
        "weaknesses": ["Water", "Grass", "Fighting", "Ground", "Steel"],
        "strengths": ["Fire", "Ice", "Flying", "Bug"],
        "immunities": [],
    },
    "Ghost": {
        "weaknesses": ["Ghost", "Dark"],
        "strengths": ["Psychic", "Ghost"],
        "immunities": ["Normal", "Fighting"],
    },
    "Dragon": {
        "weaknesses": ["Ice", "Dragon", "Fairy"],
        "strengths": ["Dragon"],
        "immunities": [],
    },
    "Dark": {
        "weaknesses": ["Fighting", "Bug", "Fairy"],
        "strengths": ["Psychic", "Ghost"],
        "immunities": ["Psychic"],
    },
    "Steel": {
        "weaknesses": ["Fire", "Fighting", "Ground"],
        "strengths": ["Ice", "Rock", "Fairy"],
        "immunities": ["Poison"],
    },
    "Fairy": {
        "weaknesses": ["Poison", "Steel"],
        "strengths": ["Fighting", "Dragon", "Dark"],
        "immunities": ["Dragon"],
    },
}


async def seed_types(session: AsyncSession) -> int:
    """Upsert every entry of TYPE_CHART; returns the number of rows written."""
    for name, matchups in TYPE_CHART.items():
        await session.merge(PokemonType(name=name, **matchups))
    await session.commit()
    return len(TYPE_CHART)


async def _run(session_factory: async_sessionmaker[AsyncSession]) -> int:
    engine = session_factory.kw["bind"]
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        async with session_factory() as session:
            return await seed_types(session)
    finally:
        await engine.dispose()


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    count = asyncio.run(
        _run(create_session_factory(settings.resolved_database_url)),
    )
    logger.info(f"Seeded {count} types")


if __name__ == "__main__":
    main()
