"""Pokémon Store — persistence operations behind the REST handlers.

Invariants:
    - Every write recomputes baseStats.total via core/stat_block.with_total
    - Name uniqueness checked before commit; the unique index is the final guard
    - Functions take the request-scoped AsyncSession and never open their own
    - Missing rows raise PokemonNotFoundError / TypeNotFoundError (404), including
      ids outside the INTEGER range, which are never queried

Design Decisions:
    - Module-level async functions over a repository class: one session per call site
    - count + page as two statements sharing one predicate
"""

import logging

from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pokedex_api.core.errors import (
    PokemonNotFoundError, TypeNotFoundError, ValidationError,
)
from pokedex_api.core.pagination import PageWindow
from pokedex_api.core.query_filters import INT32_MAX, PokemonFilters, SortSpec
from pokedex_api.core.stat_block import with_total
from pokedex_api.models.pokemon import Pokemon
from pokedex_api.models.pokemon_type import PokemonType
from pokedex_api.schemas.pokemon import PokemonCreate, PokemonUpdate
from pokedex_api.services.pokemon_query import (
    build_order_by, build_search_clause, build_where_clause,
)

logger = logging.getLogger(__name__)


async def list_pokemon(
    db: AsyncSession,
    filters: PokemonFilters,
    sort: SortSpec,
    window: PageWindow,
) -> tuple[list[Pokemon], int]:
    """One page of matching Pokémon plus the total match count."""
    where = build_where_clause(filters)
    total = await db.scalar(
        select(func.count()).select_from(Pokemon).where(where),
    )
    result = await db.scalars(
        select(Pokemon)
        .where(where)
        .order_by(*build_order_by(sort))
        .offset(window.offset)
        .limit(window.limit),
    )
    return list(result.all()), total or 0


async def search_pokemon(
    db: AsyncSession, q: str | None, filters: PokemonFilters,
) -> list[Pokemon]:
    where = build_where_clause(filters)
    if q:
        where = and_(where, build_search_clause(q))
    result = await db.scalars(
        select(Pokemon).where(where).order_by(Pokemon.id.asc()),
    )
    return list(result.all())


async def get_pokemon_or_404(db: AsyncSession, pokemon_id: int) -> Pokemon:
    # ids are positive INTEGERs; anything else cannot be stored
    if not 1 <= pokemon_id <= INT32_MAX:
        raise PokemonNotFoundError(pokemon_id)
    pokemon = await db.get(Pokemon, pokemon_id)
    if pokemon is None:
        raise PokemonNotFoundError(pokemon_id)
    return pokemon


async def _ensure_name_available(
    db: AsyncSession, name: str, exclude_id: int | None = None,
) -> None:
    query = select(Pokemon.id).where(Pokemon.name == name)
    if exclude_id is not None:
        query = query.where(Pokemon.id != exclude_id)
    if await db.scalar(query) is not None:
        raise ValidationError(f"name must be unique: '{name}' already exists", "name")


async def create_pokemon(db: AsyncSession, body: PokemonCreate) -> Pokemon:
    await _ensure_name_available(db, body.name)
    pokemon = Pokemon(
        **body.model_dump(exclude={"base_stats", "gender_ratio"}),
        base_stats=with_total(body.base_stats.model_dump(by_alias=True)),
        gender_ratio=body.gender_ratio.model_dump(),
    )
    db.add(pokemon)
    await db.commit()
    await db.refresh(pokemon)
    logger.info(
        f"Created Pokémon {pokemon.name}", extra={"pokemon_id": pokemon.id},
    )
    return pokemon


async def update_pokemon(
    db: AsyncSession, pokemon_id: int, body: PokemonUpdate,
) -> Pokemon:
    """Merge the fields present in `body` onto the stored row."""
    pokemon = await get_pokemon_or_404(db, pokemon_id)
    changes = body.model_dump(
        exclude_unset=True, exclude={"base_stats", "gender_ratio"},
    )
    if "name" in changes and changes["name"] != pokemon.name:
        await _ensure_name_available(db, changes["name"], exclude_id=pokemon.id)
    for field, value in changes.items():
        setattr(pokemon, field, value)
    if body.base_stats is not None:
        pokemon.base_stats = with_total(body.base_stats.model_dump(by_alias=True))
    if body.gender_ratio is not None:
        pokemon.gender_ratio = body.gender_ratio.model_dump()
    await db.commit()
    await db.refresh(pokemon)
    logger.info(f"Updated Pokémon {pokemon.name}", extra={"pokemon_id": pokemon.id})
    return pokemon


async def delete_pokemon(db: AsyncSession, pokemon_id: int) -> Pokemon:
    """Remove the row; the returned object keeps its loaded attributes."""
    pokemon = await get_pokemon_or_404(db, pokemon_id)
    await db.delete(pokemon)
    await db.commit()
    logger.info(f"Deleted Pokémon {pokemon.name}", extra={"pokemon_id": pokemon_id})
    return pokemon


async def list_types(db: AsyncSession) -> list[PokemonType]:
    result = await db.scalars(select(PokemonType).order_by(PokemonType.name))
    return list(result.all())


async def get_type_or_404(db: AsyncSession, name: str) -> PokemonType:
    pokemon_type = await db.get(PokemonType, name)
    if pokemon_type is None:
        pokemon_type = await db.scalar(
            select(PokemonType).where(func.lower(PokemonType.name) == name.lower()),
        )
    if pokemon_type is None:
        raise TypeNotFoundError(name)
    return pokemon_type
