"""Pokémon CRUD — list/get/create/update/delete under /api/v1/pokemon.

Invariants:
    - Every success response is {success: true, data, meta | message}
    - baseStats.total in every response is server-computed
    - Unknown id -> 404 "Pokémon not found" naming the id
    - Routes only shape envelopes; queries live in services/pokemon_store.py
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from pokedex_api.api.dependencies import (
    get_page_window, get_pokemon_filters, get_sort_spec,
)
from pokedex_api.core.pagination import PageWindow, build_pagination_meta
from pokedex_api.core.query_filters import PokemonFilters, SortSpec
from pokedex_api.infrastructure.database import get_db
from pokedex_api.infrastructure.observability import utc_timestamp
from pokedex_api.schemas.pokemon import PokemonCreate, PokemonUpdate, serialize_pokemon
from pokedex_api.services import pokemon_store

router = APIRouter(prefix="/api/v1/pokemon", tags=["pokemon"])


@router.get("")
async def list_pokemon(
    filters: PokemonFilters = Depends(get_pokemon_filters),
    window: PageWindow = Depends(get_page_window),
    sort: SortSpec = Depends(get_sort_spec),
    db: AsyncSession = Depends(get_db),
):
    """Page of Pokémon matching the filters, with pagination metadata."""
    rows, total = await pokemon_store.list_pokemon(db, filters, sort, window)
    return {
        "success": True,
        "data": [serialize_pokemon(p) for p in rows],
        "pagination": build_pagination_meta(window, total),
        "meta": {
            "filters": filters.as_query(),
            "sort": sort.field,
            "order": sort.order.value,
            "timestamp": utc_timestamp(),
        },
    }


@router.get("/{pokemon_id}")
async def get_pokemon(pokemon_id: int, db: AsyncSession = Depends(get_db)):
    pokemon = await pokemon_store.get_pokemon_or_404(db, pokemon_id)
    return {
        "success": True,
        "data": serialize_pokemon(pokemon),
        "meta": {"timestamp": utc_timestamp()},
    }


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_pokemon(body: PokemonCreate, db: AsyncSession = Depends(get_db)):
    pokemon = await pokemon_store.create_pokemon(db, body)
    return {
        "success": True,
        "data": serialize_pokemon(pokemon),
        "message": "Pokémon created successfully",
    }


@router.put("/{pokemon_id}")
async def update_pokemon(
    pokemon_id: int, body: PokemonUpdate, db: AsyncSession = Depends(get_db),
):
    pokemon = await pokemon_store.update_pokemon(db, pokemon_id, body)
    return {
        "success": True,
        "data": serialize_pokemon(pokemon),
        "message": "Pokémon updated successfully",
    }


@router.delete("/{pokemon_id}")
async def delete_pokemon(pokemon_id: int, db: AsyncSession = Depends(get_db)):
    pokemon = await pokemon_store.delete_pokemon(db, pokemon_id)
    return {
        "success": True,
        "data": serialize_pokemon(pokemon),
        "message": "Pokémon deleted successfully",
    }
