"""Search — free-text `q` over name/species/description combined with list filters.

Invariants:
    - Without q, behaves as an unpaginated filtered listing
    - With q: (filters) AND (name OR species OR description contains q, case-insensitive)
    - Results ordered by id; no relevance ranking
"""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from pokedex_api.api.dependencies import get_pokemon_filters
from pokedex_api.core.query_filters import PokemonFilters
from pokedex_api.infrastructure.database import get_db
from pokedex_api.infrastructure.observability import utc_timestamp
from pokedex_api.schemas.pokemon import serialize_pokemon
from pokedex_api.services import pokemon_store

router = APIRouter(prefix="/api/v1/search", tags=["search"])


@router.get("")
async def search_pokemon(
    q: str | None = Query(None, description="Free text matched against name, species, description"),
    filters: PokemonFilters = Depends(get_pokemon_filters),
    db: AsyncSession = Depends(get_db),
):
    q = q.strip() if q else None
    results = await pokemon_store.search_pokemon(db, q or None, filters)
    query = {"q": q, **filters.as_query()} if q else filters.as_query()
    return {
        "success": True,
        "data": [serialize_pokemon(p) for p in results],
        "meta": {
            "query": query,
            "resultCount": len(results),
            "timestamp": utc_timestamp(),
        },
    }
