"""Types — unpaginated listing and single lookup under /api/v1/types."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pokedex_api.infrastructure.database import get_db
from pokedex_api.infrastructure.observability import utc_timestamp
from pokedex_api.schemas.pokemon_type import serialize_type
from pokedex_api.services import pokemon_store

router = APIRouter(prefix="/api/v1/types", tags=["types"])


@router.get("")
async def list_types(db: AsyncSession = Depends(get_db)):
    """Every type row, ordered by name."""
    types = await pokemon_store.list_types(db)
    return {
        "success": True,
        "data": [serialize_type(t) for t in types],
        "meta": {"totalTypes": len(types), "timestamp": utc_timestamp()},
    }


@router.get("/{type_name}")
async def get_type(type_name: str, db: AsyncSession = Depends(get_db)):
    pokemon_type = await pokemon_store.get_type_or_404(db, type_name)
    return {
        "success": True,
        "data": serialize_type(pokemon_type),
        "meta": {"timestamp": utc_timestamp()},
    }
