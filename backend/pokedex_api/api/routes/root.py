"""API Metadata — self-describing document served at the root path."""

from fastapi import APIRouter, Request

from pokedex_api import __version__
from pokedex_api.config import get_settings
from pokedex_api.infrastructure.observability import uptime_seconds, utc_timestamp

router = APIRouter(tags=["meta"])

ENDPOINTS = {
    "pokemon": {
        "GET /api/v1/pokemon": "Get all Pokémon with pagination and filtering",
        "GET /api/v1/pokemon/:id": "Get a specific Pokémon by ID",
        "POST /api/v1/pokemon": "Create a new Pokémon entry",
        "PUT /api/v1/pokemon/:id": "Update a Pokémon entry",
        "DELETE /api/v1/pokemon/:id": "Delete a Pokémon entry",
    },
    "types": {
        "GET /api/v1/types": "Get all Pokémon types",
        "GET /api/v1/types/:name": "Get specific type information",
    },
    "search": {
        "GET /api/v1/search": "Search Pokémon by various criteria",
    },
    "health": {
        "GET /health": "Health check endpoint",
    },
}


@router.get("/")
async def api_metadata(request: Request):
    return {
        "name": "Pokémon Database API",
        "version": __version__,
        "description": "A comprehensive RESTful API for Pokémon data",
        "server": {
            "environment": get_settings().environment,
            "timestamp": utc_timestamp(),
            "uptime": uptime_seconds(),
        },
        "endpoints": ENDPOINTS,
        "documentation": f"{str(request.base_url).rstrip('/')}{request.app.docs_url}",
    }
