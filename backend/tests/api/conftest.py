"""API test fixtures — async DB + FastAPI test client.

Invariants:
    - get_db dependency overridden to use the test DB
    - db_manager patched so /health probes the test engine
    - Rate limiter budget reset before every test

Design Decisions:
    - Bulk seeding goes straight through the ORM, bypassing HTTP
"""

import pytest
from httpx import ASGITransport, AsyncClient

import pokedex_api.infrastructure.database as db_module
from pokedex_api.core.stat_block import with_total
from pokedex_api.infrastructure.database import DatabaseSessionManager, get_db
from pokedex_api.main import app
from pokedex_api.models import Pokemon, PokemonType


def pokemon_payload(**overrides) -> dict:
    """Valid POST /api/v1/pokemon body (camelCase, as a client sends it)."""
    payload = {
        "name": "Pikachu",
        "species": "Mouse Pokémon",
        "types": ["Electric"],
        "height": 0.4,
        "weight": 6.0,
        "abilities": ["Static", "Lightning Rod"],
        "baseStats": {
            "hp": 35, "attack": 55, "defense": 40,
            "specialAttack": 50, "specialDefense": 50, "speed": 90,
        },
        "generation": 1,
        "evolutionChain": [172, 25, 26],
        "habitat": "Forest",
        "captureRate": 190,
        "baseExperience": 112,
        "genderRatio": {"male": 50, "female": 50},
        "eggGroups": ["Field", "Fairy"],
        "description": "When several of these Pokémon gather, their electricity can build and cause lightning storms.",
        "sprite": "https://example.com/sprites/25.png",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_payload():
    return pokemon_payload


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    # /health reads db_manager directly
    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    app.state.rate_limiter.reset()

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
def seed_pokemon(test_session_factory):
    """Insert Pokémon rows directly. Returns an async callable taking payload dicts."""

    async def _seed(*payloads: dict) -> list[Pokemon]:
        rows = []
        async with test_session_factory() as session:
            for p in payloads:
                rows.append(Pokemon(
                    name=p["name"],
                    species=p.get("species", "Test Pokémon"),
                    types=p.get("types", ["Normal"]),
                    base_stats=with_total(p.get("baseStats", {})),
                    generation=p.get("generation", 1),
                    description=p.get("description", "A test entry."),
                ))
            session.add_all(rows)
            await session.commit()
        return rows

    return _seed


@pytest.fixture
async def seed_types(test_session_factory):
    async with test_session_factory() as session:
        session.add_all([
            PokemonType(
                name="Electric", weaknesses=["Ground"],
                strengths=["Water", "Flying"], immunities=[],
            ),
            PokemonType(
                name="Fire", weaknesses=["Water", "Ground", "Rock"],
                strengths=["Grass", "Ice", "Bug", "Steel"], immunities=[],
            ),
            PokemonType(
                name="Ghost", weaknesses=["Ghost", "Dark"],
                strengths=["Psychic", "Ghost"], immunities=["Normal", "Fighting"],
            ),
        ])
        await session.commit()
