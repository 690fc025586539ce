"""GET /api/v1/search — free text over name/species/description plus filters."""

import pytest


@pytest.fixture
async def roster(seed_pokemon):
    await seed_pokemon(
        {"name": "Pikachu", "species": "Mouse Pokémon", "types": ["Electric"],
         "description": "Stores electricity in its cheeks."},
        {"name": "Raichu", "species": "Mouse Pokémon", "types": ["Electric"],
         "description": "Its tail discharges electricity into the ground."},
        {"name": "Rattata", "species": "Mouse Pokémon", "types": ["Normal"],
         "description": "Bites anything when it attacks."},
        {"name": "Magikarp", "species": "Fish Pokémon", "types": ["Water"],
         "generation": 1, "description": "Famously weak and useless."},
        {"name": "Pichu", "species": "Tiny Mouse Pokémon", "types": ["Electric"],
         "generation": 2, "description": "Not yet skilled at storing power."},
    )


async def test_search_is_case_insensitive(client, roster):
    resp = await client.get("/api/v1/search?q=PIKA")
    assert resp.status_code == 200
    body = resp.json()
    assert [p["name"] for p in body["data"]] == ["Pikachu"]
    assert body["meta"]["resultCount"] == 1
    assert body["meta"]["query"] == {"q": "PIKA"}


async def test_search_matches_species_and_description(client, roster):
    by_species = (await client.get("/api/v1/search?q=mouse")).json()
    assert [p["name"] for p in by_species["data"]] == [
        "Pikachu", "Raichu", "Rattata", "Pichu",
    ]
    by_description = (await client.get("/api/v1/search?q=electricity")).json()
    assert [p["name"] for p in by_description["data"]] == ["Pikachu", "Raichu"]


async def test_search_combines_with_filters(client, roster):
    body = (await client.get("/api/v1/search?q=mouse&type=Electric&generation=2")).json()
    assert [p["name"] for p in body["data"]] == ["Pichu"]
    assert body["meta"]["query"] == {"q": "mouse", "type": "Electric", "generation": 2}


async def test_search_without_query_lists_all(client, roster):
    body = (await client.get("/api/v1/search")).json()
    assert body["meta"]["resultCount"] == 5
    assert body["meta"]["query"] == {}


async def test_search_treats_wildcards_literally(client, roster):
    body = (await client.get("/api/v1/search", params={"q": "%"})).json()
    assert body["data"] == []


async def test_search_rejects_bad_generation(client):
    resp = await client.get("/api/v1/search?q=pika&generation=first")
    assert resp.status_code == 400


async def test_search_rejects_generation_beyond_integer_range(client):
    resp = await client.get("/api/v1/search?q=pika&generation=99999999999999999999")
    assert resp.status_code == 400
    assert resp.json()["error"] == "Bad request"
