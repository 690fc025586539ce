"""GET /api/v1/pokemon — pagination, filtering and sorting.

Tests:
    - Default page size 20, totalPages by ceiling, last page partial
    - limit capped at 100, non-positive page/limit clamped
    - type / generation / stat-total filters, combined with AND
    - sort/order honoured; unknown sort field or non-numeric params -> 400
"""

import pytest


@pytest.fixture
async def forty_five(seed_pokemon):
    await seed_pokemon(*[
        {
            "name": f"Mon{i:02d}",
            "types": ["Electric"] if i % 3 == 0 else ["Water"],
            "generation": 1 if i <= 20 else 2,
            "baseStats": {
                "hp": 10 * i, "attack": 10, "defense": 10,
                "specialAttack": 10, "specialDefense": 10, "speed": 10,
            },
        }
        for i in range(1, 46)
    ])


async def test_default_page(client, forty_five):
    resp = await client.get("/api/v1/pokemon")
    assert resp.status_code == 200
    body = resp.json()
    assert len(body["data"]) == 20
    assert body["pagination"] == {
        "currentPage": 1,
        "totalPages": 3,
        "totalItems": 45,
        "itemsPerPage": 20,
        "hasNextPage": True,
        "hasPreviousPage": False,
    }
    assert body["meta"]["sort"] == "id"
    assert body["meta"]["order"] == "ASC"
    assert body["meta"]["filters"] == {}


async def test_last_page_is_partial(client, forty_five):
    body = (await client.get("/api/v1/pokemon?page=3")).json()
    assert len(body["data"]) == 5
    assert body["data"][0]["name"] == "Mon41"
    assert body["pagination"]["hasNextPage"] is False
    assert body["pagination"]["hasPreviousPage"] is True


async def test_page_past_end_is_empty(client, forty_five):
    body = (await client.get("/api/v1/pokemon?page=9")).json()
    assert body["data"] == []
    assert body["pagination"]["totalItems"] == 45


async def test_limit_capped_at_100(client, forty_five):
    body = (await client.get("/api/v1/pokemon?limit=500")).json()
    assert len(body["data"]) == 45
    assert body["pagination"]["itemsPerPage"] == 100
    assert body["pagination"]["totalPages"] == 1


async def test_non_positive_page_and_limit_clamped(client, forty_five):
    body = (await client.get("/api/v1/pokemon?page=0&limit=-5")).json()
    assert body["pagination"]["currentPage"] == 1
    assert body["pagination"]["itemsPerPage"] == 20


async def test_filter_by_type(client, forty_five):
    body = (await client.get("/api/v1/pokemon?type=Electric&limit=100")).json()
    assert body["pagination"]["totalItems"] == 15
    assert all(p["types"] == ["Electric"] for p in body["data"])
    assert body["meta"]["filters"] == {"type": "Electric"}


async def test_filter_by_generation(client, forty_five):
    body = (await client.get("/api/v1/pokemon?generation=2")).json()
    assert body["pagination"]["totalItems"] == 25
    assert all(p["generation"] == 2 for p in body["data"])


async def test_filters_combine(client, forty_five):
    body = (await client.get("/api/v1/pokemon?type=Electric&generation=1")).json()
    # multiples of 3 in 1..20
    assert body["pagination"]["totalItems"] == 6
    assert body["meta"]["filters"] == {"type": "Electric", "generation": 1}


async def test_filter_by_stat_total(client, forty_five):
    # total = 10*i + 50, so 100..150 selects i = 5..10
    body = (await client.get("/api/v1/pokemon?minStats=100&maxStats=150")).json()
    assert [p["name"] for p in body["data"]] == [f"Mon{i:02d}" for i in range(5, 11)]


async def test_filter_by_name_substring(client, forty_five):
    body = (await client.get("/api/v1/pokemon?name=mon4")).json()
    assert [p["name"] for p in body["data"]] == [f"Mon{i}" for i in range(40, 46)]


async def test_sort_descending(client, forty_five):
    body = (await client.get("/api/v1/pokemon?sort=name&order=desc&limit=3")).json()
    assert [p["name"] for p in body["data"]] == ["Mon45", "Mon44", "Mon43"]
    assert body["meta"]["order"] == "DESC"


async def test_unknown_sort_field_rejected(client):
    resp = await client.get("/api/v1/pokemon?sort=password")
    assert resp.status_code == 400
    assert resp.json()["error"] == "Bad request"


async def test_bad_order_rejected(client):
    resp = await client.get("/api/v1/pokemon?order=sideways")
    assert resp.status_code == 400


@pytest.mark.parametrize("query", ["generation=abc", "page=two", "minStats=1.5"])
async def test_non_numeric_params_rejected(client, query):
    resp = await client.get(f"/api/v1/pokemon?{query}")
    assert resp.status_code == 400
    body = resp.json()
    assert body == {"success": False, "error": "Bad request", "message": body["message"]}
    assert "must be an integer" in body["message"]


@pytest.mark.parametrize("query, parameter", [
    ("generation=99999999999999999999", "generation"),
    ("page=999999999999999999999", "page"),
    ("limit=2147483648", "limit"),
    ("minStats=-2147483649", "minStats"),
])
async def test_params_beyond_integer_range_rejected(client, query, parameter):
    resp = await client.get(f"/api/v1/pokemon?{query}")
    assert resp.status_code == 400
    body = resp.json()
    assert body["error"] == "Bad request"
    assert f"'{parameter}' is out of range" in body["message"]


async def test_largest_integer_page_is_empty(client, forty_five):
    body = (await client.get("/api/v1/pokemon?page=2147483647")).json()
    assert body["data"] == []
    assert body["pagination"]["currentPage"] == 2147483647
