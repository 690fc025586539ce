"""Query Dependencies — FastAPI dependencies turning raw query strings into typed values.

Invariants:
    - Parameters are declared as str so malformed numbers reach core parsing
      and surface as BadRequestError (400 "Bad request"), not a 422
"""

from fastapi import Query

from pokedex_api.core.pagination import PageWindow, paginate
from pokedex_api.core.query_filters import (
    PokemonFilters, SortSpec, parse_filters, parse_int_param, parse_sort,
)


def get_pokemon_filters(
    name: str | None = Query(None, description="Case-insensitive substring of the name"),
    type: str | None = Query(None, description="Exact type tag, e.g. Electric"),
    generation: str | None = Query(None, description="Generation number"),
    min_stats: str | None = Query(None, alias="minStats", description="Minimum stat total"),
    max_stats: str | None = Query(None, alias="maxStats", description="Maximum stat total"),
) -> PokemonFilters:
    return parse_filters({
        "name": name,
        "type": type,
        "generation": generation,
        "minStats": min_stats,
        "maxStats": max_stats,
    })


def get_page_window(
    page: str | None = Query(None, description="1-based page number (default 1)"),
    limit: str | None = Query(None, description="Items per page (default 20, max 100)"),
) -> PageWindow:
    return paginate(
        parse_int_param("page", page), parse_int_param("limit", limit),
    )


def get_sort_spec(
    sort: str | None = Query(None, description="Field to sort by (default id)"),
    order: str | None = Query(None, description="ASC or DESC (default ASC)"),
) -> SortSpec:
    return parse_sort(sort, order)
