"""Query Translator — verifies SQL produced for each filter on PostgreSQL and SQLite.

Tests:
    - No filters -> no restrictive predicate
    - type uses array containment (@>) on PostgreSQL, json_each() on SQLite
    - name/q use case-insensitive LIKE with escaping
    - stat bounds compare the integer baseStats.total
"""

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite

from pokedex_api.core.query_filters import PokemonFilters, parse_sort
from pokedex_api.models import Pokemon
from pokedex_api.services.pokemon_query import (
    build_order_by, build_search_clause, build_where_clause,
)


def _sql(clause, dialect) -> str:
    stmt = select(Pokemon.id).where(clause)
    return str(stmt.compile(dialect=dialect)).lower()


def test_empty_filters_compile_to_true():
    sql = _sql(build_where_clause(PokemonFilters()), sqlite.dialect())
    assert "like" not in sql
    assert "json_each" not in sql
    assert "generation" not in sql.split("where", 1)[1]


def test_type_filter_uses_array_containment_on_postgres():
    sql = _sql(build_where_clause(PokemonFilters(type="Electric")), postgresql.dialect())
    assert "pokemon.types @> array[cast(" in sql


def test_type_filter_uses_json_each_on_sqlite():
    sql = _sql(build_where_clause(PokemonFilters(type="Electric")), sqlite.dialect())
    assert "json_each(pokemon.types)" in sql


def test_name_filter_is_case_insensitive_on_postgres():
    sql = _sql(build_where_clause(PokemonFilters(name="pika")), postgresql.dialect())
    assert "ilike" in sql
    assert "escape" in sql


def test_stat_bounds_compare_integer_total():
    sql = _sql(
        build_where_clause(PokemonFilters(min_stats=300, max_stats=500)),
        postgresql.dialect(),
    )
    assert "->>" in sql
    assert "as integer" in sql
    assert ">=" in sql and "<=" in sql


def test_filters_combine_with_and():
    sql = _sql(
        build_where_clause(PokemonFilters(type="Electric", generation=1)),
        sqlite.dialect(),
    )
    assert " and " in sql
    assert "pokemon.generation =" in sql


def test_search_clause_ors_three_columns():
    sql = _sql(build_search_clause("pika"), postgresql.dialect())
    assert sql.count("ilike") == 3
    assert " or " in sql
    for column in ("pokemon.name", "pokemon.species", "pokemon.description"):
        assert column in sql


def test_order_by_id_has_no_tiebreaker():
    assert len(build_order_by(parse_sort("id", "DESC"))) == 1


def test_order_by_other_field_adds_id_tiebreaker():
    clauses = build_order_by(parse_sort("name", "DESC"))
    compiled = [str(c.compile(dialect=sqlite.dialect())).lower() for c in clauses]
    assert compiled == ["pokemon.name desc", "pokemon.id asc"]
