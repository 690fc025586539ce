"""Query Translator — converts typed filters/sort into SQLAlchemy predicates.

Invariants:
    - build_where_clause() returns a conjunction; no filters -> true()
    - name / q matching is case-insensitive substring, with % and _ escaped
    - type matching is exact tag containment in Pokemon.types
    - stat bounds are inclusive and apply to baseStats.total

Design Decisions:
    - Pure functions returning SQL expressions: no session, no IO, testable by compiling
"""

from sqlalchemy import ColumnElement, and_, or_, true
from sqlalchemy.sql.elements import UnaryExpression

from pokedex_api.core.query_filters import PokemonFilters, SortOrder, SortSpec
from pokedex_api.db.types import tag_in_array
from pokedex_api.models.pokemon import Pokemon


def stats_total_expr() -> ColumnElement[int]:
    return Pokemon.base_stats["total"].as_integer()


def build_where_clause(filters: PokemonFilters) -> ColumnElement[bool]:
    """AND of every filter present in `filters`."""
    clauses: list[ColumnElement[bool]] = []
    if filters.name is not None:
        clauses.append(Pokemon.name.icontains(filters.name, autoescape=True))
    if filters.type is not None:
        clauses.append(tag_in_array(Pokemon.types, filters.type))
    if filters.generation is not None:
        clauses.append(Pokemon.generation == filters.generation)
    if filters.min_stats is not None:
        clauses.append(stats_total_expr() >= filters.min_stats)
    if filters.max_stats is not None:
        clauses.append(stats_total_expr() <= filters.max_stats)
    return and_(true(), *clauses)


def build_search_clause(q: str) -> ColumnElement[bool]:
    """Free-text match on name, species or description."""
    return or_(
        Pokemon.name.icontains(q, autoescape=True),
        Pokemon.species.icontains(q, autoescape=True),
        Pokemon.description.icontains(q, autoescape=True),
    )


def build_order_by(sort: SortSpec) -> list[UnaryExpression]:
    """Requested ordering, with id as tiebreaker for stable pages."""
    column = getattr(Pokemon, sort.attribute)
    primary = column.desc() if sort.order is SortOrder.DESC else column.asc()
    if sort.attribute == "id":
        return [primary]
    return [primary, Pokemon.id.asc()]
