"""Query Filters — typed filter and sort structures parsed once at the HTTP boundary.

Invariants:
    - parse_filters() never returns string-typed numbers: generation/min/max are int | None
    - Empty values are treated as absent; unrecognized keys are ignored
    - Malformed or out-of-range (beyond INTEGER) numbers raise BadRequestError (400),
      never reach the database
    - parse_sort() only yields attributes listed in SORTABLE_FIELDS

Design Decisions:
    - Frozen dataclasses: the filter set is a value, safe to echo back in `meta`
    - API spelling (camelCase) mapped to model attributes here, so services
      never see client-supplied column names
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum

from pokedex_api.core.errors import BadRequestError


FILTER_KEYS = ("name", "type", "generation", "minStats", "maxStats")

# Bounds of a 4-byte INTEGER column; larger values cannot be bound as parameters
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# API field name -> Pokemon model attribute
SORTABLE_FIELDS = {
    "id": "id",
    "name": "name",
    "species": "species",
    "height": "height",
    "weight": "weight",
    "generation": "generation",
    "habitat": "habitat",
    "captureRate": "capture_rate",
    "baseExperience": "base_experience",
    "createdAt": "created_at",
    "updatedAt": "updated_at",
}


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class PokemonFilters:
    """Conjunction of optional filters over the Pokemon entity."""
    name: str | None = None
    type: str | None = None
    generation: int | None = None
    min_stats: int | None = None
    max_stats: int | None = None

    def as_query(self) -> dict:
        """Applied filters in API spelling (absent filters omitted)."""
        applied = {
            "name": self.name,
            "type": self.type,
            "generation": self.generation,
            "minStats": self.min_stats,
            "maxStats": self.max_stats,
        }
        return {k: v for k, v in applied.items() if v is not None}

    @property
    def is_empty(self) -> bool:
        return not self.as_query()


@dataclass(frozen=True)
class SortSpec:
    field: str
    attribute: str
    order: SortOrder


def parse_int_param(name: str, raw: str | None) -> int | None:
    """Parse an optional integer query parameter; blank means absent."""
    if raw is None:
        return None
    value = raw.strip()
    if not value:
        return None
    try:
        number = int(value)
    except ValueError:
        raise BadRequestError(
            f"Query parameter '{name}' must be an integer, got '{raw}'", name,
        ) from None
    if not INT32_MIN <= number <= INT32_MAX:
        raise BadRequestError(
            f"Query parameter '{name}' is out of range, got '{raw}'", name,
        )
    return number


def _text(raw: str | None) -> str | None:
    if raw is None:
        return None
    value = raw.strip()
    return value or None


def parse_filters(params: Mapping[str, str | None]) -> PokemonFilters:
    """Build PokemonFilters from a loosely-typed parameter bag."""
    return PokemonFilters(
        name=_text(params.get("name")),
        type=_text(params.get("type")),
        generation=parse_int_param("generation", params.get("generation")),
        min_stats=parse_int_param("minStats", params.get("minStats")),
        max_stats=parse_int_param("maxStats", params.get("maxStats")),
    )


def parse_sort(sort: str | None = None, order: str | None = None) -> SortSpec:
    """Resolve `sort`/`order` query parameters; defaults to id ASC."""
    field = _text(sort) or "id"
    if field not in SORTABLE_FIELDS:
        raise BadRequestError(
            f"Cannot sort by '{field}'. "
            f"Sortable fields: {', '.join(SORTABLE_FIELDS)}",
            "sort",
        )
    direction = (_text(order) or SortOrder.ASC.value).upper()
    try:
        sort_order = SortOrder(direction)
    except ValueError:
        raise BadRequestError(
            f"Query parameter 'order' must be ASC or DESC, got '{order}'",
            "order",
        ) from None
    return SortSpec(field=field, attribute=SORTABLE_FIELDS[field], order=sort_order)
