"""ORM Models — SQLAlchemy declarative models for all persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Pokemon.types is loosely coupled to PokemonType.name (no foreign key)

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all
"""

from pokedex_api.models.pokemon import Pokemon  # noqa: F401
from pokedex_api.models.pokemon_type import PokemonType  # noqa: F401
