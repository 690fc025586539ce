"""PokemonType ORM — one row per elemental type in the `types` table.

Invariants:
    - name is the primary key
    - weaknesses/strengths/immunities hold type names, not foreign keys
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from pokedex_api.db.base import Base
from pokedex_api.db.types import StringList


class PokemonType(Base):
    """Elemental type and its matchups."""
    __tablename__ = "types"

    name: Mapped[str] = mapped_column(String(255), primary_key=True)
    weaknesses: Mapped[list[str]] = mapped_column(
        StringList, nullable=False, default=list,
    )
    strengths: Mapped[list[str]] = mapped_column(
        StringList, nullable=False, default=list,
    )
    immunities: Mapped[list[str]] = mapped_column(
        StringList, nullable=False, default=list,
    )
