"""Initial schema — pokemon and types tables.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY, JSONB

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "pokemon",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False, unique=True),
        sa.Column("species", sa.String(255), nullable=False),
        sa.Column("types", ARRAY(sa.String), nullable=False),
        sa.Column("height", sa.Float, nullable=False, server_default="0"),
        sa.Column("weight", sa.Float, nullable=False, server_default="0"),
        sa.Column("abilities", ARRAY(sa.String), nullable=False, server_default="{}"),
        sa.Column("baseStats", JSONB, nullable=False),
        sa.Column("generation", sa.Integer, nullable=False, server_default="1"),
        sa.Column("evolutionChain", ARRAY(sa.Integer), nullable=False, server_default="{}"),
        sa.Column("habitat", sa.String(255), nullable=False, server_default="Unknown"),
        sa.Column("captureRate", sa.Integer, nullable=False, server_default="45"),
        sa.Column("baseExperience", sa.Integer, nullable=False, server_default="0"),
        sa.Column(
            "genderRatio", JSONB, nullable=False,
            server_default=sa.text("'{\"male\": 50, \"female\": 50}'::jsonb"),
        ),
        sa.Column("eggGroups", ARRAY(sa.String), nullable=False, server_default="{Field}"),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("sprite", sa.String(512), nullable=True),
        sa.Column("createdAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updatedAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_pokemon_generation", "pokemon", ["generation"])
    op.create_index(
        "ix_pokemon_types", "pokemon", ["types"], postgresql_using="gin",
    )

    op.create_table(
        "types",
        sa.Column("name", sa.String(255), primary_key=True),
        sa.Column("weaknesses", ARRAY(sa.String), nullable=False, server_default="{}"),
        sa.Column("strengths", ARRAY(sa.String), nullable=False, server_default="{}"),
        sa.Column("immunities", ARRAY(sa.String), nullable=False, server_default="{}"),
    )


def downgrade() -> None:
    op.drop_table("types")
    op.drop_index("ix_pokemon_types", table_name="pokemon")
    op.drop_index("ix_pokemon_generation", table_name="pokemon")
    op.drop_table("pokemon")
