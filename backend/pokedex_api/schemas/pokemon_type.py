"""Type Schemas — read model for elemental types."""

from pydantic import BaseModel, ConfigDict


class TypeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    weaknesses: list[str]
    strengths: list[str]
    immunities: list[str]


def serialize_type(pokemon_type) -> dict:
    return TypeRead.model_validate(pokemon_type).model_dump(mode="json")
