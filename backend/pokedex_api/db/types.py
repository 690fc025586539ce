"""Portable Column Types & Expressions — PostgreSQL types with SQLite fallbacks.

Invariants:
    - On PostgreSQL, list columns are native ARRAY and documents are JSONB
    - On SQLite (tests), both are stored as JSON text
    - tag_in_array() renders `@>` on PostgreSQL and json_each() elsewhere

Design Decisions:
    - Custom FunctionElement + @compiles over dialect checks in services:
      the query translator stays dialect-agnostic
"""

from sqlalchemy import Boolean, Integer, JSON, String
from sqlalchemy.dialects.postgresql import ARRAY, JSONB
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.functions import FunctionElement


StringList = ARRAY(String).with_variant(JSON(), "sqlite")
IntegerList = ARRAY(Integer).with_variant(JSON(), "sqlite")
JSONDocument = JSON().with_variant(JSONB(), "postgresql")


class tag_in_array(FunctionElement):
    """True when the list column contains the given tag (exact match)."""
    type = Boolean()
    name = "tag_in_array"
    inherit_cache = True


@compiles(tag_in_array, "postgresql")
def _tag_in_array_postgresql(element, compiler, **kw):
    column, tag = list(element.clauses)
    return "%s @> ARRAY[CAST(%s AS VARCHAR)]" % (
        compiler.process(column, **kw), compiler.process(tag, **kw),
    )


@compiles(tag_in_array)
def _tag_in_array_json(element, compiler, **kw):
    column, tag = list(element.clauses)
    return "EXISTS (SELECT 1 FROM json_each(%s) WHERE json_each.value = %s)" % (
        compiler.process(column, **kw), compiler.process(tag, **kw),
    )
