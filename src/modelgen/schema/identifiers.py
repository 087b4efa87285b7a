"""Qualified table identifiers: ``schema.table`` strings."""

import string
from typing import Iterable

from modelgen.types import PUBLIC_SCHEMA, QualifiedName, SchemaName, TableName

SEPARATOR = "."
WILDCARD = "*"

IDENTIFIER_CHARS = frozenset(string.ascii_letters + string.digits + "_")


def split(qualified: str) -> tuple[SchemaName, TableName]:
    """Split a qualified name into schema and table.

    A bare name is placed in the public schema. Only the first two segments
    are used, so ``"a.b.c"`` splits into ``("a", "b")``.
    """
    parts = qualified.split(SEPARATOR)
    if len(parts) < 2:
        return PUBLIC_SCHEMA, qualified
    return parts[0], parts[1]


def join(schema: SchemaName, table: TableName) -> QualifiedName:
    """Join schema and table into a qualified name."""
    return schema + SEPARATOR + table


def schemas(qualified_names: Iterable[str]) -> list[SchemaName]:
    """Return the schemas of the given names, first occurrence first."""
    seen: set[SchemaName] = set()
    result = []
    for name in qualified_names:
        schema, _ = split(name)
        if schema not in seen:
            seen.add(schema)
            result.append(schema)
    return result


def is_identifier(value: str) -> bool:
    """Check that value is non-empty and made of letters, digits and underscores."""
    if not value:
        return False
    for char in value:
        if char not in IDENTIFIER_CHARS:
            return False
    return True
