"""Shared test helpers for modelgen tests."""

from modelgen.schema.identifiers import split
from modelgen.schema.models import Column, Relation, Table


def make_column(
    name: str = "id",
    col_type: str = "int8",
    nullable: bool = True,
    is_pk: bool = False,
    is_fk: bool = False,
) -> Column:
    """Create a Column with defaults."""
    return Column(
        name=name, type=col_type, nullable=nullable, is_pk=is_pk, is_fk=is_fk
    )


def make_relation(target: str, fields: list[str] | None = None) -> Relation:
    """Create a Relation pointing at a qualified target name."""
    schema, table = split(target)
    return Relation(
        target_schema=schema,
        target_table=table,
        fk_fields=tuple(fields or [f"{table}_id"]),
        target_columns=("id",),
    )


def make_table(
    qualified: str,
    references: list[str] | None = None,
    columns: list[Column] | None = None,
) -> Table:
    """Create a Table from a qualified name and the tables it references.

    Each reference adds an FK-flagged column and a matching relation.
    """
    schema, name = split(qualified)
    references = references or []
    if columns is None:
        columns = [make_column("id", is_pk=True)]
        for target in references:
            _, target_table = split(target)
            columns.append(make_column(f"{target_table}_id", is_fk=True))
    return Table(
        schema=schema,
        name=name,
        columns=columns,
        relations=[make_relation(target) for target in references],
    )


def names(tables: list[Table]) -> list[str]:
    """Qualified names of tables, in order."""
    return [t.qualified_name for t in tables]
