"""Load table catalogs from YAML files."""

from pathlib import Path

import yaml

from modelgen.exceptions import CatalogLoadError
from modelgen.schema.identifiers import split
from modelgen.schema.models import HAS_ONE, RELATION_TYPES, Column, Relation, Table
from modelgen.types import PUBLIC_SCHEMA

VALID_TABLE_FIELDS = {
    "schema",
    "table",
    "columns",
    "relations",
}

VALID_COLUMN_FIELDS = {
    "name",
    "type",
    "nullable",
    "pk",
    "fk",
    "array",
    "dimensions",
    "default",
}

VALID_RELATION_FIELDS = {
    "type",
    "fields",
    "target",
    "target_columns",
}


def load_catalog(catalog_path: Path) -> list[Table]:
    """Load a catalog from a directory of YAML files or a single file."""
    if catalog_path.is_file():
        return _load_single_file(catalog_path)
    elif catalog_path.is_dir():
        return _load_directory(catalog_path)
    else:
        raise CatalogLoadError(f"Catalog path does not exist: {catalog_path}")


def _load_directory(directory: Path) -> list[Table]:
    """Load a catalog from a directory, one table per YAML file."""
    tables: dict[str, Table] = {}
    for yaml_file in sorted(directory.glob("*.yaml")):
        table = _parse_table_yaml(yaml_file)
        if table.qualified_name in tables:
            raise CatalogLoadError(
                f"Duplicate table '{table.qualified_name}' found in directory"
            )
        tables[table.qualified_name] = table
    return list(tables.values())


def _load_single_file(file_path: Path) -> list[Table]:
    """Load a catalog from a single YAML file."""
    data = _read_yaml(file_path)

    if "tables" not in data:
        return [_parse_table_dict(data)]

    tables: dict[str, Table] = {}
    for table_data in data.get("tables") or []:
        table = _parse_table_dict(table_data)
        if table.qualified_name in tables:
            raise CatalogLoadError(
                f"Duplicate table '{table.qualified_name}' in file"
            )
        tables[table.qualified_name] = table
    return list(tables.values())


def _parse_table_yaml(file_path: Path) -> Table:
    """Parse a table definition from a YAML file."""
    return _parse_table_dict(_read_yaml(file_path))


def _read_yaml(file_path: Path) -> dict:
    with open(file_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise CatalogLoadError(f"Invalid YAML in {file_path}: {e}") from e
    if data is None:
        raise CatalogLoadError(f"Empty YAML file: {file_path}")
    if not isinstance(data, dict):
        raise CatalogLoadError(f"Expected a mapping in {file_path}")
    return data


def _check_fields(data: dict, valid: set[str], what: str) -> None:
    unknown_fields = set(data.keys()) - valid
    if unknown_fields:
        raise CatalogLoadError(
            f"Unknown field(s) in {what} definition: {', '.join(sorted(unknown_fields))}"
        )


def _parse_table_dict(data: dict) -> Table:
    """Parse a table definition from a dictionary."""
    _check_fields(data, VALID_TABLE_FIELDS, "table")

    name = data.get("table")
    if not name:
        raise CatalogLoadError("Table definition missing 'table' field")

    columns = [_parse_column(col) for col in data.get("columns") or []]

    seen = set()
    for column in columns:
        if column.name in seen:
            raise CatalogLoadError(
                f"Duplicate column name '{column.name}' in table '{name}'"
            )
        seen.add(column.name)

    relations = [_parse_relation(rel, name) for rel in data.get("relations") or []]

    schema = data.get("schema") or PUBLIC_SCHEMA
    if not isinstance(schema, str):
        raise CatalogLoadError(
            f"Table '{name}' has invalid 'schema' field: {schema!r}"
        )

    return Table(
        schema=schema,
        name=str(name),
        columns=columns,
        relations=relations,
    )


def _parse_column(data: dict) -> Column:
    """Parse a column definition from a dictionary."""
    _check_fields(data, VALID_COLUMN_FIELDS, "column")

    name = data.get("name")
    if not name:
        raise CatalogLoadError("Column definition missing 'name' field")

    col_type = data.get("type")
    if not col_type:
        raise CatalogLoadError(f"Column '{name}' missing 'type' field")

    is_array = data.get("array", False)

    return Column(
        name=str(name),
        type=str(col_type),
        nullable=data.get("nullable", True),
        is_pk=data.get("pk", False),
        is_fk=data.get("fk", False),
        is_array=is_array,
        dimensions=data.get("dimensions", 1 if is_array else 0),
        default=data.get("default"),
    )


def _parse_relation(data: dict, table_name: str) -> Relation:
    """Parse a relation definition from a dictionary."""
    _check_fields(data, VALID_RELATION_FIELDS, "relation")

    target = data.get("target")
    if not target:
        raise CatalogLoadError(
            f"Relation in table '{table_name}' missing 'target' field"
        )

    target_schema, target_table = split(str(target))

    relation_type = data.get("type") or HAS_ONE
    if relation_type not in RELATION_TYPES:
        raise CatalogLoadError(
            f"Relation in table '{table_name}' has unknown type '{relation_type}' "
            f"(expected one of: {', '.join(sorted(RELATION_TYPES))})"
        )

    return Relation(
        target_schema=target_schema,
        target_table=target_table,
        fk_fields=tuple(data.get("fields") or []),
        target_columns=tuple(data.get("target_columns") or []),
        type=relation_type,
    )
