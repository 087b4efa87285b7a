"""Export selected tables to YAML for rendering."""

from pathlib import Path
from typing import Any, Optional

import yaml

from modelgen.schema.models import HAS_ONE, Column, Relation, Table
from modelgen.types import PUBLIC_SCHEMA


def table_to_dict(table: Table) -> dict[str, Any]:
    """Convert a Table model to a dictionary suitable for YAML export."""
    data: dict[str, Any] = {}

    if table.schema != PUBLIC_SCHEMA:
        data["schema"] = table.schema
    data["table"] = table.name
    data["columns"] = [_column_to_dict(col) for col in table.columns]

    if table.relations:
        data["relations"] = [_relation_to_dict(rel) for rel in table.relations]

    return data


def _column_to_dict(col: Column) -> dict[str, Any]:
    """Convert a Column model to a dictionary."""
    data: dict[str, Any] = {"name": col.name, "type": col.type}

    if not col.nullable:
        data["nullable"] = False

    if col.is_pk:
        data["pk"] = True

    if col.is_fk:
        data["fk"] = True

    if col.is_array:
        data["array"] = True
        data["dimensions"] = col.dimensions

    if col.default is not None:
        data["default"] = col.default

    return data


def _relation_to_dict(rel: Relation) -> dict[str, Any]:
    data: dict[str, Any] = {}
    if rel.type != HAS_ONE:
        data["type"] = rel.type
    if rel.fk_fields:
        data["fields"] = list(rel.fk_fields)
    data["target"] = rel.target
    if rel.target_columns:
        data["target_columns"] = list(rel.target_columns)
    return data


def export_tables_yaml(tables: list[Table], package: Optional[str] = None) -> str:
    """Export tables to a single YAML document with a ``tables`` list.

    The target package name, when given, is recorded for the renderer.
    """
    data: dict[str, Any] = {}
    if package:
        data["package"] = package
    data["tables"] = [table_to_dict(t) for t in tables]
    return yaml.dump(
        data, default_flow_style=False, sort_keys=False, allow_unicode=True
    )


def export_tables_to_file(
    tables: list[Table], output: Path, package: Optional[str] = None
) -> Path:
    """Write tables to a YAML file, creating parent directories.

    Returns the written path.
    """
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(export_tables_yaml(tables, package=package))
    return output
