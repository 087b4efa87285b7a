"""Core type definitions for modelgen."""

from enum import Enum
from typing import TypeAlias

SchemaName: TypeAlias = str
TableName: TypeAlias = str
ColumnName: TypeAlias = str
QualifiedName: TypeAlias = str

PUBLIC_SCHEMA: SchemaName = "public"
DEFAULT_PACKAGE = "model"

__all__ = [
    "SchemaName",
    "TableName",
    "ColumnName",
    "QualifiedName",
    "PUBLIC_SCHEMA",
    "DEFAULT_PACKAGE",
    "ValidationKind",
]


class ValidationKind(Enum):
    """Categories of structural problems a table can have."""

    STRUCTURAL = "structural"
    COMPLETENESS = "completeness"
    CONSISTENCY = "consistency"
    COLUMN = "column"
