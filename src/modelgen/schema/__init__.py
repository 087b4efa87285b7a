"""Catalog models, table selection and validation modules."""

from modelgen.schema.identifiers import join, schemas, split
from modelgen.schema.models import Column, Relation, Table
from modelgen.schema.nameset import QualifiedNameSet, uniq
from modelgen.schema.selection import (
    disclose_schemas,
    filter_fks,
    follow_fks,
    select_tables,
)
from modelgen.schema.validator import (
    TableValidator,
    ValidationIssue,
    ValidationResult,
    validate_table,
)

__all__ = [
    "Column",
    "QualifiedNameSet",
    "Relation",
    "Table",
    "TableValidator",
    "ValidationIssue",
    "ValidationResult",
    "disclose_schemas",
    "filter_fks",
    "follow_fks",
    "join",
    "schemas",
    "select_tables",
    "split",
    "uniq",
    "validate_table",
]
