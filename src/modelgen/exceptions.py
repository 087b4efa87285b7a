"""Exception classes for modelgen."""

from typing import Optional

from modelgen.types import ColumnName, QualifiedName, ValidationKind

__all__ = [
    "ModelgenError",
    "CatalogLoadError",
    "ValidationError",
    "TableValidationError",
    "ColumnValidationError",
    "ConfigError",
]


class ModelgenError(Exception):
    """Base exception for modelgen."""


class CatalogLoadError(ModelgenError):
    """Error loading table catalog files."""


class ValidationError(ModelgenError):
    """A table or column violates a structural invariant.

    Args:
        kind: Category of the violation
        message: Human readable description
        context: Label of the element the error was raised for, if wrapped
        cause: The underlying error when this one wraps another
    """

    def __init__(
        self,
        kind: ValidationKind,
        message: str,
        context: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        self.kind = kind
        self.message = message
        self.context = context
        self.cause = cause
        super().__init__(f"{context}: {message}" if context else message)


class TableValidationError(ValidationError):
    """Table failed validation."""

    def __init__(
        self,
        table: QualifiedName,
        kind: ValidationKind,
        message: str,
        context: Optional[str] = None,
        cause: Optional[Exception] = None,
    ):
        self.table = table
        super().__init__(kind, message, context=context, cause=cause)


class ColumnValidationError(ValidationError):
    """Column failed validation."""

    def __init__(self, column: ColumnName, message: str):
        self.column = column
        super().__init__(ValidationKind.COLUMN, message)


class ConfigError(ModelgenError):
    """Error in configuration."""
