"""Table validation: structural invariants checked before rendering."""

from dataclasses import dataclass
from typing import Iterable, Optional

from modelgen.exceptions import ColumnValidationError, TableValidationError
from modelgen.schema.identifiers import is_identifier
from modelgen.schema.models import Table
from modelgen.types import ValidationKind


def validate_table(table: Table) -> None:
    """Validate a single table, stopping at the first violation.

    Raises:
        TableValidationError: Describing the violation. Column errors are
            wrapped with the column name as context and kept as the cause.
    """
    qualified = table.qualified_name

    def fail(kind: ValidationKind, message: str) -> TableValidationError:
        return TableValidationError(qualified, kind, message)

    if not table.schema.strip():
        raise fail(ValidationKind.STRUCTURAL, "schema name is empty")

    if not table.name.strip():
        raise fail(ValidationKind.STRUCTURAL, "table name is empty")

    if not is_identifier(table.schema):
        raise fail(
            ValidationKind.STRUCTURAL, "schema name contains illegal character(s)"
        )

    if not is_identifier(table.name):
        raise fail(
            ValidationKind.STRUCTURAL, "table name contains illegal character(s)"
        )

    if not table.columns:
        raise fail(ValidationKind.COMPLETENESS, "table has no columns")

    for column in table.columns:
        try:
            column.validate()
        except ColumnValidationError as e:
            raise TableValidationError(
                qualified,
                ValidationKind.COLUMN,
                e.message,
                context=f"column '{column.name}' is not valid",
                cause=e,
            ) from e

        if column.is_fk and not table.relations:
            raise fail(
                ValidationKind.CONSISTENCY, "table has fkey(s) but no relations"
            )


@dataclass
class ValidationIssue:
    """A single validation issue found for a table."""

    table: str
    column: Optional[str]
    kind: ValidationKind
    message: str


@dataclass
class ValidationResult:
    """Result of validating a set of tables.

    ok is True iff issues is empty. CLI uses this flag for exit code (0 if ok, 1 otherwise).
    """

    ok: bool
    issues: list[ValidationIssue]


class TableValidator:
    """Validate every table of a selection, one issue per failing table."""

    def validate(self, tables: Iterable[Table]) -> ValidationResult:
        issues: list[ValidationIssue] = []

        for table in tables:
            try:
                validate_table(table)
            except TableValidationError as e:
                column = None
                if isinstance(e.cause, ColumnValidationError):
                    column = e.cause.column
                issues.append(
                    ValidationIssue(
                        table=e.table,
                        column=column,
                        kind=e.kind,
                        message=str(e),
                    )
                )

        return ValidationResult(ok=len(issues) == 0, issues=issues)
