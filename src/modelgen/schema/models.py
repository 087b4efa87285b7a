"""Catalog representation classes."""

from dataclasses import dataclass, field
from typing import Optional

import inflect

from modelgen.exceptions import ColumnValidationError
from modelgen.schema.identifiers import join
from modelgen.types import PUBLIC_SCHEMA, ColumnName, QualifiedName

_inflect = inflect.engine()

HAS_ONE = "has_one"
HAS_MANY = "has_many"
RELATION_TYPES = frozenset({HAS_ONE, HAS_MANY})

SINGULAR_ENDINGS = ("ss", "us", "is")


def camel_cased(name: str) -> str:
    """Convert snake_case to CamelCase: ``user_roles`` -> ``UserRoles``."""
    return "".join(part[:1].upper() + part[1:] for part in name.split("_") if part)


def singular(word: str) -> str:
    """Return the singular form of an English word, or the word itself.

    Words with a singular ending (``status``, ``analysis``, ``class``) are
    kept, and a singular is only accepted if it pluralizes back to ``word``.
    """
    if word.lower().endswith(SINGULAR_ENDINGS):
        return word
    result = _inflect.singular_noun(word)
    if not result or _inflect.plural_noun(result) != word:
        return word
    return result


def model_name(table_name: str) -> str:
    """Camel-cased, singular model name for a table name."""
    parts = [part for part in table_name.split("_") if part]
    if not parts:
        return ""
    parts[-1] = singular(parts[-1])
    return camel_cased("_".join(parts))


def _quoted_if_upper(value: str) -> str:
    if any(c.isupper() for c in value):
        return f'"{value}"'
    return value


@dataclass(frozen=True)
class Column:
    """Column definition."""

    name: ColumnName
    type: str
    nullable: bool = True
    is_pk: bool = False
    is_fk: bool = False
    is_array: bool = False
    dimensions: int = 0
    default: Optional[str] = None

    def validate(self) -> None:
        """Check column-local invariants.

        Raises:
            ColumnValidationError: On the first violated invariant
        """
        if not self.name.strip():
            raise ColumnValidationError(self.name, "column name is empty")
        if not self.type.strip():
            raise ColumnValidationError(self.name, "column type is empty")
        if self.is_array and self.dimensions < 1:
            raise ColumnValidationError(self.name, "array column has no dimensions")
        if not self.is_array and self.dimensions > 0:
            raise ColumnValidationError(self.name, "non-array column has dimensions")


@dataclass(frozen=True)
class Relation:
    """Foreign key reference from the owning table to a target table."""

    target_schema: str
    target_table: str
    fk_fields: tuple[ColumnName, ...] = ()
    target_columns: tuple[ColumnName, ...] = ()
    type: str = HAS_ONE

    @property
    def target(self) -> QualifiedName:
        """Qualified name of the referenced table."""
        return join(self.target_schema, self.target_table)


@dataclass
class Table:
    """Table definition with its columns and outgoing relations."""

    schema: str
    name: str
    columns: list[Column] = field(default_factory=list)
    relations: list[Relation] = field(default_factory=list)

    @property
    def qualified_name(self) -> QualifiedName:
        return join(self.schema, self.name)

    @property
    def model_name(self) -> str:
        """Model class name: camel case, singular."""
        return model_name(self.name)

    @property
    def sql_name(self) -> str:
        """Table name as used in SQL, schema-prefixed outside public."""
        table = _quoted_if_upper(self.name)
        if self.schema == PUBLIC_SCHEMA:
            return table
        return f"{_quoted_if_upper(self.schema)}.{table}"

    @property
    def view_name(self) -> str:
        """Name of the ``get<Table>`` view for this table."""
        view = f'"get{camel_cased(self.name)}"'
        if self.schema == PUBLIC_SCHEMA:
            return view
        return f"{_quoted_if_upper(self.schema)}.{view}"

    def get_column(self, name: str) -> Optional[Column]:
        """Get a column by name."""
        for col in self.columns:
            if col.name == name:
                return col
        return None

    def has_fk_columns(self) -> bool:
        return any(col.is_fk for col in self.columns)
