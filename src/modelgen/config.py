"""Configuration management for modelgen."""

import os
from dataclasses import dataclass, field
from typing import Optional

from modelgen.exceptions import ConfigError
from modelgen.schema.identifiers import SEPARATOR, WILDCARD, is_identifier
from modelgen.types import DEFAULT_PACKAGE

DEFAULT_CATALOG_PATH = "schema/catalog.yaml"
DEFAULT_TABLES = ["public.*"]

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(value: str, name: str) -> bool:
    """Parse a boolean environment value.

    Raises:
        ConfigError: If the value is not a recognised boolean
    """
    normalized = value.strip().lower()
    if normalized in TRUE_VALUES:
        return True
    if normalized in FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for {name}: '{value}'")


def parse_tables(value: str) -> list[str]:
    """Parse a comma separated list of table patterns."""
    return [t.strip() for t in value.split(",") if t.strip()]


def is_valid_pattern(pattern: str) -> bool:
    """Check a pattern is ``schema.table``, ``schema.*`` or a bare table name."""
    parts = pattern.split(SEPARATOR)
    if len(parts) == 1:
        return is_identifier(parts[0])
    if len(parts) != 2:
        return False
    schema, table = parts
    return is_identifier(schema) and (table == WILDCARD or is_identifier(table))


@dataclass
class Config:
    """Configuration for modelgen."""

    catalog_path: str = DEFAULT_CATALOG_PATH
    tables: list[str] = field(default_factory=lambda: list(DEFAULT_TABLES))
    follow_fk: bool = True
    package: str = DEFAULT_PACKAGE
    output: Optional[str] = None

    @classmethod
    def from_env(
        cls,
        *,
        catalog_path: Optional[str] = None,
        tables: Optional[list[str]] = None,
        follow_fk: Optional[bool] = None,
        package: Optional[str] = None,
        output: Optional[str] = None,
    ) -> "Config":
        """Load configuration from env vars, with CLI overrides.

        Priority (highest to lowest):
        1. Explicit parameters (CLI args)
        2. Environment variables
        3. Defaults
        """

        def resolve(explicit, env_key, default):
            if explicit is not None:
                return explicit
            env_val = os.environ.get(env_key)
            if env_val is not None:
                return env_val
            return default

        if tables is None and "MODELGEN_TABLES" in os.environ:
            tables = parse_tables(os.environ["MODELGEN_TABLES"])

        if follow_fk is None and "MODELGEN_FOLLOW_FK" in os.environ:
            follow_fk = parse_bool(
                os.environ["MODELGEN_FOLLOW_FK"], "MODELGEN_FOLLOW_FK"
            )

        return cls(
            catalog_path=resolve(
                catalog_path, "MODELGEN_CATALOG_PATH", DEFAULT_CATALOG_PATH
            ),
            tables=tables if tables is not None else list(DEFAULT_TABLES),
            follow_fk=follow_fk if follow_fk is not None else True,
            package=resolve(package, "MODELGEN_PACKAGE", DEFAULT_PACKAGE),
            output=resolve(output, "MODELGEN_OUTPUT", None),
        )

    def validate(self) -> None:
        """Validate that the configuration can drive a selection run.

        Raises:
            ConfigError: Listing every problem found.
        """
        problems = []
        if not self.catalog_path:
            problems.append("catalog_path (use --catalog or MODELGEN_CATALOG_PATH)")
        if not self.tables:
            problems.append("tables (use --tables or MODELGEN_TABLES)")
        for pattern in self.tables:
            if not is_valid_pattern(pattern):
                problems.append(
                    f"invalid table pattern '{pattern}' "
                    "(expected schema.table or schema.*)"
                )
        if not is_identifier(self.package):
            problems.append(f"invalid package name '{self.package}'")

        if problems:
            raise ConfigError(
                "Invalid configuration:\n  - " + "\n  - ".join(problems)
            )
