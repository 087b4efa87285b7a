"""Command-line interface for modelgen."""

import argparse
import logging
import sys
from pathlib import Path

from modelgen.config import Config
from modelgen.exceptions import ConfigError, ModelgenError
from modelgen.schema.exporter import export_tables_to_file, export_tables_yaml
from modelgen.schema.identifiers import schemas
from modelgen.schema.loader import load_catalog
from modelgen.schema.selection import select_tables
from modelgen.schema.validator import TableValidator, ValidationResult

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="modelgen",
        description="Select and validate tables for model generation",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    select_parser = subparsers.add_parser(
        "select", help="Resolve table patterns and export the selection"
    )
    select_parser.add_argument("--catalog", help="Catalog YAML file or directory")
    select_parser.add_argument(
        "-t",
        "--tables",
        nargs="+",
        help="Table patterns: schema.table or schema.* (default: public.*)",
    )
    select_parser.add_argument(
        "--no-follow-fk",
        dest="follow_fk",
        action="store_false",
        default=None,
        help="Do not add tables referenced by foreign keys",
    )
    select_parser.add_argument("--package", help="Target package name")
    select_parser.add_argument(
        "--output",
        help="Output file path (default: stdout)",
    )

    validate_parser = subparsers.add_parser("validate", help="Validate catalog tables")
    validate_parser.add_argument("--catalog", help="Catalog YAML file or directory")

    schemas_parser = subparsers.add_parser("schemas", help="List catalog schemas")
    schemas_parser.add_argument("--catalog", help="Catalog YAML file or directory")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s"
    )

    if args.command == "select":
        return cmd_select(args)
    elif args.command == "validate":
        return cmd_validate(args)
    elif args.command == "schemas":
        return cmd_schemas(args)
    else:
        print(f"Command '{args.command}' not yet implemented", file=sys.stderr)
        return 1


def _print_issues(result: ValidationResult) -> None:
    print(f"Found {len(result.issues)} invalid table(s):", file=sys.stderr)
    for issue in result.issues:
        print(f"  - {issue.table}: {issue.message}", file=sys.stderr)


def cmd_select(args: argparse.Namespace) -> int:
    """Resolve patterns, follow foreign keys, validate and export the selection."""
    try:
        config = Config.from_env(
            catalog_path=getattr(args, "catalog", None),
            tables=getattr(args, "tables", None),
            follow_fk=getattr(args, "follow_fk", None),
            package=getattr(args, "package", None),
            output=getattr(args, "output", None),
        )
        config.validate()

        catalog = load_catalog(Path(config.catalog_path))
        selected = select_tables(catalog, config.tables, follow_fk=config.follow_fk)
        logger.info(f"Selected {len(selected)} of {len(catalog)} table(s)")

        result = TableValidator().validate(selected)
        if not result.ok:
            _print_issues(result)
            return 1

        if config.output:
            path = export_tables_to_file(
                selected, Path(config.output), package=config.package
            )
            print(f"Wrote {len(selected)} table(s) to {path}")
        else:
            print(export_tables_yaml(selected, package=config.package))
        return 0
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except ModelgenError as e:
        print(f"Selection error: {e}", file=sys.stderr)
        return 1


def cmd_validate(args: argparse.Namespace) -> int:
    """Validate every table of the catalog."""
    try:
        config = Config.from_env(catalog_path=getattr(args, "catalog", None))
        catalog = load_catalog(Path(config.catalog_path))

        result = TableValidator().validate(catalog)
        if not result.ok:
            _print_issues(result)
            return 1

        print(f"Validated {len(catalog)} tables:")
        for table in sorted(catalog, key=lambda t: t.qualified_name):
            print(f"  - {table.qualified_name} ({len(table.columns)} columns)")
        return 0
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2
    except ModelgenError as e:
        print(f"Validation error: {e}", file=sys.stderr)
        return 1


def cmd_schemas(args: argparse.Namespace) -> int:
    """List the schemas present in the catalog."""
    try:
        config = Config.from_env(catalog_path=getattr(args, "catalog", None))
        catalog = load_catalog(Path(config.catalog_path))
    except ModelgenError as e:
        print(f"Catalog error: {e}", file=sys.stderr)
        return 1

    for schema in schemas(t.qualified_name for t in catalog):
        print(schema)
    return 0


if __name__ == "__main__":
    sys.exit(main())
