"""Tests for catalog loader."""

from pathlib import Path

import pytest

from modelgen.exceptions import CatalogLoadError
from modelgen.schema.loader import load_catalog
from tests.helpers import names


FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "catalog"


def _by_name(tables):
    return {t.qualified_name: t for t in tables}


def test_loader_directory_sorted_by_file():
    """Directory tables come back in file name order."""
    tables = load_catalog(FIXTURES_PATH)

    assert names(tables) == [
        "crm.accounts",
        "crm.leads",
        "public.orders",
        "public.users",
    ]


def test_loader_orders_yaml_golden():
    """orders.yaml loads columns, flags and relations."""
    orders = _by_name(load_catalog(FIXTURES_PATH))["public.orders"]

    assert len(orders.columns) == 4
    id_col = orders.get_column("id")
    assert id_col.is_pk is True
    assert id_col.nullable is False
    assert orders.get_column("user_id").is_fk is True

    tags = orders.get_column("tags")
    assert tags.is_array is True
    assert tags.dimensions == 1

    assert [r.target for r in orders.relations] == ["public.users", "crm.accounts"]
    assert orders.relations[0].fk_fields == ("user_id",)
    assert orders.relations[0].target_columns == ("id",)


def test_loader_schema_defaults_to_public():
    users = _by_name(load_catalog(FIXTURES_PATH))["public.users"]

    assert users.schema == "public"
    assert users.relations == []
    assert users.get_column("status").default == "'active'"


def test_loader_single_file_with_tables_list(tmp_path):
    catalog_file = tmp_path / "catalog.yaml"
    catalog_file.write_text("""
package: model
tables:
  - table: users
    columns:
      - name: id
        type: int8
  - schema: crm
    table: users
    columns:
      - name: id
        type: int8
""")
    tables = load_catalog(catalog_file)

    assert names(tables) == ["public.users", "crm.users"]


def test_loader_single_table_file(tmp_path):
    yaml_file = tmp_path / "users.yaml"
    yaml_file.write_text("""
table: users
columns:
  - name: id
    type: int8
""")
    assert names(load_catalog(yaml_file)) == ["public.users"]


def test_loader_relation_bare_target_defaults_to_public(tmp_path):
    yaml_file = tmp_path / "orders.yaml"
    yaml_file.write_text("""
table: orders
columns:
  - name: user_id
    type: int8
    fk: true
relations:
  - fields: [user_id]
    target: users
""")
    orders = load_catalog(yaml_file)[0]

    assert orders.relations[0].target == "public.users"


def test_loader_missing_path_raises_CatalogLoadError(tmp_path):
    with pytest.raises(CatalogLoadError, match="does not exist"):
        load_catalog(tmp_path / "nope.yaml")


def test_loader_empty_file_raises_CatalogLoadError(tmp_path):
    yaml_file = tmp_path / "empty.yaml"
    yaml_file.write_text("")

    with pytest.raises(CatalogLoadError, match="Empty YAML file"):
        load_catalog(yaml_file)


def test_loader_invalid_yaml_raises_CatalogLoadError(tmp_path):
    yaml_file = tmp_path / "bad.yaml"
    yaml_file.write_text("table: [unclosed\n")

    with pytest.raises(CatalogLoadError, match="Invalid YAML"):
        load_catalog(yaml_file)


def test_loader_missing_table_field_raises_CatalogLoadError(tmp_path):
    yaml_file = tmp_path / "bad.yaml"
    yaml_file.write_text("""
columns:
  - name: id
    type: int8
""")
    with pytest.raises(CatalogLoadError, match="missing 'table' field"):
        load_catalog(yaml_file)


def test_loader_missing_column_type_raises_CatalogLoadError(tmp_path):
    yaml_file = tmp_path / "bad.yaml"
    yaml_file.write_text("""
table: users
columns:
  - name: id
""")
    with pytest.raises(CatalogLoadError, match="missing 'type'"):
        load_catalog(yaml_file)


def test_loader_missing_relation_target_raises_CatalogLoadError(tmp_path):
    yaml_file = tmp_path / "bad.yaml"
    yaml_file.write_text("""
table: orders
columns:
  - name: id
    type: int8
relations:
  - fields: [user_id]
""")
    with pytest.raises(CatalogLoadError, match="missing 'target' field"):
        load_catalog(yaml_file)


def test_loader_unknown_field_raises_CatalogLoadError(tmp_path):
    yaml_file = tmp_path / "bad.yaml"
    yaml_file.write_text("""
table: users
owner: someone
columns:
  - name: id
    type: int8
""")
    with pytest.raises(CatalogLoadError, match="Unknown field\\(s\\) in table definition: owner"):
        load_catalog(yaml_file)


def test_loader_duplicate_column_raises_CatalogLoadError(tmp_path):
    yaml_file = tmp_path / "bad.yaml"
    yaml_file.write_text("""
table: users
columns:
  - name: id
    type: int8
  - name: id
    type: text
""")
    with pytest.raises(CatalogLoadError, match="Duplicate column name 'id'"):
        load_catalog(yaml_file)


def test_loader_duplicate_table_in_directory_raises_CatalogLoadError(tmp_path):
    for filename in ("a.yaml", "b.yaml"):
        (tmp_path / filename).write_text("""
table: users
columns:
  - name: id
    type: int8
""")
    with pytest.raises(CatalogLoadError, match="Duplicate table 'public.users'"):
        load_catalog(tmp_path)


def test_loader_same_name_in_different_schemas_is_allowed(tmp_path):
    (tmp_path / "a.yaml").write_text("table: users\ncolumns: [{name: id, type: int8}]\n")
    (tmp_path / "b.yaml").write_text(
        "schema: crm\ntable: users\ncolumns: [{name: id, type: int8}]\n"
    )

    assert names(load_catalog(tmp_path)) == ["public.users", "crm.users"]


def test_loader_null_schema_defaults_to_public(tmp_path):
    """A schema key without a value places the table in public."""
    yaml_file = tmp_path / "users.yaml"
    yaml_file.write_text("""
schema:
table: users
columns:
  - name: id
    type: int8
""")
    users = load_catalog(yaml_file)[0]

    assert users.schema == "public"
    assert users.qualified_name == "public.users"


def test_loader_non_string_schema_raises_CatalogLoadError(tmp_path):
    yaml_file = tmp_path / "bad.yaml"
    yaml_file.write_text("""
schema: [crm]
table: users
columns:
  - name: id
    type: int8
""")
    with pytest.raises(CatalogLoadError, match="invalid 'schema' field"):
        load_catalog(yaml_file)


def test_loader_has_many_relation_type(tmp_path):
    yaml_file = tmp_path / "users.yaml"
    yaml_file.write_text("""
table: users
columns:
  - name: id
    type: int8
relations:
  - type: has_many
    target: orders
""")
    users = load_catalog(yaml_file)[0]

    assert users.relations[0].type == "has_many"


def test_loader_unknown_relation_type_raises_CatalogLoadError(tmp_path):
    yaml_file = tmp_path / "bad.yaml"
    yaml_file.write_text("""
table: orders
columns:
  - name: id
    type: int8
relations:
  - type: belongs_to
    target: users
""")
    with pytest.raises(CatalogLoadError, match="unknown type 'belongs_to'"):
        load_catalog(yaml_file)
