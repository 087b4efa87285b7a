"""Table selection: pattern disclosure, foreign key closure, relation pruning."""

import logging
from collections import deque
from typing import Iterable

from modelgen.schema.identifiers import WILDCARD, split
from modelgen.schema.models import Table
from modelgen.schema.nameset import QualifiedNameSet
from modelgen.types import QualifiedName

logger = logging.getLogger(__name__)


def disclose_schemas(
    tables: list[Table], patterns: Iterable[str]
) -> list[QualifiedName]:
    """Expand ``schema.table`` and ``schema.*`` patterns to catalog table names.

    Patterns matching nothing are ignored. The result follows pattern order,
    then catalog order within a pattern, and holds no duplicates.
    """
    disclosed = QualifiedNameSet()

    for pattern in patterns:
        schema, table = split(pattern)
        for candidate in tables:
            if candidate.schema != schema:
                continue
            if table == WILDCARD or candidate.name == table:
                disclosed.add(candidate.qualified_name)

    return disclosed.to_list()


def follow_fks(
    tables: list[Table], disclosed: Iterable[QualifiedName]
) -> list[QualifiedName]:
    """Add every catalog table reachable through relations from the disclosed set.

    Relation targets missing from the catalog are never admitted. Each
    admitted table has its relations visited exactly once, so cycles
    terminate.
    """
    catalog = {t.qualified_name: t for t in tables}
    included = QualifiedNameSet(disclosed)
    worklist = deque(included)

    while worklist:
        table = catalog.get(worklist.popleft())
        if table is None:
            continue

        for relation in table.relations:
            target = relation.target
            if target not in catalog:
                logger.debug(
                    f"Dropping dangling relation {table.qualified_name} -> {target}"
                )
                continue
            if included.add(target):
                worklist.append(target)

    return included.to_list()


def filter_fks(tables: list[Table], included: Iterable[QualifiedName]) -> list[Table]:
    """Keep only relations whose target is in the included set.

    Tables are updated in place and returned.
    """
    names = QualifiedNameSet(included)

    for table in tables:
        table.relations = [r for r in table.relations if r.target in names]

    return tables


def select_tables(
    tables: list[Table], patterns: Iterable[str], follow_fk: bool = True
) -> list[Table]:
    """Resolve patterns against the catalog and return the tables to generate.

    Returned tables appear in inclusion order with relations pruned to the
    selection.
    """
    disclosed = disclose_schemas(tables, patterns)
    logger.info(f"Disclosed {len(disclosed)} table(s) from patterns")

    included = disclosed
    if follow_fk:
        included = follow_fks(tables, disclosed)
        added = len(included) - len(disclosed)
        if added:
            logger.info(f"Following foreign keys added {added} table(s)")

    catalog = {t.qualified_name: t for t in tables}
    selected = [catalog[name] for name in included if name in catalog]
    return filter_fks(selected, included)
