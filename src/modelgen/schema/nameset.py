"""Order-preserving de-duplication of qualified names."""

from typing import Iterable, Iterator, Optional

from modelgen.types import QualifiedName


def uniq(items: Iterable[str]) -> list[str]:
    """Return items in first-occurrence order with later duplicates removed."""
    return QualifiedNameSet(items).to_list()


class QualifiedNameSet:
    """Insertion-ordered set of qualified names."""

    def __init__(self, names: Optional[Iterable[QualifiedName]] = None) -> None:
        self._index: dict[QualifiedName, None] = {}
        for name in names or []:
            self.add(name)

    def add(self, name: QualifiedName) -> bool:
        """Add a name. Returns True if it was not already present."""
        if name in self._index:
            return False
        self._index[name] = None
        return True

    def __contains__(self, name: object) -> bool:
        return name in self._index

    def __len__(self) -> int:
        return len(self._index)

    def __iter__(self) -> Iterator[QualifiedName]:
        return iter(self._index)

    def __repr__(self) -> str:
        return f"QualifiedNameSet({list(self._index)!r})"

    def to_list(self) -> list[QualifiedName]:
        return list(self._index)
