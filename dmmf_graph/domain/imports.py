"""
Ordered, deduplicating collection of import statements.

Generated files must be byte-stable between runs, so statements keep the
order in which they were first added; membership is exact string equality.
"""

from typing import Callable, Dict, Iterable, Iterator, List


class ImportSet:
    """Insertion-ordered set of import statements."""

    def __init__(self, statements: Iterable[str] = ()):
        self._statements: Dict[str, None] = {}
        self.extend(statements)

    def add(self, statement: str) -> None:
        """Add a statement unless an identical one is already present."""
        self._statements.setdefault(statement, None)

    def extend(self, statements: Iterable[str]) -> None:
        for statement in statements:
            self.add(statement)

    def exclude(self, predicate: Callable[[str], bool]) -> "ImportSet":
        """Return a new set without the statements matching ``predicate``."""
        return ImportSet(s for s in self._statements if not predicate(s))

    def as_list(self) -> List[str]:
        return list(self._statements)

    def __iter__(self) -> Iterator[str]:
        return iter(self._statements)

    def __len__(self) -> int:
        return len(self._statements)

    def __contains__(self, statement: object) -> bool:
        return statement in self._statements

    def __bool__(self) -> bool:
        return bool(self._statements)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ImportSet):
            return NotImplemented
        return self.as_list() == other.as_list()

    def __repr__(self) -> str:
        return f"ImportSet({self.as_list()!r})"
