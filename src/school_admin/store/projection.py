from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator, Mapping

from ..resources.base import Record

if TYPE_CHECKING:
    from .store import ResourceStore


def matches(record: Mapping[str, Any], query: str, fields: tuple[str, ...]) -> bool:
    """Case-insensitive containment of ``query`` in any searchable field."""
    needle = query.strip().lower()
    if not needle:
        return True
    for name in fields:
        value = record.get(name)
        if value is None:
            continue
        if needle in str(value).lower():
            return True
    return False


class Projection:
    """Filtered, lazy view over a store.

    Iterating walks the store as it is at that moment, so a projection kept
    across mutations always reflects the current records.
    """

    def __init__(self, store: "ResourceStore", query: str = ""):
        self._store = store
        self._query = query or ""

    @property
    def query(self) -> str:
        return self._query

    def __iter__(self) -> Iterator[Record]:
        fields = self._store.definition.search_fields
        for record in self._store:
            if matches(record, self._query, fields):
                yield record

    def refine(self, query: str) -> list[Record]:
        """Apply a second query to the records of this projection."""
        fields = self._store.definition.search_fields
        return [r for r in self if matches(r, query, fields)]

    def to_list(self) -> list[Record]:
        return list(self)

    def count(self) -> int:
        return sum(1 for _ in self)
