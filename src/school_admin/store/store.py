from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping, Optional

from ..core.exceptions import NotFoundError
from ..resources.base import Record, ResourceDefinition
from .projection import Projection

logger = logging.getLogger(__name__)


class ResourceStore:
    """Ordered, key-unique records of one resource for a page activation.

    The store is mutated only with confirmed gateway results. Keys absent
    from the store make updates and deletes a no-op.
    """

    def __init__(self, definition: ResourceDefinition, records: Iterable[Mapping[str, Any]] = ()):
        self._definition = definition
        self._records: list[Record] = []
        self.replace_all(records)

    @property
    def definition(self) -> ResourceDefinition:
        return self._definition

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(list(self._records))

    def __contains__(self, key: Any) -> bool:
        return self._index_of(key) is not None

    def records(self) -> list[Record]:
        return list(self._records)

    def keys(self) -> list[Any]:
        return [self._definition.key_of(r) for r in self._records]

    def get(self, key: Any) -> Record:
        idx = self._index_of(key)
        if idx is None:
            raise NotFoundError(f"{self._definition.label} {key} not found")
        return dict(self._records[idx])

    def replace_all(self, records: Iterable[Mapping[str, Any]]) -> None:
        """Load a fresh list; keyless records and later duplicates of a key are dropped."""
        self._records = []
        for record in records:
            self.apply_created(record)

    def clear(self) -> None:
        self._records = []

    def apply_created(self, record: Mapping[str, Any]) -> bool:
        key = self._definition.key_of(record)
        if key is None:
            logger.warning("%s without %s, ignoring", self._definition.label, self._definition.key_field)
            return False
        if self._index_of(key) is not None:
            logger.debug("%s %s already in store, ignoring", self._definition.label, key)
            return False
        self._records.append(dict(record))
        return True

    def apply_updated(self, key: Any, record: Mapping[str, Any]) -> bool:
        try:
            idx = self._require_index(key)
        except NotFoundError:
            return False

        updated = dict(record)
        new_key = self._definition.key_of(updated)
        if new_key is None:
            updated[self._definition.key_field] = key
        elif new_key != key and self._index_of(new_key) is not None:
            logger.warning("%s update %s -> %s would duplicate a key", self._definition.label, key, new_key)
            return False
        self._records[idx] = updated
        return True

    def apply_deleted(self, key: Any) -> bool:
        try:
            idx = self._require_index(key)
        except NotFoundError:
            return False
        del self._records[idx]
        return True

    def project(self, query: str = "") -> Projection:
        return Projection(self, query)

    def _index_of(self, key: Any) -> Optional[int]:
        if key is None:
            return None
        for idx, record in enumerate(self._records):
            if self._definition.key_of(record) == key:
                return idx
        return None

    def _require_index(self, key: Any) -> int:
        idx = self._index_of(key)
        if idx is None:
            raise NotFoundError(f"{self._definition.label} {key} not found")
        return idx
