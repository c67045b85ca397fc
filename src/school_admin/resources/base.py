from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

Record = dict[str, Any]


def _no_defaults() -> Record:
    return {}


def _no_validation(fields: Mapping[str, Any]) -> None:
    return None


@dataclass(frozen=True)
class ResourceDefinition:
    """Static description of one resource family (fees, absences, ...).

    ``key_field`` names the identifier used in URLs. When one field is not
    unique across list entries, ``key_func`` derives the store key instead.
    ``list_suffix`` is appended to the path for the list call; empty means
    the collection URL itself.
    """

    name: str
    path: str
    key_field: str
    label: str
    search_fields: tuple[str, ...]
    validate: Callable[[Mapping[str, Any]], None] = _no_validation
    defaults: Callable[[], Record] = _no_defaults
    export_columns: Mapping[str, str] = field(default_factory=dict)
    key_func: Optional[Callable[[Mapping[str, Any]], Any]] = None
    list_suffix: str = "all"

    def key_of(self, record: Mapping[str, Any]) -> Any:
        if self.key_func is not None:
            return self.key_func(record)
        return record.get(self.key_field)

    def new_fields(self) -> Record:
        return dict(self.defaults())

    def editable_fields(self, record: Mapping[str, Any]) -> Record:
        """Copy of a record without its key, as sent in a PUT body."""
        return {k: v for k, v in record.items() if k != self.key_field}
