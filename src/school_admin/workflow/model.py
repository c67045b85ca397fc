from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.enums import MutationKind, WorkflowState
from ..resources.base import Record


@dataclass
class PendingEdit:
    """Unsaved copy of a record's fields, owned by the open form.

    ``key`` is None while creating a new record.
    """

    key: Any
    fields: Record = field(default_factory=dict)

    @property
    def is_new(self) -> bool:
        return self.key is None

    def set(self, name: str, value: Any) -> None:
        self.fields[name] = value

    def update(self, values: dict) -> None:
        self.fields.update(values)

    def to_dict(self) -> dict:
        return {"key": self.key, "fields": dict(self.fields), "is_new": self.is_new}


@dataclass(frozen=True)
class MutationOutcome:
    kind: MutationKind
    state: WorkflowState
    key: Any = None
    record: Optional[Record] = None
    message: str = ""
    error: Optional[Exception] = None
    discarded: bool = False

    @property
    def succeeded(self) -> bool:
        return self.state == WorkflowState.SUCCESS

    @property
    def failed(self) -> bool:
        return self.state == WorkflowState.FAILED

    @property
    def skipped(self) -> bool:
        """Nothing was sent: the key was not in the store."""
        return self.state == WorkflowState.IDLE
