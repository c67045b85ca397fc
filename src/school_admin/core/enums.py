from __future__ import annotations

from enum import Enum


class Severity(str, Enum):
    """Severity of a user-facing notification."""

    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


class WorkflowState(str, Enum):
    """Lifecycle of a single create/update/delete attempt."""

    IDLE = "IDLE"
    SUBMITTING = "SUBMITTING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


class MutationKind(str, Enum):
    CREATE = "CREATE"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
