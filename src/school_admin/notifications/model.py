from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Severity


@dataclass(frozen=True)
class Notification:
    """Short-lived message shown to the user (toast)."""

    notification_id: str
    message: str
    severity: Severity
    created_at: float

    def expires_at(self, timeout: float) -> float:
        return self.created_at + timeout

    def to_dict(self) -> dict:
        return {
            "id": self.notification_id,
            "message": self.message,
            "severity": self.severity.value,
        }
