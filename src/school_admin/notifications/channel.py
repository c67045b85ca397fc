from __future__ import annotations

import asyncio
import itertools
import logging
import time
from typing import Callable, Optional

from ..core.constants import NOTIFICATION_TIMEOUT_SECONDS
from ..core.enums import Severity
from .model import Notification

logger = logging.getLogger(__name__)


class NotificationChannel:
    """Auto-expiring notifications, in insertion order.

    When an event loop is running, each notification schedules its own
    removal with ``call_later``. Reads also drop anything older than the
    timeout, so expiry holds for callers without a loop (and for an injected
    clock in tests).
    """

    def __init__(
        self,
        *,
        timeout: float = NOTIFICATION_TIMEOUT_SECONDS,
        clock: Optional[Callable[[], float]] = None,
    ):
        self._timeout = float(timeout)
        self._clock = clock or time.monotonic
        self._items: dict[str, Notification] = {}
        self._handles: dict[str, asyncio.TimerHandle] = {}
        self._ids = itertools.count(1)

    @property
    def timeout(self) -> float:
        return self._timeout

    def emit(self, message: str, severity: Severity = Severity.INFO) -> Notification:
        notification = Notification(
            notification_id=str(next(self._ids)),
            message=message,
            severity=Severity(severity),
            created_at=self._clock(),
        )
        self._items[notification.notification_id] = notification
        self._schedule_expiry(notification.notification_id)
        logger.debug("notification %s [%s] %s", notification.notification_id, notification.severity.value, message)
        return notification

    def success(self, message: str) -> Notification:
        return self.emit(message, Severity.SUCCESS)

    def error(self, message: str) -> Notification:
        return self.emit(message, Severity.ERROR)

    def info(self, message: str) -> Notification:
        return self.emit(message, Severity.INFO)

    def dismiss(self, notification_id: str) -> bool:
        handle = self._handles.pop(notification_id, None)
        if handle is not None:
            handle.cancel()
        return self._items.pop(notification_id, None) is not None

    def active(self) -> list[Notification]:
        self._purge_expired()
        return list(self._items.values())

    def clear(self) -> None:
        for handle in self._handles.values():
            handle.cancel()
        self._handles.clear()
        self._items.clear()

    def __len__(self) -> int:
        return len(self.active())

    def _schedule_expiry(self, notification_id: str) -> None:
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            return
        self._handles[notification_id] = loop.call_later(self._timeout, self._expire, notification_id)

    def _expire(self, notification_id: str) -> None:
        self._handles.pop(notification_id, None)
        self._items.pop(notification_id, None)

    def _purge_expired(self) -> None:
        now = self._clock()
        expired = [nid for nid, n in self._items.items() if now >= n.expires_at(self._timeout)]
        for nid in expired:
            self.dismiss(nid)
