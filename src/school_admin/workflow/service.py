from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, Mapping, Optional

from ..core.enums import MutationKind, WorkflowState
from ..core.exceptions import ConflictError, GatewayError, ValidationError
from ..gateway.repository import ResourceGateway
from ..notifications.channel import NotificationChannel
from ..resources.base import Record, ResourceDefinition
from ..store.store import ResourceStore
from .lifecycle import PageLifecycle
from .model import MutationOutcome

logger = logging.getLogger(__name__)

ALREADY_SUBMITTING = "Operation already in progress"

_SUCCESS_MESSAGES = {
    MutationKind.CREATE: "{label} created successfully",
    MutationKind.UPDATE: "{label} updated successfully",
    MutationKind.DELETE: "{label} deleted successfully",
}

_FAILURE_MESSAGES = {
    MutationKind.CREATE: "{label} creation failed: {detail}",
    MutationKind.UPDATE: "{label} update failed: {detail}",
    MutationKind.DELETE: "{label} deletion failed: {detail}",
}


class MutationWorkflow:
    """Create/update/delete coordination for one resource page.

    Each attempt goes ``IDLE -> SUBMITTING -> SUCCESS | FAILED`` and the slot
    returns to ``IDLE`` afterwards. The store is touched only after the
    gateway confirms, on the event loop, and only while the page activation
    that started the attempt is still current.
    """

    def __init__(
        self,
        definition: ResourceDefinition,
        gateway: ResourceGateway,
        store: ResourceStore,
        notifications: NotificationChannel,
        *,
        lifecycle: Optional[PageLifecycle] = None,
    ):
        self._definition = definition
        self._gateway = gateway
        self._store = store
        self._notifications = notifications
        self._lifecycle = lifecycle or PageLifecycle()
        self._in_flight: set[tuple[MutationKind, Any]] = set()

    # === state ===

    def state(self, kind: MutationKind, key: Any = None) -> WorkflowState:
        if (kind, key) in self._in_flight:
            return WorkflowState.SUBMITTING
        return WorkflowState.IDLE

    @property
    def is_submitting(self) -> bool:
        return bool(self._in_flight)

    # === operations ===

    async def create(self, fields: Mapping[str, Any]) -> MutationOutcome:
        return await self._submit(
            MutationKind.CREATE,
            None,
            fields,
            call=lambda: self._gateway.create(dict(fields)),
        )

    async def update(self, key: Any, fields: Mapping[str, Any]) -> MutationOutcome:
        if key not in self._store:
            return self._skip(MutationKind.UPDATE, key)
        return await self._submit(
            MutationKind.UPDATE,
            key,
            fields,
            call=lambda: self._gateway.update(key, dict(fields)),
        )

    async def delete(self, key: Any) -> MutationOutcome:
        if key not in self._store:
            return self._skip(MutationKind.DELETE, key)
        return await self._submit(
            MutationKind.DELETE,
            key,
            None,
            call=lambda: self._gateway.delete(key),
        )

    # === internals ===

    async def _submit(
        self,
        kind: MutationKind,
        key: Any,
        fields: Optional[Mapping[str, Any]],
        *,
        call: Callable[[], Any],
    ) -> MutationOutcome:
        slot = (kind, key)
        if slot in self._in_flight:
            logger.debug("%s %s %s ignored, already submitting", self._definition.name, kind.value, key)
            return MutationOutcome(kind=kind, state=WorkflowState.FAILED, key=key, message=ALREADY_SUBMITTING)

        if fields is not None:
            try:
                self._definition.validate(fields)
            except ValidationError as e:
                self._notifications.error(str(e))
                return MutationOutcome(kind=kind, state=WorkflowState.FAILED, key=key, message=str(e), error=e)

        token = self._lifecycle.token()
        self._in_flight.add(slot)
        try:
            result = await asyncio.to_thread(call)
        except GatewayError as e:
            if not self._lifecycle.is_current(token):
                return self._discard(kind, key)
            logger.warning("%s %s %s failed: %s", self._definition.name, kind.value, key, e.message)
            message = _FAILURE_MESSAGES[kind].format(label=self._definition.label, detail=e.message)
            self._notifications.error(message)
            return MutationOutcome(kind=kind, state=WorkflowState.FAILED, key=key, message=message, error=e)
        finally:
            self._in_flight.discard(slot)

        if not self._lifecycle.is_current(token):
            return self._discard(kind, key)

        try:
            record = self._apply(kind, key, result)
        except ConflictError as e:
            logger.warning("%s %s %s not applied: %s", self._definition.name, kind.value, key, e)
            message = _FAILURE_MESSAGES[kind].format(label=self._definition.label, detail=str(e))
            self._notifications.error(message)
            return MutationOutcome(kind=kind, state=WorkflowState.FAILED, key=key, message=message, error=e)

        message = _SUCCESS_MESSAGES[kind].format(label=self._definition.label)
        self._notifications.success(message)
        return MutationOutcome(
            kind=kind,
            state=WorkflowState.SUCCESS,
            key=self._definition.key_of(record) if record else key,
            record=record,
            message=message,
        )

    def _apply(self, kind: MutationKind, key: Any, result: Any) -> Optional[Record]:
        if kind == MutationKind.CREATE:
            if not self._store.apply_created(result):
                raise self._conflict(result)
            return dict(result)
        if kind == MutationKind.UPDATE:
            if self._store.apply_updated(key, result):
                return self._store.get(key)
            if key in self._store:
                raise self._conflict(result)
            # deleted meanwhile
            return dict(result)
        self._store.apply_deleted(key)
        return None

    def _conflict(self, result: Any) -> ConflictError:
        new_key = self._definition.key_of(result)
        if new_key is None:
            return ConflictError(f"response has no {self._definition.key_field}")
        return ConflictError(f"{self._definition.label} {new_key} already exists")

    def _skip(self, kind: MutationKind, key: Any) -> MutationOutcome:
        logger.debug("%s %s %s skipped, key not in store", self._definition.name, kind.value, key)
        return MutationOutcome(kind=kind, state=WorkflowState.IDLE, key=key)

    def _discard(self, kind: MutationKind, key: Any) -> MutationOutcome:
        logger.info("%s %s %s resolved after teardown, discarded", self._definition.name, kind.value, key)
        return MutationOutcome(kind=kind, state=WorkflowState.IDLE, key=key, discarded=True)
