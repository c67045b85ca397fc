from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping, Optional

from ..core.exceptions import DomainError, GatewayError, NotFoundError
from ..gateway.repository import ResourceGateway
from ..notifications.channel import NotificationChannel
from ..resources.base import ResourceDefinition
from ..store.projection import Projection
from ..store.store import ResourceStore
from ..workflow.lifecycle import PageLifecycle
from ..workflow.model import MutationOutcome, PendingEdit
from ..workflow.service import MutationWorkflow

logger = logging.getLogger(__name__)


class ResourcePage:
    """One list page: load, search, edit form, create/update/delete.

    The store lives from ``activate()`` until ``deactivate()``; results that
    resolve after teardown are dropped.
    """

    def __init__(
        self,
        definition: ResourceDefinition,
        gateway: ResourceGateway,
        notifications: Optional[NotificationChannel] = None,
    ):
        self._definition = definition
        self._gateway = gateway
        self._notifications = notifications or NotificationChannel()
        self._store = ResourceStore(definition)
        self._lifecycle = PageLifecycle(active=False)
        self._workflow = MutationWorkflow(
            definition,
            gateway,
            self._store,
            self._notifications,
            lifecycle=self._lifecycle,
        )
        self._query = ""
        self._pending: Optional[PendingEdit] = None
        self._loaded = False

    # === properties ===

    @property
    def definition(self) -> ResourceDefinition:
        return self._definition

    @property
    def store(self) -> ResourceStore:
        return self._store

    @property
    def notifications(self) -> NotificationChannel:
        return self._notifications

    @property
    def workflow(self) -> MutationWorkflow:
        return self._workflow

    @property
    def pending(self) -> Optional[PendingEdit]:
        return self._pending

    @property
    def query(self) -> str:
        return self._query

    @property
    def is_active(self) -> bool:
        return self._lifecycle.active

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    # === lifecycle ===

    async def activate(self) -> bool:
        """Start the page; True when this call fetched the list."""
        self._lifecycle.start()
        if self._loaded:
            return False
        await self.reload()
        return True

    async def reload(self) -> bool:
        token = self._lifecycle.token()
        try:
            records = await asyncio.to_thread(self._gateway.list)
        except GatewayError as e:
            if self._lifecycle.is_current(token):
                logger.warning("%s list failed: %s", self._definition.name, e.message)
                self._notifications.error(f"Loading failed: {e.message}")
            return False

        if not self._lifecycle.is_current(token):
            return False
        self._store.replace_all(records)
        self._loaded = True
        return True

    def deactivate(self) -> None:
        self._lifecycle.stop()
        self._store.clear()
        self._notifications.clear()
        self._pending = None
        self._query = ""
        self._loaded = False

    # === search ===

    def search(self, query: str) -> Projection:
        self._query = query or ""
        return self.visible()

    def visible(self) -> Projection:
        return self._store.project(self._query)

    # === edit form ===

    def open_create(self) -> PendingEdit:
        self._pending = PendingEdit(key=None, fields=self._definition.new_fields())
        return self._pending

    def open_edit(self, key: Any) -> PendingEdit:
        record = self._store.get(key)
        self._pending = PendingEdit(key=key, fields=self._definition.editable_fields(record))
        return self._pending

    def cancel_edit(self) -> None:
        self._pending = None

    def set_field(self, name: str, value: Any) -> None:
        if self._pending is None:
            raise DomainError("No record is being edited")
        self._pending.set(name, value)

    async def save(self) -> MutationOutcome:
        pending = self._pending
        if pending is None:
            raise DomainError("No record is being edited")

        if pending.is_new:
            outcome = await self._workflow.create(pending.fields)
        else:
            outcome = await self._workflow.update(pending.key, pending.fields)

        if outcome.succeeded and self._pending is pending:
            self._pending = None
        return outcome

    async def submit_create(self, fields: Mapping[str, Any]) -> MutationOutcome:
        self.open_create().update(dict(fields))
        return await self.save()

    async def submit_update(self, key: Any, fields: Mapping[str, Any]) -> MutationOutcome:
        self.open_edit(key).update(dict(fields))
        return await self.save()

    async def delete(self, key: Any) -> MutationOutcome:
        return await self._workflow.delete(key)

    # === helpers ===

    def resolve_key(self, raw: Any) -> Any:
        """Map a key from a URL (always text) to the stored key."""
        if raw in self._store:
            return raw
        for key in self._store.keys():
            if str(key) == str(raw):
                return key
        raise NotFoundError(f"{self._definition.label} {raw} not found")

    def snapshot(self) -> dict:
        return {
            "resource": self._definition.name,
            "query": self._query,
            "records": self.visible().to_list(),
            "total": len(self._store),
            "submitting": self._workflow.is_submitting,
            "pending": self._pending.to_dict() if self._pending else None,
            "notifications": [n.to_dict() for n in self._notifications.active()],
        }
