from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from ..resources.base import Record


class ResourceGateway(Protocol):
    """CRUD boundary for one resource family.

    Implementations raise ``RequestError`` or ``TransportError`` on failure
    and never touch the local store.
    """

    def list(self) -> Sequence[Record]:
        raise NotImplementedError

    def create(self, record: Mapping[str, Any]) -> Record:
        raise NotImplementedError

    def update(self, key: Any, record: Mapping[str, Any]) -> Record:
        raise NotImplementedError

    def delete(self, key: Any) -> None:
        raise NotImplementedError

    def mark(self, key: Any) -> None:
        """POST an action without body to ``{base}/{key}``."""

        raise NotImplementedError
