from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from ..core.constants import API_VERSION_PREFIX, DEFAULT_REQUEST_TIMEOUT


@dataclass(frozen=True)
class ApiConfig:
    base_url: str
    timeout: int = DEFAULT_REQUEST_TIMEOUT
    notification_timeout: float = 5.0

    def resource_url(self, path: str) -> str:
        return f"{self.base_url.rstrip('/')}{API_VERSION_PREFIX}/{path.strip('/')}"


class ApiConnection:
    """Shared HTTP session factory.

    Note: One requests.Session per connection so keep-alive is reused across
    resource gateways. Pass a session in tests to avoid real sockets.
    """

    def __init__(self, config: ApiConfig, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session

    @property
    def config(self) -> ApiConfig:
        return self._config

    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
