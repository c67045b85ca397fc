"""
REST gateway backed by ``requests``.

Every resource family talks to the same endpoint layout:

- ``GET {base}/all`` (or ``GET {base}`` when the resource has no list suffix)
- ``POST {base}``
- ``PUT {base}/{key}``
- ``DELETE {base}/{key}``
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

import requests

from ..core.constants import GENERIC_SERVER_ERROR, JSON_ACCEPT_HEADERS, JSON_BODY_HEADERS
from ..core.exceptions import RequestError, TransportError
from ..resources.base import Record, ResourceDefinition
from .connection import ApiConnection

logger = logging.getLogger(__name__)


class HttpResourceGateway:
    def __init__(self, connection: ApiConnection, definition: ResourceDefinition):
        self._connection = connection
        self._definition = definition
        self._base_url = connection.config.resource_url(definition.path)

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def list_url(self) -> str:
        suffix = self._definition.list_suffix
        return f"{self._base_url}/{suffix}" if suffix else self._base_url

    def list(self) -> Sequence[Record]:
        response = self._send("GET", self.list_url)
        data = self._decode(response)
        if not isinstance(data, list):
            logger.warning("%s list returned %s instead of a list", self._definition.name, type(data).__name__)
            raise TransportError(GENERIC_SERVER_ERROR)
        return data

    def create(self, record: Mapping[str, Any]) -> Record:
        response = self._send("POST", self._base_url, body=dict(record))
        created = self._decode_record(response)
        if self._definition.key_of(created) is None:
            logger.warning("%s create returned no %s", self._definition.name, self._definition.key_field)
            raise TransportError(GENERIC_SERVER_ERROR)
        return created

    def update(self, key: Any, record: Mapping[str, Any]) -> Record:
        response = self._send("PUT", f"{self._base_url}/{key}", body=dict(record))
        return self._decode_record(response)

    def delete(self, key: Any) -> None:
        self._send("DELETE", f"{self._base_url}/{key}")

    def mark(self, key: Any) -> None:
        self._send("POST", f"{self._base_url}/{key}", headers=JSON_BODY_HEADERS)

    # === helpers ===

    def _send(
        self,
        method: str,
        url: str,
        *,
        body: Optional[dict] = None,
        headers: Optional[dict] = None,
    ) -> requests.Response:
        if headers is None:
            headers = JSON_BODY_HEADERS if body is not None else JSON_ACCEPT_HEADERS

        self._log_request(method, url, body)
        try:
            response = self._connection.session().request(
                method,
                url,
                json=body,
                headers=headers,
                timeout=self._connection.config.timeout,
            )
        except requests.exceptions.RequestException as e:
            logger.error("%s %s failed: %s", method, url, e)
            raise TransportError(GENERIC_SERVER_ERROR) from e

        self._log_response(method, url, response)
        if not 200 <= response.status_code < 300:
            raise RequestError(response.status_code, self._error_message(response))
        return response

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        fallback = f"Error {response.status_code}"
        try:
            data = response.json()
        except ValueError:
            return fallback
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return fallback

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error("Malformed JSON from %s: %s", response.url, e)
            raise TransportError(GENERIC_SERVER_ERROR) from e

    def _decode_record(self, response: requests.Response) -> Record:
        data = self._decode(response)
        if not isinstance(data, dict):
            raise TransportError(GENERIC_SERVER_ERROR)
        return data

    def _log_request(self, method: str, url: str, body: Optional[dict]) -> None:
        logger.info("%s API Request: %s %s", self._definition.name, method, url)
        if body is not None:
            logger.debug("Request data: %s", body)

    def _log_response(self, method: str, url: str, response: requests.Response) -> None:
        logger.info("%s API Response: %s from %s %s", self._definition.name, response.status_code, method, url)
