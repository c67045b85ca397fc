from __future__ import annotations

import threading
from typing import Any, Optional
from urllib.parse import urlparse

import pytest

from school_admin.resources import FEES


class FakeGateway:
    """In-memory stand-in for HttpResourceGateway.

    ``fail_with[op]`` makes that operation raise; ``gate`` (a threading.Event)
    makes mutating calls block until it is set.
    """

    def __init__(self, definition, records=(), *, key_prefix: str = "K"):
        self._definition = definition
        self.records: list[dict] = [dict(r) for r in records]
        self.calls: list[tuple] = []
        self.fail_with: dict[str, Exception] = {}
        self.gate: Optional[threading.Event] = None
        self._key_prefix = key_prefix
        self._next_id = 1

    def _enter(self, op: str, *args) -> None:
        self.calls.append((op, *args))
        if self.gate is not None and op != "list":
            self.gate.wait(timeout=5)
        if op in self.fail_with:
            raise self.fail_with[op]

    def count(self, op: str) -> int:
        return sum(1 for c in self.calls if c[0] == op)

    def list(self):
        self._enter("list")
        return [dict(r) for r in self.records]

    def create(self, record):
        self._enter("create", dict(record))
        created = dict(record)
        created[self._definition.key_field] = f"{self._key_prefix}-{self._next_id}"
        self._next_id += 1
        self.records.append(created)
        return dict(created)

    def update(self, key, record):
        self._enter("update", key, dict(record))
        updated = {**record, self._definition.key_field: key}
        self.records = [updated if r.get(self._definition.key_field) == key else r for r in self.records]
        return dict(updated)

    def delete(self, key):
        self._enter("delete", key)
        self.records = [r for r in self.records if r.get(self._definition.key_field) != key]

    def mark(self, key):
        self._enter("mark", key)


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeResponse:
    INVALID_JSON = object()

    def __init__(self, status_code: int = 200, payload: Any = None, *, url: str = "http://api.test"):
        self.status_code = status_code
        self._payload = payload
        self.url = url

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self):
        if self._payload is FakeResponse.INVALID_JSON or (self._payload is None and self.status_code != 200):
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    """Scripted requests.Session: returns (or raises) queued items in order."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests: list[dict] = []

    def request(self, method, url, **kwargs):
        self.requests.append({"method": method, "url": url, **kwargs})
        item = self.responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self):
        pass


class FakeApiSession:
    """A tiny REST server behind the requests.Session interface.

    Records are kept per resource path; keys come from ``key_fields``.
    """

    def __init__(self, data: dict[str, list[dict]], key_fields: dict[str, str]):
        self.data = {path: [dict(r) for r in rows] for path, rows in data.items()}
        self.key_fields = key_fields
        self.requests: list[tuple[str, str]] = []
        self.errors: dict[tuple[str, str], FakeResponse] = {}
        self._next_id = 100

    def request(self, method, url, json=None, headers=None, timeout=None):
        self.requests.append((method, url))
        path = urlparse(url).path
        parts = [p for p in path.split("/") if p]
        # /api/v1/<resource>[/<key>]
        idx = parts.index("v1")
        resource = parts[idx + 1]
        key = parts[idx + 2] if len(parts) > idx + 2 else None

        if (method, path) in self.errors:
            return self.errors[(method, path)]

        rows = self.data.setdefault(resource, [])
        key_field = self.key_fields.get(resource, "id")

        if method == "GET" and key in ("all", None):
            return FakeResponse(200, [dict(r) for r in rows], url=url)
        if method == "POST" and key is None:
            created = {**(json or {}), key_field: str(self._next_id)}
            self._next_id += 1
            rows.append(created)
            return FakeResponse(201, dict(created), url=url)
        if method == "POST" and key is not None:
            rows.append({"teacherId": key, "fullname": f"Teacher {key}", "attendanceTime": "2025-03-03T08:00:00", "numberOfAttendance": 1})
            return FakeResponse(201, {}, url=url)

        match = [r for r in rows if str(r.get(key_field)) == key]
        if not match:
            return FakeResponse(404, {"message": f"{resource} {key} not found"}, url=url)
        if method == "PUT":
            updated = {**(json or {}), key_field: match[0][key_field]}
            rows[rows.index(match[0])] = updated
            return FakeResponse(200, dict(updated), url=url)
        if method == "DELETE":
            rows.remove(match[0])
            return FakeResponse(204, None, url=url)
        return FakeResponse(405, {"message": "Method not allowed"}, url=url)

    def close(self):
        pass


@pytest.fixture
def make_gateway():
    def _make(definition=FEES, records=(), **kwargs):
        return FakeGateway(definition, records, **kwargs)

    return _make


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def fake_response():
    return FakeResponse


@pytest.fixture
def make_session():
    return FakeSession


@pytest.fixture
def make_api_session():
    return FakeApiSession


@pytest.fixture
def fee_records():
    return [
        {"feeId": "F-1", "feeName": "Cantine", "feeType": "Meals", "amount": 5000, "description": "Lunch"},
        {"feeId": "F-2", "feeName": "Transport", "feeType": "Bus", "amount": 12000, "description": "School bus"},
    ]
