from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import pytest

from pyttr._constants import FIELD_OFFICES_ENDPOINT, INVASIONS_ENDPOINT
from pyttr.exceptions import FetchErrorKind, TtrFetchError

SILLY_STREET_INVASIONS: dict[str, Any] = {
    "invasions": {
        "Silly Street": {"asOf": 1700000000, "type": "Supervisor", "progress": "40/50"},
    },
    "lastUpdated": 1700000000,
    "error": None,
}

FIELD_OFFICES: dict[str, Any] = {
    "fieldOffices": {
        "3100": {"department": "s", "difficulty": 4, "annexes": 12, "open": True},
        "9999": {"department": "m", "difficulty": 0, "annexes": 3, "open": False},
    },
    "lastUpdated": 1700000100,
}


@dataclass
class FakeTtrBackend:
    """In-memory stand-in for the status API, implementing ``Transport``."""

    bodies: dict[str, bytes] = field(default_factory=dict)
    failures: dict[str, TtrFetchError] = field(default_factory=dict)
    calls: dict[str, int] = field(default_factory=dict)

    def set_json(self, endpoint: str, payload: Any) -> None:
        self.bodies[endpoint] = json.dumps(payload).encode()

    def set_body(self, endpoint: str, body: bytes) -> None:
        self.bodies[endpoint] = body

    def fail(self, endpoint: str, kind: FetchErrorKind = FetchErrorKind.NETWORK_UNREACHABLE) -> None:
        self.failures[endpoint] = TtrFetchError(f"{endpoint} unavailable", kind=kind, endpoint=endpoint)

    async def get(self, endpoint: str) -> bytes:
        self.calls[endpoint] = self.calls.get(endpoint, 0) + 1
        failure = self.failures.get(endpoint)
        if failure is not None:
            raise failure
        return self.bodies[endpoint]


@pytest.fixture
def backend() -> FakeTtrBackend:
    fake = FakeTtrBackend()
    fake.set_json(INVASIONS_ENDPOINT, SILLY_STREET_INVASIONS)
    fake.set_json(FIELD_OFFICES_ENDPOINT, FIELD_OFFICES)
    return fake
