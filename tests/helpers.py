"""Canned API data and the in-process fake service used across the tests.

Requests never leave the process: ``httpx.MockTransport`` routes them to
``FakeService``, which answers from a table of canned responses keyed by
method and path (relative to the API base URL) and records every request.
"""

from __future__ import annotations

from typing import Any

import httpx

from toggl_client.models.entities import Project, Workspace

BASE_URL = "https://toggl.test/api/v8"
_PREFIX = "/api/v8/"

WORKSPACE = Workspace(id=1, name="Acme")
PROJECT = Project(id=10, name="Website", wid=1)
OTHER_PROJECT = Project(id=11, name="Backoffice", wid=1)

GUID = "c4a6b2a2-3f0e-4d38-9a55-6f4bd0f3f2d1"


def wire_entry(**overrides: Any) -> dict[str, Any]:
    """JSON for one time entry as the service returns it."""
    entry: dict[str, Any] = {
        "id": 5,
        "guid": GUID,
        "wid": 1,
        "pid": 10,
        "billable": False,
        "start": "2024-03-04T09:00:00+00:00",
        "stop": "2024-03-04T10:30:00+00:00",
        "duration": 5400,
        "description": "coding",
        "duronly": False,
        "at": "2024-03-04T10:30:05+00:00",
    }
    entry.update(overrides)
    return entry


def started_entry(**overrides: Any) -> dict[str, Any]:
    """JSON returned by the start and stop endpoints."""
    entry: dict[str, Any] = {
        "id": 42,
        "pid": 10,
        "wid": 1,
        "billable": False,
        "start": "2024-03-04T11:00:00+00:00",
        "tags": [],
        "duration": -1709550000,
        "description": "coding",
    }
    entry.update(overrides)
    return entry


class FakeService:
    """Canned-response router for ``httpx.MockTransport``."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], httpx.Response | Exception] = {}
        self.requests: list[httpx.Request] = []

    def reply(self, method: str, path: str, *, status: int = 200, json: Any = None, content: bytes | None = None) -> None:
        if content is not None:
            self.routes[method, path] = httpx.Response(status, content=content)
        else:
            self.routes[method, path] = httpx.Response(status, json=json)

    def fail(self, method: str, path: str, exc: Exception) -> None:
        self.routes[method, path] = exc

    def requests_to(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and _relative(r) == path]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, _relative(request)))
        if route is None:
            return httpx.Response(404, text="Not Found")
        if isinstance(route, Exception):
            raise route
        return route


def _relative(request: httpx.Request) -> str:
    return request.url.raw_path.decode().removeprefix(_PREFIX)
