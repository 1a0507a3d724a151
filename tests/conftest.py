"""Shared fixtures wired to the fake service in ``tests/helpers.py``."""

from __future__ import annotations

from collections.abc import Iterator

import httpx
import pytest

from tests.helpers import BASE_URL, OTHER_PROJECT, PROJECT, WORKSPACE, FakeService
from toggl_client.cache import ReferenceCache
from toggl_client.client import TogglClient
from toggl_client.transport import HttpTransport


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def service() -> FakeService:
    """Fake API that already knows one workspace with two projects."""
    fake = FakeService()
    fake.reply("GET", "workspaces", json=[{"id": 1, "name": "Acme", "premium": False}])
    fake.reply(
        "GET",
        "workspaces/1/projects",
        json=[
            {"id": 10, "name": "Website", "wid": 1, "active": True},
            {"id": 11, "name": "Backoffice", "wid": 1, "active": True},
        ],
    )
    return fake


@pytest.fixture
def http_client(service: FakeService) -> Iterator[httpx.Client]:
    with httpx.Client(transport=httpx.MockTransport(service), base_url=BASE_URL) as client:
        yield client


@pytest.fixture
def transport(http_client: httpx.Client) -> HttpTransport:
    return HttpTransport(BASE_URL, api_token="secret-token", client=http_client)


@pytest.fixture
def client(transport: HttpTransport) -> TogglClient:
    return TogglClient(transport)


@pytest.fixture
def cache() -> ReferenceCache:
    """Cache pre-filled with WORKSPACE, PROJECT and OTHER_PROJECT."""
    ref_cache = ReferenceCache(
        fetch_workspaces=lambda: [WORKSPACE],
        fetch_projects=lambda workspaces: [PROJECT, OTHER_PROJECT],
    )
    ref_cache.ensure_filled()
    return ref_cache
