"""Tests for the client facade, settings and library logging."""

from __future__ import annotations

import base64
import logging
import sys

import httpx
import pytest
from loguru import logger

from tests.helpers import BASE_URL, FakeService, wire_entry
from toggl_client.client import TogglClient
from toggl_client.errors import DeserializationError
from toggl_client.log import setup_logging
from toggl_client.settings import TogglSettings, get_settings


@pytest.fixture
def clean_settings(monkeypatch: pytest.MonkeyPatch):
    for key in ("TOGGL_API_TOKEN", "TOGGL_BASE_URL", "TOGGL_TIMEOUT", "TOGGL_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir("/")
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def test_settings_from_env(clean_settings: pytest.MonkeyPatch) -> None:
    clean_settings.setenv("TOGGL_API_TOKEN", "abc123")
    clean_settings.setenv("TOGGL_TIMEOUT", "5")

    settings = get_settings()

    assert settings.api_token is not None
    assert settings.api_token.get_secret_value() == "abc123"
    assert settings.timeout == 5.0
    assert settings.base_url == "https://www.toggl.com/api/v8"
    assert get_settings() is settings


def test_from_settings_uses_token(service: FakeService, http_client: httpx.Client) -> None:
    settings = TogglSettings(api_token="abc123", base_url=BASE_URL)

    client = TogglClient.from_settings(settings, http_client=http_client)
    client.workspaces()

    expected = base64.b64encode(b"abc123:api_token").decode()
    assert service.requests[0].headers["Authorization"] == f"Basic {expected}"


def test_workspaces_and_projects(service: FakeService, client: TogglClient) -> None:
    assert [w.name for w in client.workspaces()] == ["Acme"]
    assert [p.id for p in client.projects()] == [10, 11]
    assert client.project(11).name == "Backoffice"
    assert len(service.requests_to("GET", "workspaces")) == 1


def test_project_unknown(client: TogglClient) -> None:
    with pytest.raises(LookupError, match="Project 42"):
        client.project(42)


def test_projects_fetched_per_workspace(service: FakeService, client: TogglClient) -> None:
    service.reply("GET", "workspaces", json={"data": [{"id": 1, "name": "Acme"}, {"id": 2, "name": "Side"}]})
    service.reply("GET", "workspaces/2/projects", json={"data": [{"id": 20, "name": "Blog", "wid": 2}]})

    assert [p.id for p in client.projects()] == [10, 11, 20]


def test_workspace_without_projects(service: FakeService, client: TogglClient) -> None:
    service.reply("GET", "workspaces/1/projects", json={"data": None})

    assert client.projects() == []
    assert client.cache.is_filled


def test_projects_reject_object_payload(service: FakeService, client: TogglClient) -> None:
    service.reply("GET", "workspaces/1/projects", json={"data": {}})

    with pytest.raises(DeserializationError):
        client.projects()
    assert client.cache.is_filled is False


def test_close_invalidates_cache(client: TogglClient) -> None:
    client.workspaces()

    with client:
        pass

    assert client.cache.is_filled is False


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------


def test_library_is_silent_by_default(service: FakeService, client: TogglClient) -> None:
    service.reply("GET", "time_entries", json=[wire_entry()])
    messages: list[str] = []
    sink_id = logger.add(messages.append, level="DEBUG")
    try:
        client.time_entries.list()
    finally:
        logger.remove(sink_id)

    assert messages == []


def test_setup_logging_enables_library(service: FakeService, client: TogglClient) -> None:
    service.reply("GET", "time_entries", json=[wire_entry()])
    messages: list[str] = []
    try:
        setup_logging("DEBUG")
        logger.add(messages.append, level="DEBUG", format="{name} {message}")
        client.time_entries.list()
    finally:
        logger.remove()
        logger.add(sys.stderr)
        logger.disable("toggl_client")

    assert any(m.startswith("toggl_client.managers.time_entries Listed 1") for m in messages)


def test_stdlib_records_report_their_call_site() -> None:
    messages: list[str] = []
    try:
        setup_logging("INFO")
        logger.add(messages.append, level="INFO", format="{function} {message}")
        logging.getLogger("thirdparty").warning("disk almost full")
    finally:
        logger.remove()
        logger.add(sys.stderr)
        logger.disable("toggl_client")
        logging.basicConfig(handlers=[], force=True)

    assert "test_stdlib_records_report_their_call_site disk almost full\n" in messages
