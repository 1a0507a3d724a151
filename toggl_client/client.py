"""Client facade wiring settings, transport, reference cache and managers.

Usage::

    with TogglClient.from_settings() as toggl:
        for entry in toggl.time_entries.list():
            print(entry.project.name, entry.description)
"""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Self

from toggl_client.cache import ReferenceCache
from toggl_client.managers.time_entries import TimeEntryManager
from toggl_client.managers.workspaces import fetch_projects, fetch_workspaces
from toggl_client.settings import TogglSettings, get_settings
from toggl_client.transport import HttpTransport

if TYPE_CHECKING:
    from types import TracebackType

    import httpx

    from toggl_client.models.entities import Project, Workspace
    from toggl_client.transport import Transport


class TogglClient:
    """One API session: a transport plus the reference cache built on it.

    The cache is shared by every operation of this client and lives until
    ``close``.  Nothing is fetched at construction time.
    """

    def __init__(self, transport: Transport) -> None:
        self.transport = transport
        self.cache = ReferenceCache(
            fetch_workspaces=partial(fetch_workspaces, transport),
            fetch_projects=partial(fetch_projects, transport),
        )
        self.time_entries = TimeEntryManager(transport, self.cache)

    @classmethod
    def from_settings(
        cls,
        settings: TogglSettings | None = None,
        *,
        http_client: httpx.Client | None = None,
    ) -> Self:
        """Build a client from ``TOGGL_*`` settings (or the given ones)."""
        settings = settings or get_settings()
        token = settings.api_token.get_secret_value() if settings.api_token else None
        transport = HttpTransport(
            settings.base_url,
            api_token=token,
            timeout=settings.timeout,
            client=http_client,
        )
        return cls(transport)

    # -- Reference data ----------------------------------------------------------

    def workspaces(self) -> list[Workspace]:
        self.cache.ensure_filled()
        return list(self.cache.workspaces.values())

    def projects(self) -> list[Project]:
        self.cache.ensure_filled()
        return list(self.cache.projects.values())

    def project(self, project_id: int) -> Project:
        """Look up a cached project.  Raises ``LookupError`` if unknown."""
        self.cache.ensure_filled()
        project = self.cache.find_project(project_id)
        if project is None:
            msg = f"Project {project_id} not found"
            raise LookupError(msg)
        return project

    # -- Lifecycle ---------------------------------------------------------------

    def close(self) -> None:
        self.cache.invalidate()
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
