"""Process-local reference cache of workspaces and projects.

Workspaces and projects are stored once, keyed by identifier.  Time entries
resolved against the cache hold the cached objects themselves.  The cache is
filled lazily through injected fetchers and lives until the owning client is
closed or ``invalidate`` is called.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Mapping, Sequence
from types import MappingProxyType

from loguru import logger

from toggl_client.models.entities import Project, Workspace

WorkspaceFetcher = Callable[[], Sequence[Workspace]]
ProjectFetcher = Callable[[Sequence[Workspace]], Sequence[Project]]


class ReferenceCache:
    """Identifier-keyed tables of workspaces and projects.

    ``ensure_filled`` is the single place that decides whether a fetch is
    needed.  The check and the fill run under one lock, so callers sharing a
    cache never trigger duplicate fetches or observe a half-built table.
    """

    def __init__(self, fetch_workspaces: WorkspaceFetcher, fetch_projects: ProjectFetcher) -> None:
        self._fetch_workspaces = fetch_workspaces
        self._fetch_projects = fetch_projects
        self._workspaces: dict[int, Workspace] | None = None
        self._projects: dict[int, Project] | None = None
        self._lock = threading.Lock()

    # -- Filling -----------------------------------------------------------------

    def ensure_filled(self) -> None:
        """Fetch whatever has not been fetched yet.  No-op once filled.

        A failing fetcher propagates its exception and leaves the affected
        table unfilled.
        """
        with self._lock:
            if self._workspaces is None:
                logger.debug("Cache: fetching workspaces")
                self._workspaces = _index(self._fetch_workspaces())
            if self._projects is None:
                logger.debug("Cache: fetching projects for {} workspace(s)", len(self._workspaces))
                self._projects = _index(self._fetch_projects(list(self._workspaces.values())))
                logger.info(
                    "Cache: filled with {} workspace(s), {} project(s)",
                    len(self._workspaces),
                    len(self._projects),
                )

    def prime_workspaces(self, workspaces: Iterable[Workspace]) -> None:
        """Seed workspaces obtained during session/user initialization.

        Projects are dropped as well; the next ``ensure_filled`` fetches
        them for the new workspaces.
        """
        table = _index(workspaces)
        with self._lock:
            self._workspaces = table
            self._projects = None

    def invalidate(self) -> None:
        """Drop both tables; the next ``ensure_filled`` fetches again."""
        with self._lock:
            self._workspaces = None
            self._projects = None
        logger.debug("Cache: invalidated")

    @property
    def is_filled(self) -> bool:
        return self._workspaces is not None and self._projects is not None

    # -- Lookup ------------------------------------------------------------------

    @property
    def workspaces(self) -> Mapping[int, Workspace]:
        return MappingProxyType(self._workspaces or {})

    @property
    def projects(self) -> Mapping[int, Project]:
        return MappingProxyType(self._projects or {})

    def find_workspace(self, workspace_id: int) -> Workspace | None:
        return self.workspaces.get(workspace_id)

    def find_project(self, project_id: int) -> Project | None:
        return self.projects.get(project_id)


def _index[T: (Workspace, Project)](items: Iterable[T]) -> dict[int, T]:
    return {item.id: item for item in items}
