"""Workspace and project fetchers.

These are the read-only primitives the reference cache fills itself from.
Creating, updating or deleting workspaces and projects is not handled here.
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import TypeAdapter

from toggl_client import endpoints
from toggl_client.models.entities import Project, Workspace
from toggl_client.models.wire import decode
from toggl_client.transport import Transport

_WORKSPACE_LIST: TypeAdapter[list[Workspace]] = TypeAdapter(list[Workspace])
_PROJECT_LIST: TypeAdapter[list[Project]] = TypeAdapter(list[Project])


def fetch_workspaces(transport: Transport) -> list[Workspace]:
    """Return all workspaces visible to the authenticated user."""
    payload = transport.get(endpoints.WORKSPACES)
    return decode(_WORKSPACE_LIST, payload if payload is not None else [])


def fetch_projects(transport: Transport, workspaces: Sequence[Workspace]) -> list[Project]:
    """Return the projects of every given workspace, in workspace order."""
    projects: list[Project] = []
    for workspace in workspaces:
        payload = transport.get(endpoints.workspace_projects(workspace.id))
        projects.extend(decode(_PROJECT_LIST, payload if payload is not None else []))
    return projects
