"""Domain entities.

``Workspace`` and ``Project`` are frozen: they are fetched once and shared by
every ``TimeEntry`` that refers to them.  A ``TimeEntry`` holds the cached
objects themselves, so two entries in the same project see one logical
``Project``.  Time entries are plain mutable values; editing one only reaches
the service through an explicit update call.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

# -- Reference entities ------------------------------------------------------


class Workspace(BaseModel):
    """Workspace as returned by ``GET /workspaces``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str


class Project(BaseModel):
    """Project as returned by ``GET /workspaces/{wid}/projects``."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str
    wid: int


# -- Time entry ---------------------------------------------------------------


class TimeEntry(BaseModel):
    """A time entry with its workspace and project resolved."""

    id: int
    guid: UUID
    uuid: UUID | None = None
    start: datetime
    stop: datetime | None = None
    duration: int
    """Seconds.  Negative while the entry is running."""

    description: str = ""
    duronly: bool = False
    at: datetime
    workspace: Workspace
    project: Project

    @property
    def is_running(self) -> bool:
        return self.duration < 0

    @property
    def workspace_id(self) -> int:
        return self.workspace.id

    @property
    def project_id(self) -> int:
        return self.project.id
