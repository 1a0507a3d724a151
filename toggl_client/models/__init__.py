"""Data models for the client."""

from toggl_client.models.entities import Project, TimeEntry, Workspace
from toggl_client.models.enums import ReferenceKind
from toggl_client.models.wire import (
    CREATED_WITH,
    StartedTimeEntry,
    StartEntryRequest,
    StartTimeEntry,
    TimeEntryWire,
)

__all__ = [
    "CREATED_WITH",
    "Project",
    "ReferenceKind",
    "StartEntryRequest",
    "StartTimeEntry",
    "StartedTimeEntry",
    "TimeEntry",
    "TimeEntryWire",
    "Workspace",
]
