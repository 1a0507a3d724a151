"""Entity resolver -- turns wire records into domain time entries.

A wire record names its workspace and project by identifier only.  Resolution
looks both up in the reference tables and attaches the cached objects:

1. Look up ``wid`` among the workspaces.
2. Look up ``pid`` among the projects.
3. Copy every scalar field verbatim (including a negative running duration).

A failed lookup raises ``MissingReferenceError``; no default object is ever
substituted.  ``to_wire`` goes the other way by replacing the references with
their identifiers.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from toggl_client.errors import MissingReferenceError
from toggl_client.models.entities import Project, TimeEntry, Workspace
from toggl_client.models.enums import ReferenceKind
from toggl_client.models.wire import TimeEntryWire

_SCALAR_FIELDS = ("id", "guid", "uuid", "start", "stop", "duration", "description", "duronly", "at")


def resolve(
    record: TimeEntryWire,
    workspaces: Mapping[int, Workspace],
    projects: Mapping[int, Project],
) -> TimeEntry:
    """Resolve a single wire record.

    Raises
    ------
    MissingReferenceError:
        ``record.wid`` or ``record.pid`` is not present in the given tables.
        The workspace is checked first.
    """
    workspace = workspaces.get(record.wid)
    if workspace is None:
        raise MissingReferenceError(ReferenceKind.WORKSPACE, record.wid)
    project = projects.get(record.pid)
    if project is None:
        raise MissingReferenceError(ReferenceKind.PROJECT, record.pid)

    return TimeEntry(
        **{name: getattr(record, name) for name in _SCALAR_FIELDS},
        workspace=workspace,
        project=project,
    )


def resolve_many(
    records: Iterable[TimeEntryWire],
    workspaces: Mapping[int, Workspace],
    projects: Mapping[int, Project],
) -> list[TimeEntry]:
    """Resolve records in order.  The first failure aborts the whole batch."""
    return [resolve(record, workspaces, projects) for record in records]


def to_wire(entry: TimeEntry) -> TimeEntryWire:
    """Flatten a time entry back into its wire form."""
    return TimeEntryWire(
        **{name: getattr(entry, name) for name in _SCALAR_FIELDS},
        wid=entry.workspace.id,
        pid=entry.project.id,
    )
