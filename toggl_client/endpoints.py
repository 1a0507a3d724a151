"""Endpoint paths, relative to the API base URL.

Paths are plain string templates so that the same inputs always yield the
same request line.  Range query parameters are emitted in a fixed order:
``start_date`` first, then ``end_date``.
"""

from __future__ import annotations

from datetime import datetime
from urllib.parse import urlencode

TIME_ENTRIES = "time_entries"
TIME_ENTRY_START = f"{TIME_ENTRIES}/start"
TIME_ENTRY_CURRENT = f"{TIME_ENTRIES}/current"
WORKSPACES = "workspaces"


def time_entries(start: datetime | None = None, end: datetime | None = None) -> str:
    """``time_entries`` with optional ``start_date`` / ``end_date`` query.

    Raises ``ValueError`` for naive datetimes: the service expects RFC 3339
    timestamps with an offset.
    """
    params: list[tuple[str, str]] = []
    if start is not None:
        params.append(("start_date", _rfc3339(start)))
    if end is not None:
        params.append(("end_date", _rfc3339(end)))
    if not params:
        return TIME_ENTRIES
    return f"{TIME_ENTRIES}?{urlencode(params)}"


def time_entry(entry_id: int) -> str:
    return f"{TIME_ENTRIES}/{entry_id}"


def time_entry_stop(entry_id: int) -> str:
    return f"{TIME_ENTRIES}/{entry_id}/stop"


def workspace_projects(workspace_id: int) -> str:
    return f"{WORKSPACES}/{workspace_id}/projects"


def _rfc3339(value: datetime) -> str:
    if value.tzinfo is None or value.utcoffset() is None:
        msg = f"Timestamp {value!r} has no timezone"
        raise ValueError(msg)
    return value.isoformat()
