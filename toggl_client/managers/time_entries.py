"""Time entry manager -- the public time entry operations.

Each operation builds its endpoint, shapes the request body, calls the
transport and hands the payload to the resolver.  Operations that return
entries make sure the reference cache is filled first:

- **list / list_range**: ``GET time_entries[?start_date][&end_date]``
- **start**: ``POST time_entries/start`` (the service stops any running entry)
- **stop**: ``PUT time_entries/{id}/stop``
- **get_details / get_current**: ``GET time_entries/{id}`` / ``GET time_entries/current``
- **update**: ``PUT time_entries/{id}``
- **delete**: ``DELETE time_entries/{id}``

A 404 on an operation addressing a single entry becomes
``TimeEntryNotFoundError``; every other failure propagates unchanged.
"""

from __future__ import annotations

import contextlib
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from loguru import logger

from toggl_client import endpoints
from toggl_client.errors import TimeEntryNotFoundError, TransportError
from toggl_client.models.wire import (
    STARTED_TIME_ENTRY,
    TIME_ENTRY,
    TIME_ENTRY_LIST,
    StartEntryRequest,
    StartTimeEntry,
    decode,
)
from toggl_client.resolver import resolve, resolve_many, to_wire

if TYPE_CHECKING:
    from datetime import datetime

    from toggl_client.cache import ReferenceCache
    from toggl_client.models.entities import Project, TimeEntry
    from toggl_client.transport import Transport


class TimeEntryManager:
    """Time entry operations bound to one transport and one reference cache."""

    def __init__(self, transport: Transport, cache: ReferenceCache) -> None:
        self._transport = transport
        self._cache = cache

    # -- Read --------------------------------------------------------------------

    def list(self) -> list[TimeEntry]:
        """All time entries, in the order the service returns them."""
        return self.list_range(None, None)

    def list_range(self, start: datetime | None = None, end: datetime | None = None) -> list[TimeEntry]:
        """Time entries between *start* and *end*; either bound may be omitted.

        Raises ``ValueError`` for naive datetimes, before any request is made.
        """
        path = endpoints.time_entries(start, end)
        self._cache.ensure_filled()
        payload = self._transport.get(path)
        records = decode(TIME_ENTRY_LIST, payload if payload is not None else [])
        entries = resolve_many(records, self._cache.workspaces, self._cache.projects)
        logger.debug("Listed {} time entries", len(entries))
        return entries

    def get_details(self, entry_id: int) -> TimeEntry:
        """A single entry.  Raises ``TimeEntryNotFoundError`` if the service has none."""
        self._cache.ensure_filled()
        with _not_found_as(entry_id):
            payload = self._transport.get(endpoints.time_entry(entry_id))
        if not payload:
            raise TimeEntryNotFoundError(entry_id)
        return resolve(decode(TIME_ENTRY, payload), self._cache.workspaces, self._cache.projects)

    def get_current(self) -> TimeEntry | None:
        """The running entry, or ``None`` when nothing is running."""
        self._cache.ensure_filled()
        payload = self._transport.get(endpoints.TIME_ENTRY_CURRENT)
        if not payload:
            return None
        return resolve(decode(TIME_ENTRY, payload), self._cache.workspaces, self._cache.projects)

    # -- Write -------------------------------------------------------------------

    def start(self, description: str, tags: Iterable[str], project: Project) -> None:
        """Start a new entry in *project*.

        Tags keep their order; repeated tags are sent once.  The response is
        only decoded to confirm that the service accepted the entry.
        """
        body = StartEntryRequest(
            time_entry=StartTimeEntry(
                description=description,
                tags=list(dict.fromkeys(tags)),
                pid=project.id,
            )
        )
        payload = self._transport.post(endpoints.TIME_ENTRY_START, body.model_dump(mode="json"))
        started = decode(STARTED_TIME_ENTRY, payload)
        logger.info("Started time entry {} in project {}", started.id, started.pid)

    def stop(self, entry: TimeEntry) -> None:
        entry_id = _require_id(entry)
        with _not_found_as(entry_id):
            payload = self._transport.put(endpoints.time_entry_stop(entry_id))
        decode(STARTED_TIME_ENTRY, payload)
        logger.info("Stopped time entry {}", entry_id)

    def update(self, entry: TimeEntry) -> None:
        """Send the full entry, with workspace and project as identifiers."""
        entry_id = _require_id(entry)
        body = {"time_entry": to_wire(entry).model_dump(mode="json")}
        with _not_found_as(entry_id):
            self._transport.put(endpoints.time_entry(entry_id), body)
        logger.info("Updated time entry {}", entry_id)

    def delete(self, entry: TimeEntry) -> None:
        entry_id = _require_id(entry)
        with _not_found_as(entry_id):
            self._transport.delete(endpoints.time_entry(entry_id))
        logger.info("Deleted time entry {}", entry_id)


# -- Helpers -------------------------------------------------------------------


def _require_id(entry: TimeEntry) -> int:
    if entry.id <= 0:
        msg = "Time entry has not been created on the service yet"
        raise ValueError(msg)
    return entry.id


@contextlib.contextmanager
def _not_found_as(entry_id: int) -> Iterator[None]:
    """Translate a 404 from the transport into ``TimeEntryNotFoundError``."""
    try:
        yield
    except TransportError as exc:
        if exc.status_code == 404:
            raise TimeEntryNotFoundError(entry_id) from exc
        raise
