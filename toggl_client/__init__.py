"""Client library for the Toggl time-tracking REST API.

The package logs through loguru but is disabled by default, so embedding
applications see nothing until they call ``logger.enable("toggl_client")``
(the ``toggl`` CLI does this in ``setup_logging``).
"""

from loguru import logger

from toggl_client.cache import ReferenceCache
from toggl_client.client import TogglClient
from toggl_client.errors import (
    DeserializationError,
    MissingReferenceError,
    TimeEntryNotFoundError,
    TogglError,
    TransportError,
)
from toggl_client.managers.time_entries import TimeEntryManager
from toggl_client.models import Project, ReferenceKind, TimeEntry, TimeEntryWire, Workspace
from toggl_client.resolver import resolve, resolve_many, to_wire
from toggl_client.transport import HttpTransport, Transport

__all__ = [
    "DeserializationError",
    "HttpTransport",
    "MissingReferenceError",
    "Project",
    "ReferenceCache",
    "ReferenceKind",
    "TimeEntry",
    "TimeEntryManager",
    "TimeEntryNotFoundError",
    "TimeEntryWire",
    "TogglClient",
    "TogglError",
    "Transport",
    "TransportError",
    "Workspace",
    "resolve",
    "resolve_many",
    "to_wire",
]

logger.disable(__name__)
