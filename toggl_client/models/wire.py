"""Wire record types mirroring the service's JSON.

These carry workspaces and projects as raw identifiers (``wid`` / ``pid``).
Converting them into domain objects is the resolver's job; nothing here
knows about the reference cache.
"""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from toggl_client.errors import DeserializationError

CREATED_WITH = "toggl-client"
"""Client identifier sent as ``created_with`` when starting entries."""

# -- Time entry record ---------------------------------------------------------


class TimeEntryWire(BaseModel):
    """Flat time entry record, as sent and received over the API."""

    model_config = ConfigDict(extra="ignore")

    id: int
    guid: UUID
    wid: int
    pid: int
    start: datetime
    stop: datetime | None = None
    duration: int
    description: str = ""
    duronly: bool = False
    at: datetime
    uuid: UUID | None = None


# -- Start / stop ---------------------------------------------------------------


class StartTimeEntry(BaseModel):
    description: str
    tags: list[str] = Field(default_factory=list)
    pid: int
    created_with: str = CREATED_WITH


class StartEntryRequest(BaseModel):
    """Body of ``POST /time_entries/start``."""

    time_entry: StartTimeEntry


class StartedTimeEntry(BaseModel):
    """Payload returned by both the start and the stop endpoints."""

    model_config = ConfigDict(extra="ignore")

    id: int
    pid: int
    wid: int
    billable: bool = False
    start: datetime
    tags: list[str] | None = None
    duration: int
    description: str = ""


# -- Decoding --------------------------------------------------------------------

TIME_ENTRY_LIST: TypeAdapter[list[TimeEntryWire]] = TypeAdapter(list[TimeEntryWire])
TIME_ENTRY: TypeAdapter[TimeEntryWire] = TypeAdapter(TimeEntryWire)
STARTED_TIME_ENTRY: TypeAdapter[StartedTimeEntry] = TypeAdapter(StartedTimeEntry)


def decode[T](adapter: TypeAdapter[T], payload: object) -> T:
    """Validate an unwrapped payload against *adapter*.

    Raises ``DeserializationError`` instead of a partially parsed result.
    """
    try:
        return adapter.validate_python(payload)
    except ValidationError as exc:
        msg = f"Unexpected response shape: {exc.error_count()} validation error(s)"
        raise DeserializationError(msg) from exc
