"""Domain exceptions raised by the client.

Everything derives from ``TogglError`` so callers can catch the whole family
in one place.  Lookup-style failures also subclass ``LookupError`` and shape
failures subclass ``ValueError``, so generic handlers keep working.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from toggl_client.models.enums import ReferenceKind


class TogglError(Exception):
    """Base class for all client errors."""


class TransportError(TogglError):
    """Network failure or non-success HTTP status.

    ``status_code`` is ``None`` when no response was received at all.
    """

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class DeserializationError(TogglError, ValueError):
    """Response body does not match the expected wire shape."""


class MissingReferenceError(TogglError, LookupError):
    """A wire record references a workspace or project absent from the cache."""

    def __init__(self, kind: ReferenceKind, ref_id: int) -> None:
        super().__init__(f"{kind.value.capitalize()} {ref_id} is not in the reference cache")
        self.kind = kind
        self.ref_id = ref_id


class TimeEntryNotFoundError(TogglError, LookupError):
    """The service reports no time entry with the given ID."""

    def __init__(self, entry_id: int) -> None:
        super().__init__(f"Time entry {entry_id} not found")
        self.entry_id = entry_id
