"""Shared enumerations."""

from __future__ import annotations

from enum import StrEnum


class ReferenceKind(StrEnum):
    """Kind of entity a time entry refers to by identifier."""

    WORKSPACE = "workspace"
    PROJECT = "project"
