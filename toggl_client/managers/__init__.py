"""Operations on the remote service.

Managers take a ``Transport`` and raise domain exceptions from
``toggl_client.errors``, never raw ``httpx`` errors.
"""

from toggl_client.managers.time_entries import TimeEntryManager
from toggl_client.managers.workspaces import fetch_projects, fetch_workspaces

__all__ = ["TimeEntryManager", "fetch_projects", "fetch_workspaces"]
