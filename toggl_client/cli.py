import functools
from collections.abc import Callable
from datetime import datetime

import click

from toggl_client.client import TogglClient
from toggl_client.errors import TogglError
from toggl_client.models.entities import TimeEntry

_DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%dT%H:%M:%S%z"]

pass_client = click.make_pass_decorator(TogglClient)


def _handle_errors[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Report client errors as a one-line message and exit code 1."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except (TogglError, LookupError) as exc:
            raise click.ClickException(str(exc)) from exc

    return wrapper


@click.group()
@click.option("--log-level", default=None, help="Log level (default: from TOGGL_LOG_LEVEL or INFO).")
@click.pass_context
def main(ctx: click.Context, log_level: str | None) -> None:
    """toggl - work with time entries from the command line."""
    if ctx.obj is not None:
        return

    from toggl_client.log import setup_logging
    from toggl_client.settings import get_settings

    settings = get_settings()
    setup_logging(log_level or settings.log_level)
    ctx.obj = ctx.with_resource(TogglClient.from_settings(settings))


# ---------------------------------------------------------------------------
# Reading
# ---------------------------------------------------------------------------


@main.command()
@click.option("--since", type=click.DateTime(_DATE_FORMATS), default=None, help="Only entries after this time.")
@click.option("--until", type=click.DateTime(_DATE_FORMATS), default=None, help="Only entries before this time.")
@pass_client
@_handle_errors
def entries(client: TogglClient, since: datetime | None, until: datetime | None) -> None:
    """List time entries."""
    for entry in client.time_entries.list_range(_aware(since), _aware(until)):
        click.echo(format_entry(entry))


@main.command()
@pass_client
@_handle_errors
def current(client: TogglClient) -> None:
    """Show the running time entry."""
    entry = client.time_entries.get_current()
    if entry is None:
        click.echo("No running time entry.")
        return
    click.echo(format_entry(entry))


@main.command()
@click.argument("entry_id", type=int)
@pass_client
@_handle_errors
def show(client: TogglClient, entry_id: int) -> None:
    """Show a single time entry."""
    click.echo(format_entry(client.time_entries.get_details(entry_id)))


@main.command()
@pass_client
@_handle_errors
def projects(client: TogglClient) -> None:
    """List projects of all workspaces."""
    workspaces = client.cache.workspaces
    for project in client.projects():
        workspace = workspaces.get(project.wid)
        click.echo(f"{project.id:>10}  {project.name}  ({workspace.name if workspace else project.wid})")


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------


@main.command()
@click.argument("description", default="")
@click.option("--project", "-p", "project_id", type=int, required=True, help="Project ID.")
@click.option("--tag", "-t", "tags", multiple=True, help="Tag to attach; may be repeated.")
@pass_client
@_handle_errors
def start(client: TogglClient, description: str, project_id: int, tags: tuple[str, ...]) -> None:
    """Start a new time entry (stops the running one)."""
    project = client.project(project_id)
    client.time_entries.start(description, tags, project)
    click.echo(f"Started '{description}' in {project.name}.")


@main.command()
@click.argument("entry_id", type=int, required=False)
@pass_client
@_handle_errors
def stop(client: TogglClient, entry_id: int | None) -> None:
    """Stop a time entry (default: the running one)."""
    if entry_id is None:
        entry = client.time_entries.get_current()
        if entry is None:
            click.echo("No running time entry.")
            return
    else:
        entry = client.time_entries.get_details(entry_id)
    client.time_entries.stop(entry)
    click.echo(f"Stopped time entry {entry.id}.")


@main.command()
@click.argument("entry_id", type=int)
@click.confirmation_option(prompt="Delete this time entry?")
@pass_client
@_handle_errors
def delete(client: TogglClient, entry_id: int) -> None:
    """Delete a time entry."""
    entry = client.time_entries.get_details(entry_id)
    client.time_entries.delete(entry)
    click.echo(f"Deleted time entry {entry.id}.")


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_entry(entry: TimeEntry) -> str:
    """One-line rendering: id, start, duration, project, description."""
    if entry.is_running:
        duration = "running"
    else:
        minutes, seconds = divmod(entry.duration, 60)
        hours, minutes = divmod(minutes, 60)
        duration = f"{hours}:{minutes:02d}:{seconds:02d}"
    started = entry.start.astimezone().strftime("%Y-%m-%d %H:%M")
    return f"{entry.id:>10}  {started}  {duration:>8}  {entry.project.name}  {entry.description}"


def _aware(value: datetime | None) -> datetime | None:
    """Interpret naive command-line datetimes as local time."""
    if value is None or value.tzinfo is not None:
        return value
    return value.astimezone()


if __name__ == "__main__":
    main()
