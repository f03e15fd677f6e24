import logging
from datetime import date, datetime
from typing import Annotated, Optional

import typer
from rich.console import Console

from core.application.board import DropEvent, handle_drop
from core.application.notifications import NotificationLevel
from core.application.task_store import PAGE_SIZE_OPTIONS, TaskStore
from core.domain.models.task import TaskPatch, TaskStatus
from core.domain.views import ALL_STATUSES
from frontend_terminal.render import (
    load_error,
    pagination_footer,
    print_notifications,
)
from frontend_terminal.views.grid_view import task_card
from frontend_terminal.views.registry import VIEW_NAMES, build_view
from infrastructure.config import ClientSettings
from infrastructure.container import build_task_gateway
from infrastructure.logging_setup import setup_logging

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Task Tracker - personal tasks from the terminal",
    no_args_is_help=True,
)
console = Console()

_STATUS_CHOICES = ", ".join(s.value for s in TaskStatus)


def _parse_status(value: str | None) -> TaskStatus | None:
    if value is None:
        return None
    try:
        return TaskStatus(value)
    except ValueError:
        raise typer.BadParameter(f"status must be one of: {_STATUS_CHOICES}") from None


def _open_store(page_size: int | None = None) -> TaskStore:
    settings = ClientSettings.from_env()
    store = TaskStore(
        build_task_gateway(settings),
        page_size=page_size or settings.page_size,
    )
    store.refresh()
    return store


def _finish(store: TaskStore) -> None:
    shown = print_notifications(console, store)
    if any(n.level is NotificationLevel.ERROR for n in shown):
        raise typer.Exit(code=1)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show debug logs")
    ] = False,
) -> None:
    settings = ClientSettings.from_env()
    setup_logging("debug" if verbose else settings.log_level)


@app.command("list")
def list_tasks(
    view: Annotated[
        str, typer.Option("--view", "-V", help=f"One of: {', '.join(VIEW_NAMES)}")
    ] = "list",
    search: Annotated[
        str, typer.Option("--search", "-s", help="Text to look for in title or description")
    ] = "",
    status: Annotated[
        str, typer.Option("--status", help=f"all, {_STATUS_CHOICES}")
    ] = ALL_STATUSES,
    page: Annotated[int, typer.Option("--page", "-p", min=1)] = 1,
    page_size: Annotated[
        Optional[int],
        typer.Option(
            "--page-size",
            "-n",
            min=1,
            help=f"Tasks per page (usual: {', '.join(map(str, PAGE_SIZE_OPTIONS))})",
        ),
    ] = None,
    day: Annotated[
        Optional[datetime],
        typer.Option("--day", formats=["%Y-%m-%d"], help="Day shown by the calendar view"),
    ] = None,
) -> None:
    """Show tasks using one of the four views."""
    if view not in VIEW_NAMES:
        raise typer.BadParameter(f"view must be one of: {', '.join(VIEW_NAMES)}")
    if status != ALL_STATUSES:
        _parse_status(status)

    store = _open_store(page_size)
    error = load_error(store)
    if error is not None:
        console.print(error)
        raise typer.Exit(code=1)

    store.set_search(search)
    store.set_status_filter(status)
    store.set_page(page)

    selected_day: date | None = day.date() if day else None
    console.print(build_view(view, selected_day).render(store.paginated_tasks))
    console.print(pagination_footer(store))
    _finish(store)


@app.command("show")
def show_task(task_id: str) -> None:
    """Show a single task."""
    store = _open_store()
    task = store.get_task(task_id)
    if task is None:
        console.print(f"[bold red]Task {task_id} not found.[/bold red]")
        _finish(store)
        raise typer.Exit(code=1)
    console.print(task_card(task))
    _finish(store)


@app.command("add")
def add_task(
    title: str,
    description: str,
    status: Annotated[
        Optional[str], typer.Option("--status", help=_STATUS_CHOICES)
    ] = None,
) -> None:
    """Create a task."""
    store = _open_store()
    task = store.create_task(title, description, _parse_status(status))
    if task is not None:
        console.print(f"[magenta]{task.id}[/magenta]")
    _finish(store)


@app.command("edit")
def edit_task(
    task_id: str,
    title: Annotated[Optional[str], typer.Option("--title")] = None,
    description: Annotated[Optional[str], typer.Option("--description")] = None,
    status: Annotated[Optional[str], typer.Option("--status", help=_STATUS_CHOICES)] = None,
) -> None:
    """Change any of title, description or status."""
    values: dict[str, object] = {}
    if title is not None:
        values["title"] = title
    if description is not None:
        values["description"] = description
    if status is not None:
        values["status"] = _parse_status(status)
    if not values:
        raise typer.BadParameter("nothing to change")

    store = _open_store()
    store.update_task(task_id, TaskPatch.of(**values))
    _finish(store)


@app.command("move")
def move_task(task_id: str, column: str) -> None:
    """Move a task to another board column."""
    destination = _parse_status(column)
    store = _open_store()
    task = store.get_task(task_id)
    if task is None:
        console.print(f"[bold red]Task {task_id} not found.[/bold red]")
        _finish(store)
        raise typer.Exit(code=1)

    moved = handle_drop(store, DropEvent(task.id, task.status, destination))
    if moved is None and not store.notifications.active():
        console.print(f"Task already in {task.status.label}.")
    _finish(store)


@app.command("delete")
def delete_task(task_id: str) -> None:
    """Delete a task."""
    store = _open_store()
    store.delete_task(task_id)
    _finish(store)


@app.command("serve")
def serve() -> None:
    """Run the REST server."""
    from main import run as run_server

    run_server()


def run() -> None:
    app()
