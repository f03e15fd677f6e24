from datetime import tzinfo

from rich.console import RenderableType
from rich.table import Table

from core.domain.models.task import Task
from frontend_terminal.views.common import created_label, empty, short_id, status_badge


class ListView:
    name = "list"

    def __init__(self, tz: tzinfo | None = None) -> None:
        self.tz = tz

    def render(self, tasks: list[Task]) -> RenderableType:
        if not tasks:
            return empty()

        table = Table(expand=True)
        table.add_column("ID", style="magenta", no_wrap=True)
        table.add_column("Title", style="bold")
        table.add_column("Description")
        table.add_column("Status", no_wrap=True)
        table.add_column("Created", style="dim", no_wrap=True)
        for task in tasks:
            table.add_row(
                short_id(task),
                task.title,
                task.description,
                status_badge(task.status),
                created_label(task, self.tz),
            )
        return table
