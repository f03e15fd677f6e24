from datetime import tzinfo

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from core.domain.models.task import Task
from frontend_terminal.views.common import (
    STATUS_STYLES,
    created_label,
    empty,
    short_id,
    status_badge,
)

CARD_WIDTH = 36


def task_card(task: Task, tz: tzinfo | None = None) -> Panel:
    body = Group(
        Text(task.description),
        Text(),
        Text.assemble(status_badge(task.status), "  ", (created_label(task, tz), "dim")),
    )
    return Panel(
        body,
        title=Text(task.title, style="bold"),
        subtitle=short_id(task),
        border_style=STATUS_STYLES[task.status],
        width=CARD_WIDTH,
    )


class GridView:
    name = "grid"

    def __init__(self, tz: tzinfo | None = None) -> None:
        self.tz = tz

    def render(self, tasks: list[Task]) -> RenderableType:
        if not tasks:
            return empty()
        return Columns([task_card(task, self.tz) for task in tasks], equal=True)
