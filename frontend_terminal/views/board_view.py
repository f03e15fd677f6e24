from datetime import tzinfo

from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from core.application.board import BOARD_COLUMNS
from core.domain.models.task import Task
from core.domain.views import group_by_status
from frontend_terminal.views.common import STATUS_STYLES
from frontend_terminal.views.grid_view import task_card


class BoardView:
    """Tablero de tres columnas, una por estado."""

    name = "board"

    def __init__(self, tz: tzinfo | None = None) -> None:
        self.tz = tz

    def render(self, tasks: list[Task]) -> RenderableType:
        columns = group_by_status(tasks)

        table = Table(expand=True, show_lines=False)
        for status in BOARD_COLUMNS:
            table.add_column(
                f"{status.label} ({len(columns[status])})",
                header_style=f"bold {STATUS_STYLES[status]}",
                ratio=1,
            )
        table.add_row(
            *(
                Group(*(task_card(t, self.tz) for t in columns[status]))
                if columns[status]
                else Text("No tasks", style="dim")
                for status in BOARD_COLUMNS
            )
        )
        return table
