import calendar
from datetime import date, tzinfo

from rich.console import Group, RenderableType
from rich.table import Table
from rich.text import Text

from core.domain.models.task import Task
from core.domain.views import tasks_by_date, tasks_on_day
from frontend_terminal.views.common import empty
from frontend_terminal.views.list_view import ListView


class CalendarView:
    """
    Mes del día seleccionado con el número de tareas creadas cada día,
    seguido de las tareas creadas ese día.
    """

    name = "calendar"

    def __init__(self, selected_day: date | None = None, tz: tzinfo | None = None) -> None:
        self.selected_day = selected_day or date.today()
        self.tz = tz

    def month_table(self, tasks: list[Task]) -> Table:
        counts = tasks_by_date(tasks, self.tz)
        day = self.selected_day

        table = Table(title=day.strftime("%B %Y"), show_lines=True)
        for name in calendar.day_abbr:
            table.add_column(name[:2], justify="center")

        for week in calendar.Calendar().monthdatescalendar(day.year, day.month):
            cells = []
            for current in week:
                style = "dim" if current.month != day.month else ""
                if current == day:
                    style = "reverse"
                cell = Text(str(current.day), style=style)
                if counts.get(current):
                    cell.append(f"\n{counts[current]}", style="bold magenta")
                cells.append(cell)
            table.add_row(*cells)
        return table

    def render(self, tasks: list[Task]) -> RenderableType:
        selected = tasks_on_day(tasks, self.selected_day, self.tz)
        day = self.selected_day
        heading = Text(f"{day:%B} {day.day}, {day.year}", style="bold")
        body = ListView(self.tz).render(selected) if selected else empty()
        return Group(self.month_table(tasks), heading, body)
