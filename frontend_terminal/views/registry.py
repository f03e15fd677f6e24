from datetime import date, tzinfo

from frontend_terminal.views.board_view import BoardView
from frontend_terminal.views.calendar_view import CalendarView
from frontend_terminal.views.grid_view import GridView
from frontend_terminal.views.list_view import ListView

VIEW_NAMES = ("list", "grid", "board", "calendar")


def build_view(
    name: str,
    selected_day: date | None = None,
    tz: tzinfo | None = None,
) -> ListView | GridView | BoardView | CalendarView:
    if name == "list":
        return ListView(tz)
    if name == "grid":
        return GridView(tz)
    if name == "board":
        return BoardView(tz)
    if name == "calendar":
        return CalendarView(selected_day, tz)
    raise ValueError(f"Vista desconocida: {name}. Opciones: {', '.join(VIEW_NAMES)}")
