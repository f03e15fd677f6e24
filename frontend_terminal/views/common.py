from datetime import tzinfo

from rich.text import Text

from core.domain.models.task import Task, TaskStatus
from core.domain.views import created_on

STATUS_STYLES = {
    TaskStatus.TODO: "yellow",
    TaskStatus.IN_PROGRESS: "cyan",
    TaskStatus.COMPLETED: "green",
}

EMPTY_MESSAGE = "No tasks found."


def status_badge(status: TaskStatus) -> Text:
    return Text(f" {status.label} ", style=f"bold black on {STATUS_STYLES[status]}")


def short_id(task: Task) -> str:
    return task.id[-6:]


def created_label(task: Task, tz: tzinfo | None = None) -> str:
    return created_on(task, tz).strftime("%b %d, %Y")


def empty() -> Text:
    return Text(EMPTY_MESSAGE, style="dim italic")
