from rich.console import Console
from rich.text import Text

from core.application.notifications import Notification, NotificationLevel
from core.application.task_store import LoadState, TaskStore

_LEVEL_STYLES = {
    NotificationLevel.SUCCESS: "green",
    NotificationLevel.ERROR: "bold red",
    NotificationLevel.INFO: "blue",
}


def notification_line(notification: Notification) -> Text:
    return Text.assemble(
        (f"{notification.title}: ", _LEVEL_STYLES[notification.level]),
        notification.message,
    )


def print_notifications(console: Console, store: TaskStore) -> list[Notification]:
    shown = store.notifications.active()
    for notification in shown:
        console.print(notification_line(notification))
        store.notifications.dismiss(notification.id)
    return shown


def pagination_footer(store: TaskStore) -> Text:
    filtered = len(store.filtered_tasks)
    footer = Text(
        f"Page {store.page} of {store.total_pages} · "
        f"{filtered} of {len(store.tasks)} tasks · "
        f"{store.page_size} per page",
        style="dim",
    )
    if store.offline:
        footer.append("  [offline: local copy]", style="bold yellow")
    return footer


def load_error(store: TaskStore) -> Text | None:
    if store.load_state is LoadState.ERROR:
        return Text(f"Could not load tasks: {store.load_error}", style="bold red")
    return None
