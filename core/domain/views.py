"""
Vistas derivadas de la colección de tareas.

Funciones puras: reciben la colección y los parámetros de vista y
devuelven listas nuevas, sin tocar las tareas.
"""

import math
from collections import defaultdict
from datetime import date, tzinfo

from core.domain.models.task import Task, TaskStatus

ALL_STATUSES = "all"


def sort_newest_first(tasks: list[Task]) -> list[Task]:
    return sorted(tasks, key=lambda t: t.created_at, reverse=True)


def filter_tasks(
    tasks: list[Task],
    search: str = "",
    status: TaskStatus | str = ALL_STATUSES,
) -> list[Task]:
    """Búsqueda sin distinguir mayúsculas en título o descripción + estado exacto."""
    term = search.strip().lower()
    wanted = None if status == ALL_STATUSES else TaskStatus(status)

    result = []
    for task in tasks:
        if wanted is not None and task.status is not wanted:
            continue
        if term and term not in task.title.lower() and term not in task.description.lower():
            continue
        result.append(task)
    return result


def total_pages(count: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError("page_size debe ser >= 1")
    return max(1, math.ceil(count / page_size))


def clamp_page(page: int, count: int, page_size: int) -> int:
    return max(1, min(page, total_pages(count, page_size)))


def paginate(tasks: list[Task], page: int, page_size: int) -> list[Task]:
    """Devuelve la página `page` (base 1) de tamaño `page_size`."""
    if page_size < 1:
        raise ValueError("page_size debe ser >= 1")
    start = (page - 1) * page_size
    if start < 0:
        return []
    return tasks[start:start + page_size]


def group_by_status(tasks: list[Task]) -> dict[TaskStatus, list[Task]]:
    columns: dict[TaskStatus, list[Task]] = {status: [] for status in TaskStatus}
    for task in tasks:
        columns[task.status].append(task)
    return columns


def created_on(task: Task, tz: tzinfo | None = None) -> date:
    # Sin tz explícita se usa la zona local, como haría un navegador.
    return task.created_at.astimezone(tz).date()


def tasks_by_date(tasks: list[Task], tz: tzinfo | None = None) -> dict[date, int]:
    counts: dict[date, int] = defaultdict(int)
    for task in tasks:
        counts[created_on(task, tz)] += 1
    return dict(counts)


def tasks_on_day(tasks: list[Task], day: date, tz: tzinfo | None = None) -> list[Task]:
    return [task for task in tasks if created_on(task, tz) == day]
