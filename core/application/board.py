from dataclasses import dataclass

from core.application.task_store import TaskStore
from core.domain.models.task import Task, TaskStatus

BOARD_COLUMNS: tuple[TaskStatus, ...] = tuple(TaskStatus)


@dataclass(frozen=True, slots=True)
class DropEvent:
    """Una tarjeta soltada en el tablero. `destination=None`: fuera de columna."""

    task_id: str
    source: TaskStatus | str
    destination: TaskStatus | str | None


def handle_drop(store: TaskStore, event: DropEvent) -> Task | None:
    """
    Traduce el gesto en como mucho una actualización de estado.

    Soltar en la misma columna o fuera de cualquier columna no hace nada.
    """
    if event.destination is None:
        return None
    source = TaskStatus(event.source)
    destination = TaskStatus(event.destination)
    if destination is source:
        return None

    return store.move_task(event.task_id, destination)
