"""
Contenedor de estado de tareas del lado cliente.

Guarda la colección completa (espejo de la remota) y los parámetros de
vista (búsqueda, estado, página, tamaño de página). Las vistas filtrada y
paginada se recalculan en cada lectura con las funciones puras de
`core.domain.views`.

Las mutaciones marcan una clave como pendiente mientras dura la llamada
al gateway; un segundo envío de la misma mutación mientras la primera
está pendiente se ignora. Si la llamada falla se publica un aviso y la
colección queda como estaba.
"""

import logging
import threading
from enum import Enum
from typing import Any, Callable

from core.application.notifications import NotificationCenter
from core.domain.errors import TaskError, TaskNotFoundError, TaskValidationError
from core.domain.models.task import Task, TaskPatch, TaskStatus
from core.domain.ports.task_gateway import (
    RemoteRequestError,
    RemoteUnavailableError,
    TaskGateway,
)
from core.domain.validation import STATUS_ERROR
from core.domain.views import (
    ALL_STATUSES,
    clamp_page,
    filter_tasks,
    paginate,
    sort_newest_first,
    total_pages,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 6
PAGE_SIZE_OPTIONS = (3, 6, 9, 12)

_GATEWAY_ERRORS = (TaskError, RemoteUnavailableError, RemoteRequestError)


class LoadState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


def _describe(error: Exception) -> str:
    if isinstance(error, TaskValidationError):
        return "; ".join(error.errors)
    if isinstance(error, RemoteUnavailableError):
        return "The task server is unreachable."
    if isinstance(error, RemoteRequestError):
        return error.message
    return str(error)


class TaskStore:
    def __init__(
        self,
        gateway: TaskGateway,
        page_size: int = DEFAULT_PAGE_SIZE,
        notifications: NotificationCenter | None = None,
    ) -> None:
        if page_size < 1:
            raise ValueError("page_size debe ser >= 1")
        self._gateway = gateway
        self.notifications = notifications or NotificationCenter()

        self._tasks: list[Task] = []
        self.load_state = LoadState.IDLE
        self.load_error: str | None = None

        self._search = ""
        self._status_filter: TaskStatus | str = ALL_STATUSES
        self._page = 1
        self._page_size = page_size

        self._pending: set[str] = set()
        self._lock = threading.Lock()

    # ── Colección y vistas derivadas ─────────────────────────────────────────

    @property
    def tasks(self) -> list[Task]:
        return list(self._tasks)

    @property
    def offline(self) -> bool:
        return bool(getattr(self._gateway, "offline", False))

    @property
    def filtered_tasks(self) -> list[Task]:
        return filter_tasks(self._tasks, self._search, self._status_filter)

    @property
    def paginated_tasks(self) -> list[Task]:
        return paginate(self.filtered_tasks, self._page, self._page_size)

    @property
    def total_pages(self) -> int:
        return total_pages(len(self.filtered_tasks), self._page_size)

    # ── Parámetros de vista ──────────────────────────────────────────────────

    @property
    def search(self) -> str:
        return self._search

    def set_search(self, text: str) -> None:
        self._search = text
        self._clamp_page()

    @property
    def status_filter(self) -> TaskStatus | str:
        return self._status_filter

    def set_status_filter(self, status: TaskStatus | str) -> None:
        self._status_filter = ALL_STATUSES if status == ALL_STATUSES else TaskStatus(status)
        self._clamp_page()

    @property
    def page(self) -> int:
        return self._page

    def set_page(self, page: int) -> bool:
        """Cambia de página; fuera de 1..total_pages no hace nada."""
        if 1 <= page <= self.total_pages:
            self._page = page
            return True
        return False

    @property
    def page_size(self) -> int:
        return self._page_size

    def set_page_size(self, size: int) -> None:
        if size < 1:
            raise ValueError("page_size debe ser >= 1")
        self._page_size = size
        self._clamp_page()

    def _clamp_page(self) -> None:
        self._page = clamp_page(self._page, len(self.filtered_tasks), self._page_size)

    # ── Carga ────────────────────────────────────────────────────────────────

    def refresh(self) -> bool:
        """Recarga la colección completa. Retorna False si falló."""
        first_load = self.load_state in (LoadState.IDLE, LoadState.ERROR)
        self.load_state = LoadState.LOADING
        try:
            tasks = self._gateway.list_tasks()
        except _GATEWAY_ERRORS as e:
            logger.error(f"❌ Error cargando tareas: {e}")
            if first_load:
                self.load_state = LoadState.ERROR
                self.load_error = _describe(e)
            else:
                self.load_state = LoadState.READY
                self.notifications.error("Error", "Failed to refresh tasks.")
            return False

        self._tasks = sort_newest_first(tasks)
        self.load_state = LoadState.READY
        self.load_error = None
        self._clamp_page()
        return True

    def get_task(self, task_id: str) -> Task | None:
        for task in self._tasks:
            if task.id == task_id:
                return task
        try:
            return self._gateway.get_task(task_id)
        except TaskNotFoundError:
            return None
        except _GATEWAY_ERRORS as e:
            logger.error(f"❌ Error obteniendo tarea {task_id}: {e}")
            self.notifications.error("Error", "Failed to load task.")
            return None

    # ── Mutaciones ───────────────────────────────────────────────────────────

    def is_pending(self, key: str | None = None) -> bool:
        with self._lock:
            return bool(self._pending) if key is None else key in self._pending

    def _mutate(
        self,
        key: str,
        action: Callable[[], Any],
        apply: Callable[[Any], None],
        failure: str,
    ) -> tuple[bool, Any]:
        with self._lock:
            if key in self._pending:
                logger.debug(f"Mutación {key} ya en curso; envío duplicado ignorado")
                return False, None
            self._pending.add(key)
        try:
            result = action()
        except _GATEWAY_ERRORS as e:
            logger.error(f"❌ {failure} ({key}): {e}")
            self.notifications.error(failure, _describe(e))
            return False, None
        finally:
            with self._lock:
                self._pending.discard(key)

        apply(result)
        self._clamp_page()
        return True, result

    def create_task(
        self, title: str, description: str, status: TaskStatus | None = None
    ) -> Task | None:
        def apply(task: Task) -> None:
            self._tasks = sort_newest_first([task, *self._tasks])

        ok, task = self._mutate(
            "create",
            lambda: self._gateway.create_task(title, description, status),
            apply,
            "Failed to create task",
        )
        if ok:
            self.notifications.success("Task created", f'"{task.title}" was added.')
        return task

    def update_task(
        self,
        task_id: str,
        patch: TaskPatch,
        success_message: str | None = None,
    ) -> Task | None:
        def apply(updated: Task) -> None:
            if any(t.id == task_id for t in self._tasks):
                self._tasks = [updated if t.id == task_id else t for t in self._tasks]
            else:
                self._tasks = sort_newest_first([updated, *self._tasks])

        ok, task = self._mutate(
            f"update:{task_id}",
            lambda: self._gateway.update_task(task_id, patch),
            apply,
            "Failed to update task",
        )
        if ok:
            self.notifications.success(
                "Task updated", success_message or f'"{task.title}" was saved.'
            )
        return task

    def move_task(self, task_id: str, status: TaskStatus | str) -> Task | None:
        """Cambia solo el estado; es la mutación que dispara el tablero."""
        try:
            destination = TaskStatus(status)
        except ValueError:
            self.notifications.error("Failed to update task", STATUS_ERROR)
            return None
        return self.update_task(
            task_id,
            TaskPatch.of(status=destination),
            success_message=f"Task moved to {destination.label}.",
        )

    def delete_task(self, task_id: str) -> bool:
        def apply(_: None) -> None:
            self._tasks = [t for t in self._tasks if t.id != task_id]

        ok, _ = self._mutate(
            f"delete:{task_id}",
            lambda: self._gateway.delete_task(task_id),
            apply,
            "Failed to delete task",
        )
        if ok:
            self.notifications.success("Task deleted", "The task was removed.")
        return ok
