from abc import ABC, abstractmethod

from core.domain.models.task import Task, TaskPatch, TaskStatus


class TaskGateway(ABC):
    """
    Interfaz de almacenamiento del lado cliente.

    Las implementaciones lanzan las excepciones de `core.domain.errors`
    (validación, no encontrada) o `RemoteUnavailableError` cuando el
    servidor no responde.
    """

    @abstractmethod
    def list_tasks(self) -> list[Task]:
        raise NotImplementedError

    @abstractmethod
    def get_task(self, task_id: str) -> Task:
        raise NotImplementedError

    @abstractmethod
    def create_task(
        self, title: str, description: str, status: TaskStatus | None = None
    ) -> Task:
        raise NotImplementedError

    @abstractmethod
    def update_task(self, task_id: str, patch: TaskPatch) -> Task:
        raise NotImplementedError

    @abstractmethod
    def delete_task(self, task_id: str) -> None:
        raise NotImplementedError


class RemoteUnavailableError(ConnectionError):
    """No se pudo contactar con el servidor (conexión o timeout)."""


class RemoteRequestError(Exception):
    """El servidor respondió con un error no mapeable a validación / 404."""

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(f"{status_code}: {message}")
        self.status_code = status_code
        self.message = message
