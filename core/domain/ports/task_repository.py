from __future__ import annotations

from abc import ABC, abstractmethod

from core.domain.models.task import Task


class TaskRepository(ABC):
    @abstractmethod
    def list(self) -> list[Task]:
        """Todas las tareas, de la más reciente a la más antigua."""
        raise NotImplementedError

    @abstractmethod
    def get(self, task_id: str) -> Task | None:
        raise NotImplementedError

    @abstractmethod
    def add(self, task: Task) -> None:
        raise NotImplementedError

    @abstractmethod
    def save(self, task: Task) -> bool:
        """Sobrescribe una tarea existente. Retorna False si no existe."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, task_id: str) -> bool:
        """Retorna False si no había nada que borrar."""
        raise NotImplementedError

    def replace_all(self, tasks: list[Task]) -> None:
        for task in self.list():
            self.delete(task.id)
        for task in tasks:
            self.add(task)
