from core.domain.models.task import Task
from core.domain.ports.task_repository import TaskRepository
from core.domain.views import sort_newest_first


class InMemoryTaskRepository(TaskRepository):
    def __init__(self) -> None:
        self._data: dict[str, Task] = {}

    def list(self) -> list[Task]:
        return sort_newest_first(list(self._data.values()))

    def get(self, task_id: str) -> Task | None:
        return self._data.get(task_id)

    def add(self, task: Task) -> None:
        self._data[task.id] = task

    def save(self, task: Task) -> bool:
        if task.id not in self._data:
            return False
        self._data[task.id] = task
        return True

    def delete(self, task_id: str) -> bool:
        return self._data.pop(task_id, None) is not None
