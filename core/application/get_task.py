from core.domain.errors import InvalidTaskIdError, TaskNotFoundError
from core.domain.models.task import Task, is_valid_task_id
from core.domain.ports.task_repository import TaskRepository


class GetTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, task_id: str) -> Task:
        if not is_valid_task_id(task_id):
            raise InvalidTaskIdError(task_id)
        task = self._repository.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task
