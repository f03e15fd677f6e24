from dataclasses import dataclass

from core.domain.errors import InvalidTaskIdError, TaskNotFoundError
from core.domain.models.task import is_valid_task_id
from core.domain.ports.task_repository import TaskRepository


@dataclass(slots=True)
class DeleteTaskCommand:
    id: str


class DeleteTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: DeleteTaskCommand) -> None:
        if not is_valid_task_id(cmd.id):
            raise InvalidTaskIdError(cmd.id)
        if not self._repository.delete(cmd.id):
            raise TaskNotFoundError(cmd.id)
