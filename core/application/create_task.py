from dataclasses import dataclass

from core.domain.errors import TaskValidationError
from core.domain.models.task import (
    DEFAULT_STATUS,
    Task,
    TaskStatus,
    new_task_id,
    utcnow,
)
from core.domain.ports.task_repository import TaskRepository
from core.domain.validation import status_missing, validate_new_task


@dataclass(slots=True)
class CreateTaskCommand:
    title: str | None = None
    description: str | None = None
    status: TaskStatus | str | None = None


class CreateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: CreateTaskCommand) -> Task:
        errors = validate_new_task(cmd.title, cmd.description, cmd.status)
        if errors:
            raise TaskValidationError(errors)

        task = Task(
            id=new_task_id(),
            title=cmd.title,  # type: ignore[arg-type]
            description=cmd.description,  # type: ignore[arg-type]
            status=DEFAULT_STATUS if status_missing(cmd.status) else TaskStatus(cmd.status),
            created_at=utcnow(),
        )
        self._repository.add(task)
        return task
