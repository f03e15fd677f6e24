from dataclasses import dataclass

from core.domain.errors import (
    InvalidTaskIdError,
    TaskNotFoundError,
    TaskValidationError,
)
from core.domain.models.task import Task, TaskPatch, is_valid_task_id
from core.domain.ports.task_repository import TaskRepository
from core.domain.validation import validate_patch


@dataclass(slots=True)
class UpdateTaskCommand:
    task_id: str
    patch: TaskPatch


class UpdateTaskUseCase:
    def __init__(self, repository: TaskRepository) -> None:
        self._repository = repository

    def execute(self, cmd: UpdateTaskCommand) -> Task:
        # Se valida el cuerpo antes de buscar la tarea: un patch inválido
        # es un 400 aunque la tarea no exista.
        errors = validate_patch(cmd.patch)
        if errors:
            raise TaskValidationError(errors)
        if not is_valid_task_id(cmd.task_id):
            raise InvalidTaskIdError(cmd.task_id)

        task = self._repository.get(cmd.task_id)
        if task is None:
            raise TaskNotFoundError(cmd.task_id)

        updated = cmd.patch.apply_to(task)
        if not self._repository.save(updated):
            # Borrada entre la lectura y la escritura.
            raise TaskNotFoundError(cmd.task_id)
        return updated
