from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.models.task import Task, TaskPatch, TaskStatus
from core.domain.ports.task_gateway import TaskGateway
from core.domain.ports.task_repository import TaskRepository


class LocalTaskGateway(TaskGateway):
    """
    Gateway sin red: aplica los mismos casos de uso que el servidor sobre
    un repositorio local, con la misma validación.
    """

    def __init__(self, repository: TaskRepository) -> None:
        self.repository = repository

    def list_tasks(self) -> list[Task]:
        return ListTasksUseCase(self.repository).execute()

    def get_task(self, task_id: str) -> Task:
        return GetTaskUseCase(self.repository).execute(task_id)

    def create_task(
        self, title: str, description: str, status: TaskStatus | None = None
    ) -> Task:
        cmd = CreateTaskCommand(title=title, description=description, status=status)
        return CreateTaskUseCase(self.repository).execute(cmd)

    def update_task(self, task_id: str, patch: TaskPatch) -> Task:
        cmd = UpdateTaskCommand(task_id=task_id, patch=patch)
        return UpdateTaskUseCase(self.repository).execute(cmd)

    def delete_task(self, task_id: str) -> None:
        DeleteTaskUseCase(self.repository).execute(DeleteTaskCommand(id=task_id))

    def replace_all(self, tasks: list[Task]) -> None:
        self.repository.replace_all(tasks)
