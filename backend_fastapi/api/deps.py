from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from infrastructure.container import (
    get_create_task_use_case,
    get_delete_task_use_case,
    get_get_task_use_case,
    get_list_tasks_use_case,
    get_update_task_use_case,
)


def create_task_use_case() -> CreateTaskUseCase:
    return get_create_task_use_case()


def get_task_use_case() -> GetTaskUseCase:
    return get_get_task_use_case()


def list_tasks_use_case() -> ListTasksUseCase:
    return get_list_tasks_use_case()


def update_task_use_case() -> UpdateTaskUseCase:
    return get_update_task_use_case()


def delete_task_use_case() -> DeleteTaskUseCase:
    return get_delete_task_use_case()
