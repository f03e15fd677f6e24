from functools import lru_cache

from core.application.create_task import CreateTaskUseCase
from core.application.delete_task import DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskUseCase
from core.domain.ports.task_gateway import TaskGateway
from core.domain.ports.task_repository import TaskRepository
from infrastructure.config import ClientSettings, ServerSettings
from infrastructure.fallback.task_gateway import FallbackTaskGateway
from infrastructure.http.task_gateway import HttpTaskGateway
from infrastructure.local.task_gateway import LocalTaskGateway
from infrastructure.mongo.repository.task_repository import MongoTaskRepository
from infrastructure.peewee.repository.task_repository import PeeweeTaskRepository
from infrastructure.peewee.session.db import init_db


@lru_cache(maxsize=1)
def get_task_repository() -> TaskRepository:
    settings = ServerSettings.from_env()

    if settings.task_store == "sqlite":
        init_db(settings.database_url)
        return PeeweeTaskRepository()
    # Default to MongoDB
    return MongoTaskRepository()


def get_create_task_use_case() -> CreateTaskUseCase:
    return CreateTaskUseCase(repository=get_task_repository())


def get_get_task_use_case() -> GetTaskUseCase:
    return GetTaskUseCase(repository=get_task_repository())


def get_list_tasks_use_case() -> ListTasksUseCase:
    return ListTasksUseCase(repository=get_task_repository())


def get_update_task_use_case() -> UpdateTaskUseCase:
    return UpdateTaskUseCase(repository=get_task_repository())


def get_delete_task_use_case() -> DeleteTaskUseCase:
    return DeleteTaskUseCase(repository=get_task_repository())


def build_task_gateway(settings: ClientSettings | None = None) -> TaskGateway:
    settings = settings or ClientSettings.from_env()
    remote = HttpTaskGateway(settings.api_url, timeout=settings.api_timeout)
    if not settings.offline_fallback:
        return remote

    init_db(settings.local_db)
    return FallbackTaskGateway(
        remote=remote,
        local=LocalTaskGateway(PeeweeTaskRepository()),
    )
