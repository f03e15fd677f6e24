from __future__ import annotations

import logging
from datetime import datetime, timezone

from peewee import PeeweeException

from core.domain.errors import TaskStorageError
from core.domain.models.task import Task, TaskStatus
from core.domain.ports.task_repository import TaskRepository
from infrastructure.peewee.model.models import TaskModel
from infrastructure.peewee.session.db import get_db

logger = logging.getLogger(__name__)


def _to_naive_utc(value: datetime) -> datetime:
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _to_domain(model: TaskModel) -> Task:
    try:
        status = TaskStatus(model.status)
    except ValueError as e:
        raise TaskStorageError(f"Invalid task row {model.id}: {e}") from e
    return Task(
        id=model.id,
        title=model.title,
        description=model.description,
        status=status,
        created_at=model.created_at.replace(tzinfo=timezone.utc),
    )


class PeeweeTaskRepository(TaskRepository):
    """Repositorio SQL (SQLite por defecto) usado como store local."""

    def __init__(self) -> None:
        self._db = get_db()
        self._db.connect(reuse_if_open=True)
        self._db.create_tables([TaskModel], safe=True)

    def list(self) -> list[Task]:
        try:
            query = TaskModel.select().order_by(TaskModel.created_at.desc())
            return [_to_domain(t) for t in query]
        except PeeweeException as e:
            raise TaskStorageError(str(e)) from e

    def get(self, task_id: str) -> Task | None:
        try:
            model = TaskModel.get_or_none(TaskModel.id == task_id)
        except PeeweeException as e:
            raise TaskStorageError(str(e)) from e
        return _to_domain(model) if model is not None else None

    def add(self, task: Task) -> None:
        try:
            TaskModel.create(
                id=task.id,
                title=task.title,
                description=task.description,
                status=task.status.value,
                created_at=_to_naive_utc(task.created_at),
            )
        except PeeweeException as e:
            raise TaskStorageError(str(e)) from e

    def save(self, task: Task) -> bool:
        try:
            updated = (
                TaskModel.update(
                    title=task.title,
                    description=task.description,
                    status=task.status.value,
                )
                .where(TaskModel.id == task.id)
                .execute()
            )
        except PeeweeException as e:
            raise TaskStorageError(str(e)) from e
        return updated > 0

    def delete(self, task_id: str) -> bool:
        try:
            deleted = TaskModel.delete().where(TaskModel.id == task_id).execute()
        except PeeweeException as e:
            raise TaskStorageError(str(e)) from e
        return deleted > 0

    def replace_all(self, tasks: list[Task]) -> None:
        try:
            with self._db.atomic():
                TaskModel.delete().execute()
                for task in tasks:
                    self.add(task)
        except PeeweeException as e:
            raise TaskStorageError(str(e)) from e
        logger.debug(f"💾 Espejo local sustituido por {len(tasks)} tareas")
