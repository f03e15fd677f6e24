from datetime import datetime, timedelta, timezone

import pytest

from core.domain.models.task import Task, TaskStatus, new_task_id
from memory_repository import InMemoryTaskRepository

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_task(
    title: str = "Task",
    description: str = "Description",
    status: TaskStatus = TaskStatus.TODO,
    minutes: int = 0,
) -> Task:
    return Task(
        id=new_task_id(),
        title=title,
        description=description,
        status=status,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


@pytest.fixture
def memory_repo():
    return InMemoryTaskRepository()


@pytest.fixture
def task_factory():
    return make_task
