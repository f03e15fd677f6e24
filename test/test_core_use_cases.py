import unittest

from core.application.create_task import CreateTaskCommand, CreateTaskUseCase
from core.application.delete_task import DeleteTaskCommand, DeleteTaskUseCase
from core.application.get_task import GetTaskUseCase
from core.application.list_tasks import ListTasksUseCase
from core.application.update_task import UpdateTaskCommand, UpdateTaskUseCase
from core.domain.errors import (
    InvalidTaskIdError,
    TaskNotFoundError,
    TaskValidationError,
)
from core.domain.models.task import TaskPatch, TaskStatus, is_valid_task_id, new_task_id
from memory_repository import InMemoryTaskRepository


class CoreUseCasesTests(unittest.TestCase):
    def setUp(self) -> None:
        self.repo = InMemoryTaskRepository()

    def _create(self, **kwargs) -> object:
        kwargs.setdefault("title", "A")
        kwargs.setdefault("description", "B")
        return CreateTaskUseCase(self.repo).execute(CreateTaskCommand(**kwargs))

    def test_create_task_uses_default_status_and_persists(self) -> None:
        task = self._create()

        self.assertTrue(is_valid_task_id(task.id))
        self.assertEqual(task.status, TaskStatus.TODO)
        self.assertIsNotNone(task.created_at.tzinfo)
        self.assertEqual(self.repo.get(task.id), task)

    def test_create_task_with_explicit_status(self) -> None:
        task = self._create(status="in-progress")

        self.assertEqual(task.status, TaskStatus.IN_PROGRESS)

    def test_create_task_accepts_not_started_alias(self) -> None:
        task = self._create(status="not-started")

        self.assertEqual(task.status, TaskStatus.TODO)

    def test_create_task_reports_every_error(self) -> None:
        with self.assertRaises(TaskValidationError) as ctx:
            self._create(title="   ", description=None, status="blocked")

        self.assertEqual(
            ctx.exception.errors,
            [
                "Title is required",
                "Description is required",
                "Status must be one of: todo, in-progress, completed",
            ],
        )
        self.assertEqual(self.repo.list(), [])

    def test_list_tasks_newest_first(self) -> None:
        first = self._create(title="first")
        second = self._create(title="second")

        tasks = ListTasksUseCase(self.repo).execute()

        self.assertEqual([t.id for t in tasks], [second.id, first.id])

    def test_get_task_unknown_id_is_not_found(self) -> None:
        with self.assertRaises(TaskNotFoundError) as ctx:
            GetTaskUseCase(self.repo).execute(new_task_id())

        self.assertNotIsInstance(ctx.exception, InvalidTaskIdError)
        self.assertEqual(ctx.exception.message, "Task not found")

    def test_get_task_malformed_id(self) -> None:
        with self.assertRaises(InvalidTaskIdError) as ctx:
            GetTaskUseCase(self.repo).execute("not-an-id")

        self.assertEqual(ctx.exception.message, "Task not found, invalid ID")

    def test_update_task_only_changes_given_fields(self) -> None:
        task = self._create()

        updated = UpdateTaskUseCase(self.repo).execute(
            UpdateTaskCommand(task.id, TaskPatch.of(status="completed"))
        )

        self.assertEqual(updated.status, TaskStatus.COMPLETED)
        self.assertEqual(updated.title, "A")
        self.assertEqual(updated.description, "B")
        self.assertEqual(updated.created_at, task.created_at)
        self.assertEqual(GetTaskUseCase(self.repo).execute(task.id), updated)

    def test_update_task_rejects_blank_and_null_fields(self) -> None:
        task = self._create()

        with self.assertRaises(TaskValidationError) as ctx:
            UpdateTaskUseCase(self.repo).execute(
                UpdateTaskCommand(task.id, TaskPatch.of(title="", description=None))
            )

        self.assertEqual(
            ctx.exception.errors,
            ["Title cannot be empty", "Description cannot be empty"],
        )
        self.assertEqual(self.repo.get(task.id).title, "A")

    def test_update_task_unknown_id(self) -> None:
        with self.assertRaises(TaskNotFoundError):
            UpdateTaskUseCase(self.repo).execute(
                UpdateTaskCommand(new_task_id(), TaskPatch.of(title="x"))
            )

    def test_update_task_malformed_id(self) -> None:
        with self.assertRaises(InvalidTaskIdError):
            UpdateTaskUseCase(self.repo).execute(
                UpdateTaskCommand("123", TaskPatch.of(title="x"))
            )

    def test_delete_task_removes_it(self) -> None:
        task = self._create()

        DeleteTaskUseCase(self.repo).execute(DeleteTaskCommand(id=task.id))

        self.assertIsNone(self.repo.get(task.id))

    def test_delete_unknown_task_leaves_collection_unchanged(self) -> None:
        task = self._create()

        with self.assertRaises(TaskNotFoundError):
            DeleteTaskUseCase(self.repo).execute(DeleteTaskCommand(id=new_task_id()))

        self.assertEqual(self.repo.list(), [task])


if __name__ == "__main__":
    unittest.main()
