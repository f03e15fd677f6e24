from datetime import date, timezone

import pytest
from rich.console import Console
from typer.testing import CliRunner

import frontend_terminal.app as cli
from conftest import make_task
from core.domain.models.task import TaskStatus
from frontend_terminal.views.registry import VIEW_NAMES, build_view
from infrastructure.local.task_gateway import LocalTaskGateway

runner = CliRunner()


def _render(renderable) -> str:
    console = Console(record=True, width=140, color_system=None)
    console.print(renderable)
    return console.export_text()


@pytest.fixture
def tasks():
    return [
        make_task("Plan sprint", "Backlog grooming", TaskStatus.TODO, minutes=2),
        make_task("Fix login", "Session bug", TaskStatus.IN_PROGRESS, minutes=1),
        make_task("Ship release", "Tag and publish", TaskStatus.COMPLETED),
    ]


class TestViews:

    @pytest.mark.parametrize("name", VIEW_NAMES)
    def test_every_view_renders_empty_state(self, name):
        out = _render(build_view(name, date(2024, 5, 1), timezone.utc).render([]))

        assert "No tasks" in out

    def test_list_view_shows_rows(self, tasks):
        out = _render(build_view("list", tz=timezone.utc).render(tasks))

        for task in tasks:
            assert task.title in out
        assert "In Progress" in out
        assert "May 01, 2024" in out

    def test_grid_view_shows_cards(self, tasks):
        out = _render(build_view("grid", tz=timezone.utc).render(tasks))

        assert "Ship release" in out
        assert tasks[0].id[-6:] in out

    def test_board_view_counts_per_column(self, tasks):
        out = _render(build_view("board", tz=timezone.utc).render(tasks[:2]))

        assert "To Do (1)" in out
        assert "In Progress (1)" in out
        assert "Completed (0)" in out

    def test_calendar_view_lists_selected_day(self, tasks):
        view = build_view("calendar", date(2024, 5, 1), timezone.utc)

        out = _render(view.render(tasks))

        assert "May 2024" in out
        assert "May 1, 2024" in out
        assert "Fix login" in out

    def test_calendar_view_day_without_tasks(self, tasks):
        out = _render(build_view("calendar", date(2024, 5, 2), timezone.utc).render(tasks))

        assert "No tasks found." in out

    def test_unknown_view(self):
        with pytest.raises(ValueError):
            build_view("kanban")


class TestCli:

    @pytest.fixture(autouse=True)
    def local_gateway(self, monkeypatch, memory_repo):
        gateway = LocalTaskGateway(memory_repo)
        monkeypatch.setattr(cli, "build_task_gateway", lambda settings=None: gateway)
        return gateway

    def test_add_and_list(self, memory_repo):
        result = runner.invoke(cli.app, ["add", "Buy milk", "Two litres"])

        assert result.exit_code == 0, result.output
        assert "Task created" in result.output
        [task] = memory_repo.list()
        assert task.status is TaskStatus.TODO

        result = runner.invoke(cli.app, ["list", "--view", "grid"])
        assert "Buy milk" in result.output
        assert "Page 1 of 1" in result.output

    def test_add_invalid_task_fails(self, memory_repo):
        result = runner.invoke(cli.app, ["add", " ", "desc"])

        assert result.exit_code == 1
        assert "Title is required" in result.output
        assert memory_repo.list() == []

    def test_list_filters_and_paginates(self, memory_repo):
        for i in range(5):
            memory_repo.add(make_task(f"Task {i}", "d", TaskStatus.TODO, minutes=i))
        memory_repo.add(make_task("Other", "d", TaskStatus.COMPLETED, minutes=10))

        result = runner.invoke(
            cli.app, ["list", "--status", "todo", "--page-size", "2", "--page", "3"]
        )

        assert result.exit_code == 0, result.output
        assert "Task 0" in result.output
        assert "Other" not in result.output
        assert "Page 3 of 3" in result.output

    def test_list_rejects_unknown_status(self):
        result = runner.invoke(cli.app, ["list", "--status", "done"])

        assert result.exit_code != 0

    def test_move_changes_status(self, memory_repo):
        task = make_task("Move me")
        memory_repo.add(task)

        result = runner.invoke(cli.app, ["move", task.id, "completed"])

        assert result.exit_code == 0, result.output
        assert "Task moved to Completed." in result.output
        assert memory_repo.get(task.id).status is TaskStatus.COMPLETED

    def test_move_to_same_column_is_a_no_op(self, memory_repo):
        task = make_task("Stay")
        memory_repo.add(task)

        result = runner.invoke(cli.app, ["move", task.id, "todo"])

        assert result.exit_code == 0
        assert "Task already in To Do." in result.output

    def test_edit_and_show(self, memory_repo):
        task = make_task("Old title")
        memory_repo.add(task)

        result = runner.invoke(cli.app, ["edit", task.id, "--title", "New title"])
        assert result.exit_code == 0, result.output

        result = runner.invoke(cli.app, ["show", task.id])
        assert "New title" in result.output

    def test_show_unknown_task(self):
        result = runner.invoke(cli.app, ["show", "65f000000000000000000000"])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_delete(self, memory_repo):
        task = make_task()
        memory_repo.add(task)

        result = runner.invoke(cli.app, ["delete", task.id])

        assert result.exit_code == 0
        assert "Task deleted" in result.output
        assert memory_repo.get(task.id) is None
