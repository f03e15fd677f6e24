from unittest.mock import Mock

import pytest

from core.application.board import DropEvent, handle_drop
from core.application.task_store import TaskStore
from core.domain.models.task import TaskPatch, TaskStatus
from core.domain.ports.task_gateway import RemoteRequestError


@pytest.fixture
def card(task_factory):
    return task_factory("Card", "On the board")


@pytest.fixture
def gateway(card):
    gateway = Mock()
    gateway.list_tasks.return_value = [card]

    def update(task_id, patch):
        return patch.apply_to(card)

    gateway.update_task.side_effect = update
    return gateway


@pytest.fixture
def store(gateway):
    store = TaskStore(gateway)
    store.refresh()
    return store


def test_drop_on_other_column_issues_one_update(store, gateway, card):
    moved = handle_drop(store, DropEvent(card.id, "todo", "completed"))

    gateway.update_task.assert_called_once_with(
        card.id, TaskPatch.of(status=TaskStatus.COMPLETED)
    )
    assert gateway.update_task.call_args.args[1].to_dict() == {"status": "completed"}
    assert moved.status is TaskStatus.COMPLETED
    assert store.get_task(card.id).status is TaskStatus.COMPLETED
    assert store.notifications.active()[-1].message == "Task moved to Completed."


def test_drop_back_reverts_status(store, gateway, card):
    handle_drop(store, DropEvent(card.id, "todo", "completed"))
    handle_drop(store, DropEvent(card.id, "completed", "todo"))

    assert gateway.update_task.call_count == 2
    last_patch = gateway.update_task.call_args.args[1]
    assert last_patch.to_dict() == {"status": "todo"}
    assert store.get_task(card.id).status is TaskStatus.TODO


@pytest.mark.parametrize("destination", ["todo", TaskStatus.TODO, None])
def test_drop_on_origin_or_outside_is_noop(store, gateway, card, destination):
    assert handle_drop(store, DropEvent(card.id, "todo", destination)) is None

    gateway.update_task.assert_not_called()


def test_failed_move_keeps_card_in_place(store, gateway, card):
    gateway.update_task.side_effect = RemoteRequestError(500, "boom")

    assert handle_drop(store, DropEvent(card.id, "todo", "in-progress")) is None

    assert store.get_task(card.id).status is TaskStatus.TODO
    assert store.notifications.active()[-1].title == "Failed to update task"
