from datetime import date, datetime, timezone

import pytest

from core.domain.models.task import TaskStatus
from core.domain.views import (
    clamp_page,
    filter_tasks,
    group_by_status,
    paginate,
    tasks_by_date,
    tasks_on_day,
    total_pages,
)


@pytest.fixture
def tasks(task_factory):
    return [
        task_factory("Buy milk", "From the corner shop", TaskStatus.TODO, minutes=3),
        task_factory("Write report", "Quarterly MILK numbers", TaskStatus.IN_PROGRESS, minutes=2),
        task_factory("Call mom", "Sunday", TaskStatus.COMPLETED, minutes=1),
        task_factory("Pay rent", "Before the 5th", TaskStatus.TODO, minutes=0),
    ]


class TestFilter:
    def test_search_is_case_insensitive_over_title_and_description(self, tasks):
        result = filter_tasks(tasks, search="milk")
        assert [t.title for t in result] == ["Buy milk", "Write report"]

    def test_status_filter_is_exact(self, tasks):
        result = filter_tasks(tasks, status="todo")
        assert [t.title for t in result] == ["Buy milk", "Pay rent"]

    def test_search_and_status_are_combined(self, tasks):
        result = filter_tasks(tasks, search="MILK", status=TaskStatus.IN_PROGRESS)
        assert [t.title for t in result] == ["Write report"]

    def test_all_and_empty_search_keep_everything(self, tasks):
        assert filter_tasks(tasks, search="  ", status="all") == tasks

    @pytest.mark.parametrize("search", ["", "a", "milk", "zzz", "o"])
    @pytest.mark.parametrize("status", ["all", "todo", "in-progress", "completed"])
    def test_filtered_count_never_exceeds_collection(self, tasks, search, status):
        assert len(filter_tasks(tasks, search, status)) <= len(tasks)


class TestPagination:
    @pytest.mark.parametrize("count, size, expected", [
        (0, 6, 1),
        (1, 6, 1),
        (6, 6, 1),
        (7, 6, 2),
        (2, 1, 2),
        (12, 3, 4),
    ])
    def test_total_pages(self, count, size, expected):
        assert total_pages(count, size) == expected

    @pytest.mark.parametrize("count", range(1, 25))
    @pytest.mark.parametrize("size", [1, 3, 6, 9, 12])
    def test_total_pages_bounds(self, count, size):
        pages = total_pages(count, size)
        assert pages * size >= count
        assert (pages - 1) * size < count

    def test_paginate_slices_contiguously(self, tasks):
        assert paginate(tasks, 1, 3) == tasks[:3]
        assert paginate(tasks, 2, 3) == tasks[3:]
        assert paginate(tasks, 3, 3) == []

    @pytest.mark.parametrize("page", [1, 2, 3])
    @pytest.mark.parametrize("size", [1, 2, 3, 5])
    def test_page_never_exceeds_size_or_filtered(self, tasks, page, size):
        page_items = paginate(tasks, page, size)
        assert len(page_items) <= size
        assert len(page_items) <= len(tasks)

    def test_clamp_page(self):
        assert clamp_page(5, count=7, page_size=3) == 3
        assert clamp_page(2, count=0, page_size=3) == 1
        assert clamp_page(2, count=9, page_size=3) == 2

    def test_invalid_page_size(self, tasks):
        with pytest.raises(ValueError):
            total_pages(3, 0)
        with pytest.raises(ValueError):
            paginate(tasks, 1, 0)


class TestGrouping:
    def test_group_by_status_keeps_order_and_all_columns(self, tasks):
        columns = group_by_status(tasks)

        assert list(columns) == list(TaskStatus)
        assert [t.title for t in columns[TaskStatus.TODO]] == ["Buy milk", "Pay rent"]
        assert group_by_status([]) == {s: [] for s in TaskStatus}

    def test_calendar_buckets_by_creation_day(self, task_factory):
        late = task_factory("late", "x")
        late.created_at = datetime(2024, 5, 1, 23, 30, tzinfo=timezone.utc)
        early = task_factory("early", "x")
        early.created_at = datetime(2024, 5, 2, 0, 30, tzinfo=timezone.utc)
        same_day = task_factory("same", "x")
        same_day.created_at = datetime(2024, 5, 2, 9, 0, tzinfo=timezone.utc)
        tasks = [late, early, same_day]

        counts = tasks_by_date(tasks, tz=timezone.utc)

        assert counts == {date(2024, 5, 1): 1, date(2024, 5, 2): 2}
        assert tasks_on_day(tasks, date(2024, 5, 2), tz=timezone.utc) == [early, same_day]
        assert tasks_on_day(tasks, date(2024, 6, 1), tz=timezone.utc) == []
