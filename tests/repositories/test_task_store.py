"""Unit tests for the in-memory TaskStore."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest

from tasktrack_cli.exceptions import MalformedInputError, TaskNotFoundError
from tasktrack_cli.models import Task, TaskStatus
from tasktrack_cli.repositories import TaskStore

DUE = date(2024, 1, 1)
LATER = datetime(2024, 3, 2, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def store(clock):
    return TaskStore(clock=clock)


# ---------------------------------------------------------------------------
# create / get
# ---------------------------------------------------------------------------


class TestCreate:
    def test_first_id_is_one(self, store):
        assert store.create("Buy milk", DUE) == 1

    def test_ids_strictly_increase_across_deletes(self, store):
        ids = [store.create("a", DUE), store.create("b", DUE)]
        store.delete(2)
        ids.append(store.create("c", DUE))
        store.delete(1)
        store.delete(3)
        ids.append(store.create("d", DUE))

        assert ids == [1, 2, 3, 4]
        assert store.next_id == 5

    def test_new_task_is_pending_without_completion(self, store):
        task_id = store.create("Buy milk", DUE)
        task = store.get(task_id)

        assert task.id == task_id
        assert task.description == "Buy milk"
        assert task.status is TaskStatus.PENDING
        assert task.due_date == DUE
        assert task.completed_date is None

    def test_description_is_stripped(self, store):
        task_id = store.create("  Buy milk \n", DUE)
        assert store.get(task_id).description == "Buy milk"

    @pytest.mark.parametrize("description", ["", "   ", "\t"])
    def test_blank_description_rejected_without_consuming_id(self, store, description):
        with pytest.raises(MalformedInputError):
            store.create(description, DUE)
        assert store.next_id == 1
        assert len(store) == 0

    def test_get_missing_raises_not_found(self, store):
        with pytest.raises(TaskNotFoundError) as exc_info:
            store.get(42)
        assert exc_info.value.task_id == 42
        assert "42" in str(exc_info.value)

    def test_contains(self, store):
        store.create("Buy milk", DUE)
        assert 1 in store
        assert 2 not in store


# ---------------------------------------------------------------------------
# update / delete
# ---------------------------------------------------------------------------


class TestUpdate:
    def test_only_description_changes(self, store):
        task_id = store.create("Buy milk", DUE)
        store.complete(task_id)
        before = store.get(task_id).model_copy()

        store.update(task_id, "Buy oat milk")
        after = store.get(task_id)

        assert after.description == "Buy oat milk"
        assert after.id == before.id
        assert after.status == before.status
        assert after.due_date == before.due_date
        assert after.completed_date == before.completed_date

    def test_update_missing_raises_not_found(self, store):
        with pytest.raises(TaskNotFoundError):
            store.update(7, "anything")

    def test_update_blank_keeps_old_description(self, store):
        task_id = store.create("Buy milk", DUE)
        with pytest.raises(MalformedInputError):
            store.update(task_id, "  ")
        assert store.get(task_id).description == "Buy milk"


class TestDelete:
    def test_delete_then_get_is_not_found(self, store):
        task_id = store.create("Buy milk", DUE)
        removed = store.delete(task_id)

        assert removed.id == task_id
        with pytest.raises(TaskNotFoundError):
            store.get(task_id)

    def test_deleted_id_is_never_reissued(self, store):
        store.create("a", DUE)
        store.delete(1)
        assert store.create("b", DUE) == 2

    def test_delete_missing_raises_not_found(self, store):
        with pytest.raises(TaskNotFoundError):
            store.delete(1)


# ---------------------------------------------------------------------------
# complete
# ---------------------------------------------------------------------------


class TestComplete:
    def test_sets_status_and_completion_time(self, store, clock):
        task_id = store.create("Buy milk", DUE)
        task = store.complete(task_id)

        assert task.status is TaskStatus.COMPLETE
        assert task.completed_date == clock()
        assert task.is_complete

    def test_completing_twice_keeps_first_timestamp(self, clock):
        times = iter([clock(), LATER])
        store = TaskStore(clock=lambda: next(times))
        task_id = store.create("Buy milk", DUE)

        first = store.complete(task_id).completed_date
        second = store.complete(task_id).completed_date

        assert first == second == clock()

    def test_complete_missing_raises_not_found(self, store):
        with pytest.raises(TaskNotFoundError):
            store.complete(3)

    def test_default_clock_is_timezone_aware(self):
        store = TaskStore()
        task_id = store.create("Buy milk", DUE)
        assert store.complete(task_id).completed_date.tzinfo is not None


# ---------------------------------------------------------------------------
# listing / reconciliation
# ---------------------------------------------------------------------------


class TestListAndLoad:
    def test_list_is_newest_first(self, store):
        for name in ("a", "b", "c"):
            store.create(name, DUE)
        store.delete(2)

        assert [t.id for t in store.list_tasks()] == [3, 1]

    def test_list_empty(self, store):
        assert store.list_tasks() == []

    def test_from_tasks_sets_counter_past_highest_id(self):
        tasks = [
            Task(id=3, description="c", due_date=DUE),
            Task(id=9, description="i", due_date=DUE),
        ]
        store = TaskStore.from_tasks(tasks)

        assert store.next_id == 10
        assert store.create("next", DUE) == 10

    def test_from_tasks_empty_starts_at_one(self):
        assert TaskStore.from_tasks([]).next_id == 1

    def test_tasks_returns_a_copy(self, store):
        store.create("a", DUE)
        snapshot = store.tasks()
        snapshot.clear()
        assert len(store) == 1
