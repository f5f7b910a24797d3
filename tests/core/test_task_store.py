"""Tests for the task stores."""
import json

import pytest

from workforce_mgmt.core.task_store import InMemoryTaskStore, JsonTaskStore
from workforce_mgmt.models.task import ReferenceType, TaskActivity, TaskComment, TaskStatus
from workforce_mgmt.services.exceptions import TaskNotFoundError


class TestInMemoryTaskStore:
    """Test cases for InMemoryTaskStore."""

    def test_save_assigns_sequential_ids(self, store, make_task):
        """Test that new tasks get increasing ids."""
        first = store.save(make_task())
        second = store.save(make_task())

        assert first.id == 1
        assert second.id == 2

    def test_save_existing_overwrites(self, store, make_task):
        """Test that saving a known id replaces the stored task."""
        task = store.save(make_task())
        task.status = TaskStatus.STARTED
        store.save(task)

        assert store.find_by_id(task.id).status == TaskStatus.STARTED
        assert len(store.find_all()) == 1

    def test_reads_return_copies(self, store, make_task):
        """Test that mutating a returned task does not change the store."""
        task = store.save(make_task())
        fetched = store.find_by_id(task.id)
        fetched.status = TaskStatus.CANCELLED

        assert store.find_by_id(task.id).status == TaskStatus.ASSIGNED

    def test_find_by_id_missing(self, store):
        """Test that an unknown id returns None."""
        assert store.find_by_id(99) is None

    def test_find_by_reference_id_and_type(self, store, make_task):
        """Test reference lookup matches both id and type."""
        order = store.save(make_task(reference_id=1, reference_type=ReferenceType.ORDER))
        store.save(make_task(reference_id=1, reference_type=ReferenceType.SHIPMENT))
        store.save(make_task(reference_id=2, reference_type=ReferenceType.ORDER))

        found = store.find_by_reference_id_and_type(1, ReferenceType.ORDER)
        assert [t.id for t in found] == [order.id]

    def test_find_by_assignee_in(self, store, make_task):
        """Test assignee lookup."""
        a = store.save(make_task(assignee_id=1))
        store.save(make_task(assignee_id=2))
        c = store.save(make_task(assignee_id=3))

        found = store.find_by_assignee_in([1, 3])
        assert [t.id for t in found] == [a.id, c.id]

    def test_add_comment_requires_task(self, store):
        """Test that comments on unknown tasks are rejected."""
        comment = TaskComment(id=1, task_id=5, comment_text="hi", created_by=1, timestamp=1)
        with pytest.raises(TaskNotFoundError, match="Task not found with id: 5"):
            store.add_comment(comment)
        assert store.all_comments() == []

    def test_add_activity_requires_task(self, store):
        """Test that activity on unknown tasks is rejected."""
        entry = TaskActivity(id=1, task_id=5, description="x", created_by=1, timestamp=1)
        with pytest.raises(TaskNotFoundError):
            store.add_activity(entry)

    def test_activity_for_sorted_by_timestamp(self, store, make_task):
        """Test per-task activity comes back oldest first."""
        task = store.save(make_task())
        store.add_activity(TaskActivity(id=1, task_id=task.id, description="late", created_by=1, timestamp=300))
        store.add_activity(TaskActivity(id=2, task_id=task.id, description="early", created_by=1, timestamp=100))

        assert [a.description for a in store.activity_for(task.id)] == ["early", "late"]

    def test_id_sequences_are_independent(self, store):
        """Test comment and activity sequences each start at 1."""
        assert store.next_comment_id() == 1
        assert store.next_comment_id() == 2
        assert store.next_activity_id() == 1


class TestJsonTaskStore:
    """Test cases for JsonTaskStore."""

    def test_snapshot_written_on_save(self, tmp_path, make_task):
        """Test that every write rewrites the snapshot."""
        store_file = tmp_path / "tasks.json"
        store = JsonTaskStore(store_file)
        store.save(make_task())

        data = json.loads(store_file.read_text())
        assert len(data["tasks"]) == 1
        assert data["tasks"][0]["status"] == "ASSIGNED"

    def test_reload_restores_state_and_sequences(self, tmp_path, make_task):
        """Test that a new store picks up where the last one stopped."""
        store_file = tmp_path / "tasks.json"
        store = JsonTaskStore(store_file)
        task = store.save(make_task())
        store.add_comment(TaskComment(
            id=store.next_comment_id(), task_id=task.id, comment_text="hi", created_by=3, timestamp=5
        ))

        reloaded = JsonTaskStore(store_file)

        assert reloaded.find_by_id(task.id) == task
        assert reloaded.comments_for(task.id)[0].comment_text == "hi"
        assert reloaded.save(make_task()).id == task.id + 1
        assert reloaded.next_comment_id() == 2

    def test_missing_file_starts_empty(self, tmp_path):
        """Test that no snapshot means an empty store and no file yet."""
        store = JsonTaskStore(tmp_path / "nested" / "tasks.json")
        assert store.find_all() == []
        assert not (tmp_path / "nested" / "tasks.json").exists()

    def test_is_an_in_memory_store(self, tmp_path):
        """Test the JSON store keeps the in-memory contract."""
        assert isinstance(JsonTaskStore(tmp_path / "tasks.json"), InMemoryTaskStore)
