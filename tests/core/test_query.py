"""Tests for TaskQueryEngine."""
import pytest

from workforce_mgmt.core.query import TaskQueryEngine
from workforce_mgmt.models.task import Priority, ReferenceType, TaskActivity, TaskComment, TaskStatus
from workforce_mgmt.services.exceptions import TaskNotFoundError


@pytest.fixture
def engine(store):
    return TaskQueryEngine(store)


class TestFetchByDate:
    """Test the smart daily view and the unbounded worklist."""

    def test_window_rules(self, store, engine, make_task):
        """Test backlog in, future out, terminal out."""
        backlog = store.save(make_task(created_time=50))
        future = store.save(make_task(created_time=250))
        completed = store.save(make_task(created_time=150, status=TaskStatus.COMPLETED))

        ids = [t.id for t in engine.fetch_by_date([7], 100, 200)]

        assert backlog.id in ids
        assert future.id not in ids
        assert completed.id not in ids

    def test_window_includes_bounds(self, store, engine, make_task):
        at_start = store.save(make_task(created_time=100))
        at_end = store.save(make_task(created_time=200, status=TaskStatus.STARTED))

        ids = [t.id for t in engine.fetch_by_date([7], 100, 200)]

        assert ids == [at_start.id, at_end.id]

    def test_window_excludes_cancelled_backlog(self, store, engine, make_task):
        store.save(make_task(created_time=50, status=TaskStatus.CANCELLED))
        assert engine.fetch_by_date([7], 100, 200) == []

    def test_unbounded_excludes_only_cancelled(self, store, engine, make_task):
        """Test COMPLETED stays visible without bounds while CANCELLED never is."""
        completed = store.save(make_task(status=TaskStatus.COMPLETED))
        store.save(make_task(status=TaskStatus.CANCELLED))
        future = store.save(make_task(created_time=10_000))

        ids = [t.id for t in engine.fetch_by_date([7])]

        assert ids == [completed.id, future.id]

    def test_single_bound_is_unbounded(self, store, engine, make_task):
        late = store.save(make_task(created_time=500))
        assert [t.id for t in engine.fetch_by_date([7], start_date=100)] == [late.id]
        assert [t.id for t in engine.fetch_by_date([7], end_date=100)] == [late.id]

    def test_filters_by_assignee(self, store, engine, make_task):
        mine = store.save(make_task(assignee_id=1))
        store.save(make_task(assignee_id=2))
        theirs = store.save(make_task(assignee_id=3))

        assert [t.id for t in engine.fetch_by_date([1, 3])] == [mine.id, theirs.id]

    def test_ordered_by_creation_time(self, store, engine, make_task):
        later = store.save(make_task(created_time=90))
        earlier = store.save(make_task(created_time=10))

        assert [t.id for t in engine.fetch_by_date([7], 0, 100)] == [earlier.id, later.id]


class TestOtherQueries:
    """Test priority, reference and id lookups."""

    def test_get_by_priority_ignores_status(self, store, engine, make_task):
        urgent = store.save(make_task(priority=Priority.URGENT, status=TaskStatus.CANCELLED))
        store.save(make_task(priority=Priority.LOW))

        assert [t.id for t in engine.get_by_priority(Priority.URGENT)] == [urgent.id]

    def test_find_by_reference_active_only(self, store, engine, make_task):
        live = store.save(make_task())
        store.save(make_task(status=TaskStatus.COMPLETED))

        assert len(engine.find_by_reference(42, ReferenceType.ORDER)) == 2
        assert [t.id for t in engine.find_by_reference(42, ReferenceType.ORDER, include_terminal=False)] == [live.id]

    def test_find_by_id_attaches_sorted_history(self, store, engine, make_task):
        task = store.save(make_task())
        store.add_comment(TaskComment(id=1, task_id=task.id, comment_text="second", created_by=1, timestamp=20))
        store.add_comment(TaskComment(id=2, task_id=task.id, comment_text="first", created_by=1, timestamp=10))
        store.add_activity(TaskActivity(id=1, task_id=task.id, description="b", created_by=1, timestamp=30))
        store.add_activity(TaskActivity(id=2, task_id=task.id, description="a", created_by=1, timestamp=5))

        details = engine.find_by_id(task.id)

        assert details.task == task
        assert [c.comment_text for c in details.comments] == ["first", "second"]
        assert [a.description for a in details.activity_history] == ["a", "b"]

    def test_find_by_id_unknown(self, engine):
        with pytest.raises(TaskNotFoundError) as excinfo:
            engine.find_by_id(404)
        assert excinfo.value.task_id == 404
