import pytest
from click.testing import CliRunner

from workforce_mgmt.core.activity import ActivityRecorder
from workforce_mgmt.core.task_store import InMemoryTaskStore
from workforce_mgmt.models.task import Priority, ReferenceType, Task, TaskStatus, TaskType
from workforce_mgmt.services.task_service import TaskManagementService


class FakeClock:
    """Deterministic epoch-millis clock advancing by `step` on every read."""

    def __init__(self, start=1_000, step=10):
        self.now = start
        self.step = step

    def __call__(self):
        value = self.now
        self.now += self.step
        return value


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def isolated_cli_runner(cli_runner):
    """Provides a CLI runner with isolated filesystem."""
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture
def clock():
    """Provides a deterministic clock."""
    return FakeClock()


@pytest.fixture
def store():
    """Provides an empty in-memory task store."""
    return InMemoryTaskStore()


@pytest.fixture
def recorder(store, clock):
    """Provides an activity recorder over the store."""
    return ActivityRecorder(store, clock)


@pytest.fixture
def service(store, clock):
    """Provides a task management service over the store."""
    return TaskManagementService(store, clock=clock)


@pytest.fixture
def make_task():
    """Factory for unsaved tasks with sensible defaults."""
    def _make_task(**overrides):
        fields = dict(
            id=None,
            reference_id=42,
            reference_type=ReferenceType.ORDER,
            task_type=TaskType.CREATE_INVOICE,
            assignee_id=7,
            status=TaskStatus.ASSIGNED,
            priority=Priority.MEDIUM,
            description="Test task",
            created_time=1_000,
        )
        fields.update(overrides)
        return Task(**fields)
    return _make_task
