"""Activity recorder appending audit trail entries."""
import logging
import threading
import time
from typing import Callable

from ..models.task import TaskActivity
from .task_store import InMemoryTaskStore

logger = logging.getLogger(__name__)

Clock = Callable[[], int]


def current_millis() -> int:
    """Current wall-clock time in epoch milliseconds."""
    return int(time.time() * 1000)


class ActivityRecorder:
    """Appends one immutable activity entry per task mutation."""

    def __init__(self, store: InMemoryTaskStore, clock: Clock = current_millis):
        """Initialize activity recorder.

        Args:
            store: Store that owns the entries and their id sequence
            clock: Source of epoch-millis timestamps
        """
        self.store = store
        self.clock = clock
        self._lock = threading.Lock()
        # Continue from the newest entry already stored, so a reloaded store
        # keeps its trail in order.
        self._last_timestamp = max((a.timestamp for a in store.all_activity()), default=0)

    def _next_timestamp(self) -> int:
        # Entries never go back in time even if the clock does.
        with self._lock:
            self._last_timestamp = max(self.clock(), self._last_timestamp)
            return self._last_timestamp

    def record(self, task_id: int, description: str, actor_id: int) -> TaskActivity:
        """Record an activity entry for a task.

        Args:
            task_id: The task the entry belongs to
            description: Human-readable description of the change
            actor_id: Staff member who made the change

        Returns:
            The recorded entry

        Raises:
            TaskNotFoundError: If the task does not exist
        """
        activity = TaskActivity(
            id=self.store.next_activity_id(),
            task_id=task_id,
            description=description,
            created_by=actor_id,
            timestamp=self._next_timestamp(),
        )
        self.store.add_activity(activity)
        logger.debug(f"Task {task_id}: {description}")
        return activity
