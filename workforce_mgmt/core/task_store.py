"""Task store holding tasks, comments and activity entries."""
import itertools
import json
import logging
import threading
from dataclasses import replace
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from ..models.task import ReferenceType, Task, TaskActivity, TaskComment
from ..services.exceptions import TaskNotFoundError

logger = logging.getLogger(__name__)


class InMemoryTaskStore:
    """Single owner of all task, comment and activity records.

    Reads hand out copies, so a caller only changes stored state through
    ``save``. Id sequences are process-wide and allocated under the store lock.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._tasks: Dict[int, Task] = {}
        self._comments: List[TaskComment] = []
        self._activity: List[TaskActivity] = []
        self._task_ids = itertools.count(1)
        self._comment_ids = itertools.count(1)
        self._activity_ids = itertools.count(1)

    def next_comment_id(self) -> int:
        """Allocate the next comment id."""
        with self._lock:
            return next(self._comment_ids)

    def next_activity_id(self) -> int:
        """Allocate the next activity id."""
        with self._lock:
            return next(self._activity_ids)

    def save(self, task: Task) -> Task:
        """Insert or overwrite a task, assigning an id to new tasks.

        Args:
            task: The task to store

        Returns:
            A copy of the stored task (with its id set)
        """
        with self._lock:
            if task.id is None:
                task = replace(task, id=next(self._task_ids))
            self._tasks[task.id] = replace(task)
            self._after_write()
            return replace(task)

    def find_by_id(self, task_id: int) -> Optional[Task]:
        """Get a task by id.

        Args:
            task_id: The task id

        Returns:
            Task if found, None otherwise
        """
        with self._lock:
            task = self._tasks.get(task_id)
            return replace(task) if task else None

    def find_all(self) -> List[Task]:
        """Get every task, in id order."""
        with self._lock:
            return [replace(task) for _, task in sorted(self._tasks.items())]

    def find_by_reference_id_and_type(self, reference_id: int,
                                      reference_type: ReferenceType) -> List[Task]:
        """Get all tasks raised against a reference."""
        return [
            task for task in self.find_all()
            if task.reference_id == reference_id and task.reference_type == reference_type
        ]

    def find_by_assignee_in(self, assignee_ids: Iterable[int]) -> List[Task]:
        """Get all tasks assigned to any of the given staff members."""
        wanted = set(assignee_ids)
        return [task for task in self.find_all() if task.assignee_id in wanted]

    def add_comment(self, comment: TaskComment) -> None:
        """Append a comment.

        Raises:
            TaskNotFoundError: If the owning task does not exist
        """
        with self._lock:
            if comment.task_id not in self._tasks:
                raise TaskNotFoundError(comment.task_id)
            self._comments.append(comment)
            self._after_write()

    def add_activity(self, activity: TaskActivity) -> None:
        """Append an activity entry.

        Raises:
            TaskNotFoundError: If the owning task does not exist
        """
        with self._lock:
            if activity.task_id not in self._tasks:
                raise TaskNotFoundError(activity.task_id)
            self._activity.append(activity)
            self._after_write()

    def all_comments(self) -> List[TaskComment]:
        with self._lock:
            return list(self._comments)

    def all_activity(self) -> List[TaskActivity]:
        with self._lock:
            return list(self._activity)

    def comments_for(self, task_id: int) -> List[TaskComment]:
        """Get a task's comments, oldest first."""
        comments = [c for c in self.all_comments() if c.task_id == task_id]
        return sorted(comments, key=lambda c: (c.timestamp, c.id))

    def activity_for(self, task_id: int) -> List[TaskActivity]:
        """Get a task's activity history, oldest first."""
        entries = [a for a in self.all_activity() if a.task_id == task_id]
        return sorted(entries, key=lambda a: (a.timestamp, a.id))

    def _after_write(self) -> None:
        """Hook called with the lock held after every write."""
        pass


class JsonTaskStore(InMemoryTaskStore):
    """In-memory store snapshotted to a JSON file after every write."""

    def __init__(self, store_file: Path):
        """Initialize the store, loading any existing snapshot.

        Args:
            store_file: Path of the JSON snapshot
        """
        super().__init__()
        self.store_file = store_file
        self._load()

    def _load(self) -> None:
        """Load the snapshot from disk and resume id sequences after it."""
        if not self.store_file.exists():
            return

        with open(self.store_file) as f:
            data = json.load(f)

        tasks = [Task.from_dict(item) for item in data.get("tasks", [])]
        comments = [TaskComment.from_dict(item) for item in data.get("comments", [])]
        activity = [TaskActivity.from_dict(item) for item in data.get("activity", [])]

        with self._lock:
            self._tasks = {task.id: task for task in tasks}
            self._comments = comments
            self._activity = activity
            self._task_ids = itertools.count(max(self._tasks, default=0) + 1)
            self._comment_ids = itertools.count(max((c.id for c in comments), default=0) + 1)
            self._activity_ids = itertools.count(max((a.id for a in activity), default=0) + 1)

        logger.debug(f"Loaded {len(tasks)} tasks from {self.store_file}")

    def _after_write(self) -> None:
        """Rewrite the snapshot file."""
        data = {
            "tasks": [task.to_dict() for _, task in sorted(self._tasks.items())],
            "comments": [comment.to_dict() for comment in self._comments],
            "activity": [entry.to_dict() for entry in self._activity],
        }
        self.store_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.store_file, 'w') as f:
            json.dump(data, f, indent=2)
