"""Task mutations, each leaving one activity entry behind."""
import logging
from dataclasses import replace
from typing import Iterable, List

from ..models.requests import TaskCreateItem, UpdateTaskItem
from ..models.task import Priority, Task, TaskComment, TaskStatus
from ..services.exceptions import TaskNotFoundError
from .activity import ActivityRecorder, Clock, current_millis
from .constants import NEW_TASK_DESCRIPTION, PRIORITY_UPDATED_MESSAGE, TASK_NOT_FOUND_MESSAGE
from .policy import TASK_TYPES_BY_REFERENCE, PolicyTable, ensure_applicable
from .task_store import InMemoryTaskStore

logger = logging.getLogger(__name__)


class TaskMutationService:
    """Creates tasks and applies status, priority, description and comment changes."""

    def __init__(self, store: InMemoryTaskStore, recorder: ActivityRecorder,
                 policy: PolicyTable = TASK_TYPES_BY_REFERENCE,
                 clock: Clock = current_millis):
        self.store = store
        self.recorder = recorder
        self.policy = policy
        self.clock = clock

    def create(self, items: Iterable[TaskCreateItem], *, actor_id: int) -> List[Task]:
        """Create one ASSIGNED task per request item.

        Args:
            items: Tasks to create
            actor_id: Staff member creating the tasks

        Returns:
            The created tasks

        Raises:
            InvalidReferenceError: If an item's task type does not apply to its
                reference type; nothing is created in that case
        """
        items = list(items)
        for item in items:
            ensure_applicable(item.reference_type, item.task_type, self.policy)

        created = []
        for item in items:
            task = self.store.save(Task(
                id=None,
                reference_id=item.reference_id,
                reference_type=item.reference_type,
                task_type=item.task_type,
                assignee_id=item.assignee_id,
                status=TaskStatus.ASSIGNED,
                priority=item.priority,
                description=NEW_TASK_DESCRIPTION,
                created_time=self.clock(),
                task_deadline_time=item.task_deadline_time,
            ))
            self.recorder.record(task.id, f"User {actor_id} created this task", actor_id)
            logger.info(f"Created task {task.id} ({task.task_type.value}) for user {task.assignee_id}")
            created.append(task)
        return created

    def update(self, items: Iterable[UpdateTaskItem], *, actor_id: int) -> List[Task]:
        """Apply partial updates; only fields set on an item are changed.

        Every item is audited, including ones that change nothing.

        Raises:
            TaskNotFoundError: If any task id is unknown; nothing is applied in that case
        """
        items = list(items)
        current = {}
        for item in items:
            task = self.store.find_by_id(item.task_id)
            if task is None:
                raise TaskNotFoundError(item.task_id)
            current[item.task_id] = task

        updated = []
        for item in items:
            task = current[item.task_id]
            changes = {}
            if item.status is not None:
                changes["status"] = item.status
            if item.description is not None:
                changes["description"] = item.description
            if item.assignee_id is not None:
                changes["assignee_id"] = item.assignee_id

            task = self.store.save(replace(task, **changes))
            current[item.task_id] = task

            message = f"User {actor_id} updated task status to {task.status.value}"
            if "assignee_id" in changes:
                message += f"; reassigned to user {task.assignee_id}"
            self.recorder.record(task.id, message, actor_id)
            logger.info(f"Updated task {task.id}: {', '.join(changes) or 'no changes'}")
            updated.append(task)
        return updated

    def update_priority(self, task_id: int, priority: Priority, *, actor_id: int) -> str:
        """Change a task's priority.

        Returns:
            Status message; a not-found message when the task does not exist
        """
        task = self.store.find_by_id(task_id)
        if task is None:
            logger.info(f"Priority update skipped, task {task_id} not found")
            return TASK_NOT_FOUND_MESSAGE

        self.store.save(replace(task, priority=priority))
        self.recorder.record(task_id, f"User {actor_id} changed priority to {priority.value}", actor_id)
        return PRIORITY_UPDATED_MESSAGE

    def add_comment(self, task_id: int, comment_text: str, *, author_id: int) -> TaskComment:
        """Attach a comment to a task and audit it.

        Raises:
            TaskNotFoundError: If the task does not exist
        """
        comment = TaskComment(
            id=self.store.next_comment_id(),
            task_id=task_id,
            comment_text=comment_text,
            created_by=author_id,
            timestamp=self.clock(),
        )
        self.store.add_comment(comment)
        self.recorder.record(task_id, f"User {author_id} added a comment", author_id)
        return comment
