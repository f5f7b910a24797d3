"""Read-only task queries, including the smart daily view."""
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from ..models.task import (
    NON_TERMINAL_STATUSES,
    Priority,
    ReferenceType,
    Task,
    TaskActivity,
    TaskComment,
    TaskStatus,
)
from ..services.exceptions import TaskNotFoundError
from .task_store import InMemoryTaskStore


@dataclass
class TaskDetails:
    """A task together with its comments and activity history."""
    task: Task
    comments: List[TaskComment] = field(default_factory=list)
    activity_history: List[TaskActivity] = field(default_factory=list)


def _by_creation(tasks: List[Task]) -> List[Task]:
    return sorted(tasks, key=lambda t: (t.created_time, t.id))


class TaskQueryEngine:
    """Filters tasks held by the store. Never writes."""

    def __init__(self, store: InMemoryTaskStore):
        self.store = store

    def fetch_by_date(self, assignee_ids: Iterable[int], start_date: Optional[int] = None,
                      end_date: Optional[int] = None) -> List[Task]:
        """Fetch the worklist of a group of assignees.

        With both bounds this is the smart daily view: open tasks (ASSIGNED or
        STARTED) created inside [start_date, end_date] plus open backlog
        created before start_date. Anything created after end_date is left out.

        Without both bounds every task of the assignees is returned except
        CANCELLED ones.

        Args:
            assignee_ids: Staff members whose tasks to fetch
            start_date: Window start in epoch millis
            end_date: Window end in epoch millis

        Returns:
            Matching tasks ordered by creation time
        """
        tasks = self.store.find_by_assignee_in(assignee_ids)

        if start_date is not None and end_date is not None:
            selected = [
                task for task in tasks
                if task.status in NON_TERMINAL_STATUSES
                and (start_date <= task.created_time <= end_date or task.created_time < start_date)
            ]
        else:
            selected = [task for task in tasks if task.status != TaskStatus.CANCELLED]

        return _by_creation(selected)

    def get_by_priority(self, priority: Priority) -> List[Task]:
        """Get every task with exactly this priority, whatever its status."""
        return [task for task in self.store.find_all() if task.priority == priority]

    def find_by_reference(self, reference_id: int, reference_type: ReferenceType,
                          include_terminal: bool = True) -> List[Task]:
        """Get the tasks raised against a reference."""
        tasks = self.store.find_by_reference_id_and_type(reference_id, reference_type)
        if not include_terminal:
            tasks = [task for task in tasks if task.status in NON_TERMINAL_STATUSES]
        return _by_creation(tasks)

    def find_by_id(self, task_id: int) -> TaskDetails:
        """Get a task with its comments and activity, oldest first.

        Raises:
            TaskNotFoundError: If the task does not exist
        """
        task = self.store.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)

        return TaskDetails(
            task=task,
            comments=self.store.comments_for(task_id),
            activity_history=self.store.activity_for(task_id),
        )
