"""Task management service exposing the caller-facing operations."""

import logging
from typing import List, Optional

from ..core.activity import ActivityRecorder, Clock, current_millis
from ..core.mutation import TaskMutationService
from ..core.policy import TASK_TYPES_BY_REFERENCE, PolicyTable
from ..core.query import TaskQueryEngine
from ..core.reconciler import ReconcileOutcome, ReferenceReconciler
from ..core.task_store import InMemoryTaskStore
from ..models.requests import (
    AddCommentRequest,
    AssignByReferenceRequest,
    TaskCreateRequest,
    TaskFetchByDateRequest,
    TaskPriorityUpdateRequest,
    UpdateTaskRequest,
)
from ..models.task import Priority, ReferenceType, Task
from ..models.views import ActivityView, CommentView, TaskDetailView, TaskView

logger = logging.getLogger(__name__)


def _views(tasks: List[Task]) -> List[TaskView]:
    return [TaskView.model_validate(task) for task in tasks]


class TaskManagementService:
    """Service for task management with clean abstractions over the core."""

    def __init__(self, store: Optional[InMemoryTaskStore] = None,
                 policy: PolicyTable = TASK_TYPES_BY_REFERENCE,
                 clock: Clock = current_millis):
        """Initialize task management service.

        Args:
            store: Task store (defaults to a fresh in-memory store)
            policy: Reference type to task type table
            clock: Source of epoch-millis timestamps
        """
        self.store = store if store is not None else InMemoryTaskStore()
        self.recorder = ActivityRecorder(self.store, clock)
        self.reconciler = ReferenceReconciler(self.store, self.recorder, policy, clock)
        self.queries = TaskQueryEngine(self.store)
        self.mutations = TaskMutationService(self.store, self.recorder, policy, clock)

    def create_tasks(self, request: TaskCreateRequest, actor_id: int) -> List[TaskView]:
        """Create a batch of tasks."""
        return _views(self.mutations.create(request.requests, actor_id=actor_id))

    def update_tasks(self, request: UpdateTaskRequest, actor_id: int) -> List[TaskView]:
        """Update a batch of tasks.

        Raises:
            TaskNotFoundError: If any task in the batch does not exist
        """
        return _views(self.mutations.update(request.requests, actor_id=actor_id))

    def assign_by_reference(self, request: AssignByReferenceRequest, actor_id: int) -> ReconcileOutcome:
        """Ensure one live task per applicable task type for a reference.

        Raises:
            InvalidReferenceError: If no task types apply to the reference type
        """
        return self.reconciler.reconcile(
            request.reference_id,
            request.reference_type,
            request.assignee_id,
            actor_id=actor_id,
        )

    def fetch_tasks_by_date(self, request: TaskFetchByDateRequest) -> List[TaskView]:
        """Fetch the worklist of a group of assignees."""
        return _views(self.queries.fetch_by_date(
            request.assignee_ids, request.start_date, request.end_date
        ))

    def find_task_by_id(self, task_id: int) -> TaskDetailView:
        """Get a task with its comments and activity history.

        Raises:
            TaskNotFoundError: If the task does not exist
        """
        details = self.queries.find_by_id(task_id)
        return TaskDetailView(
            **TaskView.model_validate(details.task).model_dump(),
            comments=[CommentView.model_validate(c) for c in details.comments],
            activity_history=[ActivityView.model_validate(a) for a in details.activity_history],
        )

    def update_priority(self, request: TaskPriorityUpdateRequest, actor_id: int) -> str:
        """Change a task's priority, returning a status message."""
        return self.mutations.update_priority(request.task_id, request.priority, actor_id=actor_id)

    def get_tasks_by_priority(self, priority: Priority) -> List[TaskView]:
        """Get every task with the given priority."""
        return _views(self.queries.get_by_priority(priority))

    def get_tasks_by_reference(self, reference_id: int, reference_type: ReferenceType,
                               include_terminal: bool = True) -> List[TaskView]:
        """Get the tasks raised against a reference."""
        return _views(self.queries.find_by_reference(reference_id, reference_type, include_terminal))

    def add_comment(self, request: AddCommentRequest) -> CommentView:
        """Attach a comment to a task.

        Raises:
            TaskNotFoundError: If the task does not exist
        """
        comment = self.mutations.add_comment(
            request.task_id, request.comment_text, author_id=request.user_id
        )
        logger.info(f"User {request.user_id} commented on task {request.task_id}")
        return CommentView.model_validate(comment)
