"""Models for Workforce Management."""

from .config import WorkforceConfig
from .task import (
    NON_TERMINAL_STATUSES,
    Priority,
    ReferenceType,
    Task,
    TaskActivity,
    TaskComment,
    TaskStatus,
    TaskType,
)
from .requests import (
    AddCommentRequest,
    AssignByReferenceRequest,
    TaskCreateItem,
    TaskCreateRequest,
    TaskFetchByDateRequest,
    TaskPriorityUpdateRequest,
    UpdateTaskItem,
    UpdateTaskRequest,
)
from .views import ActivityView, CommentView, TaskDetailView, TaskView

__all__ = [
    'WorkforceConfig',
    'NON_TERMINAL_STATUSES',
    'Priority',
    'ReferenceType',
    'Task',
    'TaskActivity',
    'TaskComment',
    'TaskStatus',
    'TaskType',
    'AddCommentRequest',
    'AssignByReferenceRequest',
    'TaskCreateItem',
    'TaskCreateRequest',
    'TaskFetchByDateRequest',
    'TaskPriorityUpdateRequest',
    'UpdateTaskItem',
    'UpdateTaskRequest',
    'ActivityView',
    'CommentView',
    'TaskDetailView',
    'TaskView',
]
