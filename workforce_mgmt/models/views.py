"""View models returned to callers."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .task import Priority, ReferenceType, TaskStatus, TaskType


class TaskView(BaseModel):
    """Task as seen by callers."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    reference_id: int
    reference_type: ReferenceType
    task_type: TaskType
    assignee_id: int
    status: TaskStatus
    priority: Priority
    description: str
    created_time: int
    task_deadline_time: Optional[int] = None


class CommentView(BaseModel):
    """Comment as seen by callers."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    task_id: int
    comment_text: str
    created_by: int
    timestamp: int


class ActivityView(BaseModel):
    """Activity entry as seen by callers."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    task_id: int
    description: str
    created_by: int
    timestamp: int


class TaskDetailView(TaskView):
    """Task with its comments and activity history, oldest first."""
    comments: List[CommentView] = Field(default_factory=list)
    activity_history: List[ActivityView] = Field(default_factory=list)
