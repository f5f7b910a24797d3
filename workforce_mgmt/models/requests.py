"""Request models for the caller-facing task operations."""

from typing import List, Optional

from pydantic import BaseModel, Field

from .task import Priority, ReferenceType, TaskStatus, TaskType


class TaskCreateItem(BaseModel):
    """A single task to create."""
    reference_id: int
    reference_type: ReferenceType
    task_type: TaskType
    assignee_id: int
    priority: Priority = Priority.MEDIUM
    task_deadline_time: Optional[int] = Field(None, description="Deadline in epoch millis")


class TaskCreateRequest(BaseModel):
    """Batch of tasks to create."""
    requests: List[TaskCreateItem] = Field(default_factory=list)


class UpdateTaskItem(BaseModel):
    """Partial update of one task; unset fields are left untouched."""
    task_id: int
    status: Optional[TaskStatus] = None
    description: Optional[str] = None
    assignee_id: Optional[int] = None


class UpdateTaskRequest(BaseModel):
    """Batch of task updates."""
    requests: List[UpdateTaskItem] = Field(default_factory=list)


class AssignByReferenceRequest(BaseModel):
    """Assign the applicable tasks of a reference to a staff member."""
    reference_id: int
    reference_type: ReferenceType
    assignee_id: int


class TaskFetchByDateRequest(BaseModel):
    """Worklist query for a set of assignees."""
    assignee_ids: List[int] = Field(default_factory=list)
    start_date: Optional[int] = Field(None, description="Window start in epoch millis")
    end_date: Optional[int] = Field(None, description="Window end in epoch millis")


class TaskPriorityUpdateRequest(BaseModel):
    """Change the priority of one task."""
    task_id: int
    priority: Priority


class AddCommentRequest(BaseModel):
    """Attach a comment to a task."""
    task_id: int
    comment_text: str
    user_id: int
