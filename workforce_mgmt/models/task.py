"""Task domain data models."""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class TaskStatus(Enum):
    """Task status enumeration."""
    ASSIGNED = "ASSIGNED"
    STARTED = "STARTED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"

    @property
    def is_terminal(self) -> bool:
        """Whether the task has left the active worklist for good."""
        return self in (TaskStatus.COMPLETED, TaskStatus.CANCELLED)


NON_TERMINAL_STATUSES = frozenset({TaskStatus.ASSIGNED, TaskStatus.STARTED})


class Priority(Enum):
    """Task priority enumeration."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


class ReferenceType(Enum):
    """External business entity a task is raised against."""
    ORDER = "ORDER"
    SHIPMENT = "SHIPMENT"
    ENTITY = "ENTITY"


class TaskType(Enum):
    """Kind of work a task represents."""
    CREATE_INVOICE = "CREATE_INVOICE"
    COLLECT_PAYMENT = "COLLECT_PAYMENT"
    ARRANGE_PICKUP = "ARRANGE_PICKUP"
    ARRANGE_DELIVERY = "ARRANGE_DELIVERY"
    ASSIGN_CUSTOMER_TO_SALES_PERSON = "ASSIGN_CUSTOMER_TO_SALES_PERSON"


@dataclass
class Task:
    """A unit of work tied to an external reference."""
    id: Optional[int]  # Assigned by the store on first save
    reference_id: int
    reference_type: ReferenceType
    task_type: TaskType
    assignee_id: int
    status: TaskStatus
    priority: Priority
    description: str
    created_time: int  # Epoch millis
    task_deadline_time: Optional[int] = None  # Epoch millis

    @property
    def reference_key(self) -> tuple:
        """The (reference id, reference type, task type) triple."""
        return (self.reference_id, self.reference_type, self.task_type)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "reference_id": self.reference_id,
            "reference_type": self.reference_type.value,
            "task_type": self.task_type.value,
            "assignee_id": self.assignee_id,
            "status": self.status.value,
            "priority": self.priority.value,
            "description": self.description,
            "created_time": self.created_time,
            "task_deadline_time": self.task_deadline_time,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Task':
        """Create from dictionary."""
        return cls(
            id=data["id"],
            reference_id=data["reference_id"],
            reference_type=ReferenceType(data["reference_type"]),
            task_type=TaskType(data["task_type"]),
            assignee_id=data["assignee_id"],
            status=TaskStatus(data["status"]),
            priority=Priority(data["priority"]),
            description=data["description"],
            created_time=data["created_time"],
            task_deadline_time=data.get("task_deadline_time"),
        )


@dataclass(frozen=True)
class TaskComment:
    """A comment left on a task."""
    id: int
    task_id: int
    comment_text: str
    created_by: int
    timestamp: int

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "task_id": self.task_id,
            "comment_text": self.comment_text,
            "created_by": self.created_by,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'TaskComment':
        """Create from dictionary."""
        return cls(**data)


@dataclass(frozen=True)
class TaskActivity:
    """An audit trail entry, e.g. "User 7 changed priority to HIGH"."""
    id: int
    task_id: int
    description: str
    created_by: int
    timestamp: int

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "task_id": self.task_id,
            "description": self.description,
            "created_by": self.created_by,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'TaskActivity':
        """Create from dictionary."""
        return cls(**data)
