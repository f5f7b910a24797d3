"""Service layer for task management operations.

The service itself lives in ``services.task_service``; only the exception
hierarchy is exported here because the core modules import it.
"""

from .exceptions import (
    ServiceError,
    TaskServiceError,
    TaskNotFoundError,
    InvalidReferenceError,
)

__all__ = [
    "ServiceError",
    "TaskServiceError",
    "TaskNotFoundError",
    "InvalidReferenceError",
]
