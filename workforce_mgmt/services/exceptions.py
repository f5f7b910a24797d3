"""Custom exceptions for service layer."""


class ServiceError(Exception):
    """Base exception for all service-related errors."""

    pass


class TaskServiceError(ServiceError):
    """Exception raised for task management operations."""

    pass


class TaskNotFoundError(TaskServiceError):
    """Exception raised when a referenced task does not exist."""

    def __init__(self, task_id):
        self.task_id = task_id
        super().__init__(f"Task not found with id: {task_id}")


class InvalidReferenceError(TaskServiceError):
    """Exception raised when a reference type has no applicable task types."""

    def __init__(self, reference_type, message=None):
        self.reference_type = reference_type
        name = getattr(reference_type, "value", reference_type)
        super().__init__(message or f"No task types configured for reference type: {name}")
