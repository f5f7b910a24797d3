"""Static table of which task types apply to which reference types."""

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

from ..models.task import ReferenceType, TaskType
from ..services.exceptions import InvalidReferenceError

PolicyTable = Mapping[ReferenceType, Tuple[TaskType, ...]]

TASK_TYPES_BY_REFERENCE: PolicyTable = MappingProxyType({
    ReferenceType.ORDER: (TaskType.CREATE_INVOICE, TaskType.COLLECT_PAYMENT),
    ReferenceType.SHIPMENT: (TaskType.ARRANGE_PICKUP, TaskType.ARRANGE_DELIVERY),
    ReferenceType.ENTITY: (TaskType.ASSIGN_CUSTOMER_TO_SALES_PERSON,),
})


def applicable_task_types(reference_type: ReferenceType,
                          table: PolicyTable = TASK_TYPES_BY_REFERENCE) -> Tuple[TaskType, ...]:
    """Get the task types that apply to a reference type.

    Args:
        reference_type: The reference type to look up
        table: Policy table to consult

    Returns:
        Tuple of applicable task types, in table order

    Raises:
        InvalidReferenceError: If the table has no task types for the reference type
    """
    task_types = table.get(reference_type)
    if not task_types:
        raise InvalidReferenceError(reference_type)
    return tuple(task_types)


def reference_type_for(task_type: TaskType,
                       table: PolicyTable = TASK_TYPES_BY_REFERENCE) -> Optional[ReferenceType]:
    """Reverse lookup: the reference type a task type belongs to, if any."""
    for reference_type, task_types in table.items():
        if task_type in task_types:
            return reference_type
    return None


def ensure_applicable(reference_type: ReferenceType, task_type: TaskType,
                      table: PolicyTable = TASK_TYPES_BY_REFERENCE) -> None:
    """Raise InvalidReferenceError unless task_type applies to reference_type."""
    if task_type not in applicable_task_types(reference_type, table):
        raise InvalidReferenceError(
            reference_type,
            f"Task type {task_type.value} does not apply to reference type {reference_type.value}",
        )
