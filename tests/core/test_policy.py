"""Tests for the task type policy table."""
import pytest

from workforce_mgmt.core.policy import (
    TASK_TYPES_BY_REFERENCE,
    applicable_task_types,
    ensure_applicable,
    reference_type_for,
)
from workforce_mgmt.models.task import ReferenceType, TaskType
from workforce_mgmt.services.exceptions import InvalidReferenceError


def test_every_reference_type_has_task_types():
    """Test the default table covers all reference types."""
    for reference_type in ReferenceType:
        assert applicable_task_types(reference_type)


def test_order_task_types():
    assert applicable_task_types(ReferenceType.ORDER) == (
        TaskType.CREATE_INVOICE, TaskType.COLLECT_PAYMENT
    )


def test_missing_entry_raises():
    """Test that a table without the reference type is surfaced as an error."""
    table = {ReferenceType.ORDER: (TaskType.CREATE_INVOICE,)}
    with pytest.raises(InvalidReferenceError) as excinfo:
        applicable_task_types(ReferenceType.SHIPMENT, table)
    assert excinfo.value.reference_type == ReferenceType.SHIPMENT
    assert "SHIPMENT" in str(excinfo.value)


def test_empty_entry_raises():
    with pytest.raises(InvalidReferenceError):
        applicable_task_types(ReferenceType.ORDER, {ReferenceType.ORDER: ()})


def test_table_is_read_only():
    with pytest.raises(TypeError):
        TASK_TYPES_BY_REFERENCE[ReferenceType.ORDER] = ()


def test_reference_type_for():
    assert reference_type_for(TaskType.ARRANGE_PICKUP) == ReferenceType.SHIPMENT
    assert reference_type_for(TaskType.CREATE_INVOICE, {}) is None


def test_ensure_applicable_rejects_mismatch():
    with pytest.raises(InvalidReferenceError, match="does not apply"):
        ensure_applicable(ReferenceType.ORDER, TaskType.ARRANGE_PICKUP)
