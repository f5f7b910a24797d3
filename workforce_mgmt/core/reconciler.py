"""Reference reconciler.

Converges the active tasks raised against a reference to exactly one live
task per applicable task type:

- no active task of a type: one is created, ASSIGNED to the requested assignee
- exactly one: left alone (reassignment is an explicit update)
- several: the most recently created survives, the rest are CANCELLED

Each (reference id, reference type, task type) triple is reconciled under its
own lock so concurrent calls for the same reference cannot both create. A
triple's lock is dropped once no call holds or waits on it.
"""
import logging
import threading
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from typing import Dict, Iterator, List, Tuple

from ..models.task import Priority, ReferenceType, Task, TaskStatus, TaskType
from .activity import ActivityRecorder, Clock, current_millis
from .constants import REFERENCE_TASK_DESCRIPTION
from .policy import TASK_TYPES_BY_REFERENCE, PolicyTable, applicable_task_types
from .task_store import InMemoryTaskStore

logger = logging.getLogger(__name__)

ReferenceKey = Tuple[int, ReferenceType, TaskType]


@dataclass
class ReconcileOutcome:
    """What a reconcile call changed."""
    reference_id: int
    reference_type: ReferenceType
    created_task_ids: List[int] = field(default_factory=list)
    cancelled_task_ids: List[int] = field(default_factory=list)
    unchanged_task_ids: List[int] = field(default_factory=list)

    @property
    def created(self) -> int:
        return len(self.created_task_ids)

    @property
    def cancelled(self) -> int:
        return len(self.cancelled_task_ids)

    @property
    def unchanged(self) -> int:
        return len(self.unchanged_task_ids)

    def summary(self) -> str:
        """One-line summary for callers."""
        return (
            f"Tasks assigned for reference {self.reference_id} ({self.reference_type.value}): "
            f"{self.created} created, {self.cancelled} cancelled, {self.unchanged} unchanged"
        )


class ReferenceReconciler:
    """Keeps one live task per task type for each reference."""

    def __init__(self, store: InMemoryTaskStore, recorder: ActivityRecorder,
                 policy: PolicyTable = TASK_TYPES_BY_REFERENCE,
                 clock: Clock = current_millis):
        self.store = store
        self.recorder = recorder
        self.policy = policy
        self.clock = clock
        self._guard = threading.Lock()
        self._locks: Dict[ReferenceKey, threading.Lock] = {}
        self._lock_users: Dict[ReferenceKey, int] = {}

    @contextmanager
    def _locked(self, key: ReferenceKey) -> Iterator[None]:
        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())
            self._lock_users[key] = self._lock_users.get(key, 0) + 1
        try:
            with lock:
                yield
        finally:
            with self._guard:
                self._lock_users[key] -= 1
                if not self._lock_users[key]:
                    del self._lock_users[key]
                    del self._locks[key]

    def reconcile(self, reference_id: int, reference_type: ReferenceType,
                  assignee_id: int, *, actor_id: int) -> ReconcileOutcome:
        """Reconcile the tasks of a reference.

        Args:
            reference_id: Id of the external reference
            reference_type: Type of the external reference
            assignee_id: Staff member to assign newly created tasks to
            actor_id: Staff member performing the assignment

        Returns:
            ReconcileOutcome listing created, cancelled and unchanged tasks

        Raises:
            InvalidReferenceError: If no task types apply to the reference type
        """
        task_types = applicable_task_types(reference_type, self.policy)
        outcome = ReconcileOutcome(reference_id=reference_id, reference_type=reference_type)

        for task_type in task_types:
            with self._locked((reference_id, reference_type, task_type)):
                self._reconcile_type(reference_id, reference_type, task_type,
                                     assignee_id, actor_id, outcome)

        logger.info(outcome.summary())
        return outcome

    def _active_tasks(self, key: ReferenceKey) -> List[Task]:
        reference_id, reference_type, _ = key
        return [
            task for task in self.store.find_by_reference_id_and_type(reference_id, reference_type)
            if task.reference_key == key and not task.status.is_terminal
        ]

    def _reconcile_type(self, reference_id: int, reference_type: ReferenceType,
                        task_type: TaskType, assignee_id: int, actor_id: int,
                        outcome: ReconcileOutcome) -> None:
        """Converge one task type of a reference to a single live task.

        The surviving task keeps whatever status it already has. A STARTED
        survivor is not put back to ASSIGNED, so work already in progress is
        not reset.
        """
        active = self._active_tasks((reference_id, reference_type, task_type))

        if not active:
            task = self.store.save(Task(
                id=None,
                reference_id=reference_id,
                reference_type=reference_type,
                task_type=task_type,
                assignee_id=assignee_id,
                status=TaskStatus.ASSIGNED,
                priority=Priority.MEDIUM,
                description=REFERENCE_TASK_DESCRIPTION,
                created_time=self.clock(),
            ))
            self.recorder.record(
                task.id,
                f"User {actor_id} created and assigned this task to user {assignee_id}",
                actor_id,
            )
            outcome.created_task_ids.append(task.id)
            logger.info(f"Created {task_type.value} task {task.id} for reference {reference_id}")
            return

        # Newest first; ties on creation time go to the higher id.
        active.sort(key=lambda t: (t.created_time, t.id), reverse=True)
        survivor, duplicates = active[0], active[1:]
        outcome.unchanged_task_ids.append(survivor.id)

        if duplicates:
            logger.warning(
                f"Found {len(active)} active {task_type.value} tasks for reference "
                f"{reference_id} ({reference_type.value}); keeping task {survivor.id}"
            )

        for duplicate in duplicates:
            self.store.save(replace(duplicate, status=TaskStatus.CANCELLED))
            self.recorder.record(
                duplicate.id,
                f"Task superseded by reconciliation; cancelled by user {actor_id}",
                actor_id,
            )
            outcome.cancelled_task_ids.append(duplicate.id)
