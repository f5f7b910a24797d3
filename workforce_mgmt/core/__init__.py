"""Core functionality for Workforce Management."""

from .activity import ActivityRecorder
from .mutation import TaskMutationService
from .query import TaskDetails, TaskQueryEngine
from .reconciler import ReconcileOutcome, ReferenceReconciler
from .task_store import InMemoryTaskStore, JsonTaskStore

__all__ = [
    'ActivityRecorder',
    'TaskMutationService',
    'TaskDetails',
    'TaskQueryEngine',
    'ReconcileOutcome',
    'ReferenceReconciler',
    'InMemoryTaskStore',
    'JsonTaskStore',
]
