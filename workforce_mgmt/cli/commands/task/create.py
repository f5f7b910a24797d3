"""Create task command."""

import sys

import click

from workforce_mgmt.cli.helpers import (
    PRIORITY_CHOICES,
    REFERENCE_TYPE_CHOICES,
    TASK_TYPE_CHOICES,
    get_task_service,
    print_task_list,
    resolve_actor,
)

from ....core.policy import reference_type_for
from ....models.requests import TaskCreateItem, TaskCreateRequest
from ....models.task import TaskType
from ....services.exceptions import InvalidReferenceError


@click.command()
@click.option('--reference-id', type=int, required=True, help='Id of the external reference')
@click.option('--reference-type', type=click.Choice(REFERENCE_TYPE_CHOICES),
              help='Reference type (inferred from the task type if omitted)')
@click.option('--task-type', type=click.Choice(TASK_TYPE_CHOICES), required=True,
              help='Kind of task to create')
@click.option('--assignee', type=int, required=True, help='Staff member to assign the task to')
@click.option('--priority', type=click.Choice(PRIORITY_CHOICES), default='MEDIUM',
              show_default=True, help='Task priority')
@click.option('--deadline', type=int, help='Deadline in epoch millis')
@click.option('--actor', type=int, help='Staff member creating the task')
def create(reference_id, reference_type, task_type, assignee, priority, deadline, actor):
    """Create a task for a reference"""
    if reference_type is None:
        inferred = reference_type_for(TaskType(task_type))
        if inferred is None:
            click.echo(f"Error: Cannot infer reference type for {task_type}", err=True)
            sys.exit(1)
        reference_type = inferred.value

    request = TaskCreateRequest(requests=[TaskCreateItem(
        reference_id=reference_id,
        reference_type=reference_type,
        task_type=task_type,
        assignee_id=assignee,
        priority=priority,
        task_deadline_time=deadline,
    )])

    service = get_task_service()
    try:
        created = service.create_tasks(request, resolve_actor(actor))
    except InvalidReferenceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo("✅ Task created")
    print_task_list(created, "No tasks created")
