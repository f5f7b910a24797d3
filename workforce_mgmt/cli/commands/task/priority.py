"""Task priority commands."""

import click

from workforce_mgmt.cli.helpers import PRIORITY_CHOICES, get_task_service, print_task_list, resolve_actor

from ....core.constants import TASK_NOT_FOUND_MESSAGE
from ....models.requests import TaskPriorityUpdateRequest
from ....models.task import Priority


@click.command()
@click.argument('task_id', type=int)
@click.argument('priority', type=click.Choice(PRIORITY_CHOICES))
@click.option('--actor', type=int, help='Staff member making the change')
def priority(task_id, priority, actor):
    """Change the priority of a task"""
    request = TaskPriorityUpdateRequest(task_id=task_id, priority=priority)
    message = get_task_service().update_priority(request, resolve_actor(actor))
    click.echo(message, err=message == TASK_NOT_FOUND_MESSAGE)


@click.command(name='by-priority')
@click.argument('priority', type=click.Choice(PRIORITY_CHOICES))
def by_priority(priority):
    """List all tasks with a given priority"""
    tasks = get_task_service().get_tasks_by_priority(Priority(priority))
    print_task_list(tasks, f"No {priority} tasks found")
