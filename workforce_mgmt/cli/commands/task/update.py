"""Update task command."""

import sys

import click

from workforce_mgmt.cli.helpers import STATUS_CHOICES, get_task_service, print_task_list, resolve_actor

from ....models.requests import UpdateTaskItem, UpdateTaskRequest
from ....services.exceptions import TaskNotFoundError


@click.command()
@click.argument('task_ids', type=int, nargs=-1, required=True)
@click.option('--status', type=click.Choice(STATUS_CHOICES), help='New status')
@click.option('--description', help='New description')
@click.option('--assignee', type=int, help='Reassign to this staff member')
@click.option('--actor', type=int, help='Staff member making the change')
def update(task_ids, status, description, assignee, actor):
    """Update status, description or assignee of one or more tasks"""
    request = UpdateTaskRequest(requests=[
        UpdateTaskItem(task_id=task_id, status=status, description=description, assignee_id=assignee)
        for task_id in task_ids
    ])

    service = get_task_service()
    try:
        updated = service.update_tasks(request, resolve_actor(actor))
    except TaskNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"✅ Updated {len(updated)} task(s)")
    print_task_list(updated, "No tasks updated")
