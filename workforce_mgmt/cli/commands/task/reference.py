"""List tasks of a reference command."""

import click

from workforce_mgmt.cli.helpers import REFERENCE_TYPE_CHOICES, get_task_service, print_task_list

from ....models.task import ReferenceType


@click.command()
@click.argument('reference_id', type=int)
@click.argument('reference_type', type=click.Choice(REFERENCE_TYPE_CHOICES))
@click.option('--active', is_flag=True, help='Only show assigned and started tasks')
def reference(reference_id, reference_type, active):
    """List the tasks raised against a reference"""
    tasks = get_task_service().get_tasks_by_reference(
        reference_id, ReferenceType(reference_type), include_terminal=not active
    )
    print_task_list(tasks, f"No tasks found for {reference_type}:{reference_id}")
