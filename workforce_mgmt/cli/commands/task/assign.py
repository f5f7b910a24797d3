"""Assign tasks by reference command."""

import sys

import click

from workforce_mgmt.cli.helpers import REFERENCE_TYPE_CHOICES, get_task_service, resolve_actor

from ....models.requests import AssignByReferenceRequest
from ....services.exceptions import InvalidReferenceError


@click.command()
@click.argument('reference_id', type=int)
@click.argument('reference_type', type=click.Choice(REFERENCE_TYPE_CHOICES))
@click.argument('assignee_id', type=int)
@click.option('--actor', type=int, help='Staff member performing the assignment')
def assign(reference_id, reference_type, assignee_id, actor):
    """Ensure one live task per task type for a reference"""
    request = AssignByReferenceRequest(
        reference_id=reference_id,
        reference_type=reference_type,
        assignee_id=assignee_id,
    )

    service = get_task_service()
    try:
        outcome = service.assign_by_reference(request, resolve_actor(actor))
    except InvalidReferenceError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(outcome.summary())
    if outcome.created_task_ids:
        click.echo(f"   Created: {', '.join(str(i) for i in outcome.created_task_ids)}")
    if outcome.cancelled_task_ids:
        click.echo(click.style(
            f"   Cancelled duplicates: {', '.join(str(i) for i in outcome.cancelled_task_ids)}",
            fg='yellow'
        ))
