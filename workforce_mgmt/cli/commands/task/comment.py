"""Comment on task command."""

import sys

import click

from workforce_mgmt.cli.helpers import get_task_service, resolve_actor

from ....models.requests import AddCommentRequest
from ....services.exceptions import TaskNotFoundError


@click.command()
@click.argument('task_id', type=int)
@click.argument('text')
@click.option('--author', type=int, help='Staff member writing the comment')
def comment(task_id, text, author):
    """Add a comment to a task"""
    request = AddCommentRequest(task_id=task_id, comment_text=text, user_id=resolve_actor(author))
    try:
        get_task_service().add_comment(request)
    except TaskNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"✅ Comment added to task {task_id}")
