"""Show task command."""

import sys

import click
from rich.console import Console

from workforce_mgmt.cli.helpers import format_millis, get_task_service

from ....services.exceptions import TaskNotFoundError


@click.command()
@click.argument('task_id', type=int)
def show(task_id):
    """Show a task with its comments and activity history"""
    service = get_task_service()
    try:
        task = service.find_task_by_id(task_id)
    except TaskNotFoundError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    console = Console()
    console.print(f"\n[bold]Task {task.id}[/bold]")
    console.print(f"   Reference: {task.reference_type.value}:{task.reference_id}")
    console.print(f"   Type: {task.task_type.value}")
    console.print(f"   Assignee: {task.assignee_id}")
    console.print(f"   Status: [yellow]{task.status.value}[/yellow]")
    console.print(f"   Priority: {task.priority.value}")
    console.print(f"   Created: {format_millis(task.created_time)}")
    if task.task_deadline_time:
        console.print(f"   Deadline: {format_millis(task.task_deadline_time)}")
    console.print(f"   Description: {task.description}")

    if task.comments:
        console.print("\n[cyan]Comments:[/cyan]")
        for comment in task.comments:
            console.print(f"   [{format_millis(comment.timestamp)}] user {comment.created_by}: "
                          f"{comment.comment_text}", markup=False)

    if task.activity_history:
        console.print("\n[cyan]Activity:[/cyan]")
        for entry in task.activity_history:
            console.print(f"   [{format_millis(entry.timestamp)}] {entry.description}", markup=False)
