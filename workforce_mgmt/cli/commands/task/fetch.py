"""Fetch tasks by date command."""

import click

from workforce_mgmt.cli.helpers import get_task_service, print_task_list

from ....models.requests import TaskFetchByDateRequest


@click.command()
@click.option('--assignee', '-a', 'assignees', type=int, multiple=True, required=True,
              help='Staff member whose tasks to fetch (repeatable)')
@click.option('--start', type=int, help='Window start in epoch millis')
@click.option('--end', type=int, help='Window end in epoch millis')
def fetch(assignees, start, end):
    """Show the worklist of one or more assignees

    With both --start and --end, shows open tasks created in the window plus
    open backlog from before it. Otherwise shows everything except cancelled
    tasks.
    """
    request = TaskFetchByDateRequest(assignee_ids=list(assignees), start_date=start, end_date=end)
    tasks = get_task_service().fetch_tasks_by_date(request)
    print_task_list(tasks, "No tasks found")
