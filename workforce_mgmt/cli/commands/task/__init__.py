"""Task command group and sub-commands."""

import click

from .create import create
from .update import update
from .assign import assign
from .fetch import fetch
from .show import show
from .priority import priority, by_priority
from .comment import comment
from .reference import reference

__all__ = [
    'task',
    'create',
    'update',
    'assign',
    'fetch',
    'show',
    'priority',
    'by_priority',
    'comment',
    'reference',
]


@click.group()
def task():
    """Manage workforce tasks"""
    pass


# Register all sub-commands
task.add_command(create)
task.add_command(update)
task.add_command(assign)
task.add_command(fetch)
task.add_command(show)
task.add_command(priority)
task.add_command(by_priority)
task.add_command(comment)
task.add_command(reference)
