"""CLI Helper Functions for Workforce Management.

This module provides reusable helper functions for CLI commands to reduce
code duplication and standardize behavior across all commands.

The helpers provide:
- Project context and configuration lookup
- Task service construction over the project's task snapshot
- Actor resolution from options or configuration
- Consistent table formatting for output
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional

import click
from tabulate import tabulate

from workforce_mgmt.core.constants import DATA_DIR_NAME, LOG_FORMAT
from workforce_mgmt.core.task_store import JsonTaskStore
from workforce_mgmt.models.config import WorkforceConfig
from workforce_mgmt.models.task import Priority, ReferenceType, TaskStatus, TaskType
from workforce_mgmt.models.views import TaskView
from workforce_mgmt.services.task_service import TaskManagementService
from workforce_mgmt.utils.config_manager import ConfigManager

STATUS_CHOICES = [status.value for status in TaskStatus]
PRIORITY_CHOICES = [priority.value for priority in Priority]
REFERENCE_TYPE_CHOICES = [reference_type.value for reference_type in ReferenceType]
TASK_TYPE_CHOICES = [task_type.value for task_type in TaskType]


def get_project_context() -> tuple[Path, Path]:
    """Get project root and data directory.

    Returns:
        Tuple of (project_root, data_dir)

    Note:
        Does not create data_dir; the task store creates it on first write.
    """
    project_root = Path.cwd()
    data_dir = project_root / DATA_DIR_NAME
    return project_root, data_dir


def get_config() -> WorkforceConfig:
    """Load the project configuration, falling back to defaults."""
    _, data_dir = get_project_context()
    return ConfigManager(data_dir).get_or_default()


def configure_logging(level: str) -> None:
    """Configure root logging for a CLI invocation."""
    logging.basicConfig(level=getattr(logging, level.upper()), format=LOG_FORMAT)


def get_task_service() -> TaskManagementService:
    """Build a TaskManagementService over the project's task snapshot."""
    _, data_dir = get_project_context()
    config = get_config()
    return TaskManagementService(JsonTaskStore(data_dir / config.store_file))


def resolve_actor(actor_id: Optional[int]) -> int:
    """Use the given actor id, or the configured default."""
    if actor_id is not None:
        return actor_id
    return get_config().default_actor_id


def format_millis(millis: Optional[int]) -> str:
    """Format epoch millis for display."""
    if millis is None:
        return ""
    return datetime.fromtimestamp(millis / 1000).strftime("%Y-%m-%d %H:%M")


STATUS_COLORS = {
    TaskStatus.ASSIGNED: 'cyan',
    TaskStatus.STARTED: 'yellow',
    TaskStatus.COMPLETED: 'green',
    TaskStatus.CANCELLED: 'red',
}

PRIORITY_COLORS = {
    Priority.LOW: 'white',
    Priority.MEDIUM: 'blue',
    Priority.HIGH: 'yellow',
    Priority.URGENT: 'red',
}


def format_task_table(tasks: List[TaskView],
                      headers: Optional[list[str]] = None,
                      max_desc_length: int = 40) -> str:
    """Format tasks as a table with consistent styling.

    Args:
        tasks: List of tasks to display
        headers: Optional custom headers (defaults to standard headers)
        max_desc_length: Maximum description length before truncation

    Returns:
        Formatted table string
    """
    if headers is None:
        headers = ["ID", "REFERENCE", "TYPE", "ASSIGNEE", "STATUS", "PRIORITY",
                   "DESCRIPTION", "CREATED"]

    table_data = []
    for task_item in tasks:
        desc_line = task_item.description.split('\n')[0]
        if len(desc_line) > max_desc_length:
            desc_line = desc_line[:max_desc_length-3] + "..."

        status_display = click.style(
            task_item.status.value,
            fg=STATUS_COLORS.get(task_item.status, 'white')
        )
        priority_display = click.style(
            task_item.priority.value,
            fg=PRIORITY_COLORS.get(task_item.priority, 'white')
        )

        table_data.append([
            task_item.id,
            f"{task_item.reference_type.value}:{task_item.reference_id}",
            task_item.task_type.value,
            task_item.assignee_id,
            status_display,
            priority_display,
            desc_line,
            format_millis(task_item.created_time),
        ])

    return tabulate(table_data, headers=headers, tablefmt="simple")


def print_task_list(tasks: List[TaskView], empty_message: str) -> None:
    """Print a task table, or a message when there is nothing to show."""
    if not tasks:
        click.echo(empty_message)
        return
    click.echo(format_task_table(tasks))
    click.echo(f"\n{len(tasks)} task(s)")


def print_table(headers: list[str], rows: list[list[Any]],
                tablefmt: str = "simple") -> None:
    """Print a table with project-wide defaults.

    Args:
        headers: Table headers
        rows: Table rows
        tablefmt: Table format (default: "simple")
    """
    table_str = tabulate(rows, headers=headers, tablefmt=tablefmt)
    click.echo(table_str)


__all__ = [
    'STATUS_CHOICES',
    'PRIORITY_CHOICES',
    'REFERENCE_TYPE_CHOICES',
    'TASK_TYPE_CHOICES',
    'get_project_context',
    'get_config',
    'configure_logging',
    'get_task_service',
    'resolve_actor',
    'format_millis',
    'format_task_table',
    'print_task_list',
    'print_table',
]
