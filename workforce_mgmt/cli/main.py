"""Main CLI entry point for Workforce Management."""

import click

from ..core.constants import LOG_LEVELS
from .helpers import configure_logging, get_config
from .commands.config import config
from .commands.task import task


@click.group()
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              help='Logging level (defaults to the configured level)')
def cli(log_level):
    """Workforce Management - Track reference-driven tasks and their audit trail"""
    configure_logging(log_level or get_config().log_level)


# Register commands
cli.add_command(task)
cli.add_command(config)


if __name__ == '__main__':
    cli()
