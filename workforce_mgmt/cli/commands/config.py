"""Configuration management commands for Workforce Management."""

import sys

import click
from pydantic import ValidationError

from workforce_mgmt.cli.helpers import get_project_context, print_table

from ...utils.config_manager import ConfigManager


@click.group()
def config():
    """Manage project configuration"""
    pass


@config.command()
def show():
    """Display current configuration"""
    _, data_dir = get_project_context()
    config_manager = ConfigManager(data_dir)

    current = config_manager.get_config()
    if current is None:
        click.echo("No configuration found, using defaults.")
        current = config_manager.get_or_default()

    print_table(["KEY", "VALUE"], [[key, value] for key, value in current.model_dump().items()])


@config.command(name='set')
@click.argument('key')
@click.argument('value')
def set_value(key, value):
    """Set a configuration value"""
    _, data_dir = get_project_context()
    config_manager = ConfigManager(data_dir)

    try:
        config_manager.update(**{key: value})
    except KeyError:
        click.echo(f"Error: Unknown configuration key: {key}", err=True)
        sys.exit(1)
    except ValidationError as e:
        click.echo(f"Error: Invalid value for {key}: {e.errors()[0]['msg']}", err=True)
        sys.exit(1)

    click.echo(f"Set {key}={value}")
