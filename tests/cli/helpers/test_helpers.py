"""Unit tests for CLI helper functions."""

from pathlib import Path

import click

from workforce_mgmt.cli.helpers import (
    format_millis,
    format_task_table,
    get_project_context,
    print_task_list,
    resolve_actor,
)
from workforce_mgmt.core.constants import DATA_DIR_NAME
from workforce_mgmt.models.views import TaskView
from workforce_mgmt.utils.config_manager import ConfigManager


class TestGetProjectContext:
    """Test get_project_context function."""

    def test_returns_current_directory_and_data_dir(self):
        """Test that it returns cwd and data directory."""
        project_root, data_dir = get_project_context()
        assert project_root == Path.cwd()
        assert data_dir == project_root / DATA_DIR_NAME


class TestResolveActor:
    """Test resolve_actor function."""

    def test_explicit_actor_wins(self, isolated_cli_runner):
        ConfigManager(Path(DATA_DIR_NAME)).update(default_actor_id=5)
        assert resolve_actor(9) == 9

    def test_falls_back_to_config(self, isolated_cli_runner):
        ConfigManager(Path(DATA_DIR_NAME)).update(default_actor_id=5)
        assert resolve_actor(None) == 5

    def test_zero_is_explicit(self, isolated_cli_runner):
        ConfigManager(Path(DATA_DIR_NAME)).update(default_actor_id=5)
        assert resolve_actor(0) == 0


class TestFormatting:
    """Test table formatting helpers."""

    def test_format_millis_none(self):
        assert format_millis(None) == ""

    def test_format_task_table(self, make_task):
        view = TaskView.model_validate(make_task(id=1, description="First line\nsecond line"))

        table = click.unstyle(format_task_table([view]))

        assert "ORDER:42" in table
        assert "CREATE_INVOICE" in table
        assert "First line" in table
        assert "second line" not in table

    def test_format_task_table_truncates(self, make_task):
        view = TaskView.model_validate(make_task(id=1, description="x" * 100))

        table = format_task_table([view], max_desc_length=20)

        assert "x" * 17 + "..." in table
        assert "x" * 21 not in table

    def test_print_task_list_empty(self, capsys):
        print_task_list([], "Nothing here")
        assert "Nothing here" in capsys.readouterr().out
