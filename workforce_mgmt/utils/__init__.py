"""Utilities for Workforce Management."""

from .config_manager import ConfigManager

__all__ = [
    'ConfigManager',
]
