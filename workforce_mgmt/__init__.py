"""Workforce Management - Reference-driven task tracking with an audit trail."""

__version__ = "0.1.0"

# Export main CLI for convenience
from .cli.main import cli

__all__ = ['cli']
