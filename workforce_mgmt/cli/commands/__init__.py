"""CLI commands for Workforce Management."""
