"""Command-line interface for Workforce Management."""
