"""Output utilities for CLI commands.

Status lines are for the operator and go to stderr so stdout stays clean.
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a human-readable status message to stderr."""
    click.echo(message, err=True, nl=nl)


def error_output(message: str) -> None:
    """Write an error message with a red "Error:" prefix to stderr."""
    user_output(click.style("Error: ", fg="red") + message)
