"""Console output helpers for user-facing messages.

user_output writes status lines to stdout. user_error writes to stderr so that
errors stay visible when stdout is redirected.
"""

import click


def user_output(message: str) -> None:
    """Write a status line to stdout."""
    click.echo(message)


def user_error(message: str) -> None:
    """Write an error line to stderr."""
    click.echo(message, err=True)
