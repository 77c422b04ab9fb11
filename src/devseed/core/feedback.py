"""User-facing status output for scaffolding steps."""

from abc import ABC, abstractmethod

import click

from devseed.cli.output import user_error, user_output


class UserFeedback(ABC):
    """Reports the outcome of each scaffolding step.

    Components never print directly; they call ctx.feedback so that tests can
    record messages instead of scraping console output.

    Usage:
        ctx.feedback.success("🚚 Created .eslintrc")
        ctx.feedback.info("🛠️  Skipped .gitignore (already present)")
        ctx.feedback.error("Error: could not read template")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message (skips, notes)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message (files created, commands run)."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message on stderr."""


class InteractiveFeedback(UserFeedback):
    """Feedback written to the console."""

    def info(self, message: str) -> None:
        """Show informational message."""
        user_output(message)

    def success(self, message: str) -> None:
        """Show success message in green."""
        user_output(click.style(message, fg="green"))

    def error(self, message: str) -> None:
        """Show error message in red."""
        user_error(click.style(message, fg="red"))
