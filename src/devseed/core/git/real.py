"""Production Git implementation using subprocess."""

from pathlib import Path

from devseed.core.git.abc import Git
from devseed.core.subprocess import run_subprocess_with_context


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def init(self, cwd: Path) -> None:
        """Create an empty repository in cwd."""
        run_subprocess_with_context(
            ["git", "init"],
            operation_context="initialize git repository",
            cwd=cwd,
        )

    def add_all(self, cwd: Path) -> None:
        """Stage every file under cwd."""
        run_subprocess_with_context(
            ["git", "add", "."],
            operation_context="stage files",
            cwd=cwd,
        )
