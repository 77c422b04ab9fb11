"""Git repository bootstrap for the project root."""

from dataclasses import dataclass

from devseed.core.context import DevseedContext
from devseed.core.paths import dir_exists


@dataclass(frozen=True)
class VcsResult:
    """Outcome of the git bootstrap, used for reporting only.

    Attributes:
        success: True when every git command succeeded
        initialized: True when `git init` was run
        error_message: Failure details when success is False
    """

    success: bool
    initialized: bool
    error_message: str | None = None


def bootstrap_vcs(ctx: DevseedContext) -> VcsResult:
    """Ensure the project root is a git repository and stage all files.

    Runs `git add .` in an existing repository, otherwise `git init` followed
    by `git add .`. Failures are reported and returned, never raised.
    """
    initialized = not dir_exists(ctx.project_root / ".git")
    try:
        if initialized:
            ctx.git.init(ctx.project_root)
        ctx.git.add_all(ctx.project_root)
    except RuntimeError as e:
        ctx.feedback.error(f"Error: git bootstrap failed\n{e}")
        return VcsResult(success=False, initialized=initialized, error_message=str(e))

    if initialized:
        ctx.feedback.success("🚚 Git repository initialized and files staged")
    else:
        ctx.feedback.success("🚚 Files staged in existing git repository")
    return VcsResult(success=True, initialized=initialized)
