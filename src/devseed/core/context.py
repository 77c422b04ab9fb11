"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from devseed.core.config import SeedConfig, load_config
from devseed.core.feedback import InteractiveFeedback, UserFeedback
from devseed.core.git.abc import Git
from devseed.core.git.real import RealGit
from devseed.core.templates import get_template_dir


@dataclass(frozen=True)
class DevseedContext:
    """Immutable context holding all dependencies for a scaffolding run.

    Created at CLI entry point and threaded through every step.
    Frozen to prevent accidental modification at runtime.

    Attributes:
        git: Git integration for init and staging
        feedback: Sink for per-step status lines
        project_root: Working directory captured once at CLI invocation
        template_dir: Bundled template directory
        config: Settings loaded from devseed.toml
    """

    git: Git
    feedback: UserFeedback
    project_root: Path
    template_dir: Path
    config: SeedConfig

    @staticmethod
    def for_test(
        git: Git | None = None,
        feedback: UserFeedback | None = None,
        project_root: Path | None = None,
        template_dir: Path | None = None,
        config: SeedConfig | None = None,
    ) -> "DevseedContext":
        """Create test context with optional pre-configured implementations.

        Uses fakes by default to avoid subprocess calls.

        Args:
            git: Optional Git implementation. If None, creates FakeGit.
            feedback: Optional UserFeedback. If None, creates FakeUserFeedback.
            project_root: Project directory (defaults to Path("/test/default/cwd"))
            template_dir: Template directory (defaults to the bundled templates)
            config: Optional SeedConfig. If None, uses defaults.

        Returns:
            DevseedContext configured with provided values and test defaults
        """
        from tests.fakes.feedback import FakeUserFeedback
        from tests.fakes.git import FakeGit

        return DevseedContext(
            git=git if git is not None else FakeGit(),
            feedback=feedback if feedback is not None else FakeUserFeedback(),
            project_root=project_root if project_root is not None else Path("/test/default/cwd"),
            template_dir=template_dir if template_dir is not None else get_template_dir(),
            config=config if config is not None else SeedConfig(),
        )


def create_context() -> DevseedContext:
    """Create production context with real implementations.

    Called once at CLI entry point. The working directory is read here and
    treated as immutable for the rest of the run.

    Raises:
        ValueError: If devseed.toml is malformed
    """
    project_root = Path.cwd()
    return DevseedContext(
        git=RealGit(),
        feedback=InteractiveFeedback(),
        project_root=project_root,
        template_dir=get_template_dir(),
        config=load_config(project_root),
    )
