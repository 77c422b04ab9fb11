"""Fake implementation of Git for testing."""

from pathlib import Path

from devseed.core.git.abc import Git


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    Records calls instead of running git. Failures are injected through the
    constructor and raised as RuntimeError, matching RealGit.

    Examples:
        >>> git = FakeGit()
        >>> git.init(Path("/repo"))
        >>> assert git.init_calls == [Path("/repo")]

        >>> git = FakeGit(add_error="Failed to stage files")
        >>> git.add_all(Path("/repo"))  # raises RuntimeError
    """

    def __init__(
        self,
        *,
        init_error: str | None = None,
        add_error: str | None = None,
    ) -> None:
        self._init_error = init_error
        self._add_error = add_error
        self._init_calls: list[Path] = []
        self._add_calls: list[Path] = []

    def init(self, cwd: Path) -> None:
        self._init_calls.append(cwd)
        if self._init_error is not None:
            raise RuntimeError(self._init_error)

    def add_all(self, cwd: Path) -> None:
        self._add_calls.append(cwd)
        if self._add_error is not None:
            raise RuntimeError(self._add_error)

    @property
    def init_calls(self) -> list[Path]:
        """Get the cwd of each init() call.

        This property is for test assertions only.
        """
        return self._init_calls.copy()

    @property
    def add_calls(self) -> list[Path]:
        """Get the cwd of each add_all() call.

        This property is for test assertions only.
        """
        return self._add_calls.copy()
