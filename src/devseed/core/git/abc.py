"""Git operations interface.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
"""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @abstractmethod
    def init(self, cwd: Path) -> None:
        """Create an empty repository in cwd.

        Raises:
            RuntimeError: If git fails or is not installed
        """
        ...

    @abstractmethod
    def add_all(self, cwd: Path) -> None:
        """Stage every file under cwd (`git add .`).

        Raises:
            RuntimeError: If git fails or is not installed
        """
        ...
