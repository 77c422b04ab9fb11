"""Existence checks for project files.

Both checks collapse every failure cause (missing, permission denied, wrong
type) into False. Callers only ever see a boolean.
"""

import logging
import stat
from pathlib import Path

logger = logging.getLogger(__name__)


def file_exists(path: Path) -> bool:
    """Return True if a regular file can be read at path."""
    try:
        with path.open("rb"):
            pass
    except OSError as e:
        logger.debug("file check failed for %s: %s", path, e)
        return False
    return True


def dir_exists(path: Path) -> bool:
    """Return True if path is an existing directory."""
    try:
        mode = path.stat().st_mode
    except OSError as e:
        logger.debug("directory check failed for %s: %s", path, e)
        return False
    return stat.S_ISDIR(mode)
