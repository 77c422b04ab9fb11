"""Copy bundled templates into the project root, one config kind at a time.

A kind is only created when none of its recognized filenames exist. Existing
files are never overwritten or merged.
"""

import logging
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from devseed.core.context import DevseedContext
from devseed.core.paths import dir_exists, file_exists
from devseed.core.templates import ConfigKind, get_template_path

logger = logging.getLogger(__name__)


class MaterializeStatus(Enum):
    CREATED = "created"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class MaterializeResult:
    """Outcome of materializing one config kind.

    Attributes:
        kind: The config kind handled
        status: Whether the destination was created, skipped, or failed
        path: Canonical destination path
        existing: Recognized filename that caused a skip
        error: Failure message when status is FAILED
    """

    kind: ConfigKind
    status: MaterializeStatus
    path: Path
    existing: str | None = None
    error: str | None = None


def find_existing(project_root: Path, kind: ConfigKind) -> str | None:
    """Return the first recognized filename of kind present in project_root."""
    for filename in kind.filenames:
        if file_exists(project_root / filename):
            return filename
    return None


def materialize_file(ctx: DevseedContext, kind: ConfigKind) -> MaterializeResult:
    """Create kind's canonical file from its template unless one already exists."""
    dest = ctx.project_root / kind.canonical
    existing = find_existing(ctx.project_root, kind)
    if existing is not None:
        if existing == kind.canonical:
            ctx.feedback.info(f"🛠️  Skipped {kind.canonical} (already present)")
        else:
            ctx.feedback.info(f"🛠️  Skipped {kind.canonical} (found {existing})")
        return MaterializeResult(
            kind=kind, status=MaterializeStatus.SKIPPED, path=dest, existing=existing
        )

    src = get_template_path(ctx.template_dir, kind.template)
    logger.debug("copying %s to %s", src, dest)
    try:
        dest.write_bytes(src.read_bytes())
    except OSError as e:
        ctx.feedback.error(f"Error: could not create {kind.canonical}: {e}")
        return MaterializeResult(
            kind=kind, status=MaterializeStatus.FAILED, path=dest, error=str(e)
        )

    ctx.feedback.success(f"🚚 Created {kind.canonical}")
    return MaterializeResult(kind=kind, status=MaterializeStatus.CREATED, path=dest)


def materialize_dir(ctx: DevseedContext, kind: ConfigKind) -> MaterializeResult:
    """Create kind's directory and copy each settings file into it.

    An existing directory is skipped as a whole; its files are not reconciled.
    """
    dest = ctx.project_root / kind.canonical
    if dir_exists(dest):
        ctx.feedback.info(f"🛠️  Skipped {kind.canonical}/ (already present)")
        return MaterializeResult(
            kind=kind, status=MaterializeStatus.SKIPPED, path=dest, existing=kind.canonical
        )

    src_dir = get_template_path(ctx.template_dir, kind.template)
    try:
        dest.mkdir()
        for filename in kind.settings_files:
            logger.debug("copying %s to %s", src_dir / filename, dest / filename)
            shutil.copyfile(src_dir / filename, dest / filename)
    except OSError as e:
        ctx.feedback.error(f"Error: could not create {kind.canonical}/: {e}")
        return MaterializeResult(
            kind=kind, status=MaterializeStatus.FAILED, path=dest, error=str(e)
        )

    ctx.feedback.success(f"🚚 Created {kind.canonical}/ with {', '.join(kind.settings_files)}")
    return MaterializeResult(kind=kind, status=MaterializeStatus.CREATED, path=dest)
