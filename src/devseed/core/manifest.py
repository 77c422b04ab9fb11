"""Additive devDependencies merge into the project's package.json."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from devseed.core.context import DevseedContext
from devseed.core.formatting import ManifestFormat, detect_format
from devseed.core.paths import file_exists

logger = logging.getLogger(__name__)

MANIFEST_FILENAME = "package.json"
DEV_DEPENDENCIES_KEY = "devDependencies"


class ManifestNotFoundError(FileNotFoundError):
    """package.json is missing from the project root."""


class ManifestFormatError(ValueError):
    """package.json is not a JSON object or has a malformed devDependencies."""


@dataclass(frozen=True)
class DevDependency:
    """A dev dependency seeded into package.json."""

    name: str
    version: str


LINT_DEPENDENCIES = (
    DevDependency(name="eslint", version="^8.36.0"),
    DevDependency(name="@koalan/eslint-config", version="latest"),
)

FORMAT_DEPENDENCIES = (DevDependency(name="prettier", version="^2.8.4"),)


@dataclass(frozen=True)
class MergeResult:
    """Outcome of a devDependencies merge.

    Attributes:
        added: Names inserted with their default version
        kept: Names already present, left untouched
    """

    added: tuple[str, ...]
    kept: tuple[str, ...]


def default_dependencies(*, format_rules: bool) -> tuple[DevDependency, ...]:
    """Get the dev dependencies seeded for the given configuration."""
    if format_rules:
        return LINT_DEPENDENCIES + FORMAT_DEPENDENCIES
    return LINT_DEPENDENCIES


def merge_dev_dependencies(
    data: dict[str, Any], dependencies: tuple[DevDependency, ...]
) -> MergeResult:
    """Insert missing dependencies into data's devDependencies in place.

    Existing version specifiers are never overwritten.

    Raises:
        ManifestFormatError: If devDependencies exists but is not an object
    """
    dev_deps = data.get(DEV_DEPENDENCIES_KEY)
    if dev_deps is None:
        dev_deps = data[DEV_DEPENDENCIES_KEY] = {}
    elif not isinstance(dev_deps, dict):
        raise ManifestFormatError(
            f"'{DEV_DEPENDENCIES_KEY}' in {MANIFEST_FILENAME} must be an object"
        )

    added: list[str] = []
    kept: list[str] = []
    for dep in dependencies:
        if dep.name in dev_deps:
            kept.append(dep.name)
            continue
        dev_deps[dep.name] = dep.version
        added.append(dep.name)

    return MergeResult(added=tuple(added), kept=tuple(kept))


def serialize_manifest(data: dict[str, Any], fmt: ManifestFormat) -> str:
    """Serialize data in the whitespace style described by fmt.

    An empty indent gives compact JSON with no whitespace at all.
    """
    if fmt.indent:
        text = json.dumps(data, indent=fmt.indent, ensure_ascii=False)
    else:
        text = json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    if fmt.newline is not None:
        # json.dumps always breaks lines with "\n"
        text = text.replace("\n", fmt.newline) + fmt.newline
    return text


def read_manifest(path: Path) -> tuple[dict[str, Any], ManifestFormat]:
    """Read package.json and its whitespace style.

    Raises:
        ManifestNotFoundError: If no readable file exists at path
        ManifestFormatError: If the content is not a JSON object
    """
    if not file_exists(path):
        raise ManifestNotFoundError(f"No {MANIFEST_FILENAME} found in {path.parent}")

    raw = path.read_bytes()
    try:
        # Decode bytes directly so "\r\n" survives for newline detection
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ManifestFormatError(f"{path} is not valid UTF-8: {e}") from e
    fmt = detect_format(text)
    logger.debug("detected manifest format: indent=%r newline=%r", fmt.indent, fmt.newline)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ManifestFormatError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ManifestFormatError(f"{path} must contain a JSON object")

    return data, fmt


def merge_manifest(
    ctx: DevseedContext, dependencies: tuple[DevDependency, ...]
) -> MergeResult:
    """Add missing dev dependencies to the project's package.json.

    Only devDependencies is touched. The file is rewritten with the
    indentation and newline style it was read with.

    Raises:
        ManifestNotFoundError: If package.json does not exist
        ManifestFormatError: If package.json is malformed
    """
    path = ctx.project_root / MANIFEST_FILENAME
    data, fmt = read_manifest(path)
    result = merge_dev_dependencies(data, dependencies)
    path.write_text(serialize_manifest(data, fmt), encoding="utf-8", newline="")

    if result.added:
        ctx.feedback.success(f"📦 Added {', '.join(result.added)} to {DEV_DEPENDENCIES_KEY}")
    else:
        ctx.feedback.info(f"🛠️  {DEV_DEPENDENCIES_KEY} already up to date")
    return result
