"""Scaffolding sequence: manifest merge, config files, git bootstrap."""

import logging
import os
from dataclasses import dataclass

from devseed.core.context import DevseedContext
from devseed.core.manifest import MergeResult, default_dependencies, merge_manifest
from devseed.core.materialize import MaterializeResult, materialize_dir, materialize_file
from devseed.core.templates import (
    EDITOR_CONFIG,
    EDITOR_SETTINGS,
    FORMAT_RULES,
    IGNORE_RULES,
    LINT_RULES,
)
from devseed.core.vcs import VcsResult, bootstrap_vcs

logger = logging.getLogger(__name__)

# Enable debug logging if DEVSEED_DEBUG environment variable is set
if os.getenv("DEVSEED_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@dataclass(frozen=True)
class SeedReport:
    """Results of one full scaffolding run."""

    manifest: MergeResult
    configs: tuple[MaterializeResult, ...]
    vcs: VcsResult


def run_seed(ctx: DevseedContext) -> SeedReport:
    """Run every scaffolding step in order.

    The manifest merge runs first so that a missing or malformed package.json
    aborts the run before any config file is written or git is touched.

    Raises:
        ManifestNotFoundError: If package.json does not exist
        ManifestFormatError: If package.json is malformed
    """
    logger.debug("seeding %s from %s", ctx.project_root, ctx.template_dir)

    manifest = merge_manifest(
        ctx, default_dependencies(format_rules=ctx.config.format_rules)
    )

    configs: list[MaterializeResult] = [materialize_file(ctx, LINT_RULES)]
    if ctx.config.format_rules:
        configs.append(materialize_file(ctx, FORMAT_RULES))
    configs.append(materialize_file(ctx, EDITOR_CONFIG))
    configs.append(materialize_file(ctx, IGNORE_RULES))
    configs.append(materialize_dir(ctx, EDITOR_SETTINGS))

    vcs = bootstrap_vcs(ctx)

    ctx.feedback.success("🥳 All done!")
    return SeedReport(manifest=manifest, configs=tuple(configs), vcs=vcs)
