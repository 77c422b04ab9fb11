import click

from devseed.cli.error_boundary import cli_error_boundary
from devseed.core.context import create_context
from devseed.core.seed import run_seed
from devseed.version import __version__

CONTEXT_SETTINGS = dict(
    help_option_names=["-h", "--help"],
    # Extra arguments are ignored; the full sequence always runs
    ignore_unknown_options=True,
    allow_extra_args=True,
)


@click.command(context_settings=CONTEXT_SETTINGS)
@click.version_option(__version__, "--version", "-v", message="%(version)s")
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context) -> None:
    """Seed lint, editor, and git configuration into the current project.

    Requires a package.json in the current directory. Existing config files
    are left untouched; only missing ones are created from bundled templates.

    \b
    What gets created (when missing):
    - devDependencies entries in package.json
    - .eslintrc (and .prettierrc when format_rules = true in devseed.toml)
    - .editorconfig
    - .gitignore
    - .vscode/settings.json
    - a git repository with all files staged
    """
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    run_seed(ctx.obj)


def main() -> None:
    """CLI entry point used by the `devseed` console script."""
    cli()
