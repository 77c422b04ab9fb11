"""Top-level error handling for the devseed command.

A fatal error (missing or malformed package.json, broken devseed.toml, a
filesystem failure while rewriting the manifest) ends the run with a single
`Error: ...` line on stderr and exit code 1 instead of a stack trace.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from devseed.cli.output import user_error

F = TypeVar("F", bound=Callable[..., Any])


def cli_error_boundary(func: F) -> F:
    """Report ValueError and OSError raised by func, then exit with code 1.

    ManifestNotFoundError is a FileNotFoundError and ManifestFormatError is a
    ValueError, so both land here. Anything else keeps its stack trace.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (ValueError, OSError) as e:
            user_error(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
