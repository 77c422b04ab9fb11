"""Indentation and newline detection for JSON documents.

The rewritten package.json has to keep the author's whitespace style, so both
values are read from the raw text before it is parsed.
"""

import re
from dataclasses import dataclass

_INDENT_RE = re.compile(r"^(?:( )+|\t+)")
_NEWLINE_RE = re.compile(r"\r?\n")


@dataclass(frozen=True)
class ManifestFormat:
    """Whitespace style of a JSON document.

    Attributes:
        indent: Indentation unit ("" when the text has no indentation)
        newline: Dominant newline sequence, or None when the text has none
    """

    indent: str
    newline: str | None


def detect_newline(text: str) -> str | None:
    """Return the dominant newline sequence of text.

    Returns "\\r\\n" only when CRLF outnumbers bare LF; None without newlines.
    """
    newlines = _NEWLINE_RE.findall(text)
    if not newlines:
        return None
    crlf = sum(1 for nl in newlines if nl == "\r\n")
    lf = len(newlines) - crlf
    return "\r\n" if crlf > lf else "\n"


def _indent_usage(text: str, *, ignore_single_spaces: bool) -> dict[tuple[str, int], list[int]]:
    # Maps (type, step) to [times the step was used, times the level was reused].
    usage: dict[tuple[str, int], list[int]] = {}
    previous_size = 0
    previous_type = ""
    key: tuple[str, int] | None = None

    for line in text.split("\n"):
        if not line:
            continue

        match = _INDENT_RE.match(line)
        if match is None:
            previous_size = 0
            previous_type = ""
            continue

        size = len(match.group(0))
        indent_type = " " if match.group(1) else "\t"
        if ignore_single_spaces and indent_type == " " and size == 1:
            continue

        if indent_type != previous_type:
            previous_size = 0
        previous_type = indent_type

        difference = size - previous_size
        previous_size = size
        if difference == 0:
            used, reused = 0, 1
        else:
            used, reused = 1, 0
            key = (indent_type, abs(difference))

        if key is None:
            continue
        entry = usage.setdefault(key, [0, 0])
        entry[0] += used
        entry[1] += reused

    return usage


def detect_indent(text: str) -> str:
    """Return the indentation unit used by text.

    Each indented line contributes the step between its indentation and the
    previous line's; the most frequent step wins, ties going to the step whose
    level was reused most. Single-space indents are only counted when nothing
    else is indented.
    """
    usage = _indent_usage(text, ignore_single_spaces=True)
    if not usage:
        usage = _indent_usage(text, ignore_single_spaces=False)

    best: tuple[str, int] | None = None
    best_used = 0
    best_reused = 0
    for key, (used, reused) in usage.items():
        if used > best_used or (used == best_used and reused > best_reused):
            best, best_used, best_reused = key, used, reused

    if best is None:
        return ""
    indent_type, amount = best
    return indent_type * amount


def detect_format(text: str) -> ManifestFormat:
    """Detect the whitespace style of a JSON document."""
    return ManifestFormat(indent=detect_indent(text), newline=detect_newline(text))
