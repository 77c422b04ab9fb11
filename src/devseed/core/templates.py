"""Bundled template location and the config kinds seeded from it."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ConfigKind:
    """A category of project configuration seeded from one template.

    Attributes:
        filenames: Recognized destination names, in lookup order. The first
            entry is the canonical name used when creating the file.
        template: File (or directory) name inside the template directory
        settings_files: Files copied individually when the kind is a directory
    """

    filenames: tuple[str, ...]
    template: str
    settings_files: tuple[str, ...] = ()

    @property
    def canonical(self) -> str:
        return self.filenames[0]


LINT_RULES = ConfigKind(
    filenames=(".eslintrc", ".eslintrc.json", ".eslintrc.js", ".eslintrc.mjs", ".eslintrc.cjs"),
    template="eslintrc",
)

FORMAT_RULES = ConfigKind(
    filenames=(
        ".prettierrc",
        ".prettierrc.json",
        ".prettierrc.js",
        ".prettierrc.cjs",
        ".prettierrc.mjs",
    ),
    template="prettierrc",
)

EDITOR_CONFIG = ConfigKind(
    filenames=(".editorconfig",),
    template="editorconfig",
)

IGNORE_RULES = ConfigKind(
    filenames=(".gitignore",),
    template="gitignore",
)

EDITOR_SETTINGS = ConfigKind(
    filenames=(".vscode",),
    template="vscode",
    settings_files=("settings.json",),
)


def get_template_dir() -> Path:
    """Get the bundled template directory of the installed package."""
    return (Path(__file__).parent.parent / "data" / "templates").resolve()


def get_template_path(template_dir: Path, name: str) -> Path:
    """Get the path of a single template inside template_dir."""
    return template_dir / name
