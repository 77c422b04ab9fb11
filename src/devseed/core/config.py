"""Project-level configuration loaded from devseed.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_FILENAME = "devseed.toml"


@dataclass(frozen=True)
class SeedConfig:
    """In-memory representation of `devseed.toml`.

    format_rules enables the prettier config and its dev dependency.
    """

    format_rules: bool = False


def load_config(project_root: Path) -> SeedConfig:
    """Load devseed.toml from project_root if present; otherwise return defaults.

    Example config:
      format_rules = true

    Raises:
        ValueError: If the file is not valid TOML or a field has the wrong type
    """
    cfg_path = project_root / CONFIG_FILENAME
    if not cfg_path.exists():
        return SeedConfig()

    try:
        data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {cfg_path}: {e}") from e

    format_rules = data.get("format_rules", False)
    if not isinstance(format_rules, bool):
        raise ValueError(f"'format_rules' in {cfg_path} must be true or false")

    return SeedConfig(format_rules=format_rules)
