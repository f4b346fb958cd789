"""Configuration loading, merging, and validation."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from eqselect.player import DEFAULT_PLAYER

CONFIG_FILE_NAME = "config.toml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class RunConfig:
    """Immutable configuration for one eqselect run."""

    root: Path
    continuous: bool = False
    leaf: bool = False
    repeat_last: bool = False
    reset: bool = False
    player: str = DEFAULT_PLAYER
    log_level: str = "INFO"


_DEFAULTS: dict[str, Any] = {
    "continuous": False,
    "leaf": False,
    "repeat_last": False,
    "reset": False,
    "log_level": "INFO",
}

# Keys a config file may set. Mode flags and the scan root come from the
# command line only.
_FILE_KEYS = frozenset({"player", "log_level"})


def config_path(directory: Path) -> Path:
    """Return the default config file path inside the state directory."""
    return directory / CONFIG_FILE_NAME


def load_config(path: Path) -> dict[str, Any]:
    """Read a TOML config file and return a dict."""
    with path.open("rb") as f:
        return tomllib.load(f)


def merge_config(
    file_config: dict[str, Any],
    cli_overrides: dict[str, Any],
) -> RunConfig:
    """Merge defaults, file config, and CLI overrides into a validated config.

    Priority: defaults < file config < CLI overrides.
    The player falls back to the EQSELECT_PLAYER environment variable, then
    to the built-in default.
    """
    merged: dict[str, Any] = {**_DEFAULTS}
    merged.update(
        {k: v for k, v in file_config.items() if k in _FILE_KEYS and v is not None}
    )
    merged.update({k: v for k, v in cli_overrides.items() if v is not None})

    if not merged.get("player"):
        merged["player"] = os.environ.get("EQSELECT_PLAYER", "") or DEFAULT_PLAYER

    merged["root"] = Path(merged["root"]) if merged.get("root") else Path.cwd()

    return _validate(merged)


def _validate(merged: dict[str, Any]) -> RunConfig:
    """Validate the merged config and return a RunConfig."""
    errors: list[str] = []

    root = merged["root"]
    if not root.is_dir():
        errors.append(f"directory does not exist: {root}")

    player = merged["player"]
    if not isinstance(player, str) or not player.strip():
        errors.append("player must be a non-empty command name")

    log_level = str(merged["log_level"]).upper()
    if log_level not in _LOG_LEVELS:
        errors.append(
            f"log_level must be one of {', '.join(_LOG_LEVELS)} (got {merged['log_level']!r})"
        )

    if errors:
        raise ValueError("Configuration errors:\n  " + "\n  ".join(errors))

    return RunConfig(
        root=root,
        continuous=bool(merged["continuous"]),
        leaf=bool(merged["leaf"]),
        repeat_last=bool(merged["repeat_last"]),
        reset=bool(merged["reset"]),
        player=player.strip(),
        log_level=log_level,
    )
