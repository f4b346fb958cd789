"""CLI entry point for eqselect."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import typer

from eqselect import __version__
from eqselect.config import RunConfig, config_path, load_config, merge_config
from eqselect.errors import (
    DirectoryAccessError,
    EmptyPopulationError,
    PersistenceError,
    PlayerLaunchError,
)
from eqselect.history import ensure_state_dir, history_path, state_dir
from eqselect.logging_setup import LOG_FILE_NAME, printable, setup_logging
from eqselect.player import launch_player
from eqselect.selector import run_selection
from eqselect.validator import check_player_available

logger = logging.getLogger(__name__)

PROJECT_URL = "https://github.com/fossette/eqselect/wiki"

app = typer.Typer(
    name="eqselect",
    help=(
        "Select a media file not played yet from a directory tree and play it. "
        "Every file is played once before any file is played again."
    ),
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"eqselect {__version__}")
        raise typer.Exit()


def _build_config(
    state: Path,
    config: Optional[str],
    directory: Optional[str],
    continuous: bool,
    leaf: bool,
    repeat_last: bool,
    reset: bool,
    log_level: Optional[str],
) -> RunConfig:
    """Load the optional TOML config and merge with CLI flags."""
    if config is not None:
        file_path = Path(config)
        if not file_path.exists():
            raise ValueError(f"Config file not found: {file_path}")
    else:
        file_path = config_path(state)
    try:
        file_config = load_config(file_path) if file_path.exists() else {}
    except OSError as e:
        raise PersistenceError(f"Cannot read {file_path}: {e}") from e

    cli_overrides: dict[str, Any] = {
        "root": directory,
        "continuous": continuous,
        "leaf": leaf,
        "repeat_last": repeat_last,
        "reset": reset,
        "log_level": log_level,
    }
    return merge_config(file_config, cli_overrides)


@app.command()
def run(
    directory: Optional[str] = typer.Argument(None, help="Directory to scan (default: current directory)"),
    continuous: bool = typer.Option(False, "-c", "--continuous", help="Always pick the first unplayed file instead of a random one"),
    leaf: bool = typer.Option(False, "-l", "--leaf", help="Ignore subdirectories"),
    repeat_last: bool = typer.Option(False, "-r", "--repeat-last", help="Play the last played file again"),
    reset: bool = typer.Option(False, "-z", "--reset", help="Forget the played files before selecting"),
    config: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file (default: ~/.eqselect/config.toml)"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override log level"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True, help="Print version and exit"),
) -> None:
    """Select and play one media file."""
    state = state_dir()
    try:
        ensure_state_dir(state)
        cfg = _build_config(state, config, directory, continuous, leaf, repeat_last, reset, log_level)
    except PersistenceError as e:
        typer.echo(f"ERROR: System call error: {e}")
        raise typer.Exit(code=1)
    except ValueError as e:
        typer.echo(f"ERROR: {e}")
        raise typer.Exit(code=1)

    setup_logging(cfg.log_level, state / LOG_FILE_NAME)

    logger.info("eqselect v%s", __version__)
    logger.info("%s", PROJECT_URL)
    logger.info("Working directory: %s", cfg.root.resolve())

    try:
        check_player_available(cfg.player)
    except RuntimeError as e:
        logger.warning("%s", e)

    try:
        result = run_selection(cfg, history_path(state), launcher=launch_player)
    except DirectoryAccessError as e:
        logger.debug("%s", e)
        logger.error("Specified path can't be accessed.")
        raise typer.Exit(code=1)
    except EmptyPopulationError:
        logger.error("No file to execute in the current directory.")
        raise typer.Exit(code=1)
    except MemoryError:
        logger.error("Out of memory.")
        raise typer.Exit(code=1)
    except (PersistenceError, PlayerLaunchError) as e:
        logger.error("System call error: %s", e)
        raise typer.Exit(code=1)

    if result.repeated:
        logger.info("Playing again: %s", printable(result.filename))
    else:
        logger.info("Playing: %s", printable(result.filename))


if __name__ == "__main__":
    app()
