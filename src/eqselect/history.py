"""Persisted history of played files.

The history is a plain text file, one filename per line, appended to once per
selection and truncated when the tree has been fully played or on request.
The file is opened and closed for every operation; nothing holds it open.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from eqselect.errors import PersistenceError
from eqselect.fileset import FileSet, fits_path_bound
from eqselect.validator import is_valid_extension

logger = logging.getLogger(__name__)

STATE_DIR_NAME = ".eqselect"
HISTORY_FILE_NAME = "exec.txt"
STATE_DIR_MODE = 0o740


def state_dir(home: Path | None = None) -> Path:
    """Return the state directory, <home>/.eqselect.

    The home directory comes from the HOME environment variable when not
    given explicitly.
    """
    if home is None:
        env_home = os.environ.get("HOME", "")
        home = Path(env_home) if env_home else Path.home()
    return home / STATE_DIR_NAME


def history_path(directory: Path) -> Path:
    """Return the path to the history file inside the state directory."""
    return directory / HISTORY_FILE_NAME


def ensure_state_dir(directory: Path) -> None:
    """Create the state directory if it does not exist yet."""
    if directory.is_dir():
        return
    try:
        directory.mkdir(mode=STATE_DIR_MODE)
    except OSError as e:
        raise PersistenceError(f"Cannot create state directory {directory}: {e}") from e
    logger.debug("Created state directory %s", directory)


def load_history(path: Path) -> FileSet:
    """Load the history from disk. Returns an empty set if not found.

    Lines that are not media filenames, or that exceed the path bound, are
    dropped.
    """
    history = FileSet()
    if not path.exists():
        return history
    try:
        with path.open("r", encoding="utf-8", errors="surrogateescape", newline="") as f:
            for line in f:
                name = line.rstrip("\r\n")
                if not is_valid_extension(name) or not fits_path_bound(name):
                    logger.debug("Ignoring history line %r", name)
                    continue
                history.add(name)
    except OSError as e:
        raise PersistenceError(f"Cannot read {path}: {e}") from e
    return history


def record_selection(path: Path, filename: str) -> None:
    """Append filename to the history file."""
    try:
        with path.open("a", encoding="utf-8", errors="surrogateescape") as f:
            f.write(f"{filename}\n")
    except OSError as e:
        raise PersistenceError(f"Cannot append to {path}: {e}") from e


def reset_history(path: Path) -> None:
    """Truncate the history file to zero bytes."""
    try:
        with path.open("w", encoding="utf-8"):
            pass
    except OSError as e:
        raise PersistenceError(f"Cannot reset {path}: {e}") from e
    logger.debug("History reset: %s", path)
