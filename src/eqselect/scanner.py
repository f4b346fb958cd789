"""Directory walking and candidate discovery."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from eqselect.errors import DirectoryAccessError, EarlyStop, SubdirectoryAccessError
from eqselect.fileset import MAX_FILENAME_BYTES, FileSet, fits_path_bound
from eqselect.validator import is_valid_extension

logger = logging.getLogger(__name__)

DIRSEP = "/"


def scan_tree(
    root: Path,
    history: FileSet,
    *,
    leaf: bool = False,
    continuous: bool = False,
) -> FileSet:
    """Walk root and return the media files not yet present in history.

    Filenames are relative to root and joined with "/". In leaf mode
    subdirectories are ignored. In continuous mode the walk stops at the
    first eligible file, so the result holds at most one entry.

    Raises DirectoryAccessError if root itself cannot be listed.
    """
    candidates = FileSet()
    try:
        _scan_directory(root, "", history, candidates, leaf=leaf, continuous=continuous)
    except EarlyStop:
        logger.debug("Continuous mode: stopped at %s", candidates.last())
    return candidates


def _list_entries(directory: Path, prefix: str) -> list[os.DirEntry[str]]:
    """Return the entries of directory sorted by name."""
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        if prefix:
            raise SubdirectoryAccessError(f"Can't enter {prefix}: {e}") from e
        raise DirectoryAccessError(f"Can't open {directory}: {e}") from e
    entries.sort(key=lambda entry: entry.name)
    return entries


def _scan_directory(
    directory: Path,
    prefix: str,
    history: FileSet,
    candidates: FileSet,
    *,
    leaf: bool,
    continuous: bool,
) -> None:
    """Add eligible files under directory to candidates, recursing unless leaf."""
    for entry in _list_entries(directory, prefix):
        if entry.name in (".", ".."):
            continue

        rel_path = f"{prefix}{DIRSEP}{entry.name}" if prefix else entry.name
        if not fits_path_bound(rel_path):
            logger.warning(
                "Skipping %s: path longer than %d bytes",
                rel_path,
                MAX_FILENAME_BYTES - 1,
            )
            continue

        try:
            # File symlinks count as files; directory symlinks are never entered.
            is_file = entry.is_file()
            is_dir = not is_file and entry.is_dir(follow_symlinks=False)
        except OSError as e:
            logger.warning("Can't stat %s: %s", rel_path, e)
            continue

        if is_file and is_valid_extension(rel_path):
            if rel_path in history:
                continue
            candidates.add(rel_path)
            if continuous:
                raise EarlyStop
        elif is_dir and not leaf:
            try:
                _scan_directory(
                    Path(entry.path),
                    rel_path,
                    history,
                    candidates,
                    leaf=leaf,
                    continuous=continuous,
                )
            except SubdirectoryAccessError as e:
                logger.warning("%s", e)
