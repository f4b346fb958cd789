"""One selection run: load history, walk, pick, record, launch."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from eqselect.config import RunConfig
from eqselect.errors import EmptyPopulationError
from eqselect.fileset import FileSet
from eqselect.history import load_history, record_selection, reset_history
from eqselect.logging_setup import printable
from eqselect.player import launch_player
from eqselect.scanner import scan_tree

logger = logging.getLogger(__name__)

Launcher = Callable[[str, str, Path], Any]
Chooser = Callable[[int], int]


@dataclass(frozen=True)
class SelectionResult:
    """Outcome of a successful run."""

    filename: str
    repeated: bool = False
    history_reset: bool = False
    candidates: int = 0


def _system_chooser(n: int) -> int:
    """Pick an index in [0, n) from the OS entropy source."""
    return random.SystemRandom().randrange(n)


def run_selection(
    cfg: RunConfig,
    history_file: Path,
    *,
    launcher: Launcher = launch_player,
    chooser: Chooser | None = None,
) -> SelectionResult:
    """Select a file under cfg.root that has not been played, and play it.

    With repeat_last and a non-empty history, the most recent history entry
    is played again and nothing else happens. Otherwise the tree is walked
    for files missing from the history. When every file has been played the
    history is truncated and the tree is walked again.

    The choice is recorded in the history before the player is started; a
    failed launch leaves it recorded.

    Raises DirectoryAccessError, PersistenceError, EmptyPopulationError or
    PlayerLaunchError.
    """
    history_reset = False
    if cfg.reset:
        reset_history(history_file)
        history = FileSet()
        history_reset = True
        logger.info("History reset")
    else:
        history = load_history(history_file)
        logger.debug("Loaded %d history entries from %s", len(history), history_file)

    last = history.last()
    if cfg.repeat_last and last is not None:
        logger.info("Repeating %s", printable(last))
        launcher(cfg.player, last, cfg.root)
        return SelectionResult(filename=last, repeated=True)

    candidates = scan_tree(cfg.root, history, leaf=cfg.leaf, continuous=cfg.continuous)
    if not candidates:
        logger.info("All files executed once, start over!")
        history.clear()
        reset_history(history_file)
        history_reset = True
        candidates = scan_tree(cfg.root, history, leaf=cfg.leaf, continuous=cfg.continuous)

    if not candidates:
        raise EmptyPopulationError("No file to execute in the current directory.")

    if cfg.continuous or len(candidates) == 1:
        index = 0
    else:
        index = (chooser or _system_chooser)(len(candidates))
    filename = candidates[index]
    logger.debug("Picked %d of %d candidates", index + 1, len(candidates))

    record_selection(history_file, filename)
    launcher(cfg.player, filename, cfg.root)

    return SelectionResult(
        filename=filename,
        history_reset=history_reset,
        candidates=len(candidates),
    )
