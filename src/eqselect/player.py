"""Fire-and-forget player launching."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from eqselect.errors import PlayerLaunchError

logger = logging.getLogger(__name__)

DEFAULT_PLAYER = "vlc"


def launch_player(player: str, filename: str, cwd: Path) -> subprocess.Popen[bytes]:
    """Start player on filename and return without waiting for it.

    The process runs in cwd so that relative filenames resolve against the
    scan root. Its standard streams are detached and it gets its own session,
    so it outlives this process.
    """
    logger.debug("Launching %s %r in %s", player, filename, cwd)
    try:
        return subprocess.Popen(
            [player, filename],
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        raise PlayerLaunchError(f"Cannot start {player}: {e}") from e
