"""Terminal handling after reading a piped report."""

from __future__ import annotations

import logging
import os
import sys

logger = logging.getLogger(__name__)

TTY_PATH = "/dev/tty"


def stdin_is_tty() -> bool:
    try:
        return os.isatty(sys.stdin.fileno())
    except (AttributeError, ValueError, OSError):
        return False


def reattach_stdin() -> None:
    """Point file descriptor 0 at the controlling terminal.

    ``terraform plan | planview`` leaves stdin connected to the (now
    exhausted) pipe; the TUI reads keys from fd 0, so it has to be swapped
    for ``/dev/tty`` once the report has been consumed.

    Raises:
        OSError: If there is no controlling terminal (e.g. under cron or CI).
    """
    if stdin_is_tty():
        return
    if sys.platform == "win32":
        raise OSError("reading the plan from a pipe is not supported on Windows")

    fd = os.open(TTY_PATH, os.O_RDONLY)
    try:
        os.dup2(fd, 0)
    finally:
        os.close(fd)
    sys.stdin = open(0, closefd=False)
    logger.debug("Re-attached stdin to %s", TTY_PATH)
