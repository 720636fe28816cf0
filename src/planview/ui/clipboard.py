"""Clipboard support for copying an action body out of the TUI.

Tries real clipboard tools (wl-copy, xclip, xsel, pbcopy) before falling
back to the OSC52 escape sequence that Textual can emit.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess

logger = logging.getLogger(__name__)

_backend: str | None = None  # cached after first detection

_COMMANDS = {
    "wl-copy": ["wl-copy"],
    "xclip": ["xclip", "-selection", "clipboard"],
    "xsel": ["xsel", "--clipboard", "--input"],
    "pbcopy": ["pbcopy"],
}


def detect_backend() -> str:
    """Detect the best available clipboard backend.

    Wayland sessions prefer wl-copy, everything else prefers the X11 tools.
    Falls back to "osc52" when no tool is installed.  Cached for the
    process lifetime.
    """
    global _backend
    if _backend is not None:
        return _backend

    if os.environ.get("XDG_SESSION_TYPE", "") == "wayland":
        order = ("wl-copy", "xclip", "xsel", "pbcopy")
    else:
        order = ("xclip", "xsel", "wl-copy", "pbcopy")

    _backend = next((tool for tool in order if shutil.which(tool)), "osc52")
    return _backend


def copy(text: str, app=None) -> bool:
    """Copy *text* to the system clipboard.  Returns True on success."""
    backend = detect_backend()

    if backend == "osc52":
        if app is None:
            return False
        try:
            app.copy_to_clipboard(text)
        except Exception:
            logger.debug("OSC52 copy failed", exc_info=True)
            return False
        return True

    try:
        proc = subprocess.run(
            _COMMANDS[backend],
            input=text,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            text=True,
            timeout=5,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.warning("Clipboard copy via %s failed: %s", backend, exc)
        return False
    return proc.returncode == 0


def _reset() -> None:
    """Reset cached backend (for testing)."""
    global _backend
    _backend = None
