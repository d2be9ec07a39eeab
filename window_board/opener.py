"""
window_board.opener
-------------------

Launch new terminal / file-manager windows, or ask a running application for
a new window.

Launches are fire-and-forget: the child runs in its own session with stdio
detached, and success is reported after a short settle delay.  Failures that
happen after that delay are not observed.
"""

from __future__ import annotations

import logging
import os
import subprocess
import time
from typing import Optional, Sequence

from . import tools
from .constants import (
    DEFAULT_OPEN_DIR_FALLBACK,
    LAUNCH_SETTLE_DELAY,
    NEW_WINDOW_DELAY,
    TERMINAL_DIRECTORY_ARGS,
    WINDOW_FOCUS_TOOL,
    WINDOW_LIST_TOOL,
)
from .detect import detect_file_manager, detect_terminal
from .models import OpenResult

_LOG = logging.getLogger(__name__)


def _resolve_dir(path: Optional[str]) -> str:
    return path or os.environ.get("HOME") or DEFAULT_OPEN_DIR_FALLBACK


def terminal_command(terminal: str, directory: str) -> list[str]:
    """argv that opens *terminal* in *directory*."""
    template = TERMINAL_DIRECTORY_ARGS.get(terminal, ())
    return [terminal, *(arg.format(path=directory) for arg in template)]


def _launch_detached(argv: Sequence[str], cwd: Optional[str] = None) -> Optional[str]:
    """Start *argv* detached; return an error message or None on success."""
    try:
        proc = subprocess.Popen(
            list(argv),
            cwd=cwd if cwd and os.path.isdir(cwd) else None,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as exc:
        _LOG.error("Failed to launch %s: %s", argv[0], exc)
        return str(exc)

    time.sleep(LAUNCH_SETTLE_DELAY)
    code = proc.poll()
    if code is not None and code != 0:
        _LOG.error("%s exited with status %d right after launch", argv[0], code)
        return f"{argv[0]} exited with status {code}"
    _LOG.info("Launched %s (PID %d)", argv[0], proc.pid)
    return None


def open_terminal(path: Optional[str] = None) -> OpenResult:
    """Open the preferred terminal emulator in *path* (default: $HOME)."""
    terminal = detect_terminal()
    directory = _resolve_dir(path)
    error = _launch_detached(terminal_command(terminal, directory), cwd=directory)
    if error:
        return OpenResult(success=False, error=error)
    return OpenResult(success=True, window_name=terminal)


def open_file_manager(path: Optional[str] = None) -> OpenResult:
    """Open the preferred file manager on *path* (default: $HOME)."""
    manager = detect_file_manager()
    directory = _resolve_dir(path)
    error = _launch_detached([manager, directory])
    if error:
        return OpenResult(success=False, error=error)
    return OpenResult(success=True, window_name=directory, path=directory)


def open_generic_window(app_name: str) -> OpenResult:
    """Focus *app_name* and send it Ctrl+N."""
    if not tools.exists(WINDOW_FOCUS_TOOL):
        return OpenResult(success=False, error=f"{WINDOW_FOCUS_TOOL} not found")

    tools.run([WINDOW_LIST_TOOL, "-a", app_name])
    time.sleep(NEW_WINDOW_DELAY)
    tools.run([WINDOW_FOCUS_TOOL, "key", "--clearmodifiers", "ctrl+n"])
    return OpenResult(success=True, window_name=app_name)
