"""
window_board.actuator
~~~~~~~~~~~~~~~~~~~~~

Issue focus / move-resize / close commands to individual windows.

Execution strategy for activation (in order of preference):
1. xdotool: minimize, activate (restores), raise - each step synchronous.
2. Fallback: ``wmctrl -i -a``, which may leave a minimized window minimized.

All commands are best-effort; failures are logged and reported as False.
"""

from __future__ import annotations

import logging

from . import tools
from .constants import WINDOW_FOCUS_TOOL, WINDOW_LIST_TOOL, ErrorKind
from .displays import Rect
from .models import CloseResult

_LOG = logging.getLogger(__name__)


def activate(window_id: str) -> bool:
    """Bring *window_id* to the front, restoring it if minimized."""
    if not tools.exists(WINDOW_FOCUS_TOOL):
        _LOG.debug("%s missing, activating via %s", WINDOW_FOCUS_TOOL, WINDOW_LIST_TOOL)
        return tools.run([WINDOW_LIST_TOOL, "-i", "-a", window_id]).ok

    # Minimize first so that activation always goes through a restore.
    tools.run([WINDOW_FOCUS_TOOL, "windowminimize", "--sync", window_id])
    activated = tools.run([WINDOW_FOCUS_TOOL, "windowactivate", "--sync", window_id])
    tools.run([WINDOW_FOCUS_TOOL, "windowraise", window_id])
    if not activated.ok:
        _LOG.debug("%s: activate %s", ErrorKind.ACTUATION_FAILURE.value, window_id)
    return activated.ok


def arrange_one(window_id: str, rect: Rect) -> bool:
    """Unmaximize *window_id* and move/resize it to *rect*.

    Window managers ignore ``-e`` on a maximized window, so the unmaximize is
    always sent first as its own command.
    """
    tools.run(
        [
            WINDOW_LIST_TOOL,
            "-i",
            "-r",
            window_id,
            "-b",
            "remove,maximized_vert,maximized_horz",
        ]
    )
    geometry = f"0,{rect.x},{rect.y},{rect.width},{rect.height}"
    moved = tools.run([WINDOW_LIST_TOOL, "-i", "-r", window_id, "-e", geometry])
    if not moved.ok:
        _LOG.debug(
            "%s: move %s to %s", ErrorKind.ACTUATION_FAILURE.value, window_id, geometry
        )
    return moved.ok


def close(window_id: str) -> CloseResult:
    """Ask the window manager to close *window_id*; always reports success."""
    tools.run([WINDOW_LIST_TOOL, "-i", "-c", window_id])
    return CloseResult(success=True)
