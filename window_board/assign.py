"""
window_board.assign
-------------------

Auto mode: group windows by the display they currently sit on.

A window belongs to the first display whose work area contains its centre
point.  Windows that cannot be measured are treated as a 100x100 box at the
origin.
"""

from __future__ import annotations

import logging
import re
from typing import Sequence

from . import tools
from .constants import FALLBACK_GEOMETRY, WINDOW_FOCUS_TOOL, ErrorKind
from .displays import DisplayInfo, Rect
from .windows import WindowRecord

_LOG = logging.getLogger(__name__)

_SHELL_FIELDS = ("X", "Y", "WIDTH", "HEIGHT")


def window_geometry(window_id: str) -> Rect:
    """Current on-screen geometry of *window_id* via ``xdotool --shell``.

    Each field that cannot be read falls back to ``FALLBACK_GEOMETRY``.
    """
    result = tools.run([WINDOW_FOCUS_TOOL, "getwindowgeometry", "--shell", window_id])
    values = []
    for field, default in zip(_SHELL_FIELDS, FALLBACK_GEOMETRY):
        match = re.search(rf"^{field}=(-?\d+)", result.output, re.M)
        values.append(int(match.group(1)) if match else default)
    if not result.ok:
        _LOG.debug("%s: window %s", ErrorKind.GEOMETRY_UNAVAILABLE.value, window_id)
    return Rect(*values)


def assign_to_displays(
    windows: Sequence[WindowRecord], displays: Sequence[DisplayInfo]
) -> dict[int, list[WindowRecord]]:
    """Map display index -> windows on it, in display then enumeration order.

    Displays without windows are omitted; windows outside every work area are
    dropped.
    """
    groups: dict[int, list[WindowRecord]] = {d.index: [] for d in displays}
    for win in windows:
        cx, cy = window_geometry(win.id).center
        target = next((d for d in displays if d.work_area.contains(cx, cy)), None)
        if target is None:
            _LOG.debug("Window %s centre (%.0f, %.0f) is off-screen", win.id, cx, cy)
            continue
        groups[target.index].append(win)
    return {index: members for index, members in groups.items() if members}
