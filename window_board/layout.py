"""
window_board.layout
~~~~~~~~~~~~~~~~~~~

Tile application windows into a grid on one or more displays.

Flow: tool check -> enumerate -> (target display | auto grouping) ->
plan per group -> move/resize each window.  Every request re-reads window and
display state, so repeated calls on an unchanged desktop yield the same
rectangles.
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, Optional, Sequence

from . import tools
from .actuator import arrange_one
from .assign import assign_to_displays, window_geometry
from .constants import (
    BOUNDS_TOLERANCE_PX,
    DEBUG_BOUNDS_ENV,
    WINDOW_LIST_TOOL,
    ErrorKind,
)
from .displays import DisplayInfo, Rect, get_displays
from .grid import layout_cells
from .models import ArrangeOptions, ArrangeResult
from .windows import WindowRecord, list_windows

_LOG = logging.getLogger(__name__)


def _verify_bounds(window_id: str, expected: Rect) -> None:
    """
    Re-read the window geometry and log a warning when it deviates by more
    than ``BOUNDS_TOLERANCE_PX`` in any direction.  Enabled only when
    $WINDOW_BOARD_DEBUG_BOUNDS=1.
    """
    if os.getenv(DEBUG_BOUNDS_ENV, "0") not in {"1", "true", "yes"}:
        return

    actual = window_geometry(window_id)
    if any(abs(a - e) > BOUNDS_TOLERANCE_PX for a, e in zip(actual, expected)):
        _LOG.warning(
            "Window %s bounds off by >%dpx – expected %s, got %s",
            window_id,
            BOUNDS_TOLERANCE_PX,
            tuple(expected),
            tuple(actual),
        )


def _arrange_group(
    windows: Sequence[WindowRecord], display: DisplayInfo, options: ArrangeOptions
) -> int:
    """Tile *windows* on *display*; return how many were moved."""
    cells = layout_cells(len(windows), display.work_area, options.cols, options.rows)
    arranged = 0
    for win, rect in zip(windows, cells):
        if arrange_one(win.id, rect):
            arranged += 1
            _verify_bounds(win.id, rect)
            _LOG.debug("Positioned window %s to %s", win.id, tuple(rect))
    _LOG.info(
        "Arranged %d/%d window(s) on display %d", arranged, len(windows), display.index
    )
    return arranged


def arrange_grid(
    app_names: Iterable[str], options: Optional[ArrangeOptions] = None
) -> ArrangeResult:
    """Arrange the windows of *app_names* into a grid.

    With ``options.display_index`` in range, every window goes to that
    display; otherwise each display's windows are tiled where they are.
    Never raises; failures come back as ``success=False`` with an error.
    """
    try:
        return _arrange(list(app_names), options or ArrangeOptions())
    except Exception as exc:
        _LOG.exception("Grid arrangement failed")
        return ArrangeResult(success=False, arranged=0, error=str(exc))


def _arrange(app_names: list[str], options: ArrangeOptions) -> ArrangeResult:
    if not tools.exists(WINDOW_LIST_TOOL):
        _LOG.error("%s: %s", ErrorKind.TOOL_MISSING.value, WINDOW_LIST_TOOL)
        return ArrangeResult(
            success=False, arranged=0, error=f"{WINDOW_LIST_TOOL} not found"
        )

    windows = list_windows(app_names, include_builtins=False)
    if not windows:
        _LOG.info("No windows to arrange")
        return ArrangeResult(success=True, arranged=0)

    displays = get_displays()
    if not displays:
        return ArrangeResult(success=False, arranged=0, error="no displays detected")

    if 1 <= options.display_index <= len(displays):
        target = displays[options.display_index - 1]
        return ArrangeResult(
            success=True, arranged=_arrange_group(windows, target, options)
        )

    if options.display_index:
        _LOG.warning(
            "Display %d does not exist (%d connected); arranging per display",
            options.display_index,
            len(displays),
        )

    by_index = {d.index: d for d in displays}
    arranged = 0
    for index, members in assign_to_displays(windows, displays).items():
        arranged += _arrange_group(members, by_index[index], options)
    return ArrangeResult(success=True, arranged=arranged)
