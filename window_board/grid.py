"""Grid dimension planning and cell geometry."""

from __future__ import annotations

import math
from typing import NamedTuple

from .constants import (
    COLUMN_BREAKPOINTS,
    DEFAULT_MAX_COLUMNS,
    WIDE_DISPLAY_MIN_COLUMNS,
)
from .displays import Rect


class GridPlan(NamedTuple):
    columns: int
    rows: int


def plan_grid(
    window_count: int,
    display_width: int,
    user_columns: int = 0,
    user_rows: int = 0,
) -> GridPlan:
    """
    Choose (columns, rows) for tiling *window_count* windows.

    A positive *user_columns* wins outright.  Otherwise the column count comes
    from the window-count breakpoints and is then raised (never lowered) for
    wide displays.  Rows default to ``ceil(window_count / columns)`` so the
    last row may be partially filled.

    Raises
    ------
    ValueError
        If *window_count* is less than 1.
    """
    if window_count < 1:
        raise ValueError("cannot plan a grid for zero windows")

    if user_columns > 0:
        columns = user_columns
    else:
        columns = next(
            (cols for limit, cols in COLUMN_BREAKPOINTS if window_count <= limit),
            DEFAULT_MAX_COLUMNS,
        )
        for min_width, min_columns in WIDE_DISPLAY_MIN_COLUMNS:
            if display_width > min_width and columns < min_columns:
                columns = min_columns

    rows = user_rows if user_rows > 0 else math.ceil(window_count / columns)
    return GridPlan(columns, rows)


def cell_rect(plan: GridPlan, area: Rect, position: int) -> Rect:
    """Rectangle of cell *position* (0-based, row-major) inside *area*."""
    col = position % plan.columns
    row = position // plan.columns
    x1 = area.x + area.width * col // plan.columns
    x2 = area.x + area.width * (col + 1) // plan.columns
    y1 = area.y + area.height * row // plan.rows
    y2 = area.y + area.height * (row + 1) // plan.rows
    return Rect(x1, y1, x2 - x1, y2 - y1)


def layout_cells(
    count: int, area: Rect, user_columns: int = 0, user_rows: int = 0
) -> list[Rect]:
    """Plan a grid on *area* and return one rectangle per window."""
    plan = plan_grid(count, area.width, user_columns, user_rows)
    return [cell_rect(plan, area, i) for i in range(count)]
