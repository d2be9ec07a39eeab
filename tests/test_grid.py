"""Tests for grid planning and cell geometry."""

import pytest

from window_board.displays import Rect
from window_board.grid import GridPlan, cell_rect, layout_cells, plan_grid

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    "count, columns",
    [(1, 1), (2, 2), (3, 3), (6, 3), (7, 4), (12, 4), (13, 5), (20, 5), (21, 6), (40, 6)],
)
def test_column_breakpoints_on_full_hd(count, columns):
    assert plan_grid(count, 1920).columns == columns


def test_single_window_gets_one_column():
    assert plan_grid(1, 1920) == GridPlan(1, 1)


def test_seven_windows():
    assert plan_grid(7, 1920, 0, 0) == GridPlan(4, 2)


def test_thirteen_windows():
    assert plan_grid(13, 1920, 0, 0) == GridPlan(5, 3)


def test_wide_display_raises_columns():
    assert plan_grid(2, 3200, 0, 0) == GridPlan(5, 1)
    assert plan_grid(2, 2800) == GridPlan(4, 1)
    assert plan_grid(1, 2000) == GridPlan(3, 1)


def test_wide_display_never_lowers_columns():
    assert plan_grid(30, 3840).columns == 6


@pytest.mark.parametrize("count, width", [(1, 1280), (9, 1920), (50, 5120)])
def test_user_columns_always_win(count, width):
    assert plan_grid(count, width, user_columns=2).columns == 2


def test_user_rows_override():
    assert plan_grid(9, 1920, user_columns=3, user_rows=1) == GridPlan(3, 1)


def test_zero_windows_is_rejected():
    with pytest.raises(ValueError):
        plan_grid(0, 1920)


def test_cell_rect_tiles_without_gaps():
    area = Rect(0, 32, 1920, 1048)
    plan = GridPlan(3, 2)
    cells = [cell_rect(plan, area, i) for i in range(6)]

    assert cells[0] == Rect(0, 32, 640, 524)
    assert cells[4] == Rect(640, 556, 640, 524)
    # adjacent cells share edges exactly
    assert cells[0].x + cells[0].width == cells[1].x
    assert cells[0].y + cells[0].height == cells[3].y
    assert cells[2].x + cells[2].width == area.x + area.width


def test_cell_rect_uneven_division():
    cells = [cell_rect(GridPlan(3, 1), Rect(10, 0, 1000, 600), i) for i in range(3)]
    assert [c.x for c in cells] == [10, 343, 676]
    assert sum(c.width for c in cells) == 1000


def test_layout_cells_last_row_partial():
    cells = layout_cells(5, Rect(0, 0, 1920, 1080))
    assert len(cells) == 5
    assert cells[3] == Rect(0, 540, 640, 540)
