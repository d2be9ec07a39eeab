"""
Tests for grid arrangement.

Tests verify that arrange_grid:
- Refuses to run without wmctrl and touches no window
- Tiles every window on an explicit target display
- Groups windows per display in auto mode
- Keeps going when a single window fails
- Produces identical rectangles when run twice
"""

from unittest.mock import patch

import pytest

from window_board.displays import Rect
from window_board.layout import arrange_grid
from window_board.models import ArrangeOptions, ArrangeResult
from fakes import FakeWindow

pytestmark = pytest.mark.unit


@pytest.fixture
def displays(dual_displays):
    with patch("window_board.layout.get_displays", return_value=dual_displays):
        yield dual_displays


def _terminals(desktop, *geometries):
    desktop.windows = [
        FakeWindow(f"0x{i + 1:02x}", 100 + i, "kitty", f"shell {i}", geometry=g)
        for i, g in enumerate(geometries)
    ]


def test_missing_wmctrl_fails_without_actuation(desktop, displays):
    desktop.installed = {"xdotool", "ps"}
    _terminals(desktop, Rect(0, 0, 10, 10))

    with patch("window_board.layout.arrange_one") as mock_arrange:
        result = arrange_grid(["Terminal"])

    assert result == ArrangeResult(success=False, arranged=0, error="wmctrl not found")
    mock_arrange.assert_not_called()
    assert desktop.actuation_calls() == []


def test_no_matching_windows(desktop, displays):
    _terminals(desktop, Rect(0, 0, 10, 10))
    assert arrange_grid(["firefox"]) == ArrangeResult(success=True, arranged=0)
    assert desktop.moves() == []


def test_only_requested_apps_are_arranged(desktop, displays):
    desktop.windows = [
        FakeWindow("0x01", 1, "kitty", geometry=Rect(0, 40, 100, 100)),
        FakeWindow("0x02", 2, "nautilus", geometry=Rect(0, 40, 100, 100)),
    ]
    result = arrange_grid(["Files"])
    assert result.arranged == 1
    assert [wid for wid, _ in desktop.moves()] == ["0x02"]


def test_target_display_mode(desktop, displays):
    # both windows sit on display 1 but are sent to display 2
    _terminals(desktop, Rect(0, 40, 100, 100), Rect(200, 40, 100, 100))

    result = arrange_grid(["Terminal"], ArrangeOptions(display_index=2))

    assert result == ArrangeResult(success=True, arranged=2)
    # 2 windows on a 2560px display: count gives 2 columns, width raises to 3
    assert desktop.moves() == [
        ("0x01", "0,1920,0,853,1440"),
        ("0x02", "0,2773,0,853,1440"),
    ]
    assert not any(c[1] == "getwindowgeometry" for c in desktop.calls)


def test_auto_mode_arranges_each_display_in_place(desktop, displays):
    _terminals(
        desktop,
        Rect(100, 100, 400, 300),  # display 1
        Rect(2500, 100, 400, 300),  # display 2
        Rect(900, 500, 400, 300),  # display 1
    )

    result = arrange_grid(["Terminal"])

    assert result.arranged == 3
    assert desktop.moves() == [
        ("0x01", "0,0,32,960,1048"),
        ("0x03", "0,960,32,960,1048"),
        ("0x02", "0,1920,0,853,1440"),
    ]


def test_out_of_range_display_uses_auto_mode(desktop, displays):
    _terminals(desktop, Rect(100, 100, 400, 300))
    result = arrange_grid(["Terminal"], ArrangeOptions(display_index=9))
    assert result.arranged == 1
    assert desktop.moves() == [("0x01", "0,0,32,1920,1048")]


def test_user_grid_overrides(desktop, displays):
    _terminals(desktop, *[Rect(100, 100, 50, 50)] * 4)

    arrange_grid(["Terminal"], ArrangeOptions(cols=1, rows=4, display_index=1))

    assert [geom for _, geom in desktop.moves()] == [
        "0,0,32,1920,262",
        "0,0,294,1920,262",
        "0,0,556,1920,262",
        "0,0,818,1920,262",
    ]


def test_single_failure_does_not_abort_siblings(desktop, displays):
    _terminals(desktop, *[Rect(100, 100, 50, 50)] * 3)
    desktop.failing_moves = {"0x02"}

    result = arrange_grid(["Terminal"], ArrangeOptions(display_index=1))

    assert result == ArrangeResult(success=True, arranged=2)
    assert [wid for wid, _ in desktop.moves()] == ["0x01", "0x02", "0x03"]


def test_no_displays_is_an_error(desktop):
    _terminals(desktop, Rect(0, 0, 10, 10))
    with patch("window_board.layout.get_displays", return_value=[]):
        result = arrange_grid(["Terminal"])
    assert result.success is False
    assert result.error == "no displays detected"


def test_arrangement_is_idempotent(desktop, displays):
    _terminals(
        desktop,
        Rect(100, 100, 400, 300),
        Rect(2500, 100, 400, 300),
        None,
        Rect(3000, 900, 400, 300),
    )

    first = arrange_grid(["Terminal"])
    first_moves = desktop.moves()
    desktop.calls.clear()
    second = arrange_grid(["Terminal"])

    assert first == second
    assert desktop.moves() == first_moves


def test_debug_bounds_logs_deviation(desktop, displays, monkeypatch, caplog):
    monkeypatch.setenv("WINDOW_BOARD_DEBUG_BOUNDS", "1")
    _terminals(desktop, Rect(100, 100, 400, 300))

    with caplog.at_level("WARNING", logger="window_board.layout"):
        arrange_grid(["Terminal"], ArrangeOptions(display_index=1))

    # the fake desktop never actually moves windows
    assert "bounds off by" in caplog.text
