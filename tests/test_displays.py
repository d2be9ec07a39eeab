"""Tests for display topology reading."""

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import pytest
from Xlib.error import DisplayError

from window_board.displays import Rect, build_displays, get_displays

pytestmark = pytest.mark.unit


def test_rect_contains_is_half_open():
    r = Rect(0, 0, 100, 50)
    assert r.contains(0, 0)
    assert r.contains(99.5, 49.5)
    assert not r.contains(100, 10)
    assert not r.contains(10, 50)
    assert not r.contains(-0.5, 10)


def test_rect_intersect():
    assert Rect(0, 0, 100, 100).intersect(Rect(50, 20, 100, 100)) == Rect(50, 20, 50, 80)
    assert Rect(0, 0, 100, 100).intersect(Rect(100, 0, 10, 10)) is None


def test_build_displays_clips_work_area_to_each_frame():
    frames = [Rect(0, 0, 1920, 1080), Rect(1920, 0, 2560, 1440)]
    workarea = Rect(0, 32, 4480, 1408)

    main, side = build_displays(frames, workarea)

    assert main.index == 1 and main.is_main
    assert main.work_area == Rect(0, 32, 1920, 1048)
    assert side.index == 2 and not side.is_main
    assert side.work_area == Rect(1920, 32, 2560, 1408)


def test_build_displays_without_workarea_uses_frame():
    (only,) = build_displays([Rect(0, 0, 1280, 800)], None)
    assert only.work_area == only.frame


def test_build_displays_disjoint_workarea_uses_frame():
    (only,) = build_displays([Rect(3000, 0, 1280, 800)], Rect(0, 0, 100, 100))
    assert only.work_area == only.frame
    assert not only.is_main


def test_get_displays_reads_x_server():
    frames = [Rect(0, 0, 1920, 1080)]
    with patch(
        "window_board.displays._read_x11_geometry",
        return_value=(frames, Rect(0, 27, 1920, 1053)),
    ):
        displays = get_displays()

    assert len(displays) == 1
    assert displays[0].work_area == Rect(0, 27, 1920, 1053)


def test_get_displays_without_x_server_returns_empty():
    with patch(
        "window_board.displays.xdisplay.Display", side_effect=DisplayError(":0")
    ):
        assert get_displays() == []


def test_read_x11_geometry_uses_randr_monitors():
    monitors = [
        SimpleNamespace(x=0, y=0, width_in_pixels=1920, height_in_pixels=1080),
        SimpleNamespace(x=-1280, y=0, width_in_pixels=1280, height_in_pixels=1024),
    ]
    root = MagicMock()
    root.xrandr_get_monitors.return_value = SimpleNamespace(monitors=monitors)
    root.get_full_property.return_value = SimpleNamespace(
        value=[-1280, 0, 3200, 1080, -1280, 0, 3200, 1080]
    )
    disp = MagicMock()
    disp.has_extension.return_value = True
    disp.screen.return_value = SimpleNamespace(
        root=root, width_in_pixels=3200, height_in_pixels=1080
    )

    with patch("window_board.displays.xdisplay.Display", return_value=disp):
        displays = get_displays()

    assert [d.frame for d in displays] == [
        Rect(0, 0, 1920, 1080),
        Rect(-1280, 0, 1280, 1024),
    ]
    assert displays[0].is_main and not displays[1].is_main
    assert displays[1].work_area == Rect(-1280, 0, 1280, 1024)
    disp.close.assert_called_once()


def test_read_x11_geometry_without_randr_uses_screen():
    root = MagicMock()
    root.get_full_property.return_value = None
    disp = MagicMock()
    disp.has_extension.return_value = False
    disp.screen.return_value = SimpleNamespace(
        root=root, width_in_pixels=1024, height_in_pixels=768
    )

    with patch("window_board.displays.xdisplay.Display", return_value=disp):
        (only,) = get_displays()

    assert only.frame == only.work_area == Rect(0, 0, 1024, 768)
