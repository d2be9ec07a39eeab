"""
window_board.displays
~~~~~~~~~~~~~~~~~~~~~

Physical display geometry read from the X server.

Monitor bounds come from the RandR extension; the usable work area comes from
the EWMH ``_NET_WORKAREA`` root property, clipped to each monitor.  Geometry is
read fresh on every call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

from Xlib import X, display as xdisplay
from Xlib.error import DisplayError, XError

_LOG = logging.getLogger(__name__)


class Rect(NamedTuple):
    x: int
    y: int
    width: int
    height: int

    @property
    def center(self) -> tuple[float, float]:
        return self.x + self.width / 2, self.y + self.height / 2

    def contains(self, px: float, py: float) -> bool:
        """Half-open containment: left/top edges inside, right/bottom outside."""
        return (
            self.x <= px < self.x + self.width and self.y <= py < self.y + self.height
        )

    def intersect(self, other: "Rect") -> Optional["Rect"]:
        left = max(self.x, other.x)
        top = max(self.y, other.y)
        right = min(self.x + self.width, other.x + other.width)
        bottom = min(self.y + self.height, other.y + other.height)
        if right <= left or bottom <= top:
            return None
        return Rect(left, top, right - left, bottom - top)


@dataclass(slots=True)
class DisplayInfo:
    """One physical display; ``index`` is only meaningful within one read."""

    index: int
    frame: Rect
    work_area: Rect
    is_main: bool


def _read_x11_geometry() -> tuple[list[Rect], Optional[Rect]]:
    """Return ``(monitor frames, desktop work area)`` from the X server."""
    disp = xdisplay.Display()
    try:
        screen = disp.screen()
        root = screen.root

        frames: list[Rect] = []
        if disp.has_extension("RANDR"):
            try:
                monitors = root.xrandr_get_monitors().monitors
            except XError as exc:  # RandR older than 1.5
                _LOG.debug("RandR monitor query failed: %s", exc)
                monitors = []
            for mon in monitors:
                frames.append(
                    Rect(mon.x, mon.y, mon.width_in_pixels, mon.height_in_pixels)
                )
        if not frames:
            frames.append(Rect(0, 0, screen.width_in_pixels, screen.height_in_pixels))

        workarea = None
        prop = root.get_full_property(
            disp.intern_atom("_NET_WORKAREA"), X.AnyPropertyType
        )
        if prop is not None and len(prop.value) >= 4:
            # One rectangle per virtual desktop; they are identical in practice.
            workarea = Rect(*(int(v) for v in prop.value[:4]))
        return frames, workarea
    finally:
        disp.close()


def build_displays(frames: list[Rect], workarea: Optional[Rect]) -> list[DisplayInfo]:
    """Combine monitor frames with the desktop work area."""
    displays = []
    for i, frame in enumerate(frames, start=1):
        usable = frame.intersect(workarea) if workarea is not None else None
        displays.append(
            DisplayInfo(
                index=i,
                frame=frame,
                work_area=usable or frame,
                is_main=frame.x == 0 and frame.y == 0,
            )
        )
    return displays


def get_displays() -> list[DisplayInfo]:
    """Return all displays in X enumeration order (empty if X is unreachable)."""
    try:
        frames, workarea = _read_x11_geometry()
    except (DisplayError, XError, OSError) as exc:
        _LOG.warning("Failed to read display geometry: %s", exc)
        return []
    return build_displays(frames, workarea)
