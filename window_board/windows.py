"""
window_board.windows
--------------------

Enumerate live X11 windows through ``wmctrl -l -p`` and attribute each one to
a logical application.

Design
~~~~~~
* Records are rebuilt on every call; nothing is cached between requests.
* Lines that do not match the wmctrl grammar are skipped.
* Windows whose owning process cannot be named are dropped, never emitted
  with an empty identity.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Optional

from . import tools
from .classifier import WindowIndexer, classify, matches_target
from .constants import (
    BUILTIN_APPS,
    LIST_TIMEOUT,
    PROCESS_QUERY_TOOL,
    WINDOW_LIST_TOOL,
    ErrorKind,
)

_LOG = logging.getLogger(__name__)

# wmctrl -l -p:  0x04a00003  0 12345 hostname Window Title
_WMCTRL_LINE = re.compile(r"^(0x[\da-f]+)\s+(-?\d+)\s+(\d+)\s+\S+(?:\s+(.*))?$", re.I)


@dataclass(slots=True)
class WindowRecord:
    """One live window as seen at enumeration time.

    ``window_index`` is the 1-based ordinal among windows of the same
    application in this enumeration only.
    """

    id: str
    title: str
    application_name: str
    window_index: int


def parse_window_line(line: str) -> Optional[tuple[str, int, str]]:
    """Return ``(window_id, pid, title)`` for one wmctrl line, or None."""
    match = _WMCTRL_LINE.match(line.strip())
    if not match:
        return None
    wid, _desktop, pid, title = match.groups()
    return wid, int(pid), (title or "").strip() or "Window"


def process_name(pid: int) -> str:
    """Executable name of *pid*, or ``""`` when the process is gone."""
    if pid <= 0:
        return ""
    result = tools.run([PROCESS_QUERY_TOOL, "-p", str(pid), "-o", "comm="])
    return result.output.strip()


def list_windows(
    app_names: Iterable[str] = (), include_builtins: bool = True
) -> list[WindowRecord]:
    """List windows belonging to *app_names* (plus Terminal/Files by default).

    Returns an empty list when wmctrl is not installed.
    """
    if not tools.exists(WINDOW_LIST_TOOL):
        _LOG.error(
            "%s not found. Install with: sudo apt install %s",
            WINDOW_LIST_TOOL,
            WINDOW_LIST_TOOL,
        )
        return []

    targets = list(BUILTIN_APPS) if include_builtins else []
    targets.extend(app_names or ())

    listing = tools.run([WINDOW_LIST_TOOL, "-l", "-p"], timeout=LIST_TIMEOUT)
    if not listing.output.strip():
        return []

    indexer = WindowIndexer()
    windows: list[WindowRecord] = []
    for line in listing.output.splitlines():
        if not line.strip():
            continue
        parsed = parse_window_line(line)
        if parsed is None:
            _LOG.debug("%s: %r", ErrorKind.PARSE_MISMATCH.value, line)
            continue
        wid, pid, title = parsed

        proc = process_name(pid)
        if not proc:
            _LOG.debug(
                "%s: window %s pid %d", ErrorKind.UNRESOLVABLE_PROCESS.value, wid, pid
            )
            continue

        app = classify(proc)
        if not matches_target(app, proc, targets):
            continue

        windows.append(
            WindowRecord(
                id=wid,
                title=title,
                application_name=app,
                window_index=indexer.next(app),
            )
        )

    _LOG.debug("Enumerated %d matching window(s)", len(windows))
    return windows
