"""
window_board.classifier
-----------------------

Map raw process names onto the logical application identities shown on the
board ("Terminal", "Files", or the process name itself).
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable

from .constants import (
    FILE_MANAGER_PROCESSES,
    FILES_APP,
    TERMINAL_APP,
    TERMINAL_PROCESS_PREFIXES,
)


def classify(process_name: str) -> str:
    """Return the application name for *process_name*.

    Terminal emulators match by prefix, file managers by exact name, and
    anything else passes through unchanged.
    """
    if process_name.startswith(TERMINAL_PROCESS_PREFIXES):
        return TERMINAL_APP
    if process_name in FILE_MANAGER_PROCESSES:
        return FILES_APP
    return process_name


def matches_target(
    application_name: str, process_name: str, targets: Iterable[str]
) -> bool:
    """True when the window belongs to one of *targets*.

    A target matches the classified name exactly, or the raw process name
    exactly or as a prefix.
    """
    return any(
        application_name == t or process_name == t or process_name.startswith(t)
        for t in targets
        if t
    )


class WindowIndexer:
    """Hand out 1-based running indices per application name."""

    def __init__(self) -> None:
        self._counts: Counter[str] = Counter()

    def next(self, application_name: str) -> int:
        self._counts[application_name] += 1
        return self._counts[application_name]
