"""Pick the preferred installed terminal emulator / file manager."""

from __future__ import annotations

import logging
from typing import Iterable

from . import tools
from .constants import (
    FILE_MANAGER_FALLBACK,
    FILE_MANAGER_PREFERENCE,
    TERMINAL_FALLBACK,
    TERMINAL_PREFERENCE,
)

_LOG = logging.getLogger(__name__)


def first_available(candidates: Iterable[str], fallback: str) -> str:
    """Return the first of *candidates* present on PATH, else *fallback*."""
    for name in candidates:
        if tools.exists(name):
            return name
    _LOG.debug("No preferred tool installed, falling back to %s", fallback)
    return fallback


def detect_terminal() -> str:
    return first_available(TERMINAL_PREFERENCE, TERMINAL_FALLBACK)


def detect_file_manager() -> str:
    return first_available(FILE_MANAGER_PREFERENCE, FILE_MANAGER_FALLBACK)
