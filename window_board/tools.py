"""
window_board.tools
~~~~~~~~~~~~~~~~~~

Best-effort wrapper around the external command-line tools the engine drives
(wmctrl, xdotool, ps).

Every call returns a :class:`ToolResult` instead of raising: a missing
executable, a non-zero exit status and a timeout all collapse into an empty,
unsuccessful result.  Callers treat "no output" as "no data".
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from typing import NamedTuple, Sequence

from .constants import ACTION_TIMEOUT, ErrorKind

_LOG = logging.getLogger(__name__)


class ToolResult(NamedTuple):
    """Captured stdout of one tool invocation plus whether it succeeded."""

    output: str
    ok: bool


_FAILED = ToolResult("", False)


def exists(name: str) -> bool:
    """Return True when *name* is found on PATH.

    Deliberately uncached so that tools installed while the app runs are seen
    on the next request.
    """
    return shutil.which(name) is not None


def run(args: Sequence[str], timeout: float = ACTION_TIMEOUT) -> ToolResult:
    """Run *args* (no shell) and capture its text output.

    ``subprocess.run`` kills and reaps the child when *timeout* expires, so a
    hung tool never outlives the call.

    Undecodable bytes in the output (e.g. Latin-1 window titles) are replaced
    with U+FFFD.
    """
    argv = [str(a) for a in args]
    try:
        proc = subprocess.run(
            argv,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout,
            stdin=subprocess.DEVNULL,
        )
    except FileNotFoundError:
        _LOG.debug("%s: %s", ErrorKind.TOOL_MISSING.value, argv[0])
        return _FAILED
    except subprocess.TimeoutExpired:
        _LOG.debug(
            "%s: %s after %.1fs", ErrorKind.TOOL_TIMEOUT.value, " ".join(argv), timeout
        )
        return _FAILED
    except (OSError, subprocess.SubprocessError) as exc:
        _LOG.debug("Failed to run %s: %s", argv[0], exc)
        return _FAILED

    if proc.returncode != 0:
        _LOG.debug("%s exited with status %d", " ".join(argv), proc.returncode)
        return _FAILED
    return ToolResult(proc.stdout or "", True)
