"""
window_board.constants
----------------------

Centralised constants shared across the window-board code-base.

Tool names and preference orders live here as plain data so that the
resolver functions stay generic.
"""

from enum import Enum
from pathlib import Path
from typing import Final
import os

# --------------------------------------------------------------------------- #
# External tools
# --------------------------------------------------------------------------- #

# Window listing, close, unmaximize and move/resize.
WINDOW_LIST_TOOL: Final[str] = "wmctrl"

# Focus/restore/raise, geometry sampling and key injection.
WINDOW_FOCUS_TOOL: Final[str] = "xdotool"

# Process-name-by-id query.
PROCESS_QUERY_TOOL: Final[str] = "ps"

# Timeouts in seconds.  Listing queries every window and gets the longer one.
LIST_TIMEOUT: Final[float] = float(os.environ.get("WINDOW_BOARD_LIST_TIMEOUT", "15"))
ACTION_TIMEOUT: Final[float] = float(
    os.environ.get("WINDOW_BOARD_ACTION_TIMEOUT", "10")
)

# Delay before a fire-and-forget launch is reported as successful.
LAUNCH_SETTLE_DELAY: Final[float] = 0.5

# Pause between activating an app and sending it the new-window shortcut.
NEW_WINDOW_DELAY: Final[float] = 0.3

# --------------------------------------------------------------------------- #
# Tool preference tables (first installed entry wins)
# --------------------------------------------------------------------------- #

TERMINAL_PREFERENCE: Final[tuple[str, ...]] = (
    "gnome-terminal",
    "konsole",
    "xfce4-terminal",
    "kitty",
    "alacritty",
    "x-terminal-emulator",
)
TERMINAL_FALLBACK: Final[str] = "xterm"

FILE_MANAGER_PREFERENCE: Final[tuple[str, ...]] = (
    "nautilus",
    "dolphin",
    "thunar",
    "pcmanfm",
    "nemo",
)
FILE_MANAGER_FALLBACK: Final[str] = "xdg-open"

# "Open in working directory" argument templates; ``{path}`` is substituted.
# Terminals missing from this table are started without arguments.
TERMINAL_DIRECTORY_ARGS: Final[dict[str, tuple[str, ...]]] = {
    "gnome-terminal": ("--working-directory={path}",),
    "konsole": ("--workdir", "{path}"),
    "xfce4-terminal": ("--default-working-directory={path}",),
    "kitty": ("--directory", "{path}"),
    "alacritty": ("--working-directory", "{path}"),
}

# --------------------------------------------------------------------------- #
# Application classification
# --------------------------------------------------------------------------- #

TERMINAL_APP: Final[str] = "Terminal"
FILES_APP: Final[str] = "Files"
BUILTIN_APPS: Final[tuple[str, ...]] = (TERMINAL_APP, FILES_APP)

# Prefix match: gnome-terminal runs as "gnome-terminal-server" and friends.
TERMINAL_PROCESS_PREFIXES: Final[tuple[str, ...]] = (
    "gnome-terminal-",
    "gnome-terminal",
    "konsole",
    "xfce4-terminal",
    "kitty",
    "alacritty",
    "xterm",
    "x-terminal-emulator",
)

# Exact match.
FILE_MANAGER_PROCESSES: Final[tuple[str, ...]] = (
    "nautilus",
    "dolphin",
    "thunar",
    "pcmanfm",
    "nemo",
    "caja",
)

# --------------------------------------------------------------------------- #
# Grid planning
# --------------------------------------------------------------------------- #

# (max window count, columns), checked in order; larger counts get the default.
COLUMN_BREAKPOINTS: Final[tuple[tuple[int, int], ...]] = (
    (1, 1),
    (2, 2),
    (6, 3),
    (12, 4),
    (20, 5),
)
DEFAULT_MAX_COLUMNS: Final[int] = 6

# (min display width exclusive, minimum columns), applied in order.
WIDE_DISPLAY_MIN_COLUMNS: Final[tuple[tuple[int, int], ...]] = (
    (3000, 5),
    (2560, 4),
    (1920, 3),
)

# Synthetic geometry used when a window cannot be measured.
FALLBACK_GEOMETRY: Final[tuple[int, int, int, int]] = (0, 0, 100, 100)

# Bounds-verification tolerance for $WINDOW_BOARD_DEBUG_BOUNDS.
BOUNDS_TOLERANCE_PX: Final[int] = 10
DEBUG_BOUNDS_ENV: Final[str] = "WINDOW_BOARD_DEBUG_BOUNDS"


class ErrorKind(str, Enum):
    """Failure categories recognised by the engine."""

    TOOL_MISSING = "tool_missing"
    TOOL_TIMEOUT = "tool_timeout"
    PARSE_MISMATCH = "parse_mismatch"
    UNRESOLVABLE_PROCESS = "unresolvable_process"
    GEOMETRY_UNAVAILABLE = "geometry_unavailable"
    ACTUATION_FAILURE = "actuation_failure"


# --------------------------------------------------------------------------- #
# Paths
# --------------------------------------------------------------------------- #

# Grid layout presets contributed by plugins; the env override is read per call.
PRESETS_FILE_ENV: Final[str] = "WINDOW_BOARD_PRESETS_FILE"
DEFAULT_PRESETS_FILE: Final[Path] = (
    Path.home() / ".config/window-board/grid-presets.json"
)

# Directories scanned for installed applications (.desktop entries).
DESKTOP_ENTRY_DIRS: Final[tuple[Path, ...]] = (
    Path("/usr/share/applications"),
    Path("/usr/local/share/applications"),
    Path.home() / ".local/share/applications",
    Path("/var/lib/flatpak/exports/share/applications"),
    Path.home() / ".local/share/flatpak/exports/share/applications",
    Path("/snap/current/meta/gui"),
)

# Working directory used when the caller gives none.
DEFAULT_OPEN_DIR_FALLBACK: Final[str] = "/home"
