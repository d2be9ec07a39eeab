"""List installed desktop applications from their ``.desktop`` entries."""

from __future__ import annotations

import configparser
import logging
from pathlib import Path
from typing import Iterable, Iterator, NamedTuple, Optional

from .constants import DESKTOP_ENTRY_DIRS

_LOG = logging.getLogger(__name__)

_SECTION = "Desktop Entry"


class InstalledApp(NamedTuple):
    name: str
    app_id: str  # .desktop file stem
    executable: str


def _entry_lines(text: str) -> Iterator[str]:
    """Section headers and ``key=value`` lines; everything else is dropped."""
    in_section = False
    for line in text.splitlines():
        stripped = line.strip()
        if stripped.startswith("["):
            in_section = True
            yield stripped
        elif in_section and "=" in stripped and not stripped.startswith("#"):
            yield stripped


def parse_desktop_entry(path: Path) -> Optional[InstalledApp]:
    """Return the app described by *path*, or None if it should not be shown.

    Stray lines without ``=`` are ignored rather than rejecting the file.
    """
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        _LOG.debug("Skipping %s: %s", path, exc)
        return None

    parser = configparser.ConfigParser(
        delimiters=("=",), interpolation=None, strict=False
    )
    parser.optionxform = str  # keys are case-sensitive
    try:
        parser.read_string("\n".join(_entry_lines(text)), source=str(path))
    except configparser.Error as exc:
        # Sections parsed before the error are kept.
        _LOG.debug("Malformed entry in %s: %s", path, exc)
    if not parser.has_section(_SECTION):
        return None

    entry = parser[_SECTION]
    if entry.get("Type") != "Application":
        return None
    if entry.get("NoDisplay") == "true" or entry.get("Hidden") == "true":
        return None

    exec_line = entry.get("Exec", "").split()
    return InstalledApp(
        name=entry.get("Name") or path.stem,
        app_id=path.stem,
        executable=exec_line[0] if exec_line else "",
    )


def scan_installed_apps(
    dirs: Iterable[Path] = DESKTOP_ENTRY_DIRS,
) -> list[InstalledApp]:
    """Scan *dirs* for applications, first name wins, sorted by name."""
    apps: list[InstalledApp] = []
    seen: set[str] = set()
    for directory in dirs:
        if not directory.is_dir():
            continue
        for path in sorted(directory.glob("*.desktop")):
            app = parse_desktop_entry(path)
            if app is None or app.name.lower() in seen:
                continue
            seen.add(app.name.lower())
            apps.append(app)
    apps.sort(key=lambda a: a.name.lower())
    return apps
