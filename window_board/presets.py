"""
window_board.presets
--------------------

Grid layout presets contributed by plugins.

The plugin host writes its registered layouts to a JSON list; this module
only reads it.  Invalid entries are skipped so one bad plugin cannot hide
the others.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import DEFAULT_PRESETS_FILE, PRESETS_FILE_ENV
from .models import ArrangeOptions

_LOG = logging.getLogger(__name__)


class GridPreset(BaseModel):
    """One named column/row combination."""

    id: str = Field(min_length=1)
    name: str
    description: str = ""
    cols: int = Field(default=0, ge=0)
    rows: int = Field(default=0, ge=0)
    model_config = ConfigDict(str_strip_whitespace=True, extra="ignore")

    def to_options(self, display_index: int = 0) -> ArrangeOptions:
        return ArrangeOptions(
            cols=self.cols, rows=self.rows, display_index=display_index
        )


def presets_path() -> Path:
    return Path(os.environ.get(PRESETS_FILE_ENV) or DEFAULT_PRESETS_FILE)


def load_presets(path: Optional[Path] = None) -> list[GridPreset]:
    """Read presets from *path* (default: $WINDOW_BOARD_PRESETS_FILE or
    ~/.config/window-board/grid-presets.json); ``[]`` when missing or unreadable.
    """
    path = path or presets_path()
    if not path.exists():
        return []
    try:
        with path.open("r") as fp:
            raw = json.load(fp)
    except (OSError, json.JSONDecodeError) as exc:
        _LOG.warning("Failed to load presets from %s: %s", path, exc)
        return []

    if not isinstance(raw, list):
        _LOG.warning("Presets file %s must contain a JSON list", path)
        return []

    presets: list[GridPreset] = []
    seen: set[str] = set()
    for entry in raw:
        try:
            preset = GridPreset.model_validate(entry)
        except ValidationError as exc:
            _LOG.warning("Skipping invalid preset %r: %s", entry, exc)
            continue
        if preset.id in seen:
            _LOG.warning("Duplicate preset id '%s' ignored", preset.id)
            continue
        seen.add(preset.id)
        presets.append(preset)
    return presets


def find_preset(preset_id: str, path: Optional[Path] = None) -> Optional[GridPreset]:
    """Return the preset called *preset_id* or None if absent."""
    for preset in load_presets(path):
        if preset.id == preset_id:
            return preset
    return None
