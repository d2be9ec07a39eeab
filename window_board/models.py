"""
window_board.models
-------------------

Request / response shapes exchanged with the board UI.

Field names are snake_case in Python and camelCase on the wire
(``model_dump(by_alias=True)``), matching the IPC payloads the UI sends.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ArrangeOptions(_WireModel):
    """Caller-supplied grid overrides; 0 means "choose automatically"."""

    cols: int = Field(default=0, ge=0)
    rows: int = Field(default=0, ge=0)
    # 0 selects auto mode (each display arranged in place).
    display_index: int = Field(default=0, ge=0)


class ArrangeResult(_WireModel):
    success: bool
    arranged: int = 0
    error: Optional[str] = None


class OpenResult(_WireModel):
    success: bool
    window_name: Optional[str] = None
    path: Optional[str] = None
    error: Optional[str] = None


class CloseResult(_WireModel):
    success: bool
