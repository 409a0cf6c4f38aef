"""Pydantic models describing session state for renderers."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PlayerSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    x: int
    y: int
    hp: int
    def_: int = Field(0, alias="def")
    keys: int = 0


class SessionStateSchema(BaseModel):
    """Everything a renderer needs to draw one frame."""

    level_index: int
    level_count: int
    level_name: str = ""
    width: int
    height: int
    grid: list[list[int]]  # numeric tile codes, row-major
    player: PlayerSchema
    stars_remaining: int
    move_count: int = 0
    can_undo: bool = False
    can_redo: bool = False
    level_complete: bool = False
    all_levels_complete: bool = False
