"""Level definitions: built-in level set and JSON loading.

Level files hold a JSON list of objects shaped like::

    {"name": "...", "layout": [[1, 5, 1], ...],
     "playerStart": {"x": 1, "y": 2, "hp": 2, "def": 0, "key": 0}}

Layout codes: 0 empty, 1 wall, 2 key, 3 lock, 4 gem, 5 star,
11-15 enemy with power 1-5.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Sequence

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, model_validator

from gridpuzzle.core.enums import TileKind
from gridpuzzle.core.errors import LevelFormatError
from gridpuzzle.core.grid import GridWorld
from gridpuzzle.core.models import PlayerState, Tile, Vector2

logger = logging.getLogger(__name__)


# --- Schemas ---

class PlayerStartSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    x: int
    y: int
    hp: int
    def_: int = Field(0, alias="def", ge=0)
    key: int = Field(0, ge=0)


class LevelSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = ""
    layout: list[list[int]]
    player_start: PlayerStartSchema = Field(alias="playerStart")

    @model_validator(mode="after")
    def check_playable(self) -> LevelSchema:
        # Reuse the grid builder so codes and shape are checked in one place
        grid = GridWorld.from_rows(self.layout)
        start = self.player_start
        if not grid.in_bounds(start.x, start.y):
            raise ValueError(f"player start ({start.x}, {start.y}) is outside the layout")
        if grid.tile_at(start.x, start.y).kind == TileKind.WALL:
            raise ValueError(f"player start ({start.x}, {start.y}) is on a wall")
        return self


_level_list_ta = TypeAdapter(list[LevelSchema])


# --- Runtime models ---

@dataclass(frozen=True, slots=True)
class Level:
    """Static definition of one level. Never mutated; sessions copy it."""

    layout: tuple[tuple[Tile, ...], ...]
    player_start: PlayerState
    name: str = ""

    @classmethod
    def from_schema(cls, schema: LevelSchema) -> Level:
        s = schema.player_start
        return cls(
            layout=tuple(GridWorld.from_rows(schema.layout).rows()),
            player_start=PlayerState(pos=Vector2(s.x, s.y), hp=s.hp, def_=s.def_, keys=s.key),
            name=schema.name,
        )

    @classmethod
    def from_codes(cls, layout: Sequence[Sequence[int]], player_start: dict, name: str = "") -> Level:
        try:
            schema = LevelSchema(name=name, layout=[list(r) for r in layout], playerStart=player_start)
        except ValidationError as exc:
            raise LevelFormatError(str(exc)) from exc
        return cls.from_schema(schema)

    def build_world(self) -> GridWorld:
        return GridWorld.from_rows(self.layout)

    @property
    def width(self) -> int:
        return len(self.layout[0])

    @property
    def height(self) -> int:
        return len(self.layout)


class LevelSet:
    """Immutable ordered sequence of levels."""

    __slots__ = ("_levels",)

    def __init__(self, levels: Sequence[Level]) -> None:
        if not levels:
            raise LevelFormatError("a level set needs at least one level")
        self._levels: tuple[Level, ...] = tuple(levels)

    def __len__(self) -> int:
        return len(self._levels)

    def __getitem__(self, index: int) -> Level:
        return self._levels[index]

    def __iter__(self) -> Iterator[Level]:
        return iter(self._levels)

    def __repr__(self) -> str:
        return f"LevelSet({len(self._levels)} levels)"


def parse_level_set(data: object) -> LevelSet:
    """Validate already-decoded JSON data into a LevelSet."""
    try:
        schemas = _level_list_ta.validate_python(data)
    except ValidationError as exc:
        raise LevelFormatError(str(exc)) from exc
    return LevelSet([Level.from_schema(s) for s in schemas])


def load_level_set(path: str | Path) -> LevelSet:
    """Read a JSON level file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise LevelFormatError(f"{path}: {exc}") from exc
    level_set = parse_level_set(data)
    logger.info("Loaded %d level(s) from %s", len(level_set), path)
    return level_set


DEFAULT_LEVELS = LevelSet([
    Level.from_codes(
        layout=[
            [1, 1, 1, 1, 1, 1, 1, 5, 1],
            [1, 4, 3, 4, 3, 4, 1, 14, 1],
            [1, 12, 1, 13, 1, 11, 1, 2, 1],
            [1, 0, 3, 0, 4, 0, 11, 0, 1],
            [1, 1, 1, 1, 1, 1, 1, 1, 1],
        ],
        player_start={"x": 7, "y": 3, "hp": 2, "def": 0, "key": 0},
        name="First Light",
    ),
])
