"""Core data models: Vector2, Tile, PlayerState."""

from __future__ import annotations

from dataclasses import dataclass, replace

from gridpuzzle.core.enums import Direction, TileKind
from gridpuzzle.core.errors import LevelFormatError

MIN_ENEMY_POWER = 1
MAX_ENEMY_POWER = 5
_ENEMY_CODE_BASE = 10


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D integer coordinate."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __repr__(self) -> str:
        return f"({self.x}, {self.y})"


# Direction offsets, y grows downwards
DIRECTION_OFFSETS: dict[Direction, Vector2] = {
    Direction.NORTH: Vector2(0, -1),
    Direction.EAST: Vector2(1, 0),
    Direction.SOUTH: Vector2(0, 1),
    Direction.WEST: Vector2(-1, 0),
}


def direction_for_offset(dx: int, dy: int) -> Direction:
    """Map a unit vector back to its Direction; anything else is a ValueError."""
    for direction, offset in DIRECTION_OFFSETS.items():
        if offset.x == dx and offset.y == dy:
            return direction
    raise ValueError(f"({dx}, {dy}) is not a cardinal unit step")


@dataclass(frozen=True, slots=True)
class Tile:
    """Content of one grid cell.

    ``power`` is only meaningful for ENEMY tiles and is 0 for every
    other kind. Tiles are values, so grids can share them freely.
    """

    kind: TileKind
    power: int = 0

    @classmethod
    def enemy(cls, power: int) -> Tile:
        if not MIN_ENEMY_POWER <= power <= MAX_ENEMY_POWER:
            raise ValueError(
                f"enemy power must be in [{MIN_ENEMY_POWER}, {MAX_ENEMY_POWER}], got {power}"
            )
        return cls(TileKind.ENEMY, power)

    @classmethod
    def from_code(cls, code: int) -> Tile:
        """Decode a numeric level-file code (0-5, 11-15)."""
        if code > _ENEMY_CODE_BASE:
            power = code - _ENEMY_CODE_BASE
            if power > MAX_ENEMY_POWER:
                raise LevelFormatError(f"unknown tile code {code}")
            return _ENEMIES[power]
        try:
            kind = TileKind(code)
        except ValueError:
            raise LevelFormatError(f"unknown tile code {code}") from None
        if kind == TileKind.ENEMY:
            raise LevelFormatError(f"unknown tile code {code}")
        return _PLAIN[kind]

    @property
    def code(self) -> int:
        if self.kind == TileKind.ENEMY:
            return _ENEMY_CODE_BASE + self.power
        return int(self.kind)

    @property
    def is_enemy(self) -> bool:
        return self.kind == TileKind.ENEMY

    def __repr__(self) -> str:
        if self.kind == TileKind.ENEMY:
            return f"Enemy({self.power})"
        return self.kind.name.capitalize()


EMPTY = Tile(TileKind.EMPTY)
WALL = Tile(TileKind.WALL)
KEY = Tile(TileKind.KEY)
LOCK = Tile(TileKind.LOCK)
GEM = Tile(TileKind.GEM)
STAR = Tile(TileKind.STAR)

_PLAIN: dict[TileKind, Tile] = {t.kind: t for t in (EMPTY, WALL, KEY, LOCK, GEM, STAR)}
_ENEMIES: dict[int, Tile] = {
    p: Tile(TileKind.ENEMY, p) for p in range(MIN_ENEMY_POWER, MAX_ENEMY_POWER + 1)
}


@dataclass(frozen=True, slots=True)
class PlayerState:
    """Position and stats of the player token.

    No clamping happens here: hp and keys may go negative if the rules
    say so.
    """

    pos: Vector2
    hp: int
    def_: int = 0
    keys: int = 0

    @property
    def x(self) -> int:
        return self.pos.x

    @property
    def y(self) -> int:
        return self.pos.y

    def moved_to(self, pos: Vector2) -> PlayerState:
        return replace(self, pos=pos)

    def with_stats(self, *, hp: int | None = None, def_: int | None = None, keys: int | None = None) -> PlayerState:
        return replace(
            self,
            hp=self.hp if hp is None else hp,
            def_=self.def_ if def_ is None else def_,
            keys=self.keys if keys is None else keys,
        )

    def copy(self) -> PlayerState:
        return replace(self)

    clone = copy
