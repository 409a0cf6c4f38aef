"""Grid / tile-matrix system."""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from gridpuzzle.core.enums import TileKind
from gridpuzzle.core.errors import LevelFormatError, OutOfBounds
from gridpuzzle.core.models import EMPTY, Tile


class GridWorld:
    """Rectangular tile grid backed by a flat list.

    Dimensions are fixed for the lifetime of a grid. Tiles are
    immutable values, so copying the flat list is a full deep copy.
    """

    __slots__ = ("width", "height", "_tiles")

    def __init__(self, width: int, height: int, default: Tile = EMPTY) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"grid must be non-empty, got {width}x{height}")
        self.width = width
        self.height = height
        self._tiles: list[Tile] = [default] * (width * height)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Tile | int]]) -> GridWorld:
        """Build a grid from rows of Tile values or numeric level codes."""
        if not rows or not rows[0]:
            raise LevelFormatError("layout has no cells")
        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise LevelFormatError(f"row {y} has {len(row)} cells, expected {width}")
        grid = cls(width, len(rows))
        grid._tiles = [
            cell if isinstance(cell, Tile) else Tile.from_code(cell)
            for row in rows
            for cell in row
        ]
        return grid

    # -- access --

    def _idx(self, x: int, y: int) -> int:
        return y * self.width + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> Tile:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        return self._tiles[self._idx(x, y)]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.width, self.height)
        self._tiles[self._idx(x, y)] = tile

    def clear_tile(self, x: int, y: int) -> None:
        self.set_tile(x, y, EMPTY)

    def is_walkable(self, x: int, y: int) -> bool:
        # Locks and enemies are move policy, not terrain
        return self.tile_at(x, y).kind != TileKind.WALL

    # -- queries --

    def count_tiles(self, predicate: Callable[[Tile], bool]) -> int:
        return sum(1 for t in self._tiles if predicate(t))

    def count_kind(self, kind: TileKind) -> int:
        return self.count_tiles(lambda t: t.kind == kind)

    def rows(self) -> list[tuple[Tile, ...]]:
        w = self.width
        return [tuple(self._tiles[y * w:(y + 1) * w]) for y in range(self.height)]

    def to_codes(self) -> list[list[int]]:
        return [[t.code for t in row] for row in self.rows()]

    def tiles(self) -> tuple[Tile, ...]:
        return tuple(self._tiles)

    # -- copy --

    def copy(self) -> GridWorld:
        new = GridWorld.__new__(GridWorld)
        new.width = self.width
        new.height = self.height
        new._tiles = list(self._tiles)
        return new

    clone = copy

    @classmethod
    def from_tiles(cls, width: int, height: int, tiles: Iterable[Tile]) -> GridWorld:
        new = cls.__new__(cls)
        new.width = width
        new.height = height
        new._tiles = list(tiles)
        if len(new._tiles) != width * height:
            raise LevelFormatError(f"expected {width * height} tiles, got {len(new._tiles)}")
        return new

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridWorld):
            return NotImplemented
        return (self.width, self.height, self._tiles) == (other.width, other.height, other._tiles)

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"GridWorld({self.width}x{self.height})"
