"""Tests for tiles and GridWorld: codes, bounds, counting, copies."""

import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from gridpuzzle.core.enums import TileKind
from gridpuzzle.core.errors import LevelFormatError, OutOfBounds
from gridpuzzle.core.grid import GridWorld
from gridpuzzle.core.models import EMPTY, STAR, WALL, Tile


def _grid() -> GridWorld:
    return GridWorld.from_rows([
        [1, 5, 1],
        [0, 12, 3],
        [2, 4, 5],
    ])


class TestTileCodes:
    def test_plain_codes_decode(self):
        assert Tile.from_code(0) == EMPTY
        assert Tile.from_code(1) == WALL
        assert Tile.from_code(5).kind == TileKind.STAR

    def test_enemy_code_carries_power(self):
        tile = Tile.from_code(13)
        assert tile.is_enemy
        assert tile.power == 3
        assert tile.code == 13

    @pytest.mark.parametrize("code", [-1, 6, 9, 10, 16, 99])
    def test_unknown_codes_rejected(self, code):
        with pytest.raises(LevelFormatError):
            Tile.from_code(code)

    @pytest.mark.parametrize("power", [0, 6])
    def test_enemy_power_range(self, power):
        with pytest.raises(ValueError):
            Tile.enemy(power)

    def test_enemy_factory_matches_decoded(self):
        assert Tile.enemy(4) == Tile.from_code(14)


class TestGridAccess:
    def test_dimensions(self):
        g = _grid()
        assert (g.width, g.height) == (3, 3)

    def test_tile_at(self):
        g = _grid()
        assert g.tile_at(1, 0) == STAR
        assert g.tile_at(1, 1) == Tile.enemy(2)
        assert g.tile_at(2, 1).kind == TileKind.LOCK

    @pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (3, 0), (0, 3)])
    def test_out_of_bounds_raises(self, x, y):
        g = _grid()
        with pytest.raises(OutOfBounds) as info:
            g.tile_at(x, y)
        assert (info.value.x, info.value.y) == (x, y)

    def test_out_of_bounds_is_index_error(self):
        with pytest.raises(IndexError):
            _grid().tile_at(5, 5)

    def test_walkable_only_excludes_walls(self):
        g = _grid()
        assert not g.is_walkable(0, 0)
        assert g.is_walkable(1, 1)  # enemy
        assert g.is_walkable(2, 1)  # lock
        assert g.is_walkable(0, 1)

    def test_clear_tile(self):
        g = _grid()
        g.clear_tile(0, 0)
        assert g.tile_at(0, 0) == EMPTY

    def test_count_tiles(self):
        g = _grid()
        assert g.count_kind(TileKind.STAR) == 2
        assert g.count_tiles(lambda t: t.is_enemy) == 1
        assert g.count_tiles(lambda t: True) == 9

    def test_to_codes_round_trip(self):
        rows = [[1, 5, 1], [0, 12, 3], [2, 4, 5]]
        assert GridWorld.from_rows(rows).to_codes() == rows


class TestGridConstruction:
    def test_ragged_rows_rejected(self):
        with pytest.raises(LevelFormatError):
            GridWorld.from_rows([[1, 1], [1]])

    def test_non_positive_size_is_value_error(self):
        with pytest.raises(ValueError) as info:
            GridWorld(0, 3)
        assert not isinstance(info.value, LevelFormatError)

    def test_empty_layout_rejected(self):
        with pytest.raises(LevelFormatError):
            GridWorld.from_rows([])
        with pytest.raises(LevelFormatError):
            GridWorld.from_rows([[]])


class TestGridCopy:
    def test_copy_is_independent(self):
        g = _grid()
        c = g.copy()
        assert c == g
        c.clear_tile(1, 0)
        assert g.tile_at(1, 0) == STAR
        assert c != g

    def test_clone_alias(self):
        g = _grid()
        assert g.clone() == g
        assert g.clone() is not g
