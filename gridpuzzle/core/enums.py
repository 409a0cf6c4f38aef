"""Enumerations used throughout the engine."""

from __future__ import annotations

from enum import IntEnum, unique


@unique
class TileKind(IntEnum):
    """Semantic tag of a grid cell.

    Values match the numeric level-file codes, except ENEMY whose code
    is ``10 + power``.
    """

    EMPTY = 0
    WALL = 1
    KEY = 2
    LOCK = 3
    GEM = 4
    STAR = 5
    ENEMY = 10


@unique
class Direction(IntEnum):
    """Cardinal movement directions."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


@unique
class MoveStatus(IntEnum):
    """Outcome of a single move attempt."""

    REJECTED = 0
    MOVED = 1
    LEVEL_COMPLETE = 2      # Last star cleared, session advanced to the next level
    ALL_LEVELS_COMPLETE = 3  # Last star of the final level cleared, session wrapped


@unique
class Command(IntEnum):
    """Commands an input layer can issue to a session."""

    MOVE_UP = 0
    MOVE_RIGHT = 1
    MOVE_DOWN = 2
    MOVE_LEFT = 3
    UNDO = 4
    REDO = 5
    RESET = 6
