"""Core data models and grid representation."""

from gridpuzzle.core.enums import Command, Direction, MoveStatus, TileKind
from gridpuzzle.core.errors import LevelFormatError, OutOfBounds
from gridpuzzle.core.models import PlayerState, Tile, Vector2
from gridpuzzle.core.grid import GridWorld
from gridpuzzle.core.snapshot import Snapshot

__all__ = [
    "Command",
    "Direction",
    "GridWorld",
    "LevelFormatError",
    "MoveStatus",
    "OutOfBounds",
    "PlayerState",
    "Snapshot",
    "Tile",
    "TileKind",
    "Vector2",
]
