"""Immutable snapshot of the player and grid for undo/redo."""

from __future__ import annotations

import struct
from dataclasses import dataclass

import xxhash

from gridpuzzle.core.grid import GridWorld
from gridpuzzle.core.models import PlayerState, Tile


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Read-only copy of a session's state.

    Tiles are held as a tuple, so a snapshot never aliases a live
    GridWorld; ``restore`` always builds a fresh one.
    """

    player: PlayerState
    width: int
    height: int
    tiles: tuple[Tile, ...]

    @classmethod
    def capture(cls, player: PlayerState, world: GridWorld) -> Snapshot:
        return cls(
            player=player.copy(),
            width=world.width,
            height=world.height,
            tiles=world.tiles(),
        )

    def restore(self) -> tuple[PlayerState, GridWorld]:
        return self.player.copy(), GridWorld.from_tiles(self.width, self.height, self.tiles)

    def fingerprint(self) -> int:
        """xxhash64 digest of every observable field."""
        p = self.player
        h = xxhash.xxh64()
        h.update(struct.pack("<qqqqqqqq", p.x, p.y, p.hp, p.def_, p.keys, self.width, self.height, len(self.tiles)))
        h.update(bytes(t.code for t in self.tiles))
        return h.intdigest()
