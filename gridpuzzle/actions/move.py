"""MoveResolver — validates and applies player moves.

Move legality (in order):
- target must be inside the grid
- target must not be a WALL
- a LOCK needs at least one key
- an ENEMY needs ``hp + def > power``; equality is not enough

Effects are evaluated as independent predicates in a fixed order
(key, lock, gem, enemy), then the target is cleared and the player
steps onto it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from gridpuzzle.core.enums import Direction, TileKind
from gridpuzzle.core.grid import GridWorld
from gridpuzzle.core.models import DIRECTION_OFFSETS, PlayerState, Tile, Vector2

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """What ``MoveResolver.apply`` produced."""

    player: PlayerState
    world: GridWorld
    consumed: Tile  # the tile that was cleared from the target cell


class MoveResolver:
    """Stateless handler for player moves."""

    @staticmethod
    def target_of(player: PlayerState, direction: Direction) -> Vector2:
        return player.pos + DIRECTION_OFFSETS[direction]

    @staticmethod
    def can_move(world: GridWorld, player: PlayerState, direction: Direction) -> bool:
        target = MoveResolver.target_of(player, direction)
        if not world.in_bounds(target.x, target.y):
            logger.debug("Move %s blocked by grid edge at %s", direction.name, target)
            return False

        if not world.is_walkable(target.x, target.y):
            logger.debug("Move %s blocked by wall at %s", direction.name, target)
            return False

        tile = world.tile_at(target.x, target.y)
        if tile.kind == TileKind.LOCK and player.keys == 0:
            logger.debug("Move %s blocked by lock at %s (no key)", direction.name, target)
            return False

        if tile.is_enemy and player.hp + player.def_ <= tile.power:
            logger.debug(
                "Move %s blocked by enemy %d at %s (hp=%d def=%d)",
                direction.name, tile.power, target, player.hp, player.def_,
            )
            return False

        return True

    @staticmethod
    def apply(world: GridWorld, player: PlayerState, direction: Direction) -> MoveResult:
        """Apply a move already accepted by ``can_move``.

        Mutates *world* in place and returns a new PlayerState.
        """
        target = MoveResolver.target_of(player, direction)
        tile = world.tile_at(target.x, target.y)
        hp, def_, keys = player.hp, player.def_, player.keys

        if tile.kind == TileKind.KEY:
            keys += 1
            logger.debug("key : %d", keys)
        if tile.kind == TileKind.LOCK:
            keys -= 1
            logger.debug("key : %d", keys)
        if tile.kind == TileKind.GEM:
            def_ += 1
            logger.debug("def : %d", def_)
        if tile.is_enemy:
            hp -= tile.power - def_
            logger.debug("hp : %d", hp)

        world.clear_tile(target.x, target.y)
        new_player = player.with_stats(hp=hp, def_=def_, keys=keys).moved_to(target)
        return MoveResult(player=new_player, world=world, consumed=tile)

    @staticmethod
    def check_win(world: GridWorld) -> bool:
        return world.count_kind(TileKind.STAR) == 0
