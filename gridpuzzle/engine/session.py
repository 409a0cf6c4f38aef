"""LevelSession — owns the grid, the player and the history for one game.

All state lives on the session instance; input and render layers call
the command methods and read the query methods, nothing else.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gridpuzzle.actions.move import MoveResolver
from gridpuzzle.config import GameConfig
from gridpuzzle.core.enums import Command, Direction, MoveStatus, TileKind
from gridpuzzle.core.grid import GridWorld
from gridpuzzle.core.models import PlayerState, direction_for_offset
from gridpuzzle.core.snapshot import Snapshot
from gridpuzzle.engine.history import HistoryManager
from gridpuzzle.schemas import PlayerSchema, SessionStateSchema
from gridpuzzle.systems.levels import DEFAULT_LEVELS, LevelSet
from gridpuzzle.utils.event_log import EventLog, GameEvent

if TYPE_CHECKING:
    from gridpuzzle.systems.levels import Level

logger = logging.getLogger(__name__)

_MOVE_COMMANDS: dict[Command, Direction] = {
    Command.MOVE_UP: Direction.NORTH,
    Command.MOVE_RIGHT: Direction.EAST,
    Command.MOVE_DOWN: Direction.SOUTH,
    Command.MOVE_LEFT: Direction.WEST,
}


class LevelSession:
    """Single-threaded game session over a LevelSet."""

    __slots__ = (
        "_levels", "_config", "_index", "_player", "_world", "_history",
        "_commands", "_level_complete", "_all_complete", "events",
    )

    def __init__(self, levels: LevelSet = DEFAULT_LEVELS, config: GameConfig | None = None) -> None:
        self._levels = levels
        self._config = config or GameConfig()
        self._commands: int = 0
        self._level_complete: bool = False
        self._all_complete: bool = False
        self.events = EventLog(self._config.event_log_size)
        self._index: int = 0
        self._player: PlayerState
        self._world: GridWorld
        self._history = HistoryManager()
        self._load(self._config.start_level)

    # -- commands --

    def reset_level(self, index: int | None = None) -> None:
        """Reload *index* (default: current level) and drop all history."""
        self._begin_command()
        self._load(self._index if index is None else index)
        self._emit("reset", f"level {self._index} reset")

    def attempt_move(self, direction: Direction | tuple[int, int]) -> MoveStatus:
        self._begin_command()
        if not isinstance(direction, Direction):
            direction = direction_for_offset(*direction)

        if not MoveResolver.can_move(self._world, self._player, direction):
            self._emit("reject", f"{direction.name} rejected at {self._player.pos}")
            return MoveStatus.REJECTED

        self._history.record(self._player, self._world)
        result = MoveResolver.apply(self._world, self._player, direction)
        self._player = result.player
        self._emit("move", f"{direction.name} to {self._player.pos}")
        self._emit_interaction(result.consumed.kind, result.consumed.power)

        # Only the move that takes the last star completes a level
        if result.consumed.kind != TileKind.STAR or not MoveResolver.check_win(self._world):
            return MoveStatus.MOVED
        return self._advance()

    def undo(self) -> bool:
        self._begin_command()
        snapshot = self._history.undo(self._player, self._world)
        if snapshot is None:
            return False
        self._restore(snapshot)
        self._emit("undo", f"undo to {self._player.pos}")
        return True

    def redo(self) -> bool:
        self._begin_command()
        snapshot = self._history.redo(self._player, self._world)
        if snapshot is None:
            return False
        self._restore(snapshot)
        self._emit("redo", f"redo to {self._player.pos}")
        return True

    def handle(self, command: Command) -> MoveStatus | bool | None:
        """Dispatch one input command; the return type follows the command."""
        if command in _MOVE_COMMANDS:
            return self.attempt_move(_MOVE_COMMANDS[command])
        if command == Command.UNDO:
            return self.undo()
        if command == Command.REDO:
            return self.redo()
        if command == Command.RESET:
            self.reset_level()
            return None
        raise ValueError(f"unsupported command {command!r}")

    # -- queries --

    def get_player_state(self) -> PlayerState:
        return self._player

    def get_grid_world(self) -> GridWorld:
        """Copy of the live grid; callers cannot mutate session state through it."""
        return self._world.copy()

    def is_level_complete(self) -> bool:
        return self._level_complete

    def is_all_levels_complete(self) -> bool:
        return self._all_complete

    @property
    def level_index(self) -> int:
        return self._index

    @property
    def level_count(self) -> int:
        return len(self._levels)

    @property
    def current_level(self) -> Level:
        return self._levels[self._index]

    @property
    def move_count(self) -> int:
        # Every committed move on this level has exactly one undo snapshot
        return self._history.undo_depth

    @property
    def can_undo(self) -> bool:
        return self._history.can_undo

    @property
    def can_redo(self) -> bool:
        return self._history.can_redo

    def fingerprint(self) -> int:
        return Snapshot.capture(self._player, self._world).fingerprint()

    def state_payload(self) -> SessionStateSchema:
        p = self._player
        return SessionStateSchema(
            level_index=self._index,
            level_count=len(self._levels),
            level_name=self.current_level.name,
            width=self._world.width,
            height=self._world.height,
            grid=self._world.to_codes(),
            player=PlayerSchema(x=p.x, y=p.y, hp=p.hp, def_=p.def_, keys=p.keys),
            stars_remaining=self._world.count_kind(TileKind.STAR),
            move_count=self.move_count,
            can_undo=self.can_undo,
            can_redo=self.can_redo,
            level_complete=self._level_complete,
            all_levels_complete=self._all_complete,
        )

    # -- internals --

    def _begin_command(self) -> None:
        self._commands += 1
        self._level_complete = False
        self._all_complete = False

    def _load(self, index: int) -> None:
        if not 0 <= index < len(self._levels):
            raise IndexError(f"level {index} out of range (0..{len(self._levels) - 1})")
        level = self._levels[index]
        self._index = index
        self._world = level.build_world()
        self._player = level.player_start.copy()
        self._history = HistoryManager()
        logger.info("Level %d loaded (%dx%d)", index, self._world.width, self._world.height)

    def _restore(self, snapshot: Snapshot) -> None:
        self._player, self._world = snapshot.restore()

    def _advance(self) -> MoveStatus:
        finished = self._index
        self._level_complete = True
        self._emit("level_complete", f"level {finished} complete")
        logger.info("Level %d complete", finished)

        if finished + 1 < len(self._levels):
            self._load(finished + 1)
            return MoveStatus.LEVEL_COMPLETE

        self._all_complete = True
        self._emit("all_complete", "all levels complete")
        logger.info("All %d level(s) complete", len(self._levels))
        if self._config.wrap_after_last_level:
            self._load(0)
        return MoveStatus.ALL_LEVELS_COMPLETE

    def _emit_interaction(self, kind: TileKind, power: int) -> None:
        p = self._player
        if kind in (TileKind.KEY, TileKind.LOCK):
            self._emit("pickup", f"{kind.name.lower()} : keys={p.keys}")
        elif kind == TileKind.GEM:
            self._emit("pickup", f"gem : def={p.def_}")
        elif kind == TileKind.STAR:
            self._emit("pickup", "star collected")
        elif kind == TileKind.ENEMY:
            self._emit("combat", f"enemy {power} defeated : hp={p.hp}")

    def _emit(self, category: str, message: str) -> None:
        self.events.append(GameEvent(self._commands, category, message))
