"""Linear undo/redo history over immutable snapshots."""

from __future__ import annotations

import logging

from gridpuzzle.core.grid import GridWorld
from gridpuzzle.core.models import PlayerState
from gridpuzzle.core.snapshot import Snapshot

logger = logging.getLogger(__name__)


class HistoryManager:
    """Two snapshot stacks, most recent last.

    The redo stack is only non-empty right after an undo and before the
    next recorded move.
    """

    __slots__ = ("_undo", "_redo")

    def __init__(self) -> None:
        self._undo: list[Snapshot] = []
        self._redo: list[Snapshot] = []

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def undo_depth(self) -> int:
        return len(self._undo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def record(self, player: PlayerState, world: GridWorld) -> None:
        """Push the pre-move state and drop any redo history."""
        self._undo.append(Snapshot.capture(player, world))
        if self._redo:
            logger.debug("Discarding %d redo snapshot(s)", len(self._redo))
        self._redo.clear()

    def undo(self, player: PlayerState, world: GridWorld) -> Snapshot | None:
        """Pop the last past state; *player*/*world* are the current state."""
        if not self._undo:
            return None
        snapshot = self._undo.pop()
        self._redo.append(Snapshot.capture(player, world))
        logger.debug("Undo (undo=%d redo=%d)", len(self._undo), len(self._redo))
        return snapshot

    def redo(self, player: PlayerState, world: GridWorld) -> Snapshot | None:
        if not self._redo:
            return None
        snapshot = self._redo.pop()
        self._undo.append(Snapshot.capture(player, world))
        logger.debug("Redo (undo=%d redo=%d)", len(self._undo), len(self._redo))
        return snapshot
