"""Key bindings: raw key names to session commands."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gridpuzzle.core.enums import Command, MoveStatus

if TYPE_CHECKING:
    from gridpuzzle.engine.session import LevelSession

logger = logging.getLogger(__name__)

KEY_BINDINGS: dict[str, Command] = {
    "ArrowUp": Command.MOVE_UP,
    "w": Command.MOVE_UP,
    "ArrowDown": Command.MOVE_DOWN,
    "s": Command.MOVE_DOWN,
    "ArrowLeft": Command.MOVE_LEFT,
    "a": Command.MOVE_LEFT,
    "ArrowRight": Command.MOVE_RIGHT,
    "d": Command.MOVE_RIGHT,
    "z": Command.UNDO,
    "c": Command.REDO,
    "r": Command.RESET,
}


def command_for_key(key: str) -> Command | None:
    return KEY_BINDINGS.get(key)


def dispatch_key(session: LevelSession, key: str) -> MoveStatus | bool | None:
    """Feed one key press to *session*. Unbound keys are ignored."""
    command = command_for_key(key)
    if command is None:
        logger.debug("Ignoring unbound key %r", key)
        return None
    return session.handle(command)
