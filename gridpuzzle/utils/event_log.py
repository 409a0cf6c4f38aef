"""Bounded in-memory log of gameplay events for renderers and tests."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GameEvent:
    """A single gameplay event."""

    command: int    # session-wide command counter; rejects, undos and resets advance it too
    category: str   # move, reject, pickup, combat, undo, redo, reset, level_complete, all_complete
    message: str


class EventLog:
    """Oldest events fall off once *maxlen* is reached.

    Sessions are single-threaded, so there is no locking.
    """

    __slots__ = ("_buffer",)

    def __init__(self, maxlen: int | None = None) -> None:
        self._buffer: deque[GameEvent] = deque(maxlen=maxlen)

    def append(self, event: GameEvent) -> None:
        self._buffer.append(event)

    def since_command(self, command: int) -> list[GameEvent]:
        """Return all events with command >= *command*."""
        return [e for e in self._buffer if e.command >= command]

    def latest(self, count: int = 50) -> list[GameEvent]:
        """Return the *count* most recent events."""
        items = list(self._buffer)
        return items[-count:]

    def categories(self) -> list[str]:
        return [e.category for e in self._buffer]

    def clear(self) -> None:
        self._buffer.clear()

    def __len__(self) -> int:
        return len(self._buffer)
