"""Session orchestration: history and level flow."""

from gridpuzzle.engine.history import HistoryManager
from gridpuzzle.engine.session import LevelSession

__all__ = ["HistoryManager", "LevelSession"]
