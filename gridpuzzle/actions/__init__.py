"""Move validation and execution."""

from gridpuzzle.actions.move import MoveResolver, MoveResult

__all__ = ["MoveResolver", "MoveResult"]
