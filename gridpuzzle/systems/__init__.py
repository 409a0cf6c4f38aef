"""Level data sources."""

from gridpuzzle.systems.levels import DEFAULT_LEVELS, Level, LevelSet, load_level_set

__all__ = ["DEFAULT_LEVELS", "Level", "LevelSet", "load_level_set"]
