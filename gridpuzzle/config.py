"""Game configuration with sensible defaults."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable configuration for a play session."""

    # Levels
    start_level: int = 0
    level_file: str | None = None          # JSON level set; built-in levels when None
    wrap_after_last_level: bool = True     # Restart at level 0 after the final level

    # Event log
    event_log_size: int = 500

    # Logging
    log_level: str = "INFO"
