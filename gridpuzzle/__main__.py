"""Entry point: ``python -m gridpuzzle``.

Supports two modes:
  - ``python -m gridpuzzle show``          → Print the start of a level
  - ``python -m gridpuzzle play wwad z``   → Feed key presses, print the result
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tile-grid puzzle engine")
    sub = parser.add_subparsers(dest="command")

    for name, help_text in (("show", "Print a level's starting state"), ("play", "Play a sequence of key presses")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("--levels", type=str, default=None, help="JSON level file (built-in levels if omitted)")
        cmd.add_argument("--level", type=int, default=0)
        cmd.add_argument("--log-level", type=str, default="WARNING", choices=["DEBUG", "INFO", "WARNING"])
        if name == "play":
            cmd.add_argument(
                "keys", nargs="*",
                help="Key names (ArrowUp, z, ...) or runs of single-letter keys such as 'wwad'",
            )

    return parser


def _expand_keys(raw: list[str]) -> list[str]:
    from gridpuzzle.controls import KEY_BINDINGS

    keys: list[str] = []
    for token in raw:
        if token in KEY_BINDINGS:
            keys.append(token)
        else:
            keys.extend(token)
    return keys


def _build_session(args: argparse.Namespace):
    from gridpuzzle.config import GameConfig
    from gridpuzzle.engine.session import LevelSession
    from gridpuzzle.systems.levels import DEFAULT_LEVELS, load_level_set
    from gridpuzzle.utils.logging import setup_logging

    config = GameConfig(start_level=args.level, level_file=args.levels, log_level=args.log_level)
    setup_logging(config)
    levels = load_level_set(config.level_file) if config.level_file else DEFAULT_LEVELS
    return LevelSession(levels, config)


def _run_show(args: argparse.Namespace) -> None:
    from gridpuzzle.utils.render import render_text

    session = _build_session(args)
    print(render_text(session))


def _run_play(args: argparse.Namespace) -> None:
    from gridpuzzle.controls import dispatch_key
    from gridpuzzle.core.enums import MoveStatus
    from gridpuzzle.utils.render import render_text

    session = _build_session(args)
    for key in _expand_keys(args.keys):
        outcome = dispatch_key(session, key)
        if not isinstance(outcome, MoveStatus):
            continue
        if outcome == MoveStatus.ALL_LEVELS_COMPLETE:
            print("You complete all levels!")
        elif outcome == MoveStatus.LEVEL_COMPLETE:
            print(f"Level complete, now on level {session.level_index}")

    print(render_text(session))
    print(f"Level {session.level_index + 1}/{session.level_count}  moves: {session.move_count}")
    logger.debug("State fingerprint %016x", session.fingerprint())


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    if args.command is None:
        args = parser.parse_args(["show"])
    if args.command == "show":
        _run_show(args)
    elif args.command == "play":
        _run_play(args)


if __name__ == "__main__":
    main()
