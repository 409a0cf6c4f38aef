"""Tests for the ``python -m gridpuzzle`` entry point and logging setup."""

import json
import logging
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from gridpuzzle.__main__ import main
from gridpuzzle.config import GameConfig
from gridpuzzle.utils.logging import PACKAGE_LOGGER, setup_logging


@pytest.fixture(autouse=True)
def _restore_package_logger():
    pkg = logging.getLogger(PACKAGE_LOGGER)
    saved = (list(pkg.handlers), pkg.level, pkg.propagate)
    yield
    pkg.handlers[:] = saved[0]
    pkg.setLevel(saved[1])
    pkg.propagate = saved[2]


def _run(monkeypatch, *argv: str) -> None:
    monkeypatch.setattr(sys, "argv", ["gridpuzzle", *argv])
    main()


class TestCli:
    def test_show_prints_start_state(self, monkeypatch, capsys):
        _run(monkeypatch, "show")
        lines = capsys.readouterr().out.splitlines()
        assert lines[0] == "#######*#"
        assert lines[3] == "#.L.g.1@#"
        assert lines[-1] == "HP: 2  Def: 0  Key: 0"

    def test_no_subcommand_defaults_to_show(self, monkeypatch, capsys):
        _run(monkeypatch)
        assert capsys.readouterr().out.splitlines()[-1] == "HP: 2  Def: 0  Key: 0"

    def test_play_applies_keys(self, monkeypatch, capsys):
        # w takes the key, the second w bumps into enemy 4, a and d hit walls
        _run(monkeypatch, "play", "wwad")
        lines = capsys.readouterr().out.splitlines()
        assert "HP: 2  Def: 0  Key: 1" in lines
        assert lines[-1] == "Level 1/1  moves: 1"

    def test_play_undo_redo_keys(self, monkeypatch, capsys):
        _run(monkeypatch, "play", "w", "z", "c", "z")
        lines = capsys.readouterr().out.splitlines()
        assert "HP: 2  Def: 0  Key: 0" in lines
        assert lines[-1] == "Level 1/1  moves: 0"

    def test_play_level_file_to_completion(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "levels.json"
        path.write_text(json.dumps([
            {"layout": [[0, 5]], "playerStart": {"x": 0, "y": 0, "hp": 1}},
        ]), encoding="utf-8")
        _run(monkeypatch, "play", "--levels", str(path), "ArrowRight")
        out = capsys.readouterr().out
        assert "You complete all levels!" in out
        assert "@*" in out.splitlines()


class TestSetupLogging:
    def test_configures_package_logger_only(self):
        root_handlers = list(logging.getLogger().handlers)
        pkg = setup_logging(GameConfig(log_level="debug"))
        assert pkg.name == PACKAGE_LOGGER
        assert pkg.level == logging.DEBUG
        assert len(pkg.handlers) == 1
        assert not pkg.propagate
        assert logging.getLogger().handlers == root_handlers

    def test_repeat_call_replaces_handler(self):
        setup_logging(GameConfig())
        pkg = setup_logging(GameConfig(log_level="WARNING"))
        assert len(pkg.handlers) == 1
        assert pkg.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        assert setup_logging(GameConfig(log_level="chatty")).level == logging.INFO
