"""Tests for the command-line launcher."""

import pytest

from snake_game import app
from snake_game.cli import _build_parser, main


class TestCLIParser:
    def test_no_arguments(self):
        args = _build_parser().parse_args([])
        assert vars(args) == {}

    def test_help_exits_cleanly(self, capsys):
        with pytest.raises(SystemExit, match="0"):
            main(["--help"])
        assert "arrow keys" in capsys.readouterr().out

    def test_unknown_flag_rejected(self):
        with pytest.raises(SystemExit, match="2"):
            main(["--speed", "3"])


class TestCLIMain:
    def test_returns_run_exit_code(self, monkeypatch):
        calls = []

        def fake_run():
            calls.append(True)
            return 0

        monkeypatch.setattr(app, "run", fake_run)
        assert main([]) == 0
        assert calls == [True]

    def test_propagates_startup_failure(self, monkeypatch):
        monkeypatch.setattr(app, "run", lambda: 1)
        assert main([]) == 1
