"""Tests for the command-line entry point."""

import sys

import pytest

from masked_textual import __main__
from masked_textual.app import MaskedTextualApp
from masked_textual.models import MaskKind


class TestMain:
    """Tests for main()."""

    def test_bad_mask_exits(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("MASKED_TEXTUAL_CONFIG", str(tmp_path / "config.toml"))
        monkeypatch.setattr(sys, "argv", ["masked-textual", "--mask", "zip"])
        with pytest.raises(SystemExit) as exc_info:
            __main__.main()
        assert exc_info.value.code == 1
        assert "unknown mask: 'zip'" in capsys.readouterr().err

    def test_runs_app_with_settings(self, tmp_path, monkeypatch):
        monkeypatch.setenv("MASKED_TEXTUAL_CONFIG", str(tmp_path / "config.toml"))
        monkeypatch.setattr(
            sys,
            "argv",
            ["masked-textual", "-m", "ip", "--log-file", str(tmp_path / "masks.log")],
        )
        started: list[MaskedTextualApp] = []
        monkeypatch.setattr(MaskedTextualApp, "run", lambda self: started.append(self))
        monkeypatch.setattr(__main__, "setup_logging", lambda *args: None)

        __main__.main()

        assert len(started) == 1
        assert started[0].settings.mask is MaskKind.IP_ADDRESS

    def test_bad_log_level_exits(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("MASKED_TEXTUAL_CONFIG", str(tmp_path / "config.toml"))
        monkeypatch.setattr(sys, "argv", ["masked-textual", "--log-level", "loud"])
        with pytest.raises(SystemExit) as exc_info:
            __main__.main()
        assert exc_info.value.code == 1
        assert "unknown log level: 'loud'" in capsys.readouterr().err
