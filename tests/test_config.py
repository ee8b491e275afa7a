"""Tests for environment-driven settings."""

import pytest

from chessrules.config import Settings
from chessrules.core.errors import InputError
from chessrules.core.notation import STARTING_FEN


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings()
        assert settings.log_level == "WARNING"
        assert settings.start_fen == STARTING_FEN
        assert settings.perft_depth == 3

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHESSRULES_LOG_LEVEL", "debug")
        monkeypatch.setenv("CHESSRULES_PERFT_DEPTH", "2")
        monkeypatch.setenv("CHESSRULES_START_FEN", "4k3/8/8/8/8/8/8/4K3 w - - 0 1")
        settings = Settings()
        assert settings.log_level == "DEBUG"
        assert settings.perft_depth == 2
        assert settings.start_fen.startswith("4k3")

    def test_bad_depth(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHESSRULES_PERFT_DEPTH", "deep")
        with pytest.raises(InputError, match="CHESSRULES_PERFT_DEPTH"):
            Settings()

    def test_bad_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CHESSRULES_LOG_LEVEL", "loud")
        with pytest.raises(InputError, match="CHESSRULES_LOG_LEVEL"):
            Settings()
