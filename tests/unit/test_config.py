"""Tests for environment-driven configuration."""

import pytest

from tictactoe_tui import config
from tictactoe_tui.controller.forms import (
    FormValidationError,
    append_limited,
    is_text_input,
    optional_password,
    validate_game_name,
)


class TestConfig:
    def test_defaults(self, monkeypatch):
        for name in ("TICTACTOE_BASE_URL", "TICTACTOE_REQUEST_TIMEOUT", "TICTACTOE_LOG_LEVEL", "TICTACTOE_LOG_FILE"):
            monkeypatch.delenv(name, raising=False)

        assert config.get_base_url() == "http://localhost:3000"
        assert config.get_request_timeout() == 10.0
        assert config.get_log_level() == "WARNING"
        assert config.get_log_file() is None

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("TICTACTOE_BASE_URL", "https://ttt.example/api/")
        monkeypatch.setenv("TICTACTOE_REQUEST_TIMEOUT", "30")
        monkeypatch.setenv("TICTACTOE_LOG_LEVEL", "debug")
        monkeypatch.setenv("TICTACTOE_LOG_FILE", "/tmp/ttt.log")

        assert config.get_base_url() == "https://ttt.example/api"
        assert config.get_request_timeout() == 30.0
        assert config.get_log_level() == "DEBUG"
        assert config.get_log_file() == "/tmp/ttt.log"

    def test_bad_timeout_falls_back(self, monkeypatch):
        monkeypatch.setenv("TICTACTOE_REQUEST_TIMEOUT", "soon")
        assert config.get_request_timeout() == config.DEFAULT_REQUEST_TIMEOUT


class TestForms:
    """Tests for local form validation helpers."""

    @pytest.mark.parametrize("name", ["", "ab", "  ab  ", "   "])
    def test_short_names_rejected(self, name):
        with pytest.raises(FormValidationError):
            validate_game_name(name)

    def test_name_trimmed(self):
        assert validate_game_name("  abc ") == "abc"

    def test_optional_password(self):
        assert optional_password("   ") is None
        assert optional_password(" pw ") == "pw"

    def test_append_limited(self):
        assert append_limited("ab", "c", 3) == "abc"
        assert append_limited("abc", "d", 3) == "abc"

    @pytest.mark.parametrize(
        "character, expected",
        [("a", True), (" ", True), ("\r", False), ("\t", False), (None, False), ("", False)],
    )
    def test_is_text_input(self, character, expected):
        assert is_text_input(character) is expected
