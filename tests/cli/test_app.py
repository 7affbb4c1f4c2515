"""Tests for the CLI application."""

import logging
from unittest.mock import MagicMock, patch

import pytest

from tictactoe_tui.api.client import GameServiceClient, GameServiceError
from tictactoe_tui.cli.app import TicTacToeApp, build_parser, configure_logging, main
from tictactoe_tui.models.session import InfoView, LobbyView, Screen, Session


class TestTicTacToeApp:
    """Pilot-driven smoke tests for the Textual app."""

    @pytest.mark.asyncio
    async def test_opens_lobby_from_home(self, mock_client, make_pvp_game):
        mock_client.list_open_pvp_games.return_value = [make_pvp_game(host_player_id="other")]
        app = TicTacToeApp(mock_client, Session(player_id="host-player"))

        async with app.run_test() as pilot:
            await pilot.press("down", "enter")
            await pilot.pause()

            assert isinstance(app.controller.session.view, LobbyView)
            assert len(app.controller.session.view.games) == 1

    @pytest.mark.asyncio
    async def test_failure_shows_info_and_keeps_running(self, mock_client):
        mock_client.create_solo_game.side_effect = GameServiceError("could not reach game service")
        app = TicTacToeApp(mock_client, Session(player_id="host-player"))

        async with app.run_test() as pilot:
            await pilot.press("enter")
            await pilot.pause()

            assert isinstance(app.controller.session.view, InfoView)
            assert app.is_running

            await pilot.press("escape")
            await pilot.pause()
            assert app.controller.session.screen == Screen.HOME

    @pytest.mark.asyncio
    async def test_q_exits(self, mock_client):
        app = TicTacToeApp(mock_client)

        async with app.run_test() as pilot:
            await pilot.press("q")

        assert app.controller.should_quit


class TestEntryPoint:
    """Tests for argument parsing and startup wiring."""

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.base_url is None
        assert args.timeout is None
        assert args.log_file is None
        assert args.log_level is None

    def test_parser_flags(self):
        args = build_parser().parse_args(
            ["--base-url", "http://x:1", "--timeout", "3", "--log-file", "t.log", "--log-level", "DEBUG"]
        )
        assert args.base_url == "http://x:1"
        assert args.timeout == 3.0
        assert args.log_file == "t.log"
        assert args.log_level == "DEBUG"

    def test_main_builds_client_and_closes_it(self, monkeypatch):
        monkeypatch.delenv("TICTACTOE_BASE_URL", raising=False)
        client = MagicMock(spec=GameServiceClient)

        with patch("tictactoe_tui.cli.app.GameServiceClient", return_value=client) as client_cls, patch(
            "tictactoe_tui.cli.app.TicTacToeApp"
        ) as app_cls, patch("tictactoe_tui.cli.app.configure_logging"):
            main(["--base-url", "http://games.test", "--timeout", "4"])

        client_cls.assert_called_once_with(base_url="http://games.test", timeout=4.0)
        app_cls.assert_called_once_with(client)
        app_cls.return_value.run.assert_called_once()
        client.close.assert_called_once()

    def test_configure_logging_to_file(self, tmp_path):
        log_file = tmp_path / "client.log"
        root = logging.getLogger()
        saved = root.handlers[:], root.level
        try:
            configure_logging("INFO", str(log_file))
            logging.getLogger("tictactoe_tui.test").info("hello")
            for handler in root.handlers:
                handler.flush()
            assert "hello" in log_file.read_text()
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers, root.level = saved[0], saved[1]
