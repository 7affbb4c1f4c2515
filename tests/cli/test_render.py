"""Tests for the pure screen renderers."""

import copy
import io

import pytest
from rich.console import Console

from tictactoe_tui.cli.render import render
from tictactoe_tui.models.session import (
    CreateView,
    GameOverView,
    HomeView,
    InfoView,
    LobbyView,
    PvpGameView,
    Session,
    SoloGameView,
)


def to_text(renderable) -> str:
    buffer = io.StringIO()
    Console(file=buffer, width=100, color_system=None).print(renderable)
    return buffer.getvalue()


class TestRender:
    """Tests for the text each screen shows."""

    def test_home_marks_selection_and_shows_player_id(self):
        session = Session(player_id="host-player", view=HomeView(selected=1))
        text = to_text(render(session))

        assert "> PvP" in text
        assert "  Solo vs Computer" in text
        assert "host-player" in text

    def test_solo_game_shows_board_and_turn(self, make_game):
        game = make_game(board=["X", None, None, None, "O", None, None, None, None])
        session = Session(player_id="host-player", view=SoloGameView(game=game, cursor=8))
        text = to_text(render(session))

        assert "Solo Mode" in text
        assert "Your turn." in text
        assert "X" in text and "O" in text
        # Empty cells show their keypad digit
        assert "9" in text

    def test_waiting_pvp_game(self, make_pvp_game):
        session = Session(player_id="host-player", view=PvpGameView(game=make_pvp_game()))
        text = to_text(render(session))

        assert "PvP Mode" in text
        assert "Waiting for an opponent" in text

    def test_opponents_turn(self, make_pvp_game):
        game = make_pvp_game(guest_player_id="guest-player", status="IN_PROGRESS", current_turn="O")
        session = Session(player_id="host-player", view=PvpGameView(game=game))
        assert "Waiting for O to move" in to_text(render(session))

    def test_lobby_lists_games_with_lock(self, make_pvp_game):
        view = LobbyView(
            games=[make_pvp_game(id="a", name="Open one"), make_pvp_game(id="b", name="Gated one", has_password=True)],
            selected=1,
            join_password="abc",
        )
        text = to_text(render(Session(view=view)))

        assert "  Open one" in text
        assert "> Gated one [locked]" in text
        assert "***" in text
        assert "abc" not in text

    def test_empty_lobby_message(self):
        text = to_text(render(Session(view=LobbyView())))
        assert "No open PvP games" in text

    def test_lobby_edit_mode_indicator(self):
        text = to_text(render(Session(view=LobbyView(editing_password=True))))
        assert "editing" in text

    def test_create_form_masks_password(self):
        view = CreateView(name="Big game", password="secret", focused=1)
        text = to_text(render(Session(view=view)))

        assert "Big game" in text
        assert "secret" not in text
        assert "> Password" in text

    @pytest.mark.parametrize(
        "view, title",
        [
            (GameOverView(message="Solo game finished.\nResult: Draw"), "Game Over"),
            (InfoView(message="Join failed: nope"), "Info"),
        ],
    )
    def test_message_screens(self, view, title):
        text = to_text(render(Session(view=view)))
        assert title in text
        assert view.message.splitlines()[0] in text

    def test_render_does_not_mutate_session(self, make_game):
        session = Session(player_id="host-player", view=SoloGameView(game=make_game(), cursor=3))
        before = copy.deepcopy(session)

        render(session)

        assert session == before
