"""Shared pytest fixtures for all tests."""

from unittest.mock import MagicMock

import pytest

from tictactoe_tui.api.client import GameServiceClient
from tictactoe_tui.models.game import GameView

HOST_ID = "host-player"
GUEST_ID = "guest-player"


class FakeClock:
    """Manually advanced monotonic clock for poll-gate tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_game(**overrides) -> GameView:
    """Build a GameView from wire-style defaults plus snake_case overrides."""
    fields = {
        "id": "game-1",
        "mode": "SOLO",
        "name": "Solo game (python-tui-client)",
        "host_player_id": HOST_ID,
        "guest_player_id": "AI",
        "board": [None] * 9,
        "current_turn": "X",
        "status": "IN_PROGRESS",
        "winner": None,
        "has_password": False,
    }
    fields.update(overrides)
    return GameView.model_validate(fields)


def make_pvp_game(**overrides) -> GameView:
    fields = {
        "id": "pvp-1",
        "mode": "PVP",
        "name": "Friday match",
        "guest_player_id": None,
        "status": "WAITING_FOR_PLAYER",
    }
    fields.update(overrides)
    return make_game(**fields)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def mock_client():
    """Game service client double; every operation is a MagicMock."""
    return MagicMock(spec=GameServiceClient)


@pytest.fixture
def controller(mock_client, clock):
    """Controller on Home for HOST_ID with a fake poll clock."""
    from tictactoe_tui.controller.session_controller import SessionController
    from tictactoe_tui.models.session import Session

    return SessionController(mock_client, Session(player_id=HOST_ID), clock=clock)


@pytest.fixture(name="make_game")
def make_game_fixture():
    """Factory for solo-style GameView snapshots."""
    return make_game


@pytest.fixture(name="make_pvp_game")
def make_pvp_game_fixture():
    """Factory for PvP GameView snapshots (waiting for a guest by default)."""
    return make_pvp_game
