"""Tic-Tac-Toe client models.

This module exports the game snapshot model and the per-screen session state.
"""

from .game import (
    BOARD_SIZE,
    GUEST_SYMBOL,
    HOST_SYMBOL,
    UNKNOWN_SYMBOL,
    GameMode,
    GameStatus,
    GameView,
    Symbol,
    WireModel,
    can_play,
    is_finished,
    player_symbol_for,
)
from .session import (
    HOME_ITEMS,
    BoardView,
    CreateView,
    GameOverView,
    HomeView,
    InfoView,
    LobbyView,
    PvpGameView,
    Screen,
    ScreenView,
    Session,
    SoloGameView,
    new_player_id,
)

__all__ = [
    "BOARD_SIZE",
    "GUEST_SYMBOL",
    "HOME_ITEMS",
    "HOST_SYMBOL",
    "UNKNOWN_SYMBOL",
    "BoardView",
    "CreateView",
    "GameMode",
    "GameOverView",
    "GameStatus",
    "GameView",
    "HomeView",
    "InfoView",
    "LobbyView",
    "PvpGameView",
    "Screen",
    "ScreenView",
    "Session",
    "SoloGameView",
    "Symbol",
    "WireModel",
    "can_play",
    "is_finished",
    "new_player_id",
    "player_symbol_for",
]
