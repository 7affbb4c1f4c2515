"""Session controller module for the Tic-Tac-Toe client.

This module contains the client-side control logic:
- session_controller: screen state machine and key dispatch
- poller: time-gated background refresh of remote state
- forms: local validation of form buffers
- messages: result and failure text

Usage:
    from tictactoe_tui.api import GameServiceClient
    from tictactoe_tui.controller import SessionController

    controller = SessionController(GameServiceClient("http://localhost:3000"))
    await controller.handle_key("enter")   # Home item 0: start a solo game
    await controller.tick()                # refresh lobby / PvP game when due
"""

from .forms import FormValidationError, validate_game_name
from .messages import game_over_message
from .poller import Poller
from .session_controller import SessionController

__all__ = [
    "FormValidationError",
    "Poller",
    "SessionController",
    "game_over_message",
    "validate_game_name",
]
