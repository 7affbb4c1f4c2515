"""Tic-Tac-Toe CLI module.

Provides a Textual-based terminal interface for the game service.

Usage:
    uv run tictactoe-tui

Or directly:
    python -m tictactoe_tui.cli.app
"""

from tictactoe_tui.cli.app import TicTacToeApp, main

__all__ = ["TicTacToeApp", "main"]
