"""User-facing text for game results and failures."""

from __future__ import annotations

from tictactoe_tui.models.game import GameMode, GameStatus, GameView, player_symbol_for

MODE_LABELS = {
    GameMode.SOLO: "Solo",
    GameMode.PVP: "PvP",
}


def game_over_message(player_id: str, game: GameView) -> str:
    """Compose the GameOver text for a finished game.

    For a win the result line says whether this player won, comparing the
    reported winner to the player's derived symbol. A draw makes no winner
    claim.
    """
    if game.status == GameStatus.WON:
        winner = game.winner or "Unknown"
        outcome = "You won!" if winner == player_symbol_for(player_id, game) else "You lost."
        result_line = f"Winner: {winner} ({outcome})"
    else:
        result_line = "Result: Draw"

    return f"{MODE_LABELS[game.mode]} game finished.\nGame id: {game.id}\n{result_line}"


def failure_message(action: str, error: Exception) -> str:
    return f"{action}: {error}"
