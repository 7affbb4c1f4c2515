"""Local validation and editing helpers for text buffers."""

from __future__ import annotations

from tictactoe_tui.config import MIN_GAME_NAME_LENGTH


class FormValidationError(ValueError):
    """Form input rejected before anything is sent to the service."""


def validate_game_name(name: str) -> str:
    """Return the trimmed game name, or raise if it is too short."""
    trimmed = name.strip()
    if len(trimmed) < MIN_GAME_NAME_LENGTH:
        raise FormValidationError(f"Game name must be at least {MIN_GAME_NAME_LENGTH} chars")
    return trimmed


def optional_password(password: str) -> str | None:
    """Trim a password buffer; blank means no password."""
    return password.strip() or None


def is_text_input(character: str | None) -> bool:
    return character is not None and len(character) == 1 and character.isprintable()


def append_limited(text: str, character: str, limit: int) -> str:
    """Append one character unless the buffer is already at its cap."""
    if len(text) >= limit:
        return text
    return text + character
