"""Game snapshot models.

A GameView is the client's cached copy of one server-side game. The service is
authoritative for everything in it; the client only reads these snapshots and
replaces them wholesale after every successful fetch or move.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

Symbol = Literal["X", "O"]

BOARD_SIZE = 9
HOST_SYMBOL: Symbol = "X"
GUEST_SYMBOL: Symbol = "O"
# Never equal to a real turn marker
UNKNOWN_SYMBOL = "?"


class GameMode(str, Enum):
    """How the game was created on the service."""

    SOLO = "SOLO"
    PVP = "PVP"


class GameStatus(str, Enum):
    """Lifecycle status reported by the service.

    WAITING_FOR_PLAYER is what a freshly created PvP game reports until a
    guest joins. Only WON and DRAW are terminal.
    """

    WAITING_FOR_PLAYER = "WAITING_FOR_PLAYER"
    IN_PROGRESS = "IN_PROGRESS"
    WON = "WON"
    DRAW = "DRAW"

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.WON, GameStatus.DRAW)


class WireModel(BaseModel):
    """Base for models exchanged with the service.

    Field names are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class GameView(WireModel):
    """Snapshot of a remote game.

    Attributes:
        id: Service-assigned game identifier
        mode: SOLO or PVP
        name: Display name (PvP games, and the service's label for solo games)
        host_player_id: Identity of the creator, who always plays X
        guest_player_id: Identity of the second player (O), if any
        board: Exactly nine cells, each None, "X" or "O"
        current_turn: Symbol expected to move next
        status: Lifecycle status
        winner: Winning symbol once status is WON
        has_password: Whether joining requires a password
    """

    model_config = ConfigDict(frozen=True)

    id: str
    mode: GameMode
    name: str | None = None
    host_player_id: str
    guest_player_id: str | None = None
    board: tuple[Symbol | None, ...] = Field(default=(None,) * BOARD_SIZE)
    current_turn: Symbol
    status: GameStatus
    winner: Symbol | None = None
    has_password: bool = False

    @field_validator("board")
    @classmethod
    def board_has_nine_cells(cls, v: tuple[Symbol | None, ...]) -> tuple[Symbol | None, ...]:
        """Reject boards that are not exactly 3x3."""
        if len(v) != BOARD_SIZE:
            raise ValueError(f"board must have {BOARD_SIZE} cells, got {len(v)}")
        return v

    @property
    def display_name(self) -> str:
        return self.name or f"Game {self.id[:8]}"


def player_symbol_for(player_id: str, game: GameView) -> str:
    """Derive which symbol a player controls in a game.

    The host is X and the guest is O. Anyone else gets UNKNOWN_SYMBOL,
    which never matches a turn marker.
    """
    if game.host_player_id == player_id:
        return HOST_SYMBOL
    if game.guest_player_id is not None and game.guest_player_id == player_id:
        return GUEST_SYMBOL
    return UNKNOWN_SYMBOL


def is_finished(game: GameView) -> bool:
    """Return True once the game is WON or DRAW."""
    return game.status.is_terminal


def can_play(player_id: str, game: GameView) -> bool:
    """Return True if a move by this player is worth sending.

    Requires the game to be in progress and the player's derived symbol to
    be the one whose turn it is.
    """
    return (
        game.status == GameStatus.IN_PROGRESS
        and player_symbol_for(player_id, game) == game.current_turn
    )
