"""Session state for the terminal client.

The active screen is a single tagged value: each screen has its own view
dataclass carrying exactly the data that screen needs, so form buffers or
cached games from one screen cannot leak into another.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

from tictactoe_tui.models.game import BOARD_SIZE, GameView


class Screen(Enum):
    """Closed set of client screens."""

    HOME = "home"
    SOLO_GAME = "solo_game"
    PVP_LOBBY = "pvp_lobby"
    PVP_CREATE = "pvp_create"
    PVP_GAME = "pvp_game"
    GAME_OVER = "game_over"
    INFO = "info"


HOME_ITEMS: tuple[str, ...] = ("Solo vs Computer", "PvP", "Exit")


def clamp(value: int, min_val: int, max_val: int) -> int:
    """Clamp an integer to the inclusive range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


@dataclass
class HomeView:
    """Main menu with a selection over HOME_ITEMS."""

    screen: ClassVar[Screen] = Screen.HOME

    selected: int = 0

    def move_selection(self, delta: int) -> None:
        self.selected = clamp(self.selected + delta, 0, len(HOME_ITEMS) - 1)


@dataclass
class BoardView:
    """Shared state for both game screens: one cached game and a cursor."""

    game: GameView
    cursor: int = 0

    def move_cursor(self, d_row: int, d_col: int) -> None:
        """Move the cursor, clamping row and column separately."""
        row, col = divmod(self.cursor, 3)
        row = clamp(row + d_row, 0, 2)
        col = clamp(col + d_col, 0, 2)
        self.cursor = row * 3 + col

    def jump_cursor(self, digit: int) -> None:
        """Jump to the cell labelled 1-9 on the keypad."""
        if 1 <= digit <= BOARD_SIZE:
            self.cursor = digit - 1


@dataclass
class SoloGameView(BoardView):
    screen: ClassVar[Screen] = Screen.SOLO_GAME


@dataclass
class PvpGameView(BoardView):
    screen: ClassVar[Screen] = Screen.PVP_GAME


@dataclass
class LobbyView:
    """Open PvP games plus the join-password buffer.

    `selected` is always a valid index into `games`, or 0 when the list is
    empty. `editing_password` switches key handling to the password buffer.
    """

    screen: ClassVar[Screen] = Screen.PVP_LOBBY

    games: list[GameView] = field(default_factory=list)
    selected: int = 0
    join_password: str = ""
    editing_password: bool = False

    def replace_games(self, games: list[GameView], *, reset_selection: bool = False) -> None:
        """Swap in a freshly fetched list and keep the selection in range."""
        self.games = list(games)
        if reset_selection:
            self.selected = 0
        self.clamp_selection()

    def clamp_selection(self) -> None:
        self.selected = clamp(self.selected, 0, max(len(self.games) - 1, 0))

    def move_selection(self, delta: int) -> None:
        self.selected += delta
        self.clamp_selection()

    @property
    def selected_game(self) -> GameView | None:
        if not self.games:
            return None
        return self.games[self.selected]


@dataclass
class CreateView:
    """PvP game creation form. Field 0 is the name, field 1 the password."""

    screen: ClassVar[Screen] = Screen.PVP_CREATE
    FIELD_COUNT: ClassVar[int] = 2

    name: str = ""
    password: str = ""
    focused: int = 0

    def cycle_focus(self) -> None:
        self.focused = (self.focused + 1) % self.FIELD_COUNT


@dataclass
class GameOverView:
    screen: ClassVar[Screen] = Screen.GAME_OVER

    message: str


@dataclass
class InfoView:
    screen: ClassVar[Screen] = Screen.INFO

    message: str


ScreenView = Union[
    HomeView,
    SoloGameView,
    LobbyView,
    CreateView,
    PvpGameView,
    GameOverView,
    InfoView,
]


def new_player_id() -> str:
    """Generate the ephemeral identity used for this process."""
    return str(uuid.uuid4())


@dataclass
class Session:
    """Everything the client knows for one run.

    Attributes:
        player_id: Identity sent with every mutating request, fixed for the run
        view: State of the active screen
        should_quit: Set once the user asks to exit
    """

    player_id: str = field(default_factory=new_player_id)
    view: ScreenView = field(default_factory=HomeView)
    should_quit: bool = False

    @property
    def screen(self) -> Screen:
        return self.view.screen
