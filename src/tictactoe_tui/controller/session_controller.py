"""Screen state machine for the terminal client.

The controller maps (active screen, key) to either a local state change or a
call into the game service followed by a transition. Remote failures never
escape a key handler: they are turned into an Info screen. Only explicit quit
input ends the session.

Keys are Textual key names ("up", "enter", "escape", "backspace", "a", ...).
Text entry uses the printable character of the event.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable, TypeVar

from tictactoe_tui.api.client import GameServiceClient, GameServiceError
from tictactoe_tui.config import MAX_GAME_NAME_LENGTH, MAX_PASSWORD_LENGTH, POLL_INTERVAL
from tictactoe_tui.controller.forms import (
    FormValidationError,
    append_limited,
    is_text_input,
    optional_password,
    validate_game_name,
)
from tictactoe_tui.controller.messages import failure_message, game_over_message
from tictactoe_tui.controller.poller import Poller
from tictactoe_tui.models.game import GameView, can_play, is_finished
from tictactoe_tui.models.session import (
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
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

QUIT_KEY = "q"
BACK_KEY = "b"
CONFIRM_KEYS = frozenset({"enter", "space"})
CURSOR_MOVES = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}
GAME_OVER_DISMISS_KEYS = frozenset({"enter", "escape", "b", "m"})
INFO_DISMISS_KEYS = frozenset({"enter", "escape", "b"})


class SessionController:
    """Owns the session and drives every screen transition.

    Args:
        client: Game service client; its blocking calls run in a worker thread
        session: Existing session, or None to start fresh on Home
        poll_interval: Seconds between background refreshes
        clock: Monotonic time source for the poll gate
    """

    def __init__(
        self,
        client: GameServiceClient,
        session: Session | None = None,
        poll_interval: float = POLL_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.client = client
        self.session = session or Session()
        self.poller = Poller(self, interval=poll_interval, clock=clock)
        self._handlers: dict[Screen, Callable[[Any, str, str | None], Awaitable[None]]] = {
            Screen.HOME: self._handle_home,
            Screen.SOLO_GAME: self._handle_solo_game,
            Screen.PVP_LOBBY: self._handle_lobby,
            Screen.PVP_CREATE: self._handle_create,
            Screen.PVP_GAME: self._handle_pvp_game,
            Screen.GAME_OVER: self._handle_game_over,
            Screen.INFO: self._handle_info,
        }

    @property
    def player_id(self) -> str:
        return self.session.player_id

    @property
    def should_quit(self) -> bool:
        return self.session.should_quit

    async def call(self, method: Callable[..., T], *args: Any) -> T:
        """Run a blocking client method off the event loop and await it."""
        return await asyncio.to_thread(method, *args)

    async def tick(self) -> bool:
        """Run the poller for the active screen. Returns True if it fetched."""
        return await self.poller.poll()

    async def handle_key(self, key: str, character: str | None = None) -> None:
        """Dispatch one key event to the active screen's handler."""
        if character is None and len(key) == 1:
            character = key
        view = self.session.view
        await self._handlers[view.screen](view, key, character)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def set_view(self, view: ScreenView) -> None:
        previous = self.session.view.screen
        self.session.view = view
        if previous != view.screen:
            logger.info(f"Screen {previous.value} -> {view.screen.value}")

    def quit(self) -> None:
        logger.info("Quit requested")
        self.session.should_quit = True

    def show_info(self, message: str) -> None:
        self.set_view(InfoView(message=message))

    def show_game_over(self, game: GameView) -> None:
        self.set_view(GameOverView(message=game_over_message(self.player_id, game)))

    def _fail(self, action: str, error: Exception) -> None:
        logger.warning(f"{action}: {error}")
        self.show_info(failure_message(action, error))

    def _return_to_lobby(self) -> None:
        self.set_view(LobbyView())
        self.poller.expire()

    # -------------------------------------------------------------------------
    # Home
    # -------------------------------------------------------------------------

    async def _handle_home(self, view: HomeView, key: str, character: str | None) -> None:
        if key == QUIT_KEY:
            self.quit()
        elif key == "up":
            view.move_selection(-1)
        elif key == "down":
            view.move_selection(1)
        elif key == "enter":
            if view.selected == 0:
                await self._start_solo_game()
            elif view.selected == 1:
                await self._open_lobby()
            else:
                self.quit()

    async def _start_solo_game(self) -> None:
        try:
            game = await self.call(self.client.create_solo_game, self.player_id)
        except GameServiceError as e:
            self._fail("Could not start solo game", e)
            return
        self.set_view(SoloGameView(game=game))

    async def _open_lobby(self) -> None:
        try:
            games = await self.call(self.client.list_open_pvp_games)
        except GameServiceError as e:
            self._fail("Could not load PvP games", e)
            return
        self.set_view(LobbyView(games=games))

    # -------------------------------------------------------------------------
    # Game screens
    # -------------------------------------------------------------------------

    async def _handle_solo_game(self, view: SoloGameView, key: str, character: str | None) -> None:
        if key == BACK_KEY:
            self.set_view(HomeView())
            return
        await self._handle_board(view, key, character)

    async def _handle_pvp_game(self, view: PvpGameView, key: str, character: str | None) -> None:
        if key == BACK_KEY:
            self._return_to_lobby()
            return
        await self._handle_board(view, key, character)

    async def _handle_board(self, view: BoardView, key: str, character: str | None) -> None:
        if key == QUIT_KEY:
            self.quit()
        elif key in CURSOR_MOVES:
            view.move_cursor(*CURSOR_MOVES[key])
        elif character is not None and len(character) == 1 and character in "123456789":
            view.jump_cursor(int(character))
        elif key in CONFIRM_KEYS:
            await self._play_move(view)

    async def _play_move(self, view: BoardView) -> None:
        game = view.game
        if not can_play(self.player_id, game):
            logger.debug(f"Ignoring move on {game.id}: status={game.status.value} turn={game.current_turn}")
            return

        try:
            updated = await self.call(self.client.play_move, self.player_id, game.id, view.cursor)
        except GameServiceError as e:
            self._fail("Move failed", e)
            return

        if is_finished(updated):
            self.show_game_over(updated)
        else:
            view.game = updated

    # -------------------------------------------------------------------------
    # PvP lobby
    # -------------------------------------------------------------------------

    async def _handle_lobby(self, view: LobbyView, key: str, character: str | None) -> None:
        if view.editing_password:
            self._edit_join_password(view, key, character)
            return

        if key == BACK_KEY:
            self.set_view(HomeView())
        elif key == QUIT_KEY:
            self.quit()
        elif key == "up":
            view.move_selection(-1)
        elif key == "down":
            view.move_selection(1)
        elif key == "r":
            await self._refresh_lobby(view)
        elif key == "c":
            self.set_view(CreateView())
        elif key == "p":
            view.editing_password = True
        elif key in ("j", "enter"):
            await self._join_selected(view)

    def _edit_join_password(self, view: LobbyView, key: str, character: str | None) -> None:
        if key in ("escape", "enter"):
            view.editing_password = False
        elif key == "backspace":
            view.join_password = view.join_password[:-1]
        elif is_text_input(character):
            view.join_password = append_limited(view.join_password, character, MAX_PASSWORD_LENGTH)

    async def _refresh_lobby(self, view: LobbyView) -> None:
        try:
            games = await self.call(self.client.list_open_pvp_games)
        except GameServiceError as e:
            self._fail("Refresh failed", e)
            return
        view.replace_games(games, reset_selection=True)

    async def _join_selected(self, view: LobbyView) -> None:
        game = view.selected_game
        if game is None:
            return

        # An empty buffer on a gated game is sent as "no password"
        password = view.join_password if game.has_password and view.join_password else None
        try:
            joined = await self.call(self.client.join_pvp_game, self.player_id, game.id, password)
        except GameServiceError as e:
            self._fail("Join failed", e)
            return
        self.set_view(PvpGameView(game=joined))

    # -------------------------------------------------------------------------
    # PvP create form
    # -------------------------------------------------------------------------

    async def _handle_create(self, view: CreateView, key: str, character: str | None) -> None:
        if key == "escape":
            self._return_to_lobby()
        elif key in ("tab", "up", "down"):
            view.cycle_focus()
        elif key == "backspace":
            if view.focused == 0:
                view.name = view.name[:-1]
            else:
                view.password = view.password[:-1]
        elif key == "enter":
            await self._submit_create(view)
        elif is_text_input(character):
            if view.focused == 0:
                view.name = append_limited(view.name, character, MAX_GAME_NAME_LENGTH)
            else:
                view.password = append_limited(view.password, character, MAX_PASSWORD_LENGTH)

    async def _submit_create(self, view: CreateView) -> None:
        try:
            name = validate_game_name(view.name)
        except FormValidationError as e:
            logger.info(f"Create form rejected: {e}")
            self.show_info(str(e))
            return

        password = optional_password(view.password)
        try:
            game = await self.call(self.client.create_pvp_game, self.player_id, name, password)
        except GameServiceError as e:
            self._fail("Create game failed", e)
            return
        self.set_view(PvpGameView(game=game))

    # -------------------------------------------------------------------------
    # Result screens
    # -------------------------------------------------------------------------

    async def _handle_game_over(self, view: GameOverView, key: str, character: str | None) -> None:
        if key == QUIT_KEY:
            self.quit()
        elif key in GAME_OVER_DISMISS_KEYS:
            self.set_view(HomeView())

    async def _handle_info(self, view: InfoView, key: str, character: str | None) -> None:
        if key in INFO_DISMISS_KEYS:
            self.set_view(HomeView())
