"""Time-gated refresh of server-side state.

There is no push channel, so screens whose content can change remotely (the
open-game lobby and an active PvP game) are re-fetched at most once per
interval. Failures are logged and dropped: the stale view stays on screen and
the user is never interrupted by a background fetch.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Callable

from tictactoe_tui.api.client import GameServiceError
from tictactoe_tui.config import POLL_INTERVAL
from tictactoe_tui.models.game import is_finished
from tictactoe_tui.models.session import LobbyView, PvpGameView

if TYPE_CHECKING:
    from tictactoe_tui.controller.session_controller import SessionController

logger = logging.getLogger(__name__)


class Poller:
    """Refreshes the lobby list or the active PvP game once per interval.

    Args:
        controller: Controller whose session and client are used
        interval: Minimum seconds between two refresh attempts
        clock: Monotonic time source (tests inject a fake)
    """

    def __init__(
        self,
        controller: SessionController,
        interval: float = POLL_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.controller = controller
        self.interval = interval
        self._clock = clock
        self._last_poll_at: float | None = clock()

    def expire(self) -> None:
        """Make the next tick refresh immediately."""
        self._last_poll_at = None

    def is_due(self) -> bool:
        if self._last_poll_at is None:
            return True
        return self._clock() - self._last_poll_at >= self.interval

    async def poll(self) -> bool:
        """Refresh the active screen if the gate allows it.

        Returns:
            True if a refresh was attempted (whether or not it succeeded).
        """
        if not self.is_due():
            return False

        view = self.controller.session.view
        try:
            if isinstance(view, LobbyView):
                await self._refresh_lobby(view)
            elif isinstance(view, PvpGameView):
                await self._refresh_game(view)
        except GameServiceError as e:
            logger.debug(f"Poll on {view.screen.value} failed, keeping cached view: {e}")
        finally:
            # Advance even on failure so an unreachable server is not hammered
            self._last_poll_at = self._clock()
        return True

    async def _refresh_lobby(self, view: LobbyView) -> None:
        games = await self.controller.call(self.controller.client.list_open_pvp_games)
        if self.controller.session.view is not view:
            return
        view.replace_games(games)

    async def _refresh_game(self, view: PvpGameView) -> None:
        game = await self.controller.call(self.controller.client.get_game, view.game.id)
        if self.controller.session.view is not view:
            return
        if is_finished(game):
            self.controller.show_game_over(game)
        else:
            view.game = game
