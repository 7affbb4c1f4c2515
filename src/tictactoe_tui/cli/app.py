"""Tic-Tac-Toe CLI Application.

A Textual-based terminal interface for playing Tic-Tac-Toe against the
computer or another human through a shared game service.

One Textual screen hosts the whole session: key events and poll ticks are both
messages on that screen's queue, and each handler awaits the controller before
the frame is redrawn, so remote calls never overlap.
"""

from __future__ import annotations

import argparse
import logging

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.logging import TextualHandler
from textual.message import Message
from textual.screen import Screen
from textual.widgets import Footer, Header, Static

from tictactoe_tui.api.client import GameServiceClient
from tictactoe_tui.cli.render import render
from tictactoe_tui.config import (
    TICK_INTERVAL,
    get_base_url,
    get_log_file,
    get_log_level,
    get_request_timeout,
)
from tictactoe_tui.controller.session_controller import SessionController
from tictactoe_tui.models.session import Session

logger = logging.getLogger(__name__)


CSS = """
Screen {
    background: $surface;
}

#frame-container {
    align: center top;
    width: 100%;
    height: 1fr;
    padding: 1 2;
}

#frame {
    width: 80;
    height: auto;
}
"""


class SessionScreen(Screen):
    """Renders the active client screen and forwards input to the controller."""

    class Tick(Message):
        """Posted by the UI timer; handled in order with key events."""

    def __init__(self, controller: SessionController) -> None:
        super().__init__()
        self.controller = controller

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Container(id="frame-container"):
            yield Static(id="frame")
        yield Footer()

    def on_mount(self) -> None:
        self.redraw()
        self.set_interval(TICK_INTERVAL, self._request_tick)

    def _request_tick(self) -> None:
        self.post_message(self.Tick())

    async def on_session_screen_tick(self, message: Tick) -> None:
        if await self.controller.tick():
            self.redraw()

    async def on_key(self, event: events.Key) -> None:
        event.stop()
        await self.controller.handle_key(event.key, event.character)
        if self.controller.should_quit:
            self.app.exit()
            return
        self.redraw()

    def redraw(self) -> None:
        self.query_one("#frame", Static).update(render(self.controller.session))


class TicTacToeApp(App):
    """Main Tic-Tac-Toe CLI application."""

    TITLE = "Tic-Tac-Toe"
    SUB_TITLE = "Solo and PvP over a shared game service"
    CSS = CSS

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True, priority=True),
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, client: GameServiceClient, session: Session | None = None) -> None:
        super().__init__()
        self.controller = SessionController(client, session)

    def on_mount(self) -> None:
        """Show the session screen when the app starts."""
        logger.info(f"Session started for player {self.controller.player_id}")
        self.push_screen(SessionScreen(self.controller))


def configure_logging(level: str, log_file: str | None = None) -> None:
    """Route log records away from the terminal frame.

    With a log file, records are appended there; otherwise they go to the
    Textual devtools console (visible with `textual console`).
    """
    handler: logging.Handler = logging.FileHandler(log_file) if log_file else TextualHandler()
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[handler],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tictactoe-tui",
        description="Play Tic-Tac-Toe in the terminal against the computer or another player.",
    )
    parser.add_argument(
        "--base-url",
        default=None,
        help="Game service URL (default: $TICTACTOE_BASE_URL or http://localhost:3000)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Per-request timeout in seconds (default: $TICTACTOE_REQUEST_TIMEOUT or 10)",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write logs to this file instead of the Textual console",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: $TICTACTOE_LOG_LEVEL or WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI application.

    For debugging with Textual devtools:
        1. In one terminal: textual console
        2. In another terminal: tictactoe-tui --log-level DEBUG
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or get_log_level(), args.log_file or get_log_file())

    client = GameServiceClient(
        base_url=args.base_url or get_base_url(),
        timeout=args.timeout if args.timeout is not None else get_request_timeout(),
    )
    try:
        TicTacToeApp(client).run()
    finally:
        client.close()


if __name__ == "__main__":
    main()
