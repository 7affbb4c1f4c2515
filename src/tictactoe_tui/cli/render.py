"""Pure renderers for each client screen.

Every function takes session data and returns a rich renderable. Nothing here
mutates state or performs I/O; the Textual app simply displays the result.
"""

from __future__ import annotations

from rich import box
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tictactoe_tui.models.game import GameStatus, GameView, player_symbol_for
from tictactoe_tui.models.session import (
    HOME_ITEMS,
    BoardView,
    CreateView,
    GameOverView,
    HomeView,
    InfoView,
    LobbyView,
    PvpGameView,
    Session,
    SoloGameView,
)

TITLE = "Tic-Tac-Toe"


def _help(text: str) -> Panel:
    return Panel(Text(text, style="dim"), title="Help", box=box.ROUNDED)


def render_home(view: HomeView, player_id: str) -> RenderableType:
    menu = Text()
    for idx, label in enumerate(HOME_ITEMS):
        if idx == view.selected:
            menu.append(f"> {label}\n", style="bold green")
        else:
            menu.append(f"  {label}\n")

    return Group(
        Panel(Text(TITLE, justify="center", style="bold"), title="Home"),
        Panel(menu, title="Menu"),
        _help(
            "Arrow Up/Down + Enter to select.\n"
            "q exits from navigation screens.\n"
            f"Player session id (generated once per launch): {player_id}"
        ),
    )


def render_board(game: GameView, cursor: int) -> Table:
    """Draw the 3x3 grid with the cursor cell highlighted."""
    grid = Table(show_header=False, box=box.HEAVY, padding=(0, 2))
    for _ in range(3):
        grid.add_column(justify="center")

    for row in range(3):
        cells = []
        for col in range(3):
            index = row * 3 + col
            symbol = game.board[index] or str(index + 1)
            style = "bold red" if game.board[index] == "X" else "bold blue"
            if game.board[index] is None:
                style = "dim"
            if index == cursor:
                style = f"{style} reverse"
            cells.append(Text(symbol, style=style))
        grid.add_row(*cells)
    return grid


def _status_line(game: GameView, player_symbol: str) -> str:
    if game.status == GameStatus.WAITING_FOR_PLAYER:
        return "Waiting for an opponent to join..."
    if game.status == GameStatus.IN_PROGRESS:
        if game.current_turn == player_symbol:
            return "Your turn."
        return f"Waiting for {game.current_turn} to move..."
    if game.status == GameStatus.WON:
        return f"Winner: {game.winner}"
    return "Draw."


def render_game(view: BoardView, player_id: str, title: str, back_hint: str) -> RenderableType:
    game = view.game
    symbol = player_symbol_for(player_id, game)

    info = Table.grid(padding=(0, 2))
    info.add_column(style="dim")
    info.add_column()
    info.add_row("Game", game.display_name)
    info.add_row("You are", symbol)
    info.add_row("Turn", game.current_turn)
    info.add_row("Status", game.status.value)

    return Group(
        Panel(info, title=title),
        Panel(render_board(game, view.cursor), title="Board"),
        Panel(Text(_status_line(game, symbol), style="bold")),
        _help(f"Arrows or 1-9 move the cursor. Enter/Space plays. {back_hint} q quits."),
    )


def render_lobby(view: LobbyView) -> RenderableType:
    if view.games:
        listing = Text()
        for idx, game in enumerate(view.games):
            lock = " [locked]" if game.has_password else ""
            line = f"{game.display_name}{lock}"
            if idx == view.selected:
                listing.append(f"> {line}\n", style="bold green")
            else:
                listing.append(f"  {line}\n")
    else:
        listing = Text("No open PvP games. Press c to create one.", style="italic")

    masked = "*" * len(view.join_password)
    if view.editing_password:
        password = Text(f"{masked}_", style="bold yellow")
        password_title = "Join password (editing, Enter/Esc to stop)"
    else:
        password = Text(masked or "(none)", style="dim" if not masked else "")
        password_title = "Join password"

    return Group(
        Panel(listing, title="Open PvP games"),
        Panel(password, title=password_title),
        _help(
            "Up/Down select. Enter or j joins. r refreshes. c creates a game.\n"
            "p edits the join password. b goes back. q quits."
        ),
    )


def render_create(view: CreateView) -> RenderableType:
    fields = Table.grid(padding=(0, 2))
    fields.add_column()
    fields.add_column()
    for index, (label, value) in enumerate(
        (("Name", view.name), ("Password", "*" * len(view.password)))
    ):
        marker = ">" if index == view.focused else " "
        style = "bold yellow" if index == view.focused else ""
        fields.add_row(f"{marker} {label}", Text(value or "", style=style))

    return Group(
        Panel(fields, title="Create PvP game"),
        _help(
            "Type to edit the focused field. Tab/Up/Down switch fields.\n"
            "Enter creates the game (name needs 3+ chars, password optional). Esc cancels."
        ),
    )


def render_message(title: str, message: str, hint: str) -> RenderableType:
    return Group(
        Panel(Text(message), title=title),
        _help(hint),
    )


def render(session: Session) -> RenderableType:
    """Render the active screen of a session."""
    view = session.view
    if isinstance(view, HomeView):
        return render_home(view, session.player_id)
    if isinstance(view, SoloGameView):
        return render_game(view, session.player_id, "Solo Mode", "b returns home.")
    if isinstance(view, PvpGameView):
        return render_game(view, session.player_id, "PvP Mode", "b returns to the lobby.")
    if isinstance(view, LobbyView):
        return render_lobby(view)
    if isinstance(view, CreateView):
        return render_create(view)
    if isinstance(view, GameOverView):
        return render_message("Game Over", view.message, "Enter, Esc, b or m for the menu. q quits.")
    if isinstance(view, InfoView):
        return render_message("Info", view.message, "Enter, Esc or b returns home.")
    raise TypeError(f"Unknown view: {type(view).__name__}")
