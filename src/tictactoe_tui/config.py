"""Configuration for the Tic-Tac-Toe terminal client.

Values come from module defaults, optionally overridden via environment
variables. Command line flags in the CLI entry point take precedence over both.
"""

import os

# Default configuration (can be overridden via environment variables)
DEFAULT_BASE_URL = "http://localhost:3000"
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"

CLIENT_NAME = "python-tui-client"

# Poller gate and UI tick, in seconds
POLL_INTERVAL = 1.0
TICK_INTERVAL = 0.12

# Form limits
MAX_GAME_NAME_LENGTH = 40
MAX_PASSWORD_LENGTH = 32
MIN_GAME_NAME_LENGTH = 3


def get_base_url() -> str:
    """Get the game service base URL from environment.

    Trailing slashes are stripped so routes can be appended directly.
    """
    return os.environ.get("TICTACTOE_BASE_URL", DEFAULT_BASE_URL).rstrip("/")


def get_request_timeout() -> float:
    """Get the per-request HTTP timeout in seconds from environment."""
    raw = os.environ.get("TICTACTOE_REQUEST_TIMEOUT")
    if not raw:
        return DEFAULT_REQUEST_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        return DEFAULT_REQUEST_TIMEOUT


def get_log_level() -> str:
    """Get configured log level name from environment."""
    return os.environ.get("TICTACTOE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_log_file() -> str | None:
    """Get configured log file path from environment, if any."""
    return os.environ.get("TICTACTOE_LOG_FILE") or None
