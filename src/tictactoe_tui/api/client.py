"""HTTP client for the remote Tic-Tac-Toe game service.

Every operation returns parsed GameView snapshots. Transport failures,
non-success statuses and responses that do not match the expected shape all
raise GameServiceError; callers are not expected to tell them apart.
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from pydantic import TypeAdapter, ValidationError

from tictactoe_tui.config import CLIENT_NAME, get_base_url, get_request_timeout
from tictactoe_tui.models.game import GameView, WireModel

logger = logging.getLogger(__name__)

_GAME_LIST = TypeAdapter(list[GameView])


class GameServiceError(Exception):
    """A remote call failed or returned something unusable.

    Attributes:
        status_code: HTTP status when the service answered, otherwise None
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


# =============================================================================
# Request payloads
# =============================================================================


class CreateSoloRequest(WireModel):
    player_id: str
    client_name: str = CLIENT_NAME


class CreatePvpRequest(WireModel):
    player_id: str
    name: str
    password: str | None = None


class JoinPvpRequest(WireModel):
    player_id: str
    password: str | None = None


class PlayMoveRequest(WireModel):
    player_id: str
    index: int


def _error_detail(response: requests.Response) -> str:
    """Extract a readable reason from an error response body."""
    try:
        body = response.json()
    except ValueError:
        return response.text.strip() or "<no body>"

    if isinstance(body, dict):
        message = body.get("message") or body.get("detail") or body.get("error")
        if isinstance(message, list):
            return "; ".join(str(m) for m in message)
        if message:
            return str(message)
    return str(body)


class GameServiceClient:
    """Thin wrapper around the game service's REST routes.

    Args:
        base_url: Service root, e.g. "http://localhost:3000". Defaults to the
            configured base URL.
        timeout: Per-request timeout in seconds.
        session: Optional requests.Session to reuse (tests inject a mock).
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = (base_url or get_base_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else get_request_timeout()
        self._http = session or requests.Session()

    def close(self) -> None:
        self._http.close()

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def create_solo_game(self, player_id: str) -> GameView:
        payload = CreateSoloRequest(player_id=player_id)
        return self._parse_game(self._request("POST", "/games/solo", payload))

    def create_pvp_game(
        self, player_id: str, name: str, password: str | None = None
    ) -> GameView:
        payload = CreatePvpRequest(player_id=player_id, name=name, password=password)
        return self._parse_game(self._request("POST", "/games/pvp", payload))

    def list_open_pvp_games(self) -> list[GameView]:
        data = self._request("GET", "/games/pvp/open")
        try:
            return _GAME_LIST.validate_python(data)
        except ValidationError as e:
            raise GameServiceError(f"invalid game list in response: {e.error_count()} errors") from e

    def join_pvp_game(
        self, player_id: str, game_id: str, password: str | None = None
    ) -> GameView:
        payload = JoinPvpRequest(player_id=player_id, password=password)
        return self._parse_game(self._request("POST", f"/games/pvp/{game_id}/join", payload))

    def get_game(self, game_id: str) -> GameView:
        return self._parse_game(self._request("GET", f"/games/{game_id}"))

    def play_move(self, player_id: str, game_id: str, index: int) -> GameView:
        payload = PlayMoveRequest(player_id=player_id, index=index)
        return self._parse_game(self._request("POST", f"/games/{game_id}/move", payload))

    # -------------------------------------------------------------------------
    # Transport
    # -------------------------------------------------------------------------

    def _request(self, method: str, path: str, payload: WireModel | None = None) -> Any:
        url = f"{self.base_url}{path}"
        body = payload.model_dump(by_alias=True, exclude_none=True) if payload else None
        logger.debug(f"{method} {url} body={body}")

        try:
            response = self._http.request(method, url, json=body, timeout=self.timeout)
        except requests.RequestException as e:
            raise GameServiceError(f"could not reach game service: {e}") from e

        if not response.ok:
            detail = _error_detail(response)
            raise GameServiceError(
                f"request failed with {response.status_code}: {detail}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise GameServiceError("invalid JSON response") from e

    @staticmethod
    def _parse_game(data: Any) -> GameView:
        try:
            return GameView.model_validate(data)
        except ValidationError as e:
            raise GameServiceError(f"invalid game in response: {e.error_count()} errors") from e
