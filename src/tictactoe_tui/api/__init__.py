"""Remote game service access."""

from .client import (
    CreatePvpRequest,
    CreateSoloRequest,
    GameServiceClient,
    GameServiceError,
    JoinPvpRequest,
    PlayMoveRequest,
)

__all__ = [
    "CreatePvpRequest",
    "CreateSoloRequest",
    "GameServiceClient",
    "GameServiceError",
    "JoinPvpRequest",
    "PlayMoveRequest",
]
