"""Core components."""

from .config import (
    API_BASE_URL,
    DEFAULT_CONCURRENCY,
    DEFAULT_PER_PAGE,
    DEFAULT_TIMEOUT,
    ClientConfig,
    PaginationPolicy,
)
from .enums import Civilization, GameKind, GameResult, Leaderboard, League, Map, MapType
from .exceptions import (
    DecodeError,
    FetchError,
    HttpStatusError,
    PrelateError,
    StreamConsumedError,
    TransportError,
    ValidationError,
)

__all__ = [
    "API_BASE_URL",
    "DEFAULT_CONCURRENCY",
    "DEFAULT_PER_PAGE",
    "DEFAULT_TIMEOUT",
    "ClientConfig",
    "PaginationPolicy",
    # Enums
    "Civilization",
    "GameKind",
    "GameResult",
    "Leaderboard",
    "League",
    "Map",
    "MapType",
    # Errors
    "PrelateError",
    "FetchError",
    "TransportError",
    "HttpStatusError",
    "DecodeError",
    "ValidationError",
    "StreamConsumedError",
]
