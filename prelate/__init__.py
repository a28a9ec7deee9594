"""prelate - asyncio client for the aoe4world game statistics API.

Use it to retrieve player profiles, match histories, leaderboards and
search results. Paginated endpoints are exposed as lazy, concurrently
prefetched item streams.
"""

from .api import (
    AoE4WorldClient,
    GamesFilter,
    LeaderboardFilter,
    SearchFilter,
    games,
    leaderboard,
    profile,
    search,
)
from .core import (
    Civilization,
    ClientConfig,
    DecodeError,
    FetchError,
    GameKind,
    GameResult,
    HttpStatusError,
    Leaderboard,
    League,
    Map,
    MapType,
    PaginationPolicy,
    PrelateError,
    StreamConsumedError,
    TransportError,
    ValidationError,
)
from .models import (
    Game,
    LeaderboardEntry,
    PaginationMetadata,
    Player,
    Profile,
    TeamMember,
)
from .runtime.pagination import ItemResult, ItemStream, PlanStrategy, StreamState

__version__ = "0.5.0"

__all__ = [
    # Client
    "AoE4WorldClient",
    "ClientConfig",
    "PaginationPolicy",
    "games",
    "leaderboard",
    "profile",
    "search",
    # Filters
    "GamesFilter",
    "LeaderboardFilter",
    "SearchFilter",
    # Streams
    "ItemResult",
    "ItemStream",
    "PlanStrategy",
    "StreamState",
    # Models
    "Game",
    "LeaderboardEntry",
    "PaginationMetadata",
    "Player",
    "Profile",
    "TeamMember",
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
