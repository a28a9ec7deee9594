"""Public API layer: the aoe4world client and its query filters."""

from .client import AoE4WorldClient, games, leaderboard, profile, search
from .filters import GamesFilter, LeaderboardFilter, SearchFilter

__all__ = [
    "AoE4WorldClient",
    "GamesFilter",
    "LeaderboardFilter",
    "SearchFilter",
    "games",
    "leaderboard",
    "profile",
    "search",
]
