"""Data models for aoe4world API responses.

Architecture:
    This module exports the Pydantic v2 models used throughout the library.
    All models are immutable (frozen=True) and ignore fields they do not
    declare, so server-side additions never break deserialization.

Model Categories:
    - Pagination: PaginationMetadata, Page (flat wire envelope)
    - Players: Profile, GameModes, GameModeStats
    - Games: Game, Player, TeamMember
    - Leaderboards: LeaderboardEntry
"""

from .games import Game, GamesPage, Player, TeamMember
from .leaderboard import LeaderboardEntry, LeaderboardPage
from .pagination import Page, PaginationMetadata
from .profile import Avatars, GameModes, GameModeStats, Profile, RatingHistoryEntry, Social
from .search import SearchPage

__all__ = [
    "Avatars",
    "Game",
    "GameModeStats",
    "GameModes",
    "GamesPage",
    "LeaderboardEntry",
    "LeaderboardPage",
    "Page",
    "PaginationMetadata",
    "Player",
    "Profile",
    "RatingHistoryEntry",
    "SearchPage",
    "Social",
    "TeamMember",
]
