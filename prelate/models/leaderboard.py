"""Leaderboard standings."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import Leaderboard, League
from .pagination import Page
from .profile import Avatars, Social


class LeaderboardEntry(BaseModel):
    """An entry in a leaderboard: profile subset plus ranking information."""

    name: str
    profile_id: int
    steam_id: str | None = None
    site_url: str | None = None
    avatars: Avatars | None = None
    country: str | None = None
    social: Social | None = None
    twitch_url: str | None = None
    twitch_is_live: bool | None = None
    rating: int | None = None
    max_rating: int | None = None
    max_rating_7d: int | None = None
    max_rating_1m: int | None = None
    rank: int | None = None
    rank_level: League | None = None
    streak: int | None = None
    games_count: int | None = None
    wins_count: int | None = None
    losses_count: int | None = None
    drops_count: int | None = None
    last_game_at: datetime | None = None
    win_rate: float | None = Field(None, ge=0, le=100)
    last_rating_change: int | None = None

    model_config = ConfigDict(frozen=True)


class LeaderboardPage(Page[LeaderboardEntry]):
    """One page of a leaderboard, with the leaderboard's description."""

    items_key: ClassVar[str] = "players"

    key: Leaderboard | None = None
    name: str | None = None
    short_name: str | None = None
    site_url: str | None = None
    query: str | None = None


__all__ = ["LeaderboardEntry", "LeaderboardPage"]
