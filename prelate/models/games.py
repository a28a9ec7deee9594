"""Games played by a player."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from ..core.enums import Civilization, GameKind, GameResult, Leaderboard, Map
from .pagination import Page


class Player(BaseModel):
    """A player in a game."""

    name: str | None = None
    profile_id: int | None = None
    result: GameResult | None = None
    civilization: Civilization | None = None
    civilization_randomized: bool | None = None
    rating: int | None = None
    rating_diff: int | None = None
    mmr: int | None = None
    mmr_diff: int | None = None
    input_type: str | None = None

    model_config = ConfigDict(frozen=True)


class TeamMember(BaseModel):
    """Wrapper around a player who is a member of a team."""

    player: Player | None = None

    model_config = ConfigDict(frozen=True)


class Game(BaseModel):
    """Information on a specific game."""

    game_id: int | None = None
    started_at: datetime | None = None
    updated_at: datetime | None = None
    duration: int | None = Field(None, ge=0, description="Game length in seconds")
    map: Map | None = None
    kind: GameKind | None = None
    leaderboard: Leaderboard | None = None
    season: int | None = None
    server: str | None = None
    patch: int | None = None
    average_rating: float | None = None
    # True while the match is being played
    ongoing: bool | None = None
    # True once finished but before results are decided
    just_finished: bool | None = None
    teams: list[list[TeamMember]] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def players(self) -> list[Player]:
        """All players of all teams, in team order."""
        return [member.player for team in self.teams for member in team if member.player]


class GamesPage(Page[Game]):
    """One page of a player's games."""

    items_key: ClassVar[str] = "games"


__all__ = ["Game", "GamesPage", "Player", "TeamMember"]
