"""Query filters for paginated aoe4world endpoints.

Each filter is an immutable Pydantic model that knows how to encode itself
as query parameters on a page-1 URL. Unset fields add no parameter.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from yarl import URL

from ..core.enums import Leaderboard


class _QueryFilter(BaseModel):
    model_config = ConfigDict(frozen=True)

    def query_params(self) -> dict[str, str]:
        """Set fields as query parameter strings."""
        params: dict[str, str] = {}
        for name, value in self.model_dump(exclude_none=True).items():
            params[name] = _encode(value)
        return params

    def apply(self, url: URL) -> URL:
        """Return ``url`` with this filter's query parameters added."""
        params = self.query_params()
        return url.update_query(params) if params else url


def _encode(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


class GamesFilter(_QueryFilter):
    """Filters for games returned by the API."""

    # Filter by leaderboard category
    leaderboard: Leaderboard | None = None
    # Only games played against this profile
    opponent_profile_id: int | None = None
    # Only games started after this time
    since: datetime | None = None


class SearchFilter(_QueryFilter):
    """Filters for players returned by a search."""

    query: str
    # Only names matching the query exactly
    exact: bool | None = None


class LeaderboardFilter(_QueryFilter):
    """Filters for leaderboard entries."""

    # Player name search within the leaderboard
    query: str | None = None
    # Jump to the page holding this player
    profile_id: int | None = None


__all__ = ["GamesFilter", "LeaderboardFilter", "SearchFilter"]
