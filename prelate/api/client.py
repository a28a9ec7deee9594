"""High-level aoe4world client.

Architecture:
    AoE4WorldClient is the typed query facade over the pagination runtime.
    It validates caller input synchronously, builds the page-1 URL from a
    filter object and hands it to an ItemStream together with a
    PageFetcher for the endpoint's page envelope. Nothing touches the
    network until the returned stream is iterated.

    Module-level coroutines/generators (`profile`, `games`, `search`,
    `leaderboard`) open a client for the duration of one call.

Example:
    >>> async with AoE4WorldClient() as client:
    ...     async for game in client.games(10433860, leaderboard=Leaderboard.RM_1V1):
    ...         print(game.game_id, game.map)
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import aclosing
from datetime import datetime
from typing import TypeVar

import pydantic

from ..core.config import MIN_SEARCH_QUERY_LENGTH, ClientConfig
from ..core.enums import Leaderboard
from ..core.exceptions import DecodeError, ValidationError
from ..models import (
    Game,
    GamesPage,
    LeaderboardEntry,
    LeaderboardPage,
    Page,
    Player,
    Profile,
    SearchPage,
)
from ..runtime.pagination import ItemStream, PageFetcher, PageRequest
from ..utils.http import HTTPClient
from .filters import GamesFilter, LeaderboardFilter, SearchFilter, _QueryFilter

logger = logging.getLogger(__name__)

T = TypeVar("T")


class AoE4WorldClient:
    """Async client for the aoe4world API."""

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        http: HTTPClient | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        self._http = http or HTTPClient(
            base_url=self._config.base_url,
            timeout=self._config.timeout,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def profile(self, profile_id: int) -> Profile:
        """Get profile stats for a player.

        Raises:
            ValidationError: If profile_id is not a positive integer
            FetchError: If the request fails or the body is not a profile
        """
        _require_id(profile_id, "profile_id")
        path = f"/players/{profile_id}"
        data = await self._http.get(path)
        try:
            return Profile.model_validate(data)
        except pydantic.ValidationError as e:
            raise DecodeError(f"{path} did not return a player profile: {e}", url=path) from e

    async def player_profile(self, player: Player) -> Profile | None:
        """Fetch the profile of a game participant, if it has a profile ID."""
        if player.profile_id is None:
            return None
        return await self.profile(player.profile_id)

    def games(
        self,
        profile_id: int,
        *,
        leaderboard: Leaderboard | None = None,
        opponent_profile_id: int | None = None,
        since: datetime | None = None,
        limit: int | None = None,
    ) -> ItemStream[Game]:
        """Stream a player's games, most recent first.

        Args:
            profile_id: aoe4world ID of the player whose games are listed
            leaderboard: Only games counting towards this leaderboard
            opponent_profile_id: Only games against this opponent
            since: Only games started after this time
            limit: Maximum number of games (None = all)
        """
        _require_id(profile_id, "profile_id")
        if opponent_profile_id is not None:
            _require_id(opponent_profile_id, "opponent_profile_id")
        _require_limit(limit)
        filters = GamesFilter(
            leaderboard=leaderboard,
            opponent_profile_id=opponent_profile_id,
            since=since,
        )
        return self._stream(f"/players/{profile_id}/games", GamesPage, filters, limit)

    def search(
        self,
        query: str,
        *,
        exact: bool = False,
        limit: int | None = None,
    ) -> ItemStream[Profile]:
        """Stream players whose name matches ``query``.

        Raises:
            ValidationError: If the query is shorter than the API accepts
        """
        if len(query.strip()) < MIN_SEARCH_QUERY_LENGTH:
            raise ValidationError(
                f"search query must be at least {MIN_SEARCH_QUERY_LENGTH} characters, "
                f"got {query!r}"
            )
        _require_limit(limit)
        filters = SearchFilter(query=query.strip(), exact=exact)
        return self._stream("/players/search", SearchPage, filters, limit)

    def leaderboard(
        self,
        board: Leaderboard,
        *,
        query: str | None = None,
        profile_id: int | None = None,
        limit: int | None = None,
    ) -> ItemStream[LeaderboardEntry]:
        """Stream the standings of a leaderboard, highest rank first."""
        try:
            board = Leaderboard(board)
        except ValueError as e:
            raise ValidationError(f"unknown leaderboard {board!r}") from e
        if profile_id is not None:
            _require_id(profile_id, "profile_id")
        _require_limit(limit)
        filters = LeaderboardFilter(query=query, profile_id=profile_id)
        return self._stream(f"/leaderboards/{board.value}", LeaderboardPage, filters, limit)

    def _stream(
        self,
        path: str,
        envelope: type[Page[T]],
        filters: _QueryFilter,
        limit: int | None,
    ) -> ItemStream[T]:
        url = filters.apply(self._http.resolve(path))
        policy = self._config.pagination
        logger.debug("stream_created", extra={"url": str(url), "limit": limit})
        return ItemStream(
            PageRequest(url, per_page=policy.per_page),
            PageFetcher(self._http, envelope),
            policy=policy,
            limit=limit,
        )

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> AoE4WorldClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _require_id(value: int, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{name} must be a positive integer, got {value!r}")


def _require_limit(limit: int | None) -> None:
    if limit is not None and (isinstance(limit, bool) or limit <= 0):
        raise ValidationError(f"limit must be a positive integer, got {limit!r}")


async def profile(profile_id: int, *, config: ClientConfig | None = None) -> Profile:
    """Get profile stats for a player."""
    async with AoE4WorldClient(config) as client:
        return await client.profile(profile_id)


def games(
    profile_id: int,
    *,
    leaderboard: Leaderboard | None = None,
    opponent_profile_id: int | None = None,
    since: datetime | None = None,
    limit: int | None = None,
    config: ClientConfig | None = None,
) -> AsyncIterator[Game]:
    """Stream a player's games. See :meth:`AoE4WorldClient.games`."""
    client = AoE4WorldClient(config)
    stream = client.games(
        profile_id,
        leaderboard=leaderboard,
        opponent_profile_id=opponent_profile_id,
        since=since,
        limit=limit,
    )
    return _owned(client, stream)


def search(
    query: str,
    *,
    exact: bool = False,
    limit: int | None = None,
    config: ClientConfig | None = None,
) -> AsyncIterator[Profile]:
    """Search for players by name. See :meth:`AoE4WorldClient.search`."""
    client = AoE4WorldClient(config)
    return _owned(client, client.search(query, exact=exact, limit=limit))


def leaderboard(
    board: Leaderboard,
    *,
    query: str | None = None,
    profile_id: int | None = None,
    limit: int | None = None,
    config: ClientConfig | None = None,
) -> AsyncIterator[LeaderboardEntry]:
    """Stream leaderboard standings. See :meth:`AoE4WorldClient.leaderboard`."""
    client = AoE4WorldClient(config)
    return _owned(
        client, client.leaderboard(board, query=query, profile_id=profile_id, limit=limit)
    )


async def _owned(client: AoE4WorldClient, stream: ItemStream[T]) -> AsyncIterator[T]:
    # The client session lives exactly as long as the stream is consumed
    async with client:
        async with aclosing(aiter(stream)) as items:
            async for item in items:
                yield item
