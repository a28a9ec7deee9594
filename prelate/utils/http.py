"""HTTP client helper."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp
from yarl import URL

from ..core.config import DEFAULT_TIMEOUT
from ..core.exceptions import DecodeError, HttpStatusError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Accept": "application/json", "User-Agent": "prelate"}


class HTTPClient:
    """Async HTTP client wrapper.

    Failures are reported with the library's error taxonomy: connection
    problems raise :class:`TransportError`, non-2xx answers raise
    :class:`HttpStatusError` and bodies that are not JSON raise
    :class:`DecodeError`.
    """

    def __init__(self, base_url: str | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=DEFAULT_HEADERS)
        return self._session

    def resolve(self, url: str | URL) -> URL:
        """Combine a relative path with base_url."""
        url = str(url)
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url.rstrip('/')}/{url.lstrip('/')}"
        return URL(url, encoded=False)

    async def get(
        self,
        url: str | URL,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        *,
        page: int | None = None,
    ) -> Any:
        """GET request returning the decoded JSON body.

        ``page`` is only used to annotate raised errors.
        """
        target = self.resolve(url)
        if params:
            target = target.update_query({k: str(v) for k, v in params.items()})
        logger.debug("http_get", extra={"url": str(target), "page": page})

        try:
            async with self.session.get(target, headers=headers) as response:
                if not 200 <= response.status < 300:
                    raise HttpStatusError(
                        f"GET {target} returned HTTP {response.status}",
                        status_code=response.status,
                        page=page,
                        url=str(target),
                    )
                try:
                    return await response.json(content_type=None)
                except ValueError as e:
                    raise DecodeError(
                        f"GET {target} returned a body that is not JSON: {e}",
                        page=page,
                        url=str(target),
                    ) from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(
                f"GET {target} failed: {type(e).__name__}: {e}",
                page=page,
                url=str(target),
            ) from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
