"""Shared aoe4world client constants and policies.

This module centralizes the API base URL, pagination defaults and the
client-level configuration so the facade and the pagination runtime agree
on the same values.
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import ValidationError

API_BASE_URL = "https://aoe4world.com/api/v0"

# Query parameter names understood by paginated aoe4world endpoints
PAGE_SIZE_PARAM = "limit"
PAGE_NUMBER_PARAM = "page"

DEFAULT_PER_PAGE = 50
DEFAULT_CONCURRENCY = 8
DEFAULT_TIMEOUT = 30.0

# Page size used by the total-count probe request
PROBE_PER_PAGE = 1

# The search endpoint rejects shorter queries
MIN_SEARCH_QUERY_LENGTH = 3


@dataclass(frozen=True)
class PaginationPolicy:
    """How a paginated endpoint is walked.

    Attributes:
        per_page: Items requested per page
        concurrency: Maximum number of page fetches in flight
        probe: Issue a ``per_page=1`` probe to learn ``total_count`` when no
            item limit is given. When False, pages are fetched until a short
            page is returned.
        max_pages: Hard cap on the number of pages (None = no cap)
    """

    per_page: int = DEFAULT_PER_PAGE
    concurrency: int = DEFAULT_CONCURRENCY
    probe: bool = True
    max_pages: int | None = None

    def __post_init__(self) -> None:
        if self.per_page <= 0:
            raise ValidationError("per_page must be positive")
        if self.concurrency <= 0:
            raise ValidationError("concurrency must be positive")
        if self.max_pages is not None and self.max_pages < 0:
            raise ValidationError("max_pages cannot be negative")


@dataclass(frozen=True)
class ClientConfig:
    """Connection settings for :class:`prelate.api.AoE4WorldClient`."""

    base_url: str = API_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    pagination: PaginationPolicy = PaginationPolicy()

    def __post_init__(self) -> None:
        if not self.base_url.startswith("http"):
            raise ValidationError(f"base_url must be an http(s) URL, got {self.base_url!r}")
        if self.timeout <= 0:
            raise ValidationError("timeout must be positive")
