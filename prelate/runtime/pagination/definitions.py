"""Pagination request, plan and result structures.

This module defines the values passed between the planner, the fetcher and
the page stream engine. Requests are immutable: the request for the next
page is derived by value, so concurrent fetches never share mutable state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Generic, TypeVar

from yarl import URL

from ...core.config import DEFAULT_PER_PAGE
from ...core.exceptions import FetchError, ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """Request for page ``page`` of a query.

    Attributes:
        url: Fully-qualified query URL with all caller filters applied
        page: 1-indexed page number
        per_page: Items requested per page
    """

    url: URL
    page: int = 1
    per_page: int = DEFAULT_PER_PAGE

    def __post_init__(self) -> None:
        if not isinstance(self.url, URL):
            object.__setattr__(self, "url", URL(str(self.url)))
        if self.page < 1:
            raise ValidationError(f"page must be >= 1, got {self.page}")
        if self.per_page < 1:
            raise ValidationError(f"per_page must be >= 1, got {self.per_page}")

    def next_request(self) -> PageRequest:
        """Request for the following page."""
        return replace(self, page=self.page + 1)

    def with_page(self, page: int) -> PageRequest:
        return replace(self, page=page)

    def with_per_page(self, per_page: int) -> PageRequest:
        return replace(self, per_page=per_page)


class PlanStrategy(str, Enum):
    """How the total number of pages was decided."""

    PROBE = "probe"  # total_count read from a per_page=1 request
    LIMIT = "limit"  # derived from the caller's item limit
    UNBOUNDED = "unbounded"  # fetch until a short page

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PagePlan:
    """Page budget for one stream.

    Attributes:
        strategy: Strategy that produced the plan
        total_pages: Pages to fetch (None = until a short page)
        item_limit: Maximum number of items to emit (None = all)
        total_count: Items reported by the probe, if any
    """

    strategy: PlanStrategy
    total_pages: int | None
    item_limit: int | None = None
    total_count: int | None = None

    @property
    def is_bounded(self) -> bool:
        return self.total_pages is not None

    def covers(self, page: int) -> bool:
        """True if ``page`` is part of the plan."""
        return self.total_pages is None or page <= self.total_pages


def pages_needed(items: int, per_page: int) -> int:
    """Ceiling division of an item count into pages."""
    if items <= 0:
        return 0
    return math.ceil(items / per_page)


class StreamState(str, Enum):
    """Lifecycle of a page stream."""

    NOT_STARTED = "not_started"
    PLANNING = "planning"
    FETCHING = "fetching"
    DRAINING = "draining"
    DONE = "done"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ItemResult(Generic[T]):
    """One element of a stream: either an item or the terminal error."""

    item: T | None = None
    error: FetchError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the item, raising the error if this is an error result."""
        if self.error is not None:
            raise self.error
        return self.item  # type: ignore[return-value]


@dataclass
class StreamStats:
    """Counters collected while a stream runs.

    Attributes:
        pages_requested: Page fetches issued (probe excluded)
        pages_emitted: Pages whose items reached the consumer
        items_emitted: Items yielded to the consumer
        probe_requests: Probe requests issued by the planner
        max_in_flight: Largest number of concurrent page fetches observed
        requested_pages: Page numbers in the order they were issued
    """

    pages_requested: int = 0
    pages_emitted: int = 0
    items_emitted: int = 0
    probe_requests: int = 0
    max_in_flight: int = 0
    requested_pages: list[int] = field(default_factory=list)
