"""Synthetic paginated endpoint shared by the pagination tests."""

from __future__ import annotations

import asyncio
from typing import ClassVar

import pytest

from prelate.core.config import PROBE_PER_PAGE
from prelate.models.pagination import Page
from prelate.runtime.pagination import PageRequest


class IntPage(Page[int]):
    items_key: ClassVar[str] = "items"


class FakeServer:
    """Serves the integers 0..N-1 as pages.

    Args:
        total: Number of items on the server
        report_total: Include total_count in responses
        page_sizes: Explicit item count per page (overrides total)
        delays: Seconds to sleep before answering, per page number
        failures: Exception to raise, per page number
        max_per_page: Largest page the server serves, whatever was requested
    """

    def __init__(
        self,
        total: int = 0,
        *,
        report_total: bool = True,
        page_sizes: list[int] | None = None,
        delays: dict[int, float] | None = None,
        failures: dict[int, Exception] | None = None,
        max_per_page: int | None = None,
    ) -> None:
        self.total = sum(page_sizes) if page_sizes is not None else total
        self.report_total = report_total
        self.page_sizes = page_sizes
        self.delays = delays or {}
        self.failures = failures or {}
        self.max_per_page = max_per_page
        self.requests: list[PageRequest] = []
        self.completed: list[int] = []
        self.cancelled: list[int] = []
        self.in_flight = 0
        self.max_in_flight = 0

    @property
    def probes(self) -> list[PageRequest]:
        return [r for r in self.requests if r.per_page == PROBE_PER_PAGE]

    @property
    def pages_fetched(self) -> list[int]:
        return [r.page for r in self.requests if r.per_page != PROBE_PER_PAGE]

    def served_per_page(self, request: PageRequest) -> int:
        if self.max_per_page is None:
            return request.per_page
        return min(request.per_page, self.max_per_page)

    def _slice(self, request: PageRequest) -> tuple[int, int]:
        if self.page_sizes is None:
            per_page = self.served_per_page(request)
            offset = min((request.page - 1) * per_page, self.total)
            return offset, min(per_page, self.total - offset)
        sizes = self.page_sizes if request.per_page != PROBE_PER_PAGE else [1] * self.total
        offset = sum(sizes[: request.page - 1])
        count = sizes[request.page - 1] if request.page <= len(sizes) else 0
        return offset, count

    async def __call__(self, request: PageRequest) -> IntPage:
        self.requests.append(request)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            delay = self.delays.get(request.page, 0)
            if delay:
                await asyncio.sleep(delay)
            if request.page in self.failures:
                raise self.failures[request.page]
            offset, count = self._slice(request)
            self.completed.append(request.page)
            return IntPage.model_validate(
                {
                    "page": request.page,
                    "per_page": self.served_per_page(request),
                    "count": count,
                    "total_count": self.total if self.report_total else None,
                    "offset": offset,
                    "items": list(range(offset, offset + count)),
                }
            )
        except asyncio.CancelledError:
            self.cancelled.append(request.page)
            raise
        finally:
            self.in_flight -= 1


@pytest.fixture
def fake_server():
    """Factory for synthetic paginated endpoints."""
    return FakeServer


@pytest.fixture
def page_request():
    return PageRequest("https://aoe4world.com/api/v0/players/1/games?leaderboard=rm_1v1")


@pytest.fixture
def int_page():
    return IntPage
