"""Concurrent page stream engine.

This module provides the ItemStream class that walks a paginated endpoint
with a bounded window of in-flight page fetches and exposes the pages'
items as one lazy sequence in page order.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import aclosing
from time import perf_counter
from typing import Generic, TypeVar

from ...core.config import PaginationPolicy
from ...core.exceptions import FetchError, StreamConsumedError
from ...models.pagination import Page
from .definitions import (
    ItemResult,
    PagePlan,
    PageRequest,
    StreamState,
    StreamStats,
    pages_needed,
)
from .planners import PagePlanner
from .telemetry import (
    log_page_completed,
    log_page_error,
    log_stream_complete,
)

T = TypeVar("T")

FetchPage = Callable[[PageRequest], Awaitable[Page]]
PageOutcome = Page | FetchError


class ItemStream(Generic[T]):
    """Lazy, ordered, single-pass sequence of the items of a paginated query.

    Pages 1..N are fetched as tasks, at most ``policy.concurrency`` in flight
    at once. Whenever a fetch completes the next page is issued. Completed
    pages wait in a reorder buffer until every earlier page was emitted, so
    items always come out in page order and, within a page, in server order.

    The stream stops scheduling pages when the planned page count is
    reached, when the last page comes back (``count + offset >= total_count``,
    or fewer items than the server's ``per_page`` when no total is reported),
    when ``limit`` items were emitted, or when a page fails. If the server
    serves smaller pages than requested, the page budget grows to match.
    A failing page becomes exactly one error at its position, after all
    items of earlier pages.

    Two ways to consume it:

        async for game in stream:  # raises the FetchError in place
            ...

        async for result in stream.results():  # never raises
            if not result.ok:
                ...
    """

    def __init__(
        self,
        request: PageRequest,
        fetch_page: FetchPage,
        *,
        policy: PaginationPolicy | None = None,
        limit: int | None = None,
    ) -> None:
        """Initialize item stream.

        Args:
            request: Page-1 request carrying the query URL
            fetch_page: Async function that fetches and decodes one page
            policy: Pagination policy (defaults to PaginationPolicy())
            limit: Maximum number of items to emit (None = all)
        """
        self._policy = policy or PaginationPolicy()
        self._request = request.with_page(1).with_per_page(self._policy.per_page)
        self._fetch_page = fetch_page
        self._limit = limit
        self._planner = PagePlanner(self._policy)
        self._plan: PagePlan | None = None
        self._state = StreamState.NOT_STARTED
        self._stats = StreamStats()
        self._consumed = False

    @property
    def state(self) -> StreamState:
        return self._state

    @property
    def plan(self) -> PagePlan | None:
        """Page plan, available once planning finished."""
        return self._plan

    @property
    def stats(self) -> StreamStats:
        return self._stats

    def __aiter__(self) -> AsyncIterator[T]:
        self._claim()
        return self._items(self._run())

    def results(self) -> AsyncIterator[ItemResult[T]]:
        """Iterate over item results; a failure is the last element."""
        self._claim()
        return self._run()

    async def collect(self) -> list[T]:
        """Consume the whole stream into a list, raising on failure."""
        return [item async for item in self]

    def _claim(self) -> None:
        if self._consumed:
            raise StreamConsumedError(
                "item stream has already been consumed; build a new one to iterate again"
            )
        self._consumed = True

    async def _items(self, results: AsyncIterator[ItemResult[T]]) -> AsyncIterator[T]:
        async with aclosing(results) as results:
            async for result in results:
                yield result.unwrap()

    async def _probe(self, request: PageRequest) -> Page:
        self._stats.probe_requests += 1
        return await self._fetch_page(request)

    async def _fetch(self, request: PageRequest) -> PageOutcome:
        start = perf_counter()
        try:
            page = await self._fetch_page(request)
        except FetchError as e:
            if e.page is None:
                e.page = request.page
            log_page_error(
                url=str(self._request.url),
                page=request.page,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return e
        log_page_completed(
            url=str(self._request.url),
            page=request.page,
            items=len(page.items),
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return page

    def _is_last(self, page: Page) -> bool:
        meta = page.pagination
        if meta.total_count is not None:
            return meta.is_last
        return len(page.items) < meta.per_page

    def _pages_implied(self, page: Page) -> int | None:
        """Page count implied by the page size the server actually served.

        Larger than the plan when the server caps ``per_page`` below the
        requested size.
        """
        meta = page.pagination
        counts = [n for n in (meta.total_count, self._limit) if n is not None]
        if not counts:
            return None
        pages = pages_needed(min(counts), meta.per_page)
        if self._policy.max_pages is not None:
            pages = min(pages, self._policy.max_pages)
        return pages

    async def _run(self) -> AsyncIterator[ItemResult[T]]:
        url = str(self._request.url)
        failed = False

        self._state = StreamState.PLANNING
        try:
            self._plan = await self._planner.plan(self._request, self._probe, limit=self._limit)
        except FetchError as e:
            if e.page is None:
                e.page = 1
            log_page_error(url=url, page=1, error_type=type(e).__name__, error_message=str(e))
            self._state = StreamState.DONE
            log_stream_complete(url=url, stats=self._stats, failed=True)
            yield ItemResult(error=e)
            return

        plan = self._plan
        last_page = plan.total_pages  # moved as pages report where the data ends
        remaining = plan.item_limit
        in_flight: dict[int, asyncio.Task[PageOutcome]] = {}
        ready: dict[int, PageOutcome] = {}
        next_page = 1
        due = 1
        found_last = False
        # Without a page count there is nothing to prefetch safely
        window = self._policy.concurrency if plan.is_bounded else 1

        self._state = StreamState.FETCHING
        try:
            while last_page is None or due <= last_page:
                while len(in_flight) < window and (last_page is None or next_page <= last_page):
                    request = self._request.with_page(next_page)
                    in_flight[next_page] = asyncio.create_task(self._fetch(request))
                    self._stats.pages_requested += 1
                    self._stats.requested_pages.append(next_page)
                    next_page += 1
                self._stats.max_in_flight = max(self._stats.max_in_flight, len(in_flight))
                if last_page is not None and next_page > last_page:
                    self._state = StreamState.DRAINING

                if due not in ready:
                    if not in_flight:
                        break
                    await asyncio.wait(in_flight.values(), return_when=asyncio.FIRST_COMPLETED)
                    for number in [n for n, task in in_flight.items() if task.done()]:
                        outcome = in_flight.pop(number).result()
                        ready[number] = outcome
                        if not isinstance(outcome, Page):
                            continue
                        if self._is_last(outcome):
                            if last_page is None or number < last_page:
                                last_page = number
                            found_last = True
                        elif last_page is not None and not found_last:
                            implied = self._pages_implied(outcome)
                            if implied is not None and implied > last_page:
                                last_page = implied
                                self._state = StreamState.FETCHING
                    if last_page is not None:
                        self._discard_after(last_page, in_flight, ready)
                    continue

                outcome = ready.pop(due)
                if isinstance(outcome, FetchError):
                    failed = True
                    yield ItemResult(error=outcome)
                    return

                for item in outcome.items:
                    if remaining is not None and remaining <= 0:
                        break
                    self._stats.items_emitted += 1
                    if remaining is not None:
                        remaining -= 1
                    yield ItemResult(item=item)
                self._stats.pages_emitted += 1
                due += 1

                if remaining is not None and remaining <= 0:
                    return
        finally:
            await self._cancel(in_flight)
            self._state = StreamState.DONE
            log_stream_complete(url=url, stats=self._stats, failed=failed)

    @staticmethod
    def _discard_after(
        last_page: int,
        in_flight: dict[int, asyncio.Task[PageOutcome]],
        ready: dict[int, PageOutcome],
    ) -> None:
        for number in [n for n in in_flight if n > last_page]:
            in_flight.pop(number).cancel()
        for number in [n for n in ready if n > last_page]:
            del ready[number]

    @staticmethod
    async def _cancel(in_flight: dict[int, asyncio.Task[PageOutcome]]) -> None:
        tasks = list(in_flight.values())
        in_flight.clear()
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
