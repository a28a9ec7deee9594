"""Page planning logic for deciding how many pages a stream needs.

This module provides the PagePlanner class that turns a caller request
(optional item limit) and a pagination policy into a page budget, either
directly from the limit or by probing the server for ``total_count``.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from ...core.config import PROBE_PER_PAGE, PaginationPolicy
from ...core.exceptions import ValidationError
from ...models.pagination import Page
from .definitions import PagePlan, PageRequest, PlanStrategy, pages_needed
from .telemetry import log_page_plan

FetchPage = Callable[[PageRequest], Awaitable[Page]]


class PagePlanner:
    """Plans the page budget for a paginated stream.

    Strategies:
        - LIMIT: ``ceil(limit / per_page)`` pages, no network call. Used
          whenever the caller gives an item limit.
        - PROBE: one ``per_page=1`` request reads ``total_count``, then
          ``ceil(total_count / per_page)`` pages. Used when no limit is
          given and the policy allows probing.
        - UNBOUNDED: fetch until a short page. Used when the probe reports
          no ``total_count`` or probing is disabled.
    """

    def __init__(self, policy: PaginationPolicy | None = None) -> None:
        """Initialize page planner.

        Args:
            policy: Pagination policy (page size, concurrency, probing, cap)
        """
        self._policy = policy or PaginationPolicy()

    @property
    def policy(self) -> PaginationPolicy:
        return self._policy

    def plan_from_limit(self, limit: int) -> PagePlan:
        """Plan enough pages to cover ``limit`` items."""
        if limit <= 0:
            raise ValidationError(f"limit must be positive, got {limit}")
        return PagePlan(
            strategy=PlanStrategy.LIMIT,
            total_pages=self._cap(pages_needed(limit, self._policy.per_page)),
            item_limit=limit,
        )

    def plan_from_total(self, total_count: int | None) -> PagePlan:
        """Plan the pages holding ``total_count`` items.

        An unknown total falls back to an unbounded plan.
        """
        if total_count is None:
            return self.unbounded()
        return PagePlan(
            strategy=PlanStrategy.PROBE,
            total_pages=self._cap(pages_needed(total_count, self._policy.per_page)),
            total_count=total_count,
        )

    def unbounded(self) -> PagePlan:
        return PagePlan(strategy=PlanStrategy.UNBOUNDED, total_pages=self._cap(None))

    async def plan(
        self,
        request: PageRequest,
        fetch_page: FetchPage,
        *,
        limit: int | None = None,
    ) -> PagePlan:
        """Plan pages for a request.

        Args:
            request: Initial page-1 request
            fetch_page: Async function fetching one page, used for the probe
            limit: Maximum number of items the caller wants (None = all)

        Returns:
            Page plan

        Raises:
            ValidationError: If limit is not positive
            FetchError: If the probe request fails
        """
        if limit is not None:
            plan = self.plan_from_limit(limit)
        elif self._policy.probe:
            probe = await fetch_page(request.with_page(1).with_per_page(PROBE_PER_PAGE))
            plan = self.plan_from_total(probe.pagination.total_count)
        else:
            plan = self.unbounded()

        log_page_plan(
            url=str(request.url),
            plan=plan,
            per_page=self._policy.per_page,
            concurrency=self._policy.concurrency,
        )
        return plan

    def _cap(self, total_pages: int | None) -> int | None:
        max_pages = self._policy.max_pages
        if max_pages is None:
            return total_pages
        if total_pages is None:
            return max_pages
        return min(total_pages, max_pages)
