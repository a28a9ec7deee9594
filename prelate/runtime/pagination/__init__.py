"""Pagination layer: paginated list endpoints as one lazy item stream.

Architecture:
    The pagination layer consists of:
    - definitions.py: Request, plan and result structures (PageRequest, PagePlan)
    - fetcher.py: Single page fetch and decode (PageFetcher)
    - planners.py: Page budget planning (PagePlanner)
    - executors.py: Concurrent, order-preserving page stream (ItemStream)
    - telemetry.py: Structured logging

Usage:
    Build a page-1 PageRequest from the query URL, wrap the endpoint's page
    envelope in a PageFetcher and iterate an ItemStream over both.
"""

from __future__ import annotations

from .definitions import (
    ItemResult,
    PagePlan,
    PageRequest,
    PlanStrategy,
    StreamState,
    StreamStats,
    pages_needed,
)
from .executors import ItemStream
from .fetcher import PageFetcher, page_url
from .planners import PagePlanner

__all__ = [
    "ItemResult",
    "ItemStream",
    "PageFetcher",
    "PagePlan",
    "PagePlanner",
    "PageRequest",
    "PlanStrategy",
    "StreamState",
    "StreamStats",
    "page_url",
    "pages_needed",
]
