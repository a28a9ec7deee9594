"""Structured logging for pagination.

This module provides telemetry hooks for the page stream, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

from .definitions import PagePlan, StreamStats

logger = logging.getLogger(__name__)


def log_page_plan(*, url: str, plan: PagePlan, per_page: int, concurrency: int) -> None:
    """Log page plan creation.

    Args:
        url: Query URL of the stream
        plan: The decided page plan
        per_page: Items per page
        concurrency: Maximum pages in flight
    """
    logger.info(
        "page_plan_created",
        extra={
            "url": url,
            "strategy": plan.strategy.value,
            "total_pages": plan.total_pages,
            "total_count": plan.total_count,
            "item_limit": plan.item_limit,
            "per_page": per_page,
            "concurrency": concurrency,
        },
    )


def log_page_completed(*, url: str, page: int, items: int, latency_ms: float) -> None:
    """Log completion of a single page fetch."""
    logger.debug(
        "page_completed",
        extra={"url": url, "page": page, "items": items, "latency_ms": latency_ms},
    )


def log_page_error(*, url: str, page: int, error_type: str, error_message: str) -> None:
    """Log a failed page fetch.

    Args:
        url: Query URL of the stream
        page: Page number that failed
        error_type: Type of error (e.g., "HttpStatusError", "DecodeError")
        error_message: Error message
    """
    logger.error(
        "page_error",
        extra={
            "url": url,
            "page": page,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_stream_complete(*, url: str, stats: StreamStats, failed: bool) -> None:
    logger.info(
        "page_stream_complete",
        extra={
            "url": url,
            "pages_requested": stats.pages_requested,
            "pages_emitted": stats.pages_emitted,
            "items_emitted": stats.items_emitted,
            "probe_requests": stats.probe_requests,
            "max_in_flight": stats.max_in_flight,
            "failed": failed,
        },
    )
