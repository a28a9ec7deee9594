"""Runtime orchestration components."""

from .pagination import ItemResult, ItemStream, PageFetcher, PagePlanner, PageRequest

__all__ = [
    "ItemResult",
    "ItemStream",
    "PageFetcher",
    "PagePlanner",
    "PageRequest",
]
