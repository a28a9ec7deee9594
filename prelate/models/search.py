"""Player search results."""

from __future__ import annotations

from typing import ClassVar

from .pagination import Page
from .profile import Profile


class SearchPage(Page[Profile]):
    """One page of players matching a search query."""

    items_key: ClassVar[str] = "players"


__all__ = ["SearchPage"]
