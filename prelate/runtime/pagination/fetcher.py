"""Single page fetch: one request in, one decoded page envelope out."""

from __future__ import annotations

from typing import Generic, TypeVar

import pydantic
from yarl import URL

from ...core.config import PAGE_NUMBER_PARAM, PAGE_SIZE_PARAM
from ...core.exceptions import DecodeError
from ...models.pagination import Page
from ...utils.http import HTTPClient
from .definitions import PageRequest


PageT = TypeVar("PageT", bound=Page)


def page_url(request: PageRequest) -> URL:
    """URL of ``request`` with the page size and page number set.

    Existing ``limit``/``page`` parameters are overwritten; every other
    query parameter is preserved.
    """
    return request.url.update_query(
        {PAGE_SIZE_PARAM: str(request.per_page), PAGE_NUMBER_PARAM: str(request.page)}
    )


class PageFetcher(Generic[PageT]):
    """Fetches and decodes one page of a paginated endpoint.

    Exactly one GET is issued per call. There is no retry and no caching:
    transport and status failures propagate from :class:`HTTPClient`, and a
    body that does not match ``envelope`` raises :class:`DecodeError`.
    """

    def __init__(self, http: HTTPClient, envelope: type[PageT]) -> None:
        self._http = http
        self._envelope = envelope

    @property
    def envelope(self) -> type[PageT]:
        return self._envelope

    async def fetch(self, request: PageRequest) -> PageT:
        url = page_url(request)
        data = await self._http.get(url, page=request.page)
        try:
            return self._envelope.model_validate(data)
        except pydantic.ValidationError as e:
            raise DecodeError(
                f"page {request.page} of {request.url} does not match "
                f"{self._envelope.__name__}: {e.error_count()} validation error(s)",
                page=request.page,
                url=str(url),
            ) from e

    async def __call__(self, request: PageRequest) -> PageT:
        return await self.fetch(request)
