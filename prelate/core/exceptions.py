"""Custom exception hierarchy."""

from __future__ import annotations


class PrelateError(Exception):
    """Base exception for all library errors."""

    pass


class FetchError(PrelateError):
    """A single page (or plain) request could not be turned into a response.

    Fetch errors terminate a paginated stream at the position of the page
    that failed. ``page`` is ``None`` for requests outside pagination.
    """

    def __init__(self, message: str, page: int | None = None, url: str | None = None) -> None:
        super().__init__(message)
        self.page = page
        self.url = url


class TransportError(FetchError):
    """The HTTP call could not be completed (DNS, TCP, TLS, timeout)."""

    pass


class HttpStatusError(FetchError):
    """The server answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        page: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message, page=page, url=url)
        self.status_code = status_code


class DecodeError(FetchError):
    """Response body is not JSON or does not match the expected schema."""

    pass


class ValidationError(PrelateError):
    """Caller input rejected before any network call was made."""

    pass


class StreamConsumedError(PrelateError):
    """An item stream was iterated a second time."""

    pass
