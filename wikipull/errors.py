"""Exception types raised by the crawl pipeline.

Every error surfaces to the immediate caller of the failing operation;
nothing in the pipeline retries or aggregates failures.
"""

from __future__ import annotations


class WikiPullError(Exception):
    """Base class for all wikipull errors."""


class ValidationError(WikiPullError):
    """Raised before any network call when an input is unusable."""


class FetchError(WikiPullError):
    """The server answered with a non-success HTTP status."""

    def __init__(self, url: str, status_code: int) -> None:
        self.url = url
        self.status_code = status_code
        super().__init__(
            f"Failed to download page {url}: HTTP error! status: {status_code}"
        )


class TransportError(WikiPullError):
    """The request never produced a response (network, DNS, timeout)."""

    def __init__(self, url: str, cause: str) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Failed to download page {url}: {cause}")


class EmptyResultError(WikiPullError):
    """A call succeeded but produced nothing usable."""
