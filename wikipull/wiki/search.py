"""Keyword search through the wiki's HTML search page."""

from __future__ import annotations

from typing import List

import httpx

from wikipull.config import Settings
from wikipull.errors import EmptyResultError
from wikipull.scraper.extractor import extract_search_results
from wikipull.scraper.fetcher import download
from wikipull.scraper.models import Article
from wikipull.site import SiteIdentity


class SearchExtractor:
    """Turns a search query into at most *limit* article stubs.

    *limit* bounds how many result elements are inspected, not how many stubs
    are kept: results without a page id use up a slot and are dropped.
    """

    def __init__(
        self,
        site: SiteIdentity,
        limit: int = 1,
        client: httpx.Client | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._site = site
        self.limit = int(limit)
        self._client = client
        self._settings = settings

    def fetch_search_page(self, query: str) -> str:
        """Return the raw markup of the search results page for *query*."""
        return download(
            self._site.search_url(query), client=self._client, settings=self._settings
        )

    def search(self, query: str) -> List[Article]:
        """Return the stubs among the first ``limit`` results for *query*.

        Raises:
            EmptyResultError: No inspected result carried a page id.
            FetchError: The search page returned a non-2xx status.
            TransportError: The request failed before a response arrived.
        """
        html = self.fetch_search_page(query)
        articles = extract_search_results(html, self.limit, base_url=self._site.base_url)
        if not articles:
            raise EmptyResultError(f"No articles found for {query!r}")
        return articles
