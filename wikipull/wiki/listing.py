"""Cursor-driven pagination over the MediaWiki ``list=allpages`` API.

One call to :meth:`ListingPager.fetch_batch` reads one page of results and
returns the stubs on it together with the ``apcontinue`` cursor for the next
page.  :meth:`ListingPager.list_all` chains those calls until the API stops
returning a cursor or the caller's cap is reached.
"""

from __future__ import annotations

from typing import Any, Iterator, List

import httpx

from wikipull.config import Settings
from wikipull.errors import ValidationError
from wikipull.scraper.fetcher import download_json
from wikipull.scraper.models import Article, Batch
from wikipull.site import SiteIdentity


def check_cap(max_items: int | None) -> None:
    """Reject a negative *max_items*; ``None`` means no cap."""
    if max_items is not None and max_items < 0:
        raise ValidationError(f"max_items must be >= 0, got {max_items}")


def _parse_page(item: Any, site: SiteIdentity) -> Article | None:
    if not isinstance(item, dict):
        return None
    page_id = item.get("pageid")
    title = item.get("title")
    if page_id is None or not isinstance(title, str) or not title:
        return None
    return Article(id=str(page_id), title=title, url=site.article_url(title))


class ListingPager:
    """Pages through every article of one wiki."""

    def __init__(
        self,
        site: SiteIdentity,
        client: httpx.Client | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._site = site
        self._client = client
        self._settings = settings

    def _params(self, cursor: str | None) -> dict[str, str]:
        params = {
            "action": "query",
            "list": "allpages",
            "aplimit": "max",
            "format": "json",
        }
        if cursor:
            params["apcontinue"] = cursor
        return params

    def fetch_batch(self, cursor: str | None = None) -> Batch:
        """Fetch one page of the listing, starting at *cursor*.

        A response that is not JSON or lacks ``query.allpages`` is treated as
        an empty, final page rather than an error.

        Raises:
            FetchError: The listing endpoint returned a non-2xx status.
            TransportError: The request failed before a response arrived.
        """
        url = self._site.api_url
        try:
            data = download_json(
                url, self._params(cursor), client=self._client, settings=self._settings
            )
        except ValueError:
            print(f"[listing] non-JSON response from {url}; treating as end of listing.")
            return Batch()

        query = data.get("query") if isinstance(data, dict) else None
        pages = query.get("allpages") if isinstance(query, dict) else None
        if not isinstance(pages, list):
            print(f"[listing] no query.allpages in response from {url}; treating as end of listing.")
            return Batch()

        articles = [a for a in (_parse_page(item, self._site) for item in pages) if a]

        next_cursor = None
        cont = data.get("continue")
        if isinstance(cont, dict) and isinstance(cont.get("apcontinue"), str):
            next_cursor = cont["apcontinue"] or None

        return Batch(articles=articles, next=next_cursor)

    def iter_batches(self) -> Iterator[Batch]:
        """Yield batches in API order, following cursors until the last page.

        A cursor already seen earlier in this walk ends it, so a misbehaving
        API cannot make the walk loop forever.
        """
        seen: set[str] = set()
        cursor: str | None = None
        while True:
            batch = self.fetch_batch(cursor)
            yield batch

            cursor = batch.next
            if cursor is None:
                return
            if cursor in seen:
                print(f"[listing] cursor {cursor!r} repeated; stopping pagination.")
                return
            seen.add(cursor)

    def list_all(self, max_items: int | None = None) -> List[Article]:
        """Return every stub on the wiki, or the first *max_items* of them.

        Order is exactly the order the API returned; nothing is re-sorted.
        """
        check_cap(max_items)
        articles: List[Article] = []
        if max_items == 0:
            return articles

        for batch in self.iter_batches():
            articles.extend(batch.articles)
            if max_items is not None and len(articles) >= max_items:
                return articles[:max_items]
        return articles
