"""Crawl orchestration: listing, enrichment and search over one wiki.

``WikiaPull`` composes the components of the pipeline:

    ListingPager → stubs → ArticleEnricher → enriched articles

and offers three ways to consume the listing:

    list_stubs   stubs only, no article downloads
    collect_all  every stub enriched, returned as one list
    stream       a generator enriching and yielding one stub at a time

Everything runs sequentially; at most one request is in flight.
"""

from __future__ import annotations

from typing import Iterator, List

import httpx

from wikipull.config import Settings, settings as default_settings
from wikipull.scraper.models import Article, EnrichedArticle
from wikipull.site import SiteIdentity
from wikipull.wiki.enricher import ArticleEnricher
from wikipull.wiki.listing import ListingPager, check_cap
from wikipull.wiki.search import SearchExtractor
from wikipull.wiki.stats import SiteStats


class WikiaPull:
    """Crawler bound to the wiki with short-name *fandom*.

    Args:
        fandom: Site short-name, e.g. ``"starwars"`` for starwars.fandom.com.
        limit: How many search result elements :meth:`search_results`
            inspects.
        client: Optional shared ``httpx.Client``.  The caller owns it; when
            omitted each request opens its own client.
        settings: Overrides the module-level settings.
    """

    def __init__(
        self,
        fandom: str,
        limit: int = 1,
        *,
        client: httpx.Client | None = None,
        settings: Settings | None = None,
    ) -> None:
        cfg = settings or default_settings
        self.site = SiteIdentity.from_name(fandom, cfg)
        self.pager = ListingPager(self.site, client=client, settings=cfg)
        self.searcher = SearchExtractor(self.site, limit=limit, client=client, settings=cfg)
        self.enricher = ArticleEnricher(client=client, settings=cfg)
        self.stats = SiteStats(self.site, client=client, settings=cfg)

    @property
    def wiki_url(self) -> str:
        return self.site.base_url

    @property
    def limit(self) -> int:
        return self.searcher.limit

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list_stubs(self, max_items: int | None = None) -> List[Article]:
        """Return listing stubs without downloading any article page."""
        return self.pager.list_all(max_items)

    def collect_all(self, max_items: int | None = None) -> List[EnrichedArticle]:
        """Enrich every listed stub and return them all at once.

        The first failing article aborts the whole call; nothing partial is
        returned.
        """
        return [self.enricher.enrich(stub) for stub in self.list_stubs(max_items)]

    def stream(self, max_items: int | None = None) -> Iterator[EnrichedArticle]:
        """Yield enriched articles one at a time, in listing order.

        Each call starts a fresh walk.  Listing pages are fetched one batch
        at a time and each stub is enriched just before it is yielded, so
        nothing past the cap is ever requested.  A failure is raised out of
        the generator at the item that failed; items already yielded stay
        valid.  Stop iterating (or ``close()`` the generator) to cancel.
        """
        check_cap(max_items)
        if max_items == 0:
            return

        produced = 0
        for batch in self.pager.iter_batches():
            for stub in batch.articles:
                yield self.enricher.enrich(stub)
                produced += 1
                if max_items is not None and produced >= max_items:
                    return

    # ------------------------------------------------------------------
    # Single articles and search
    # ------------------------------------------------------------------

    def get_article(self, article: Article) -> EnrichedArticle:
        return self.enricher.enrich(article)

    def fetch(self, query: str) -> str:
        """Return the raw search results page for *query*."""
        return self.searcher.fetch_search_page(query)

    def search_results(self, query: str) -> List[Article]:
        return self.searcher.search(query)

    def search_articles(self, query: str) -> List[EnrichedArticle]:
        """Search for *query* and enrich every result, stopping at the first failure."""
        return [self.enricher.enrich(stub) for stub in self.search_results(query)]

    # ------------------------------------------------------------------
    # Statistics
    # ------------------------------------------------------------------

    def article_count(self) -> int:
        return self.stats.article_count()
