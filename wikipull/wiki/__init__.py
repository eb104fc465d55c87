"""Wiki crawl components and the ``WikiaPull`` facade that composes them."""

from wikipull.wiki.enricher import ArticleEnricher
from wikipull.wiki.listing import ListingPager
from wikipull.wiki.orchestrator import WikiaPull
from wikipull.wiki.search import SearchExtractor
from wikipull.wiki.stats import SiteStats

__all__ = ["WikiaPull", "ListingPager", "SearchExtractor", "ArticleEnricher", "SiteStats"]
