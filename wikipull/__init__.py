"""wikipull: crawl Fandom-style wikis into plain-text article records."""

from wikipull.errors import (
    EmptyResultError,
    FetchError,
    TransportError,
    ValidationError,
    WikiPullError,
)
from wikipull.scraper.models import Article, EnrichedArticle
from wikipull.wiki import WikiaPull

__all__ = [
    "WikiaPull",
    "Article",
    "EnrichedArticle",
    "WikiPullError",
    "ValidationError",
    "FetchError",
    "TransportError",
    "EmptyResultError",
]
