"""Scraper package: download primitive, record types and markup extraction."""

from wikipull.scraper.extractor import clean_text, extract_article, extract_search_results
from wikipull.scraper.fetcher import build_client, download, download_json
from wikipull.scraper.models import Article, Batch, EnrichedArticle

__all__ = [
    "download",
    "download_json",
    "build_client",
    "extract_article",
    "extract_search_results",
    "clean_text",
    "Article",
    "EnrichedArticle",
    "Batch",
]
