"""Utilities for rendering crawled articles in the CLI."""

from __future__ import annotations

import re

from wikipull.scraper.models import Article, EnrichedArticle

_UNSAFE_CHARS = re.compile(r'[<>:"/\\|?*]')
_WHITESPACE = re.compile(r"\s+")
MAX_FILENAME_LENGTH = 100


def safe_filename(title: str) -> str:
    """Turn an article title into a file name stem safe on every filesystem.

    Example:
        >>> safe_filename('AK-47 / "Kalash"')
        'AK-47____Kalash_'
    """
    name = _UNSAFE_CHARS.sub("_", title)
    name = _WHITESPACE.sub("_", name)
    return name[:MAX_FILENAME_LENGTH]


def render_article(article: EnrichedArticle) -> str:
    """Render *article* as the plain-text body of an export file."""
    return (
        f"Title: {article.title}\n"
        f"URL: {article.url}\n"
        f"ID: {article.id}\n"
        f"Image: {article.img or 'None'}\n"
        "\n"
        "Content:\n"
        f"{article.article or 'No content available'}"
    )


def render_stub(article: Article) -> str:
    """One-line summary used by the listing and search commands."""
    return f"  {article.id}  {article.title!r}  {article.url}"
