"""Markup extraction: search results, lead images and cleaned body text."""

from __future__ import annotations

import re
from typing import List
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Tag

from wikipull.scraper.models import Article

# ---------------------------------------------------------------------------
# Selectors
# ---------------------------------------------------------------------------
SEARCH_RESULT_SELECTOR = ".unified-search__result__title"
THUMBNAIL_SELECTOR = ".pi-image-thumbnail"
IMAGE_LINK_SELECTOR = ".image"
# Infobox sidebars, pull-quotes and galleries never count as body text.
REMOVABLE_SELECTORS = ("aside", ".cquote", "gallery")

_NOISE_PATTERN = re.compile(r"(\r\n|\n|\r)|(\[[0-9]+\])")
# Whitespace as ECMAScript's \s defines it (unlike str.isspace, includes \ufeff).
_WHITESPACE = re.compile(
    r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]"
)


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "lxml")


# ---------------------------------------------------------------------------
# Search results
# ---------------------------------------------------------------------------

def _result_stub(element: Tag, base_url: str = "") -> Article:
    """Read link target, page id and title off one search result element."""
    href = element.get("href") or ""
    if href and base_url:
        href = urljoin(base_url + "/", href)
    return Article(
        id=element.get("data-page-id") or "",
        title=element.get("data-title") or "",
        url=href,
    )


def extract_search_results(html: str, limit: int, base_url: str = "") -> List[Article]:
    """Return the stubs found among the first *limit* search result elements.

    Result elements are matched lazily in document order and the loop stops
    as soon as *limit* of them have been inspected, so elements past the
    limit are never matched or read.  Elements without a page id are skipped
    but still count towards the limit.
    """
    articles: List[Article] = []
    if limit <= 0:
        return articles

    inspected = 0
    for element in _soup(html).css.iselect(SEARCH_RESULT_SELECTOR):
        stub = _result_stub(element, base_url)
        if stub.id:
            articles.append(stub)

        inspected += 1
        if inspected >= limit:
            break
    return articles


# ---------------------------------------------------------------------------
# Article pages
# ---------------------------------------------------------------------------

def extract_image(soup: BeautifulSoup) -> str | None:
    """Return the infobox thumbnail ``src``, else the first image link ``href``."""
    thumbnail = soup.select_one(THUMBNAIL_SELECTOR)
    if thumbnail is not None and thumbnail.get("src"):
        return thumbnail["src"]

    link = soup.select_one(IMAGE_LINK_SELECTOR)
    if link is not None and link.get("href"):
        return link["href"]
    return None


def clean_text(text: str) -> str:
    """Strip newlines and ``[123]``-style citation markers from *text*.

    Runs until nothing changes, so the result is stable under repeated
    cleaning even when a removal exposes a new marker (``"[1[2]]"``).
    """
    while True:
        cleaned = _NOISE_PATTERN.sub("", text)
        if cleaned == text:
            return cleaned
        text = cleaned


def extract_body_text(soup: BeautifulSoup) -> str:
    """Join the non-blank paragraphs of *soup* into one cleaned line.

    Sidebars, quotes and galleries are removed from *soup* first, so their
    paragraphs never contribute.  Mutates *soup*.
    """
    for selector in REMOVABLE_SELECTORS:
        for element in soup.select(selector):
            # Nested matches go away with their ancestor.
            if not element.decomposed:
                element.decompose()

    paragraphs: List[str] = []
    for paragraph in soup.find_all("p"):
        text = paragraph.get_text()
        if _WHITESPACE.sub("", text):
            paragraphs.append(text)

    return clean_text(" ".join(paragraphs))


def extract_article(html: str) -> tuple[str | None, str]:
    """Return ``(image, body_text)`` for an article page.

    The image is read before any element is removed, since the infobox
    holding the thumbnail is itself removed for text extraction.
    """
    soup = _soup(html)
    img = extract_image(soup)
    return img, extract_body_text(soup)
