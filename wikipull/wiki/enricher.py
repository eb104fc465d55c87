"""Per-article enrichment: download a stub's page, keep its image and text."""

from __future__ import annotations

import httpx

from wikipull.config import Settings
from wikipull.errors import ValidationError
from wikipull.scraper.extractor import extract_article
from wikipull.scraper.fetcher import download
from wikipull.scraper.models import Article, EnrichedArticle


class ArticleEnricher:
    def __init__(
        self,
        client: httpx.Client | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._client = client
        self._settings = settings

    def enrich(self, stub: Article) -> EnrichedArticle:
        """Download *stub*'s page and return it with image and cleaned text.

        ``article`` is an empty string when the page has no non-blank
        paragraphs; ``img`` is ``None`` when the page has no image.

        Raises:
            ValidationError: *stub* has no URL.  No request is made.
            FetchError: The page returned a non-2xx status.
            TransportError: The request failed before a response arrived.
        """
        if not stub.url:
            raise ValidationError("Article URL is required")

        html = download(stub.url, client=self._client, settings=self._settings)
        img, text = extract_article(html)
        return EnrichedArticle.from_stub(stub, img=img, article=text)
