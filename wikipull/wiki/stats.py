"""Site statistics: the wiki's own count of content articles."""

from __future__ import annotations

import math

import httpx

from wikipull.config import Settings
from wikipull.errors import EmptyResultError
from wikipull.scraper.fetcher import download_json
from wikipull.site import SiteIdentity


class SiteStats:
    def __init__(
        self,
        site: SiteIdentity,
        client: httpx.Client | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._site = site
        self._client = client
        self._settings = settings

    def article_count(self) -> int:
        """Return ``query.statistics.articles`` from the siteinfo endpoint.

        This is the authoritative total; a capped listing never reflects it.

        Raises:
            EmptyResultError: The body is not JSON, or the field is missing
                or not a number.
        """
        url = self._site.api_url
        params = {
            "action": "query",
            "meta": "siteinfo",
            "siprop": "statistics",
            "format": "json",
        }
        try:
            data = download_json(url, params, client=self._client, settings=self._settings)
        except ValueError as exc:
            raise EmptyResultError(f"Statistics response from {url} is not JSON") from exc

        count = None
        if isinstance(data, dict):
            query = data.get("query")
            stats = query.get("statistics") if isinstance(query, dict) else None
            count = stats.get("articles") if isinstance(stats, dict) else None

        is_number = isinstance(count, (int, float)) and not isinstance(count, bool)
        if not is_number or (
            isinstance(count, float)
            and not (math.isfinite(count) and count.is_integer())
        ):
            raise EmptyResultError(f"No article count in statistics from {url}")
        return int(count)
