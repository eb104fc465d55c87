"""Data models for the crawl pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List


@dataclass(frozen=True)
class Article:
    """An article stub: identity and location only, before enrichment."""

    id: str
    title: str
    url: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "url": self.url}


@dataclass(frozen=True)
class EnrichedArticle(Article):
    """An :class:`Article` plus its lead image and cleaned body text."""

    img: str | None = None
    article: str | None = None

    @classmethod
    def from_stub(
        cls, stub: Article, img: str | None = None, article: str | None = None
    ) -> "EnrichedArticle":
        return cls(id=stub.id, title=stub.title, url=stub.url, img=img, article=article)

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the output record, omitting unset optional fields."""
        data = super().to_dict()
        if self.img is not None:
            data["img"] = self.img
        if self.article is not None:
            data["article"] = self.article
        return data


@dataclass
class Batch:
    """One page of the listing API: its stubs and the cursor to the next page."""

    articles: List[Article] = field(default_factory=list)
    next: str | None = None
