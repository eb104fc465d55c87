"""Site identity: the base address every component of a crawl talks to."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote

from wikipull.config import Settings, settings as default_settings


def encode_component(value: str) -> str:
    """Percent-encode *value* for use inside a single URL component.

    Leaves the same characters unescaped as JavaScript's
    ``encodeURIComponent`` so generated URLs match the ones the wiki links to.
    """
    return quote(value, safe="-_.!~*'()")


@dataclass(frozen=True)
class SiteIdentity:
    """Immutable base address of one wiki, plus the paths hung off it."""

    name: str
    base_url: str
    api_path: str = "/api.php"
    search_path: str = "/wiki/Special:Search?query="

    @classmethod
    def from_name(cls, name: str, settings: Settings | None = None) -> "SiteIdentity":
        """Build the identity for the wiki with short-name *name*.

        ``SiteIdentity.from_name("starwars").base_url`` is
        ``"https://starwars.fandom.com"`` with the default settings.
        """
        cfg = settings or default_settings
        return cls(
            name=name,
            base_url=cfg.site_template.format(name=name).rstrip("/"),
            api_path=cfg.api_path,
            search_path=cfg.search_path,
        )

    @property
    def api_url(self) -> str:
        return self.base_url + self.api_path

    def search_url(self, query: str) -> str:
        return self.base_url + self.search_path + encode_component(query)

    def article_url(self, title: str) -> str:
        """Return the canonical ``/wiki/`` address for a page *title*."""
        return self.base_url + "/wiki/" + encode_component(title.replace(" ", "_"))
