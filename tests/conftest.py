"""Shared fixtures: a fake wiki served through ``respx``.

The fake wiki lives at https://demo.fandom.com and lists five articles over
three listing pages (cursors ``None`` → ``"Gamma"`` → ``"Epsilon"``).  Every
article page is generated from its title; titles in ``failing`` answer 500.
"""

from __future__ import annotations

import os
from types import SimpleNamespace
from typing import Generator
from urllib.parse import unquote

import httpx
import pytest
import respx


def pytest_configure(config):
    """Pin the site layout before ``wikipull.config`` is imported."""
    os.environ["WIKI_SITE_TEMPLATE"] = "https://{name}.fandom.com"
    os.environ["WIKI_API_PATH"] = "/api.php"
    os.environ["WIKI_SEARCH_PATH"] = "/wiki/Special:Search?query="


BASE_URL = "https://demo.fandom.com"
API_URL = f"{BASE_URL}/api.php"

LISTING_PAGES: dict[str | None, dict] = {
    None: {
        "batchcomplete": "",
        "continue": {"apcontinue": "Gamma", "continue": "-||"},
        "query": {
            "allpages": [
                {"pageid": 11, "ns": 0, "title": "Alpha"},
                {"pageid": 12, "ns": 0, "title": "Beta Ray"},
            ]
        },
    },
    "Gamma": {
        "continue": {"apcontinue": "Epsilon", "continue": "-||"},
        "query": {
            "allpages": [
                {"pageid": 13, "ns": 0, "title": "Gamma"},
                {"pageid": 14, "ns": 0, "title": "Delta"},
            ]
        },
    },
    "Epsilon": {
        "batchcomplete": "",
        "query": {"allpages": [{"pageid": 15, "ns": 0, "title": "Epsilon"}]},
    },
}

ALL_TITLES = ["Alpha", "Beta Ray", "Gamma", "Delta", "Epsilon"]


def article_html(title: str) -> str:
    return f"""\
<html><body>
  <aside class="portable-infobox">
    <img class="pi-image-thumbnail" src="https://static.example/{title}.png">
    <p>Infobox for {title}</p>
  </aside>
  <p>{title} is an article.[1]</p>
  <p>
  </p>
  <p>It has a second
paragraph.</p>
</body></html>
"""


@pytest.fixture()
def fake_wiki() -> Generator[SimpleNamespace, None, None]:
    """Mock the whole demo wiki; record listing cursors and article requests."""
    state = SimpleNamespace(
        cursors=[],
        articles=[],
        failing=set(),
        article_count=1234,
        search_html="<html><body></body></html>",
    )

    def api(request: httpx.Request) -> httpx.Response:
        params = request.url.params
        if params.get("meta") == "siteinfo":
            return httpx.Response(
                200, json={"query": {"statistics": {"articles": state.article_count}}}
            )
        cursor = params.get("apcontinue")
        state.cursors.append(cursor)
        return httpx.Response(200, json=LISTING_PAGES[cursor])

    def page(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("Special:Search"):
            return httpx.Response(200, text=state.search_html)
        title = unquote(request.url.path.rsplit("/", 1)[-1]).replace("_", " ")
        state.articles.append(title)
        if title in state.failing:
            return httpx.Response(500, text="Internal Server Error")
        return httpx.Response(200, text=article_html(title))

    with respx.mock(assert_all_called=False) as router:
        router.get(API_URL).mock(side_effect=api)
        router.get(url__startswith=f"{BASE_URL}/wiki/").mock(side_effect=page)
        state.router = router
        yield state
