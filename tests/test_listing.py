"""Tests for ListingPager: cursor pagination over ``list=allpages``."""

from __future__ import annotations

import httpx
import pytest
import respx

from wikipull.errors import FetchError, TransportError, ValidationError
from wikipull.scraper.models import Article
from wikipull.site import SiteIdentity
from wikipull.wiki.listing import ListingPager

API_URL = "https://demo.fandom.com/api.php"
ALL_TITLES = ["Alpha", "Beta Ray", "Gamma", "Delta", "Epsilon"]


@pytest.fixture()
def pager() -> ListingPager:
    return ListingPager(SiteIdentity.from_name("demo"))


# ---------------------------------------------------------------------------
# fetch_batch
# ---------------------------------------------------------------------------

class TestFetchBatch:
    def test_first_batch_maps_pages_to_stubs(self, pager, fake_wiki) -> None:
        batch = pager.fetch_batch()

        assert batch.articles == [
            Article(id="11", title="Alpha", url="https://demo.fandom.com/wiki/Alpha"),
            Article(id="12", title="Beta Ray", url="https://demo.fandom.com/wiki/Beta_Ray"),
        ]
        assert batch.next == "Gamma"

    def test_request_parameters(self, pager, fake_wiki) -> None:
        pager.fetch_batch()
        pager.fetch_batch("Gamma")

        first, second = (call.request.url.params for call in fake_wiki.router.calls)
        assert first["action"] == "query"
        assert first["list"] == "allpages"
        assert first["aplimit"] == "max"
        assert first["format"] == "json"
        assert "apcontinue" not in first
        assert second["apcontinue"] == "Gamma"

    def test_last_batch_has_no_cursor(self, pager, fake_wiki) -> None:
        batch = pager.fetch_batch("Epsilon")
        assert [a.title for a in batch.articles] == ["Epsilon"]
        assert batch.next is None

    def test_chained_cursors_visit_every_page_once(self, pager, fake_wiki) -> None:
        titles: list[str] = []
        cursor = None
        while True:
            batch = pager.fetch_batch(cursor)
            titles.extend(a.title for a in batch.articles)
            if batch.next is None:
                break
            cursor = batch.next

        assert fake_wiki.cursors == [None, "Gamma", "Epsilon"]
        assert len(set(fake_wiki.cursors)) == len(fake_wiki.cursors)
        assert titles == ALL_TITLES

    def test_titles_are_percent_encoded(self, pager) -> None:
        payload = {"query": {"allpages": [{"pageid": 7, "ns": 0, "title": "AK-47 / M4 (rifle)"}]}}
        with respx.mock:
            respx.get(API_URL).mock(return_value=httpx.Response(200, json=payload))
            batch = pager.fetch_batch()

        assert batch.articles[0].url == "https://demo.fandom.com/wiki/AK-47_%2F_M4_(rifle)"
        assert batch.articles[0].title == "AK-47 / M4 (rifle)"

    @pytest.mark.parametrize(
        "payload",
        [
            {"error": {"code": "badvalue"}},
            {"query": {}},
            {"query": {"allpages": "nope"}},
            {"query": []},
            ["not", "a", "dict"],
        ],
    )
    def test_unexpected_shape_degrades_to_empty_batch(self, pager, payload, capsys) -> None:
        with respx.mock:
            respx.get(API_URL).mock(return_value=httpx.Response(200, json=payload))
            batch = pager.fetch_batch()

        assert batch.articles == []
        assert batch.next is None
        assert "[listing]" in capsys.readouterr().out

    def test_non_json_body_degrades_to_empty_batch(self, pager, capsys) -> None:
        with respx.mock:
            respx.get(API_URL).mock(return_value=httpx.Response(200, text="<html>maintenance</html>"))
            batch = pager.fetch_batch()

        assert batch.articles == []
        assert batch.next is None
        assert "non-JSON" in capsys.readouterr().out

    def test_malformed_items_are_skipped(self, pager) -> None:
        payload = {
            "query": {
                "allpages": [
                    {"pageid": 1, "title": "Good"},
                    {"title": "No id"},
                    {"pageid": 3},
                    "garbage",
                ]
            }
        }
        with respx.mock:
            respx.get(API_URL).mock(return_value=httpx.Response(200, json=payload))
            batch = pager.fetch_batch()

        assert [a.id for a in batch.articles] == ["1"]

    def test_http_error_raises(self, pager) -> None:
        with respx.mock:
            respx.get(API_URL).mock(return_value=httpx.Response(503))
            with pytest.raises(FetchError) as excinfo:
                pager.fetch_batch()

        assert excinfo.value.status_code == 503

    def test_transport_error_raises(self, pager) -> None:
        with respx.mock:
            respx.get(API_URL).mock(side_effect=httpx.ConnectError("connection refused"))
            with pytest.raises(TransportError, match="connection refused"):
                pager.fetch_batch()


# ---------------------------------------------------------------------------
# list_all
# ---------------------------------------------------------------------------

class TestListAll:
    def test_returns_every_stub_in_api_order(self, pager, fake_wiki) -> None:
        stubs = pager.list_all()
        assert [s.title for s in stubs] == ALL_TITLES
        assert [s.id for s in stubs] == ["11", "12", "13", "14", "15"]

    @pytest.mark.parametrize("cap, expected", [(1, 1), (2, 2), (3, 3), (5, 5), (50, 5)])
    def test_returns_min_of_cap_and_total(self, pager, fake_wiki, cap, expected) -> None:
        stubs = pager.list_all(cap)
        assert len(stubs) == expected
        assert [s.title for s in stubs] == ALL_TITLES[:expected]

    def test_stops_fetching_once_cap_is_reached(self, pager, fake_wiki) -> None:
        pager.list_all(2)
        assert fake_wiki.cursors == [None]

    def test_zero_cap_makes_no_request(self, pager, fake_wiki) -> None:
        assert pager.list_all(0) == []
        assert fake_wiki.router.calls.call_count == 0

    def test_negative_cap_is_rejected(self, pager, fake_wiki) -> None:
        with pytest.raises(ValidationError):
            pager.list_all(-1)

    def test_repeated_cursor_ends_pagination(self, pager, capsys) -> None:
        payload = {
            "continue": {"apcontinue": "Same"},
            "query": {"allpages": [{"pageid": 1, "title": "Loop"}]},
        }
        with respx.mock:
            route = respx.get(API_URL).mock(return_value=httpx.Response(200, json=payload))
            stubs = pager.list_all()

        # First page, then "Same" once; the second "Same" is not followed.
        assert route.call_count == 2
        assert len(stubs) == 2
        assert "repeated" in capsys.readouterr().out

    def test_error_mid_pagination_propagates(self, pager) -> None:
        first = {
            "continue": {"apcontinue": "Next"},
            "query": {"allpages": [{"pageid": 1, "title": "One"}]},
        }

        def api(request: httpx.Request) -> httpx.Response:
            if request.url.params.get("apcontinue") == "Next":
                return httpx.Response(500)
            return httpx.Response(200, json=first)

        with respx.mock:
            respx.get(API_URL).mock(side_effect=api)
            with pytest.raises(FetchError):
                pager.list_all()
